# backend/healthportal/api/routes/assistant_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from healthportal.api.deps import get_conversations, get_store, require_user
from healthportal.models import AssessmentSnapshot, BotMessage
from healthportal.models.requests import AnswerSubmit, AssistantInput, OptionSelect
from healthportal.services.assessment import AssessmentError
from healthportal.services.assistant import Conversation, ConversationRegistry
from healthportal.services.storage import MemStorage

router = APIRouter(prefix="/api/users/{user_id}/assistant", tags=["assistant"])


def _conversation(
    user_id: int,
    store: MemStorage = Depends(get_store),
    conversations: ConversationRegistry = Depends(get_conversations),
) -> Conversation:
    require_user(store, user_id)
    return conversations.get(user_id)


def _assessment_error(exc: AssessmentError) -> HTTPException:
    return HTTPException(status_code=409 if exc.conflict else 400, detail=str(exc))


@router.post("/session", response_model=List[BotMessage])
def open_session(
    user_id: int,
    store: MemStorage = Depends(get_store),
    conversations: ConversationRegistry = Depends(get_conversations),
):
    """Start a fresh assistant session and return the welcome message."""
    require_user(store, user_id)
    return conversations.reset(user_id).welcome()


@router.post("/messages", response_model=List[BotMessage])
def send_message(body: AssistantInput, conversation: Conversation = Depends(_conversation)):
    return conversation.send(body.content)


@router.post("/options", response_model=List[BotMessage])
def select_option(body: OptionSelect, conversation: Conversation = Depends(_conversation)):
    try:
        return conversation.select(body.value)
    except AssessmentError as exc:
        raise _assessment_error(exc)


@router.post("/answers", response_model=List[BotMessage])
def submit_answer(body: AnswerSubmit, conversation: Conversation = Depends(_conversation)):
    try:
        return conversation.answer(body.value)
    except AssessmentError as exc:
        raise _assessment_error(exc)


@router.get("/assessment", response_model=AssessmentSnapshot)
def get_assessment(conversation: Conversation = Depends(_conversation)):
    return conversation.assessment.snapshot()
