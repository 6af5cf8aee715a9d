# backend/healthportal/api/routes/message_routes.py

from typing import List

from fastapi import APIRouter, Depends

from healthportal.api.deps import get_store
from healthportal.models import Message
from healthportal.models.requests import MessageCreate
from healthportal.services.assistant import record_exchange
from healthportal.services.storage import MemStorage

router = APIRouter(prefix="/api/users", tags=["messages"])


@router.get("/{user_id}/messages", response_model=List[Message])
def get_messages(user_id: int, store: MemStorage = Depends(get_store)):
    return store.get_messages_by_user(user_id)


@router.post("/{user_id}/messages", response_model=List[Message])
def post_message(user_id: int, body: MessageCreate, store: MemStorage = Depends(get_store)):
    """Store the message, add the bot's reply to user messages, return the whole history."""
    return record_exchange(store, user_id, body.content, is_bot=body.is_bot)
