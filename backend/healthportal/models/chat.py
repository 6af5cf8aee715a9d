# backend/healthportal/models/chat.py

from datetime import datetime
from typing import Dict, List, Literal, Optional

from .base import CamelModel

MessageType = Literal["text", "symptom-start", "symptom-question", "symptom-result", "document-upload"]
Probability = Literal["high", "medium", "low"]


class Message(CamelModel):
    """Persisted chat log entry."""

    id: int
    user_id: int
    content: str
    is_bot: bool = False
    timestamp: datetime


class Option(CamelModel):
    text: str
    value: str


class PossibleCondition(CamelModel):
    name: str
    probability: Probability
    description: str
    recommendation: str


class SymptomDetail(CamelModel):
    severity: int = 0
    duration: str = ""


class AssessmentMetadata(CamelModel):
    current_step: int
    total_steps: int
    progress: int
    current_symptom: Optional[str] = None
    symptoms: Dict[str, SymptomDetail] = {}
    additional_symptoms: List[str] = []
    history: List[str] = []
    possible_conditions: List[PossibleCondition] = []


class BotMessage(CamelModel):
    """A message produced by the assistant, not necessarily persisted."""

    content: str
    is_bot: bool = True
    type: MessageType = "text"
    options: List[Option] = []
    metadata: Optional[AssessmentMetadata] = None
    # Presentation pacing only
    delay_ms: int = 0


class AssessmentSnapshot(CamelModel):
    state: str
    current_step: int
    total_steps: int
    progress: int
    current_symptom: Optional[str] = None
    symptoms: Dict[str, SymptomDetail] = {}
