# backend/healthportal/services/assistant.py

import logging
from typing import Dict, List, Optional, Tuple

from healthportal.models import BotMessage, Message, Option
from healthportal.services.assessment import Answer, SymptomAssessment
from healthportal.services.storage import MemStorage

logger = logging.getLogger(__name__)

SYMPTOM_KEYWORDS = ("symptom", "sick", "feeling", "pain", "hurt", "ache", "headache", "fever", "cough")

# Checked in order, first group with a matching keyword wins
REPLY_GROUPS: List[Tuple[str, Tuple[str, ...], str]] = [
    (
        "appointment-booking",
        ("appointment", "book", "schedule"),
        "I'd be happy to help you book an appointment. Would you like to schedule with a specific doctor "
        "or by specialty? You can also go to the 'Find Doctors' page to browse available doctors.",
    ),
    (
        "medical-record",
        ("record", "history", "document"),
        "Your medical records are accessible from your patient dashboard. There you can view your history, "
        "prescriptions, and lab results. Would you like me to guide you there?",
    ),
    (
        "doctor-search",
        ("doctor", "specialist"),
        "We have many great doctors in our system. You can view them in the 'Find Doctors' section where you "
        "can filter by specialty, rating, and availability. Would you like to see our top-rated doctors?",
    ),
    (
        "greeting",
        ("hello", "hi", "hey"),
        "Hello! How can I assist you with your healthcare needs today?",
    ),
    (
        "thanks",
        ("thank",),
        "You're welcome! Is there anything else I can help you with?",
    ),
]

FALLBACK_REPLY = (
    "I'm not sure I understand. Could you rephrase that? I can help with appointment booking, "
    "accessing medical records, or finding doctors."
)

WELCOME_TEXT = "Hello! I'm your MyMedi assistant. How can I help you today?"
WELCOME_OPTIONS = [
    Option(text="Check symptoms", value="symptoms"),
    Option(text="Book appointment", value="appointment"),
    Option(text="View my records", value="records"),
    Option(text="Upload document", value="upload"),
]

SYMPTOM_SUGGESTION = (
    "It sounds like you might be experiencing some health concerns. Would you like to use our "
    "symptom assessment tool to get more information?"
)

BOOKING_SHORTCUTS = ("appointment", "schedule", "book", "visit", "see doctor")
RECORD_SHORTCUTS = ("records", "history", "results", "tests")

# Handled by the client as page navigation
NAVIGATION_OPTIONS = ("goto-booking", "goto-records", "find-doctor", "book-appointment")


def _contains_any(text: str, keywords) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def mentions_symptoms(text: str) -> bool:
    return _contains_any(text, SYMPTOM_KEYWORDS)


def classify_message(text: str) -> Optional[str]:
    """Name of the first reply group whose keywords occur in text, or None."""
    for group, keywords, _ in REPLY_GROUPS:
        if _contains_any(text, keywords):
            return group
    return None


def generate_bot_response(text: str) -> str:
    group = classify_message(text)
    for name, _, reply in REPLY_GROUPS:
        if name == group:
            return reply
    return FALLBACK_REPLY


def quick_replies(reply: str) -> List[Option]:
    """Shortcut buttons offered under a canned reply."""
    if _contains_any(reply, BOOKING_SHORTCUTS):
        return [
            Option(text="Book Appointment", value="goto-booking"),
            Option(text="Find a Doctor", value="find-doctor"),
        ]
    if _contains_any(reply, RECORD_SHORTCUTS):
        return [Option(text="View Medical Records", value="goto-records")]
    return []


def record_exchange(store: MemStorage, user_id: int, content: str, is_bot: bool = False) -> List[Message]:
    """Persist a chat message plus one canned reply when it came from the user."""
    message = store.create_message(user_id, content, is_bot=is_bot)
    if not message.is_bot:
        store.create_message(user_id, generate_bot_response(message.content), is_bot=True)
    return store.get_messages_by_user(user_id)


class Conversation:
    """One user's assistant session: free text, option buttons and the symptom check."""

    def __init__(self, user_id: int, store: MemStorage, typing_delay_ms: int = 0):
        self.user_id = user_id
        self.store = store
        self.typing_delay_ms = typing_delay_ms
        self.assessment = SymptomAssessment(typing_delay_ms=typing_delay_ms)

    def _reply(self, content: str, **fields) -> BotMessage:
        fields.setdefault("delay_ms", self.typing_delay_ms)
        return BotMessage(content=content, **fields)

    def welcome(self) -> List[BotMessage]:
        return [BotMessage(content=WELCOME_TEXT, options=list(WELCOME_OPTIONS))]

    def send(self, content: str) -> List[BotMessage]:
        if mentions_symptoms(content):
            return [
                self._reply(
                    SYMPTOM_SUGGESTION,
                    options=[
                        Option(text="Start Symptom Assessment", value="symptoms"),
                        Option(text="No thanks", value="no-assessment"),
                    ],
                )
            ]

        history = record_exchange(self.store, self.user_id, content)
        reply = history[-1]
        return [self._reply(reply.content, options=quick_replies(reply.content))]

    def answer(self, response: Answer) -> List[BotMessage]:
        return self.assessment.answer(response)

    def select(self, value: str) -> List[BotMessage]:
        """Handle an option button. Unknown values answer the running assessment, if any."""
        if value in ("symptoms", "new-assessment"):
            logger.info("User %d started a symptom assessment", self.user_id)
            return self.assessment.start()
        if value == "appointment":
            return [
                self._reply(
                    "I can help you book an appointment. You can visit our booking page to find "
                    "available slots with our doctors.",
                    options=[
                        Option(text="Go to Booking Page", value="goto-booking"),
                        Option(text="Find a Doctor First", value="find-doctor"),
                    ],
                )
            ]
        if value == "records":
            return [
                self._reply(
                    "You can view your complete medical history in our records section. This includes "
                    "past appointments, test results, prescriptions, and more.",
                    options=[Option(text="View Medical Records", value="goto-records")],
                )
            ]
        if value == "upload":
            return [
                self._reply(
                    "You can upload medical documents like test results, prescriptions, or doctor's notes. "
                    "These will be securely stored in your medical records.",
                    type="document-upload",
                )
            ]
        if value in ("end-assessment", "no-assessment") or value in NAVIGATION_OPTIONS:
            return []
        if not self.assessment.in_progress:
            logger.debug("Ignoring option %r outside an assessment", value)
            return []
        return self.assessment.answer(value)


class ConversationRegistry:
    """Assistant sessions keyed by user id."""

    def __init__(self, store: MemStorage, typing_delay_ms: int = 0):
        self.store = store
        self.typing_delay_ms = typing_delay_ms
        self._sessions: Dict[int, Conversation] = {}

    def get(self, user_id: int) -> Conversation:
        if user_id not in self._sessions:
            self._sessions[user_id] = Conversation(user_id, self.store, self.typing_delay_ms)
        return self._sessions[user_id]

    def reset(self, user_id: int) -> Conversation:
        self._sessions[user_id] = Conversation(user_id, self.store, self.typing_delay_ms)
        return self._sessions[user_id]
