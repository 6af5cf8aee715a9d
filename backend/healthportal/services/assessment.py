# backend/healthportal/services/assessment.py

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

from healthportal.models import AssessmentMetadata, AssessmentSnapshot, BotMessage, Option, PossibleCondition, SymptomDetail

logger = logging.getLogger(__name__)

Answer = Union[str, Sequence[str]]


class AssessmentError(Exception):
    """Raised when an answer arrives that the assessment cannot accept."""

    def __init__(self, message: str, conflict: bool = False):
        super().__init__(message)
        self.conflict = conflict


class AssessmentState(str, Enum):
    IDLE = "idle"
    AWAITING_ANSWER = "awaiting_answer"
    # Only held while _finish builds the result; snapshots taken afterwards read IDLE
    SHOWING_RESULT = "showing_result"


@dataclass(frozen=True)
class Question:
    id: str
    text: str
    options: List[Option]
    multiple: bool = False


def _options(*pairs) -> List[Option]:
    return [Option(text=text, value=value) for text, value in pairs]


QUESTIONS: List[Question] = [
    Question(
        id="main-symptom",
        text="What is your main symptom today?",
        options=_options(
            ("Headache", "headache"),
            ("Chest pain", "chest-pain"),
            ("Abdominal pain", "abdominal-pain"),
            ("Fever", "fever"),
            ("Cough", "cough"),
            ("Fatigue", "fatigue"),
            ("Other", "other"),
        ),
    ),
    Question(
        id="severity",
        text="How would you rate the severity of your {symptom}?",
        options=_options(("Mild", "1"), ("Moderate", "2"), ("Severe", "3")),
    ),
    Question(
        id="duration",
        text="How long have you been experiencing this {symptom}?",
        options=_options(
            ("Less than a day", "<1 day"),
            ("1-3 days", "1-3 days"),
            ("3-7 days", "3-7 days"),
            ("More than a week", ">7 days"),
            ("More than a month", ">30 days"),
        ),
    ),
    Question(
        id="additional-symptoms",
        text="Do you have any additional symptoms?",
        options=_options(
            ("Nausea", "nausea"),
            ("Vomiting", "vomiting"),
            ("Dizziness", "dizziness"),
            ("Shortness of breath", "shortness-of-breath"),
            ("Rash", "rash"),
            ("None of the above", "none"),
        ),
        multiple=True,
    ),
    Question(
        id="history",
        text="Do you have any relevant medical history?",
        options=_options(
            ("Hypertension", "hypertension"),
            ("Diabetes", "diabetes"),
            ("Heart disease", "heart-disease"),
            ("Asthma/COPD", "respiratory"),
            ("None of the above", "none"),
        ),
        multiple=True,
    ),
]


def _condition(name, probability, description, recommendation) -> PossibleCondition:
    return PossibleCondition(
        name=name, probability=probability, description=description, recommendation=recommendation
    )


CONDITIONS: Dict[str, List[PossibleCondition]] = {
    "headache": [
        _condition(
            "Tension Headache", "high",
            "A common type of headache characterized by mild to moderate pain that feels like pressure around your head.",
            "Rest, over-the-counter pain relievers, and stress management techniques may help.",
        ),
        _condition(
            "Migraine", "medium",
            "Intense, throbbing headaches often accompanied by nausea, vomiting, and sensitivity to light and sound.",
            "Consider scheduling an appointment with a neurologist for proper diagnosis and treatment options.",
        ),
    ],
    "chest-pain": [
        _condition(
            "Anxiety/Stress", "medium",
            "Chest pain can sometimes be caused by anxiety or stress, especially if accompanied by rapid breathing.",
            "Practice relaxation techniques. If pain is severe or accompanied by shortness of breath, seek immediate medical attention.",
        ),
        _condition(
            "GERD/Acid Reflux", "medium",
            "Gastroesophageal reflux disease can cause a burning sensation in the chest.",
            "Consult with a gastroenterologist. Avoid foods that trigger symptoms.",
        ),
        _condition(
            "Cardiac Issue", "low",
            "Chest pain can potentially indicate a heart problem, especially if severe or accompanied by shortness of breath, sweating, or nausea.",
            "If you experience severe, crushing chest pain, especially with radiation to arm or jaw, seek emergency care immediately.",
        ),
    ],
    "fever": [
        _condition(
            "Viral Infection", "high",
            "Most fevers are caused by viral infections and resolve on their own.",
            "Rest, stay hydrated, and take fever-reducing medication if uncomfortable. See a doctor if fever persists over 3 days.",
        ),
        _condition(
            "Bacterial Infection", "medium",
            "Some bacterial infections require antibiotics to resolve.",
            "If fever is accompanied by severe symptoms or lasts more than a few days, schedule an appointment with your doctor.",
        ),
    ],
    "cough": [
        _condition(
            "Common Cold/Upper Respiratory Infection", "high",
            "Viral infections often cause coughing that resolves within 1-2 weeks.",
            "Rest, stay hydrated, and use over-the-counter cough medicines if needed. See a doctor if symptoms worsen or don't improve.",
        ),
        _condition(
            "Allergies", "medium",
            "Seasonal or environmental allergies can cause persistent coughing.",
            "Try over-the-counter antihistamines. If symptoms persist, consider seeing an allergist.",
        ),
    ],
    "abdominal-pain": [
        _condition(
            "Gastritis/Indigestion", "high",
            "Inflammation of the stomach lining causing pain, often made worse by eating.",
            "Avoid spicy foods and alcohol. Consider over-the-counter antacids. If pain persists, see a doctor.",
        ),
        _condition(
            "Irritable Bowel Syndrome", "medium",
            "A common disorder affecting the large intestine, causing cramping, abdominal pain, bloating, gas, diarrhea or constipation.",
            "Consider dietary changes and stress management. Schedule an appointment with a gastroenterologist for proper diagnosis.",
        ),
    ],
    "fatigue": [
        _condition(
            "Insufficient Sleep/Stress", "high",
            "Not getting enough rest or experiencing high stress levels often leads to fatigue.",
            "Improve sleep habits and stress management techniques. If fatigue persists despite adequate rest, see a doctor.",
        ),
        _condition(
            "Anemia", "medium",
            "Low red blood cell count or hemoglobin, often causing fatigue and weakness.",
            "Consider getting blood tests to check iron levels and other potential causes of anemia.",
        ),
    ],
}

DEFAULT_CONDITIONS: List[PossibleCondition] = [
    _condition(
        "Multiple Possibilities", "medium",
        "Your symptoms could be related to several different conditions.",
        "We recommend scheduling an appointment with a healthcare provider for a proper evaluation.",
    ),
]

INTRO_TEXT = (
    "I'll help you assess your symptoms. This is not a medical diagnosis, but I can provide some "
    "general guidance. If you're experiencing a medical emergency, please call emergency services immediately."
)
RESULT_TEXT = "Based on the information you've provided, here are some possible explanations for your symptoms:"
DISCLAIMER_TEXT = (
    "Remember, this is not a medical diagnosis. If your symptoms are severe or persistent, "
    "please consult with a healthcare professional."
)
FOLLOW_UP_OPTIONS = _options(
    ("Find a doctor", "find-doctor"),
    ("Book appointment", "book-appointment"),
    ("Start new assessment", "new-assessment"),
    ("Return to chat", "end-assessment"),
)


def conditions_for(symptom: Optional[str]) -> List[PossibleCondition]:
    return CONDITIONS.get(symptom or "", DEFAULT_CONDITIONS)


def progress_percent(step: int, total: int) -> int:
    # round-half-up, matching Math.round on the client
    return int(step * 100 / total + 0.5)


@dataclass
class AssessmentData:
    current_symptom: Optional[str] = None
    symptoms: Dict[str, SymptomDetail] = field(default_factory=dict)
    additional_symptoms: List[str] = field(default_factory=list)
    history: List[str] = field(default_factory=list)

    def detail(self) -> Optional[SymptomDetail]:
        if not self.current_symptom:
            return None
        return self.symptoms.setdefault(self.current_symptom, SymptomDetail())


class SymptomAssessment:
    """
    Scripted five-question symptom check.

    idle -> awaiting_answer(1..n) -> showing_result -> idle. Every transition
    happens synchronously inside start() or answer(), which return the bot
    messages to display. delay_ms on those messages is pacing for the client
    and never changes their content.
    """

    def __init__(self, questions: Sequence[Question] = QUESTIONS, typing_delay_ms: int = 0):
        self.questions = list(questions)
        self.typing_delay_ms = typing_delay_ms
        self.state = AssessmentState.IDLE
        self.step = 0
        self.data = AssessmentData()
        self.result: List[PossibleCondition] = []

    @property
    def total_steps(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Optional[Question]:
        if self.state is not AssessmentState.AWAITING_ANSWER:
            return None
        return self.questions[self.step]

    @property
    def progress(self) -> int:
        if self.state is AssessmentState.IDLE and not self.result:
            return 0
        if self.state is not AssessmentState.AWAITING_ANSWER:
            return 100
        return progress_percent(self.step + 1, self.total_steps)

    @property
    def in_progress(self) -> bool:
        return self.state is AssessmentState.AWAITING_ANSWER

    def start(self) -> List[BotMessage]:
        """Begin (or restart) the assessment, discarding any earlier answers."""
        if self.in_progress:
            logger.info("Restarting symptom assessment at step %d", self.step + 1)
        self.state = AssessmentState.AWAITING_ANSWER
        self.step = 0
        self.data = AssessmentData()
        self.result = []
        intro = BotMessage(content=INTRO_TEXT, type="symptom-start")
        return [intro, self._question_message()]

    def answer(self, response: Answer) -> List[BotMessage]:
        question = self.current_question
        if question is None:
            raise AssessmentError("No symptom assessment in progress", conflict=True)
        self._record(question, response)

        self.step += 1
        if self.step < self.total_steps:
            return [self._question_message()]
        return self._finish()

    def snapshot(self) -> AssessmentSnapshot:
        return AssessmentSnapshot(
            state=self.state.value,
            current_step=min(self.step + 1, self.total_steps) if self.in_progress else 0,
            total_steps=self.total_steps,
            progress=self.progress,
            current_symptom=self.data.current_symptom,
            symptoms=dict(self.data.symptoms),
        )

    def _record(self, question: Question, response: Answer) -> None:
        values = [response] if isinstance(response, str) else list(response)
        if not values or not all(values):
            raise AssessmentError(f"An answer is required for {question.id}")
        if not question.multiple and len(values) > 1:
            raise AssessmentError(f"{question.id} takes a single answer")

        if question.id == "main-symptom":
            self.data.current_symptom = values[0]
        elif question.id == "severity":
            try:
                severity = int(values[0])
            except ValueError:
                raise AssessmentError(f"Severity must be a number, got {values[0]!r}")
            self.data.detail().severity = severity
        elif question.id == "duration":
            self.data.detail().duration = values[0]
        elif question.id == "additional-symptoms":
            self.data.additional_symptoms = values
        elif question.id == "history":
            self.data.history = values

    def _metadata(self, step: int, **extra) -> AssessmentMetadata:
        return AssessmentMetadata(
            current_step=step,
            total_steps=self.total_steps,
            progress=progress_percent(step, self.total_steps),
            current_symptom=self.data.current_symptom,
            symptoms=dict(self.data.symptoms),
            additional_symptoms=list(self.data.additional_symptoms),
            history=list(self.data.history),
            **extra,
        )

    def _question_message(self) -> BotMessage:
        question = self.questions[self.step]
        text = question.text
        if self.data.current_symptom:
            text = text.replace("{symptom}", self.data.current_symptom)
        return BotMessage(
            content=text,
            type="symptom-question",
            options=list(question.options),
            metadata=self._metadata(self.step + 1),
            delay_ms=self.typing_delay_ms,
        )

    def _finish(self) -> List[BotMessage]:
        self.state = AssessmentState.SHOWING_RESULT
        self.result = conditions_for(self.data.current_symptom)
        logger.info(
            "Symptom assessment finished: symptom=%s conditions=%d",
            self.data.current_symptom,
            len(self.result),
        )
        messages = [
            BotMessage(
                content=RESULT_TEXT,
                type="symptom-result",
                metadata=self._metadata(self.total_steps, possible_conditions=list(self.result)),
                delay_ms=self.typing_delay_ms,
            ),
            BotMessage(content=DISCLAIMER_TEXT, options=list(FOLLOW_UP_OPTIONS), delay_ms=self.typing_delay_ms),
        ]
        self.state = AssessmentState.IDLE
        return messages
