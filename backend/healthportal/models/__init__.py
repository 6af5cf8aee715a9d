"""Pydantic models for the portal API."""

from .chat import AssessmentMetadata, AssessmentSnapshot, BotMessage, Message, Option, PossibleCondition, SymptomDetail
from .document import Document
from .records import (
    Appointment,
    AppointmentWithDoctor,
    AppointmentWithPatient,
    LabResult,
    MedicalRecord,
    VitalSign,
)
from .user import (
    AuthResponse,
    DoctorListing,
    DoctorProfile,
    DoctorSummary,
    PatientSummary,
    User,
    UserPublic,
)

__all__ = [
    "Appointment",
    "AppointmentWithDoctor",
    "AppointmentWithPatient",
    "AssessmentMetadata",
    "AssessmentSnapshot",
    "AuthResponse",
    "BotMessage",
    "DoctorListing",
    "DoctorProfile",
    "DoctorSummary",
    "Document",
    "LabResult",
    "MedicalRecord",
    "Message",
    "Option",
    "PatientSummary",
    "PossibleCondition",
    "SymptomDetail",
    "User",
    "UserPublic",
    "VitalSign",
]
