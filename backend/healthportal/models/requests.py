# backend/healthportal/models/requests.py

from datetime import date as Date, time as Time
from typing import Annotated, List, Optional, Union

from pydantic import Field, StringConstraints

from .base import RequestModel
from .records import AppointmentStatus, LabStatus, VisitType
from .user import Role

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

# Chat text is trimmed first, so blank input is rejected
ChatText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class LoginRequest(RequestModel):
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str
    role: Role


class DoctorProfileCreate(RequestModel):
    specialty: str = Field(min_length=1)
    bio: Optional[str] = None
    image_url: Optional[str] = None
    languages: Optional[str] = None
    location: Optional[str] = None
    accepting_new_patients: bool = True
    video_visits: bool = False
    license_id: str = Field(min_length=1)
    rating: int = Field(0, ge=0, le=50)
    review_count: int = Field(0, ge=0)


class RegisterRequest(RequestModel):
    username: str = Field(min_length=1)
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=1)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    role: Role
    phone: Optional[str] = None
    address: Optional[str] = None
    doctor_profile: Optional[DoctorProfileCreate] = None


class MedicalRecordCreate(RequestModel):
    record_type: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: Optional[str] = None
    status: Optional[str] = None
    date: Optional[Date] = None
    provider: Optional[str] = None
    additional_info: Optional[str] = None


class AppointmentCreate(RequestModel):
    patient_id: int
    doctor_id: int
    date: Date
    time: Time
    status: AppointmentStatus = "scheduled"
    visit_type: VisitType
    reason: Optional[str] = None
    additional_info: Optional[str] = None


class StatusUpdate(RequestModel):
    status: AppointmentStatus


class VitalSignCreate(RequestModel):
    date: Date
    blood_pressure_systolic: Optional[int] = None
    blood_pressure_diastolic: Optional[int] = None
    heart_rate: Optional[int] = None
    respiratory_rate: Optional[int] = None
    temperature: Optional[int] = None
    weight: Optional[int] = None
    height: Optional[int] = None
    bmi: Optional[int] = None
    blood_glucose: Optional[int] = None


class LabResultCreate(RequestModel):
    test_name: str = Field(min_length=1)
    date: Date
    result: str
    unit: Optional[str] = None
    normal_range: Optional[str] = None
    status: Optional[LabStatus] = None
    ordering_provider: Optional[str] = None


class MessageCreate(RequestModel):
    content: ChatText
    is_bot: bool = False


class AssistantInput(RequestModel):
    content: ChatText


class OptionSelect(RequestModel):
    value: str = Field(min_length=1)


class AnswerSubmit(RequestModel):
    value: Union[str, List[str]]
