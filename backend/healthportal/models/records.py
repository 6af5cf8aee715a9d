# backend/healthportal/models/records.py

from datetime import date as Date, time as Time
from typing import Literal, Optional

from .base import CamelModel
from .user import DoctorSummary, PatientSummary

AppointmentStatus = Literal["scheduled", "completed", "cancelled"]
VisitType = Literal["in-person", "video"]
LabStatus = Literal["normal", "abnormal", "critical"]


class MedicalRecord(CamelModel):
    id: int
    patient_id: int
    # condition, medication, allergy, procedure, immunization, ...
    record_type: str
    name: str
    description: Optional[str] = None
    status: Optional[str] = None
    date: Optional[Date] = None
    provider: Optional[str] = None
    additional_info: Optional[str] = None


class Appointment(CamelModel):
    id: int
    patient_id: int
    doctor_id: int
    date: Date
    time: Time
    status: AppointmentStatus = "scheduled"
    visit_type: VisitType
    reason: Optional[str] = None
    additional_info: Optional[str] = None


class VitalSign(CamelModel):
    """Temperature and BMI are stored x10 (986 is 98.6 F)."""

    id: int
    patient_id: int
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


class LabResult(CamelModel):
    id: int
    patient_id: int
    test_name: str
    date: Date
    result: str
    unit: Optional[str] = None
    normal_range: Optional[str] = None
    status: Optional[LabStatus] = None
    ordering_provider: Optional[str] = None


class AppointmentWithDoctor(Appointment):
    doctor: Optional[DoctorSummary] = None


class AppointmentWithPatient(Appointment):
    patient: Optional[PatientSummary] = None
