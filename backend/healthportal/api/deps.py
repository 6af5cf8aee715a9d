# backend/healthportal/api/deps.py

from typing import Optional

from fastapi import HTTPException, Request

from healthportal.core.config import Settings
from healthportal.models import DoctorProfile, DoctorSummary, PatientSummary, User
from healthportal.services.assistant import ConversationRegistry
from healthportal.services.storage import MemStorage


def get_store(request: Request) -> MemStorage:
    return request.app.state.store


def get_conversations(request: Request) -> ConversationRegistry:
    return request.app.state.conversations


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_user(store: MemStorage, user_id: int) -> User:
    user = store.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def doctor_summary(store: MemStorage, doctor: User) -> DoctorSummary:
    profile: Optional[DoctorProfile] = store.get_doctor_profile_by_user_id(doctor.id)
    return DoctorSummary(
        id=doctor.id,
        first_name=doctor.first_name,
        last_name=doctor.last_name,
        email=doctor.email,
        profile=profile,
    )


def patient_summary(patient: User) -> PatientSummary:
    return PatientSummary(
        id=patient.id,
        first_name=patient.first_name,
        last_name=patient.last_name,
        email=patient.email,
    )
