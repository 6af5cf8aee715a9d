# backend/healthportal/api/routes/auth_routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException

from healthportal.api.deps import get_store
from healthportal.models import AuthResponse
from healthportal.models.requests import LoginRequest, RegisterRequest
from healthportal.services.storage import MemStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, store: MemStorage = Depends(get_store)):
    """
    Check email, password and role together. Every mismatch gets the same
    401 so the caller cannot tell which of the three was wrong.
    """
    user = store.get_user_by_email(body.email)
    if user is None or not store.verify_password(user, body.password) or user.role != body.role:
        logger.info("Failed login for %s", body.email)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    profile = store.get_doctor_profile_by_user_id(user.id) if user.role == "doctor" else None
    return AuthResponse(user=user.public(), doctor_profile=profile)


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(body: RegisterRequest, store: MemStorage = Depends(get_store)):
    if store.get_user_by_email(body.email) is not None:
        raise HTTPException(status_code=409, detail="User already exists")
    if store.get_user_by_username(body.username) is not None:
        raise HTTPException(status_code=409, detail="Username already taken")
    if body.doctor_profile is not None and body.role != "doctor":
        raise HTTPException(status_code=400, detail="Only doctors can have a doctor profile")

    user = store.create_user(body)
    profile = None
    if body.doctor_profile is not None:
        profile = store.create_doctor_profile(user.id, body.doctor_profile)
    logger.info("Registered %s %d", user.role, user.id)
    return AuthResponse(user=user.public(), doctor_profile=profile)
