# backend/healthportal/models/user.py

from datetime import datetime
from typing import Literal, Optional

from pydantic import computed_field

from .base import CamelModel

Role = Literal["patient", "doctor"]


class UserPublic(CamelModel):
    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    role: Role
    phone: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime


class User(UserPublic):
    """Stored user. Only ever leaves the API as a UserPublic."""

    password_hash: str

    def public(self) -> UserPublic:
        return UserPublic.model_validate(self.model_dump(exclude={"password_hash"}))


class StarBreakdown(CamelModel):
    full: int
    half: int
    empty: int


class DoctorProfile(CamelModel):
    id: int
    user_id: int
    specialty: str
    bio: Optional[str] = None
    image_url: Optional[str] = None
    languages: Optional[str] = None
    location: Optional[str] = None
    accepting_new_patients: bool = True
    video_visits: bool = False
    license_id: str
    # Scaled x10, 45 means 4.5 stars
    rating: int = 0
    review_count: int = 0

    @computed_field
    @property
    def display_rating(self) -> float:
        return to_display_rating(self.rating)

    @computed_field
    @property
    def stars(self) -> StarBreakdown:
        return star_breakdown(self.rating)


class DoctorListing(UserPublic):
    profile: DoctorProfile


class DoctorSummary(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    profile: Optional[DoctorProfile] = None


class PatientSummary(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str


class AuthResponse(CamelModel):
    user: UserPublic
    doctor_profile: Optional[DoctorProfile] = None


def to_display_rating(rating: int) -> float:
    """Stored rating (0-50) to stars (0.0-5.0)."""
    return max(0.0, min(5.0, rating / 10))


def to_stored_rating(stars: float) -> int:
    return round(max(0.0, min(5.0, stars)) * 10)


def star_breakdown(rating: int) -> StarBreakdown:
    """Full, half and empty star counts out of five for a stored rating."""
    stars = to_display_rating(rating)
    full = int(stars)
    half = 1 if stars - full >= 0.5 else 0
    return StarBreakdown(full=full, half=half, empty=5 - full - half)
