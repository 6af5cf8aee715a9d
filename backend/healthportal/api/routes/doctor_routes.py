# backend/healthportal/api/routes/doctor_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from healthportal.api.deps import get_store, patient_summary
from healthportal.models import AppointmentWithPatient, DoctorListing, User
from healthportal.models.user import to_stored_rating
from healthportal.services.storage import MemStorage

router = APIRouter(prefix="/api/doctors", tags=["doctors"])


def _listing(user: User, profile) -> DoctorListing:
    return DoctorListing(**user.public().model_dump(), profile=profile)


def _matches(
    listing: DoctorListing,
    search: Optional[str],
    specialty: Optional[str],
    location: Optional[str],
    video_visits: bool,
    accepting_new_patients: bool,
    min_rating: Optional[float],
) -> bool:
    profile = listing.profile
    if search:
        needle = search.lower()
        name = f"{listing.first_name} {listing.last_name}".lower()
        if needle not in name and needle not in profile.specialty.lower():
            return False
    if specialty and profile.specialty != specialty:
        return False
    if location and location.lower() not in (profile.location or "").lower():
        return False
    if video_visits and not profile.video_visits:
        return False
    if accepting_new_patients and not profile.accepting_new_patients:
        return False
    if min_rating is not None and profile.rating < to_stored_rating(min_rating):
        return False
    return True


@router.get("", response_model=List[DoctorListing])
def list_doctors(
    search: Optional[str] = None,
    specialty: Optional[str] = None,
    location: Optional[str] = None,
    video_visits: bool = Query(False, alias="videoVisits"),
    accepting_new_patients: bool = Query(False, alias="acceptingNewPatients"),
    min_rating: Optional[float] = Query(None, alias="minRating", ge=0, le=5),
    store: MemStorage = Depends(get_store),
):
    doctors = []
    for profile in store.get_all_doctor_profiles():
        user = store.get_user(profile.user_id)
        # Profiles whose user is gone are skipped
        if user is None:
            continue
        listing = _listing(user, profile)
        if _matches(listing, search, specialty, location, video_visits, accepting_new_patients, min_rating):
            doctors.append(listing)
    return doctors


@router.get("/{doctor_id}", response_model=DoctorListing)
def get_doctor(doctor_id: int, store: MemStorage = Depends(get_store)):
    user = store.get_user(doctor_id)
    if user is None or user.role != "doctor":
        raise HTTPException(status_code=404, detail="Doctor not found")
    profile = store.get_doctor_profile_by_user_id(doctor_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Doctor profile not found")
    return _listing(user, profile)


@router.get("/{doctor_id}/appointments", response_model=List[AppointmentWithPatient])
def get_doctor_appointments(doctor_id: int, store: MemStorage = Depends(get_store)):
    enriched = []
    for appointment in store.get_appointments_by_doctor(doctor_id):
        patient = store.get_user(appointment.patient_id)
        enriched.append(
            AppointmentWithPatient(
                **appointment.model_dump(),
                patient=patient_summary(patient) if patient else None,
            )
        )
    return enriched
