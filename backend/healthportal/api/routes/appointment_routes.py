# backend/healthportal/api/routes/appointment_routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException

from healthportal.api.deps import get_store
from healthportal.models import Appointment
from healthportal.models.requests import AppointmentCreate, StatusUpdate
from healthportal.services.storage import MemStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/appointments", tags=["appointments"])


@router.post("", response_model=Appointment, status_code=201)
def create_appointment(body: AppointmentCreate, store: MemStorage = Depends(get_store)):
    """
    Book an appointment. Slots are not checked for overlap, so the same
    doctor, date and time can be booked more than once.
    """
    appointment = store.create_appointment(body)
    logger.info(
        "Appointment %d booked: patient=%d doctor=%d %s %s",
        appointment.id,
        appointment.patient_id,
        appointment.doctor_id,
        appointment.date,
        appointment.time,
    )
    return appointment


@router.patch("/{appointment_id}/status", response_model=Appointment)
def update_appointment_status(appointment_id: int, body: StatusUpdate, store: MemStorage = Depends(get_store)):
    appointment = store.update_appointment_status(appointment_id, body.status)
    if appointment is None:
        raise HTTPException(status_code=404, detail="Appointment not found")
    logger.info("Appointment %d is now %s", appointment.id, appointment.status)
    return appointment
