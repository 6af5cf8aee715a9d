# backend/healthportal/api/routes/patient_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from healthportal.api.deps import doctor_summary, get_store
from healthportal.models import AppointmentWithDoctor, LabResult, MedicalRecord, VitalSign
from healthportal.models.requests import LabResultCreate, MedicalRecordCreate, VitalSignCreate
from healthportal.services.storage import MemStorage

router = APIRouter(prefix="/api/patients", tags=["patients"])


@router.get("/{patient_id}/medical-records", response_model=List[MedicalRecord])
def get_medical_records(patient_id: int, store: MemStorage = Depends(get_store)):
    return store.get_medical_records(patient_id)


@router.get("/{patient_id}/medical-records/{record_type}", response_model=List[MedicalRecord])
def get_medical_records_by_type(patient_id: int, record_type: str, store: MemStorage = Depends(get_store)):
    return store.get_medical_records_by_type(patient_id, record_type)


@router.post("/{patient_id}/medical-records", response_model=MedicalRecord, status_code=201)
def create_medical_record(patient_id: int, body: MedicalRecordCreate, store: MemStorage = Depends(get_store)):
    return store.create_medical_record(patient_id, body)


@router.get("/{patient_id}/appointments", response_model=List[AppointmentWithDoctor])
def get_patient_appointments(patient_id: int, store: MemStorage = Depends(get_store)):
    enriched = []
    for appointment in store.get_appointments_by_patient(patient_id):
        doctor = store.get_user(appointment.doctor_id)
        enriched.append(
            AppointmentWithDoctor(
                **appointment.model_dump(),
                doctor=doctor_summary(store, doctor) if doctor else None,
            )
        )
    return enriched


@router.get("/{patient_id}/vital-signs", response_model=VitalSign)
def get_latest_vital_signs(patient_id: int, store: MemStorage = Depends(get_store)):
    vital_signs = store.get_latest_vital_signs(patient_id)
    if vital_signs is None:
        raise HTTPException(status_code=404, detail="Vital signs not found")
    return vital_signs


@router.post("/{patient_id}/vital-signs", response_model=VitalSign, status_code=201)
def create_vital_sign(patient_id: int, body: VitalSignCreate, store: MemStorage = Depends(get_store)):
    return store.create_vital_sign(patient_id, body)


@router.get("/{patient_id}/lab-results", response_model=List[LabResult])
def get_lab_results(patient_id: int, store: MemStorage = Depends(get_store)):
    return store.get_lab_results(patient_id)


@router.post("/{patient_id}/lab-results", response_model=LabResult, status_code=201)
def create_lab_result(patient_id: int, body: LabResultCreate, store: MemStorage = Depends(get_store)):
    return store.create_lab_result(patient_id, body)
