# backend/healthportal/services/seed.py

import logging
from datetime import date, time, timedelta
from typing import Optional

from healthportal.models.requests import (
    AppointmentCreate,
    DoctorProfileCreate,
    LabResultCreate,
    MedicalRecordCreate,
    RegisterRequest,
    VitalSignCreate,
)
from healthportal.services.storage import MemStorage

logger = logging.getLogger(__name__)

SAMPLE_PATIENT = {
    "username": "john.doe",
    "email": "john@example.com",
    "password": "password123",
    "first_name": "John",
    "last_name": "Doe",
    "role": "patient",
    "phone": "123-456-7890",
    "address": "123 Main St, Boston, MA",
}

# (user fields, profile fields)
SAMPLE_DOCTORS = [
    (
        {"username": "sarah.johnson", "email": "sarah@example.com", "first_name": "Sarah",
         "last_name": "Johnson", "phone": "987-654-3210", "address": "456 Medical Ave, Boston, MA"},
        {"specialty": "Cardiology",
         "bio": "Board certified cardiologist with over 15 years of experience specializing in preventive cardiology and heart disease management.",
         "image_url": "https://images.unsplash.com/photo-1559839734-2b71ea197ec2",
         "languages": "English, Spanish", "license_id": "MED-12345", "rating": 45, "review_count": 128},
    ),
    (
        {"username": "michael.chen", "email": "michael@example.com", "first_name": "Michael",
         "last_name": "Chen", "phone": "555-123-4567", "address": "789 Health St, Boston, MA"},
        {"specialty": "General Practice",
         "bio": "Family physician focused on comprehensive primary care for patients of all ages. Special interest in chronic disease management and preventive medicine.",
         "image_url": "https://images.unsplash.com/photo-1612349317150-e413f6a5b16d",
         "languages": "English, Mandarin", "license_id": "MED-23456", "rating": 50, "review_count": 97},
    ),
    (
        {"username": "emily.rodriguez", "email": "emily@example.com", "first_name": "Emily",
         "last_name": "Rodriguez", "phone": "111-222-3333", "address": "321 Pediatric Ln, Boston, MA"},
        {"specialty": "Pediatrics",
         "bio": "Compassionate pediatrician dedicated to providing comprehensive care for children from birth through adolescence. Focuses on developmental milestones and preventive care.",
         "image_url": "https://images.unsplash.com/photo-1594824476967-48c8b964273f",
         "languages": "English, Spanish", "license_id": "MED-34567", "rating": 40, "review_count": 115},
    ),
    (
        {"username": "david.williams", "email": "david@example.com", "first_name": "David",
         "last_name": "Williams", "phone": "444-555-6666", "address": "654 Derma Dr, Boston, MA"},
        {"specialty": "Dermatology",
         "bio": "Board-certified dermatologist specializing in medical, surgical, and cosmetic dermatology. Experienced in treating various skin conditions including acne, eczema, and psoriasis.",
         "image_url": "https://images.unsplash.com/photo-1622253692010-333f2da6031d",
         "languages": "English", "license_id": "MED-45678", "rating": 45, "review_count": 142},
    ),
    (
        {"username": "priya.patel", "email": "priya@example.com", "first_name": "Priya",
         "last_name": "Patel", "phone": "777-888-9999", "address": "987 Neuro Cir, Boston, MA"},
        {"specialty": "Neurology",
         "bio": "Neurologist with expertise in treating headaches, movement disorders, and neurodegenerative diseases. Committed to providing personalized care for complex neurological conditions.",
         "image_url": "https://images.unsplash.com/photo-1651008376811-b90baee60c1f",
         "languages": "English, Hindi", "license_id": "MED-56789", "rating": 40, "review_count": 87},
    ),
    (
        {"username": "james.wilson", "email": "james@example.com", "first_name": "James",
         "last_name": "Wilson", "phone": "111-333-5555", "address": "246 Ortho St, Boston, MA"},
        {"specialty": "Orthopedics",
         "bio": "Orthopedic surgeon specializing in sports medicine and joint replacement. Extensive experience in minimally invasive techniques for faster recovery and better outcomes.",
         "image_url": "https://images.unsplash.com/photo-1537368910025-700350fe46c7",
         "languages": "English", "license_id": "MED-67890", "rating": 50, "review_count": 103},
    ),
]

DOCTOR_PASSWORD = "doctor123"

# (record_type, name, description, status, date, provider, additional_info)
SAMPLE_RECORDS = [
    ("condition", "Hypertension (Essential)", "Elevated blood pressure requiring medication management",
     "Active", date(2021, 1, 15), "Dr. Sarah Johnson", "Monitor every 3 months"),
    ("condition", "Type 2 Diabetes Mellitus", "Blood glucose management with medication and diet",
     "Controlled", date(2020, 3, 10), "Dr. Michael Chen", "HbA1c target < 7.0%"),
    ("condition", "Hyperlipidemia", "Elevated cholesterol levels",
     "Controlled", date(2021, 1, 15), "Dr. Sarah Johnson", "Diet control and medication"),
    ("medication", "Amlodipine", "5mg", "Active", date(2023, 4, 15), "Dr. Sarah Johnson", "Once daily"),
    ("medication", "Metformin", "500mg", "Active", date(2023, 3, 20), "Dr. Michael Chen", "Twice daily"),
    ("medication", "Atorvastatin", "10mg", "Active", date(2023, 3, 20), "Dr. Sarah Johnson",
     "Once daily at bedtime"),
]

SAMPLE_LAB_RESULTS = [
    {"test_name": "Complete Blood Count", "date": date(2023, 4, 10), "result": "Normal", "unit": "various",
     "normal_range": "Reference ranges vary by component", "status": "normal",
     "ordering_provider": "Dr. Sarah Johnson"},
    {"test_name": "Lipid Panel", "date": date(2023, 4, 10), "result": "Borderline", "unit": "mg/dL",
     "normal_range": "LDL < 100, HDL > 40, Total < 200", "status": "abnormal",
     "ordering_provider": "Dr. Sarah Johnson"},
    {"test_name": "Blood Glucose", "date": date(2023, 3, 25), "result": "98 mg/dL", "unit": "mg/dL",
     "normal_range": "70-99 mg/dL", "status": "normal", "ordering_provider": "Dr. Michael Chen"},
]


def seed_sample_data(store: MemStorage, today: Optional[date] = None) -> None:
    """Populate an empty store with the demo patient, doctors and records."""
    today = today or date.today()

    patient = store.create_user(RegisterRequest(**SAMPLE_PATIENT))

    doctors = []
    for user_fields, profile_fields in SAMPLE_DOCTORS:
        doctor = store.create_user(
            RegisterRequest(**user_fields, password=DOCTOR_PASSWORD, role="doctor")
        )
        store.create_doctor_profile(
            doctor.id,
            DoctorProfileCreate(
                **profile_fields,
                location="Boston, MA",
                accepting_new_patients=True,
                video_visits=True,
            ),
        )
        doctors.append(doctor)
    sarah, michael = doctors[0], doctors[1]

    for record_type, name, description, status, when, provider, info in SAMPLE_RECORDS:
        store.create_medical_record(
            patient.id,
            MedicalRecordCreate(
                record_type=record_type,
                name=name,
                description=description,
                status=status,
                date=when,
                provider=provider,
                additional_info=info,
            ),
        )

    store.create_appointment(
        AppointmentCreate(
            patient_id=patient.id,
            doctor_id=sarah.id,
            date=today + timedelta(days=1),
            time=time(10, 0),
            visit_type="in-person",
            reason="Follow-up Appointment",
            additional_info="Blood pressure check",
        )
    )
    store.create_appointment(
        AppointmentCreate(
            patient_id=patient.id,
            doctor_id=michael.id,
            date=today + timedelta(days=15),
            time=time(14, 30),
            visit_type="in-person",
            reason="Regular Check-up",
            additional_info="Annual physical",
        )
    )

    store.create_vital_sign(
        patient.id,
        VitalSignCreate(
            date=date(2023, 4, 15),
            blood_pressure_systolic=130,
            blood_pressure_diastolic=85,
            heart_rate=78,
            respiratory_rate=16,
            temperature=986,
            weight=182,
            height=70,
            bmi=234,
            blood_glucose=98,
        ),
    )

    for fields in SAMPLE_LAB_RESULTS:
        store.create_lab_result(patient.id, LabResultCreate(**fields))

    logger.info(
        "Seeded store: %d users, %d doctor profiles, %d records, %d appointments",
        len(store.users),
        len(store.doctor_profiles),
        len(store.medical_records),
        len(store.appointments),
    )
