from datetime import date, time

import pytest

from healthportal.models.requests import (
    AppointmentCreate,
    DoctorProfileCreate,
    MedicalRecordCreate,
    RegisterRequest,
    VitalSignCreate,
)


def _user(username="jane", email="jane@example.com", role="patient"):
    return RegisterRequest(
        username=username,
        email=email,
        password="secret",
        first_name="Jane",
        last_name="Roe",
        role=role,
    )


def _appointment(patient_id=1, doctor_id=2):
    return AppointmentCreate(
        patient_id=patient_id,
        doctor_id=doctor_id,
        date=date(2024, 6, 1),
        time=time(9, 30),
        visit_type="video",
    )


def test_ids_increase_per_collection(store):
    users = [store.create_user(_user(f"u{i}", f"u{i}@example.com")) for i in range(3)]
    record = store.create_medical_record(1, MedicalRecordCreate(record_type="allergy", name="Penicillin"))

    assert [u.id for u in users] == [1, 2, 3]
    assert record.id == 1


def test_ids_are_not_reused_after_removal(store):
    first = store.create_document(1, "a.pdf", "application/pdf", 10)
    store.remove_document(1, first.id)
    second = store.create_document(1, "b.pdf", "application/pdf", 10)

    assert second.id > first.id


def test_password_is_hashed(store):
    user = store.create_user(_user())

    assert user.password_hash != "secret"
    assert store.verify_password(user, "secret")
    assert not store.verify_password(user, "Secret")
    assert "password_hash" not in user.public().model_dump()


def test_unique_lookups(store):
    user = store.create_user(_user())

    assert store.get_user_by_email("jane@example.com") is user
    assert store.get_user_by_username("jane") is user
    assert store.get_user_by_email("nobody@example.com") is None
    assert store.get_user(99) is None


def test_one_profile_per_doctor(store):
    doctor = store.create_user(_user(role="doctor"))
    profile = DoctorProfileCreate(specialty="Cardiology", license_id="MED-1")
    store.create_doctor_profile(doctor.id, profile)

    with pytest.raises(ValueError):
        store.create_doctor_profile(doctor.id, profile)
    assert store.get_doctor_profile_by_user_id(doctor.id).specialty == "Cardiology"


def test_foreign_key_listing_is_ordered_and_repeatable(store):
    for name in ("b", "a", "c"):
        store.create_medical_record(7, MedicalRecordCreate(record_type="condition", name=name))
    store.create_medical_record(8, MedicalRecordCreate(record_type="condition", name="other"))

    first = store.get_medical_records(7)
    second = store.get_medical_records(7)

    assert [r.name for r in first] == ["b", "a", "c"]
    assert first == second


def test_records_by_type(seeded_store):
    medications = seeded_store.get_medical_records_by_type(1, "medication")

    assert [r.name for r in medications] == ["Amlodipine", "Metformin", "Atorvastatin"]


def test_update_appointment_status(store):
    appointment = store.create_appointment(_appointment())

    updated = store.update_appointment_status(appointment.id, "cancelled")

    assert updated.status == "cancelled"
    assert store.get_appointments_by_patient(1)[0].status == "cancelled"
    assert store.update_appointment_status(42, "completed") is None


def test_double_booking_is_accepted(store):
    first = store.create_appointment(_appointment())
    second = store.create_appointment(_appointment())

    assert first.id != second.id
    assert len(store.get_appointments_by_doctor(2)) == 2


def test_latest_vital_signs_ignores_insertion_order(store):
    for day in (date(2023, 1, 5), date(2023, 9, 1), date(2023, 3, 1)):
        store.create_vital_sign(3, VitalSignCreate(date=day, heart_rate=day.month))

    latest = store.get_latest_vital_signs(3)

    assert latest.date == date(2023, 9, 1)
    assert store.get_latest_vital_signs(4) is None


def test_remove_document_checks_owner(store):
    document = store.create_document(1, "scan.png", "image/png", 2048)

    assert store.remove_document(2, document.id) is None
    assert store.remove_document(1, document.id) is document
    assert store.get_documents_by_user(1) == []


def test_seed_counts(seeded_store):
    assert len(seeded_store.users) == 7
    assert len(seeded_store.get_all_doctors()) == 6
    assert len(seeded_store.doctor_profiles) == 6
    assert len(seeded_store.get_medical_records(1)) == 6
    assert len(seeded_store.get_lab_results(1)) == 3
    assert seeded_store.get_latest_vital_signs(1).temperature == 986
