# backend/healthportal/services/storage.py

from datetime import datetime, timezone
from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar

from werkzeug.security import check_password_hash, generate_password_hash

from healthportal.models import (
    Appointment,
    DoctorProfile,
    Document,
    LabResult,
    MedicalRecord,
    Message,
    User,
    VitalSign,
)
from healthportal.models.requests import (
    AppointmentCreate,
    DoctorProfileCreate,
    LabResultCreate,
    MedicalRecordCreate,
    RegisterRequest,
    VitalSignCreate,
)

EntityT = TypeVar("EntityT")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Table(Generic[EntityT]):
    """One entity collection: rows keyed by id, ids handed out in order and never reused."""

    def __init__(self, model: Type[EntityT]):
        self.model = model
        self._rows: Dict[int, EntityT] = {}
        self._next_id = 1

    def insert(self, **fields) -> EntityT:
        entity = self.model(id=self._next_id, **fields)
        self._rows[self._next_id] = entity
        self._next_id += 1
        return entity

    def get(self, entity_id: int) -> Optional[EntityT]:
        return self._rows.get(entity_id)

    def find(self, predicate: Callable[[EntityT], bool]) -> Optional[EntityT]:
        return next((row for row in self._rows.values() if predicate(row)), None)

    def filter(self, predicate: Callable[[EntityT], bool]) -> List[EntityT]:
        return [row for row in self._rows.values() if predicate(row)]

    def all(self) -> List[EntityT]:
        return list(self._rows.values())

    def remove(self, entity_id: int) -> Optional[EntityT]:
        return self._rows.pop(entity_id, None)

    def __len__(self) -> int:
        return len(self._rows)


class MemStorage:
    """
    In-process store for every portal entity.

    Built once per application and handed to the routes through a dependency.
    Lookups are linear scans over small collections; absence is reported as
    None or an empty list, never as an exception. Not thread safe.
    """

    def __init__(self, password_hash_method: str = "scrypt"):
        self.password_hash_method = password_hash_method
        self.users: Table[User] = Table(User)
        self.doctor_profiles: Table[DoctorProfile] = Table(DoctorProfile)
        self.medical_records: Table[MedicalRecord] = Table(MedicalRecord)
        self.appointments: Table[Appointment] = Table(Appointment)
        self.vital_signs: Table[VitalSign] = Table(VitalSign)
        self.lab_results: Table[LabResult] = Table(LabResult)
        self.messages: Table[Message] = Table(Message)
        self.documents: Table[Document] = Table(Document)

    # Users

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.find(lambda user: user.username == username)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.users.find(lambda user: user.email == email)

    def create_user(self, data: RegisterRequest) -> User:
        fields = data.model_dump(exclude={"password", "doctor_profile"})
        return self.users.insert(
            **fields,
            password_hash=generate_password_hash(data.password, method=self.password_hash_method),
            created_at=_utcnow(),
        )

    def get_all_doctors(self) -> List[User]:
        return self.users.filter(lambda user: user.role == "doctor")

    @staticmethod
    def verify_password(user: User, password: str) -> bool:
        return check_password_hash(user.password_hash, password)

    # Doctor profiles

    def get_doctor_profile(self, profile_id: int) -> Optional[DoctorProfile]:
        return self.doctor_profiles.get(profile_id)

    def get_doctor_profile_by_user_id(self, user_id: int) -> Optional[DoctorProfile]:
        return self.doctor_profiles.find(lambda profile: profile.user_id == user_id)

    def create_doctor_profile(self, user_id: int, data: DoctorProfileCreate) -> DoctorProfile:
        if self.get_doctor_profile_by_user_id(user_id) is not None:
            raise ValueError(f"User {user_id} already has a doctor profile")
        return self.doctor_profiles.insert(user_id=user_id, **data.model_dump())

    def get_all_doctor_profiles(self) -> List[DoctorProfile]:
        return self.doctor_profiles.all()

    # Medical records

    def get_medical_records(self, patient_id: int) -> List[MedicalRecord]:
        return self.medical_records.filter(lambda record: record.patient_id == patient_id)

    def get_medical_records_by_type(self, patient_id: int, record_type: str) -> List[MedicalRecord]:
        return self.medical_records.filter(
            lambda record: record.patient_id == patient_id and record.record_type == record_type
        )

    def create_medical_record(self, patient_id: int, data: MedicalRecordCreate) -> MedicalRecord:
        return self.medical_records.insert(patient_id=patient_id, **data.model_dump())

    # Appointments

    def get_appointments_by_patient(self, patient_id: int) -> List[Appointment]:
        return self.appointments.filter(lambda appt: appt.patient_id == patient_id)

    def get_appointments_by_doctor(self, doctor_id: int) -> List[Appointment]:
        return self.appointments.filter(lambda appt: appt.doctor_id == doctor_id)

    def create_appointment(self, data: AppointmentCreate) -> Appointment:
        # No overlap check: two identical bookings are both stored
        return self.appointments.insert(**data.model_dump())

    def update_appointment_status(self, appointment_id: int, status: str) -> Optional[Appointment]:
        appointment = self.appointments.get(appointment_id)
        if appointment is None:
            return None
        appointment.status = status
        return appointment

    # Vital signs

    def get_latest_vital_signs(self, patient_id: int) -> Optional[VitalSign]:
        readings = self.vital_signs.filter(lambda vs: vs.patient_id == patient_id)
        if not readings:
            return None
        # max() keeps the first reading among equal dates
        return max(readings, key=lambda vs: vs.date)

    def create_vital_sign(self, patient_id: int, data: VitalSignCreate) -> VitalSign:
        return self.vital_signs.insert(patient_id=patient_id, **data.model_dump())

    # Lab results

    def get_lab_results(self, patient_id: int) -> List[LabResult]:
        return self.lab_results.filter(lambda result: result.patient_id == patient_id)

    def create_lab_result(self, patient_id: int, data: LabResultCreate) -> LabResult:
        return self.lab_results.insert(patient_id=patient_id, **data.model_dump())

    # Messages

    def get_messages_by_user(self, user_id: int) -> List[Message]:
        return self.messages.filter(lambda message: message.user_id == user_id)

    def create_message(self, user_id: int, content: str, is_bot: bool = False) -> Message:
        return self.messages.insert(
            user_id=user_id, content=content, is_bot=is_bot, timestamp=_utcnow()
        )

    # Documents

    def get_documents_by_user(self, user_id: int) -> List[Document]:
        return self.documents.filter(lambda doc: doc.user_id == user_id)

    def create_document(self, user_id: int, name: str, content_type: str, size: int) -> Document:
        return self.documents.insert(
            user_id=user_id,
            name=name,
            content_type=content_type,
            size=size,
            uploaded_at=_utcnow(),
        )

    def remove_document(self, user_id: int, document_id: int) -> Optional[Document]:
        document = self.documents.get(document_id)
        if document is None or document.user_id != user_id:
            return None
        return self.documents.remove(document_id)
