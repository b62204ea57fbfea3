"""
Per-resource mappers from raw gateway items to canonical records.

Alias resolution is "first non-null source wins". Every mapper validates the
result against its canonical model once; a failure raises ``ResponseShapeError``.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import ValidationError

from ..core.enums import Role, SlotStatus
from ..core.exceptions import ResponseShapeError
from ..core.models import (
    Appointment,
    AppointmentPage,
    AuthTokens,
    AvailabilitySlot,
    CanonicalModel,
    Doctor,
    Notification,
    NotificationPage,
    Specialty,
    User,
)
from .envelope import decode_list_envelope, extract_items, unwrap_object

M = TypeVar("M", bound=CanonicalModel)

USER_ID_KEYS = ("userId", "patientId", "doctorId", "id")


def first_present(item: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the value of the first key that is present and not ``None``."""
    for key in keys:
        value = item.get(key)
        if value is not None:
            return value
    return default


def _build(model: Type[M], data: Dict[str, Any]) -> M:
    try:
        return model(**data)
    except ValidationError as e:
        raise ResponseShapeError(f"Invalid {model.__name__} record: {e}") from e


def _as_dict(item: Any, kind: str) -> Dict[str, Any]:
    if not isinstance(item, dict):
        raise ResponseShapeError(f"Expected {kind} object, got {type(item).__name__}")
    return item


# --- users ---

def normalize_user(item: Any, default_role: Role = Role.PATIENT) -> User:
    """Map a raw user (patient, doctor or profile) to ``User``."""
    item = _as_dict(item, "user")
    return _build(User, {
        "user_id": first_present(item, *USER_ID_KEYS),
        "email": item.get("email"),
        "first_name": item.get("firstName"),
        "last_name": item.get("lastName"),
        "phone_number": item.get("phoneNumber"),
        "date_of_birth": item.get("dateOfBirth"),
        "role": Role.from_string(item.get("role"), default=default_role),
    })


def normalize_users(payload: Any, default_role: Role = Role.PATIENT) -> List[User]:
    return [normalize_user(it, default_role) for it in extract_items(payload)]


# --- doctors ---

def normalize_doctor(item: Any) -> Doctor:
    item = _as_dict(item, "doctor")
    return _build(Doctor, {
        "doctor_id": first_present(item, "doctorId", "id"),
        "user_id": item.get("userId"),
        "first_name": item.get("firstName"),
        "last_name": item.get("lastName"),
        "email": item.get("email"),
        "specialty_id": item.get("specialtyId"),
        "specialty_name": item.get("specialtyName"),
        "medical_license_number": item.get("medicalLicenseNumber"),
        "office_address": item.get("officeAddress"),
    })


def normalize_doctors(payload: Any) -> List[Doctor]:
    return [normalize_doctor(it) for it in extract_items(payload)]


def normalize_specialties(payload: Any) -> List[Specialty]:
    specialties = []
    for it in extract_items(payload):
        it = _as_dict(it, "specialty")
        specialties.append(_build(Specialty, {
            "specialty_id": first_present(it, "specialtyId", "id"),
            "name": it.get("name"),
            "description": it.get("description"),
        }))
    return specialties


def normalize_slot(item: Any, doctor_id: Optional[int] = None) -> AvailabilitySlot:
    """Map a raw slot; the boolean ``reserved`` flag becomes ``status``."""
    item = _as_dict(item, "slot")
    return _build(AvailabilitySlot, {
        "slot_id": first_present(item, "slotId", "id"),
        "doctor_id": first_present(item, "doctorId", default=doctor_id),
        "start_time": item.get("startTime"),
        "end_time": item.get("endTime"),
        "status": SlotStatus.from_reserved_flag(item.get("reserved")),
    })


def normalize_slots(payload: Any, doctor_id: Optional[int] = None) -> List[AvailabilitySlot]:
    return [normalize_slot(it, doctor_id) for it in extract_items(payload)]


# --- bookings ---

def normalize_appointment(item: Any) -> Appointment:
    item = _as_dict(unwrap_object(item), "appointment")
    status = item.get("status")
    data = {
        "appointment_id": first_present(item, "appointmentId", "id"),
        "patient_id": item.get("patientId"),
        "doctor_id": item.get("doctorId"),
        "doctor_name": item.get("doctorName"),
        "patient_name": item.get("patientName"),
        "specialty_name": item.get("specialtyName"),
        "slot_id": item.get("slotId"),
        "appointment_date": item.get("appointmentDate"),
        "start_time": item.get("startTime"),
        "end_time": item.get("endTime"),
        "reason": item.get("reason"),
    }
    if status is not None:
        data["status"] = str(status).upper()
    return _build(Appointment, data)


def normalize_appointments(payload: Any) -> List[Appointment]:
    return [normalize_appointment(it) for it in extract_items(payload)]


def normalize_appointment_page(payload: Any) -> AppointmentPage:
    envelope = decode_list_envelope(payload)
    content = [normalize_appointment(it) for it in envelope.items]
    total = envelope.total if envelope.total is not None else len(content)
    return AppointmentPage(content=content, total_elements=total)


# --- notifications ---

def normalize_notification(item: Any) -> Notification:
    """Map a raw notification or notification log entry."""
    item = _as_dict(item, "notification")
    message_type = item.get("messageType")
    message = first_present(item, "message", "body", "text")
    if message is None:
        message = "" if message_type is None else str(message_type)
    created_at = first_present(item, "sentAt", "createdAt", "timestamp")

    return _build(Notification, {
        "notification_id": first_present(item, "logId", "notificationId", "id"),
        "user_id": first_present(item, "recipientUserId", "userId"),
        "message": str(message),
        "type": str(first_present(item, "messageType", "type", default="UNKNOWN")),
        "read": bool(item.get("read")),
        "created_at": None if created_at is None else str(created_at),
    })


def normalize_notification_page(payload: Any) -> NotificationPage:
    return NotificationPage(content=[normalize_notification(it) for it in extract_items(payload)])


# --- scalars ---

def normalize_auth_tokens(payload: Any) -> AuthTokens:
    body = unwrap_object(payload)
    if not isinstance(body, dict):
        return AuthTokens()
    return _build(AuthTokens, {
        "access_token": body.get("accessToken"),
        "refresh_token": body.get("refreshToken"),
        "user_id": body.get("userId"),
    })


def normalize_unread_count(payload: Any) -> int:
    """Accept ``{"count": n}``, ``{"data": {"count": n}}`` or a bare number."""
    body = unwrap_object(payload)
    if isinstance(body, dict):
        body = body.get("count")
    if isinstance(body, bool) or body is None:
        return 0
    try:
        return int(body)
    except (TypeError, ValueError) as e:
        raise ResponseShapeError(f"Invalid unread count: {body!r}") from e


def extract_field(payload: Any, key: str) -> Any:
    """Read ``key`` from a payload or from its ``data`` object."""
    body = unwrap_object(payload)
    if isinstance(body, dict):
        return body.get(key)
    return None
