"""
Response normalization: server envelopes and field aliases to canonical records.
"""

from .envelope import EnvelopeShape, ListEnvelope, decode_list_envelope, extract_items, unwrap_object
from .mappers import (
    first_present,
    normalize_user,
    normalize_users,
    normalize_doctor,
    normalize_doctors,
    normalize_specialties,
    normalize_slot,
    normalize_slots,
    normalize_appointment,
    normalize_appointments,
    normalize_appointment_page,
    normalize_notification,
    normalize_notification_page,
    normalize_auth_tokens,
    normalize_unread_count,
    extract_field,
)

__all__ = [
    "EnvelopeShape",
    "ListEnvelope",
    "decode_list_envelope",
    "extract_items",
    "unwrap_object",
    "first_present",
    "normalize_user",
    "normalize_users",
    "normalize_doctor",
    "normalize_doctors",
    "normalize_specialties",
    "normalize_slot",
    "normalize_slots",
    "normalize_appointment",
    "normalize_appointments",
    "normalize_appointment_page",
    "normalize_notification",
    "normalize_notification_page",
    "normalize_auth_tokens",
    "normalize_unread_count",
    "extract_field",
]
