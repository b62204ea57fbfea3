"""
Enums for the MediApp client.
"""

from .booking import SlotStatus, AppointmentStatus
from .user import Role
from .session import SessionState, ProfileLoading

__all__ = [
    "SlotStatus",
    "AppointmentStatus",
    "Role",
    "SessionState",
    "ProfileLoading",
]
