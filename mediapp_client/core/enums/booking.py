"""
Booking-related enums.
"""

from enum import Enum


class SlotStatus(str, Enum):
    """Availability slot status."""

    AVAILABLE = "AVAILABLE"
    RESERVED = "RESERVED"
    # Only reachable through booking confirmation, never from slot listing
    BOOKED = "BOOKED"

    @classmethod
    def from_reserved_flag(cls, reserved) -> "SlotStatus":
        """Map the server's ``reserved`` flag; anything but ``False`` is reserved."""
        return cls.AVAILABLE if reserved is False else cls.RESERVED


class AppointmentStatus(str, Enum):
    """Appointment status, owned by the server."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"
