"""
Booking-related data models.
"""

from typing import List, Optional
from pydantic import Field

from .base import CanonicalModel
from .doctor import AvailabilitySlot
from ..enums import AppointmentStatus
from ...utils.date import split_slot_start


class Appointment(CanonicalModel):
    """Appointment record; status transitions are decided by the server."""

    appointment_id: int
    patient_id: int
    doctor_id: int
    doctor_name: Optional[str] = None
    patient_name: Optional[str] = None
    specialty_name: Optional[str] = None
    slot_id: Optional[int] = None
    appointment_date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    status: AppointmentStatus = AppointmentStatus.PENDING
    reason: Optional[str] = None


class AppointmentPage(CanonicalModel):
    """One page of a patient's appointments."""

    content: List[Appointment] = Field(default_factory=list)
    total_elements: int = 0


class BookingRequest(CanonicalModel):
    """Payload for ``/bookings/book``."""

    patient_id: int
    doctor_id: int
    slot_id: int
    appointment_date: str  # YYYY-MM-DD
    start_time: str  # HH:MM:SS

    @classmethod
    def from_slot(cls, patient_id: int, doctor_id: int, slot: AvailabilitySlot) -> "BookingRequest":
        """Create a booking request for the start of an availability slot."""
        appointment_date, start_time = split_slot_start(slot.start_time)
        return cls(
            patient_id=patient_id,
            doctor_id=doctor_id,
            slot_id=slot.slot_id,
            appointment_date=appointment_date,
            start_time=start_time,
        )
