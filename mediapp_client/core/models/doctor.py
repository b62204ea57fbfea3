"""
Doctor and availability data models.
"""

from typing import Optional

from .base import CanonicalModel
from ..enums import SlotStatus


class Specialty(CanonicalModel):
    """Medical specialty."""

    specialty_id: int
    name: str
    description: Optional[str] = None


class Doctor(CanonicalModel):
    """Doctor listing entry."""

    doctor_id: int
    user_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    specialty_id: Optional[int] = None
    specialty_name: Optional[str] = None
    medical_license_number: Optional[str] = None
    office_address: Optional[str] = None


class AvailabilitySlot(CanonicalModel):
    """Bookable time interval offered by a doctor."""

    slot_id: int
    doctor_id: int
    start_time: str
    end_time: Optional[str] = None
    status: SlotStatus

    @property
    def is_available(self) -> bool:
        return self.status == SlotStatus.AVAILABLE


class DoctorProfile(CanonicalModel):
    """Professional profile attached to a doctor's user account."""

    user_id: int
    medical_license_number: str
    specialty_id: int
    office_address: str
