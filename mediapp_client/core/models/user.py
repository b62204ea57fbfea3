"""
User-related data models.
"""

from typing import Optional

from .base import CanonicalModel
from ..enums import Role


class User(CanonicalModel):
    """User account as seen by the client."""

    user_id: int
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    date_of_birth: Optional[str] = None
    role: Role = Role.PATIENT

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)


class PatientRegistration(CanonicalModel):
    """Patient self-registration payload."""

    email: str
    password: str
    first_name: str
    last_name: str
    phone_number: Optional[str] = None
    date_of_birth: Optional[str] = None  # YYYY-MM-DD


class DoctorRegistration(CanonicalModel):
    """Doctor account payload, submitted with an admin credential."""

    email: str
    password: str
    first_name: str
    last_name: str
    medical_license_number: Optional[str] = None
    specialty_id: Optional[int] = None
    office_address: Optional[str] = None
