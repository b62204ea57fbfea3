"""
User-related enums.
"""

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Account role as assigned by the gateway."""

    PATIENT = "PATIENT"
    DOCTOR = "DOCTOR"
    ADMIN = "ADMIN"

    @classmethod
    def from_string(cls, value: Optional[str], default: Optional["Role"] = None) -> "Role":
        """Convert a server role string, accepting the ``ROLE_`` prefix."""
        fallback = default or cls.PATIENT
        if not value:
            return fallback

        value = str(value).strip().upper()
        if value.startswith("ROLE_"):
            value = value[len("ROLE_"):]

        try:
            return cls(value)
        except ValueError:
            return fallback
