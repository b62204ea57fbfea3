"""
Doctors API.
"""

from .service import DoctorsService

__all__ = ["DoctorsService"]
