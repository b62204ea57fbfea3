"""
Canonical data models for the MediApp client.
"""

from .base import CanonicalModel
from .auth import LoginCredentials, AuthTokens, SessionTokens
from .user import User, PatientRegistration, DoctorRegistration
from .doctor import Doctor, Specialty, AvailabilitySlot, DoctorProfile
from .booking import Appointment, AppointmentPage, BookingRequest
from .notification import Notification, NotificationPage

__all__ = [
    "CanonicalModel",
    "LoginCredentials",
    "AuthTokens",
    "SessionTokens",
    "User",
    "PatientRegistration",
    "DoctorRegistration",
    "Doctor",
    "Specialty",
    "AvailabilitySlot",
    "DoctorProfile",
    "Appointment",
    "AppointmentPage",
    "BookingRequest",
    "Notification",
    "NotificationPage",
]
