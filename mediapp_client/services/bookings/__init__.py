"""
Bookings API.
"""

from .service import BookingsService

__all__ = ["BookingsService"]
