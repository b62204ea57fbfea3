"""
Bookings API.
"""

from typing import Any, List, Optional

from ...core.enums import AppointmentStatus
from ...core.models import Appointment, AppointmentPage, BookingRequest
from ...normalization import (
    extract_field,
    normalize_appointment,
    normalize_appointment_page,
    normalize_appointments,
    unwrap_object,
)
from ...utils.query import build_path
from ..gateway import GatewayClient


def _acknowledged(result: Any) -> Optional[Appointment]:
    """Return the appointment echoed back by a state change, if any."""
    body = unwrap_object(result)
    if isinstance(body, dict) and body.get("appointmentId") is not None:
        return normalize_appointment(body)
    return None


class BookingsService:
    """Appointment booking and status change requests."""

    def __init__(self, gateway: GatewayClient):
        self.gateway = gateway

    async def book(self, request: BookingRequest) -> Optional[int]:
        """Book an appointment; returns the new appointment id."""
        result = await self.gateway.post("/bookings/book", body=request.to_payload())
        return extract_field(result, "appointmentId")

    async def get_by_id(self, appointment_id: int) -> Appointment:
        result = await self.gateway.get(f"/bookings/{appointment_id}")
        return normalize_appointment(result)

    async def get_patient_appointments(
        self,
        patient_id: int,
        page: int = 0,
        size: int = 10,
        status: Optional[AppointmentStatus] = None,
    ) -> AppointmentPage:
        path = build_path(
            f"/bookings/patient/{patient_id}",
            page=page,
            size=size,
            status=AppointmentStatus(status).value if status else None,
        )
        result = await self.gateway.get(path)
        return normalize_appointment_page(result)

    async def get_doctor_appointments(self, doctor_id: int, date: str) -> List[Appointment]:
        result = await self.gateway.get(f"/bookings/doctor/{doctor_id}/date/{date}")
        return normalize_appointments(result)

    async def confirm(self, appointment_id: int) -> Optional[Appointment]:
        result = await self.gateway.put(f"/bookings/confirm/{appointment_id}")
        return _acknowledged(result)

    async def cancel(self, appointment_id: int, reason: str) -> Optional[Appointment]:
        """Request cancellation; the reason travels URL-escaped in the query string."""
        result = await self.gateway.put(build_path(f"/bookings/cancel/{appointment_id}", reason=reason))
        return _acknowledged(result)
