"""
Doctors, specialties and availability API.
"""

from typing import Any, List, Optional

from ...core.models import AvailabilitySlot, Doctor, DoctorProfile, DoctorRegistration, Specialty
from ...normalization import normalize_doctor, normalize_doctors, normalize_slots, normalize_specialties, unwrap_object
from ...utils.date import DateLike, format_date_param
from ...utils.logging import get_logger
from ...utils.query import build_path
from ..gateway import GatewayClient
from ..users import UsersService

logger = get_logger("mediapp.doctors")


class DoctorsService:
    """Doctor directory and slot reservation."""

    def __init__(self, gateway: GatewayClient):
        self.gateway = gateway

    async def get_all(self, specialty_id: Optional[int] = None) -> List[Doctor]:
        result = await self.gateway.get(build_path("/doctors", specialtyId=specialty_id or None))
        return normalize_doctors(result)

    async def get_by_id(self, doctor_id: int) -> Doctor:
        result = await self.gateway.get(f"/doctors/{doctor_id}")
        return normalize_doctor(unwrap_object(result))

    async def get_specialties(self) -> List[Specialty]:
        result = await self.gateway.get("/doctors/specialties")
        return normalize_specialties(result)

    async def get_availability(
        self,
        doctor_id: int,
        from_: Optional[DateLike] = None,
        to: Optional[DateLike] = None,
    ) -> List[AvailabilitySlot]:
        """
        List a doctor's slots.

        The date range is only sent when both bounds are given.
        """
        path = f"/doctors/{doctor_id}/availability"
        if from_ is not None and to is not None:
            path = build_path(path, **{"from": format_date_param(from_), "to": format_date_param(to)})
        result = await self.gateway.get(path)
        return normalize_slots(result, doctor_id=doctor_id)

    async def reserve_slot(self, slot_id: int, reservation_token: str) -> Any:
        return await self.gateway.put(
            f"/doctors/availability/{slot_id}/reserve",
            body={"reservationToken": reservation_token},
        )

    async def release_slot(self, slot_id: int) -> Any:
        return await self.gateway.put(f"/doctors/availability/{slot_id}/release")

    async def create_profile(self, profile: DoctorProfile) -> Any:
        return await self.gateway.post("/doctors/profiles", body=profile.to_payload())

    async def onboard(
        self,
        users: UsersService,
        registration: DoctorRegistration,
        admin_token: Optional[str] = None,
    ) -> Optional[int]:
        """
        Register a doctor account and attach its professional profile.

        The profile is only created when the registration returned a user id and
        the registration carries the full profile fields.

        Returns:
            The new user id, if the server returned one
        """
        user_id = await users.register_doctor(registration, admin_token=admin_token)

        profile_fields = (
            registration.medical_license_number,
            registration.specialty_id,
            registration.office_address,
        )
        if user_id is None or any(v is None for v in profile_fields):
            logger.info("Doctor registered without profile (user id: %s)", user_id)
            return user_id

        await self.create_profile(DoctorProfile(
            user_id=user_id,
            medical_license_number=registration.medical_license_number,
            specialty_id=registration.specialty_id,
            office_address=registration.office_address,
        ))
        return user_id
