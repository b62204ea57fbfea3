"""
User accounts API.
"""

from typing import List, Optional

from ...core.enums import Role
from ...core.models import DoctorRegistration, PatientRegistration, User
from ...normalization import extract_field, normalize_user, normalize_users, unwrap_object
from ...utils.query import build_path
from ..gateway import GatewayClient

ADMIN_TOKEN_HEADER = "X-Admin-Token"


class UsersService:
    """Registration, profile lookups and account listings."""

    def __init__(self, gateway: GatewayClient, admin_token: Optional[str] = None):
        self.gateway = gateway
        self.admin_token = admin_token

    async def register_patient(self, data: PatientRegistration) -> Optional[int]:
        """Register a patient account; returns the new user id when the server sends one."""
        result = await self.gateway.post("/users/register/patient", body=data.to_payload())
        return extract_field(result, "userId")

    async def register_doctor(
        self,
        data: DoctorRegistration,
        admin_token: Optional[str] = None,
    ) -> Optional[int]:
        """Register a doctor account. Requires an admin credential."""
        headers = {ADMIN_TOKEN_HEADER: admin_token or self.admin_token or ""}
        result = await self.gateway.post(
            "/users/register/doctor",
            body=data.to_payload(),
            headers=headers,
        )
        return extract_field(result, "userId")

    async def get_profile(self) -> User:
        """Get the profile of the authenticated user."""
        result = await self.gateway.get("/users/me")
        return normalize_user(unwrap_object(result))

    async def get_user_details(self, user_id: int) -> User:
        result = await self.gateway.get(f"/users/details/{user_id}")
        return normalize_user(unwrap_object(result))

    async def get_all_patients(self, page: int = 0, size: int = 50) -> List[User]:
        result = await self.gateway.get(build_path("/users/all/patients", page=page, size=size))
        return normalize_users(result, default_role=Role.PATIENT)

    async def get_all_doctors(self, page: int = 0, size: int = 50) -> List[User]:
        result = await self.gateway.get(build_path("/users/all/doctors", page=page, size=size))
        return normalize_users(result, default_role=Role.DOCTOR)
