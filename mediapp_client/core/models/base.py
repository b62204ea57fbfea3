"""
Shared base for canonical records.
"""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CanonicalModel(BaseModel):
    """
    Base model for every record exchanged with the gateway.

    Attributes are snake_case in Python; the wire names are the camelCase
    canonical names (``userId``, ``createdAt`` ...).
    """

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the canonical wire shape, dropping unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
