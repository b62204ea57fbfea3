"""
Envelope decoding for list-valued and object-valued gateway responses.

The gateway wraps lists in several undocumented ways. ``decode_list_envelope``
classifies a payload into exactly one ``EnvelopeShape`` so that callers never
inspect the raw structure themselves.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class EnvelopeShape(str, Enum):
    """Recognized list envelopes, in precedence order."""

    RAW_ARRAY = "raw_array"          # [...]
    DATA_ARRAY = "data_array"        # {"data": [...]}
    DATA_CONTENT = "data_content"    # {"data": {"content": [...]}}
    CONTENT = "content"              # {"content": [...]}
    ITEMS = "items"                  # {"items": [...]}
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ListEnvelope:
    """A decoded list payload."""

    shape: EnvelopeShape
    items: List[Any] = field(default_factory=list)
    total: Optional[int] = None


def _total_from(container: Any) -> Optional[int]:
    if isinstance(container, dict):
        total = container.get("totalElements")
        if isinstance(total, int) and not isinstance(total, bool):
            return total
    return None


def decode_list_envelope(payload: Any) -> ListEnvelope:
    """
    Classify a list payload; the first matching shape wins.

    Anything that matches no known shape decodes to an empty
    ``UNRECOGNIZED`` envelope.
    """
    if isinstance(payload, list):
        return ListEnvelope(EnvelopeShape.RAW_ARRAY, list(payload))

    if not isinstance(payload, dict):
        return ListEnvelope(EnvelopeShape.UNRECOGNIZED)

    data = payload.get("data")
    if isinstance(data, list):
        return ListEnvelope(EnvelopeShape.DATA_ARRAY, list(data), _total_from(payload))
    if isinstance(data, dict) and isinstance(data.get("content"), list):
        total = _total_from(data)
        if total is None:
            total = _total_from(payload)
        return ListEnvelope(EnvelopeShape.DATA_CONTENT, list(data["content"]), total)

    content = payload.get("content")
    if isinstance(content, list):
        return ListEnvelope(EnvelopeShape.CONTENT, list(content), _total_from(payload))

    items = payload.get("items")
    if isinstance(items, list):
        return ListEnvelope(EnvelopeShape.ITEMS, list(items), _total_from(payload))

    return ListEnvelope(EnvelopeShape.UNRECOGNIZED)


def extract_items(payload: Any) -> List[Any]:
    """Return the list carried by any recognized envelope, else ``[]``."""
    return decode_list_envelope(payload).items


def unwrap_object(payload: Any) -> Any:
    """Return ``payload["data"]`` when it holds an object, else the payload."""
    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        return payload["data"]
    return payload
