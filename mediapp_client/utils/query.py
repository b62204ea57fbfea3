"""
Endpoint path helpers.
"""

from typing import Any
from urllib.parse import quote, urlencode


def build_path(path: str, **params: Any) -> str:
    """
    Append query parameters to an endpoint path.

    ``None`` values are dropped. Values are percent-escaped the way
    ``encodeURIComponent`` does it, so spaces become ``%20`` rather than ``+``.
    """
    query = {k: v for k, v in params.items() if v is not None}
    if not query:
        return path
    return f"{path}?{urlencode(query, quote_via=quote, safe='')}"
