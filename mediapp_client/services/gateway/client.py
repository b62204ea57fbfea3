"""
Gateway client: issues one HTTP call and returns the decoded body or raises.
"""

import json
from typing import Any, Dict, Mapping, Optional

import httpx

from ...core.exceptions import DecodeError, HttpError, NetworkError
from ...utils.logging import get_logger
from ..tokens import TokenStore

logger = get_logger("mediapp.gateway")

JSON_CONTENT_TYPE = "application/json"


def merge_headers(
    defaults: Mapping[str, str],
    overrides: Optional[Mapping[str, Optional[str]]] = None,
) -> Dict[str, str]:
    """
    Merge caller headers over the defaults, case-insensitively.

    A caller value of ``None`` removes the header (e.g. to drop Authorization).
    """
    merged: Dict[str, str] = dict(defaults)
    for key, value in (overrides or {}).items():
        for existing in [k for k in merged if k.lower() == key.lower()]:
            del merged[existing]
        if value is not None:
            merged[key] = value
    return merged


def _has_header(headers: Mapping[str, str], name: str) -> bool:
    return any(k.lower() == name.lower() for k in headers)


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as e:
        raise DecodeError(str(e)) from e


def _error_message(response: httpx.Response) -> str:
    """Extract ``message`` from an error body or synthesize one from the status."""
    fallback = f"HTTP error! status: {response.status_code}"
    try:
        body = _parse_json(response.text)
    except DecodeError:
        return fallback
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return fallback


def _decode_success(response: httpx.Response) -> Any:
    """Decode a 2xx body; bodies that are not valid JSON come back as text."""
    if response.status_code == 204:
        return None

    text = response.text
    content_type = response.headers.get("content-type", "")
    try:
        return _parse_json(text)
    except DecodeError:
        if JSON_CONTENT_TYPE in content_type:
            logger.warning("Response declared JSON but could not be parsed; returning text")
        return text


class GatewayClient:
    """Builds and sends requests to the gateway with the session's bearer token."""

    def __init__(
        self,
        base_url: str,
        token_store: TokenStore,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token_store = token_store
        self.timeout = timeout
        self.transport = transport

    def build_headers(
        self,
        headers: Optional[Mapping[str, Optional[str]]] = None,
        has_body: bool = False,
    ) -> Dict[str, str]:
        """Default headers, then caller headers, then an inferred Content-Type."""
        defaults: Dict[str, str] = {}
        access_token = self.token_store.get().access_token
        if access_token:
            defaults["Authorization"] = f"Bearer {access_token}"

        merged = merge_headers(defaults, headers)
        if has_body and not _has_header(merged, "Content-Type"):
            merged["Content-Type"] = JSON_CONTENT_TYPE
        return merged

    async def request(
        self,
        method: str,
        endpoint: str,
        body: Any = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
    ) -> Any:
        """
        Send a request to ``<base_url><endpoint>``.

        Args:
            method: HTTP method
            endpoint: Path relative to the base address, query string included
            body: JSON-serializable object, or pre-encoded ``str``/``bytes``
            headers: Caller headers; these win over the defaults

        Returns:
            Decoded JSON, raw text, or ``None`` for 204 No Content

        Raises:
            NetworkError: no response was received
            HttpError: the gateway answered with a non-2xx status
        """
        content = None
        if body is not None:
            content = body if isinstance(body, (str, bytes)) else json.dumps(body)

        request_headers = self.build_headers(headers, has_body=content is not None)
        url = f"{self.base_url}{endpoint}"
        logger.debug("%s %s", method, url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    content=content,
                    headers=request_headers,
                )
        except httpx.TimeoutException as e:
            logger.error("%s %s timed out", method, endpoint)
            raise NetworkError("Request timed out") from e
        except httpx.RequestError as e:
            logger.error("%s %s failed: %s", method, endpoint, e)
            raise NetworkError(f"Request failed: {e}") from e

        if not response.is_success:
            message = _error_message(response)
            logger.warning("%s %s -> HTTP %s: %s", method, endpoint, response.status_code, message)
            raise HttpError(response.status_code, message)

        return _decode_success(response)

    async def get(self, endpoint: str, headers: Optional[Mapping[str, Optional[str]]] = None) -> Any:
        return await self.request("GET", endpoint, headers=headers)

    async def post(
        self,
        endpoint: str,
        body: Any = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
    ) -> Any:
        return await self.request("POST", endpoint, body=body, headers=headers)

    async def put(
        self,
        endpoint: str,
        body: Any = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
    ) -> Any:
        return await self.request("PUT", endpoint, body=body, headers=headers)
