"""
Custom exceptions for the MediApp client.
"""

from .gateway import (
    GatewayError,
    NetworkError,
    HttpError,
    DecodeError,
    ResponseShapeError,
)
from .session import SessionError, LoginResponseError

__all__ = [
    "GatewayError",
    "NetworkError",
    "HttpError",
    "DecodeError",
    "ResponseShapeError",
    "SessionError",
    "LoginResponseError",
]
