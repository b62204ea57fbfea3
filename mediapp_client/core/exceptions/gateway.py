"""
Gateway communication exceptions.
"""


class GatewayError(Exception):
    """Base exception for gateway errors."""
    pass


class NetworkError(GatewayError):
    """Exception raised when no response was received."""
    pass


class HttpError(GatewayError):
    """Exception raised for a non-2xx response."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class DecodeError(GatewayError):
    """Exception raised when a response body is not valid JSON."""
    pass


class ResponseShapeError(GatewayError):
    """Exception raised when a payload item fails canonical validation."""
    pass
