"""
Session lifecycle exceptions.
"""


class SessionError(Exception):
    """Base exception for session lifecycle errors."""
    pass


class LoginResponseError(SessionError):
    """Exception raised when a login response carries no access token."""
    pass
