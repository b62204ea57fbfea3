"""
MediApp client: data-access and session layer for the appointment gateway.
"""

from .client import MediAppClient, create_client

__all__ = [
    "MediAppClient",
    "create_client",
]
