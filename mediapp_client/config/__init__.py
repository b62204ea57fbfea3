"""
Configuration management for the MediApp client.
"""

from .settings import Settings, get_settings
from .gateway import GatewayConfig

__all__ = [
    "Settings",
    "get_settings",
    "GatewayConfig",
]
