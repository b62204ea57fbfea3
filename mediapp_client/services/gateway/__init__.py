"""
HTTP request execution against the MediApp gateway.
"""

from .client import GatewayClient, merge_headers

__all__ = [
    "GatewayClient",
    "merge_headers",
]
