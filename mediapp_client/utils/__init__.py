"""
Utility modules for the MediApp client.
"""

from .logging import get_logger, configure_logging
from .date import split_slot_start, format_date_param
from .query import build_path

__all__ = [
    "get_logger",
    "configure_logging",
    "split_slot_start",
    "format_date_param",
    "build_path",
]
