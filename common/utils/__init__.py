"""
Shared utilities for PHYS 2150 simulation applications.
"""

from .tiered_logger import TieredLogger, MeasurementStats, get_logger
from .error_messages import (
    ErrorTemplate,
    PHOTOELECTRIC_ERRORS,
    get_error,
    format_error_message,
)

__all__ = [
    'TieredLogger',
    'MeasurementStats',
    'get_logger',
    'ErrorTemplate',
    'PHOTOELECTRIC_ERRORS',
    'get_error',
    'format_error_message',
]
