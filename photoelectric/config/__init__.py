"""
Photoelectric Configuration Package

Configuration constants and settings for the photoelectric simulator.
"""

from .settings import (
    DEFAULT_EXPERIMENT_PARAMS,
    PARAMETER_RANGES,
    SWEEP_CONFIG,
    PHYSICAL_CONSTANTS,
    NOISE_CONFIG,
    MEASUREMENT_LOG_CONFIG,
    DATA_EXPORT_CONFIG,
    ERROR_MESSAGES,
)

__all__ = [
    "DEFAULT_EXPERIMENT_PARAMS",
    "PARAMETER_RANGES",
    "SWEEP_CONFIG",
    "PHYSICAL_CONSTANTS",
    "NOISE_CONFIG",
    "MEASUREMENT_LOG_CONFIG",
    "DATA_EXPORT_CONFIG",
    "ERROR_MESSAGES",
]
