"""
Photoelectric Models Package

Models define experiment logic: the physics of photoemission, the
measurement log, and the experiment session. They never touch the
presentation layer directly, only through callbacks.
"""

from .catalog import Metal, METALS, WavelengthBand, WAVELENGTH_BANDS
from .photoelectric_model import (
    DerivedQuantities,
    threshold_wavelength,
    photon_energy_ev,
    stopping_potential,
    derive_quantities,
    photocurrent_ua,
    sample_noisy_readings,
)
from .measurement_log import Measurement, MeasurementLog, MeasurementLogError
from .experiment import (
    ExperimentParameters,
    ExperimentState,
    PhotoelectricExperimentModel,
    PhotoelectricExperimentError,
)

__all__ = [
    "Metal",
    "METALS",
    "WavelengthBand",
    "WAVELENGTH_BANDS",
    "DerivedQuantities",
    "threshold_wavelength",
    "photon_energy_ev",
    "stopping_potential",
    "derive_quantities",
    "photocurrent_ua",
    "sample_noisy_readings",
    "Measurement",
    "MeasurementLog",
    "MeasurementLogError",
    "ExperimentParameters",
    "ExperimentState",
    "PhotoelectricExperimentModel",
    "PhotoelectricExperimentError",
]
