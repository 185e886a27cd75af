"""
Photoelectric Model

Pure functions mapping experiment parameters to physical quantities and to
a simulated photocurrent, plus the synthetic instrument that turns a true
current into a set of noisy readings.

Design Notes:
- The I-V relation is a simplified linear model, not an exact photoemission
  curve. Exported data depends on this exact formula.
- Inputs are assumed valid (the experiment session checks slider ranges).
  A wavelength <= 0 is a caller error and is not checked here.
- Noise generation takes an injectable uniform random source so that tests
  can seed or script it.
"""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .catalog import Metal
from ..config.settings import PHYSICAL_CONSTANTS, NOISE_CONFIG

# Planck constant (eV·s) and speed of light (m/s)
PLANCK_EV_S = PHYSICAL_CONSTANTS["planck_ev_s"]
SPEED_OF_LIGHT_M_S = PHYSICAL_CONSTANTS["speed_of_light_m_s"]
HC_EV_M = PLANCK_EV_S * SPEED_OF_LIGHT_M_S


@dataclass(frozen=True)
class DerivedQuantities:
    """Display values recomputed whenever metal or wavelength changes."""
    threshold_wavelength_nm: float
    photon_energy_ev: float
    stopping_potential_v: float


def threshold_wavelength(metal: Metal) -> float:
    """
    Longest wavelength able to eject electrons from a metal.

    Args:
        metal: Catalog metal (work function is always positive)

    Returns:
        float: Threshold wavelength in meters
    """
    return HC_EV_M / metal.work_function_ev


def photon_energy_ev(wavelength_nm: float) -> float:
    """
    Photon energy E = hc/λ.

    Args:
        wavelength_nm: Wavelength in nm, must be positive

    Returns:
        float: Photon energy in eV
    """
    return HC_EV_M / (wavelength_nm * 1e-9)


def stopping_potential(metal: Metal, wavelength_nm: float) -> float:
    """
    Retarding voltage that drives the photocurrent to zero.

    Zero when the photon energy does not exceed the work function
    (below the threshold frequency no electrons are emitted).

    Returns:
        float: Stopping potential in V, never negative
    """
    return max(0.0, photon_energy_ev(wavelength_nm) - metal.work_function_ev)


def derive_quantities(metal: Metal, wavelength_nm: float) -> DerivedQuantities:
    """Compute threshold wavelength (nm), photon energy and stopping potential."""
    return DerivedQuantities(
        threshold_wavelength_nm=threshold_wavelength(metal) * 1e9,
        photon_energy_ev=photon_energy_ev(wavelength_nm),
        stopping_potential_v=stopping_potential(metal, wavelength_nm),
    )


def photocurrent_ua(
    metal: Metal,
    wavelength_nm: float,
    intensity: float,
    area_cm2: float,
    voltage: float,
) -> float:
    """
    True (noise-free) photocurrent for a parameter snapshot.

    Current is proportional to intensity and illuminated area, scaled by
    the voltage factor 1 + V/V_stop (clamped at 0). The factor is 1 at 0 V
    and 0 at or below -V_stop. At V >= V_stop the current is cut off.

    Args:
        metal: Photocathode metal
        wavelength_nm: Incident wavelength in nm
        intensity: Light intensity (arbitrary units)
        area_cm2: Illuminated area in cm²
        voltage: Retarding voltage in V

    Returns:
        float: Photocurrent in µA, never negative
    """
    energy = photon_energy_ev(wavelength_nm)
    if energy <= metal.work_function_ev:
        return 0.0

    v_stop = energy - metal.work_function_ev
    if voltage >= v_stop:
        return 0.0

    base_current = intensity * area_cm2 * NOISE_CONFIG["current_scale_factor"]
    voltage_factor = max(0.0, 1.0 + voltage / v_stop)
    return base_current * voltage_factor


def _nonzero_uniform(random_source) -> float:
    """Draw from the uniform source until the value is not exactly 0."""
    value = 0.0
    while value == 0.0:
        value = float(random_source.random())
    return value


def gaussian_sample(mean: float, std_dev: float, random_source) -> float:
    """
    One Gaussian sample using the Box-Muller transform.

    Args:
        mean: Distribution mean
        std_dev: Standard deviation
        random_source: Object whose random() returns floats in [0, 1)

    Returns:
        float: mean + z * std_dev
    """
    u = _nonzero_uniform(random_source)
    v = _nonzero_uniform(random_source)
    z = np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)
    return float(mean + z * std_dev)


def sample_noisy_readings(
    true_current: float,
    count: int = NOISE_CONFIG["readings_per_measurement"],
    relative_std_dev: float = NOISE_CONFIG["relative_std_dev"],
    random_source: Optional[np.random.Generator] = None,
) -> List[float]:
    """
    Simulate repeated instrument readings of a true current.

    Each reading is drawn independently from a normal distribution centred
    on the true current with a standard deviation proportional to it, then
    clamped at zero (current cannot be negative).

    Args:
        true_current: Noise-free current in µA
        count: Number of readings
        relative_std_dev: Standard deviation as a fraction of true_current
        random_source: Uniform source with a random() method, e.g. a
            numpy Generator. A fresh unseeded generator is used if None.

    Returns:
        List[float]: Readings in µA, all >= 0
    """
    if random_source is None:
        random_source = np.random.default_rng()

    std_dev = true_current * relative_std_dev
    return [
        max(0.0, gaussian_sample(true_current, std_dev, random_source))
        for _ in range(count)
    ]
