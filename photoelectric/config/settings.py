"""
Configuration constants and settings for the photoelectric simulator.

All experiment parameters are centralized here for easy tuning.
Slider ranges double as the validation bounds for the experiment session,
so the physics functions themselves never have to check their inputs.
"""

from typing import Dict, Any


# Default experiment parameters
# Restored on every experiment reset
DEFAULT_EXPERIMENT_PARAMS: Dict[str, Any] = {
    "metal_index": 0,           # Index into the metal catalog (0 = Sodium)
    "area_cm2": 0.1,            # cm² - illuminated plate area
    "wavelength_nm": 400.0,     # nm - incident light wavelength
    "intensity": 5.0,           # W/m² (arbitrary units in the model)
    "voltage": 0.0,             # V - retarding voltage (negative accelerates)
}


# Parameter ranges
# Mirror the slider min/max/step of the simulator controls
PARAMETER_RANGES: Dict[str, Dict[str, float]] = {
    "area_cm2": {"min": 0.01, "max": 1.0, "step": 0.01},
    "wavelength_nm": {"min": 100.0, "max": 700.0, "step": 1.0},
    "intensity": {"min": 0.0, "max": 10.0, "step": 0.1},
    "voltage": {"min": -5.0, "max": 5.0, "step": 0.1},
}


# Voltage sweep configuration (command-line runner)
SWEEP_CONFIG: Dict[str, Any] = {
    "start_voltage": 0.0,       # V - zero bias
    "stop_voltage": 2.0,        # V - beyond the stopping potential of most setups
    "step_voltage": 0.1,        # V - matches the voltage slider step
    "voltage_decimals": 2,
}


# Physical constants used by the model
PHYSICAL_CONSTANTS: Dict[str, float] = {
    "planck_ev_s": 4.136e-15,       # eV·s
    "speed_of_light_m_s": 3e8,      # m/s
}


# Synthetic instrument noise
NOISE_CONFIG: Dict[str, Any] = {
    # Readings taken per measurement point
    "readings_per_measurement": 10,

    # Gaussian standard deviation as a fraction of the true current
    "relative_std_dev": 0.05,

    # Linear scale tying current (µA) to intensity × area
    "current_scale_factor": 10.0,
}


# Measurement log configuration
MEASUREMENT_LOG_CONFIG: Dict[str, Any] = {
    # Two measurements closer than this (V) are the same point
    "voltage_tolerance": 0.05,

    # Averaged current (µA) below which a point counts as "no current"
    "zero_current_threshold_ua": 0.001,
}


# Data export configuration
DATA_EXPORT_CONFIG: Dict[str, Any] = {
    "csv_delimiter": ",",

    # Decimal precision for exported values
    "voltage_precision": 1,
    "current_precision": 3,
    "stopping_potential_precision": 2,

    # File naming template
    "date_format": "%Y_%m_%d_%H%M%S",
    "file_template": "photoelectric_experiment_{date}.csv",

    "title": "Photoelectric Effect Experiment Data",

    # CSV column headers
    "headers": {
        "voltage": "Voltage (V)",
        "average_current": "Average Current (µA)",
        "reading": "Reading {n}",
    },

    "observed_stopping_label": "Observed Stopping Potential",
}


# Error messages
ERROR_MESSAGES: Dict[str, str] = {
    "invalid_number": (
        "Please enter a valid numerical value for {name}."
    ),
    "out_of_range": (
        "{name} must be between {min:g} and {max:g}."
    ),
    "invalid_metal": (
        "Metal selection must be between 0 and {max_index}."
    ),
    "unknown_metal": (
        "Unknown metal '{name}'. Choose one of: {choices}."
    ),
    "no_measurements": (
        "No measurements to export. Please take some measurements first."
    ),
    "invalid_sweep": (
        "Voltage step must be at least {min_step:g} V."
    ),
}
