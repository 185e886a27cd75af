"""
Photoelectric Experiment Model

This model coordinates one simulated photoelectric experiment session.
It owns the parameter snapshot, the light state and the measurement log,
and provides a stable interface for whatever presentation layer drives it.

The experiment model:
- Validates parameter changes against the control ranges
- Recomputes derived quantities when metal or wavelength change
- Takes a measurement on light-on and on every voltage change while lit
- Delegates the physics to photoelectric_model and storage to MeasurementLog
- Provides callbacks for display updates
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Dict, Optional

import numpy as np

from .catalog import Metal, METALS, get_metal, metal_index
from .measurement_log import Measurement, MeasurementLog
from .photoelectric_model import (
    DerivedQuantities,
    derive_quantities,
    photocurrent_ua,
    sample_noisy_readings,
)
from ..config.settings import (
    DEFAULT_EXPERIMENT_PARAMS,
    PARAMETER_RANGES,
    NOISE_CONFIG,
    MEASUREMENT_LOG_CONFIG,
    SWEEP_CONFIG,
    ERROR_MESSAGES,
)
from common.utils import get_logger, get_error

# Module-level logger for the photoelectric experiment
_logger = get_logger("photoelectric")

_PARAMETER_NAMES = {
    "area_cm2": "Area",
    "wavelength_nm": "Wavelength",
    "intensity": "Intensity",
    "voltage": "Voltage",
}


class PhotoelectricExperimentError(Exception):
    """Exception raised for photoelectric experiment specific errors."""
    pass


class ExperimentState(Enum):
    """Light state of the experiment."""
    IDLE = "idle"      # Light off, voltage changes are not measured
    ACTIVE = "active"  # Light on, each voltage change takes a measurement


@dataclass(frozen=True)
class ExperimentParameters:
    """Snapshot of the experiment controls."""
    metal: Metal
    area_cm2: float
    wavelength_nm: float
    intensity: float
    voltage: float

    @classmethod
    def defaults(cls) -> 'ExperimentParameters':
        """Parameters restored on reset."""
        return cls(
            metal=get_metal(DEFAULT_EXPERIMENT_PARAMS["metal_index"]),
            area_cm2=DEFAULT_EXPERIMENT_PARAMS["area_cm2"],
            wavelength_nm=DEFAULT_EXPERIMENT_PARAMS["wavelength_nm"],
            intensity=DEFAULT_EXPERIMENT_PARAMS["intensity"],
            voltage=DEFAULT_EXPERIMENT_PARAMS["voltage"],
        )

    def as_dict(self) -> Dict[str, Any]:
        """Flat dictionary form (metal by index), for display and logging."""
        return {
            "metal_index": metal_index(self.metal),
            "area_cm2": self.area_cm2,
            "wavelength_nm": self.wavelength_nm,
            "intensity": self.intensity,
            "voltage": self.voltage,
        }


def validate_parameter(key: str, value: Any) -> float:
    """
    Check a numeric control value against its range.

    Args:
        key: Parameter name (a PARAMETER_RANGES key)
        value: Raw value (number or numeric string)

    Returns:
        float: The value as a float

    Raises:
        PhotoelectricExperimentError: If the value is not a number or out of range
    """
    name = _PARAMETER_NAMES.get(key, key)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise PhotoelectricExperimentError(
            ERROR_MESSAGES["invalid_number"].format(name=name)
        )

    bounds = PARAMETER_RANGES[key]
    # np.isfinite rejects nan, which would slip past both comparisons
    if not np.isfinite(number) or not (bounds["min"] <= number <= bounds["max"]):
        raise PhotoelectricExperimentError(
            ERROR_MESSAGES["out_of_range"].format(
                name=name, min=bounds["min"], max=bounds["max"]
            )
        )
    return number


def generate_voltage_array(start: float, stop: float, step: float) -> np.ndarray:
    """
    Generate voltage points for a sweep, with the stop voltage included.

    Args:
        start: Start voltage in V
        stop: Stop voltage in V
        step: Step size in V (at least the voltage slider step;
            direction follows start/stop)

    Returns:
        np.ndarray: Voltage points rounded to the slider resolution

    Raises:
        PhotoelectricExperimentError: If the step is finer than the slider step
    """
    # Finer steps would land inside the log's matching window and
    # overwrite the previous point
    min_step = PARAMETER_RANGES["voltage"]["step"]
    if not step >= min_step:
        raise PhotoelectricExperimentError(
            ERROR_MESSAGES["invalid_sweep"].format(min_step=min_step)
        )
    if stop < start:
        step = -step

    n_steps = int(np.floor((stop - start) / step + 1e-9))
    voltages = start + step * np.arange(n_steps + 1)
    if not np.isclose(voltages[-1], stop):
        if abs(stop - voltages[-1]) < MEASUREMENT_LOG_CONFIG["voltage_tolerance"]:
            voltages[-1] = stop
        else:
            voltages = np.append(voltages, stop)

    return np.round(voltages, decimals=SWEEP_CONFIG.get("voltage_decimals", 2))


class PhotoelectricExperimentModel:
    """
    High-level model for one photoelectric experiment session.

    The session is owned by its caller. Physics stays in pure functions;
    this class only holds state and decides when to measure.
    """

    def __init__(
        self,
        random_source: Optional[np.random.Generator] = None,
        log: Optional[MeasurementLog] = None,
    ):
        """
        Initialize the experiment model.

        Args:
            random_source: Uniform random source for instrument noise
                (an unseeded numpy Generator by default)
            log: Measurement log to record into (a new one by default)
        """
        if random_source is None:
            random_source = np.random.default_rng()
        self.random_source = random_source
        self.log = log if log is not None else MeasurementLog()
        self.params = ExperimentParameters.defaults()
        self.state = ExperimentState.IDLE

        # Callbacks
        self._measurement_callback: Optional[Callable[[Measurement], None]] = None
        self._state_callback: Optional[Callable[[ExperimentState], None]] = None
        self._derived_callback: Optional[Callable[[DerivedQuantities], None]] = None

    def set_measurement_callback(
        self,
        callback: Optional[Callable[[Measurement], None]]
    ) -> None:
        """
        Set callback for each new measurement (table and chart updates).

        Args:
            callback: Function(measurement)
        """
        self._measurement_callback = callback

    def set_state_callback(
        self,
        callback: Optional[Callable[[ExperimentState], None]]
    ) -> None:
        """
        Set callback for light state changes.

        Args:
            callback: Function(state)
        """
        self._state_callback = callback

    def set_derived_callback(
        self,
        callback: Optional[Callable[[DerivedQuantities], None]]
    ) -> None:
        """
        Set callback for derived quantity updates.

        Args:
            callback: Function(derived_quantities)
        """
        self._derived_callback = callback

    def is_light_on(self) -> bool:
        """Check if the light is on."""
        return self.state is ExperimentState.ACTIVE

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    def select_metal(self, index: int) -> None:
        """
        Select the photocathode metal by catalog index.

        Raises:
            PhotoelectricExperimentError: If the index is not in the catalog
        """
        try:
            metal = get_metal(int(index))
        except (TypeError, ValueError, IndexError):
            raise PhotoelectricExperimentError(
                ERROR_MESSAGES["invalid_metal"].format(max_index=len(METALS) - 1)
            )
        self.params = replace(self.params, metal=metal)
        _logger.debug(f"Metal set to {metal.name} (Φ = {metal.work_function_ev} eV)")
        self._notify_derived()

    def set_area(self, area_cm2: Any) -> None:
        """Set the illuminated area in cm²."""
        self.params = replace(self.params, area_cm2=validate_parameter("area_cm2", area_cm2))

    def set_wavelength(self, wavelength_nm: Any) -> None:
        """Set the light wavelength in nm."""
        self.params = replace(
            self.params,
            wavelength_nm=validate_parameter("wavelength_nm", wavelength_nm),
        )
        self._notify_derived()

    def set_intensity(self, intensity: Any) -> None:
        """Set the light intensity."""
        self.params = replace(self.params, intensity=validate_parameter("intensity", intensity))

    def set_voltage(self, voltage: Any) -> Optional[Measurement]:
        """
        Set the retarding voltage.

        Returns:
            Optional[Measurement]: The new measurement if the light is on
        """
        self.params = replace(self.params, voltage=validate_parameter("voltage", voltage))
        if self.is_light_on():
            return self.take_measurement()
        return None

    def set_parameters(self, **params) -> None:
        """
        Set several parameters at once.

        Accepts metal_index, area_cm2, wavelength_nm, intensity and voltage.
        Voltage is applied last so a measurement sees the other new values.

        Raises:
            PhotoelectricExperimentError: On an unknown name or invalid value
        """
        setters = {
            "metal_index": self.select_metal,
            "area_cm2": self.set_area,
            "wavelength_nm": self.set_wavelength,
            "intensity": self.set_intensity,
        }
        unknown = set(params) - set(setters) - {"voltage"}
        if unknown:
            raise PhotoelectricExperimentError(
                f"Unknown parameter(s): {', '.join(sorted(unknown))}"
            )

        for key, value in params.items():
            if key in setters:
                setters[key](value)
        if "voltage" in params:
            self.set_voltage(params["voltage"])

    def get_parameters(self) -> ExperimentParameters:
        """Get the current parameter snapshot."""
        return self.params

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def derived_quantities(self) -> DerivedQuantities:
        """Threshold wavelength, photon energy and stopping potential."""
        return derive_quantities(self.params.metal, self.params.wavelength_nm)

    def current_photocurrent(self) -> float:
        """Noise-free photocurrent (µA) for the current parameters."""
        p = self.params
        return photocurrent_ua(p.metal, p.wavelength_nm, p.intensity, p.area_cm2, p.voltage)

    def is_emitting(self) -> bool:
        """Check if electrons currently reach the collector."""
        return self.is_light_on() and self.current_photocurrent() > 0

    # ------------------------------------------------------------------
    # Light and measurement
    # ------------------------------------------------------------------

    def turn_light_on(self) -> Measurement:
        """
        Switch the light on and take a measurement at the current voltage.

        Returns:
            Measurement: The measurement taken on switching on
        """
        if not self.is_light_on():
            self._set_state(ExperimentState.ACTIVE)
            _logger.student("Experiment active - adjust voltage to take measurements")
        return self.take_measurement()

    def turn_light_off(self) -> None:
        """Switch the light off. Measurements are kept."""
        if self.is_light_on():
            self._set_state(ExperimentState.IDLE)
            _logger.student("Light OFF - switch on to begin measurements")

    def toggle_light(self) -> Optional[Measurement]:
        """
        Toggle the light.

        Returns:
            Optional[Measurement]: The measurement taken if the light came on
        """
        if self.is_light_on():
            self.turn_light_off()
            return None
        return self.turn_light_on()

    def take_measurement(self) -> Measurement:
        """
        Measure the photocurrent at the current parameters.

        Samples noisy readings around the true current and records
        them in the log.

        Returns:
            Measurement: The recorded measurement
        """
        true_current = self.current_photocurrent()
        readings = sample_noisy_readings(
            true_current,
            count=NOISE_CONFIG["readings_per_measurement"],
            relative_std_dev=NOISE_CONFIG["relative_std_dev"],
            random_source=self.random_source,
        )
        measurement = self.log.record(self.params.voltage, readings)

        _logger.debug(
            f"True current {true_current:.4f} µA at {self.params.voltage:.2f} V, "
            f"{len(self.log)} points logged"
        )
        _logger.student_stats(measurement.statistics())

        if true_current == 0 and self.params.voltage <= 0:
            error = get_error("no_photocurrent")
            if error:
                _logger.student(f"{error.title}: {error.message}")

        if self._measurement_callback:
            self._measurement_callback(measurement)
        return measurement

    def run_voltage_sweep(self, start: float, stop: float, step: float) -> MeasurementLog:
        """
        Switch the light on and step the voltage through a range.

        Args:
            start: Start voltage in V
            stop: Stop voltage in V (inclusive)
            step: Step size in V

        Returns:
            MeasurementLog: The session log after the sweep

        Raises:
            PhotoelectricExperimentError: If any voltage is out of range
        """
        voltages = generate_voltage_array(start, stop, step)
        for voltage in voltages:
            validate_parameter("voltage", voltage)

        _logger.debug(f"Sweep parameters: {self.params.as_dict()}")
        _logger.info(
            f"Voltage sweep {start:.2f} V to {stop:.2f} V ({len(voltages)} points), "
            f"{self.params.metal.name} at {self.params.wavelength_nm:g} nm"
        )

        # One measurement at the first point, whether or not the light was on
        self.set_voltage(float(voltages[0]))
        if not self.is_light_on():
            self.turn_light_on()
        for voltage in voltages[1:]:
            self.set_voltage(float(voltage))
        return self.log

    def reset(self) -> None:
        """Clear the log, restore default parameters and switch the light off."""
        self.log.clear()
        self.params = ExperimentParameters.defaults()
        self._set_state(ExperimentState.IDLE)
        _logger.student("Select parameters and switch on light to begin experiment")
        self._notify_derived()

    def _set_state(self, state: ExperimentState) -> None:
        """Change light state and notify."""
        self.state = state
        if self._state_callback:
            self._state_callback(state)

    def _notify_derived(self) -> None:
        """Publish derived quantities after a metal or wavelength change."""
        if self._derived_callback:
            self._derived_callback(self.derived_quantities())
