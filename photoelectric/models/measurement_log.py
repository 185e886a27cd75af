"""
Measurement Log

Ordered record of averaged photocurrent measurements, one per voltage
point. Re-measuring a voltage (within the slider quantization tolerance)
replaces the earlier point instead of adding a duplicate row.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from ..config.settings import MEASUREMENT_LOG_CONFIG
from common.utils import MeasurementStats


class MeasurementLogError(Exception):
    """Exception raised for measurement log specific errors."""
    pass


@dataclass(frozen=True)
class Measurement:
    """One voltage point: the raw readings and their average."""
    voltage: float
    average_current_ua: float
    readings: Tuple[float, ...]

    def statistics(self) -> MeasurementStats:
        """Summarize the spread of the raw readings."""
        values = np.array(self.readings)
        std = float(np.std(values, ddof=1)) if len(values) > 1 else 0.0
        mean = self.average_current_ua
        cv_percent = (std / mean * 100) if mean != 0 else 0.0
        return MeasurementStats(
            mean=mean,
            std_dev=std,
            n_measurements=len(values),
            cv_percent=cv_percent,
            voltage=self.voltage,
            unit="µA",
        )


class MeasurementLog:
    """
    Measurements sorted ascending by voltage.

    Two entries never share a voltage within ``tolerance``: recording a
    voltage close to an existing entry replaces that entry in place.
    """

    def __init__(self, tolerance: Optional[float] = None):
        """
        Initialize an empty log.

        Args:
            tolerance: Voltage matching window in V
                (uses MEASUREMENT_LOG_CONFIG by default)
        """
        if tolerance is None:
            tolerance = MEASUREMENT_LOG_CONFIG["voltage_tolerance"]
        self.tolerance = tolerance
        self._measurements: List[Measurement] = []
        self._latest: Optional[Measurement] = None

    def record(self, voltage: float, readings: Sequence[float]) -> Measurement:
        """
        Store a measurement taken at a voltage.

        The first existing entry within the tolerance window is replaced
        in place. Otherwise the new entry is added and the log re-sorted.

        Args:
            voltage: Applied voltage in V
            readings: Raw current readings in µA

        Returns:
            Measurement: The stored measurement

        Raises:
            MeasurementLogError: If readings is empty
        """
        if len(readings) == 0:
            raise MeasurementLogError("Cannot record a measurement without readings")

        readings = tuple(float(r) for r in readings)
        measurement = Measurement(
            voltage=float(voltage),
            average_current_ua=float(np.mean(readings)),
            readings=readings,
        )

        index = self.find_index(voltage)
        if index is not None:
            self._measurements[index] = measurement
        else:
            self._measurements.append(measurement)
            self._measurements.sort(key=lambda m: m.voltage)

        self._latest = measurement
        return measurement

    def find_index(self, voltage: float) -> Optional[int]:
        """Index of the first entry within tolerance of a voltage, or None."""
        for i, measurement in enumerate(self._measurements):
            if abs(measurement.voltage - voltage) < self.tolerance:
                return i
        return None

    def clear(self) -> None:
        """Remove all measurements."""
        self._measurements.clear()
        self._latest = None

    @property
    def measurements(self) -> List[Measurement]:
        """Copy of the stored measurements in voltage order."""
        return list(self._measurements)

    @property
    def latest(self) -> Optional[Measurement]:
        """Most recently recorded measurement."""
        return self._latest

    def voltages(self) -> np.ndarray:
        """Voltages of all points (chart x values)."""
        return np.array([m.voltage for m in self._measurements])

    def average_currents(self) -> np.ndarray:
        """Averaged currents of all points (chart y values)."""
        return np.array([m.average_current_ua for m in self._measurements])

    def observed_stopping_potential(
        self,
        threshold_ua: Optional[float] = None,
    ) -> Optional[float]:
        """
        Lowest measured voltage at which the averaged current vanished.

        This is an empirical reading from noisy data and is reported
        separately from the theoretical stopping potential.

        Args:
            threshold_ua: Current below which a point counts as zero
                (uses MEASUREMENT_LOG_CONFIG by default)

        Returns:
            Optional[float]: Voltage in V, or None if no point qualifies
        """
        if threshold_ua is None:
            threshold_ua = MEASUREMENT_LOG_CONFIG["zero_current_threshold_ua"]
        for measurement in self._measurements:
            if measurement.average_current_ua < threshold_ua:
                return measurement.voltage
        return None

    def __len__(self) -> int:
        return len(self._measurements)

    def __iter__(self) -> Iterator[Measurement]:
        return iter(list(self._measurements))
