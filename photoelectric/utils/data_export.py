"""
Photoelectric Data Export Utility

Handles saving a measurement log to CSV with a header block describing
the experiment setup.
"""

import datetime
import io
from pathlib import Path
from typing import List, Optional

import pandas as pd

from ..models.experiment import ExperimentParameters
from ..models.measurement_log import MeasurementLog
from ..config.settings import DATA_EXPORT_CONFIG, NOISE_CONFIG, ERROR_MESSAGES


class DataExportError(Exception):
    """Exception raised for data export errors."""
    pass


class PhotoelectricDataExporter:
    """
    Utility class for exporting photoelectric measurements to CSV files.

    File layout:
    - Header block: title, material, work function, wavelength, intensity, area
    - Table: voltage, average current, then each individual reading
    - Footer (when found): observed stopping potential
    """

    def __init__(self, config: Optional[dict] = None):
        """
        Initialize the data exporter.

        Args:
            config: Optional configuration override
        """
        self.config = config or DATA_EXPORT_CONFIG.copy()

    def generate_filename(self, now: Optional[datetime.datetime] = None) -> str:
        """
        Generate a timestamped filename.

        Args:
            now: Timestamp to use (defaults to the current time)

        Returns:
            str: Generated filename
        """
        now = now or datetime.datetime.now()
        date_format = self.config.get("date_format", "%Y_%m_%d_%H%M%S")
        template = self.config.get("file_template", "photoelectric_experiment_{date}.csv")
        return template.format(date=now.strftime(date_format))

    def column_headers(self, n_readings: int) -> List[str]:
        """Table column headers for a given number of readings."""
        headers = self.config.get("headers", {})
        reading_header = headers.get("reading", "Reading {n}")
        return [
            headers.get("voltage", "Voltage (V)"),
            headers.get("average_current", "Average Current (µA)"),
        ] + [reading_header.format(n=n) for n in range(1, n_readings + 1)]

    def to_dataframe(self, log: MeasurementLog) -> pd.DataFrame:
        """
        Convert a measurement log to a pandas DataFrame.

        Args:
            log: Measurement log

        Returns:
            pd.DataFrame: One row per voltage point
        """
        n_readings = max(
            (len(m.readings) for m in log),
            default=NOISE_CONFIG["readings_per_measurement"],
        )
        columns = self.column_headers(n_readings)
        rows = [
            [m.voltage, m.average_current_ua] + list(m.readings)
            for m in log
        ]
        return pd.DataFrame(rows, columns=columns)

    def header_lines(self, params: ExperimentParameters) -> List[str]:
        """Setup description written above the data table."""
        metal = params.metal
        return [
            self.config.get("title", "Photoelectric Effect Experiment Data"),
            f"Material: {metal.name} ({metal.symbol})",
            f"Work Function: {metal.work_function_ev:g} eV",
            f"Wavelength: {params.wavelength_nm:g} nm",
            f"Intensity: {params.intensity:g} W/m²",
            f"Area: {params.area_cm2:g} cm²",
        ]

    def export_to_string(self, params: ExperimentParameters, log: MeasurementLog) -> str:
        """
        Render the CSV text for a session.

        Args:
            params: Parameters at export time (for the header block)
            log: Measurement log

        Returns:
            str: CSV file contents

        Raises:
            DataExportError: If the log is empty
        """
        if len(log) == 0:
            raise DataExportError(ERROR_MESSAGES["no_measurements"])

        voltage_precision = self.config.get("voltage_precision", 1)
        current_precision = self.config.get("current_precision", 3)

        data = self.to_dataframe(log)
        voltage_column = data.columns[0]
        formatted = pd.DataFrame(index=data.index)
        formatted[voltage_column] = data[voltage_column].map(
            lambda v: f"{v:.{voltage_precision}f}"
        )
        for column in data.columns[1:]:
            formatted[column] = data[column].map(lambda i: f"{i:.{current_precision}f}")

        buffer = io.StringIO()
        buffer.write("\n".join(self.header_lines(params)) + "\n\n")
        formatted.to_csv(
            buffer,
            index=False,
            sep=self.config.get("csv_delimiter", ","),
            lineterminator="\n",
        )

        observed = log.observed_stopping_potential()
        if observed is not None:
            label = self.config.get("observed_stopping_label", "Observed Stopping Potential")
            precision = self.config.get("stopping_potential_precision", 2)
            buffer.write(f"\n{label}: {observed:.{precision}f} V\n")

        return buffer.getvalue()

    def save(
        self,
        params: ExperimentParameters,
        log: MeasurementLog,
        file_path: str,
    ) -> Path:
        """
        Save a session to a CSV file, creating parent directories.

        Args:
            params: Parameters at export time
            log: Measurement log
            file_path: Path to save the CSV file

        Returns:
            Path: The written file

        Raises:
            DataExportError: If the log is empty or the file cannot be written
        """
        contents = self.export_to_string(params, log)
        path = Path(file_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(contents, encoding="utf-8")
        except OSError as e:
            raise DataExportError(f"Failed to export CSV: {e}")
        return path
