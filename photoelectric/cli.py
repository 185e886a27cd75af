"""
Photoelectric Simulator Command Line

Runs a simulated voltage sweep for one metal and wavelength, prints the
derived quantities and the measured I-V table, and optionally saves CSV.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np

from .config.settings import DEFAULT_EXPERIMENT_PARAMS, SWEEP_CONFIG, ERROR_MESSAGES
from .models.catalog import METALS, find_metal, metal_index, wavelength_band
from .models.experiment import PhotoelectricExperimentModel, PhotoelectricExperimentError
from .utils.data_export import PhotoelectricDataExporter, DataExportError
from common.utils import TieredLogger, get_logger, get_error, format_error_message

_logger = get_logger("photoelectric")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="photoelectric",
        description="Photoelectric Effect Simulator - simulated I-V sweep",
    )
    choices = ", ".join(f"{i}={m.name} ({m.symbol})" for i, m in enumerate(METALS))
    parser.add_argument(
        '--metal',
        default=str(DEFAULT_EXPERIMENT_PARAMS["metal_index"]),
        help=f'Metal by index, name or symbol: {choices}'
    )
    parser.add_argument(
        '--wavelength', type=float,
        default=DEFAULT_EXPERIMENT_PARAMS["wavelength_nm"],
        help='Wavelength in nm'
    )
    parser.add_argument(
        '--intensity', type=float,
        default=DEFAULT_EXPERIMENT_PARAMS["intensity"],
        help='Light intensity (W/m²)'
    )
    parser.add_argument(
        '--area', type=float,
        default=DEFAULT_EXPERIMENT_PARAMS["area_cm2"],
        help='Illuminated area in cm²'
    )
    parser.add_argument(
        '--start', type=float, default=SWEEP_CONFIG["start_voltage"],
        help='Sweep start voltage (V)'
    )
    parser.add_argument(
        '--stop', type=float, default=SWEEP_CONFIG["stop_voltage"],
        help='Sweep stop voltage (V), inclusive'
    )
    parser.add_argument(
        '--step', type=float, default=SWEEP_CONFIG["step_voltage"],
        help='Sweep step (V)'
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Seed for the instrument noise (reproducible runs)'
    )
    parser.add_argument(
        '--output', '-o', default=None,
        help='CSV file to save; a directory gets a timestamped filename'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Show debug messages in the console (staff mode)'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the command-line simulator.

    Returns:
        int: Process exit code (0 success, 2 bad parameters, 1 export failure)
    """
    args = build_parser().parse_args(argv)
    TieredLogger.set_staff_debug_mode(args.debug)

    experiment = PhotoelectricExperimentModel(random_source=np.random.default_rng(args.seed))
    try:
        metal = find_metal(args.metal)
    except KeyError:
        print(ERROR_MESSAGES["unknown_metal"].format(
            name=args.metal, choices=", ".join(m.name for m in METALS)
        ), file=sys.stderr)
        return 2

    try:
        experiment.set_parameters(
            metal_index=metal_index(metal),
            wavelength_nm=args.wavelength,
            intensity=args.intensity,
            area_cm2=args.area,
        )
        derived = experiment.derived_quantities()
        band = wavelength_band(args.wavelength)
        print(f"Metal: {metal.name} ({metal.symbol}), work function {metal.work_function_ev:.2f} eV")
        print(f"Wavelength: {args.wavelength:g} nm ({band.label})")
        print(f"Threshold wavelength: {derived.threshold_wavelength_nm:.0f} nm")
        print(f"Photon energy: {derived.photon_energy_ev:.2f} eV")
        print(f"Stopping potential: {derived.stopping_potential_v:.2f} V")

        log = experiment.run_voltage_sweep(args.start, args.stop, args.step)
    except PhotoelectricExperimentError as e:
        error = get_error("invalid_parameter")
        if error:
            _logger.student_error(error.title, str(e), error.causes, error.actions)
        return 2

    print()
    print(f"{'Voltage (V)':>12}  {'Current (µA)':>14}")
    for measurement in log:
        print(f"{measurement.voltage:>12.2f}  {measurement.average_current_ua:>14.3f}")

    observed = log.observed_stopping_potential()
    if observed is not None:
        print(f"\nObserved stopping potential: {observed:.2f} V")

    if args.output and save_session(experiment, args.output) is None:
        return 1

    return 0


def save_session(
    experiment: PhotoelectricExperimentModel,
    output: str,
) -> Optional[Path]:
    """
    Save the session log as CSV, reporting failures to the student.

    Args:
        experiment: Session to export
        output: Target file, or a directory for a timestamped filename

    Returns:
        Optional[Path]: The written file, or None if nothing was saved
    """
    exporter = PhotoelectricDataExporter()
    target = Path(output)
    if target.is_dir():
        target = target / exporter.generate_filename()
    try:
        path = exporter.save(experiment.get_parameters(), experiment.log, target)
    except DataExportError as e:
        _logger.error(f"Export to {target} failed: {e}")
        error = get_error("no_data" if len(experiment.log) == 0 else "data_save_failed")
        if error:
            _logger.student_error(error.title, str(e), error.causes, error.actions)
            print(format_error_message(error), file=sys.stderr)
        return None
    _logger.student(f"Data exported to {path}")
    return path


if __name__ == "__main__":
    sys.exit(main())
