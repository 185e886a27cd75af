"""
Pytest configuration and shared fixtures for the photoelectric test suite.

This file provides:
- Common test fixtures (catalog metals, valid parameters)
- Seeded and scripted random sources for reproducible noise
- Experiment sessions wired to those sources
"""

import tempfile

import numpy as np
import pytest

from photoelectric.models.catalog import METALS
from photoelectric.models.experiment import (
    ExperimentParameters,
    PhotoelectricExperimentModel,
)
from photoelectric.models.measurement_log import MeasurementLog
from tests.mocks.mock_random import SequenceRandomSource, Z_MINUS_ONE_DRAWS


@pytest.fixture
def sodium():
    """Sodium, the default metal (work function 2.28 eV)."""
    return METALS[0]


@pytest.fixture
def gold():
    """Gold, highest work function in the catalog (5.1 eV)."""
    return METALS[6]


@pytest.fixture
def seeded_rng():
    """Seeded numpy generator for reproducible noise."""
    return np.random.default_rng(42)


@pytest.fixture
def scripted_source():
    """Random source whose every Box-Muller sample has z = -1."""
    return SequenceRandomSource(Z_MINUS_ONE_DRAWS)


@pytest.fixture
def default_params():
    """Default experiment parameters (Sodium, 0.1 cm², 400 nm, intensity 5, 0 V)."""
    return ExperimentParameters.defaults()


@pytest.fixture
def experiment(seeded_rng):
    """Experiment session with seeded noise."""
    return PhotoelectricExperimentModel(random_source=seeded_rng)


@pytest.fixture
def measurement_log():
    """Empty measurement log with the default 0.05 V tolerance."""
    return MeasurementLog()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir
