"""
Unit tests for the synthetic instrument noise.

Tests Box-Muller sampling, zero-draw resampling, clamping, and the
statistical shape of sample_noisy_readings().
"""

import numpy as np
import pytest

from photoelectric.models.photoelectric_model import (
    gaussian_sample,
    sample_noisy_readings,
)
from tests.mocks.mock_random import SequenceRandomSource, ConstantRandomSource


class TestGaussianSample:
    """Tests for gaussian_sample()"""

    def test_scripted_draws(self, scripted_source):
        """u = e^-0.5 and v = 0.5 give z = -1."""
        sample = gaussian_sample(10.0, 0.5, scripted_source)
        assert sample == pytest.approx(9.5)
        assert scripted_source.calls == 2

    def test_positive_z(self):
        """v close to 0 gives cos ~ 1, so z = +1 for u = e^-0.5."""
        source = SequenceRandomSource([np.exp(-0.5), 1e-12])
        assert gaussian_sample(10.0, 0.5, source) == pytest.approx(10.5)

    def test_zero_draws_resampled(self):
        """Exact zeros are redrawn for both u and v."""
        source = SequenceRandomSource([0.0, 0.0, np.exp(-0.5), 0.0, 0.5])
        sample = gaussian_sample(10.0, 1.0, source)

        assert sample == pytest.approx(9.0)
        assert source.calls == 5

    def test_zero_std_returns_mean(self):
        """Zero spread means the sample is the mean."""
        source = ConstantRandomSource(0.3)
        assert gaussian_sample(4.2, 0.0, source) == pytest.approx(4.2)


class TestSampleNoisyReadings:
    """Tests for sample_noisy_readings()"""

    def test_default_count(self, seeded_rng):
        """Ten readings per measurement by default."""
        readings = sample_noisy_readings(5.0, random_source=seeded_rng)
        assert len(readings) == 10
        assert all(isinstance(r, float) for r in readings)

    def test_custom_count(self, seeded_rng):
        readings = sample_noisy_readings(5.0, count=3, random_source=seeded_rng)
        assert len(readings) == 3

    def test_zero_current_gives_all_zeros(self, seeded_rng):
        """Mean 0 and std 0 produce zeros whatever the draws."""
        readings = sample_noisy_readings(0.0, random_source=seeded_rng)
        assert readings == [0.0] * 10

    def test_five_percent_noise(self, scripted_source):
        """Default relative noise is 5% of the true current."""
        readings = sample_noisy_readings(5.0, count=4, random_source=scripted_source)
        assert readings == pytest.approx([4.75] * 4)

    def test_negative_samples_clamped(self, scripted_source):
        """Readings below zero are clamped (current cannot be negative)."""
        readings = sample_noisy_readings(
            1.0, count=2, relative_std_dev=2.0, random_source=scripted_source
        )
        assert readings == [0.0, 0.0]

    def test_reproducible_with_seed(self):
        """Same seed, same readings."""
        first = sample_noisy_readings(5.0, random_source=np.random.default_rng(7))
        second = sample_noisy_readings(5.0, random_source=np.random.default_rng(7))
        assert first == second

    def test_unseeded_default_source(self):
        """Works without an explicit random source."""
        readings = sample_noisy_readings(5.0)
        assert len(readings) == 10
        assert all(r >= 0 for r in readings)

    def test_gaussian_statistics(self, seeded_rng):
        """Large sample has mean ~ true current and std ~ 5% of it."""
        readings = np.array(
            sample_noisy_readings(5.0, count=20000, random_source=seeded_rng)
        )

        assert readings.mean() == pytest.approx(5.0, abs=0.01)
        assert readings.std() == pytest.approx(0.25, rel=0.05)
        # Roughly 68% within one standard deviation
        within = np.mean(np.abs(readings - 5.0) < 0.25)
        assert 0.66 < within < 0.70
