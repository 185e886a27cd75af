"""
Unit tests for the photoelectric physics functions.

Tests threshold wavelength, photon energy, stopping potential and the
photocurrent model, including the threshold and cutoff boundaries.
"""

import pytest
from numpy.testing import assert_almost_equal

from photoelectric.models.catalog import Metal, METALS
from photoelectric.models.photoelectric_model import (
    HC_EV_M,
    threshold_wavelength,
    photon_energy_ev,
    stopping_potential,
    derive_quantities,
    photocurrent_ua,
)


class TestThresholdWavelength:
    """Tests for threshold_wavelength()"""

    def test_sodium_threshold(self, sodium):
        """Sodium threshold is hc/2.28 eV, about 544 nm."""
        wavelength_m = threshold_wavelength(sodium)
        assert_almost_equal(wavelength_m, 4.136e-15 * 3e8 / 2.28)
        assert wavelength_m * 1e9 == pytest.approx(544.2, abs=0.1)

    def test_returned_in_meters(self, gold):
        """Threshold wavelength is returned in meters, not nm."""
        assert 1e-7 < threshold_wavelength(gold) < 1e-6

    def test_higher_work_function_shorter_threshold(self):
        """Metals that bind electrons harder need shorter wavelengths."""
        ordered = sorted(METALS, key=lambda m: m.work_function_ev)
        thresholds = [threshold_wavelength(m) for m in ordered]
        assert thresholds == sorted(thresholds, reverse=True)


class TestPhotonEnergy:
    """Tests for photon_energy_ev()"""

    def test_400nm(self):
        """400 nm photon carries about 3.10 eV."""
        assert photon_energy_ev(400) == pytest.approx(3.102, abs=1e-3)

    def test_inverse_with_wavelength(self):
        """Halving the wavelength doubles the energy."""
        assert photon_energy_ev(200) == pytest.approx(2 * photon_energy_ev(400))

    def test_energy_at_threshold_equals_work_function(self, sodium):
        """Light at the threshold wavelength has exactly the work function energy."""
        wavelength_nm = threshold_wavelength(sodium) * 1e9
        assert photon_energy_ev(wavelength_nm) == pytest.approx(sodium.work_function_ev)


class TestStoppingPotential:
    """Tests for stopping_potential()"""

    def test_sodium_400nm(self, sodium):
        """Sodium at 400 nm: 3.10 - 2.28 = 0.82 V."""
        assert stopping_potential(sodium, 400) == pytest.approx(0.822, abs=1e-3)

    def test_zero_below_threshold(self, gold):
        """Gold (5.1 eV) does not emit at 400 nm."""
        assert stopping_potential(gold, 400) == 0.0

    @pytest.mark.parametrize("wavelength_nm", [100, 250, 400, 550, 700])
    def test_never_negative(self, wavelength_nm):
        """Stopping potential is never negative for any metal."""
        for metal in METALS:
            assert stopping_potential(metal, wavelength_nm) >= 0.0

    def test_zero_when_energy_equals_work_function(self):
        """No kinetic energy left when photon energy equals the work function."""
        metal = Metal("Test", "Ts", photon_energy_ev(500), "#000000")
        assert stopping_potential(metal, 500) == 0.0


class TestDeriveQuantities:
    """Tests for derive_quantities()"""

    def test_sodium_400nm(self, sodium):
        derived = derive_quantities(sodium, 400)

        assert derived.threshold_wavelength_nm == pytest.approx(HC_EV_M / 2.28 * 1e9)
        assert derived.photon_energy_ev == pytest.approx(3.102, abs=1e-3)
        assert derived.stopping_potential_v == pytest.approx(0.822, abs=1e-3)


class TestPhotocurrent:
    """Tests for photocurrent_ua()"""

    def test_sodium_zero_voltage(self, sodium):
        """Sodium, 400 nm, area 0.1, intensity 5, 0 V gives 5 µA."""
        current = photocurrent_ua(sodium, 400, intensity=5, area_cm2=0.1, voltage=0)
        assert current == pytest.approx(5.0)

    def test_above_stopping_potential_is_zero(self, sodium):
        """1.0 V exceeds the 0.82 V stopping potential."""
        assert photocurrent_ua(sodium, 400, 5, 0.1, 1.0) == 0.0

    def test_threshold_boundary_gives_zero(self):
        """Photon energy exactly equal to the work function emits nothing."""
        metal = Metal("Test", "Ts", photon_energy_ev(500), "#000000")
        assert photocurrent_ua(metal, 500, intensity=10, area_cm2=1.0, voltage=-5) == 0.0

    def test_below_threshold_ignores_intensity(self, gold):
        """Below threshold, no intensity produces current."""
        assert photocurrent_ua(gold, 400, intensity=10, area_cm2=1.0, voltage=-5) == 0.0

    def test_cutoff_at_stopping_potential(self, sodium):
        """Exactly at the stopping potential the current is zero."""
        v_stop = stopping_potential(sodium, 400)
        assert photocurrent_ua(sodium, 400, 5, 0.1, v_stop) == 0.0

    def test_just_below_stopping_potential_positive(self, sodium):
        """Just below the stopping potential some current still flows."""
        v_stop = stopping_potential(sodium, 400)
        assert photocurrent_ua(sodium, 400, 5, 0.1, v_stop - 1e-9) > 0.0

    def test_voltage_factor_linear(self, sodium):
        """Current scales with 1 + V/V_stop."""
        v_stop = stopping_potential(sodium, 400)
        assert photocurrent_ua(sodium, 400, 5, 0.1, v_stop / 2) == pytest.approx(7.5)
        assert photocurrent_ua(sodium, 400, 5, 0.1, -v_stop / 2) == pytest.approx(2.5)

    def test_factor_clamped_at_zero(self, sodium):
        """Voltage below -V_stop gives zero, never negative current."""
        assert photocurrent_ua(sodium, 400, 5, 0.1, -1.0) == 0.0

    def test_proportional_to_intensity_and_area(self, sodium):
        """Doubling intensity or area doubles the current."""
        base = photocurrent_ua(sodium, 300, 2, 0.2, 0.0)
        assert photocurrent_ua(sodium, 300, 4, 0.2, 0.0) == pytest.approx(2 * base)
        assert photocurrent_ua(sodium, 300, 2, 0.4, 0.0) == pytest.approx(2 * base)

    def test_zero_intensity(self, sodium):
        """No light, no current."""
        assert photocurrent_ua(sodium, 400, 0, 0.1, 0.0) == 0.0
