"""Tests for psychro/processes.py"""

import unittest

import pytest

from psychro.core.exceptions import InvalidInputError, SupersaturatedStateError
from psychro.physics.properties import saturation_humidity_ratio
from psychro.physics.thermal import calculate_air_mass_flow
from psychro.processes import (
    ProcessType,
    PsychrometricProcess,
    cooling_dehumidification,
    evaporative_cooling,
    mix_air_fractions,
    mix_air_streams,
    mixing_process,
    sensible_process,
)
from psychro.state import (
    from_dry_bulb_humidity_ratio,
    from_dry_bulb_relative_humidity,
)


class TestSensibleProcess(unittest.TestCase):
    """Tests for constant humidity ratio heating and cooling."""

    def setUp(self):
        self.inlet = from_dry_bulb_humidity_ratio(70.0, 0.008)

    def test_sensible_cooling_70_to_55(self):
        """Test sensible heat is 0.24 × (55 - 70) = -3.6 BTU/lb."""
        process = sensible_process(self.inlet, 55.0)
        self.assertEqual(process.process_type, ProcessType.SENSIBLE_COOLING)
        self.assertEqual(process.name, "Sensible Cooling")
        self.assertAlmostEqual(process.sensible_heat, -3.6, places=10)
        self.assertEqual(process.latent_heat, 0.0)
        self.assertAlmostEqual(process.total_heat, -3.6, places=10)
        self.assertEqual(process.outlet.humidity_ratio, 0.008)

    def test_sensible_heating(self):
        """Test heating raises dry bulb and lowers RH."""
        process = sensible_process(self.inlet, 90.0)
        self.assertEqual(process.process_type, ProcessType.SENSIBLE_HEATING)
        self.assertAlmostEqual(process.sensible_heat, 4.8, places=10)
        self.assertLess(
            process.outlet.relative_humidity_pct, process.inlet.relative_humidity_pct
        )

    def test_no_temperature_change(self):
        """Test a target equal to the inlet is zero-heat sensible heating."""
        process = sensible_process(self.inlet, 70.0)
        self.assertEqual(process.process_type, ProcessType.SENSIBLE_HEATING)
        self.assertEqual(process.sensible_heat, 0.0)
        self.assertEqual(process.total_heat, 0.0)
        self.assertEqual(process.outlet.dry_bulb_f, self.inlet.dry_bulb_f)

    def test_cooling_below_dew_point(self):
        """Test sensible cooling past the dew point is supersaturated."""
        with self.assertRaises(SupersaturatedStateError):
            sensible_process(self.inlet, 45.0)

    def test_heat_units(self):
        """Test process heat is documented per pound of dry air."""
        self.assertEqual(PsychrometricProcess.HEAT_UNITS, "BTU/lb dry air")


class TestCoolingDehumidification(unittest.TestCase):
    """Tests for the bypass factor coil model."""

    def setUp(self):
        self.inlet = from_dry_bulb_relative_humidity(80.0, 50.0)

    def test_coil_80_50(self):
        """Test 80°F/50% air over a 50°F coil with 0.1 bypass."""
        process = cooling_dehumidification(self.inlet, 50.0, 0.1)
        self.assertEqual(process.process_type, ProcessType.COOLING_DEHUMIDIFICATION)
        self.assertAlmostEqual(process.outlet.dry_bulb_f, 53.0, delta=1.0)
        self.assertAlmostEqual(process.outlet.humidity_ratio, 0.007959, delta=1e-5)
        self.assertAlmostEqual(process.outlet.relative_humidity_pct, 93.3, delta=0.2)
        self.assertLess(process.latent_heat, 0.0)
        self.assertAlmostEqual(process.latent_heat, -3.146, delta=0.01)
        self.assertAlmostEqual(process.sensible_heat, -6.48, places=6)
        self.assertAlmostEqual(
            process.total_heat, process.sensible_heat + process.latent_heat, places=10
        )
        self.assertLess(process.moisture_change, 0.0)

    def test_default_bypass_factor(self):
        """Test the bypass factor defaults to 0.1."""
        process = cooling_dehumidification(self.inlet, 50.0)
        self.assertAlmostEqual(process.outlet.dry_bulb_f, 53.0, places=6)

    def test_zero_bypass_leaves_saturated(self):
        """Test all air contacting the coil leaves saturated at coil temperature."""
        process = cooling_dehumidification(self.inlet, 50.0, 0.0)
        self.assertAlmostEqual(process.outlet.dry_bulb_f, 50.0)
        self.assertAlmostEqual(
            process.outlet.humidity_ratio, saturation_humidity_ratio(50.0), places=10
        )
        self.assertTrue(process.outlet.is_saturated)

    def test_dry_coil(self):
        """Test a coil above the inlet dew point only cools sensibly."""
        inlet = from_dry_bulb_humidity_ratio(80.0, 0.005)
        process = cooling_dehumidification(inlet, 50.0)
        self.assertEqual(process.process_type, ProcessType.SENSIBLE_COOLING)
        self.assertEqual(process.outlet.humidity_ratio, 0.005)
        self.assertEqual(process.latent_heat, 0.0)

    def test_humid_inlet_blend_above_saturation(self):
        """Test 80°F/80% air over a 50°F coil blends to about 101% RH."""
        humid = from_dry_bulb_relative_humidity(80.0, 80.0)
        with self.assertRaises(SupersaturatedStateError) as ctx:
            cooling_dehumidification(humid, 50.0, 0.1)
        self.assertAlmostEqual(ctx.exception.relative_humidity_pct, 101.1, delta=0.1)

    def test_humid_inlet_within_saturation(self):
        """Test 80°F/70% air over the same coil stays just below saturation."""
        humid = from_dry_bulb_relative_humidity(80.0, 70.0)
        process = cooling_dehumidification(humid, 50.0, 0.1)
        self.assertEqual(process.process_type, ProcessType.COOLING_DEHUMIDIFICATION)
        self.assertAlmostEqual(process.outlet.relative_humidity_pct, 98.5, delta=0.1)

    def test_coil_not_below_inlet(self):
        """Test a coil at or above the inlet dry bulb is rejected."""
        with self.assertRaises(InvalidInputError):
            cooling_dehumidification(self.inlet, 80.0)

    def test_bypass_factor_out_of_range(self):
        """Test bypass factors outside 0-1 are rejected."""
        for bypass in (-0.1, 1.5):
            with self.assertRaises(InvalidInputError):
                cooling_dehumidification(self.inlet, 50.0, bypass)


class TestEvaporativeCooling(unittest.TestCase):
    """Tests for direct evaporative cooling."""

    def setUp(self):
        self.inlet = from_dry_bulb_relative_humidity(95.0, 20.0)

    def test_outlet(self):
        """Test outlet dry bulb approaches the wet bulb by the effectiveness."""
        process = evaporative_cooling(self.inlet, 0.85)
        expected = 95.0 - 0.85 * (95.0 - self.inlet.wet_bulb_f)
        self.assertEqual(process.process_type, ProcessType.EVAPORATIVE_COOLING)
        self.assertAlmostEqual(process.outlet.dry_bulb_f, expected, places=10)
        self.assertAlmostEqual(process.outlet.dry_bulb_f, 70.32, delta=0.05)
        self.assertAlmostEqual(process.outlet.humidity_ratio, 0.01248, delta=5e-5)
        self.assertAlmostEqual(process.outlet.relative_humidity_pct, 78.7, delta=0.5)

    def test_constant_enthalpy(self):
        """Test total heat is zero and enthalpy is conserved."""
        process = evaporative_cooling(self.inlet)
        self.assertEqual(process.total_heat, 0.0)
        self.assertAlmostEqual(process.outlet.enthalpy, self.inlet.enthalpy, delta=0.01)
        self.assertLess(process.sensible_heat, 0.0)
        self.assertGreater(process.latent_heat, 0.0)

    def test_effectiveness_out_of_range(self):
        """Test effectiveness outside 0-1 is rejected."""
        with self.assertRaises(InvalidInputError):
            evaporative_cooling(self.inlet, 1.2)


class TestMixing(unittest.TestCase):
    """Tests for adiabatic mixing."""

    def setUp(self):
        self.outdoor = from_dry_bulb_relative_humidity(95.0, 60.0)
        self.ret = from_dry_bulb_relative_humidity(75.0, 50.0)

    def test_outdoor_air_fraction(self):
        """Test 20% outdoor air mixed with 80% return air."""
        mixed = mix_air_fractions(self.outdoor, 0.2, self.ret, 0.8)
        expected_w = 0.2 * self.outdoor.humidity_ratio + 0.8 * self.ret.humidity_ratio
        self.assertAlmostEqual(mixed.humidity_ratio, expected_w, places=10)
        self.assertAlmostEqual(mixed.dry_bulb_f, 79.07, delta=0.02)
        self.assertAlmostEqual(
            mixed.enthalpy, 0.2 * self.outdoor.enthalpy + 0.8 * self.ret.enthalpy, delta=0.001
        )
        self.assertTrue(mixed.converged)

    def test_fractions_normalized(self):
        """Test (1, 4) mixes like (0.2, 0.8)."""
        a = mix_air_fractions(self.outdoor, 1, self.ret, 4)
        b = mix_air_fractions(self.outdoor, 0.2, self.ret, 0.8)
        self.assertAlmostEqual(a.dry_bulb_f, b.dry_bulb_f, places=6)
        self.assertAlmostEqual(a.humidity_ratio, b.humidity_ratio, places=10)

    def test_streams_weighted_by_mass(self):
        """Test volumetric flows are converted to dry air mass."""
        mixed = mix_air_streams(self.outdoor, 1000, self.ret, 3000)
        m1 = calculate_air_mass_flow(1000, self.outdoor.specific_volume)
        m2 = calculate_air_mass_flow(3000, self.ret.specific_volume)
        expected_w = (m1 * self.outdoor.humidity_ratio + m2 * self.ret.humidity_ratio) / (m1 + m2)
        self.assertAlmostEqual(mixed.humidity_ratio, expected_w, places=10)

    def test_single_stream(self):
        """Test a zero flow stream does not change the other."""
        mixed = mix_air_streams(self.outdoor, 0, self.ret, 2000)
        self.assertAlmostEqual(mixed.dry_bulb_f, 75.0, delta=0.01)

    def test_mixing_process(self):
        """Test the mixing process reports change from the first stream."""
        process = mixing_process(self.ret, 4000, self.outdoor, 1000)
        self.assertEqual(process.process_type, ProcessType.MIXING)
        self.assertIs(process.inlet, self.ret)
        self.assertGreater(process.sensible_heat, 0.0)
        self.assertGreater(process.latent_heat, 0.0)

    def test_negative_flow(self):
        """Test negative flows are rejected."""
        with self.assertRaises(InvalidInputError):
            mix_air_streams(self.outdoor, -100, self.ret, 1000)

    def test_zero_total_flow(self):
        """Test two empty streams are rejected."""
        with self.assertRaises(InvalidInputError):
            mix_air_fractions(self.outdoor, 0, self.ret, 0)

    def test_different_pressures(self):
        """Test streams at different pressures are rejected."""
        altitude = from_dry_bulb_relative_humidity(75.0, 50.0, 12.1)
        with self.assertRaises(InvalidInputError):
            mix_air_fractions(self.outdoor, 0.5, altitude, 0.5)


class TestProcessAtAirflow(unittest.TestCase):
    """Tests for scaling processes to an airflow."""

    def test_coil_load(self):
        """Test BTU/hr and moisture removal at 2000 CFM."""
        inlet = from_dry_bulb_relative_humidity(80.0, 50.0)
        process = cooling_dehumidification(inlet, 50.0)
        load = process.at_airflow(2000)
        mass_flow = 2000 * 60 / inlet.specific_volume
        self.assertAlmostEqual(load.mass_flow, mass_flow, places=6)
        self.assertAlmostEqual(load.sensible_heat, mass_flow * process.sensible_heat, places=3)
        self.assertAlmostEqual(load.total_heat, mass_flow * process.total_heat, places=3)
        self.assertLess(load.moisture_rate, 0.0)

    def test_negative_airflow(self):
        """Test negative airflow is rejected."""
        inlet = from_dry_bulb_relative_humidity(80.0, 50.0)
        with self.assertRaises(InvalidInputError):
            sensible_process(inlet, 90.0).at_airflow(-1)


class TestMixingIdentity:
    """Mixing identical streams returns the same state."""

    @pytest.mark.parametrize("temp_f,rh", [(-20.0, 60.0), (55.0, 90.0), (75.0, 50.0), (105.0, 25.0)])
    @pytest.mark.parametrize("cfm1,cfm2", [(1000, 1000), (100, 5000), (2500, 1)])
    def test_identical_streams(self, temp_f, rh, cfm1, cfm2):
        """Test any flow split of one state mixes back to that state."""
        state = from_dry_bulb_relative_humidity(temp_f, rh)
        mixed = mix_air_streams(state, cfm1, state, cfm2)
        assert mixed.dry_bulb_f == pytest.approx(state.dry_bulb_f, abs=1e-6)
        assert mixed.humidity_ratio == pytest.approx(state.humidity_ratio, abs=1e-12)
        assert mixed.relative_humidity_pct == pytest.approx(state.relative_humidity_pct, abs=1e-6)
        assert mixed.wet_bulb_f == pytest.approx(state.wet_bulb_f, abs=1e-6)


if __name__ == "__main__":
    unittest.main()
