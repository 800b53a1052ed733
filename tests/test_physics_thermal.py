"""Tests for psychro/physics/thermal.py"""

import unittest
from psychro.physics.thermal import (
    calculate_air_mass_flow,
    calculate_sensible_heat,
    calculate_latent_heat,
    calculate_total_heat,
    convert_btu_to_kw,
    convert_btu_to_tons,
)


class TestAirCalculations(unittest.TestCase):
    """Tests for airflow heat transfer with standard air factors."""

    def test_calculate_air_mass_flow(self):
        """Test air mass flow with standard air density."""
        # 2000 CFM * 0.075 lb/ft³ * 60 min/hr = 9000 lb/hr
        self.assertAlmostEqual(calculate_air_mass_flow(2000), 9000.0, places=6)

    def test_calculate_air_mass_flow_zero(self):
        """Test with zero flow."""
        self.assertEqual(calculate_air_mass_flow(0), 0.0)

    def test_calculate_air_mass_flow_specific_volume(self):
        """Test mass flow at 95°F outdoor air volume."""
        # 1000 CFM * 60 / 14.25 ft³/lb = 4210.5 lb/hr
        mass_flow = calculate_air_mass_flow(1000, specific_volume=14.25)
        self.assertAlmostEqual(mass_flow, 4210.53, places=1)

    def test_denser_air_carries_more_mass(self):
        """Test a smaller specific volume gives a larger mass flow."""
        cold = calculate_air_mass_flow(1000, specific_volume=12.5)
        warm = calculate_air_mass_flow(1000, specific_volume=14.0)
        self.assertGreater(cold, warm)

    def test_calculate_air_mass_flow_invalid_volume(self):
        """Test that a non-positive specific volume is rejected."""
        with self.assertRaises(ValueError):
            calculate_air_mass_flow(1000, specific_volume=0)

    def test_calculate_sensible_heat(self):
        """Test sensible heat across a coil."""
        # 4000 CFM, 75°F to 53°F: 1.08 * 4000 * 22 = 95,040 BTU/hr
        self.assertAlmostEqual(calculate_sensible_heat(4000, 22), 95040.0, places=3)

    def test_calculate_sensible_heat_sign(self):
        """Test a negative temperature change gives negative heat."""
        self.assertAlmostEqual(calculate_sensible_heat(1200, -18), -23328.0, places=3)

    def test_calculate_latent_heat(self):
        """Test latent heat for a grains-level moisture removal."""
        # 4000 CFM, 0.0035 lb/lb: 4840 * 4000 * 0.0035 = 67,760 BTU/hr
        self.assertAlmostEqual(calculate_latent_heat(4000, 0.0035), 67760.0, places=3)

    def test_calculate_total_heat(self):
        """Test total heat from an enthalpy difference."""
        # 1500 CFM, 28.2 to 22.6 BTU/lb: 4.5 * 1500 * 5.6 = 37,800 BTU/hr
        heat = calculate_total_heat(1500, 28.2 - 22.6)
        self.assertAlmostEqual(heat, 37800.0, places=3)


class TestUnitConversions(unittest.TestCase):
    """Tests for load unit conversions."""

    def test_convert_btu_to_kw(self):
        """Test BTU/hr to kW at 3412 BTU/hr per kW."""
        self.assertAlmostEqual(convert_btu_to_kw(17060.0), 5.0, places=6)

    def test_convert_btu_to_tons(self):
        """Test BTU/hr to tons of refrigeration."""
        self.assertAlmostEqual(convert_btu_to_tons(175920.0), 14.66, places=6)

    def test_zero_load(self):
        """Test no load converts to zero in every unit."""
        self.assertEqual(convert_btu_to_kw(0.0), 0.0)
        self.assertEqual(convert_btu_to_tons(0.0), 0.0)


if __name__ == "__main__":
    unittest.main()
