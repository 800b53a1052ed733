"""Tests for psychro/physics/saturation.py"""

import unittest

from psychro.physics.saturation import saturation_pressure, saturation_temperature


class TestSaturationPressure(unittest.TestCase):
    """Hyland-Wexler saturation pressure against ASHRAE table values."""

    def test_liquid_branch_values(self):
        """Test saturation pressure over liquid water."""
        self.assertAlmostEqual(saturation_pressure(50.0), 0.17811, places=4)
        self.assertAlmostEqual(saturation_pressure(100.0), 0.95031, places=4)
        self.assertAlmostEqual(saturation_pressure(200.0), 11.537, places=2)

    def test_ice_branch_value(self):
        """Test saturation pressure over ice at the bottom of the range."""
        pws = saturation_pressure(-100.0)
        self.assertAlmostEqual(pws / 2.29342e-5, 1.0, places=3)

    def test_freezing_point_uses_liquid_branch(self):
        """Test 32°F is evaluated with the liquid water correlation."""
        self.assertAlmostEqual(saturation_pressure(32.0), 0.088649, places=5)

    def test_continuous_across_freezing(self):
        """Test the two branches meet at 32°F."""
        below = saturation_pressure(31.9999)
        at = saturation_pressure(32.0)
        self.assertLess(abs(at - below) / at, 0.001)

    def test_strictly_increasing(self):
        """Test saturation pressure rises over -100°F to 200°F."""
        previous = saturation_pressure(-100.0)
        for tenth in range(-999, 2001):
            current = saturation_pressure(tenth / 10.0)
            self.assertGreater(current, previous, f"not increasing at {tenth / 10.0}°F")
            previous = current


class TestSaturationTemperature(unittest.TestCase):
    """Boiling point from total pressure."""

    def test_sea_level_boiling_point(self):
        """Test water boils near 212°F at one standard atmosphere."""
        self.assertAlmostEqual(saturation_temperature(14.696), 212.0, delta=0.1)

    def test_altitude_boiling_point(self):
        """Test lower pressures boil at lower temperatures."""
        self.assertAlmostEqual(saturation_temperature(10.0), 193.16, delta=0.05)
        self.assertAlmostEqual(saturation_temperature(5.0), 162.19, delta=0.05)

    def test_inverts_saturation_pressure(self):
        """Test the temperature reproduces the pressure it was found from."""
        for temp_f in (-40.0, 20.0, 50.0, 150.0):
            pressure = saturation_pressure(temp_f)
            self.assertAlmostEqual(saturation_temperature(pressure), temp_f, places=4)

    def test_clamped_to_correlation_range(self):
        """Test pressures outside the correlation span return its bounds."""
        self.assertEqual(saturation_temperature(1e-9), -100.0)
        self.assertEqual(saturation_temperature(1000.0), 392.0)


if __name__ == "__main__":
    unittest.main()
