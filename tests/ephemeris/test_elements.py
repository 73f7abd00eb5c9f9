"""Tests for the orbital element table."""

import unittest

from skypanel.ephemeris.elements import ELEMENT_TABLE, orbital_elements
from skypanel.planet import Planet


class TestOrbitalElements(unittest.TestCase):
    """Test evaluation of the element polynomials."""

    def test_every_body_has_elements(self):
        self.assertEqual(set(ELEMENT_TABLE), set(Planet))

    def test_values_at_epoch(self):
        sun = orbital_elements(Planet.SUN, 0)
        self.assertAlmostEqual(sun.perihelion_argument, 282.9404)
        self.assertAlmostEqual(sun.eccentricity, 0.016709)
        self.assertAlmostEqual(sun.mean_anomaly, 356.0470)
        self.assertEqual(sun.ascending_node, 0.0)
        self.assertEqual(sun.semi_major_axis, 1.0)

        moon = orbital_elements(Planet.MOON, 0)
        self.assertAlmostEqual(moon.semi_major_axis, 60.2666)
        self.assertAlmostEqual(moon.inclination, 5.1454)

    def test_linear_terms(self):
        mars = orbital_elements(Planet.MARS, 8939)
        self.assertAlmostEqual(mars.mean_anomaly, 22.45932, places=5)
        self.assertAlmostEqual(mars.perihelion_argument, 286.763478, places=5)
        self.assertAlmostEqual(mars.eccentricity, 0.093405 + 2.516e-9 * 8939)
        self.assertAlmostEqual(mars.inclination, 1.8497 - 1.78e-8 * 8939)

        uranus = orbital_elements(Planet.URANUS, 10000)
        self.assertAlmostEqual(uranus.semi_major_axis, 19.18171 - 1.55e-4)

    def test_angles_are_normalized(self):
        for planet in Planet:
            for day in (-36500, -3543, 0, 8939, 36500):
                elements = orbital_elements(planet, day)
                self.assertGreaterEqual(elements.mean_anomaly, 0)
                self.assertLess(elements.mean_anomaly, 360)
                self.assertGreaterEqual(elements.perihelion_argument, 0)
                self.assertLess(elements.perihelion_argument, 360)

    def test_ascending_node_is_not_normalized(self):
        # The Moon's node regresses; the raw value is used downstream
        moon = orbital_elements(Planet.MOON, 8939)
        self.assertAlmostEqual(moon.ascending_node, 125.1228 - 0.0529538083 * 8939)
        self.assertLess(moon.ascending_node, 0)


if __name__ == "__main__":
    unittest.main()
