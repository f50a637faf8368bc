import math
import unittest
import warnings

from imth import constants, floatmath
from imth.utils import escape_velocity, gravitational_acceleration


class PhysicsHelperTests(unittest.TestCase):
    def test_earth_surface_gravity(self) -> None:
        g = gravitational_acceleration(constants.EARTH_MASS, constants.EARTH_RADIUS)
        self.assertAlmostEqual(g, abs(constants.EARTH_GRAVITY), delta=0.05)

    def test_earth_escape_velocity(self) -> None:
        v = escape_velocity(constants.EARTH_MASS, constants.EARTH_RADIUS)
        self.assertAlmostEqual(v, 11186.0, delta=5.0)
        g = gravitational_acceleration(constants.EARTH_MASS, constants.EARTH_RADIUS)
        self.assertAlmostEqual(v, math.sqrt(2.0 * g * constants.EARTH_RADIUS), places=6)

    def test_zero_radius_gives_infinity(self) -> None:
        self.assertEqual(gravitational_acceleration(constants.EARTH_MASS, 0.0), math.inf)
        self.assertEqual(escape_velocity(constants.EARTH_MASS, 0.0), math.inf)

    def test_negative_radius_escape_velocity_is_nan(self) -> None:
        self.assertTrue(math.isnan(escape_velocity(constants.EARTH_MASS, -1.0)))


class ConstantsTests(unittest.TestCase):
    def test_mathematical_constants(self) -> None:
        self.assertAlmostEqual(constants.PI, math.pi)
        self.assertAlmostEqual(constants.TAU, 2.0 * math.pi)
        self.assertAlmostEqual(constants.E, math.e)

    def test_electromagnetic_constants_agree_with_speed_of_light(self) -> None:
        c = 1.0 / math.sqrt(constants.VACUUM_PERMEABILITY * constants.VACUUM_PERMITTIVITY)
        self.assertAlmostEqual(c / constants.C, 1.0, places=6)
        self.assertIsInstance(constants.C, int)


class FloatMathTests(unittest.TestCase):
    def test_division_by_zero(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.assertEqual(floatmath.div(1.0, 0.0), math.inf)
            self.assertEqual(floatmath.div(-1.0, 0.0), -math.inf)
            self.assertTrue(math.isnan(floatmath.div(0.0, 0.0)))
        self.assertEqual(floatmath.div(3.0, 2.0), 1.5)

    def test_domain_errors_give_nan(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.assertTrue(math.isnan(floatmath.acos(2.0)))
            self.assertTrue(math.isnan(floatmath.sqrt(-1.0)))
        self.assertAlmostEqual(floatmath.acos(0.0), math.pi / 2.0)
        self.assertEqual(floatmath.sqrt(9.0), 3.0)

    def test_atan_ratio(self) -> None:
        self.assertAlmostEqual(floatmath.atan_ratio(1.0, 1.0), math.pi / 4.0)
        self.assertAlmostEqual(floatmath.atan_ratio(1.0, 0.0), math.pi / 2.0)
        self.assertAlmostEqual(floatmath.atan_ratio(-1.0, 0.0), -math.pi / 2.0)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.assertTrue(math.isnan(floatmath.atan_ratio(0.0, 0.0)))
            self.assertAlmostEqual(floatmath.atan_ratio(math.inf, 1.0), math.pi / 2.0)

    def test_results_are_plain_floats(self) -> None:
        self.assertIs(type(floatmath.div(1.0, 3.0)), float)


if __name__ == "__main__":
    unittest.main()
