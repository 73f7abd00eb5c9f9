"""Tests for the full position pipeline and the Ephemeris container."""

import dataclasses
import unittest
from datetime import date, datetime
from types import MappingProxyType

from skypanel.ephemeris.ephemeris import Ephemeris
from skypanel.ephemeris.positions import compute_position
from skypanel.ephemeris.report import HEADER
from skypanel.ephemeris.rise_set import ALWAYS, NEVER
from skypanel.observer import InvalidObserverError, Observer
from skypanel.planet import Planet
from skypanel.space_time.angles import hms_to_hours
from skypanel.space_time.epoch import InvalidDateError

OSLO = Observer(59.91, 10.75, 2)
HIGH_ARCTIC = Observer(78.0, 15.6, 2)
SOLSTICE = "2024-06-21"

# planet: (ra, dec, distance, rise, transit, set)
OSLO_SOLSTICE = {
    Planet.SUN: (89.6704, 23.4334, 1.0162, "04:05:02", "13:18:43", "22:32:23"),
    Planet.MOON: (253.0566, -27.9408, 60.4053, "22:37:16", "00:12:16", "01:47:15"),
    Planet.MERCURY: (98.2166, 24.8928, 1.2982, "04:20:04", "13:52:54", "23:25:44"),
    Planet.VENUS: (94.7577, 23.9371, 1.7271, "04:19:03", "13:39:04", "22:59:05"),
    Planet.MARS: (36.2682, 13.2770, 1.7798, "02:08:59", "09:45:06", "17:21:14"),
    Planet.JUPITER: (63.9010, 20.5541, 5.9327, "02:54:21", "11:35:38", "20:16:56"),
    Planet.SATURN: (350.4758, -6.1982, 9.4717, "01:25:09", "06:41:56", "11:58:44"),
    Planet.URANUS: (52.5944, 18.7272, 20.3979, "02:27:11", "10:50:25", "19:13:38"),
    Planet.NEPTUNE: (0.0585, -1.3505, 29.8609, "01:29:36", "07:20:16", "13:10:56"),
}

# Ten seconds, in hours
CLOCK_TOLERANCE = 10 / 3600


def clock_difference(first: str, second: str) -> float:
    """Smallest difference between two HH:MM:SS clock times, in hours."""
    diff = abs(hms_to_hours(first) - hms_to_hours(second)) % 24
    return min(diff, 24 - diff)


class TestKnownPositions(unittest.TestCase):
    """Compare a full computation against independently derived values."""

    @classmethod
    def setUpClass(cls):
        cls.ephemeris = Ephemeris.for_observer(SOLSTICE, OSLO)

    def test_solar_context(self):
        solar = self.ephemeris.solar
        self.assertEqual(solar.day, 8939)
        self.assertAlmostEqual(solar.obliquity, 23.436115, places=5)
        self.assertAlmostEqual(solar.mean_longitude, 89.239819, places=4)
        self.assertAlmostEqual(solar.mean_anomaly, 165.878450, places=4)
        self.assertAlmostEqual(solar.sidereal_time, 18.665988, places=4)
        self.assertAlmostEqual(solar.x, 0.005367, places=4)
        self.assertAlmostEqual(solar.y, 1.016196, places=4)

    def test_coordinates(self):
        for planet, (ra, dec, distance, _, _, _) in OSLO_SOLSTICE.items():
            with self.subTest(planet=planet):
                position = self.ephemeris[planet]
                self.assertAlmostEqual(position.right_ascension, ra, delta=0.002)
                self.assertAlmostEqual(position.declination, dec, delta=0.002)
                self.assertAlmostEqual(position.distance, distance, delta=0.001)

    def test_rise_transit_set(self):
        for planet, (_, _, _, rise, transit, set_) in OSLO_SOLSTICE.items():
            with self.subTest(planet=planet):
                position = self.ephemeris[planet]
                self.assertLess(clock_difference(position.rise, rise), CLOCK_TOLERANCE)
                self.assertLess(
                    clock_difference(position.transit, transit), CLOCK_TOLERANCE
                )
                self.assertLess(clock_difference(position.set, set_), CLOCK_TOLERANCE)

    def test_moon_distance_in_earth_radii(self):
        self.assertGreater(self.ephemeris.moon.distance, 55)
        self.assertLess(self.ephemeris.moon.distance, 64)

    def test_named_accessors(self):
        self.assertIs(self.ephemeris.sun, self.ephemeris[Planet.SUN])
        self.assertIs(self.ephemeris.moon, self.ephemeris[Planet.MOON])
        self.assertIs(self.ephemeris.mars, self.ephemeris[Planet.MARS])
        self.assertIs(self.ephemeris.neptune, self.ephemeris[Planet.NEPTUNE])
        self.assertEqual(self.ephemeris.sidereal_time, self.ephemeris.solar.sidereal_time)

    def test_iteration_covers_all_bodies(self):
        self.assertEqual([p.planet for p in self.ephemeris], list(Planet))

    def test_report(self):
        report = self.ephemeris.report()
        self.assertTrue(report.startswith(HEADER))
        self.assertIn("Mars    │  2h 25m", report)
        self.assertEqual(len(report.splitlines()), 9)


class TestCircumpolar(unittest.TestCase):
    """Midsummer far north: sentinels instead of clock times."""

    @classmethod
    def setUpClass(cls):
        cls.ephemeris = Ephemeris.for_observer(SOLSTICE, HIGH_ARCTIC)

    def test_midnight_sun(self):
        sun = self.ephemeris.sun
        self.assertEqual(sun.rise, ALWAYS)
        self.assertEqual(sun.set, NEVER)
        self.assertTrue(sun.is_circumpolar)
        self.assertLess(clock_difference(sun.transit, "12:59:19"), CLOCK_TOLERANCE)

    def test_moon_never_rises(self):
        moon = self.ephemeris.moon
        self.assertEqual((moon.rise, moon.set), (NEVER, ALWAYS))
        self.assertTrue(moon.never_rises)

    def test_circumpolar_planets(self):
        for planet in (
            Planet.MERCURY,
            Planet.VENUS,
            Planet.MARS,
            Planet.JUPITER,
            Planet.URANUS,
        ):
            with self.subTest(planet=planet):
                position = self.ephemeris[planet]
                self.assertEqual((position.rise, position.set), (ALWAYS, NEVER))
                for hour in range(24):
                    self.assertTrue(position.is_up_at(hour))

    def test_saturn_still_rises_and_sets(self):
        saturn = self.ephemeris.saturn
        self.assertLess(clock_difference(saturn.rise, "02:25:26"), CLOCK_TOLERANCE)
        self.assertLess(clock_difference(saturn.set, "10:19:38"), CLOCK_TOLERANCE)


class TestRanges(unittest.TestCase):
    """Output ranges hold across dates and latitudes."""

    DATES = ["1600-03-01", "1999-12-31", "2000-01-01", "2024-12-21", "2999-07-15"]
    LATITUDES = [-89.5, -45.0, 0.0, 23.4, 59.91, 89.5]

    def test_ranges(self):
        for observation_date in self.DATES:
            for latitude in self.LATITUDES:
                ephemeris = Ephemeris.compute(observation_date, latitude, -70.0, -4)
                for position in ephemeris:
                    with self.subTest(
                        date=observation_date, lat=latitude, planet=position.planet
                    ):
                        self.assertGreaterEqual(position.right_ascension, 0)
                        self.assertLess(position.right_ascension, 360)
                        self.assertGreaterEqual(position.declination, -90)
                        self.assertLessEqual(position.declination, 90)
                        self.assertGreater(position.distance, 0)
                        hms_to_hours(position.transit)
                        if position.rise == ALWAYS:
                            self.assertEqual(position.set, NEVER)
                        elif position.rise == NEVER:
                            self.assertEqual(position.set, ALWAYS)
                        else:
                            for value in (position.rise, position.transit, position.set):
                                self.assertRegex(value, r"^\d\d:\d\d:\d\d$")
                                self.assertLess(hms_to_hours(value), 24)

    def test_equator_has_no_sentinels(self):
        ephemeris = Ephemeris.compute("2024-03-20", 0.0, 0.0)
        for position in ephemeris:
            self.assertNotIn(position.rise, (ALWAYS, NEVER))

    def test_alt_az_ranges(self):
        ephemeris = Ephemeris.for_observer(SOLSTICE, OSLO)
        for planet in Planet:
            for sidereal_time in (0.0, 6.5, 12.0, ephemeris.sidereal_time):
                altitude, azimuth = ephemeris.alt_az(planet, sidereal_time)
                self.assertGreaterEqual(altitude, -90)
                self.assertLessEqual(altitude, 90)
                self.assertGreaterEqual(azimuth, 0)
                self.assertLess(azimuth, 360)
        altitude, azimuth = ephemeris.sun_alt_az
        self.assertEqual((altitude, azimuth), ephemeris.alt_az(Planet.SUN))


class TestEphemerisBehaviour(unittest.TestCase):
    def test_repeat_computation_is_identical(self):
        first = Ephemeris.for_observer(SOLSTICE, OSLO)
        second = Ephemeris.for_observer(SOLSTICE, OSLO)
        self.assertEqual(dict(first.positions), dict(second.positions))
        self.assertEqual(first.solar, second.solar)

    def test_date_input_types_agree(self):
        from_string = Ephemeris.for_observer(SOLSTICE, OSLO)
        from_date = Ephemeris.for_observer(date(2024, 6, 21), OSLO)
        from_datetime = Ephemeris.for_observer(datetime(2024, 6, 21, 22, 30), OSLO)
        self.assertEqual(dict(from_string.positions), dict(from_date.positions))
        self.assertEqual(dict(from_string.positions), dict(from_datetime.positions))

    def test_compute_matches_for_observer(self):
        computed = Ephemeris.compute(SOLSTICE, 59.91, 10.75, 2)
        self.assertEqual(computed.observer, OSLO)
        self.assertEqual(
            dict(computed.positions),
            dict(Ephemeris.for_observer(SOLSTICE, OSLO).positions),
        )

    def test_planets_depend_on_solar_context(self):
        ephemeris = Ephemeris.for_observer(SOLSTICE, OSLO)
        solar = ephemeris.solar
        rotated = dataclasses.replace(
            solar,
            x=-solar.y,
            y=solar.x,
            mean_longitude=(solar.mean_longitude + 90) % 360,
        )
        for planet in Planet:
            if planet == Planet.SUN:
                continue
            with self.subTest(planet=planet):
                moved = compute_position(planet, rotated, OSLO)
                original = ephemeris[planet]
                self.assertNotEqual(
                    (moved.right_ascension, moved.declination, moved.transit),
                    (original.right_ascension, original.declination, original.transit),
                )

    def test_result_is_immutable(self):
        ephemeris = Ephemeris.for_observer(SOLSTICE, OSLO)
        self.assertIsInstance(ephemeris.positions, MappingProxyType)
        with self.assertRaises(TypeError):
            ephemeris.positions[Planet.SUN] = ephemeris.moon
        with self.assertRaises(dataclasses.FrozenInstanceError):
            ephemeris.sun.declination = 0.0
        with self.assertRaises(dataclasses.FrozenInstanceError):
            ephemeris.observer = HIGH_ARCTIC

    def test_invalid_dates(self):
        for value in ("2024-13-01", "21/06/2024", "", "1500-01-01", "3001-01-01", 20240621):
            with self.subTest(value=value):
                with self.assertRaises(InvalidDateError):
                    Ephemeris.for_observer(value, OSLO)

    def test_invalid_observer(self):
        for latitude, longitude, timezone in ((91, 0, 0), (0, 181, 0), (0, 0, 15)):
            with self.subTest(lat=latitude, lon=longitude, tz=timezone):
                with self.assertRaises(InvalidObserverError):
                    Ephemeris.compute(SOLSTICE, latitude, longitude, timezone)

    def test_invalid_inputs_are_value_errors(self):
        with self.assertRaises(ValueError):
            Ephemeris.compute("not a date", 0, 0)
        with self.assertRaises(ValueError):
            Ephemeris.compute(SOLSTICE, float("nan"), 0)


if __name__ == "__main__":
    unittest.main()
