"""Unit tests for the Transverse Mercator forward/inverse series.

Test cases include:
- Known reference points in both hemispheres
- Truncation to whole meters
- Inverse projection accuracy and hemisphere inference
- WGS84 derived series constants
"""

import unittest

import numpy as np
import pytest

from utmref.angles import degrees_to_radians, radians_to_degrees
from utmref.ellipsoid import WGS84_A, WGS84_E1, WGS84_E2, WGS84_EP2
from utmref.errors import InvalidZoneNumberError
from utmref.projection import forward, inverse


class TestAngles(unittest.TestCase):
    """Test cases for degree/radian conversion."""

    def test_known_values(self) -> None:
        self.assertAlmostEqual(degrees_to_radians(180.0), np.pi, places=15)
        self.assertAlmostEqual(radians_to_degrees(np.pi / 2.0), 90.0, places=12)

    def test_array_input(self) -> None:
        np.testing.assert_allclose(
            degrees_to_radians(np.array([0.0, 90.0, -45.0])),
            np.array([0.0, np.pi / 2.0, -np.pi / 4.0]),
        )


class TestWgs84Constants(unittest.TestCase):
    """Test cases for the WGS84 series constants."""

    def test_defining_parameters(self) -> None:
        self.assertEqual(WGS84_A, 6378137.0)
        self.assertEqual(WGS84_E2, 0.00669438)

    def test_derived_parameters(self) -> None:
        self.assertAlmostEqual(WGS84_EP2, 0.00673949, places=7)
        self.assertAlmostEqual(WGS84_E1, 0.00167922, places=7)


class TestForward(unittest.TestCase):
    """Test cases for geodetic -> UTM projection."""

    def test_northern_hemisphere(self) -> None:
        self.assertEqual(forward(51.95, 7.53, 32), (398973.0, 5756497.0))
        self.assertEqual(forward(52.482728, -1.908445, 30), (574125.0, 5815290.0))

    def test_southern_hemisphere(self) -> None:
        """Southern northings carry the 10,000,000 m false northing."""
        self.assertEqual(forward(-19.887495, -43.932663, 23), (611733.0, 7800614.0))

    def test_western_longitude(self) -> None:
        self.assertEqual(
            forward(36.23612346, -115.08209766, 11), (672349.0, 4011843.0)
        )

    def test_equator_on_central_meridian(self) -> None:
        self.assertEqual(forward(0.0, 9.0, 32), (500000.0, 0.0))

    def test_outputs_are_whole_meters(self) -> None:
        easting, northing = forward(48.2, 16.37, 33)
        self.assertEqual(easting, np.trunc(easting))
        self.assertEqual(northing, np.trunc(northing))


class TestInverse(unittest.TestCase):
    """Test cases for UTM -> geodetic projection."""

    def test_southern_hemisphere(self) -> None:
        lat, lon = inverse(611733.0, 7800614.0, 23, "K")
        self.assertAlmostEqual(lat, -19.88749831, delta=1e-6)
        self.assertAlmostEqual(lon, -43.93266429, delta=1e-6)

    def test_northern_hemisphere(self) -> None:
        lat, lon = inverse(399000.0, 5757000.0, 32, "U")
        self.assertAlmostEqual(lat, 51.95451906, delta=1e-6)
        self.assertAlmostEqual(lon, 7.53023117, delta=1e-6)

        lat, lon = inverse(574126.0, 5815291.0, 32, "U")
        self.assertAlmostEqual(lat, 52.48272900, delta=1e-6)
        self.assertAlmostEqual(lon, 10.09155526, delta=1e-6)

    def test_central_meridian(self) -> None:
        lat, lon = inverse(500000.0, 0.0, 32, "N")
        self.assertAlmostEqual(lat, 0.0, places=9)
        self.assertAlmostEqual(lon, 9.0, places=9)

    def test_hemisphere_follows_letter(self) -> None:
        """A northern letter on a southern northing lands in the north."""
        lat_south, _ = inverse(611733.0, 7800614.0, 23, "K")
        lat_north, _ = inverse(611733.0, 7800614.0, 23, "P")
        self.assertLess(lat_south, 0.0)
        self.assertGreater(lat_north, 0.0)

    def test_invalid_zone_number(self) -> None:
        with pytest.raises(InvalidZoneNumberError, match="zone number = 132"):
            inverse(574126.0, 5815291.0, 132, "U")
        with pytest.raises(InvalidZoneNumberError):
            inverse(574126.0, 5815291.0, 0, "U")

    def test_forward_inverse_consistency(self) -> None:
        """Inverse of a forward projection is within the 1 m truncation.

        The series alone agrees to about 1e-5 degrees, but forward drops up
        to 1 m in each axis (about 9e-6 degrees of latitude), so the bound
        on the round trip is 2e-5 degrees, with longitude scaled to ground
        distance by cos(latitude).
        """
        for lat, lon in [(0.5, 1.5), (-45.0, 170.0), (83.0, -60.0), (-79.0, 20.5)]:
            number = int(np.floor((lon + 180.0) / 6.0)) + 1
            easting, northing = forward(lat, lon, number)
            letter = "N" if lat >= 0 else "M"
            lat_back, lon_back = inverse(easting, northing, number, letter)
            self.assertAlmostEqual(lat_back, lat, delta=2e-5)
            self.assertAlmostEqual(
                (lon_back - lon) * np.cos(np.deg2rad(lat)), 0.0, delta=2e-5
            )


if __name__ == "__main__":
    unittest.main()
