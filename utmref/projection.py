"""Ellipsoidal Transverse Mercator projection for UTM.

Forward (geodetic -> UTM) and inverse (UTM -> geodetic) transforms using the
classic power-series expansion (Snyder, "Map Projections - A Working
Manual", USGS PP 1395, pp. 57-64). The series are truncated at a fixed order
without iterative refinement, which gives sub-meter accuracy between 80°S
and 84°N.

Conventions:
- Public arguments and results are in degrees and meters.
- Forward eastings and northings are truncated toward zero to whole meters.
- Southern-hemisphere northings carry a 10,000,000 m false northing.
"""

from typing import Tuple

import numpy as np

from utmref.angles import degrees_to_radians, radians_to_degrees
from utmref.ellipsoid import (
    FALSE_EASTING,
    FALSE_NORTHING,
    UTM_SCALE_FACTOR,
    WGS84_A,
    WGS84_E1,
    WGS84_E2,
    WGS84_EP2,
)
from utmref.errors import InvalidZoneNumberError
from utmref.zones import central_meridian


def _meridional_arc(lat_rad: float) -> float:
    """Distance along the meridian from the equator to ``lat_rad`` (meters)."""
    a = WGS84_A
    e2 = WGS84_E2
    e4 = e2 * e2
    e6 = e4 * e2
    return a * (
        (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256) * lat_rad
        - (3 * e2 / 8 + 3 * e4 / 32 + 45 * e6 / 1024) * np.sin(2 * lat_rad)
        + (15 * e4 / 256 + 45 * e6 / 1024) * np.sin(4 * lat_rad)
        - (35 * e6 / 3072) * np.sin(6 * lat_rad)
    )


def forward(
    latitude: float,
    longitude: float,
    number: int,
) -> Tuple[float, float]:
    """Project geodetic coordinates onto a UTM zone.

    Args:
        latitude: Latitude in degrees (positive north).
        longitude: Longitude in degrees (positive east).
        number: UTM zone number whose central meridian is used.

    Returns:
        Tuple (easting, northing) in meters, truncated to whole meters.

    Example:
        >>> forward(51.95, 7.53, 32)
        (398973.0, 5756497.0)
    """
    k0 = UTM_SCALE_FACTOR
    a = WGS84_A
    e2 = WGS84_E2
    ep2 = WGS84_EP2

    lat_rad = degrees_to_radians(latitude)
    lon_rad = degrees_to_radians(longitude)
    lon_origin_rad = degrees_to_radians(float(central_meridian(number)))

    sin_lat = np.sin(lat_rad)
    cos_lat = np.cos(lat_rad)
    tan_lat = np.tan(lat_rad)

    # Radius of curvature in the prime vertical
    N = a / np.sqrt(1 - e2 * sin_lat * sin_lat)
    T = tan_lat * tan_lat
    C = ep2 * cos_lat * cos_lat
    A = cos_lat * (lon_rad - lon_origin_rad)
    M = _meridional_arc(lat_rad)

    easting = (
        k0
        * N
        * (
            A
            + (1 - T + C) * A**3 / 6.0
            + (5 - 18 * T + T * T + 72 * C - 58 * ep2) * A**5 / 120.0
        )
        + FALSE_EASTING
    )

    northing = k0 * (
        M
        + N
        * tan_lat
        * (
            A * A / 2
            + (5 - T + 9 * C + 4 * C * C) * A**4 / 24.0
            + (61 - 58 * T + T * T + 600 * C - 330 * ep2) * A**6 / 720.0
        )
    )
    if latitude < 0.0:
        northing += FALSE_NORTHING

    return float(np.trunc(easting)), float(np.trunc(northing))


def inverse(
    easting: float,
    northing: float,
    number: int,
    letter: str,
) -> Tuple[float, float]:
    """Convert UTM coordinates back to geodetic coordinates.

    The hemisphere is inferred only from the band letter: letters below "N"
    are treated as southern. The letter is not checked against any latitude,
    so an inconsistent letter silently yields a point in the wrong
    hemisphere.

    Args:
        easting: Easting in meters.
        northing: Northing in meters (with false northing in the south).
        number: UTM zone number (1-60).
        letter: Latitude band letter.

    Returns:
        Tuple (latitude, longitude) in degrees.

    Raises:
        InvalidZoneNumberError: If ``number`` is outside 1..60.
    """
    if number < 1 or number > 60:
        raise InvalidZoneNumberError(f"invalid zone number, zone number = {number}")

    k0 = UTM_SCALE_FACTOR
    a = WGS84_A
    e2 = WGS84_E2
    ep2 = WGS84_EP2
    e1 = WGS84_E1

    x = easting - FALSE_EASTING
    y = northing
    if letter < "N":
        y -= FALSE_NORTHING

    lon_origin = central_meridian(number)

    # Footpoint latitude from the rectifying latitude mu
    M = y / k0
    mu = M / (a * (1 - e2 / 4 - 3 * e2 * e2 / 64 - 5 * e2**3 / 256))
    phi1 = (
        mu
        + (3 * e1 / 2 - 27 * e1**3 / 32) * np.sin(2 * mu)
        + (21 * e1 * e1 / 16 - 55 * e1**4 / 32) * np.sin(4 * mu)
        + (151 * e1**3 / 96) * np.sin(6 * mu)
    )

    sin_phi1 = np.sin(phi1)
    cos_phi1 = np.cos(phi1)
    tan_phi1 = np.tan(phi1)

    N1 = a / np.sqrt(1 - e2 * sin_phi1 * sin_phi1)
    T1 = tan_phi1 * tan_phi1
    C1 = ep2 * cos_phi1 * cos_phi1
    R1 = a * (1 - e2) / (1 - e2 * sin_phi1 * sin_phi1) ** 1.5
    D = x / (N1 * k0)

    lat_rad = phi1 - (N1 * tan_phi1 / R1) * (
        D * D / 2
        - (5 + 3 * T1 + 10 * C1 - 4 * C1 * C1 - 9 * ep2) * D**4 / 24
        + (61 + 90 * T1 + 298 * C1 + 45 * T1 * T1 - 252 * ep2 - 3 * C1 * C1)
        * D**6
        / 720
    )

    lon_rad = (
        D
        - (1 + 2 * T1 + C1) * D**3 / 6
        + (5 - 2 * C1 + 28 * T1 - 3 * C1 * C1 + 8 * ep2 + 24 * T1 * T1) * D**5 / 120
    ) / cos_phi1

    latitude = float(radians_to_degrees(lat_rad))
    longitude = float(lon_origin + radians_to_degrees(lon_rad))
    return latitude, longitude
