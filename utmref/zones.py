"""UTM zone and latitude band resolution.

UTM divides the Earth between 80°S and 84°N into 60 zones of 6° longitude
and 20 latitude bands lettered C to X (I and O omitted). All bands are 8°
tall except X, which spans 72°N to 84°N.

Zone widths are irregular in two places:
- Norway (56°N-64°N, 3°E-12°E): zone 32 is widened westwards.
- Svalbard (72°N-84°N): only zones 31, 33, 35 and 37 are used.
"""

from bisect import bisect_right
from typing import Optional

import numpy as np

from utmref.errors import InvalidZoneLetterError

BAND_LETTERS = "CDEFGHJKLMNPQRSTUVWX"

# Southern edge of each band, in degrees
BAND_LOWER_LATITUDES = tuple(float(lat) for lat in range(-80, 80, 8))

MIN_LATITUDE = -80.0
MAX_LATITUDE = 84.0

NUMBER_OF_100K_SETS = 6

# Lowest northing (meters, 100-km floor) reached anywhere in each band
MIN_NORTHING = {
    "C": 1100000.0,
    "D": 2000000.0,
    "E": 2800000.0,
    "F": 3700000.0,
    "G": 4600000.0,
    "H": 5500000.0,
    "J": 6400000.0,
    "K": 7300000.0,
    "L": 8200000.0,
    "M": 9100000.0,
    "N": 0.0,
    "P": 800000.0,
    "Q": 1700000.0,
    "R": 2600000.0,
    "S": 3500000.0,
    "T": 4400000.0,
    "U": 5300000.0,
    "V": 6200000.0,
    "W": 7000000.0,
    "X": 7900000.0,
}

# Svalbard longitude ranges [west, east) and their zone
_SVALBARD_ZONES = (
    (0.0, 9.0, 31),
    (9.0, 21.0, 33),
    (21.0, 33.0, 35),
    (33.0, 42.0, 37),
)


def zone_number(latitude: float, longitude: float) -> int:
    """
    Compute the UTM zone number of a geodetic point.

    Args:
        latitude: Latitude in degrees, already range-checked.
        longitude: Longitude in degrees, already range-checked.

    Returns:
        Zone number 1-60, including the Norway and Svalbard exceptions.

    Example:
        >>> zone_number(51.95, 7.53)
        32
        >>> zone_number(60.0, 4.0)  # Norway
        32
    """
    number = int(np.floor((longitude + 180.0) / 6.0)) + 1

    # longitude 180 belongs to zone 60, not 61
    if longitude == 180.0:
        number = 60

    if 56.0 <= latitude < 64.0 and 3.0 <= longitude < 12.0:
        number = 32

    if 72.0 <= latitude < 84.0:
        for west, east, svalbard_zone in _SVALBARD_ZONES:
            if west <= longitude < east:
                number = svalbard_zone
                break

    return number


def band_letter(latitude: float) -> Optional[str]:
    """
    Get the latitude band letter for a latitude.

    Args:
        latitude: Latitude in degrees.

    Returns:
        Band letter C-X, or None outside [-80, 84] where UTM bands are not
        defined.
    """
    if latitude < MIN_LATITUDE or latitude > MAX_LATITUDE:
        return None
    index = bisect_right(BAND_LOWER_LATITUDES, latitude) - 1
    return BAND_LETTERS[index]


def zone_set(number: int) -> int:
    """Get the 100-km zone set (1-6) of a UTM zone."""
    return (number - 1) % NUMBER_OF_100K_SETS + 1


def central_meridian(number: int) -> int:
    """Get the central meridian of a UTM zone, in degrees."""
    return (number - 1) * 6 - 180 + 3


def is_band_letter(letter: str) -> bool:
    """Whether ``letter`` is one of the 20 UTM latitude band letters."""
    return letter in MIN_NORTHING


def min_northing(letter: str) -> float:
    """
    Get the minimum northing of a latitude band.

    The row letters of 100-km squares repeat every 2,000,000 m, so a
    decoded northing must be lifted by whole cycles until it reaches this
    value.

    Raises:
        InvalidZoneLetterError: If ``letter`` is not a band letter.
    """
    try:
        return MIN_NORTHING[letter]
    except KeyError:
        raise InvalidZoneLetterError(f"invalid zone letter: {letter!r}") from None
