"""UTM to MGRS grid reference encoding.

An MGRS reference is the UTM zone number and band letter, the two-letter
100-km square identifier, and equal-length easting/northing digit groups
measured from the square's southwest corner:

    31U GT 00373 04554
    ^^^ ^^ ^^^^^ ^^^^^
    |   |  |     northing within the square
    |   |  easting within the square
    |   100-km square (column, row)
    zone and band

Shorter digit groups drop the least-significant digits, so a reference at
100 m precision names the 100 m square containing the point.
"""

import numpy as np

from utmref.alphabet import column_letter, row_letter
from utmref.zones import zone_set

# Precision in meters -> number of digits per group
PRECISION_DIGITS = {
    1: 5,
    10: 4,
    100: 3,
    1000: 2,
    10000: 1,
}
DEFAULT_DIGITS = 5


def precision_digits(precision: int) -> int:
    """Digits per group for a precision in meters; unknown values give 5."""
    return PRECISION_DIGITS.get(precision, DEFAULT_DIGITS)


def square_id(easting: float, northing: float, number: int) -> str:
    """
    Get the two-letter 100-km square identifier of a UTM position.

    Args:
        easting: Easting in meters.
        northing: Northing in meters.
        number: UTM zone number.

    Returns:
        Column letter followed by row letter, e.g. "LC".
    """
    column = int(np.floor(easting / 100000))
    row = int(np.floor(northing / 100000)) % 20
    set_number = zone_set(number)
    return column_letter(column, set_number) + row_letter(row, set_number)


def _digit_group(value: float, digits: int) -> str:
    # floor, same as square_id, so the digits never roll into the next square
    text = "00000" + str(int(np.floor(value)))
    window = text[-5:]
    return window[:digits]


def encode(
    number: int,
    letter: str,
    easting: float,
    northing: float,
    precision: int = 1,
) -> str:
    """
    Encode a UTM position as an MGRS reference string.

    Args:
        number: UTM zone number.
        letter: Latitude band letter.
        easting: Easting in meters.
        northing: Northing in meters.
        precision: Wanted precision in meters, one of 1, 10, 100, 1000 or
            10000. Any other value falls back to 1 m.

    Returns:
        MGRS reference, e.g. "31UGT0037304554".

    Example:
        >>> encode(32, "U", 398973, 5756497, precision=100)
        '32ULC989564'
    """
    digits = precision_digits(precision)
    return (
        f"{number}{letter}"
        f"{square_id(easting, northing, number)}"
        f"{_digit_group(easting, digits)}"
        f"{_digit_group(northing, digits)}"
    )
