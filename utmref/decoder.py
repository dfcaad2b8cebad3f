"""MGRS grid reference decoding.

Parses ``<zone><band><column><row><easting digits><northing digits>`` back
into UTM fields. The result is the southwest corner of the smallest square
the reference names, never its center.

Northing ambiguity: row letters repeat every 2,000,000 m, so the 100-km
square alone only fixes the northing modulo 2,000,000 m. The band letter
resolves it: the northing is lifted by whole cycles until it reaches the
band's minimum northing.
"""

import string
from typing import NamedTuple

from utmref.alphabet import column_offset, row_offset
from utmref.errors import (
    InvalidZoneLetterError,
    InvalidZoneNumberError,
    MalformedGridReferenceError,
    UnresolvableGridLetterError,
)
from utmref.zones import min_northing, zone_set

# Band letters that do not belong to the UTM grid (polar UPS bands, I/O)
RESERVED_BAND_LETTERS = frozenset("ABYZIO")

NORTHING_CYCLE = 2000000.0
SQUARE_SIZE = 100000.0
MAX_DIGITS = 5


class DecodedReference(NamedTuple):
    """UTM fields recovered from an MGRS reference.

    Attributes:
        zone_number: UTM zone number (1-60).
        zone_letter: Latitude band letter.
        easting: Easting of the southwest corner in meters.
        northing: Northing of the southwest corner in meters.
        precision: Side length of the named square in meters.
    """

    zone_number: int
    zone_letter: str
    easting: float
    northing: float
    precision: int


def _is_digits(text: str) -> bool:
    return all(ch in string.digits for ch in text)


def decode(reference: str) -> DecodedReference:
    """
    Decode an MGRS reference string.

    Args:
        reference: MGRS reference, e.g. "32ULC989564". Case-insensitive.

    Returns:
        DecodedReference with the southwest corner and the precision.

    Raises:
        MalformedGridReferenceError: Empty input, missing or overlong zone
            number, truncated reference, uneven or non-numeric digit groups.
        InvalidZoneNumberError: Zone number outside 1..60.
        InvalidZoneLetterError: Reserved band letter (A, B, Y, Z, I, O).
        UnresolvableGridLetterError: 100-km square letter not valid for the
            zone.

    Example:
        >>> decode("32ULC989564")
        DecodedReference(zone_number=32, zone_letter='U', easting=398900.0, northing=5756400.0, precision=100)
    """
    if not reference:
        raise MalformedGridReferenceError("invalid empty MGRS reference")

    text = reference.upper()

    # Zone number: up to two characters before the first letter
    i = 0
    while i < len(text) and text[i] not in string.ascii_uppercase:
        if i >= 2:
            raise MalformedGridReferenceError(f"bad zone number, mgrs = {reference}")
        i += 1

    zone_digits = text[:i]
    if i == 0 or not _is_digits(zone_digits):
        raise MalformedGridReferenceError(f"bad zone number, mgrs = {reference}")
    number = int(zone_digits)
    if number < 1 or number > 60:
        raise InvalidZoneNumberError(
            f"invalid zone number {number}, mgrs = {reference}"
        )

    # Band letter plus the two square letters
    if i + 3 > len(text):
        raise MalformedGridReferenceError(f"reference too short, mgrs = {reference}")

    letter = text[i]
    if letter in RESERVED_BAND_LETTERS:
        raise InvalidZoneLetterError(
            f"zone letter {letter!r} not handled, mgrs = {reference}"
        )
    column_char, row_char = text[i + 1], text[i + 2]
    i += 3

    remainder = text[i:]
    if len(remainder) % 2 != 0:
        raise MalformedGridReferenceError(
            f"uneven number of digits, mgrs = {reference}"
        )
    half = len(remainder) // 2
    if half > MAX_DIGITS:
        raise MalformedGridReferenceError(
            f"too many digits ({half} per group, at most {MAX_DIGITS}), mgrs = {reference}"
        )
    easting_digits = remainder[:half]
    northing_digits = remainder[half:]
    if not _is_digits(remainder):
        raise MalformedGridReferenceError(
            f"non-numeric digit group, mgrs = {reference}"
        )

    set_number = zone_set(number)
    try:
        east100k = (column_offset(column_char, set_number) + 1) * SQUARE_SIZE
        north100k = row_offset(row_char, set_number) * SQUARE_SIZE
    except UnresolvableGridLetterError as err:
        raise UnresolvableGridLetterError(
            f"{err} (zone {number}), mgrs = {reference}"
        ) from err

    floor = min_northing(letter)
    while north100k < floor:
        north100k += NORTHING_CYCLE

    precision = 100000 // 10**half
    easting = east100k
    northing = north100k
    if half > 0:
        easting += int(easting_digits) * precision
        northing += int(northing_digits) * precision

    return DecodedReference(
        zone_number=number,
        zone_letter=letter,
        easting=float(easting),
        northing=float(northing),
        precision=precision,
    )
