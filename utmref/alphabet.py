"""Letter sequences for MGRS 100-km square identifiers.

The 100-km square identifier is a column letter (easting) followed by a row
letter (northing). Both are drawn from restricted alphabets that omit I and
O, and both wrap back to "A" after their last letter:

- Columns: A-Z without I, O (24 letters)
- Rows:    A-V without I, O (20 letters)

UTM zones are grouped into 6 recurring zone sets. Each set starts its
columns and rows from a fixed origin letter, so the lettering stays
consistent across a 36° band of longitude.
"""

from typing import Sequence

from utmref.errors import UnresolvableGridLetterError

COLUMN_LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"
ROW_LETTERS = "ABCDEFGHJKLMNPQRSTUV"

# Origin letters of the lower-left square, indexed by (zone_set - 1)
SET_ORIGIN_COLUMN_LETTERS = ("A", "J", "S", "A", "J", "S")
SET_ORIGIN_ROW_LETTERS = ("A", "F", "A", "F", "A", "F")


def _advance(letters: Sequence[str], origin: str, steps: int) -> str:
    return letters[(letters.index(origin) + steps) % len(letters)]


def _walk(letters: Sequence[str], origin: str, target: str, zone_set: int) -> int:
    """Count the forward steps from ``origin`` to ``target``, wrapping once."""
    index = letters.index(origin)
    steps = 0
    wrapped = False
    while letters[index] != target:
        index += 1
        steps += 1
        if index == len(letters):
            if wrapped:
                raise UnresolvableGridLetterError(
                    f"bad 100-km square letter {target!r} for zone set {zone_set}"
                )
            index = 0
            wrapped = True
    return steps


def column_letter(column: int, zone_set: int) -> str:
    """
    Get the column letter of a 100-km square.

    Args:
        column: Column index, floor(easting / 100000). Values are 1-8.
        zone_set: 100-km zone set of the UTM zone (1-6).

    Returns:
        Column letter (A-Z without I, O).
    """
    origin = SET_ORIGIN_COLUMN_LETTERS[zone_set - 1]
    return _advance(COLUMN_LETTERS, origin, column - 1)


def row_letter(row: int, zone_set: int) -> str:
    """
    Get the row letter of a 100-km square.

    Args:
        row: Row index, floor(northing / 100000) mod 20. Values are 0-19.
        zone_set: 100-km zone set of the UTM zone (1-6).

    Returns:
        Row letter (A-V without I, O).
    """
    origin = SET_ORIGIN_ROW_LETTERS[zone_set - 1]
    return _advance(ROW_LETTERS, origin, row)


def column_offset(letter: str, zone_set: int) -> int:
    """
    Get the number of column steps from the set's origin to ``letter``.

    The easting of the square's west edge is ``(steps + 1) * 100000``.

    Raises:
        UnresolvableGridLetterError: If the letter is not a column letter.
    """
    origin = SET_ORIGIN_COLUMN_LETTERS[zone_set - 1]
    return _walk(COLUMN_LETTERS, origin, letter, zone_set)


def row_offset(letter: str, zone_set: int) -> int:
    """
    Get the number of row steps from the set's origin to ``letter``.

    The result is the northing of the square's south edge in units of
    100 km within the 2,000,000 m row cycle. Which cycle the square lies in
    is not resolved here; see ``utmref.zones.min_northing``.

    Raises:
        UnresolvableGridLetterError: If the letter is above "V" or is not a
            row letter.
    """
    if letter > ROW_LETTERS[-1]:
        raise UnresolvableGridLetterError(
            f"invalid northing letter {letter!r}, rows end at 'V'"
        )
    origin = SET_ORIGIN_ROW_LETTERS[zone_set - 1]
    return _walk(ROW_LETTERS, origin, letter, zone_set)
