"""Exceptions raised by coordinate conversions.

All conversion failures derive from ``CoordinateConversionError``, itself a
``ValueError``, so callers may catch either the specific kind or the whole
family.
"""


class CoordinateConversionError(ValueError):
    """Base class for all conversion failures."""


class OutOfRangeLatitudeError(CoordinateConversionError):
    """Latitude outside [-90, 90] degrees."""


class OutOfRangeLongitudeError(CoordinateConversionError):
    """Longitude outside [-180, 180] degrees."""


class UnsupportedPolarLatitudeError(CoordinateConversionError):
    """Latitude south of 80°S or north of 84°N (UPS is not supported)."""


class InvalidZoneNumberError(CoordinateConversionError):
    """UTM zone number outside 1..60."""


class InvalidZoneLetterError(CoordinateConversionError):
    """Reserved or non-grid latitude band letter (A, B, Y, Z, I, O)."""


class MalformedGridReferenceError(CoordinateConversionError):
    """MGRS string that cannot be parsed."""


class UnresolvableGridLetterError(CoordinateConversionError):
    """100-km square letter not found in its alphabet."""
