"""Coordinate conversion between WGS84 lat/lon, UTM and MGRS/UTMREF.

This package converts a point between three representations:
- GeodeticPoint: latitude/longitude in degrees on the WGS84 ellipsoid
- UtmCoordinate: Universal Transverse Mercator zone, band and easting/northing
- MgrsReference: Military Grid Reference System (same as UTMREF) string

Modules:
- zones: UTM zone number and latitude band resolution
- projection: Transverse Mercator forward/inverse series
- alphabet: 100-km square letter sequences
- encoder / decoder: UTM <-> MGRS grid references
- types: value types and the six conversions

Polar regions (UPS, south of 80°S and north of 84°N) are not supported.
"""

from utmref.errors import (
    CoordinateConversionError,
    InvalidZoneLetterError,
    InvalidZoneNumberError,
    MalformedGridReferenceError,
    OutOfRangeLatitudeError,
    OutOfRangeLongitudeError,
    UnresolvableGridLetterError,
    UnsupportedPolarLatitudeError,
)
from utmref.types import (
    GeodeticPoint,
    MgrsReference,
    UtmCoordinate,
    ll_to_mgrs,
    ll_to_utm,
    mgrs_to_ll,
    mgrs_to_utm,
    utm_to_ll,
    utm_to_mgrs,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "GeodeticPoint",
    "UtmCoordinate",
    "MgrsReference",
    # Conversions
    "ll_to_utm",
    "ll_to_mgrs",
    "utm_to_ll",
    "utm_to_mgrs",
    "mgrs_to_utm",
    "mgrs_to_ll",
    # Errors
    "CoordinateConversionError",
    "OutOfRangeLatitudeError",
    "OutOfRangeLongitudeError",
    "UnsupportedPolarLatitudeError",
    "InvalidZoneNumberError",
    "InvalidZoneLetterError",
    "MalformedGridReferenceError",
    "UnresolvableGridLetterError",
]
