"""Coordinate value types and the conversions between them.

Three immutable representations of a point:
- GeodeticPoint: WGS84 latitude/longitude in degrees
- UtmCoordinate: zone number, band letter, easting/northing in meters
- MgrsReference: MGRS/UTMREF grid reference string

Supported conversions:
    GeodeticPoint.to_utm()   GeodeticPoint.to_mgrs(precision)
    UtmCoordinate.to_ll()    UtmCoordinate.to_mgrs(precision)
    MgrsReference.to_utm()   MgrsReference.to_ll()

The chain GeodeticPoint -> UtmCoordinate -> MgrsReference is lossy: UTM
truncates to whole meters and MGRS to the requested precision. Converting
back yields the southwest corner of the smallest square consistent with
that precision.
"""

import warnings
from dataclasses import dataclass
from typing import Tuple

from utmref import decoder, encoder, projection, zones
from utmref.errors import (
    OutOfRangeLatitudeError,
    OutOfRangeLongitudeError,
    UnsupportedPolarLatitudeError,
)


@dataclass(frozen=True)
class GeodeticPoint:
    """
    Geodetic position on the WGS84 ellipsoid.

    Attributes:
        latitude: Degrees, positive north, valid range [-90, 90].
        longitude: Degrees, positive east, valid range [-180, 180].

    Ranges are checked by the conversions, not at construction; the inverse
    projection may return longitudes marginally outside [-180, 180].

    Example:
        >>> GeodeticPoint(51.95, 7.53).to_utm()
        UtmCoordinate(zone_number=32, zone_letter='U', easting=398973.0, northing=5756497.0)
    """

    latitude: float
    longitude: float

    def __str__(self) -> str:
        """Return 'lat lon' with 6 decimals (about 0.11 m)."""
        return f"{self.latitude:.6f} {self.longitude:.6f}"

    def _validate(self) -> None:
        # Accepting form, so NaN fails every check
        if not (-180.0 <= self.longitude <= 180.0):
            raise OutOfRangeLongitudeError(
                f"invalid longitude, lon = {self.longitude}"
            )
        if not (-90.0 <= self.latitude <= 90.0):
            raise OutOfRangeLatitudeError(f"invalid latitude, lat = {self.latitude}")
        if not (zones.MIN_LATITUDE <= self.latitude <= zones.MAX_LATITUDE):
            raise UnsupportedPolarLatitudeError(
                "polar regions below 80°S and above 84°N not supported, "
                f"lat = {self.latitude}"
            )

    def to_utm(self) -> "UtmCoordinate":
        """
        Project onto UTM.

        Returns:
            UtmCoordinate with easting/northing truncated to whole meters.

        Raises:
            OutOfRangeLatitudeError: Latitude outside [-90, 90].
            OutOfRangeLongitudeError: Longitude outside [-180, 180].
            UnsupportedPolarLatitudeError: Latitude outside [-80, 84].
        """
        self._validate()
        number = zones.zone_number(self.latitude, self.longitude)
        easting, northing = projection.forward(self.latitude, self.longitude, number)
        return UtmCoordinate(
            zone_number=number,
            zone_letter=zones.band_letter(self.latitude),
            easting=easting,
            northing=northing,
        )

    def to_mgrs(self, precision: int = 1) -> "MgrsReference":
        """
        Convert to an MGRS reference.

        Args:
            precision: Precision in meters (1, 10, 100, 1000 or 10000).

        Raises:
            Same as ``to_utm``.
        """
        return self.to_utm().to_mgrs(precision)


@dataclass(frozen=True)
class UtmCoordinate:
    """
    UTM position.

    Attributes:
        zone_number: UTM zone 1-60.
        zone_letter: Latitude band letter C-X (without I, O).
        easting: Meters, including the 500,000 m false easting.
        northing: Meters, including the 10,000,000 m false northing in the
            southern hemisphere.

    Warning:
        The hemisphere of ``to_ll`` is taken from ``zone_letter`` alone
        (below "N" means south). A letter inconsistent with the northing
        gives a point in the wrong hemisphere without any error.
    """

    zone_number: int
    zone_letter: str
    easting: float
    northing: float

    def __str__(self) -> str:
        return f"{self.zone_number}{self.zone_letter} {self.easting:.0f} {self.northing:.0f}"

    def to_ll(self) -> GeodeticPoint:
        """
        Convert to geodetic coordinates.

        Returns:
            GeodeticPoint.

        Raises:
            InvalidZoneNumberError: Zone number outside 1..60.
        """
        if not zones.is_band_letter(self.zone_letter):
            warnings.warn(
                f"zone letter {self.zone_letter!r} is not a UTM band letter; "
                "hemisphere inferred from its order relative to 'N'",
                UserWarning,
                stacklevel=2,
            )
        latitude, longitude = projection.inverse(
            self.easting, self.northing, self.zone_number, self.zone_letter
        )
        return GeodeticPoint(latitude=latitude, longitude=longitude)

    def to_mgrs(self, precision: int = 1) -> "MgrsReference":
        """
        Encode as an MGRS reference.

        Args:
            precision: Precision in meters (1, 10, 100, 1000 or 10000).
                Other values fall back to 1 m.
        """
        return MgrsReference(
            encoder.encode(
                self.zone_number,
                self.zone_letter,
                self.easting,
                self.northing,
                precision,
            )
        )


@dataclass(frozen=True)
class MgrsReference:
    """
    MGRS/UTMREF grid reference.

    Attributes:
        reference: Reference string, e.g. "32ULC9897356497".
    """

    reference: str

    def __str__(self) -> str:
        return self.reference

    def to_utm(self) -> Tuple[UtmCoordinate, int]:
        """
        Decode to the southwest corner of the referenced square.

        Returns:
            Tuple (utm, precision) with the precision in meters.

        Raises:
            MalformedGridReferenceError: Reference cannot be parsed.
            InvalidZoneNumberError: Zone number outside 1..60.
            InvalidZoneLetterError: Reserved band letter.
            UnresolvableGridLetterError: Invalid 100-km square letter.
        """
        decoded = decoder.decode(self.reference)
        utm = UtmCoordinate(
            zone_number=decoded.zone_number,
            zone_letter=decoded.zone_letter,
            easting=decoded.easting,
            northing=decoded.northing,
        )
        return utm, decoded.precision

    def to_ll(self) -> Tuple[GeodeticPoint, int]:
        """
        Decode to geodetic coordinates of the southwest corner.

        Returns:
            Tuple (point, precision) with the precision in meters.

        Raises:
            Same as ``to_utm``.
        """
        utm, precision = self.to_utm()
        return utm.to_ll(), precision


def ll_to_utm(latitude: float, longitude: float) -> UtmCoordinate:
    """Convert latitude/longitude in degrees to UTM."""
    return GeodeticPoint(latitude, longitude).to_utm()


def ll_to_mgrs(latitude: float, longitude: float, precision: int = 1) -> MgrsReference:
    """Convert latitude/longitude in degrees to an MGRS reference."""
    return GeodeticPoint(latitude, longitude).to_mgrs(precision)


def utm_to_ll(
    zone_number: int, zone_letter: str, easting: float, northing: float
) -> GeodeticPoint:
    """Convert UTM fields to geodetic coordinates."""
    return UtmCoordinate(zone_number, zone_letter, easting, northing).to_ll()


def utm_to_mgrs(
    zone_number: int,
    zone_letter: str,
    easting: float,
    northing: float,
    precision: int = 1,
) -> MgrsReference:
    """Convert UTM fields to an MGRS reference."""
    return UtmCoordinate(zone_number, zone_letter, easting, northing).to_mgrs(precision)


def mgrs_to_utm(reference: str) -> Tuple[UtmCoordinate, int]:
    """Convert an MGRS string to (UtmCoordinate, precision)."""
    return MgrsReference(reference).to_utm()


def mgrs_to_ll(reference: str) -> Tuple[GeodeticPoint, int]:
    """Convert an MGRS string to (GeodeticPoint, precision)."""
    return MgrsReference(reference).to_ll()
