"""WGS84 ellipsoid and UTM projection constants.

Only the WGS84/GRS80 ellipsoid is supported. The eccentricity is kept at
the rounded value 0.00669438 used by the classic UTM series, which is the
precision the truncated whole-meter outputs are calibrated against.

Constants:
- Semi-major axis (a): 6378137.0 m
- First eccentricity squared (e²): 0.00669438
- UTM central scale factor (k0): 0.9996
- False easting: 500000 m
- False northing (southern hemisphere): 10000000 m
"""

import numpy as np

# WGS84 ellipsoid parameters
WGS84_A = 6378137.0  # Semi-major axis (m)
WGS84_E2 = 0.00669438  # First eccentricity squared
WGS84_EP2 = WGS84_E2 / (1.0 - WGS84_E2)  # Second eccentricity squared
# Footpoint latitude series parameter
WGS84_E1 = (1.0 - np.sqrt(1.0 - WGS84_E2)) / (1.0 + np.sqrt(1.0 - WGS84_E2))

UTM_SCALE_FACTOR = 0.9996  # k0
FALSE_EASTING = 500000.0  # meters
FALSE_NORTHING = 10000000.0  # meters, southern hemisphere only
