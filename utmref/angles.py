"""
Angle conversion utilities for the projection series.

The Transverse Mercator series are evaluated in radians while every
public value type carries degrees. Conversions are exactly
``deg * (pi / 180)`` and ``180 * (rad / pi)``; truncated whole-meter
outputs depend on this operation order.
"""

import numpy as np
from typing import Union

Numeric = Union[float, np.ndarray]


def degrees_to_radians(degrees: Numeric) -> Numeric:
    """
    Convert degrees to radians.

    Args:
        degrees: Angle in degrees (scalar or array).

    Returns:
        Angle in radians.

    Example:
        >>> degrees_to_radians(180.0)
        3.141592653589793
    """
    return degrees * (np.pi / 180.0)


def radians_to_degrees(radians: Numeric) -> Numeric:
    """Convert radians to degrees."""
    return 180.0 * (radians / np.pi)
