"""
Degree-unit trigonometry and angle helpers.

This module wraps the standard trigonometric identities so callers can work
in degrees throughout: conversions between radians and degrees, sine, cosine,
tangent and the inverse functions expressed in degrees, the angle of a
directed line, and normalization of any angle into [0, 360).

Every function accepts either a scalar or a numpy array. Scalars come back as
Python floats, arrays come back as arrays of the same shape. Out-of-domain
inputs (e.g. asin of 2) produce NaN instead of raising, which is why the
implementation uses numpy ufuncs rather than the math module.
"""

from typing import Union

import numpy as np
from numpy.typing import ArrayLike

DEGREES_PER_RADIAN = 180 / np.pi
RADIANS_PER_DEGREE = np.pi / 180
FULL_TURN_DEGREES = 360

AngleResult = Union[float, np.ndarray]


def _finish(result: np.ndarray) -> AngleResult:
    """Return a Python float for 0-d results and the array otherwise."""
    if np.ndim(result) == 0:
        return float(result)
    return result


def radians_to_degrees(r: ArrayLike) -> AngleResult:
    """
    Convert an angle from radians to degrees.

    **Mathematical**: degrees = r * 180 / pi

    Args:
        r: Angle in radians (scalar or array).

    Returns:
        Angle in degrees.
    """
    return _finish((np.asarray(r, dtype=float) * 180) / np.pi)


def degrees_to_radians(d: ArrayLike) -> AngleResult:
    """
    Convert an angle from degrees to radians.

    **Mathematical**: radians = d * pi / 180

    Args:
        d: Angle in degrees (scalar or array).

    Returns:
        Angle in radians.
    """
    return _finish((np.asarray(d, dtype=float) * np.pi) / 180)


def sin_deg(a: ArrayLike) -> AngleResult:
    """
    Sine of an angle given in degrees (result between -1 and 1).

    Args:
        a: Angle in degrees.

    Returns:
        sin(a * pi / 180). Infinite input yields NaN.
    """
    with np.errstate(invalid="ignore"):
        return _finish(np.sin(np.asarray(a, dtype=float) * RADIANS_PER_DEGREE))


def cos_deg(a: ArrayLike) -> AngleResult:
    """
    Cosine of an angle given in degrees (result between -1 and 1).

    Args:
        a: Angle in degrees.

    Returns:
        cos(a * pi / 180). Infinite input yields NaN.
    """
    with np.errstate(invalid="ignore"):
        return _finish(np.cos(np.asarray(a, dtype=float) * RADIANS_PER_DEGREE))


def tan_deg(a: ArrayLike) -> AngleResult:
    """
    Tangent of an angle given in degrees.

    **Functionally**:
    - Exactly 45 returns exactly 1.0 and exactly 135 returns exactly -1.0.
      The general formula lands a few ULPs away at those angles
      (tan(pi / 4) == 0.9999999999999999), so they are matched by equality
      before falling back to tan(a * pi / 180).
    - Any other angle (including 225, 405, ...) uses the general formula.
    - Arrays are handled elementwise with the same two overrides.

    Args:
        a: Angle in degrees.

    Returns:
        Tangent of the angle.
    """
    angles = np.asarray(a, dtype=float)

    if angles.ndim == 0:
        if angles == 45:
            return 1.0
        if angles == 135:
            return -1.0

    with np.errstate(invalid="ignore"):
        general = np.tan(angles * RADIANS_PER_DEGREE)

    if angles.ndim == 0:
        return float(general)

    return np.where(angles == 45, 1.0, np.where(angles == 135, -1.0, general))


def atan2_deg(y: ArrayLike, x: ArrayLike) -> AngleResult:
    """
    Quadrant-aware arctangent of (y, x), in degrees.

    Follows the two-argument arctangent conventions: the result lies in
    (-180, 180] and atan2_deg(0, 0) == 0 (signed zeros follow IEEE rules).

    Args:
        y: Vertical component.
        x: Horizontal component.

    Returns:
        Angle of the vector (x, y) from the positive x axis, in degrees.
    """
    return _finish(np.arctan2(y, x) * DEGREES_PER_RADIAN)


def angle_of_line(
    x1: ArrayLike, y1: ArrayLike, x2: ArrayLike, y2: ArrayLike
) -> AngleResult:
    """
    Angle in degrees of the directed line from (x1, y1) to (x2, y2).

    Example:
        >>> angle_of_line(0, 0, 1, 1)
        45.0
    """
    return atan2_deg(np.subtract(y2, y1), np.subtract(x2, x1))


def asin_deg(r: ArrayLike) -> AngleResult:
    """
    Angle in degrees whose sine is r (opposite over hypotenuse).

    Values of r outside [-1, 1] yield NaN; they are not validated.
    """
    with np.errstate(invalid="ignore"):
        return _finish(np.arcsin(np.asarray(r, dtype=float)) * DEGREES_PER_RADIAN)


def acos_deg(r: ArrayLike) -> AngleResult:
    """
    Angle in degrees whose cosine is r (adjacent over hypotenuse).

    Values of r outside [-1, 1] yield NaN; they are not validated.
    """
    with np.errstate(invalid="ignore"):
        return _finish(np.arccos(np.asarray(r, dtype=float)) * DEGREES_PER_RADIAN)


def fix_angle(a: ArrayLike) -> AngleResult:
    """
    Normalize an angle into the half-open interval [0, 360).

    **Mathematical**: Two steps, in this order:
        a = fmod(a, 360)        # remainder keeps the sign of a
        a = a + 360 if a < 0    # fold negative remainders up
    Python's % operator already returns non-negative results for a positive
    divisor, but fmod plus the explicit correction is kept so edge cases match
    the remainder-based definition exactly.

    **Edge cases**:
    - fix_angle(360) == 0, fix_angle(-360) == 0 (the latter is -0.0).
    - fix_angle(-1) == 359, fix_angle(370) == 10.
    - A tiny negative input such as -1e-20 rounds up to 360.0 after the
      correction, exactly as the two-step definition implies.
    - Infinite or NaN input yields NaN.

    Args:
        a: Angle in degrees, any magnitude.

    Returns:
        Equivalent angle in [0, 360).
    """
    with np.errstate(invalid="ignore"):
        remainder = np.fmod(np.asarray(a, dtype=float), FULL_TURN_DEGREES)
    return _finish(np.where(remainder < 0, remainder + FULL_TURN_DEGREES, remainder))
