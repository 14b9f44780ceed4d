"""
Static MathUtilities namespace.

**Conceptual**: The module-level functions are the primary API. Code that was
written against the older camelCase surface (MathUtilities.sinD,
MathUtilities.fixAngle, ...) can keep using it through this class, which only
groups those functions. It cannot be instantiated and its VERSION is read-only.

**Usage**:
    from math_utilities import MathUtilities

    MathUtilities.VERSION          # "3.0.0"
    MathUtilities.tanD(45)         # 1.0
    MathUtilities()                # TypeError
"""

from math_utilities._version import __version__
from math_utilities.geometry.coordinates import cartesian_to_polar, polar_to_cartesian
from math_utilities.geometry.trigonometry import (
    acos_deg,
    angle_of_line,
    asin_deg,
    atan2_deg,
    cos_deg,
    degrees_to_radians,
    fix_angle,
    radians_to_degrees,
    sin_deg,
    tan_deg,
)
from math_utilities.stats.descriptive import (
    compute_mean,
    compute_median,
    compute_mode,
    compute_range,
)


class _StaticNamespaceMeta(type):
    """Metaclass that blocks instantiation and exposes a read-only VERSION."""

    @property
    def VERSION(cls) -> str:
        return __version__

    def __call__(cls, *args, **kwargs):
        raise TypeError(
            f"{cls.__name__} is a static class and cannot be instantiated."
        )


class MathUtilities(metaclass=_StaticNamespaceMeta):
    """
    Stateless namespace grouping every helper under its camelCase name.

    Attributes:
        VERSION: Library version string (read-only).
    """

    # Angle conversion
    radiansToDegrees = staticmethod(radians_to_degrees)
    degreesToRadians = staticmethod(degrees_to_radians)

    # Degree trigonometry
    sinD = staticmethod(sin_deg)
    cosD = staticmethod(cos_deg)
    tanD = staticmethod(tan_deg)
    atan2D = staticmethod(atan2_deg)
    angleOfLine = staticmethod(angle_of_line)
    asinD = staticmethod(asin_deg)
    acosD = staticmethod(acos_deg)
    fixAngle = staticmethod(fix_angle)

    # Coordinates (historical spelling)
    cartisianToPolar = staticmethod(cartesian_to_polar)
    polarToCartisian = staticmethod(polar_to_cartesian)

    # Statistics
    mean = staticmethod(compute_mean)
    median = staticmethod(compute_median)
    mode = staticmethod(compute_mode)
    range = staticmethod(compute_range)
