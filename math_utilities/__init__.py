"""
math_utilities: stateless trigonometry, coordinate and statistics helpers.

Functions are grouped by subpackage (geometry, stats) and re-exported here,
so `from math_utilities import sin_deg, compute_median` works directly.
"""

from math_utilities._version import __version__, get_version
from math_utilities.geometry.coordinates import (
    CartesianPoint,
    PolarPoint,
    cartesian_to_polar,
    polar_to_cartesian,
)
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
from math_utilities.namespace import MathUtilities
from math_utilities.stats.descriptive import (
    compute_mean,
    compute_median,
    compute_mode,
    compute_range,
    describe_sample,
)

__all__ = [
    "__version__",
    "get_version",
    "MathUtilities",
    "CartesianPoint",
    "PolarPoint",
    "cartesian_to_polar",
    "polar_to_cartesian",
    "radians_to_degrees",
    "degrees_to_radians",
    "sin_deg",
    "cos_deg",
    "tan_deg",
    "atan2_deg",
    "angle_of_line",
    "asin_deg",
    "acos_deg",
    "fix_angle",
    "compute_mean",
    "compute_median",
    "compute_mode",
    "compute_range",
    "describe_sample",
]
