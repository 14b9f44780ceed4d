"""
Cartesian and polar point types and the conversions between them.

Angles are in degrees throughout. The two conversions are approximate
inverses: a round trip reproduces the point up to floating-point error.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Tuple, Union

import numpy as np

from math_utilities.geometry.trigonometry import atan2_deg, cos_deg, sin_deg


@dataclass(frozen=True)
class CartesianPoint:
    """
    A point in the plane given by its x and y components.

    Attributes:
        x: Horizontal component.
        y: Vertical component.
    """
    x: float
    y: float

    def as_dict(self) -> Dict[str, float]:
        """Return {"x": ..., "y": ...}."""
        return asdict(self)


@dataclass(frozen=True)
class PolarPoint:
    """
    A point in the plane given by radius and angle.

    Attributes:
        r: Distance from the origin. Any real number is accepted; a negative
           radius points in the opposite direction of t.
        t: Angle from the positive x axis, in degrees.
    """
    r: float
    t: float

    def as_dict(self) -> Dict[str, float]:
        """Return {"r": ..., "t": ...}."""
        return asdict(self)


CartesianLike = Union[CartesianPoint, Mapping[str, float]]
PolarLike = Union[PolarPoint, Mapping[str, float]]


def _read_fields(point: Any, names: Tuple[str, str]) -> Tuple[float, float]:
    """
    Pull two named components from a point dataclass or a mapping.

    Raises:
        KeyError: If a mapping lacks one of the components.
    """
    if isinstance(point, Mapping):
        missing = [name for name in names if name not in point]
        if missing:
            raise KeyError(
                f"Point mapping is missing component(s) {missing}; expected keys {list(names)}."
            )
        return point[names[0]], point[names[1]]

    return getattr(point, names[0]), getattr(point, names[1])


def cartesian_to_polar(p: CartesianLike) -> PolarPoint:
    """
    Convert cartesian coordinates {x, y} to polar coordinates {r, t}.

    **Mathematical**:
        r = sqrt(x^2 + y^2)
        t = atan2(y, x) in degrees, within (-180, 180]

    **Edge cases**:
    - The origin maps to PolarPoint(r=0.0, t=0.0): the two-argument
      arctangent defines atan2(0, 0) as 0.

    Args:
        p: CartesianPoint or mapping with "x" and "y" keys.

    Returns:
        PolarPoint with radius and angle in degrees.
    """
    x, y = _read_fields(p, ("x", "y"))
    r = float(np.sqrt(x * x + y * y))
    t = atan2_deg(y, x)

    return PolarPoint(r=r, t=t)


def polar_to_cartesian(p: PolarLike) -> CartesianPoint:
    """
    Convert polar coordinates {r, t} to cartesian coordinates {x, y}.

    **Mathematical**:
        x = r * cos(t)
        y = r * sin(t)
    with t in degrees.

    Args:
        p: PolarPoint or mapping with "r" and "t" keys.

    Returns:
        CartesianPoint.
    """
    r, t = _read_fields(p, ("r", "t"))
    x = r * cos_deg(t)
    y = r * sin_deg(t)

    return CartesianPoint(x=float(x), y=float(y))
