"""
Tests for math_utilities/namespace.py and the package-level exports.
"""

import numpy as np
import pytest

import math_utilities
from math_utilities import MathUtilities


def test_version_is_exposed():
    """VERSION on the namespace matches the package version."""
    assert MathUtilities.VERSION == "3.0.0"
    assert math_utilities.__version__ == "3.0.0"
    assert math_utilities.get_version() == "3.0.0"


def test_version_is_read_only():
    """Assigning VERSION fails."""
    with pytest.raises(AttributeError):
        MathUtilities.VERSION = "9.9.9"
    assert MathUtilities.VERSION == "3.0.0"


def test_namespace_cannot_be_instantiated():
    """Constructing the namespace raises TypeError."""
    with pytest.raises(TypeError, match="static class"):
        MathUtilities()


def test_camel_case_names_delegate():
    """The camelCase surface calls the same helpers."""
    assert MathUtilities.tanD(45) == 1
    assert MathUtilities.fixAngle(-10) == 350
    assert np.isclose(MathUtilities.angleOfLine(0, 0, 0, 1), 90.0)
    assert MathUtilities.mean([1, 2, 3]) == 2
    assert MathUtilities.mode([1, 2, 2, 3, 3]) == [2, 3]

    data = [4, 1, 7, 2]
    assert MathUtilities.range(data) == 6
    assert data == [1, 2, 4, 7]


def test_camel_case_coordinate_names():
    """Historical 'cartisian' spelling is kept on the namespace."""
    polar = MathUtilities.cartisianToPolar({"x": 3, "y": 4})
    point = MathUtilities.polarToCartisian(polar)

    assert polar.r == 5
    assert np.isclose(point.x, 3.0)
    assert np.isclose(point.y, 4.0)


def test_package_exports_every_helper():
    """Every name in __all__ is importable from the package root."""
    for name in math_utilities.__all__:
        assert hasattr(math_utilities, name), name
