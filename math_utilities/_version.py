"""Version identifier for the math_utilities package."""

__version__ = "3.0.0"


def get_version() -> str:
    """
    Get the library version.

    :return: Version string, e.g. "3.0.0".
    """
    return __version__


__all__ = ["__version__", "get_version"]
