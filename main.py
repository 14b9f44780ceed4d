"""
math_utilities – Main entry point.

Minimal bootstrap script to verify the package imports and report its version.
"""

import logging

from math_utilities import __version__
from math_utilities.config.settings import configure_logging, get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Configure logging from settings and print the library version."""
    settings = get_settings()
    configure_logging(settings)
    logger.debug("Loaded settings: %s", settings)
    print(f"math_utilities {__version__}")


if __name__ == "__main__":
    main()
