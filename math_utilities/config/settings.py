"""
Configuration settings for math_utilities.

**Conceptual**: The helper functions are pure, but two caller-visible policies
are worth tuning without touching call sites: whether median/range sort the
caller's sample in place, and what the range of an empty sample should be.
This module loads those policies (plus the log level used by entry points)
from environment variables, validates them at load time, and caches them.

**Environment variables**:
  - MATH_UTILITIES_SORT_IN_PLACE: "true"/"false" (default "true").
  - MATH_UTILITIES_EMPTY_RANGE: "raise" or "nan" (default "raise").
  - MATH_UTILITIES_LOG_LEVEL: logging level name (default "WARNING").

This module uses python-dotenv to load an optional .env file and dataclasses
for type safety.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (no-op when the file does not exist)
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

EMPTY_RANGE_POLICIES = ("raise", "nan")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def _parse_bool(name: str, raw: str) -> bool:
    """Parse a boolean environment value, naming the variable on failure."""
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(
        f"{name} must be one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}, got: {raw}"
    )


@dataclass(frozen=True)
class Settings:
    """
    Global settings for math_utilities.

    **Conceptual**: A single immutable object holding every tunable policy.
    Functions that honour a policy accept an explicit override argument and
    fall back to these settings when the argument is None, so tests can
    either pass the override or inject a custom Settings object.

    Attributes:
        sort_in_place: If True, compute_median/compute_range sort mutable
                       samples (list, ndarray, Series) in place, matching the
                       historical behaviour. If False they sort a copy.
        empty_range: Policy for compute_range on an empty sample.
                     "raise" raises ValueError, "nan" returns NaN.
        log_level: Level name passed to configure_logging (e.g. "INFO").
    """
    sort_in_place: bool = True
    empty_range: str = "raise"
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.empty_range not in EMPTY_RANGE_POLICIES:
            raise ValueError(
                f"MATH_UTILITIES_EMPTY_RANGE must be one of {EMPTY_RANGE_POLICIES}, "
                f"got: {self.empty_range}"
            )
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"MATH_UTILITIES_LOG_LEVEL must be one of {_LOG_LEVELS}, "
                f"got: {self.log_level}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load settings from environment variables.

        Returns:
            Settings object with values loaded from environment.

        Raises:
            ValueError: If any variable is set to an unsupported value.

        Usage example:
            >>> # In .env file:
            >>> # MATH_UTILITIES_EMPTY_RANGE=nan
            >>>
            >>> settings = Settings.from_env()
            >>> print(settings.empty_range)  # "nan"
        """
        sort_in_place = _parse_bool(
            "MATH_UTILITIES_SORT_IN_PLACE",
            os.getenv("MATH_UTILITIES_SORT_IN_PLACE", "true"),
        )
        empty_range = os.getenv("MATH_UTILITIES_EMPTY_RANGE", "raise").strip().lower()
        log_level = os.getenv("MATH_UTILITIES_LOG_LEVEL", "WARNING").strip().upper()

        return cls(
            sort_in_place=sort_in_place,
            empty_range=empty_range,
            log_level=log_level,
        )


# Lazily loaded singleton. Tests can call reset_settings() or pass overrides.
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds invalid values.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("MATH_UTILITIES_EMPTY_RANGE", "nan")
          reset_settings()
          assert get_settings().empty_range == "nan"
      ```
    """
    global _default_settings
    _default_settings = None


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logging for scripts that use the library.

    The library modules only create loggers; handlers are left to the
    application. Entry points call this once at startup.

    Args:
        settings: Settings to read log_level from (defaults to get_settings()).
    """
    if settings is None:
        settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level), format=LOG_FORMAT)
