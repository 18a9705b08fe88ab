"""Render settings and logging setup for whitted."""

import logging
import os
from typing import Optional

# Recursion budget for reflected and refracted rays
DEFAULT_MAX_DEPTH = 5

# Preset trade-offs between speed and image quality. `scale` multiplies the
# requested output resolution.
QUALITY_LEVELS = {
    "preview": {"depth": 2, "scale": 0.5},
    "balanced": {"depth": 4, "scale": 0.75},
    "high_quality": {"depth": 6, "scale": 1.0},
}
DEFAULT_QUALITY = "balanced"

# Logging
LOG_LEVEL = os.getenv("WHITTED_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("WHITTED_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def quality_settings(name: str) -> dict:
    """
    Look up a quality preset by name.

    Raises:
        ValueError: if the name is not one of QUALITY_LEVELS
    """
    try:
        return dict(QUALITY_LEVELS[name])
    except KeyError:
        raise ValueError(
            f"unknown quality level {name!r}; expected one of {sorted(QUALITY_LEVELS)}"
        ) from None


def setup_logging(level: Optional[str] = None, name: str = "whitted") -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Only the command-line entry point calls this; importing the library never
    touches logging configuration.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...). Defaults to
            WHITTED_LOG_LEVEL.
        name: Logger to configure

    Returns:
        The configured logger
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Avoid stacking handlers when called more than once
    if not any(getattr(h, "_whitted_console", False) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler._whitted_console = True
        logger.addHandler(console_handler)
    for handler in logger.handlers:
        handler.setLevel(numeric_level)

    return logger
