"""Centralized logging configuration for Fret Log.

This module provides a consistent way to configure logging across the application.
"""

import logging
import sys
from typing import Optional

# Log levels for different modules
MODULE_LOG_LEVELS = {
    # Core modules
    "fret_log": logging.INFO,
    "fret_log.cli": logging.INFO,
    # Pipeline stages
    "fret_log.audio": logging.INFO,
    "fret_log.audio.pitch_detector": logging.INFO,  # Set to DEBUG for per-window estimates
    "fret_log.detection": logging.INFO,
    "fret_log.note_matcher": logging.INFO,  # Set to DEBUG for detailed matching info
    "fret_log.services": logging.INFO,
    "fret_log.core": logging.INFO,
    "fret_log.logger": logging.WARNING,  # Logger module itself should be quiet
    # Libraries/third-party
    "soundfile": logging.ERROR,
    "librosa": logging.ERROR,
    "audioread": logging.ERROR,
    # Root logger
    "": logging.ERROR,
}

# Shared console handler
_console_handler: Optional[logging.StreamHandler] = None


def setup_logging(level: Optional[str] = None) -> None:
    """Set up logging configuration for the application.

    Args:
        level: If provided, override all 'fret_log' log levels with this level (e.g., "DEBUG").
    """
    global _console_handler

    # Create a single, shared console handler; rebuild it if sys.stdout was
    # swapped since the last setup (the old stream may already be closed)
    if _console_handler is None or _console_handler.stream is not sys.stdout:
        _console_handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        _console_handler.setFormatter(formatter)

    # Determine log levels
    log_levels = MODULE_LOG_LEVELS.copy()
    if level:
        numeric_level = logging.getLevelName(level.upper())
        if isinstance(numeric_level, int):
            for module_name in log_levels:
                if module_name.startswith("fret_log"):
                    log_levels[module_name] = numeric_level
        else:
            logging.getLogger(__name__).error(f"Invalid log level: {level}")

    # Apply module-specific levels. Only the package root gets the handler;
    # child loggers propagate up to it.
    for module_name, module_level in log_levels.items():
        logger = logging.getLogger(module_name if module_name else "")
        logger.setLevel(module_level)

        if module_name in ("fret_log", ""):
            for handler in logger.handlers[:]:
                logger.removeHandler(handler)
            logger.addHandler(_console_handler)
            logger.propagate = False

    # Confirm setup complete
    logging.getLogger("fret_log").debug("Logging configuration complete")
