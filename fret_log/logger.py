"""Per-module loggers for Fret Log, all rooted at the ``fret_log`` logger."""
import logging
from typing import Dict

PACKAGE_LOGGER = "fret_log"

_loggers: Dict[str, logging.Logger] = {}


def logger_name(name: str) -> str:
    """Map a module name onto the package's logger hierarchy.

    Modules run as scripts (``__main__``) or imported from outside the
    package are placed under ``fret_log`` so the handler installed by
    ``setup_logging`` sees their records.
    """
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return name
    return f"{PACKAGE_LOGGER}.{name.strip('_') or 'main'}"


def get_logger(name: str) -> logging.Logger:
    """Return the cached logger for a module.

    Args:
        name: Usually ``__name__`` (e.g. 'fret_log.note_matcher')
    """
    qualified = logger_name(name)
    logger = _loggers.get(qualified)
    if logger is None:
        logger = _loggers[qualified] = logging.getLogger(qualified)
    return logger
