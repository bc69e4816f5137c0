"""Logging setup for fixpath.

Every package logger hangs under the ``fixpath`` logger, which gets one stdout
handler the first time a logger is requested. Searches report their outcome
(early exits, accepted Yen paths, the final result) at DEBUG. A search run
with ``SearchConfig(trace=True)`` emits the same records at INFO, so a single
call can be followed without lowering the level of the whole package.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "fixpath"

# Marks the handler installed by setup_root_logger so it can be found again.
_HANDLER_FLAG = "_fixpath_handler"


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
    force: bool = False,
) -> logging.Logger:
    """Attach the fixpath handler to the ``fixpath`` logger.

    Calling again is a no-op unless ``force`` is set, in which case the
    previous fixpath handler is swapped for the new one and the level reset.
    Handlers added by other code are left alone.

    Args:
        level: Level of the ``fixpath`` logger (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
        force: Replace an existing fixpath handler.

    Returns:
        The ``fixpath`` logger.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    installed = [h for h in root_logger.handlers if getattr(h, _HANDLER_FLAG, False)]
    if installed and not force:
        return root_logger

    for old in installed:
        root_logger.removeHandler(old)

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(format_string))
    setattr(handler, _HANDLER_FLAG, True)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Let records reach the root logger so pytest can capture them
    root_logger.propagate = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger ``name``, making sure the fixpath handler exists.

    Args:
        name: Logger name, normally ``__name__`` of a fixpath module.
    """
    setup_root_logger()
    return logging.getLogger(name)


def search_log_level(trace: bool) -> int:
    """Level for search outcome records: INFO when tracing, DEBUG otherwise."""
    return logging.INFO if trace else logging.DEBUG
