"""
Logging utilities for the Order List UI.

Every module keeps one `LOG = logs.logger(__file__)`. The fetch path logs
issued requests at info and discarded stale responses at debug; contained
failures (rejected fetches and deletes, which never reach the view as
exceptions) are logged at error with exc_info so the cause chain from the
service layer is kept. LOG_LEVEL=DEBUG shows the stale discards.
"""

import logging
import os
from pathlib import Path

# Default log level from environment or INFO
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def logger(name: str) -> logging.Logger:
    """
    Create and configure a logger for the given name.

    If name is a file path (e.g., __file__), extracts the module name
    for cleaner log output.

    Args:
        name: Logger name or __file__ path.

    Returns:
        Configured logging.Logger instance.
    """
    if "/" in name or "\\" in name:
        name = Path(name).stem

    log = logging.getLogger(name)

    # Only configure if not already configured
    if not log.handlers:
        log.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        log.addHandler(handler)

    return log
