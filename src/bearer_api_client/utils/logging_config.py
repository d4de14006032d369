"""Logging setup for applications embedding the client."""

import logging
import sys
from typing import Optional

from ..config import load_settings

_LOGGING_CONFIGURED = False


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging with a single stdout handler.

    Repeated calls are ignored so embedding applications and tests can
    call this freely.

    :param level: Logging level name (e.g. ``"DEBUG"``); defaults to the
                  ``LOG_LEVEL`` setting
    :type level: Optional[str]
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        logger = logging.getLogger(__name__)
        logger.debug("Logging already configured, skipping duplicate setup")
        return

    if level is None:
        level = load_settings().log_level

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,
    )

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _LOGGING_CONFIGURED = True
