"""Logging setup for an estate report run."""
from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Set the root log level and line format for one report run.

    ``--log-level`` wins over ``LOG_LEVEL``; INFO is used when neither is set.
    The CLI calls this after the env file is loaded, so a ``LOG_LEVEL`` line
    there also applies.
    """

    resolved_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=resolved_level, format=LOG_FORMAT)
