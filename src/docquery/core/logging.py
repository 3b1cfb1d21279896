# docquery/core/logging.py
"""JSON log output for processes embedding the query engine."""
from __future__ import annotations

import logging
import sys
from typing import TextIO

from pythonjsonlogger.json import JsonFormatter

from docquery.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(
    level: str | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Route root logging through a single JSON handler.

    ``level`` defaults to ``settings.log_level``. Calling this again replaces
    the handler instead of stacking another one.
    """
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        JsonFormatter(LOG_FORMAT, rename_fields={"levelname": "level"})
    )

    root.handlers = [handler]
    return handler
