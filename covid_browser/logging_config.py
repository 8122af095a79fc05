from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _build_formatter(format_mode: str) -> logging.Formatter:
    if format_mode == "plain":
        return logging.Formatter(PLAIN_FORMAT)
    # extra={...} fields on a record become top-level JSON keys
    return jsonlogger.JsonFormatter(JSON_FIELDS)


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Set up the root logger with a single stderr handler.

    Output is JSON lines unless plain text is asked for, either through
    `force_format="plain"` or COVID_BROWSER_LOG_FORMAT=plain. An explicit
    force_format beats the environment variable.

    Calling this again replaces the handler instead of stacking a second one.
    """
    format_mode = (force_format or os.getenv("COVID_BROWSER_LOG_FORMAT", "json")).lower()

    handler = logging.StreamHandler()
    handler.setFormatter(_build_formatter(format_mode))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)
