from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "CATALOG_ADMIN_LOG_FORMAT"
LOG_LEVEL_ENV = "CATALOG_ADMIN_LOG_LEVEL"

# One line per HTTP call from requests/urllib3 drowns out the dashboard's own logs
_NOISY_LOGGERS = ("urllib3", "werkzeug")


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    # getLevelName returns "Level X" for names it does not know
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_formatter(format_mode: str) -> logging.Formatter:
    if format_mode == "plain":
        return logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    return jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields={"levelname": "level", "name": "logger"},
    )


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the dashboard.

    Format: ``force_format`` ("json" or "plain"), else CATALOG_ADMIN_LOG_FORMAT,
    else JSON. Level: ``level`` (int or name), else CATALOG_ADMIN_LOG_LEVEL,
    else INFO.

    Extra fields passed via ``extra={...}`` end up as top-level JSON keys.
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()
    root_level = _resolve_level(level)

    root = logging.getLogger()
    root.setLevel(root_level)

    handler = logging.StreamHandler()
    handler.setFormatter(_build_formatter(format_mode))

    # Replace any existing handlers to avoid duplicate logs
    root.handlers.clear()
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(root_level, logging.WARNING))
