"""
Summary: Re-export the configured logger, setup helpers, and the Rich copy-event handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, LOGGER_NAME, logger, setup_logger
from .handlers import CopyEventRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "CopyEventRichHandler",
    "logger",
    "setup_logger",
]
