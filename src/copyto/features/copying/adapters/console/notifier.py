"""Notifier adapter emitting user messages on the application logger."""

from __future__ import annotations

import logging

from copyto.platform.logging import logger as app_logger

from ...usecases.ports import Notifier


class LoggerNotifier(Notifier):
    """Send notices through logging so they reach the console and the log file."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or app_logger

    def info(self, message: str) -> None:
        self._logger.info(message, extra={"notice": "info"})

    def warning(self, message: str) -> None:
        self._logger.warning(message, extra={"notice": "warning"})

    def error(self, message: str) -> None:
        self._logger.error(message, extra={"notice": "error"})


__all__ = ["LoggerNotifier"]
