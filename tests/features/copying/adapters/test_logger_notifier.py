"""Tests for the logger-backed notifier."""

from __future__ import annotations

import logging

import pytest

from copyto.features.copying import Notifier
from copyto.features.copying.adapters.console import LoggerNotifier


def test_notices_are_logged_with_levels(caplog: pytest.LogCaptureFixture) -> None:
    test_logger = logging.getLogger("copyto.tests.notifier")
    notifier = LoggerNotifier(test_logger)
    assert isinstance(notifier, Notifier)

    with caplog.at_level(logging.INFO, logger="copyto.tests.notifier"):
        notifier.info("Copied 1 item(s) to ~/utils.")
        notifier.warning("No files or folders selected.")
        notifier.error('Failed to copy "a.txt": denied')

    records = [r for r in caplog.records if r.name == "copyto.tests.notifier"]
    assert [(r.levelno, r.getMessage()) for r in records] == [
        (logging.INFO, "Copied 1 item(s) to ~/utils."),
        (logging.WARNING, "No files or folders selected."),
        (logging.ERROR, 'Failed to copy "a.txt": denied'),
    ]
    assert [getattr(r, "notice") for r in records] == ["info", "warning", "error"]
