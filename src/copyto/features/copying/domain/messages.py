"""User-facing message texts for copy runs."""

from __future__ import annotations

from typing import Final

from .models import RunSummary

NO_SELECTION: Final[str] = "No files or folders selected."


def destination_create_failed(reason: object) -> str:
    return f"Failed to create destination directory: {reason}"


def conflict_question(file_name: str, destination: str) -> str:
    return f'"{file_name}" already exists in {destination}. What would you like to do?'


def copy_failed(file_name: str, reason: object) -> str:
    return f'Failed to copy "{file_name}": {reason}'


def cancelled_summary(summary: RunSummary) -> str:
    return f"Cancelled. Copied {summary.copied} item(s), skipped {summary.skipped}."


def completed_summary(summary: RunSummary, destination: str) -> str | None:
    """Summary for a full pass, or ``None`` when nothing was processed."""

    if summary.copied > 0:
        message = f"Copied {summary.copied} item(s) to {destination}."
        if summary.skipped > 0:
            message += f" Skipped {summary.skipped}."
        return message
    if summary.skipped > 0:
        return f"All {summary.skipped} item(s) were skipped."
    return None


__all__ = [
    "NO_SELECTION",
    "cancelled_summary",
    "completed_summary",
    "conflict_question",
    "copy_failed",
    "destination_create_failed",
]
