"""Public surface for the copy feature."""

from .domain.models import ConflictAction, CopyOutcome, RunSummary
from .domain.paths import expand_home, format_for_display
from .usecases.copy_to_destination import CopyToDestinationService
from .usecases.ports import ConflictPrompter, DestinationPicker, FileSystem, Notifier

__all__ = [
    "ConflictAction",
    "ConflictPrompter",
    "CopyOutcome",
    "CopyToDestinationService",
    "DestinationPicker",
    "FileSystem",
    "Notifier",
    "RunSummary",
    "expand_home",
    "format_for_display",
]
