"""Data structures that describe copy outcomes and run summaries."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class ConflictAction(str, Enum):
    """How the user wants to resolve an existing target entry."""

    OVERWRITE = "overwrite"
    SKIP = "skip"
    CANCEL = "cancel"

    @property
    def label(self) -> str:
        """Button-style label shown to the user."""

        return self.value.capitalize()

    @staticmethod
    def from_user_input(value: str) -> "ConflictAction":
        """Translate a raw answer into the matching action."""

        normalized = value.strip().lower()
        for action in ConflictAction:
            if action.value == normalized:
                return action
        valid = ", ".join(a.value for a in ConflictAction)
        msg = f"Unsupported conflict action '{value}'. Valid options: {valid}"
        raise ValueError(msg)


class CopyOutcome(str, Enum):
    """Result of copying a single source entry."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    CANCELLED = "cancelled"


@dataclass(slots=True, frozen=True)
class RunSummary:
    """Counters accumulated over one batch.

    Built by folding outcomes with :meth:`record`; a cancelled summary is
    terminal and ignores further outcomes.
    """

    copied: int = 0
    skipped: int = 0
    cancelled: bool = False

    def record(self, outcome: CopyOutcome) -> "RunSummary":
        """Return the summary updated with ``outcome``."""

        if self.cancelled:
            return self
        if outcome is CopyOutcome.SUCCESS:
            return replace(self, copied=self.copied + 1)
        if outcome is CopyOutcome.SKIPPED:
            return replace(self, skipped=self.skipped + 1)
        return replace(self, cancelled=True)


__all__ = ["ConflictAction", "CopyOutcome", "RunSummary"]
