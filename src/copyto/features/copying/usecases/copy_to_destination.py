"""Use case copying a batch of sources into one destination folder."""

from __future__ import annotations

from collections.abc import Sequence
from logging import Logger, getLogger
from pathlib import Path

from ..domain import messages
from ..domain.models import ConflictAction, CopyOutcome, RunSummary
from ..domain.paths import expand_home, format_for_display
from .ports import ConflictPrompter, DestinationPicker, FileSystem, Notifier


class CopyToDestinationService:
    """Coordinate destination lookup, conflict prompts, and copies through injected ports."""

    _filesystem: FileSystem
    _picker: DestinationPicker
    _prompter: ConflictPrompter
    _notifier: Notifier
    _configured_destination: str
    _home: str | None
    _logger: Logger

    def __init__(
        self,
        *,
        filesystem: FileSystem,
        picker: DestinationPicker,
        prompter: ConflictPrompter,
        notifier: Notifier,
        configured_destination: str = "",
        home: str | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._filesystem = filesystem
        self._picker = picker
        self._prompter = prompter
        self._notifier = notifier
        self._configured_destination = configured_destination
        self._home = home
        self._logger = logger or getLogger(__name__)

    def resolve_destination(self) -> Path | None:
        """Return the configured destination or ask the user to pick one.

        A configured value is expanded and made absolute against the working
        directory, but not checked for existence. ``None`` means the picker
        was dismissed.
        """

        configured = self._configured_destination.strip()
        if configured:
            return Path(expand_home(configured, home=self._home)).absolute()

        selected = self._picker.pick_destination()
        if selected is None:
            self._logger.debug("Destination picker dismissed")
        return selected

    def ensure_destination(self, destination: Path) -> bool:
        """Create ``destination`` when missing; report and return False on failure."""

        if self._filesystem.exists(destination):
            return True

        try:
            self._filesystem.create_directory(destination)
        except Exception as exc:
            reason = str(exc) or exc.__class__.__name__
            self._notifier.error(messages.destination_create_failed(reason))
            return False

        self._logger.debug(
            "Created destination %s",
            destination,
            extra={"copy_event": "copy.destination.created", "destination": str(destination)},
        )
        return True

    def copy_item(
        self,
        source: Path,
        destination: Path,
        *,
        display_destination: str | None = None,
        sequence: int | None = None,
        total: int | None = None,
    ) -> CopyOutcome:
        """Copy one source entry into ``destination`` resolving name conflicts."""

        file_name = source.name
        target = destination / file_name
        shown = display_destination or str(destination)
        event_extra: dict[str, object] = {
            "source_path": str(source),
            "target_path": str(target),
            "destination": str(destination),
            "sequence": sequence,
            "total_items": total,
        }

        if self._filesystem.exists(target):
            self._logger.debug(
                "Target exists: %s",
                target,
                extra={**event_extra, "copy_event": "copy.item.conflict"},
            )
            action = self._prompter.ask(file_name, shown)
            if action is ConflictAction.CANCEL:
                return CopyOutcome.CANCELLED
            if action is ConflictAction.SKIP:
                self._logger.info(
                    "Skipped %s",
                    source,
                    extra={**event_extra, "copy_event": "copy.item.skip", "reason": "exists"},
                )
                return CopyOutcome.SKIPPED

        try:
            self._filesystem.copy(source, target, overwrite=True)
        except Exception as exc:
            reason = str(exc) or exc.__class__.__name__
            self._logger.debug(
                "Copy failed for %s: %s",
                source,
                reason,
                extra={**event_extra, "copy_event": "copy.item.error", "reason": reason},
            )
            self._notifier.error(messages.copy_failed(file_name, reason))
            return CopyOutcome.SKIPPED

        self._logger.info(
            "Copied %s → %s",
            source,
            target,
            extra={**event_extra, "copy_event": "copy.item.success"},
        )
        return CopyOutcome.SUCCESS

    def run(self, sources: Sequence[Path]) -> RunSummary | None:
        """Copy ``sources`` in order and report a summary.

        Returns:
            RunSummary | None: Final counters, or ``None`` when no destination
            was chosen or it could not be created.
        """

        destination = self.resolve_destination()
        if destination is None:
            return None

        if not self.ensure_destination(destination):
            return None

        display_path = format_for_display(destination, home=self._home)
        total = len(sources)
        self._logger.debug(
            "Copying %d item(s) to %s",
            total,
            destination,
            extra={"copy_event": "copy.batch.start", "total_items": total, "destination": str(destination)},
        )

        summary = RunSummary()
        for index, source in enumerate(sources, start=1):
            outcome = self.copy_item(
                source,
                destination,
                display_destination=display_path,
                sequence=index,
                total=total,
            )
            summary = summary.record(outcome)
            if summary.cancelled:
                self._logger.debug(
                    "Cancelled at %s",
                    source,
                    extra={
                        "copy_event": "copy.batch.cancelled",
                        "copied": summary.copied,
                        "skipped": summary.skipped,
                        "destination": str(destination),
                    },
                )
                self._notifier.info(messages.cancelled_summary(summary))
                return summary

        self._logger.debug(
            "Copy finished",
            extra={
                "copy_event": "copy.batch.complete",
                "copied": summary.copied,
                "skipped": summary.skipped,
                "destination": str(destination),
            },
        )
        message = messages.completed_summary(summary, display_path)
        if message is not None:
            self._notifier.info(message)
        return summary


__all__ = ["CopyToDestinationService"]
