"""Application service copying selected entries to the configured destination."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from logging import Logger, getLogger
from pathlib import Path
from typing import final

from copyto.config.config import Config
from copyto.features.copying import (
    ConflictPrompter,
    CopyToDestinationService,
    DestinationPicker,
    FileSystem,
    Notifier,
    RunSummary,
)
from copyto.features.copying.adapters.console import (
    LoggerNotifier,
    RichConflictPrompter,
    RichDestinationPicker,
)
from copyto.features.copying.adapters.filesystem import LocalFileSystem


@dataclass(slots=True)
class CopyServiceRequest:
    """Parameters describing a copy run."""

    sources: Sequence[Path] = field(default_factory=list)
    # Overrides the configured destination for this run only.
    destination: str | None = None


@final
class CopyToService:
    """Application façade wiring adapters into the copy use case."""

    _filesystem: FileSystem
    _picker: DestinationPicker
    _prompter: ConflictPrompter
    _notifier: Notifier
    _config: Config | None
    _home: str | None
    _logger: Logger

    def __init__(
        self,
        *,
        config: Config | None = None,
        filesystem: FileSystem | None = None,
        picker: DestinationPicker | None = None,
        prompter: ConflictPrompter | None = None,
        notifier: Notifier | None = None,
        home: str | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._config = config
        self._filesystem = filesystem or LocalFileSystem()
        self._picker = picker or RichDestinationPicker()
        self._prompter = prompter or RichConflictPrompter()
        self._notifier = notifier or LoggerNotifier()
        self._home = home
        self._logger = logger or getLogger(__name__)

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    def configured_destination(self, request: CopyServiceRequest) -> str:
        """Destination string for ``request``: the override, else the persisted setting."""

        if request.destination is not None and request.destination.strip():
            return request.destination
        config = self._config or Config.load()
        return config.destination_path

    def build_use_case(self, request: CopyServiceRequest) -> CopyToDestinationService:
        return CopyToDestinationService(
            filesystem=self._filesystem,
            picker=self._picker,
            prompter=self._prompter,
            notifier=self._notifier,
            configured_destination=self.configured_destination(request),
            home=self._home,
            logger=self._logger,
        )

    def run(self, request: CopyServiceRequest) -> RunSummary | None:
        """Execute the copy run described by ``request``."""

        return self.build_use_case(request).run(request.sources)


__all__ = ["CopyServiceRequest", "CopyToService"]
