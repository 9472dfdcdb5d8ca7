"""Copy command implementation for the CLI."""

from __future__ import annotations

from typing import final

from copyto.application.services.copy_service import CopyServiceRequest, CopyToService
from copyto.features.copying import RunSummary
from copyto.features.copying.domain.messages import NO_SELECTION
from copyto.ui.cli.args.options import CopyArgs


@final
class CopyCommand:
    """Command that copies the selected entries."""

    def __init__(self, args: CopyArgs, service: CopyToService | None = None) -> None:
        self.args = args
        self.service = service or CopyToService()

    def execute(self) -> RunSummary | None:
        """Execute the copy command.

        Sources are passed on in the order given, duplicates included.
        """

        sources = list(self.args.sources)
        if not sources:
            self.service.notifier.warning(NO_SELECTION)
            return None

        request = CopyServiceRequest(sources=sources, destination=self.args.destination)
        return self.service.run(request)
