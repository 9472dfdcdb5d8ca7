"""Rich prompt adapters for destination selection and conflict resolution."""

from __future__ import annotations

from pathlib import Path
from typing import Final, final

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text

from ...domain.messages import conflict_question
from ...domain.models import ConflictAction
from ...usecases.ports import ConflictPrompter, DestinationPicker

PICKER_TITLE: Final[str] = "Select destination folder for copy"


@final
class RichDestinationPicker(DestinationPicker):
    """Ask for a single destination folder on the terminal.

    An empty answer, end of input, or Ctrl-C dismisses the picker. Answers
    naming an existing file are rejected because only folders can be picked.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def pick_destination(self) -> Path | None:
        while True:
            try:
                raw = Prompt.ask(
                    Text(PICKER_TITLE, style="bold"),
                    console=self.console,
                    default="",
                    show_default=False,
                )
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                return None

            answer = raw.strip().strip('"')
            if not answer:
                return None

            candidate = Path(answer).expanduser().absolute()
            if candidate.exists() and not candidate.is_dir():
                self.console.print(Text(f"Not a folder: {candidate}", style="red"))
                continue
            return candidate


@final
class RichConflictPrompter(ConflictPrompter):
    """Ask whether to overwrite, skip, or cancel when a target already exists."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def ask(self, file_name: str, destination: str) -> ConflictAction:
        self.console.print(Text(conflict_question(file_name, destination), style="yellow"))
        choices = [action.value for action in ConflictAction]
        try:
            selection = Prompt.ask(
                " / ".join(action.label for action in ConflictAction),
                console=self.console,
                choices=choices,
                case_sensitive=False,
            )
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            return ConflictAction.CANCEL

        return ConflictAction.from_user_input(selection)


__all__ = ["PICKER_TITLE", "RichConflictPrompter", "RichDestinationPicker"]
