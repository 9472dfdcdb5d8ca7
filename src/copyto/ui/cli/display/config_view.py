"""Display utilities for configuration values."""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from copyto.config.config import SETTINGS_TABLE, Config
from copyto.features.copying import expand_home


@final
class ConfigDisplay:
    """Render the current configuration in the CLI."""

    def __init__(self) -> None:
        self.console = Console()

    def show(self, config: Config, config_file: Path, *, quiet: bool = False) -> None:
        """Print the settings table."""

        if quiet:
            return

        table = Table(title="copyto settings", show_header=True, header_style="bold")
        table.add_column("Key")
        table.add_column("Value")

        destination = config.destination_path
        if destination:
            table.add_row(f"{SETTINGS_TABLE}.destination_path", Text(destination))
            table.add_row("resolved destination", Text(expand_home(destination)))
        else:
            table.add_row(f"{SETTINGS_TABLE}.destination_path", "[yellow](ask every time)[/yellow]")
        table.add_row("log_file", Text(str(config.log_file)) if config.log_file else "(default)")
        table.add_row("config file", Text(str(config_file)))

        self.console.print(table)
