"""Config command implementation for the CLI."""

from __future__ import annotations

from typing import final

from copyto.config.config import Config
from copyto.config.paths import default_config_path
from copyto.ui.cli.args.options import ConfigArgs
from copyto.ui.cli.display.config_view import ConfigDisplay


@final
class ConfigCommand:
    """Command that shows or updates the persisted destination."""

    def __init__(self, args: ConfigArgs) -> None:
        self.args = args
        self.display = ConfigDisplay()

    def execute(self) -> Config:
        """Apply requested changes, then show the resulting settings."""

        config = Config.load()

        if self.args.set_destination is not None:
            config.destination_path = self.args.set_destination.strip()
            config.save()
        elif self.args.clear_destination:
            config.destination_path = ""
            config.save()

        self.display.show(config, default_config_path(), quiet=self.args.quiet)
        return config
