"""Display management for CLI interface."""

from copyto.ui.cli.display.config_view import ConfigDisplay

__all__ = ["ConfigDisplay"]
