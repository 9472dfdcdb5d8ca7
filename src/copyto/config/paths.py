"""Shared path utilities for configuration and log locations.

This module centralizes how the application discovers locations for
config and log files.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/config.toml`` unless the
  directory is overridden by ``COPYTO_CONFIG_DIR``.
- Logs: repository-root ``<repo_root>/logs/copyto.log``.
"""

from __future__ import annotations

import os
from pathlib import Path
from collections.abc import Mapping
from typing import Callable, Final


_ENV_CONFIG_DIR: Final[str] = "COPYTO_CONFIG_DIR"
CONFIG_FILE_NAME: Final[str] = "config.toml"
LOG_FILE_NAME: Final[str] = "copyto.log"


def resolve_overridable_path(
    *,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring an environment override."""

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the directory holding the TOML config file."""

    return resolve_overridable_path(
        env=env,
        env_var=_ENV_CONFIG_DIR,
        default_factory=lambda: _detect_repo_root() / "config",
    )


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the default path to the main TOML config file."""

    return (default_config_dir(env) / CONFIG_FILE_NAME).resolve()


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / LOG_FILE_NAME).resolve()


__all__ = [
    "CONFIG_FILE_NAME",
    "LOG_FILE_NAME",
    "default_config_dir",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
