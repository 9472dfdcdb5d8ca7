"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

from copyto.config.paths import (
    _detect_repo_root,
    default_config_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


def test_default_log_paths(portable_repo_root: Path) -> None:
    """Default log locations should live under the repository logs/ folder."""

    expected_dir = portable_repo_root / "logs"
    assert default_log_dir() == expected_dir
    assert default_log_file() == expected_dir / "copyto.log"


def test_default_config_path_under_repo_root(portable_repo_root: Path) -> None:
    """Without overrides the config file sits in <repo_root>/config."""

    assert default_config_path() == (portable_repo_root / "config" / "config.toml").resolve()


def test_config_dir_env_override(portable_repo_root: Path, tmp_path: Path) -> None:
    """COPYTO_CONFIG_DIR should redirect the config file location."""

    _ = portable_repo_root
    custom = tmp_path / "elsewhere"
    path = default_config_path(env={"COPYTO_CONFIG_DIR": str(custom)})
    assert path == custom.resolve() / "config.toml"


def test_resolve_overridable_path_prefers_env(tmp_path: Path) -> None:
    """A non-blank environment value beats the default."""

    resolved = resolve_overridable_path(
        env={"SOME_VAR": f"  {tmp_path / 'env'}  "},
        env_var="SOME_VAR",
        default_factory=lambda: tmp_path / "default",
    )
    assert resolved == (tmp_path / "env").resolve()


def test_resolve_overridable_path_ignores_blank_env(tmp_path: Path) -> None:
    """Whitespace-only environment values fall back to the default."""

    resolved = resolve_overridable_path(
        env={"SOME_VAR": "   "},
        env_var="SOME_VAR",
        default_factory=lambda: tmp_path / "default",
    )
    assert resolved == (tmp_path / "default").resolve()


def test_repo_root_falls_back_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Without a project marker above the package, the working directory is used."""

    package_dir = tmp_path / "site-packages" / "copyto" / "config"
    package_dir.mkdir(parents=True)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    assert _detect_repo_root(package_dir / "paths.py") == workdir


def test_repo_root_found_from_marker(tmp_path: Path) -> None:
    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")
    package_dir = tmp_path / "src" / "copyto" / "config"
    package_dir.mkdir(parents=True)

    assert _detect_repo_root(package_dir / "paths.py") == tmp_path
