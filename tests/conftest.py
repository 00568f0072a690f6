"""Shared test fixtures for termtheme."""

import os
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Send log files to a temporary directory before termtheme is imported."""
    os.environ["TERMTHEME_LOG_DIR"] = tempfile.mkdtemp(prefix="termtheme-logs-")


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration directory at an empty temporary directory.

    Returns:
        Path to the configuration directory.
    """
    config_dir = tmp_path / "config"
    monkeypatch.setenv("TERMTHEME_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def write_theme(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing theme text to a file.

    Returns:
        Callable taking TOML text and returning the file path.
    """

    def _write(content: str, name: str = "theme.toml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_theme_text() -> str:
    """Theme file exercising every supported value form."""
    return """
shadow = false
borders = "outset"

[colors]
background = "black"
shadow = ["#000000", "black"]
view = "#d3d7cf"
primary = ["#111111"]
secondary = "#EEEEEE"
tertiary = "#444444"
title_primary = "#ff5555"
title_secondary = "#ffff55"
highlight = "#F00"
highlight_inactive = "#5555FF"
"""
