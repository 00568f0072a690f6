"""Location and loading of the user's theme file."""

from __future__ import annotations

import os
from pathlib import Path

from termtheme.errors import ThemeError
from termtheme.logger import get_logger
from termtheme.theme import Theme, load_default, load_theme_file

logger = get_logger(__name__)

THEME_FILE_NAME = "theme.toml"


def get_config_dir() -> Path:
    """Get the directory used for persistent configuration.

    Returns:
        Path to the configuration directory.
    """
    override_dir = os.environ.get("TERMTHEME_CONFIG_DIR")
    if override_dir:
        return Path(override_dir).expanduser()

    base_dir = os.environ.get("XDG_CONFIG_HOME")
    if base_dir:
        return Path(base_dir).expanduser() / "termtheme"

    return Path.home() / ".config" / "termtheme"


def get_theme_path() -> Path:
    """Get the full path to the user's theme file.

    Returns:
        Path to the theme TOML file.
    """
    return get_config_dir() / THEME_FILE_NAME


def load_user_theme(path: Path | None = None) -> Theme:
    """Load the user's theme, falling back to the default theme.

    Args:
        path: Theme file to load; defaults to the file in the config directory.

    Returns:
        Loaded theme, or the default theme if the file is missing or broken.
    """
    theme_path = path if path is not None else get_theme_path()
    if not theme_path.exists():
        return load_default()

    try:
        return load_theme_file(theme_path)
    except ThemeError as exc:
        logger.warning(f"Failed to load theme: {exc}")
        return load_default()
