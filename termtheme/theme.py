"""Themes and theme loading.

A theme defines the color palette an application will use, as well as
various options to style views. Themes are described in TOML files where
every field is optional:

```toml
shadow = false  # Don't draw shadows around stacked views
borders = "simple"  # Alternatives are "none" and "outset"

[colors]
background = "black"
# If the value is an array, the first valid color will be used.
shadow = ["#000000", "black"]
view = "#d3d7cf"
primary = ["#111111"]
secondary = "#EEEEEE"
tertiary = "#444444"
# Base color names MUST be lowercase, hex digits can use either case.
title_primary = "#ff5555"
title_secondary = "#ffff55"
# Lower precision values can use only 3 digits.
highlight = "#F00"
highlight_inactive = "#5555FF"
```

Invalid values are skipped and keep their default; only unreadable files and
malformed TOML are errors.
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from pathlib import Path

from termtheme.errors import ThemeIoError, ThemeParseError
from termtheme.logger import get_logger
from termtheme.palette import Palette

logger = get_logger(__name__)


class BorderStyle(Enum):
    """How borders around dialogs, popups and panels are drawn."""

    SIMPLE = "simple"
    # Simple 3d effect
    OUTSET = "outset"
    NONE = "none"

    @classmethod
    def from_str(cls, value: str) -> BorderStyle:
        """Classify a border style name.

        Args:
            value: Name from a theme file.

        Returns:
            The border style; unknown names mean no borders.
        """
        if value == "simple":
            return cls.SIMPLE
        if value == "outset":
            return cls.OUTSET
        return cls.NONE

    @property
    def textual_border(self) -> str:
        """Textual border type used to draw this style."""
        return _TEXTUAL_BORDERS[self]


_TEXTUAL_BORDERS: dict[BorderStyle, str] = {
    BorderStyle.SIMPLE: "solid",
    BorderStyle.OUTSET: "outer",
    BorderStyle.NONE: "none",
}


@dataclass
class Theme:
    """Represents the style an application will use."""

    # Whether stacked views should have shadows
    shadow: bool = True
    borders: BorderStyle = BorderStyle.SIMPLE
    colors: Palette = field(default_factory=Palette)

    def load(self, table: Mapping[str, object]) -> None:
        """Apply the values of a theme table on top of this theme.

        Values of the wrong type are ignored. Can be called several times to
        layer configuration sources; the last valid value wins.

        Args:
            table: Parsed theme configuration.
        """
        shadow = table.get("shadow")
        if isinstance(shadow, bool):
            self.shadow = shadow
        elif shadow is not None:
            logger.debug(f"Ignoring non-boolean shadow value: {shadow!r}")

        borders = table.get("borders")
        if isinstance(borders, str):
            self.borders = BorderStyle.from_str(borders)
        elif borders is not None:
            logger.debug(f"Ignoring non-string borders value: {borders!r}")

        colors = table.get("colors")
        if isinstance(colors, Mapping):
            self.colors.load(colors)
        elif colors is not None:
            logger.debug(f"Ignoring non-table colors value: {colors!r}")


def load_default() -> Theme:
    """Load the default theme.

    Returns:
        A new default theme.
    """
    return Theme()


def load_theme(content: str, *, path: Path | None = None) -> Theme:
    """Load a theme from TOML text.

    Args:
        content: Theme configuration text.
        path: File the text was read from, used in error messages.

    Returns:
        The default theme with the configuration applied.

    Raises:
        ThemeParseError: If the text is not valid TOML.
    """
    try:
        table = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise ThemeParseError(exc, path=path) from exc

    theme = Theme()
    theme.load(table)
    return theme


def load_theme_file(filename: str | PathLike[str]) -> Theme:
    """Load a theme from a TOML file.

    Args:
        filename: Path to the theme file.

    Returns:
        The loaded theme.

    Raises:
        ThemeIoError: If the file cannot be read.
        ThemeParseError: If the file is not valid TOML.
    """
    path = Path(filename)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeIoError(exc, path=path) from exc

    logger.debug(f"Loading theme from {path}")
    return load_theme(content, path=path)
