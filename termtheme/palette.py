"""Color palette: assigns an actual color to each color role.

The roles are:

* ``background``: application background (around views). Defaults to blue.
* ``shadow``: shadow around views. Defaults to black.
* ``view``: background for views. Defaults to white.
* ``primary``: primary text. Defaults to black.
* ``secondary``: secondary text. Defaults to blue.
* ``tertiary``: tertiary text. Defaults to light white.
* ``title_primary``: primary titles. Defaults to red.
* ``title_secondary``: secondary titles. Defaults to yellow.
* ``highlight``: selected items. Defaults to red.
* ``highlight_inactive``: selected but inactive items. Defaults to blue.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, fields

from termtheme.color import BaseColor, Color, Dark, Light
from termtheme.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Palette:
    """Color configuration for the application."""

    background: Color = Dark(BaseColor.BLUE)
    shadow: Color = Dark(BaseColor.BLACK)
    view: Color = Dark(BaseColor.WHITE)
    primary: Color = Dark(BaseColor.BLACK)
    secondary: Color = Dark(BaseColor.BLUE)
    tertiary: Color = Light(BaseColor.WHITE)
    title_primary: Color = Dark(BaseColor.RED)
    title_secondary: Color = Dark(BaseColor.YELLOW)
    highlight: Color = Dark(BaseColor.RED)
    highlight_inactive: Color = Dark(BaseColor.BLUE)

    @classmethod
    def role_names(cls) -> tuple[str, ...]:
        """Get the role names, in field order.

        Returns:
            Tuple of role names.
        """
        return tuple(f.name for f in fields(cls))

    def roles(self) -> Iterator[tuple[str, Color]]:
        """Iterate over (role, color) pairs in field order.

        Yields:
            Role name and its current color.
        """
        for name in self.role_names():
            yield name, getattr(self, name)

    def load(self, table: Mapping[str, object]) -> None:
        """Fill the palette with the colors from the given table.

        Roles missing from the table, or whose value is not a valid color,
        keep their current color.

        Args:
            table: The ``[colors]`` table of a theme file.
        """
        for name in self.role_names():
            if name not in table:
                continue
            color = load_color(table[name])
            if color is None:
                logger.debug(f"Ignoring invalid color for {name}: {table[name]!r}")
                continue
            setattr(self, name, color)


def load_color(value: object) -> Color | None:
    """Parse a configuration value into a color.

    Strings are parsed with ``Color.parse``. For lists, the first valid color
    is used, so a true-color value can be followed by a base color fallback.

    Args:
        value: Raw configuration value.

    Returns:
        The color, or None if the value holds no supported color.
    """
    if isinstance(value, str):
        return Color.parse(value)
    if isinstance(value, list):
        for item in value:
            color = load_color(item)
            if color is not None:
                return color
    return None
