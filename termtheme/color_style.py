"""Color styles: semantic roles resolved to front/back color pairs.

Each cell of the terminal uses two colors, a foreground and a background.
Color styles refer to a pair of colors from the theme palette, so that
widgets describe what they print rather than how it looks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from termtheme.color import Color, Default

if TYPE_CHECKING:
    from termtheme.theme import Theme


@dataclass(frozen=True, slots=True)
class ColorPair:
    """Combines a front and back color."""

    front: Color
    back: Color

    def invert(self) -> ColorPair:
        """Return the pair with front and back colors swapped."""
        return ColorPair(front=self.back, back=self.front)

    @classmethod
    def from_256colors(cls, front: int, back: int) -> ColorPair:
        """Create a color pair from two indices in the 256 colors list.

        Args:
            front: Foreground color index.
            back: Background color index.

        Returns:
            The color pair.
        """
        return cls(front=Color.from_256colors(front), back=Color.from_256colors(back))

    def to_rich(self) -> str:
        """Get a Rich style definition, e.g. ``"red on #d3d7cf"``."""
        return f"{self.front.to_rich()} on {self.back.to_rich()}"


class ColorStyle(Enum):
    """Color role to use when printing something.

    The current theme assigns each role a foreground and background color.
    """

    # Style set by the terminal before the application started
    DEFAULT = "default"
    # Application background, where no view is present
    BACKGROUND = "background"
    # View shadows; only the background matters
    SHADOW = "shadow"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    TITLE_PRIMARY = "title_primary"
    TITLE_SECONDARY = "title_secondary"
    # Selected items
    HIGHLIGHT = "highlight"
    # Selected items in views that are not focused
    HIGHLIGHT_INACTIVE = "highlight_inactive"

    def resolve(self, theme: Theme) -> ColorPair:
        """Return the color pair that this style represents.

        Args:
            theme: Theme whose palette provides the colors.

        Returns:
            The (front, back) pair.
        """
        front_role, back_role = _STYLE_ROLES[self]
        palette = theme.colors
        front = Default() if front_role is None else getattr(palette, front_role)
        back = Default() if back_role is None else getattr(palette, back_role)
        return ColorPair(front=front, back=back)


@dataclass(frozen=True, slots=True)
class CustomStyle:
    """Directly specifies colors, independently of the theme."""

    front: Color
    back: Color

    def resolve(self, theme: Theme) -> ColorPair:
        """Return the explicit colors; the theme is not consulted."""
        return ColorPair(front=self.front, back=self.back)


# Palette role used for (front, back); None is the terminal default color
_STYLE_ROLES: dict[ColorStyle, tuple[str | None, str | None]] = {
    ColorStyle.DEFAULT: (None, None),
    ColorStyle.BACKGROUND: ("view", "background"),
    ColorStyle.SHADOW: ("shadow", "shadow"),
    ColorStyle.PRIMARY: ("primary", "view"),
    ColorStyle.SECONDARY: ("secondary", "view"),
    ColorStyle.TERTIARY: ("tertiary", "view"),
    ColorStyle.TITLE_PRIMARY: ("title_primary", "view"),
    ColorStyle.TITLE_SECONDARY: ("title_secondary", "view"),
    ColorStyle.HIGHLIGHT: ("view", "highlight"),
    ColorStyle.HIGHLIGHT_INACTIVE: ("view", "highlight_inactive"),
}


class Effect(Enum):
    """Text effect applied on top of a color style."""

    SIMPLE = "simple"
    # Swaps the foreground and background colors
    REVERSE = "reverse"

    def apply(self, pair: ColorPair) -> ColorPair:
        """Apply the effect to a resolved color pair.

        Args:
            pair: Resolved colors.

        Returns:
            The colors to paint with.
        """
        if self is Effect.REVERSE:
            return pair.invert()
        return pair
