"""Conversion of termtheme themes into Textual themes."""

from __future__ import annotations

from textual.theme import Theme as TextualTheme

from termtheme.color import Color
from termtheme.theme import Theme

DEFAULT_TEXTUAL_THEME_NAME = "termtheme"

# Used where a palette role holds the terminal default color, which has no hex value
FALLBACK_BACKGROUND = "#0c0c0e"
FALLBACK_FOREGROUND = "#e0e0e0"


def _hex(color: Color, fallback: str) -> str:
    """Get a hex string for a color.

    Args:
        color: Palette color.
        fallback: Value used when the color has no hex approximation.

    Returns:
        Hex color string.
    """
    value = color.to_hex()
    return value if value is not None else fallback


def _luminance(hex_color: str) -> float:
    """Relative luminance of a ``#rrggbb`` color, between 0 and 1.

    Args:
        hex_color: Hex color string.

    Returns:
        Perceived brightness.
    """
    r, g, b = (int(hex_color[i : i + 2], 16) / 255 for i in (1, 3, 5))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def to_textual_theme(theme: Theme, name: str = DEFAULT_TEXTUAL_THEME_NAME) -> TextualTheme:
    """Build a Textual Theme from a theme palette.

    Args:
        theme: Loaded theme.
        name: Name under which the Textual theme is registered.

    Returns:
        A Textual Theme instance.
    """
    palette = theme.colors
    background = _hex(palette.background, FALLBACK_BACKGROUND)
    surface = _hex(palette.view, background)
    foreground = _hex(palette.primary, FALLBACK_FOREGROUND)
    highlight = _hex(palette.highlight, foreground)

    return TextualTheme(
        name=name,
        primary=_hex(palette.title_primary, foreground),
        secondary=_hex(palette.secondary, foreground),
        accent=highlight,
        warning=_hex(palette.title_secondary, foreground),
        foreground=foreground,
        background=background,
        surface=surface,
        panel=surface,
        dark=_luminance(surface) < 0.5,
        variables={
            "border": _hex(palette.title_primary, foreground),
            "text-muted": _hex(palette.tertiary, foreground),
            "block-cursor-foreground": surface,
            "block-cursor-background": highlight,
            "block-cursor-blurred-background": _hex(palette.highlight_inactive, highlight),
        },
    )
