"""Widgets for the theme preview application."""

from termtheme.widgets.style_swatch import StyleSwatch

__all__ = ["StyleSwatch"]
