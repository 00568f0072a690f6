"""Terminal color themes: palettes, color styles and TOML theme loading."""

from termtheme.color import BaseColor, Color, Dark, Default, Light, Rgb, RgbLowRes
from termtheme.color_style import ColorPair, ColorStyle, CustomStyle, Effect
from termtheme.errors import ThemeError, ThemeIoError, ThemeParseError
from termtheme.palette import Palette, load_color
from termtheme.theme import BorderStyle, Theme, load_default, load_theme, load_theme_file

__all__ = [
    "BaseColor",
    "BorderStyle",
    "Color",
    "ColorPair",
    "ColorStyle",
    "CustomStyle",
    "Dark",
    "Default",
    "Effect",
    "Light",
    "Palette",
    "Rgb",
    "RgbLowRes",
    "Theme",
    "ThemeError",
    "ThemeIoError",
    "ThemeParseError",
    "load_color",
    "load_default",
    "load_theme",
    "load_theme_file",
]
