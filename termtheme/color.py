"""Terminal colors and their configuration syntax.

A color is one of:

- ``Default()``: whatever the terminal uses before the application starts.
- ``Dark(base)`` / ``Light(base)``: one of the 8 base colors, normal or bright.
- ``Rgb(r, g, b)``: true color, 24-bit.
- ``RgbLowRes(r, g, b)``: a cell of the 6x6x6 cube of the 256-color palette.

Configuration strings accepted by ``Color.parse``:

- the base names (``"black"`` .. ``"white"``), optionally prefixed ``"light "``;
- ``"#RRGGBB"`` or ``"#RGB"`` (hex digits in either case);
- three digits between 0 and 5, such as ``"420"``.

Usage:
    from termtheme.color import Color

    Color.parse("#ff5555")  # Rgb(r=255, g=85, b=85)
    Color.from_256colors(196)  # RgbLowRes(r=5, g=0, b=0)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum

from termtheme.logger import get_logger

logger = get_logger(__name__)

# Channel values of the 6x6x6 cube in xterm's 256-color palette
CUBE_LEVELS: tuple[int, ...] = (0, 95, 135, 175, 215, 255)

# Indices 232-255 are 24 grays from #080808 to #eeeeee in steps of 10
GRAYSCALE_START = 232
GRAYSCALE_STEPS = 24

# xterm RGB values for the 16 base colors (dark 0-7, then light 8-15)
ANSI_16_HEX: tuple[str, ...] = (
    "#000000",
    "#800000",
    "#008000",
    "#808000",
    "#000080",
    "#800080",
    "#008080",
    "#c0c0c0",
    "#808080",
    "#ff0000",
    "#00ff00",
    "#ffff00",
    "#0000ff",
    "#ff00ff",
    "#00ffff",
    "#ffffff",
)


class BaseColor(IntEnum):
    """One of the 8 base terminal colors, numbered like ANSI color codes."""

    BLACK = 0
    RED = 1
    GREEN = 2
    # Red + Green
    YELLOW = 3
    BLUE = 4
    # Red + Blue
    MAGENTA = 5
    # Green + Blue
    CYAN = 6
    # Red + Green + Blue
    WHITE = 7

    @classmethod
    def from_int(cls, n: int) -> BaseColor:
        """Get the base color for an ANSI code, wrapping modulo 8.

        Args:
            n: Color code.

        Returns:
            The matching base color.
        """
        return cls(n % 8)

    @property
    def label(self) -> str:
        """Lowercase name, as used in theme files."""
        return self.name.lower()


class Color(ABC):
    """Represents a color used by the theme.

    This is the common base of the concrete variants below; it is never
    instantiated directly.
    """

    __slots__ = ()

    @classmethod
    def parse(cls, value: str) -> Color | None:
        """Parse a color from its configuration syntax.

        Args:
            value: Color name, hex code or low-resolution triple.

        Returns:
            The parsed color, or None if the value is not a supported color.
        """
        named = _NAMED_COLORS.get(value)
        if named is not None:
            return named
        return _parse_special(value)

    @classmethod
    def from_256colors(cls, n: int) -> Color:
        """Create a color from its ID in the 256 colors list.

        * Colors 0-7 are base dark colors.
        * Colors 8-15 are base light colors.
        * Colors 16-231 are rgb colors with 6 values per channel.
        * Colors 232-255 are a grayscale ramp, from #080808 to #eeeeee.

        Args:
            n: Color index, between 0 and 255.

        Returns:
            The matching color.

        Raises:
            ValueError: If n is outside 0-255.
        """
        if not 0 <= n <= 255:
            raise ValueError(f"256-color index out of range: {n}")
        if n < 8:
            return Dark(BaseColor.from_int(n))
        if n < 16:
            return Light(BaseColor.from_int(n))

        if n >= GRAYSCALE_START:
            level = 8 + 10 * (n - GRAYSCALE_START)
            return Rgb(level, level, level)

        n -= 16
        return RgbLowRes(n // 36, (n % 36) // 6, n % 6)

    @abstractmethod
    def to_rich(self) -> str:
        """Get a Rich color definition for this color."""

    @abstractmethod
    def to_hex(self) -> str | None:
        """Get an approximate hex string, or None for the terminal default."""

    def to_256colors(self) -> int | None:
        """Get the index in the 256 colors list, if this color has one."""
        return None


@dataclass(frozen=True, slots=True)
class Default(Color):
    """Color preset by the terminal."""

    def to_rich(self) -> str:
        return "default"

    def to_hex(self) -> str | None:
        return None


@dataclass(frozen=True, slots=True)
class Dark(Color):
    """One of the 8 base colors."""

    base: BaseColor

    def to_rich(self) -> str:
        return self.base.label

    def to_hex(self) -> str | None:
        return ANSI_16_HEX[self.base]

    def to_256colors(self) -> int | None:
        return int(self.base)


@dataclass(frozen=True, slots=True)
class Light(Color):
    """Lighter version of a base color."""

    base: BaseColor

    def to_rich(self) -> str:
        return f"bright_{self.base.label}"

    def to_hex(self) -> str | None:
        return ANSI_16_HEX[8 + self.base]

    def to_256colors(self) -> int | None:
        return 8 + int(self.base)


@dataclass(frozen=True, slots=True)
class Rgb(Color):
    """True-color, 24-bit."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"RGB channel out of range 0-255: {channel}")

    def to_rich(self) -> str:
        return self.to_hex()

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_256colors(self) -> int | None:
        # Only grays of the grayscale ramp have an index
        if not self.r == self.g == self.b or (self.r - 8) % 10 != 0:
            return None
        step = (self.r - 8) // 10
        return GRAYSCALE_START + step if 0 <= step < GRAYSCALE_STEPS else None


@dataclass(frozen=True, slots=True)
class RgbLowRes(Color):
    """Low-resolution color.

    Each channel must be between 0 and 5. These 216 colors are part of the
    default 256-color palette.
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 5:
                raise ValueError(f"Low-resolution channel out of range 0-5: {channel}")

    def to_rich(self) -> str:
        return f"color({self.to_256colors()})"

    def to_hex(self) -> str:
        r, g, b = (CUBE_LEVELS[channel] for channel in (self.r, self.g, self.b))
        return f"#{r:02x}{g:02x}{b:02x}"

    def to_256colors(self) -> int:
        return 16 + 36 * self.r + 6 * self.g + self.b


_NAMED_COLORS: dict[str, Color] = {
    **{base.label: Dark(base) for base in BaseColor},
    **{f"light {base.label}": Light(base) for base in BaseColor},
}


def _parse_special(value: str) -> Color | None:
    """Parse hex codes and low-resolution triples.

    Args:
        value: Candidate color string.

    Returns:
        The parsed color, or None.
    """
    if value.startswith("#"):
        digits = value[1:]
        # Per-channel length, and amplitude
        if len(digits) == 6:
            length, multiplier = 2, 1
        elif len(digits) == 3:
            length, multiplier = 1, 17
        else:
            logger.warning(f"Cannot parse color {value!r}: expected 3 or 6 hex digits")
            return None
        r, g, b = (load_hex(digits[i * length : (i + 1) * length]) * multiplier for i in range(3))
        return Rgb(r, g, b)

    if len(value) == 3 and all(c in "012345" for c in value):
        r, g, b = (int(c) for c in value)
        return RgbLowRes(r, g, b)

    return None


def load_hex(digits: str) -> int:
    """Load a hexadecimal code.

    Characters that are not hex digits count as 0.

    Args:
        digits: Hex digits, in either case.

    Returns:
        The integer value.
    """
    total = 0
    for c in digits:
        total = total * 16 + (int(c, 16) if c in "0123456789abcdefABCDEF" else 0)
    return total
