"""Errors raised when a theme cannot be loaded."""

from __future__ import annotations

import tomllib
from pathlib import Path


class ThemeError(Exception):
    """Base class for structural failures while loading a theme."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human readable description.
            path: Theme file involved, if the theme came from a file.
        """
        super().__init__(message)
        self.path = path


class ThemeIoError(ThemeError):
    """The theme file could not be opened or read."""

    def __init__(self, error: OSError | UnicodeDecodeError, *, path: Path | None = None) -> None:
        """Initialize the error.

        Args:
            error: The underlying I/O failure.
            path: Theme file that failed to load.
        """
        location = f" {path}" if path is not None else ""
        super().__init__(f"Cannot read theme file{location}: {error}", path=path)
        self.error = error


class ThemeParseError(ThemeError):
    """The theme text is not well-formed TOML."""

    def __init__(self, error: tomllib.TOMLDecodeError, *, path: Path | None = None) -> None:
        """Initialize the error.

        Args:
            error: The underlying TOML decode failure.
            path: Theme file that failed to parse, if any.
        """
        location = f" in {path}" if path is not None else ""
        super().__init__(f"Invalid theme configuration{location}: {error}", path=path)
        self.error = error
