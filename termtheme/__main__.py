"""Entry point for termtheme."""

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from termtheme.app import ThemePreview
from termtheme.color_style import ColorStyle
from termtheme.errors import ThemeError
from termtheme.logger import get_logger
from termtheme.settings import get_theme_path, load_user_theme
from termtheme.theme import Theme, load_theme_file

logger = get_logger(__name__)


def get_version() -> str:
    """Get the installed package version.

    Returns:
        Version string, or "unknown" when the package is not installed.
    """
    try:
        return version("termtheme")
    except PackageNotFoundError:
        return "unknown"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse; defaults to sys.argv.

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="termtheme",
        description="Preview a terminal color theme.",
    )
    parser.add_argument(
        "theme_file",
        nargs="?",
        type=Path,
        help=f"TOML theme file (default: {get_theme_path()})",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the resolved color styles instead of starting the preview",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser.parse_args(argv)


def dump_theme(theme: Theme) -> str:
    """Format a theme and its resolved color styles as text.

    Args:
        theme: Theme to describe.

    Returns:
        One line per setting and color style.
    """
    lines = [
        f"shadow: {'true' if theme.shadow else 'false'}",
        f"borders: {theme.borders.value}",
    ]
    for style in ColorStyle:
        pair = style.resolve(theme)
        lines.append(f"{style.value:<20} {pair.front.to_rich()} on {pair.back.to_rich()}")
    return "\n".join(lines)


def main(args: argparse.Namespace) -> int:
    """Load the requested theme and show it.

    Args:
        args: Parsed command line arguments.

    Returns:
        Process exit status.

    Raises:
        ThemeError: If an explicitly requested theme file cannot be loaded.
    """
    theme_path: Path | None = args.theme_file
    if theme_path is not None:
        theme = load_theme_file(theme_path)
    else:
        theme = load_user_theme()
        user_path = get_theme_path()
        theme_path = user_path if user_path.exists() else None

    if args.dump:
        print(dump_theme(theme))
        return 0

    ThemePreview(theme, theme_path).run()
    return 0


def run() -> None:
    """Run the command line interface."""
    args = parse_args()
    try:
        status = main(args)
    except ThemeError as exc:
        logger.error(str(exc))
        print(f"termtheme: {exc}", file=sys.stderr)
        sys.exit(1)
    sys.exit(status)


if __name__ == "__main__":
    run()
