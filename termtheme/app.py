"""Textual application previewing a theme."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from textual.app import App, ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Static

from termtheme.color_style import ColorStyle, Effect
from termtheme.errors import ThemeError
from termtheme.logger import add_tui_sink, get_logger, remove_tui_sink
from termtheme.textual_theme import DEFAULT_TEXTUAL_THEME_NAME, to_textual_theme
from termtheme.theme import Theme, load_default, load_theme_file
from termtheme.widgets.style_swatch import StyleSwatch

logger = get_logger(__name__)

# Path to styles directory
STYLES_DIR = Path(__file__).parent / "styles"


class ThemePreview(App[None]):
    """Textual app showing every color style of a theme."""

    ENABLE_COMMAND_PALETTE = False
    CSS_PATH: ClassVar[list[Path]] = [STYLES_DIR / "app.tcss"]
    BINDINGS: ClassVar[tuple[tuple[str, str, str], ...]] = (
        ("q", "quit", "Quit"),
        ("r", "reload", "Reload Theme"),
        ("i", "toggle_reverse", "Reverse"),
    )

    def __init__(self, color_theme: Theme | None = None, theme_path: Path | None = None) -> None:
        """Initialize the preview app.

        Args:
            color_theme: Theme to preview; defaults to the built-in theme.
            theme_path: File the theme was loaded from, used by reload.
        """
        super().__init__()
        self.color_theme: Theme = color_theme if color_theme is not None else load_default()
        self.theme_path = theme_path
        self.effect = Effect.SIMPLE
        self._generation = 0
        self._log_sink_id: int | None = None

    def compose(self) -> ComposeResult:
        """Create the UI layout.

        Yields:
            The widgets that make up the application UI.
        """
        yield Header()
        with VerticalScroll(id="swatches"):
            for style in ColorStyle:
                yield StyleSwatch(style, id=f"swatch-{style.value}")
        yield Static(id="shadow")
        yield Static(id="theme-info")
        yield Footer()

    def on_mount(self) -> None:
        """Paint the swatches and start forwarding warnings."""
        self._log_sink_id = add_tui_sink(self._log_sink, level="WARNING")
        self.apply_theme()

    def on_unmount(self) -> None:
        """Stop forwarding log messages."""
        if self._log_sink_id is not None:
            remove_tui_sink(self._log_sink_id)
            self._log_sink_id = None

    def _log_sink(self, message: object) -> None:
        """Show forwarded log messages as notifications."""
        self.notify(str(message).strip(), severity="warning")

    def apply_theme(self) -> None:
        """Repaint the whole UI from the current theme."""
        theme = self.color_theme

        # Textual only refreshes when the theme name changes
        self._generation += 1
        textual_theme = to_textual_theme(theme, f"{DEFAULT_TEXTUAL_THEME_NAME}-{self._generation}")
        self.register_theme(textual_theme)
        self.theme = textual_theme.name

        for swatch in self.query(StyleSwatch):
            swatch.update_pair(self.effect.apply(swatch.color_style.resolve(theme)))

        swatches = self.query_one("#swatches", VerticalScroll)
        border_color = theme.colors.title_primary.to_hex() or "white"
        swatches.styles.border = (theme.borders.textual_border, border_color)

        shadow = self.query_one("#shadow", Static)
        shadow.display = theme.shadow
        shadow_color = ColorStyle.SHADOW.resolve(theme).back.to_hex()
        if shadow_color is not None:
            shadow.styles.background = shadow_color

        self.query_one("#theme-info", Static).update(self._render_info())

    def _render_info(self) -> str:
        """Render the theme summary line.

        Returns:
            Summary text.
        """
        source = str(self.theme_path) if self.theme_path is not None else "built-in default"
        shadow = "on" if self.color_theme.shadow else "off"
        borders = self.color_theme.borders.value
        return f"Theme: {source} | shadow: {shadow} | borders: {borders} | effect: {self.effect.value}"

    def action_reload(self) -> None:
        """Reload the theme file and swap in the new theme."""
        if self.theme_path is None:
            self.notify("No theme file to reload", severity="information")
            return

        try:
            theme = load_theme_file(self.theme_path)
        except ThemeError as exc:
            logger.error(f"Reload failed: {exc}")
            return

        logger.info(f"Reloaded theme from {self.theme_path}")
        self.color_theme = theme
        self.apply_theme()

    def action_toggle_reverse(self) -> None:
        """Toggle the reverse effect on all swatches."""
        self.effect = Effect.SIMPLE if self.effect is Effect.REVERSE else Effect.REVERSE
        self.apply_theme()

