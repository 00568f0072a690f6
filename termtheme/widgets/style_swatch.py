"""Swatch widget painting a sample line in one color style."""

from rich.text import Text
from textual.widgets import Static

from termtheme.color_style import ColorPair, ColorStyle

SAMPLE_TEXT = "The quick brown fox jumps over the lazy dog"


class StyleSwatch(Static):
    """Shows a color style name and sample text painted with its colors."""

    def __init__(self, style: ColorStyle, *, id: str | None = None) -> None:  # noqa: A002
        """Initialize the swatch.

        Args:
            style: Color style this swatch previews.
            id: Widget ID.
        """
        super().__init__(id=id)
        self.color_style = style
        self.pair: ColorPair | None = None

    def update_pair(self, pair: ColorPair) -> None:
        """Repaint the swatch with resolved colors.

        Args:
            pair: Colors to paint with.
        """
        self.pair = pair
        self.update(self._render_swatch())

    def _render_swatch(self) -> Text:
        """Render the swatch content.

        Returns:
            Rich text with the label and the styled sample.
        """
        text = Text()
        text.append(f"{self.color_style.value:<20}")
        if self.pair is None:
            return text
        text.append(f" {SAMPLE_TEXT} ", style=self.pair.to_rich())
        text.append(f"  {self.pair.front.to_rich()} on {self.pair.back.to_rich()}", style="dim")
        return text
