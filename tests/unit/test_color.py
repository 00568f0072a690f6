"""Tests for color values and color parsing."""

import pytest
from termtheme.color import (
    BaseColor,
    Color,
    Dark,
    Default,
    Light,
    Rgb,
    RgbLowRes,
    load_hex,
)


class TestBaseColor:
    """Tests for BaseColor."""

    def test_numbering_follows_ansi(self) -> None:
        assert [int(base) for base in BaseColor] == list(range(8))
        assert BaseColor.YELLOW == 3

    def test_from_int_wraps_modulo_8(self) -> None:
        assert BaseColor.from_int(1) is BaseColor.RED
        assert BaseColor.from_int(9) is BaseColor.RED
        assert BaseColor.from_int(15) is BaseColor.WHITE

    def test_label_is_lowercase_name(self) -> None:
        assert BaseColor.MAGENTA.label == "magenta"


class TestColorParseNames:
    """Tests for parsing named colors."""

    @pytest.mark.parametrize("base", list(BaseColor))
    def test_base_names_are_dark(self, base: BaseColor) -> None:
        assert Color.parse(base.label) == Dark(base)

    @pytest.mark.parametrize("base", list(BaseColor))
    def test_light_prefix(self, base: BaseColor) -> None:
        assert Color.parse(f"light {base.label}") == Light(base)

    def test_red(self) -> None:
        assert Color.parse("red") == Dark(BaseColor.RED)
        assert Color.parse("light red") == Light(BaseColor.RED)

    def test_names_are_case_sensitive(self) -> None:
        assert Color.parse("Red") is None
        assert Color.parse("LIGHT red") is None

    def test_unknown_name(self) -> None:
        assert Color.parse("purple") is None
        assert Color.parse("") is None


class TestColorParseHex:
    """Tests for parsing hex color codes."""

    def test_six_digits(self) -> None:
        assert Color.parse("#FF5555") == Rgb(255, 85, 85)

    def test_three_digits_scaled_by_17(self) -> None:
        assert Color.parse("#F55") == Rgb(255, 85, 85)
        assert Color.parse("#fff") == Rgb(255, 255, 255)

    def test_case_insensitive_digits(self) -> None:
        assert Color.parse("#d3d7cf") == Color.parse("#D3D7CF") == Rgb(0xD3, 0xD7, 0xCF)

    def test_invalid_digits_count_as_zero(self) -> None:
        assert Color.parse("#zz00ff") == Rgb(0, 0, 255)
        assert Color.parse("#g0f") == Rgb(0, 0, 255)

    @pytest.mark.parametrize("value", ["#", "#1", "#12", "#1234", "#12345", "#1234567"])
    def test_wrong_length_is_rejected(self, value: str) -> None:
        assert Color.parse(value) is None


class TestColorParseLowRes:
    """Tests for parsing low-resolution triples."""

    def test_valid_triple(self) -> None:
        assert Color.parse("420") == RgbLowRes(4, 2, 0)
        assert Color.parse("555") == RgbLowRes(5, 5, 5)

    def test_digits_out_of_range(self) -> None:
        assert Color.parse("999") is None
        assert Color.parse("406") is None

    def test_wrong_length(self) -> None:
        assert Color.parse("42") is None
        assert Color.parse("4200") is None

    def test_non_digits(self) -> None:
        assert Color.parse("4a0") is None


class TestFrom256Colors:
    """Tests for Color.from_256colors."""

    @pytest.mark.parametrize("n", range(8))
    def test_dark_colors(self, n: int) -> None:
        assert Color.from_256colors(n) == Dark(BaseColor.from_int(n))

    @pytest.mark.parametrize("n", range(8, 16))
    def test_light_colors(self, n: int) -> None:
        assert Color.from_256colors(n) == Light(BaseColor.from_int(n - 8))

    def test_cube_colors(self) -> None:
        for n in range(16, 232):
            color = Color.from_256colors(n)
            assert isinstance(color, RgbLowRes)
            assert all(0 <= channel <= 5 for channel in (color.r, color.g, color.b))
            assert 16 + 36 * color.r + 6 * color.g + color.b == n

    def test_specific_values(self) -> None:
        assert Color.from_256colors(16) == RgbLowRes(0, 0, 0)
        assert Color.from_256colors(196) == RgbLowRes(5, 0, 0)
        assert Color.from_256colors(231) == RgbLowRes(5, 5, 5)

    def test_grayscale_ramp(self) -> None:
        assert Color.from_256colors(232) == Rgb(8, 8, 8)
        assert Color.from_256colors(244) == Rgb(128, 128, 128)
        assert Color.from_256colors(255) == Rgb(238, 238, 238)

    @pytest.mark.parametrize("n", range(232, 256))
    def test_grayscale_colors_are_gray(self, n: int) -> None:
        color = Color.from_256colors(n)
        assert isinstance(color, Rgb)
        assert color.r == color.g == color.b == 8 + 10 * (n - 232)

    @pytest.mark.parametrize("n", [-1, 256])
    def test_out_of_range(self, n: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Color.from_256colors(n)


class TestColorValues:
    """Tests for color value semantics."""

    def test_structural_equality(self) -> None:
        assert Rgb(1, 2, 3) == Rgb(1, 2, 3)
        assert Rgb(1, 2, 3) != RgbLowRes(1, 2, 3)
        assert Dark(BaseColor.RED) != Light(BaseColor.RED)
        assert Default() == Default()

    def test_hashable(self) -> None:
        colors = {Rgb(1, 2, 3), Rgb(1, 2, 3), Default(), Default(), Dark(BaseColor.BLUE)}
        assert len(colors) == 3

    def test_low_res_range_enforced(self) -> None:
        with pytest.raises(ValueError, match="0-5"):
            RgbLowRes(6, 0, 0)

    def test_rgb_range_enforced(self) -> None:
        with pytest.raises(ValueError, match="0-255"):
            Rgb(0, 256, 0)

    def test_base_class_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Color()  # type: ignore[abstract]


class TestColorRendering:
    """Tests for Rich, hex and 256-color conversions."""

    def test_to_rich(self) -> None:
        assert Default().to_rich() == "default"
        assert Dark(BaseColor.RED).to_rich() == "red"
        assert Light(BaseColor.RED).to_rich() == "bright_red"
        assert Rgb(255, 85, 85).to_rich() == "#ff5555"
        assert RgbLowRes(5, 0, 0).to_rich() == "color(196)"

    def test_to_hex(self) -> None:
        assert Default().to_hex() is None
        assert Dark(BaseColor.BLACK).to_hex() == "#000000"
        assert Light(BaseColor.WHITE).to_hex() == "#ffffff"
        assert RgbLowRes(5, 2, 0).to_hex() == "#ff8700"

    def test_to_256colors_inverts_from_256colors(self) -> None:
        for n in range(256):
            assert Color.from_256colors(n).to_256colors() == n

    def test_to_256colors_without_index(self) -> None:
        assert Default().to_256colors() is None
        assert Rgb(1, 2, 3).to_256colors() is None
        assert Rgb(0, 0, 0).to_256colors() is None
        assert Rgb(248, 248, 248).to_256colors() is None
        assert Rgb(9, 9, 9).to_256colors() is None

    def test_grayscale_rgb_has_index(self) -> None:
        assert Rgb(8, 8, 8).to_256colors() == 232
        assert Rgb(238, 238, 238).to_256colors() == 255


class TestLoadHex:
    """Tests for load_hex."""

    def test_values(self) -> None:
        assert load_hex("ff") == 255
        assert load_hex("A0") == 160
        assert load_hex("") == 0

    def test_non_hex_characters(self) -> None:
        assert load_hex("x1") == 1
