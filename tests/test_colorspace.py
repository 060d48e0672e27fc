"""Unit tests for colorspace conversion and formatting."""

import pytest

from random_color.utils import (
    format_alpha,
    format_hsl,
    format_hsla,
    format_rgb,
    format_rgba,
    hex_to_rgb,
    hsv_to_hsl,
    hsv_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
)


class TestHsvToRgb:
    """Test HSV/HSB to RGB conversion."""

    @pytest.mark.unit
    def test_primary_colors(self):
        """Test fully saturated primaries."""
        assert hsv_to_rgb(0, 100, 100) == (255, 0, 0)
        assert hsv_to_rgb(120, 100, 100) == (0, 255, 0)
        assert hsv_to_rgb(240, 100, 100) == (0, 0, 255)

    @pytest.mark.unit
    def test_secondary_colors(self):
        """Test sector boundaries produce secondaries."""
        assert hsv_to_rgb(60, 100, 100) == (255, 255, 0)
        assert hsv_to_rgb(180, 100, 100) == (0, 255, 255)
        assert hsv_to_rgb(300, 100, 100) == (255, 0, 255)

    @pytest.mark.unit
    def test_greys(self):
        """Test that zero saturation gives greys."""
        assert hsv_to_rgb(0, 0, 100) == (255, 255, 255)
        assert hsv_to_rgb(0, 0, 0) == (0, 0, 0)
        assert hsv_to_rgb(200, 0, 100) == (255, 255, 255)

    @pytest.mark.unit
    def test_rounds_channels(self):
        """Test that channels are rounded, not truncated."""
        # p = 0.686 * 255 = 174.93, v = 0.98 * 255 = 249.9
        assert hsv_to_rgb(191, 30, 98) == (175, 236, 250)

    @pytest.mark.unit
    def test_hue_360_wraps(self):
        """Test that 360 degrees is the same as 0."""
        assert hsv_to_rgb(360, 100, 100) == hsv_to_rgb(0, 100, 100)


class TestRgbToHsl:
    """Test RGB to HSL conversion."""

    @pytest.mark.unit
    def test_pale_cyan(self):
        """Test a pale cyan: hue 179, full saturation, 90% lightness."""
        assert rgb_to_hsl(204, 255, 254) == (179, 100, 90)

    @pytest.mark.unit
    def test_primaries(self):
        """Test primaries sit at 50% lightness."""
        assert rgb_to_hsl(255, 0, 0) == (0, 100, 50)
        assert rgb_to_hsl(0, 255, 0) == (120, 100, 50)
        assert rgb_to_hsl(0, 0, 255) == (240, 100, 50)

    @pytest.mark.unit
    def test_magenta_hue(self):
        """Test a hue in the last sector (blue below red)."""
        assert rgb_to_hsl(255, 0, 255) == (300, 100, 50)

    @pytest.mark.unit
    def test_achromatic(self):
        """Test greys have no hue or saturation."""
        assert rgb_to_hsl(255, 255, 255) == (0, 0, 100)
        assert rgb_to_hsl(0, 0, 0) == (0, 0, 0)
        assert rgb_to_hsl(128, 128, 128) == (0, 0, 50)

    @pytest.mark.unit
    def test_hsv_to_hsl(self):
        """Test HSV to HSL goes through RGB."""
        assert hsv_to_hsl(0, 100, 100) == (0, 100, 50)
        assert hsv_to_hsl(0, 0, 100) == (0, 0, 100)


class TestHex:
    """Test hex formatting and parsing."""

    @pytest.mark.unit
    def test_zero_padded_lowercase(self):
        """Test each channel is padded to two lowercase digits."""
        assert rgb_to_hex(1, 2, 255) == "#0102ff"
        assert rgb_to_hex(0, 0, 0) == "#000000"

    @pytest.mark.unit
    def test_parse(self):
        """Test parsing with and without the leading '#'."""
        assert hex_to_rgb("#0102ff") == (1, 2, 255)
        assert hex_to_rgb("AEECF9") == (174, 236, 249)

    @pytest.mark.unit
    def test_parse_rejects_short_strings(self):
        """Test that non six-digit strings are rejected."""
        with pytest.raises(ValueError):
            hex_to_rgb("#abc")


class TestFormatting:
    """Test CSS string formatting."""

    @pytest.mark.unit
    def test_alpha(self):
        """Test alpha is printed compactly."""
        assert format_alpha(1.0) == "1"
        assert format_alpha(0.0) == "0"
        assert format_alpha(0.5) == "0.5"

    @pytest.mark.unit
    def test_rgb_strings(self):
        """Test rgb() and rgba()."""
        assert format_rgb((174, 236, 249)) == "rgb(174, 236, 249)"
        assert format_rgba((174, 236, 249), 1.0) == "rgba(174, 236, 249, 1)"

    @pytest.mark.unit
    def test_hsl_strings(self):
        """Test hsl() and hsla()."""
        assert format_hsl((179, 100, 90)) == "hsl(179, 100%, 90%)"
        assert format_hsla((179, 100, 90), 0.5) == "hsla(179, 100%, 90%, 0.5)"
