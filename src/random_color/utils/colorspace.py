"""Colorspace conversion and CSS formatting.

All functions are pure. Hue is in degrees, saturation/brightness/lightness in
percent (0-100) and RGB channels are 8-bit (0-255). Every result is rounded to
the nearest integer.
"""

RGB = tuple[int, int, int]
HSL = tuple[int, int, int]


def hsv_to_rgb(hue: int, saturation: int, value: int) -> RGB:
    """Convert HSV/HSB to 8-bit RGB using hue-sector decomposition.

    Examples:
        >>> hsv_to_rgb(0, 100, 100)
        (255, 0, 0)
        >>> hsv_to_rgb(0, 0, 100)
        (255, 255, 255)
    """
    h = (hue % 360) / 60.0
    s = saturation / 100.0
    v = value / 100.0

    sector = int(h)
    f = h - sector
    p = v * (1.0 - s)
    q = v * (1.0 - f * s)
    t = v * (1.0 - (1.0 - f) * s)

    r, g, b = (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[sector % 6]

    return (round(r * 255), round(g * 255), round(b * 255))


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert 8-bit RGB to HSL using max/min channel decomposition.

    Example:
        >>> rgb_to_hsl(204, 255, 254)
        (179, 100, 90)
    """
    rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
    high = max(rf, gf, bf)
    low = min(rf, gf, bf)
    lightness = (high + low) / 2.0

    if high == low:
        return (0, 0, round(lightness * 100))

    delta = high - low
    if lightness > 0.5:
        saturation = delta / (2.0 - high - low)
    else:
        saturation = delta / (high + low)

    if high == rf:
        hue = (gf - bf) / delta + (6.0 if gf < bf else 0.0)
    elif high == gf:
        hue = (bf - rf) / delta + 2.0
    else:
        hue = (rf - gf) / delta + 4.0

    return (round(hue * 60.0) % 360, round(saturation * 100), round(lightness * 100))


def hsv_to_hsl(hue: int, saturation: int, value: int) -> HSL:
    """Convert HSV/HSB to HSL by way of RGB."""
    return rgb_to_hsl(*hsv_to_rgb(hue, saturation, value))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format RGB as '#rrggbb' with lowercase, zero-padded digits."""
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(value: str) -> RGB:
    """Parse '#rrggbb' back into an RGB tuple.

    Raises:
        ValueError: If the string is not six hex digits
    """
    digits = value.lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Expected 6 hex digits, got {value!r}")
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def format_alpha(alpha: float) -> str:
    """Format alpha compactly: 1.0 -> '1', 0.5 -> '0.5'."""
    return f"{alpha:g}"


def format_rgb(rgb: RGB) -> str:
    return f"rgb({rgb[0]}, {rgb[1]}, {rgb[2]})"


def format_rgba(rgb: RGB, alpha: float) -> str:
    return f"rgba({rgb[0]}, {rgb[1]}, {rgb[2]}, {format_alpha(alpha)})"


def format_hsl(hsl: HSL) -> str:
    return f"hsl({hsl[0]}, {hsl[1]}%, {hsl[2]}%)"


def format_hsla(hsl: HSL, alpha: float) -> str:
    return f"hsla({hsl[0]}, {hsl[1]}%, {hsl[2]}%, {format_alpha(alpha)})"
