"""Generic utility modules for random_color.

This package contains utilities that do not depend on generation settings:
- colorspace: HSV/HSB, RGB, HSL and hex conversions plus CSS string formatting
"""

from .colorspace import (
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

__all__ = [
    "format_alpha",
    "format_hsl",
    "format_hsla",
    "format_rgb",
    "format_rgba",
    "hex_to_rgb",
    "hsv_to_hsl",
    "hsv_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
]
