"""Data models for random color generation."""

from .enums import HueFamily, Luminosity
from .color import Color
from .options import ColorOptions
from .generated import GeneratedColor

__all__ = [
    # Models
    "Color",
    "ColorOptions",
    "GeneratedColor",
    # Enums
    "HueFamily",
    "Luminosity",
]
