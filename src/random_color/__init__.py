"""random_color: attractive random colors constrained by hue and luminosity."""

__version__ = "0.1.0"

from .models import Color, ColorOptions, GeneratedColor, HueFamily, Luminosity
from .colors import COLOR_DICTIONARY, ColorDefinitionTable, HueRangeSpec
from .core import ColorGenerator, generate, generate_many
from .builder import RandomColor
from .exceptions import InvalidAlphaError, RandomColorError

__all__ = [
    "COLOR_DICTIONARY",
    "Color",
    "ColorDefinitionTable",
    "ColorGenerator",
    "ColorOptions",
    "GeneratedColor",
    "HueFamily",
    "HueRangeSpec",
    "InvalidAlphaError",
    "Luminosity",
    "RandomColor",
    "RandomColorError",
    "generate",
    "generate_many",
]
