"""Generated color model and its output representations."""

from pydantic import BaseModel, ConfigDict, Field

from random_color.utils.colorspace import (
    format_hsl,
    format_hsla,
    format_rgb,
    format_rgba,
    hsv_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
)

from .color import Color
from .enums import HueFamily


class GeneratedColor(BaseModel):
    """A generated color stored as HSB plus alpha.

    The model is frozen. Every `to_*` method is a pure projection, so the same
    color can be rendered in any number of formats in any order.

    Example:
        >>> color = GeneratedColor(hue=0, saturation=100, brightness=100)
        >>> color.to_hex()
        '#ff0000'
        >>> color.to_hsl_string()
        'hsl(0, 100%, 50%)'
    """

    model_config = ConfigDict(frozen=True)

    hue: int = Field(ge=0, lt=360, description="Hue in degrees [0, 360)")
    saturation: int = Field(ge=0, le=100, description="Saturation percent")
    brightness: int = Field(ge=0, le=100, description="Brightness (HSV value) percent")
    alpha: float = Field(default=1.0, ge=0.0, le=1.0, description="Alpha [0, 1]")

    @property
    def family(self) -> HueFamily:
        """Hue family owning this color (monochrome when unsaturated)."""
        from random_color.colors import COLOR_DICTIONARY

        if self.saturation == 0:
            return HueFamily.MONOCHROME
        return COLOR_DICTIONARY.for_hue(self.hue).family

    # HSV

    def to_hsv_array(self) -> tuple[int, int, int]:
        return (self.hue, self.saturation, self.brightness)

    # RGB

    def to_rgb_array(self) -> tuple[int, int, int]:
        return hsv_to_rgb(self.hue, self.saturation, self.brightness)

    def to_rgba_array(self) -> tuple[int, int, int, int]:
        """RGB plus alpha scaled to 0-255."""
        r, g, b = self.to_rgb_array()
        return (r, g, b, round(self.alpha * 255))

    def to_f32_rgb_array(self) -> tuple[float, float, float]:
        """RGB channels as floats in [0, 1]."""
        r, g, b = self.to_rgb_array()
        return (r / 255.0, g / 255.0, b / 255.0)

    def to_f32_rgba_array(self) -> tuple[float, float, float, float]:
        return (*self.to_f32_rgb_array(), self.alpha)

    def to_rgb_string(self) -> str:
        return format_rgb(self.to_rgb_array())

    def to_rgba_string(self) -> str:
        return format_rgba(self.to_rgb_array(), self.alpha)

    def to_color(self) -> Color:
        r, g, b = self.to_rgb_array()
        return Color(r=r, g=g, b=b)

    # HSL

    def to_hsl_array(self) -> tuple[int, int, int]:
        return rgb_to_hsl(*self.to_rgb_array())

    def to_hsl_string(self) -> str:
        return format_hsl(self.to_hsl_array())

    def to_hsla_string(self) -> str:
        return format_hsla(self.to_hsl_array(), self.alpha)

    # Hex

    def to_hex(self) -> str:
        """Lowercase '#rrggbb'."""
        return rgb_to_hex(*self.to_rgb_array())

    def __str__(self) -> str:
        return self.to_hex()
