"""RGB color value model."""

from pydantic import BaseModel, ConfigDict, Field

from random_color.utils.colorspace import hex_to_rgb, rgb_to_hex


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    The model is frozen so instances are hashable and can be compared by value.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse a '#rrggbb' (or 'rrggbb') string.

        Raises:
            ValueError: If the string is not six hex digits
        """
        r, g, b = hex_to_rgb(value)
        return cls(r=r, g=g, b=b)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Lowercase '#rrggbb', e.g. '#ff000a' for (255, 0, 10)."""
        return rgb_to_hex(*self.to_rgb_tuple())
