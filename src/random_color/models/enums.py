"""Enumerations for random color generation."""

from enum import Enum


class HueFamily(str, Enum):
    """Named hue families."""

    MONOCHROME = "monochrome"  # Greys only, saturation forced to 0
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    RANDOM = "random"  # Selection instruction, resolved to a concrete family

    @classmethod
    def concrete(cls) -> list["HueFamily"]:
        """Families eligible for random hue selection (monochrome excluded)."""
        return [family for family in cls if family not in (cls.MONOCHROME, cls.RANDOM)]


class Luminosity(str, Enum):
    """Luminosity classes narrowing saturation and brightness sampling."""

    RANDOM = "random"  # Anything from 0 to 100
    BRIGHT = "bright"  # Saturated, brightness pinned near the top
    LIGHT = "light"  # Pale, brightness in the upper-middle
    DARK = "dark"  # Saturated, brightness in the lower part of the band
