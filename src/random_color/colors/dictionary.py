"""Hue family definitions: hue ranges and saturation/brightness lower bounds.

Each family is defined by an inclusive hue range in degrees and an ordered list
of (saturation, minimum brightness) breakpoints. Consecutive breakpoints form
saturation bands; inside a band the brightness floor is linearly interpolated.
Colors below that floor look muddy, so the generator never samples there.

Lookups:
- By family: O(1) dictionary access
- By hue: linear scan over the seven hue-bearing families
"""

import random
from dataclasses import dataclass
from typing import Optional

from random_color.models.enums import HueFamily
from random_color.protocols import RandomSource

BRIGHTNESS_MAX = 100


@dataclass(frozen=True, slots=True)
class SaturationBand:
    """One segment of a family's brightness floor curve."""

    s_min: int
    s_max: int
    b_min: int  # Floor at s_min
    b_max: int  # Floor at s_max

    def contains(self, saturation: int) -> bool:
        return self.s_min <= saturation <= self.s_max

    def floor_at(self, saturation: int) -> int:
        """Interpolate the brightness floor for a saturation inside the band."""
        if self.s_max == self.s_min:
            return self.b_min
        slope = (self.b_max - self.b_min) / (self.s_max - self.s_min)
        intercept = self.b_min - slope * self.s_min
        return round(slope * saturation + intercept)


@dataclass(frozen=True, slots=True)
class HueRangeSpec:
    """Hue range and brightness floor breakpoints of one hue family."""

    family: HueFamily
    hue_range: Optional[tuple[int, int]]  # None for monochrome
    lower_bounds: tuple[tuple[int, int], ...]  # (saturation, min brightness)

    def __post_init__(self):
        # The table is static data; a violation here is a corrupted definition
        assert len(self.lower_bounds) >= 2, f"{self.family.value}: needs two breakpoints"
        saturations = [s for s, _ in self.lower_bounds]
        assert saturations == sorted(saturations), f"{self.family.value}: unordered breakpoints"
        assert all(0 <= b <= BRIGHTNESS_MAX for _, b in self.lower_bounds), (
            f"{self.family.value}: brightness floor out of range"
        )
        if self.hue_range is not None:
            assert self.hue_range[0] <= self.hue_range[1], f"{self.family.value}: empty hue range"

    @property
    def saturation_range(self) -> tuple[int, int]:
        return (self.lower_bounds[0][0], self.lower_bounds[-1][0])

    @property
    def brightness_range(self) -> tuple[int, int]:
        return (self.lower_bounds[-1][1], self.lower_bounds[0][1])

    @property
    def bands(self) -> list[SaturationBand]:
        """Consecutive breakpoints as saturation bands, in order."""
        return [
            SaturationBand(s_min=s1, s_max=s2, b_min=b1, b_max=b2)
            for (s1, b1), (s2, b2) in zip(self.lower_bounds, self.lower_bounds[1:])
        ]

    def contains_hue(self, hue: int) -> bool:
        """Check a hue against the range, allowing for the red wrap below 0."""
        if self.hue_range is None:
            return False
        low, high = self.hue_range
        return low <= hue <= high or low <= hue - 360 <= high

    def minimum_brightness(self, saturation: int) -> int:
        """Brightness floor for a saturation; 0 outside every band.

        When the saturation sits on a breakpoint shared by two bands, the later
        band wins (the curve is continuous so both agree).
        """
        minimum = 0
        for band in self.bands:
            if band.contains(saturation):
                minimum = band.floor_at(saturation)
        return minimum


class ColorDefinitionTable:
    """Immutable mapping from hue family to its HueRangeSpec.

    Example:
        >>> table = ColorDefinitionTable.default()
        >>> table.lookup(HueFamily.BLUE).hue_range
        (179, 257)
    """

    def __init__(self, specs: list[HueRangeSpec]):
        self._specs: dict[HueFamily, HueRangeSpec] = {spec.family: spec for spec in specs}
        missing = [f for f in HueFamily if f is not HueFamily.RANDOM and f not in self._specs]
        assert not missing, f"Color table is missing families: {missing}"
        hueless = [f for f in HueFamily.concrete() if self._specs[f].hue_range is None]
        assert not hueless, f"Hue families without a hue range: {hueless}"

    @classmethod
    def default(cls) -> "ColorDefinitionTable":
        from random_color.colors import COLOR_DICTIONARY

        return COLOR_DICTIONARY

    def __iter__(self):
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def resolve(self, family: Optional[HueFamily], rng: RandomSource) -> HueFamily:
        """Turn RANDOM (or None) into a concrete, hue-bearing family."""
        if family is None or family is HueFamily.RANDOM:
            candidates = HueFamily.concrete()
            return candidates[rng.randint(0, len(candidates) - 1)]
        return family

    def lookup(self, family: HueFamily, rng: Optional[RandomSource] = None) -> HueRangeSpec:
        """Get the definition for a family.

        Args:
            family: Family to look up. RANDOM resolves to a hue-bearing family.
            rng: Random source used to resolve RANDOM (a fresh one when omitted)
        """
        if family is HueFamily.RANDOM:
            family = self.resolve(family, rng if rng is not None else random.Random())
        return self._specs[family]

    def for_hue(self, hue: int) -> HueRangeSpec:
        """Find the hue-bearing family whose range contains the hue.

        Hues above 334 are treated as red (hue - 360); 334 itself is pink.
        """
        hue = hue % 360
        if hue > 334:
            hue -= 360
        for spec in self:
            if spec.hue_range is not None and spec.hue_range[0] <= hue <= spec.hue_range[1]:
                return spec
        # Ranges cover [-26, 334]; this is only reached with a custom table
        return self._specs[HueFamily.PINK]
