"""Color sampling.

Generation runs in fixed steps, each drawing from the same random source:

1. Resolve the hue family (RANDOM picks one of the seven hue-bearing families)
2. Sample a hue inside the family's range, wrapping red's negative end
3. Sample a saturation inside the family's band, narrowed by luminosity
4. Sample a brightness between the family's floor for that saturation and 100,
   narrowed by luminosity
5. Resolve alpha

Luminosity narrowing:

| Luminosity | Saturation         | Brightness                        |
|------------|--------------------|-----------------------------------|
| None       | s_min .. s_max     | floor .. 100                      |
| RANDOM     | 0 .. 100           | floor .. 100                      |
| BRIGHT     | 55 .. s_max        | max(floor, 90) .. 100             |
| LIGHT      | s_min .. 55        | (floor + 100) // 2 .. 90 (*)      |
| DARK       | s_max - 10 .. s_max| floor .. min(floor + 20, 100)     |

(*) clamped so it never drops below the floor or rises above 90 unless the
floor itself does.

A random source is created per request (or passed in by the caller) and is
never stored, so concurrent callers cannot disturb each other's sequences.
"""

import logging
from typing import Optional

from random_color.colors import BRIGHTNESS_MAX, COLOR_DICTIONARY, ColorDefinitionTable, HueRangeSpec
from random_color.models import ColorOptions, GeneratedColor, Luminosity
from random_color.protocols import RandomSource

logger = logging.getLogger(__name__)

BRIGHT_SATURATION_FLOOR = 55
LIGHT_SATURATION_CEILING = 55
DARK_SATURATION_SPAN = 10
DARK_BRIGHTNESS_SPAN = 20
TOP_BRIGHTNESS_SPAN = 10


def random_within(rng: RandomSource, low: int, high: int) -> int:
    """Uniform integer in [low, high], inclusive; reversed bounds are swapped."""
    if low > high:
        low, high = high, low
    return rng.randint(low, high)


class ColorGenerator:
    """
    Samples colors from a ColorDefinitionTable.

    The generator holds only the (immutable) table. Randomness is supplied
    per call.

    Example:
        ```python
        generator = ColorGenerator()
        options = ColorOptions(hue=HueFamily.BLUE, luminosity=Luminosity.DARK, seed=7)
        color = generator.generate(options)
        color.to_hex()
        ```
    """

    def __init__(self, dictionary: Optional[ColorDefinitionTable] = None):
        self.dictionary = dictionary or COLOR_DICTIONARY

    def generate(self, options: ColorOptions, rng: Optional[RandomSource] = None) -> GeneratedColor:
        """
        Generate one color.

        Args:
            options: Validated generation options
            rng: Random source to draw from. Defaults to a new source built from
                 the options' seed (or OS entropy when unseeded).

        Returns:
            The generated color. Identical seeded options always give identical
            results.
        """
        if rng is None:
            rng = options.make_rng()

        family = self.dictionary.resolve(options.hue, rng)
        spec = self.dictionary.lookup(family)

        hue = self.pick_hue(spec, rng)
        saturation = self.pick_saturation(spec, options.luminosity, rng)
        brightness = self.pick_brightness(spec, saturation, options.luminosity, rng)
        alpha = self.pick_alpha(options, rng)

        color = GeneratedColor(hue=hue, saturation=saturation, brightness=brightness, alpha=alpha)
        logger.debug(
            f"Generated {family.value} color hsv={color.to_hsv_array()} alpha={alpha} "
            f"(luminosity={options.luminosity}, seeded={options.is_seeded})"
        )
        return color

    def generate_many(self, options: ColorOptions, count: int) -> list[GeneratedColor]:
        """
        Generate a sequence of colors from one random source.

        A seeded request replays the same sequence; the first color equals
        `generate(options)`.

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        rng = options.make_rng()
        return [self.generate(options, rng) for _ in range(count)]

    def pick_hue(self, spec: HueRangeSpec, rng: RandomSource) -> int:
        if spec.hue_range is None:
            return 0
        low, high = spec.hue_range
        return random_within(rng, low, high) % 360

    def pick_saturation(
        self,
        spec: HueRangeSpec,
        luminosity: Optional[Luminosity],
        rng: RandomSource,
    ) -> int:
        if spec.hue_range is None:
            return 0

        if luminosity is Luminosity.RANDOM:
            return random_within(rng, 0, 100)

        s_min, s_max = spec.saturation_range

        if luminosity is Luminosity.BRIGHT:
            s_min = BRIGHT_SATURATION_FLOOR
        elif luminosity is Luminosity.DARK:
            s_min = s_max - DARK_SATURATION_SPAN
        elif luminosity is Luminosity.LIGHT:
            s_max = LIGHT_SATURATION_CEILING

        return random_within(rng, s_min, s_max)

    def pick_brightness(
        self,
        spec: HueRangeSpec,
        saturation: int,
        luminosity: Optional[Luminosity],
        rng: RandomSource,
    ) -> int:
        b_min = spec.minimum_brightness(saturation)
        b_max = BRIGHTNESS_MAX

        if luminosity is Luminosity.BRIGHT:
            return random_within(rng, max(b_min, b_max - TOP_BRIGHTNESS_SPAN), b_max)
        if luminosity is Luminosity.LIGHT:
            # Never above the bright band unless the floor itself is
            high = max(b_min, b_max - TOP_BRIGHTNESS_SPAN)
            low = max(b_min, min((b_max + b_min) // 2, high))
            return random_within(rng, low, high)
        if luminosity is Luminosity.DARK:
            return random_within(rng, b_min, min(b_min + DARK_BRIGHTNESS_SPAN, b_max))
        return random_within(rng, b_min, b_max)

    def pick_alpha(self, options: ColorOptions, rng: RandomSource) -> float:
        if options.alpha is not None:
            return options.alpha
        if options.random_alpha:
            return rng.random()
        return 1.0


def generate(
    options: Optional[ColorOptions] = None,
    rng: Optional[RandomSource] = None,
    dictionary: Optional[ColorDefinitionTable] = None,
) -> GeneratedColor:
    """Generate one color with the default (or given) definition table."""
    return ColorGenerator(dictionary).generate(options or ColorOptions(), rng)


def generate_many(
    options: Optional[ColorOptions] = None,
    count: int = 1,
    dictionary: Optional[ColorDefinitionTable] = None,
) -> list[GeneratedColor]:
    """Generate `count` colors from a single random source."""
    return ColorGenerator(dictionary).generate_many(options or ColorOptions(), count)
