"""Fluent builder for generation options.

`RandomColor` collects settings through chained setters and produces an
immutable `ColorOptions`. Its `to_*` shortcuts generate a new color on every
call; with a seed set, every call returns the same color.

Example:
    ```python
    from random_color import HueFamily, Luminosity, RandomColor

    RandomColor().hue(HueFamily.BLUE).luminosity(Luminosity.DARK).to_hex()
    RandomColor().seed("theme").random_alpha().to_rgba_string()
    ```
"""

import logging
from typing import Optional, Union

from random_color.colors import ColorDefinitionTable
from random_color.core import ColorGenerator
from random_color.exceptions import ConfigValidationError, InvalidAlphaError
from random_color.models import ColorOptions, GeneratedColor, HueFamily, Luminosity

logger = logging.getLogger(__name__)


class RandomColor:
    """Mutable, chainable configuration for random colors."""

    def __init__(self):
        self._hue: Optional[HueFamily] = None
        self._luminosity: Optional[Luminosity] = None
        self._seed: Optional[Union[int, str]] = None
        self._alpha: Optional[float] = None
        self._random_alpha = False
        self._dictionary: Optional[ColorDefinitionTable] = None

    def __repr__(self) -> str:
        return f"RandomColor(options={self.build()!r})"

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def hue(self, hue: Union[HueFamily, str]) -> "RandomColor":
        """Set the hue family ('random' picks any family but monochrome)."""
        try:
            self._hue = HueFamily(hue)
        except ValueError as e:
            raise ConfigValidationError("hue", hue, "unknown hue family") from e
        return self

    def luminosity(self, luminosity: Union[Luminosity, str]) -> "RandomColor":
        """Set the luminosity class."""
        try:
            self._luminosity = Luminosity(luminosity)
        except ValueError as e:
            raise ConfigValidationError("luminosity", luminosity, "unknown luminosity") from e
        return self

    def seed(self, seed: Union[int, str]) -> "RandomColor":
        """Make output reproducible. Integers and strings are accepted."""
        self._seed = seed
        return self

    def alpha(self, alpha: float) -> "RandomColor":
        """
        Set an explicit alpha and clear any random-alpha request.

        Raises:
            InvalidAlphaError: If alpha lies outside [0.0, 1.0]
        """
        if not 0.0 <= alpha <= 1.0:
            logger.debug(f"Rejected alpha {alpha!r}")
            raise InvalidAlphaError(alpha)
        self._alpha = float(alpha)
        self._random_alpha = False
        return self

    def random_alpha(self) -> "RandomColor":
        """Draw alpha at random and clear any explicit alpha."""
        self._alpha = None
        self._random_alpha = True
        return self

    def dictionary(self, dictionary: ColorDefinitionTable) -> "RandomColor":
        """Use a custom definition table instead of the default one."""
        self._dictionary = dictionary
        return self

    # ------------------------------------------------------------------
    # Building and generating
    # ------------------------------------------------------------------

    def build(self) -> ColorOptions:
        return ColorOptions.create(
            hue=self._hue,
            luminosity=self._luminosity,
            seed=self._seed,
            alpha=self._alpha,
            random_alpha=self._random_alpha,
        )

    def generate(self) -> GeneratedColor:
        return ColorGenerator(self._dictionary).generate(self.build())

    def generate_many(self, count: int) -> list[GeneratedColor]:
        return ColorGenerator(self._dictionary).generate_many(self.build(), count)

    def to_hsv_array(self) -> tuple[int, int, int]:
        return self.generate().to_hsv_array()

    def to_rgb_array(self) -> tuple[int, int, int]:
        return self.generate().to_rgb_array()

    def to_rgba_array(self) -> tuple[int, int, int, int]:
        return self.generate().to_rgba_array()

    def to_rgb_string(self) -> str:
        return self.generate().to_rgb_string()

    def to_rgba_string(self) -> str:
        return self.generate().to_rgba_string()

    def to_hsl_array(self) -> tuple[int, int, int]:
        return self.generate().to_hsl_array()

    def to_hsl_string(self) -> str:
        return self.generate().to_hsl_string()

    def to_hsla_string(self) -> str:
        return self.generate().to_hsla_string()

    def to_hex(self) -> str:
        return self.generate().to_hex()
