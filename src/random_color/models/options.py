"""Generation options model."""

import random
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from random_color.exceptions import wrap_pydantic_error

from .enums import HueFamily, Luminosity


class ColorOptions(BaseModel):
    """Immutable request for one (or a sequence of) generated colors.

    Alpha resolution, in order: explicit `alpha`, a random alpha when
    `random_alpha` is set, otherwise fully opaque.
    """

    model_config = ConfigDict(frozen=True)

    hue: Optional[HueFamily] = Field(
        default=None,
        description="Hue family to draw from (None or RANDOM = any family except monochrome)",
    )
    luminosity: Optional[Luminosity] = Field(
        default=None,
        description="Luminosity class (None = anywhere inside the family's valid band)",
    )
    seed: Optional[Union[int, str]] = Field(
        default=None,
        description="Seed for reproducible output (None = fresh OS entropy per request)",
    )
    alpha: Optional[float] = Field(default=None, ge=0.0, le=1.0, description="Explicit alpha")
    random_alpha: bool = Field(default=False, description="Draw alpha uniformly from [0, 1)")

    @model_validator(mode="after")
    def check_alpha_choice(self) -> "ColorOptions":
        if self.random_alpha and self.alpha is not None:
            raise ValueError("an explicit alpha cannot be combined with random_alpha")
        return self

    @classmethod
    def create(cls, **kwargs: Any) -> "ColorOptions":
        """
        Validate options, raising library exceptions instead of pydantic ones.

        Raises:
            InvalidAlphaError: If alpha lies outside [0, 1]
            ConfigValidationError: If any other option is invalid
        """
        try:
            return cls(**kwargs)
        except ValidationError as e:
            raise wrap_pydantic_error(e) from e

    @property
    def is_seeded(self) -> bool:
        return self.seed is not None

    def make_rng(self) -> random.Random:
        """Create a random source scoped to one request.

        A seeded source always replays the same sequence. Without a seed the
        source is initialised from OS entropy.
        """
        if self.seed is None:
            return random.Random()
        return random.Random(self.seed)
