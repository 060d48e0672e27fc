"""Configuration-related exceptions.

This module defines exceptions raised while building generation options:
- ConfigurationError: Base class for configuration errors
- ConfigValidationError: An option value fails validation
- InvalidAlphaError: An explicit alpha lies outside [0, 1]
"""

from typing import Any, Optional

from .base import RandomColorError


class ConfigurationError(RandomColorError):
    """Generation options are invalid or contradictory."""
    pass


class ConfigValidationError(ConfigurationError):
    """An option value fails validation."""

    def __init__(self, field: str, value: Any, error_msg: str, recovery_hint: Optional[str] = None):
        """
        Initialize config validation error.

        Args:
            field: The option that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            recovery_hint: Overrides the generic hint
        """
        user_msg = f"Invalid value for '{field}': {error_msg}"

        if recovery_hint is None:
            recovery_hint = f"Update the '{field}' option"
            if field == "hue":
                recovery_hint += "\nValid hues: monochrome, red, orange, yellow, green, blue, purple, pink, random"
            elif field == "luminosity":
                recovery_hint += "\nValid luminosities: random, bright, light, dark"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Option validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery_hint,
        )
        self.field = field
        self.value = value


class InvalidAlphaError(ConfigValidationError):
    """An explicit alpha value lies outside [0.0, 1.0]."""

    def __init__(self, value: Any):
        """
        Initialize invalid alpha error.

        Args:
            value: The rejected alpha value
        """
        super().__init__(
            field="alpha",
            value=value,
            error_msg=f"{value!r} is not between 0.0 and 1.0",
            recovery_hint="Use an alpha between 0.0 (transparent) and 1.0 (opaque), "
            "or request a random alpha instead",
        )
