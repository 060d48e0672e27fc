"""
Centralized error handling utilities.

Errors are translated at each layer so they become more useful further up:

```
┌─────────────────────────────────────┐
│  USER LAYER (CLI)                   │
│  - Formats error.user_message       │
│  - Shows error.recovery_hint        │
└─────────────────────────────────────┘
                  ↑
                  │ RandomColorError
                  │
┌─────────────────────────────────────┐
│  CONFIGURATION LAYER (options)      │
│  - Catches pydantic ValidationError │
│  - Converts to RandomColorError     │
└─────────────────────────────────────┘
                  ↑
                  │ ValidationError
                  │
┌─────────────────────────────────────┐
│  MODELS (pydantic)                  │
│  - Field constraints and validators │
└─────────────────────────────────────┘
```

Generation and colorspace conversion never raise once options are valid.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from .base import RandomColorError
from .config import ConfigurationError, ConfigValidationError, InvalidAlphaError


logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Log the start, end and failure of an operation.

    Library errors are logged with their technical message; anything else is
    logged with its traceback. With `re_raise=False` the exception is swallowed
    and kept on `error`.

    Example:
        ```python
        with ErrorContext("generate colors", logger_instance=logger):
            colors = generate_many(options, 10)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        self.operation = operation
        self.logger = logger_instance if logger_instance is not None else logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self) -> "ErrorContext":
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_val is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val
        if isinstance(exc_val, RandomColorError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=exc_val)
        return not self.re_raise


def wrap_pydantic_error(error: ValidationError) -> ConfigurationError:
    """
    Convert a pydantic ValidationError raised by the option models.

    Alpha failures map to InvalidAlphaError, every other field to
    ConfigValidationError. When several fields fail, the messages are combined.

    Args:
        error: The pydantic ValidationError

    Returns:
        A ConfigurationError subclass with a user-friendly message
    """
    errors = error.errors()
    if not errors:
        return ConfigurationError(
            user_message="Invalid color options",
            technical_message=str(error),
            recoverable=True,
        )

    if len(errors) == 1:
        first_error = errors[0]
        field = ".".join(str(loc) for loc in first_error.get("loc", ())) or "options"
        value = first_error.get("input", None)

        if field == "alpha":
            return InvalidAlphaError(value)

        # model-level validators report an empty location; surface their message
        reason = first_error.get("msg", "validation failed")
        if reason.startswith("Value error, "):
            reason = reason[len("Value error, "):]

        return ConfigValidationError(field=field, value=value, error_msg=reason)

    for err in errors:
        if err.get("loc") == ("alpha",):
            return InvalidAlphaError(err.get("input"))

    error_lines = []
    for err in errors:
        field = ".".join(str(loc) for loc in err.get("loc", ())) or "options"
        error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

    combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
    return ConfigValidationError(field="multiple fields", value=None, error_msg=combined_msg)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Split an exception into the message and hint shown by the CLI.

    Foreign exceptions are prefixed with their type name and carry no hint.
    """
    if not isinstance(error, RandomColorError):
        return f"{type(error).__name__}: {error}", None
    return error.user_message, error.recovery_hint
