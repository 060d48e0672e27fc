"""
Custom exception hierarchy for random_color.

## Exception Hierarchy

```
RandomColorError (base)
└── ConfigurationError
    └── ConfigValidationError
        └── InvalidAlphaError
```

All custom exceptions inherit from `RandomColorError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Invalid Alpha

```python
from random_color import RandomColor
from random_color.exceptions import InvalidAlphaError

try:
    RandomColor().alpha(1.5)
except InvalidAlphaError as e:
    print(e.get_full_message())
```

Only option building can fail. Once a `ColorOptions` exists, generation and
every output conversion are total.
"""

from .base import RandomColorError
from .config import ConfigurationError, ConfigValidationError, InvalidAlphaError
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error

__all__ = [
    # Config
    "ConfigValidationError",
    "ConfigurationError",
    "ErrorContext",
    "InvalidAlphaError",
    # Base
    "RandomColorError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
