"""Root of the random_color exception tree.

Catching `RandomColorError` catches every error the library raises on
purpose. Each error carries two messages: a short one meant for people and a
detailed one meant for logs.
"""

from typing import Optional


class RandomColorError(Exception):
    """
    Raised for invalid requests to the color generator.

    Attributes:
        user_message: Short explanation suitable for a terminal or UI
        technical_message: Longer explanation with the offending values
        recoverable: True when correcting the input and retrying will work
        recovery_hint: What to change, if known
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message if technical_message else user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.technical_message!r})"

    def get_full_message(self) -> str:
        """User message followed by the recovery hint as a suggestion."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
