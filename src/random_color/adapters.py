"""Conversions to third-party color types.

These are plain re-packagings of a GeneratedColor's RGB/alpha values. The
target libraries are imported lazily so they stay optional; install them with
the `textual` extra:

    pip install random-color[textual]
"""

from typing import TYPE_CHECKING

from random_color.models import GeneratedColor

if TYPE_CHECKING:
    import rich.color
    import textual.color


def to_textual_color(color: GeneratedColor) -> "textual.color.Color":
    """Convert to a Textual Color (RGB plus float alpha)."""
    from textual.color import Color as TextualColor

    r, g, b = color.to_rgb_array()
    return TextualColor(r, g, b, color.alpha)


def to_rich_color(color: GeneratedColor) -> "rich.color.Color":
    """Convert to a Rich truecolor Color. Rich colors carry no alpha."""
    from rich.color import Color as RichColor

    return RichColor.from_rgb(*color.to_rgb_array())
