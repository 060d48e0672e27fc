"""Color Definition Table - the hue families the generator samples from.

This module provides the single source of truth for which colors count as
"attractive". Every family owns a hue range and a brightness floor curve:

```
brightness
  100 ┤●
      │  ●──●
      │       ●──●            valid region
      │            ●──●       (sampled)
      │                 ●──●
   35 ┤                      ●
      │   too dark / muddy (never sampled)
    0 ┼──────────────────────────── saturation
      20                        100
```

## Families

| Family     | Hue range (deg) | Saturation | Brightness floor |
|------------|-----------------|------------|------------------|
| monochrome | -               | 0          | 0                |
| red        | -26 .. 18       | 20 .. 100  | 100 .. 50        |
| orange     | 19 .. 46        | 20 .. 100  | 100 .. 70        |
| yellow     | 47 .. 62        | 25 .. 100  | 100 .. 75        |
| green      | 63 .. 178       | 30 .. 100  | 100 .. 40        |
| blue       | 179 .. 257      | 20 .. 100  | 100 .. 35        |
| purple     | 258 .. 282      | 20 .. 100  | 100 .. 42        |
| pink       | 283 .. 334      | 20 .. 100  | 100 .. 73        |

Red wraps through 0: a sampled hue of -10 is reported as 350.

## Usage

```python
from random_color.colors import COLOR_DICTIONARY
from random_color.models import HueFamily

blue = COLOR_DICTIONARY.lookup(HueFamily.BLUE)
blue.minimum_brightness(55)   # brightness floor for saturation 55
COLOR_DICTIONARY.for_hue(200).family   # HueFamily.BLUE
```

## Adding Families

The breakpoints are tuned data; change them only together with the expected
distributions in the tests. A custom table can be passed to the generator
instead of editing this one.
"""

from random_color.models.enums import HueFamily

from .dictionary import BRIGHTNESS_MAX, ColorDefinitionTable, HueRangeSpec, SaturationBand

# ============================================================================
# DEFAULT DEFINITIONS
# ============================================================================

COLOR_DICTIONARY = ColorDefinitionTable([
    HueRangeSpec(
        family=HueFamily.MONOCHROME,
        hue_range=None,
        lower_bounds=((0, 0), (100, 0)),
    ),
    HueRangeSpec(
        family=HueFamily.RED,
        hue_range=(-26, 18),
        lower_bounds=(
            (20, 100), (30, 92), (40, 89), (50, 85), (60, 78),
            (70, 70), (80, 60), (90, 55), (100, 50),
        ),
    ),
    HueRangeSpec(
        family=HueFamily.ORANGE,
        hue_range=(19, 46),
        lower_bounds=(
            (20, 100), (30, 93), (40, 88), (50, 86), (60, 85),
            (70, 70), (100, 70),
        ),
    ),
    HueRangeSpec(
        family=HueFamily.YELLOW,
        hue_range=(47, 62),
        lower_bounds=(
            (25, 100), (40, 94), (50, 89), (60, 86), (70, 84),
            (80, 82), (90, 80), (100, 75),
        ),
    ),
    HueRangeSpec(
        family=HueFamily.GREEN,
        hue_range=(63, 178),
        lower_bounds=(
            (30, 100), (40, 90), (50, 85), (60, 81), (70, 74),
            (80, 64), (90, 50), (100, 40),
        ),
    ),
    HueRangeSpec(
        family=HueFamily.BLUE,
        hue_range=(179, 257),
        lower_bounds=(
            (20, 100), (30, 86), (40, 80), (50, 74), (60, 60),
            (70, 52), (80, 44), (90, 39), (100, 35),
        ),
    ),
    HueRangeSpec(
        family=HueFamily.PURPLE,
        hue_range=(258, 282),
        lower_bounds=(
            (20, 100), (30, 87), (40, 79), (50, 70), (60, 65),
            (70, 59), (80, 52), (90, 45), (100, 42),
        ),
    ),
    HueRangeSpec(
        family=HueFamily.PINK,
        hue_range=(283, 334),
        lower_bounds=(
            (20, 100), (30, 90), (40, 86), (60, 84), (80, 80),
            (90, 75), (100, 73),
        ),
    ),
])


__all__ = [
    "BRIGHTNESS_MAX",
    "COLOR_DICTIONARY",
    "ColorDefinitionTable",
    "HueRangeSpec",
    "SaturationBand",
]
