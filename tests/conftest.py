"""Pytest fixtures for tests."""

import random

import pytest

from random_color import ColorOptions, HueFamily, Luminosity
from random_color.colors import COLOR_DICTIONARY, ColorDefinitionTable, HueRangeSpec


@pytest.fixture
def seeds():
    """Seeds used by distribution tests."""
    return range(300)


@pytest.fixture
def rng():
    """A seeded random source."""
    return random.Random(1234)


@pytest.fixture
def blue_light_options():
    """Seeded options for light blues."""
    return ColorOptions(hue=HueFamily.BLUE, luminosity=Luminosity.LIGHT, seed=42, alpha=1.0)


def pinned_table(family, hue):
    """Default table with one family's hue range narrowed to a single hue."""
    specs = []
    for spec in COLOR_DICTIONARY:
        if spec.family is family:
            spec = HueRangeSpec(family=family, hue_range=(hue, hue), lower_bounds=spec.lower_bounds)
        specs.append(spec)
    return ColorDefinitionTable(specs)


@pytest.fixture
def narrow_blue_table():
    """Definition table whose blue family only contains hue 200."""
    return pinned_table(HueFamily.BLUE, 200)


@pytest.fixture
def pink_at_334_table():
    """Definition table whose pink family only contains hue 334."""
    return pinned_table(HueFamily.PINK, 334)


@pytest.fixture
def red_at_334_table():
    """Definition table whose red family only contains hue -26 (334)."""
    return pinned_table(HueFamily.RED, -26)
