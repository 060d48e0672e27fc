"""Core color generation."""

from .generator import ColorGenerator, generate, generate_many, random_within

__all__ = ["ColorGenerator", "generate", "generate_many", "random_within"]
