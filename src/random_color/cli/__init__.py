"""Command line interface for random_color."""
