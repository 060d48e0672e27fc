"""Main entry point for random_color."""

from random_color.cli.main import cli

if __name__ == "__main__":
    cli()
