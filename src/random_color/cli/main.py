"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from random_color import __version__
from random_color.models import HueFamily, Luminosity

logger = logging.getLogger(__name__)

HANDLER_NAME = "random-color-cli"

FORMATS = ["hex", "rgb", "rgba", "hsl", "hsla", "hsv"]


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the command line tool.

    Logs go to stderr so they never mix with the colors printed on stdout.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable DEBUG level
        log_file: Additional rotating log file (optional)
        log_level: Log level for the log file (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    # Repeated invocations in one process replace our handlers instead of stacking them
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.set_name(HANDLER_NAME)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)

    root_logger.setLevel(level)
    root_logger.addHandler(stream_handler)

    if log_file:
        file_level = getattr(logging, log_level.upper())
        # Keeps last 5 files, max 10MB each
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.set_name(HANDLER_NAME)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        root_logger.setLevel(min(level, file_level))

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


def parse_seed(value: Optional[str]):
    """Numeric seeds are used as integers, anything else as a string seed."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return value


def render(color, output_format: str) -> str:
    if output_format == "hsv":
        h, s, v = color.to_hsv_array()
        return f"hsv({h}, {s}%, {v}%)"
    return {
        "hex": color.to_hex,
        "rgb": color.to_rgb_string,
        "rgba": color.to_rgba_string,
        "hsl": color.to_hsl_string,
        "hsla": color.to_hsla_string,
    }[output_format]()


@click.command(context_settings={"help_option_names": ["--help"]})
@click.version_option(version=__version__, prog_name="random-color")
@click.option(
    '--hue',
    '-h',
    type=click.Choice([family.value for family in HueFamily], case_sensitive=False),
    default=None,
    help='Hue family (default: any family except monochrome)'
)
@click.option(
    '--luminosity',
    '-l',
    type=click.Choice([lum.value for lum in Luminosity], case_sensitive=False),
    default=None,
    help='Luminosity class (default: anywhere in the valid band)'
)
@click.option(
    '--seed',
    '-s',
    type=str,
    default=None,
    help='Seed for reproducible output (integer or any string)'
)
@click.option(
    '--alpha',
    '-a',
    type=float,
    default=None,
    help='Explicit alpha between 0.0 and 1.0'
)
@click.option(
    '--random-alpha',
    is_flag=True,
    help='Draw a random alpha for each color'
)
@click.option(
    '--count',
    '-n',
    type=click.IntRange(min=1),
    default=1,
    help='Number of colors to print (default: 1)'
)
@click.option(
    '--format',
    '-f',
    'output_format',
    type=click.Choice(FORMATS, case_sensitive=False),
    default='hex',
    help='Output format (default: hex)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug logging'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Also write logs to this file'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for the log file (default: INFO)'
)
def cli(
    hue: Optional[str],
    luminosity: Optional[str],
    seed: Optional[str],
    alpha: Optional[float],
    random_alpha: bool,
    count: int,
    output_format: str,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Random Color - print attractive random colors.

    \b
    Examples:
      # One color in hex
      random-color

      # Five dark blues as CSS hsl()
      random-color --hue blue --luminosity dark -n 5 -f hsl

      # Reproducible output
      random-color --seed 42 -f rgb

      # Semi-transparent
      random-color --alpha 0.5 -f rgba
    """
    from random_color.builder import RandomColor
    from random_color.exceptions import ErrorContext, format_error_for_display

    if alpha is not None and random_alpha:
        raise click.UsageError("--alpha and --random-alpha cannot be used together")

    setup_logging(verbose, debug, log_file, log_level)

    try:
        builder = RandomColor()
        if hue:
            builder.hue(hue.lower())
        if luminosity:
            builder.luminosity(luminosity.lower())
        if seed is not None:
            builder.seed(parse_seed(seed))
        if alpha is not None:
            builder.alpha(alpha)
        if random_alpha:
            builder.random_alpha()

        with ErrorContext("generate colors", logger_instance=logger):
            colors = builder.generate_many(count)

    except Exception as e:
        logger.debug("Color generation failed", exc_info=True)

        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        sys.exit(1)

    for color in colors:
        click.echo(render(color, output_format.lower()))


if __name__ == "__main__":
    cli()
