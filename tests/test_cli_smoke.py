"""Smoke tests for the random-color command."""

import logging
import re

import pytest
from click.testing import CliRunner

from random_color.cli.main import HANDLER_NAME, cli, parse_seed

HEX = re.compile(r"^#[0-9a-f]{6}$")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def remove_cli_handlers():
    """Drop the handlers the command installs on the root logger."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()


@pytest.mark.integration
class TestCli:
    """Invoke the command end to end."""

    def test_default_prints_one_hex(self, runner):
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert HEX.match(result.output.strip())

    def test_count(self, runner):
        result = runner.invoke(cli, ["-n", "5"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 5
        assert all(HEX.match(line) for line in lines)

    def test_seed_is_reproducible(self, runner):
        first = runner.invoke(cli, ["--seed", "42", "--hue", "blue", "-n", "3"])
        second = runner.invoke(cli, ["--seed", "42", "--hue", "blue", "-n", "3"])
        assert first.exit_code == 0
        assert first.output == second.output

    def test_string_seed(self, runner):
        first = runner.invoke(cli, ["--seed", "sunset"])
        second = runner.invoke(cli, ["--seed", "sunset"])
        assert first.output == second.output

    @pytest.mark.parametrize(
        "fmt, pattern",
        [
            ("rgb", r"^rgb\(\d+, \d+, \d+\)$"),
            ("rgba", r"^rgba\(\d+, \d+, \d+, 1\)$"),
            ("hsl", r"^hsl\(\d+, \d+%, \d+%\)$"),
            ("hsla", r"^hsla\(\d+, \d+%, \d+%, 1\)$"),
            ("hsv", r"^hsv\(\d+, \d+%, \d+%\)$"),
        ],
    )
    def test_formats(self, runner, fmt, pattern):
        result = runner.invoke(cli, ["--seed", "1", "-f", fmt])
        assert result.exit_code == 0
        assert re.match(pattern, result.output.strip())

    def test_explicit_alpha(self, runner):
        result = runner.invoke(cli, ["--alpha", "0.5", "-f", "rgba"])
        assert result.exit_code == 0
        assert result.output.strip().endswith(", 0.5)")

    def test_monochrome_hsv(self, runner):
        result = runner.invoke(cli, ["--hue", "monochrome", "-f", "hsv", "-n", "10"])
        assert result.exit_code == 0
        assert all(line.startswith("hsv(0, 0%,") for line in result.output.strip().splitlines())

    def test_invalid_alpha_exits_with_error(self, runner):
        result = runner.invoke(cli, ["--alpha", "1.5"])
        assert result.exit_code == 1
        assert "ERROR:" in result.output
        assert "alpha" in result.output

    def test_alpha_with_random_alpha_is_usage_error(self, runner):
        result = runner.invoke(cli, ["--alpha", "0.5", "--random-alpha"])
        assert result.exit_code == 2

    def test_unknown_hue_rejected(self, runner):
        result = runner.invoke(cli, ["--hue", "teal"])
        assert result.exit_code == 2

    def test_zero_count_rejected(self, runner):
        result = runner.invoke(cli, ["-n", "0"])
        assert result.exit_code == 2

    def test_log_file(self, runner, tmp_path):
        log_file = tmp_path / "random-color.log"
        result = runner.invoke(cli, ["--log-file", str(log_file), "--log-level", "DEBUG"])
        assert result.exit_code == 0
        assert "Logging configured" in log_file.read_text()

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


@pytest.mark.unit
class TestParseSeed:
    """Test seed parsing."""

    def test_integer(self):
        assert parse_seed("42") == 42

    def test_string(self):
        assert parse_seed("sunset") == "sunset"

    def test_none(self):
        assert parse_seed(None) is None
