"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from percolation_threshold.cli.main import cli, stats


@pytest.fixture
def runner():
    return CliRunner()


def _parse(output):
    lines = output.strip().splitlines()
    assert len(lines) == 3
    mean = float(lines[0].split(" = ")[1])
    stddev = float(lines[1].split(" = ")[1])
    low, high = (float(v) for v in lines[2].split(" = ")[1].split(", "))
    return mean, stddev, low, high


class TestStatsCommand:
    """Tests for the two-argument stats command."""

    def test_prints_three_lines(self, runner):
        """Test the mean, stddev and interval output."""
        result = runner.invoke(stats, ['10', '20', '--seed', '7'])

        assert result.exit_code == 0
        assert result.output.startswith("mean = ")
        assert "stddev = " in result.output
        assert "95% confidence interval = " in result.output

        mean, stddev, low, high = _parse(result.output)
        assert 0 < mean <= 1
        assert stddev >= 0
        assert low <= mean <= high

    def test_group_subcommand(self, runner):
        """Test that the group exposes the same command."""
        result = runner.invoke(cli, ['stats', '1', '3'])

        assert result.exit_code == 0
        assert _parse(result.output) == (1.0, 0.0, 1.0, 1.0)

    @pytest.mark.parametrize("args", [[], ['10'], ['0', '5'], ['5', '0'], ['-2', '5'], ['ten', '5']])
    def test_usage_errors(self, runner, args):
        """Test that missing or invalid arguments exit with a usage error."""
        result = runner.invoke(stats, args)

        assert result.exit_code != 0
        assert "Usage" in result.output or "Error" in result.output


class TestRunCommand:
    """Tests for running from a YAML config."""

    def test_run_from_config(self, runner, tmp_path):
        """Test that a config file drives the simulation."""
        config_file = tmp_path / "sim.yaml"
        config_file.write_text("simulation:\n  grid_size: 5\n  trials: 10\n  seed: 3\n")

        result = runner.invoke(cli, ['run', '--config', str(config_file)])

        assert result.exit_code == 0
        mean, stddev, low, high = _parse(result.output)
        assert low <= mean <= high

    def test_seed_option_matches_config_seed(self, runner, tmp_path):
        """Test that --seed produces the same run as the config seed."""
        with_seed = tmp_path / "with_seed.yaml"
        with_seed.write_text("simulation:\n  grid_size: 6\n  trials: 5\n  seed: 21\n")
        without_seed = tmp_path / "without_seed.yaml"
        without_seed.write_text("simulation:\n  grid_size: 6\n  trials: 5\n")

        a = runner.invoke(cli, ['run', '--config', str(with_seed)])
        b = runner.invoke(cli, ['run', '--config', str(without_seed), '--seed', '21'])

        assert a.exit_code == b.exit_code == 0
        assert a.output == b.output

    @pytest.mark.parametrize("text", [
        "simulation: grid_size trials\n",
        "simulation: [grid_size\n",
    ])
    def test_malformed_config(self, runner, tmp_path, text):
        """Test that non-mapping and unparsable YAML exit with an error message."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text(text)

        result = runner.invoke(cli, ['run', '--config', str(config_file)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, TypeError)
        assert "Invalid config" in result.output

    def test_invalid_config(self, runner, tmp_path):
        """Test that a bad config exits with an error message."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("simulation:\n  grid_size: 0\n  trials: 10\n")

        result = runner.invoke(cli, ['run', '--config', str(config_file)])

        assert result.exit_code != 0
        assert "Invalid config" in result.output
