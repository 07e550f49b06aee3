"""
Command-line interface for percolation_threshold.

Estimate the threshold for an N-by-N grid over T trials:
    percolation-stats 200 100
    percolation stats 200 100 --seed 42

Run from a YAML configuration:
    percolation run --config config/example.yaml
"""

import click

from ..errors import InvalidArgument


def _echo_summary(simulation):
    """Print mean, stddev and the 95% confidence interval."""
    click.echo(f"mean = {simulation.mean()}")
    click.echo(f"stddev = {simulation.stddev()}")
    click.echo(f"95% confidence interval = {simulation.confidence_low()}, {simulation.confidence_high()}")


def _run(grid_size, trials, seed, verbose):
    from ..simulation import ThresholdSimulation

    try:
        simulation = ThresholdSimulation(grid_size, trials, seed=seed, verbose=verbose)
    except InvalidArgument as e:
        raise click.UsageError(str(e))

    _echo_summary(simulation)


@click.group()
@click.version_option()
def cli():
    """Percolation Threshold - Monte-Carlo estimation of the percolation threshold."""
    pass


@cli.command('stats')
@click.argument('grid_size', type=int)
@click.argument('trials', type=int)
@click.option('--seed', type=int, help='Random seed for reproducible runs')
@click.option('--verbose', '-v', is_flag=True, help='Print progress while running trials')
def stats(grid_size, trials, seed, verbose):
    """Run TRIALS percolation trials on a GRID_SIZE x GRID_SIZE grid."""
    if grid_size <= 0:
        raise click.UsageError("Grid size should be more than 0")
    if trials <= 0:
        raise click.UsageError("Trials count should be more than 0")

    _run(grid_size, trials, seed, verbose)


@cli.command('run')
@click.option('--config', '-c', 'config_file', required=True, type=click.Path(exists=True),
              help='Simulation config YAML')
@click.option('--seed', type=int, help='Random seed (overrides the config file)')
@click.option('--verbose', '-v', is_flag=True, help='Print progress while running trials')
def run(config_file, seed, verbose):
    """Run a simulation described by a YAML config file."""
    import yaml
    from ..config import SimulationConfig

    try:
        config = SimulationConfig.from_yaml(config_file)
    except (ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid config {config_file}: {e}")

    if seed is None:
        seed = config.seed

    if verbose or config.verbose:
        click.echo(f"Loaded {config_file}: grid_size={config.grid_size}, trials={config.trials}, seed={seed}",
                   err=True)

    _run(config.grid_size, config.trials, seed, verbose or config.verbose)


if __name__ == '__main__':
    cli()
