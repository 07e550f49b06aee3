"""
Monte-Carlo simulation of the percolation threshold.

Each trial starts from a fully blocked grid and opens uniformly random
blocked sites until the system percolates. The fraction of sites open at that
moment is one estimate of the percolation threshold. Repeating the experiment
gives a sample mean, a sample standard deviation and a 95% confidence
interval for the threshold.
"""

import math
import numbers
import sys
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..errors import InvalidArgument
from ..grid import ConnectivityGrid
from .random_source import UniformSource

CONFIDENCE_95 = 1.96


def _is_positive_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class StatisticsSummary:
    """Aggregate statistics over a set of trial thresholds."""
    grid_size: int
    trials: int
    mean: float
    stddev: float
    confidence_low: float
    confidence_high: float


def run_trial(n: int, random_source) -> float:
    """
    Run one percolation trial on a fresh N-by-N grid.

    Picks rows and columns uniformly from 1..N. Picks that land on an already
    open site are discarded without counting. Since a grid with every site
    open percolates, the loop ends after at most N^2 openings.

    Args:
        n: Grid size
        random_source: Object with ``uniform(bound)`` returning an int in [0, bound)

    Returns:
        Fraction of sites open when the system first percolates
    """
    grid = ConnectivityGrid(n)
    opened = 0

    while not grid.percolates():
        row = random_source.uniform(n) + 1
        col = random_source.uniform(n) + 1
        if grid.is_open(row, col):
            continue
        grid.open(row, col)
        opened += 1

    return opened / (n * n)


class ThresholdSimulation:
    """
    Repeated independent percolation trials on an N-by-N grid.

    All trials run sequentially inside the constructor; the statistics are
    computed on demand from the stored results.

    Example:
        sim = ThresholdSimulation(200, 100, seed=0)
        print(sim.mean(), sim.confidence_low(), sim.confidence_high())
    """

    def __init__(self, n: int, trials: int, random_source=None,
                 seed: Optional[int] = None, verbose: bool = False):
        """
        Run all trials.

        Args:
            n: Grid size
            trials: Number of independent trials
            random_source: Object with ``uniform(bound)``; defaults to a UniformSource
            seed: Seed for the default UniformSource (ignored if random_source is given)
            verbose: Print progress while running

        Raises:
            InvalidArgument: if n or trials is not a positive integer
        """
        if not _is_positive_int(n):
            raise InvalidArgument(f"Grid size should be a positive integer, got {n!r}")
        if not _is_positive_int(trials):
            raise InvalidArgument(f"Trials count should be a positive integer, got {trials!r}")

        if random_source is None:
            random_source = UniformSource(seed=seed)

        self.n = n
        self.trials = trials

        if verbose:
            print(f"Running {trials} trials on a {n}x{n} grid...", file=sys.stderr)
        start_time = time.time()

        results = np.empty(trials, dtype=np.float64)
        report_every = max(1, trials // 10)
        for i in range(trials):
            results[i] = run_trial(n, random_source)
            if verbose and (i + 1) % report_every == 0:
                print(f"  Completed {i + 1}/{trials} trials", file=sys.stderr)

        results.flags.writeable = False
        self._results = results

        if verbose:
            print(f"✓ Finished {trials} trials in {time.time() - start_time:.2f}s", file=sys.stderr)

    @property
    def results(self) -> np.ndarray:
        """Read-only array of per-trial threshold estimates."""
        return self._results

    def mean(self) -> float:
        """Sample mean of the percolation threshold."""
        return float(np.mean(self._results))

    def stddev(self) -> float:
        """
        Sample standard deviation of the percolation threshold.

        A single trial has no sample variance; NaN is returned in that case.
        """
        if self.trials < 2:
            return float('nan')
        return float(np.std(self._results, ddof=1))

    def _half_width(self) -> float:
        return CONFIDENCE_95 * self.stddev() / math.sqrt(self.trials)

    def confidence_low(self) -> float:
        """Low endpoint of the 95% confidence interval."""
        return self.mean() - self._half_width()

    def confidence_high(self) -> float:
        """High endpoint of the 95% confidence interval."""
        return self.mean() + self._half_width()

    def summary(self) -> StatisticsSummary:
        return StatisticsSummary(
            grid_size=self.n,
            trials=self.trials,
            mean=self.mean(),
            stddev=self.stddev(),
            confidence_low=self.confidence_low(),
            confidence_high=self.confidence_high(),
        )
