"""Monte-Carlo estimation of the percolation threshold."""

from .random_source import UniformSource
from .threshold import ThresholdSimulation, StatisticsSummary, run_trial

__all__ = ['UniformSource', 'ThresholdSimulation', 'StatisticsSummary', 'run_trial']
