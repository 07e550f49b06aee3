"""
Percolation Threshold - Monte-Carlo estimation of the site percolation threshold.

This package provides tools for:
- Modelling an N-by-N percolation system backed by a union-find structure
- Running independent percolation trials on random site openings
- Aggregating trial thresholds into mean, stddev and a 95% confidence interval
"""

__version__ = "1.0.0"
