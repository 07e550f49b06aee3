"""Exceptions raised by the percolation core."""


class InvalidArgument(ValueError):
    """Raised for a non-positive grid size, trial count or random bound."""


class OutOfRange(IndexError):
    """Raised when a row or column lies outside the grid."""
