"""Matrices, linear solvers, filters, moving averages and events for control code."""

__version__ = "0.1.0"

__all__ = ["basicmath", "errors", "event", "filters", "linalg", "matrix", "movingavg"]