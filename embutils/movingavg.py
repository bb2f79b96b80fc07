"""Fixed-window moving average over a circular buffer."""

from __future__ import annotations

__all__ = ["MovingAverage"]


class MovingAverage:
    """Average of the last ``size`` samples.

    The window starts filled with zeros, so until ``size`` samples have been
    fed the result is the sum of the samples divided by the full window size.
    """

    def __init__(self, size):
        if size <= 0:
            raise ValueError("moving average size must be positive")
        self.size = size
        self._inv_size = 1.0 / size
        self._data = [0.0] * size
        self._sum = 0.0
        self._write = 0

    def update(self, value):
        """Push a sample into the window and return the new average."""
        self._sum += value - self._data[self._write]
        self._data[self._write] = value
        self._write = (self._write + 1) % self.size
        return self._sum * self._inv_size

    def latest(self):
        """Return the most recent average without adding a sample."""
        return self._sum * self._inv_size

    def flush(self):
        """Reset every sample in the window to zero."""
        self._data = [0.0] * self.size
        self._sum = 0.0
        self._write = 0