"""Discrete-time derivative and integrator filters (Tustin discretisation)."""

from __future__ import annotations

__all__ = ["DerivativeFilter", "IntegratorFilter"]


class DerivativeFilter:
    """Filtered derivative s / (1 + s/N) sampled every ``dt_ms`` milliseconds."""

    def __init__(self, nd, dt_ms):
        dt = dt_ms * 1e-3
        self.n0 = (2.0 * nd) / (2.0 + nd * dt)
        self.d1 = (2.0 - nd * dt) / (2.0 + nd * dt)
        self._previous = 0.0
        self.output = 0.0

    def process(self, value):
        """Feed one sample and return the filtered derivative."""
        self.output = self.n0 * (value - self._previous) + self.d1 * self.output
        self._previous = value
        return self.output

    def reset(self):
        """Clear the filter state."""
        self._previous = 0.0
        self.output = 0.0


class IntegratorFilter:
    """Trapezoidal integrator sampled every ``dt_ms`` milliseconds."""

    def __init__(self, dt_ms):
        self.n0 = 0.5 * dt_ms * 1e-3
        self._previous = 0.0
        self.output = 0.0

    def process(self, value):
        """Feed one sample and return the running integral."""
        self.output += self.n0 * (value + self._previous)
        self._previous = value
        return self.output

    def reset(self):
        """Clear the filter state."""
        self._previous = 0.0
        self.output = 0.0