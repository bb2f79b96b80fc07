"""Exceptions shared by the package and a small 3-axis vector type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

__all__ = ["UtilsError", "FullError", "EmptyError", "ConvergenceError", "Vector3"]


class UtilsError(Exception):
    """Base class for every error raised by the package."""


class FullError(UtilsError):
    """A container has no room left, or a value hit its saturation limit."""


class EmptyError(UtilsError):
    """A container holds nothing to read or remove."""


class ConvergenceError(UtilsError):
    """An iterative method reached its iteration limit without converging."""


@dataclass
class Vector3:
    """A 3-axis float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z