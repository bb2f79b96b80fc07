"""Dense row-major float matrix with the usual arithmetic and inverses."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

from .errors import UtilsError
from .linalg import lin_solve_lu, lin_solve_lup, lu_cormen, lup_cormen

__all__ = ["Matrix"]


class Matrix:
    """A ``rows x cols`` matrix of floats stored row by row in ``data``."""

    def __init__(self, rows, cols, data: Optional[Iterable[float]] = None):
        if rows <= 0 or cols <= 0:
            raise ValueError("matrix dimensions must be positive")
        if data is None:
            values = [0.0] * (rows * cols)
        else:
            values = [float(x) for x in data]
            if len(values) != rows * cols:
                raise ValueError(f"expected {rows * cols} values, got {len(values)}")
        self.rows = rows
        self.cols = cols
        self.data: List[float] = values

    @classmethod
    def _from_rows(cls, rows) -> "Matrix":
        return cls(len(rows), len(rows[0]), [x for row in rows for x in row])

    def _to_rows(self) -> List[List[float]]:
        c = self.cols
        return [self.data[i * c:(i + 1) * c] for i in range(self.rows)]

    def _columns(self) -> List[List[float]]:
        return [self.data[j::self.cols] for j in range(self.cols)]

    @property
    def shape(self):
        """The pair ``(rows, cols)``."""
        return self.rows, self.cols

    def _same_shape(self, other: "Matrix") -> None:
        if self.shape != other.shape:
            raise ValueError(f"shape mismatch: {self.shape} and {other.shape}")

    def _index(self, row, col) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"index ({row}, {col}) out of range for {self.shape}")
        return row * self.cols + col

    @classmethod
    def identity(cls, rows, cols=None):
        """Matrix with ones on the main diagonal and zeros elsewhere."""
        cols = rows if cols is None else cols
        result = cls(rows, cols)
        for i in range(min(rows, cols)):
            result.data[i * cols + i] = 1.0
        return result

    def zeros(self):
        """Set every element to zero in place and return the matrix."""
        self.data = [0.0] * (self.rows * self.cols)
        return self

    def copy(self):
        """Return an independent copy."""
        return Matrix(self.rows, self.cols, self.data)

    def get(self, row, col):
        """Element at ``(row, col)``."""
        return self.data[self._index(row, col)]

    def set(self, row, col, value):
        """Store ``value`` at ``(row, col)``."""
        self.data[self._index(row, col)] = float(value)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other)
        return Matrix(self.rows, self.cols, [a + b for a, b in zip(self.data, other.data)])

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other)
        return Matrix(self.rows, self.cols, [a - b for a, b in zip(self.data, other.data)])

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
        columns = other._columns()
        return Matrix(
            self.rows,
            other.cols,
            [sum(a * b for a, b in zip(row, col)) for row in self._to_rows() for col in columns],
        )

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.data == other.data

    def __repr__(self):
        return f"Matrix({self.rows}, {self.cols}, {self.data!r})"

    def add_scalar(self, value):
        """Return a matrix with ``value`` added to every element."""
        return Matrix(self.rows, self.cols, [x + value for x in self.data])

    def scale(self, value):
        """Return a matrix with every element multiplied by ``value``."""
        return Matrix(self.rows, self.cols, [x * value for x in self.data])

    def mult_lhs_t(self, other):
        """Return ``self^T @ other``."""
        if self.rows != other.rows:
            raise ValueError(f"cannot multiply transpose of {self.shape} by {other.shape}")
        other_cols = other._columns()
        return Matrix(
            self.cols,
            other.cols,
            [sum(a * b for a, b in zip(lcol, rcol)) for lcol in self._columns() for rcol in other_cols],
        )

    def mult_rhs_t(self, other):
        """Return ``self @ other^T``."""
        if self.cols != other.cols:
            raise ValueError(f"cannot multiply {self.shape} by transpose of {other.shape}")
        other_rows = other._to_rows()
        return Matrix(
            self.rows,
            other.rows,
            [sum(a * b for a, b in zip(lrow, rrow)) for lrow in self._to_rows() for rrow in other_rows],
        )

    def transpose(self):
        """Return the transposed matrix."""
        return Matrix(self.cols, self.rows, [x for col in self._columns() for x in col])

    def _require_square(self):
        if self.rows != self.cols:
            raise ValueError("matrix must be square")

    def inverse(self):
        """Inverse through an LU factorisation without pivoting."""
        self._require_square()
        eye = Matrix.identity(self.rows)._to_rows()
        return Matrix._from_rows(lin_solve_lu(self._to_rows(), eye))

    def robust_inverse(self):
        """Inverse through an LU factorisation with partial pivoting."""
        self._require_square()
        eye = Matrix.identity(self.rows)._to_rows()
        return Matrix._from_rows(lin_solve_lup(self._to_rows(), eye))

    def pseudo_inverse(self):
        """Moore-Penrose pseudo-inverse ``(A^T A)^-1 A^T``."""
        tran = self.transpose()
        gram = tran @ self
        return Matrix._from_rows(lin_solve_lu(gram._to_rows(), tran._to_rows()))

    def normalized(self):
        """Return the matrix divided by its Frobenius norm."""
        norm = self.norm()
        if norm == 0.0:
            raise ValueError("cannot normalise a zero matrix")
        return self.scale(1.0 / norm)

    def det(self):
        """Determinant; 0.0 for a non-square matrix."""
        if self.rows != self.cols:
            return 0.0
        rows = self._to_rows()
        try:
            _, upper = lu_cormen(rows)
            factor = 1
        except UtilsError:
            _, upper, _, factor = lup_cormen(rows)
        return math.prod(upper[i][i] for i in range(self.rows)) * factor

    def norm(self):
        """Frobenius norm."""
        return math.sqrt(sum(x * x for x in self.data))