"""Dense linear-algebra routines on matrices given as sequences of rows.

Every function takes matrices as sequences of equal-length row sequences
(column vectors are ``n x 1`` matrices) and returns new lists of float rows.
The inputs are never modified.
"""

from __future__ import annotations

import math
from typing import List, Sequence

from .errors import ConvergenceError, UtilsError

__all__ = [
    "fwsub",
    "fwsub_perm",
    "bksub",
    "bksub_perm",
    "quad_prod",
    "lu_crout",
    "lu_cormen",
    "lup_cormen",
    "lin_solve_lu",
    "lin_solve_lup",
    "lin_solve_gauss",
    "dare",
]

Rows = List[List[float]]


def _matrix(m, name="matrix") -> Rows:
    rows = [[float(x) for x in row] for row in m]
    if not rows or not rows[0]:
        raise ValueError(f"{name} must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError(f"{name} rows must all have the same length")
    return rows


def _square(m, name="matrix") -> Rows:
    rows = _matrix(m, name)
    if len(rows) != len(rows[0]):
        raise ValueError(f"{name} must be square")
    return rows


def _rhs(b, n, name="b") -> Rows:
    rows = _matrix(b, name)
    if len(rows) != n:
        raise ValueError(f"{name} must have {n} rows")
    return rows


def _indices(p, n) -> List[int]:
    indices = []
    for item in p:
        if isinstance(item, Sequence) and not isinstance(item, str):
            if len(item) != 1:
                raise ValueError("permutation must be a column vector")
            item = item[0]
        index = int(item)
        if not 0 <= index < n:
            raise ValueError(f"permutation index {index} out of range")
        indices.append(index)
    if len(indices) != n:
        raise ValueError(f"permutation must have {n} entries")
    return indices


def _transpose(m: Rows) -> Rows:
    return [list(col) for col in zip(*m)]


def _matmul(lhs: Rows, rhs: Rows) -> Rows:
    if len(lhs[0]) != len(rhs):
        raise ValueError("inner matrix dimensions do not agree")
    cols = _transpose(rhs)
    return [[sum(x * y for x, y in zip(row, col)) for col in cols] for row in lhs]


def _sub(lhs: Rows, rhs: Rows) -> Rows:
    return [[x - y for x, y in zip(r1, r2)] for r1, r2 in zip(lhs, rhs)]


def _add(lhs: Rows, rhs: Rows) -> Rows:
    return [[x + y for x, y in zip(r1, r2)] for r1, r2 in zip(lhs, rhs)]


def _forward(a: Rows, b: Rows) -> Rows:
    solved: Rows = []
    for i, (row, rhs_row) in enumerate(zip(a, b)):
        pivot = row[i]
        if pivot == 0.0:
            raise UtilsError("matrix is singular")
        solved.append(
            [
                (value - sum(c * xr[j] for c, xr in zip(row, solved))) / pivot
                for j, value in enumerate(rhs_row)
            ]
        )
    return solved


def _backward(a: Rows, b: Rows) -> Rows:
    solved: Rows = []
    n = len(a)
    for i in reversed(range(n)):
        row = a[i]
        pivot = row[i]
        if pivot == 0.0:
            raise UtilsError("matrix is singular")
        tail = row[i + 1 :]
        solved.insert(
            0,
            [
                (value - sum(c * xr[j] for c, xr in zip(tail, solved))) / pivot
                for j, value in enumerate(b[i])
            ],
        )
    return solved


def fwsub(a, b):
    """Solve ``A X = B`` for lower-triangular ``A`` by forward substitution.

    The upper part of ``A`` is ignored.
    """
    lower = _square(a, "a")
    return _forward(lower, _rhs(b, len(lower)))


def fwsub_perm(a, b, p):
    """Solve ``A X = P B`` for lower-triangular ``A``.

    ``p`` lists, for each row of the result, the index of the row of ``B``
    that is moved there.
    """
    lower = _square(a, "a")
    n = len(lower)
    rhs = _rhs(b, n)
    return _forward(lower, [rhs[i] for i in _indices(p, n)])


def bksub(a, b):
    """Solve ``A X = B`` for upper-triangular ``A`` by backward substitution.

    The lower part of ``A`` is ignored.
    """
    upper = _square(a, "a")
    return _backward(upper, _rhs(b, len(upper)))


def bksub_perm(a, b, p):
    """Solve ``A X = P B`` for upper-triangular ``A``, ``p`` as in :func:`fwsub_perm`."""
    upper = _square(a, "a")
    n = len(upper)
    rhs = _rhs(b, n)
    return _backward(upper, [rhs[i] for i in _indices(p, n)])


def quad_prod(a, b):
    """Return ``A B A^T``."""
    lhs = _matrix(a, "a")
    middle = _square(b, "b")
    return _matmul(_matmul(lhs, middle), _transpose(lhs))


def lu_crout(a):
    """Factor ``A = L U`` with Crout's method.

    ``L`` is lower triangular and ``U`` is upper triangular with a unit
    diagonal. Raises :class:`UtilsError` on a zero pivot.
    """
    m = _square(a, "a")
    n = len(m)
    lower = [[0.0] * n for _ in range(n)]
    upper = [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]
    for j in range(n):
        for i in range(j, n):
            lower[i][j] = m[i][j] - sum(lower[i][k] * upper[k][j] for k in range(j))
        pivot = lower[j][j]
        if pivot == 0.0:
            raise UtilsError("zero pivot in Crout factorisation")
        for i in range(j + 1, n):
            upper[j][i] = (m[j][i] - sum(lower[j][k] * upper[k][i] for k in range(j))) / pivot
    return lower, upper


def lu_cormen(a):
    """Factor ``A = L U`` without pivoting.

    ``L`` is lower triangular with a unit diagonal and ``U`` is upper
    triangular. Raises :class:`UtilsError` on a zero pivot.
    """
    work = _square(a, "a")
    n = len(work)
    lower = [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]
    upper = [[0.0] * n for _ in range(n)]
    for k in range(n):
        pivot = work[k][k]
        if pivot == 0.0:
            raise UtilsError("zero pivot in LU factorisation")
        upper[k][k] = pivot
        for i in range(k + 1, n):
            lower[i][k] = work[i][k] / pivot
            upper[k][i] = work[k][i]
        for i in range(k + 1, n):
            factor = lower[i][k]
            for j in range(k + 1, n):
                work[i][j] -= factor * upper[k][j]
    return lower, upper


def lup_cormen(a):
    """Factor ``P A = L U`` with partial pivoting.

    Returns ``(L, U, p, sign)``: ``L`` unit lower triangular, ``U`` upper
    triangular, ``p`` the original row index found at each row, and ``sign``
    (+1 or -1) the factor turning the determinant of ``U`` into that of ``A``.
    """
    work = _square(a, "a")
    n = len(work)
    perm = list(range(n))
    sign = 1
    for k in range(n):
        pivot_row = max(range(k, n), key=lambda i: abs(work[i][k]))
        if pivot_row != k:
            work[k], work[pivot_row] = work[pivot_row], work[k]
            perm[k], perm[pivot_row] = perm[pivot_row], perm[k]
            sign = -sign
        pivot = work[k][k]
        if pivot == 0.0:
            continue
        for i in range(k + 1, n):
            factor = work[i][k] / pivot
            work[i][k] = factor
            for j in range(k + 1, n):
                work[i][j] -= factor * work[k][j]
    lower = [[1.0 if i == j else (work[i][j] if j < i else 0.0) for j in range(n)] for i in range(n)]
    upper = [[work[i][j] if j >= i else 0.0 for j in range(n)] for i in range(n)]
    return lower, upper, perm, sign


def lin_solve_lu(a, b):
    """Solve ``A X = B`` through an LU factorisation without pivoting."""
    lower, upper = lu_cormen(a)
    return _backward(upper, _forward(lower, _rhs(b, len(lower))))


def lin_solve_lup(a, b):
    """Solve ``A X = B`` through an LU factorisation with partial pivoting."""
    lower, upper, perm, _ = lup_cormen(a)
    rhs = _rhs(b, len(lower))
    return _backward(upper, _forward(lower, [rhs[i] for i in perm]))


def lin_solve_gauss(a, b):
    """Solve ``A X = B`` by Gauss elimination with partial pivoting."""
    work = _square(a, "a")
    n = len(work)
    rhs = _rhs(b, n)
    for k in range(n):
        pivot_row = max(range(k, n), key=lambda i: abs(work[i][k]))
        if work[pivot_row][k] == 0.0:
            raise UtilsError("matrix is singular")
        if pivot_row != k:
            work[k], work[pivot_row] = work[pivot_row], work[k]
            rhs[k], rhs[pivot_row] = rhs[pivot_row], rhs[k]
        pivot = work[k][k]
        for i in range(k + 1, n):
            factor = work[i][k] / pivot
            work[i] = [x - factor * y for x, y in zip(work[i], work[k])]
            rhs[i] = [x - factor * y for x, y in zip(rhs[i], rhs[k])]
    return _backward(work, rhs)


def dare(a, b, q, r, nmax, tol):
    """Solve the discrete-time algebraic Riccati equation by iteration.

    Iterates ``P = A'PA - (B'PA)' inv(R + B'PB) B'PA + Q`` from ``P = Q``
    until the Frobenius norm of the change is at most ``tol``. Raises
    :class:`ConvergenceError` after ``nmax`` iterations; the last iterate is
    kept on the exception's ``result`` attribute.
    """
    sys_a = _square(a, "a")
    n = len(sys_a)
    sys_b = _rhs(b, n, "b")
    m = len(sys_b[0])
    weight_q = _square(q, "q")
    weight_r = _square(r, "r")
    if len(weight_q) != n:
        raise ValueError(f"q must be {n}x{n}")
    if len(weight_r) != m:
        raise ValueError(f"r must be {m}x{m}")

    a_t = _transpose(sys_a)
    b_t = _transpose(sys_b)
    p = [row[:] for row in weight_q]
    for _ in range(nmax):
        pa = _matmul(p, sys_a)
        bpa = _matmul(b_t, pa)
        s = _add(weight_r, _matmul(b_t, _matmul(p, sys_b)))
        gain = lin_solve_lup(s, bpa)
        new_p = _add(_sub(_matmul(a_t, pa), _matmul(_transpose(bpa), gain)), weight_q)
        change = math.sqrt(sum(x * x for row in _sub(new_p, p) for x in row))
        p = new_p
        if change <= tol:
            return p
    error = ConvergenceError(f"Riccati iteration did not converge in {nmax} steps")
    error.result = p
    raise error