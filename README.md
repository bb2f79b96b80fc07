# embutils

Small, dependency-free utilities for control and signal-processing code,
written in plain Python.

- `embutils.matrix` – a dense, row-major `Matrix` of floats with `+`, `-`,
  `@`, `add_scalar`, `scale`, `mult_lhs_t` (`A^T @ B`), `mult_rhs_t`
  (`A @ B^T`), `transpose`, `inverse` (LU without pivoting),
  `robust_inverse` (LU with partial pivoting), `pseudo_inverse`
  (`(A^T A)^-1 A^T`), `det`, `norm` (Frobenius) and `normalized`.
  `Matrix.identity(rows, cols=None)` builds an identity matrix; `get`,
  `set`, `copy` and `zeros` access and reset elements.
- `embutils.linalg` – functions on matrices given as lists of rows:
  `fwsub`, `bksub` and their permuted forms `fwsub_perm`, `bksub_perm`;
  `quad_prod` (`A B A^T`); the factorisations `lu_crout`, `lu_cormen` and
  `lup_cormen`; the solvers `lin_solve_lu`, `lin_solve_lup` and
  `lin_solve_gauss`; and `dare`, an iterative solver for the discrete-time
  algebraic Riccati equation.
- `embutils.filters` – `DerivativeFilter` (filtered derivative
  `s / (1 + s/N)`) and `IntegratorFilter` (trapezoidal integrator), each
  with `process` and `reset`.
- `embutils.movingavg` – `MovingAverage`, a fixed-window average with
  `update`, `latest` and `flush`.
- `embutils.event` – `Event`, a bounded list of callbacks of one
  `EventKind` (`BASIC`, taking no arguments, or `EXTENDED`, taking one
  value), with `register`/`dispatch` and `register_ex`/`dispatch_ex`.
- `embutils.basicmath` – `sign`, `constrain`, `remap`, `deadband`, unit
  conversions (`rad2deg`, `deg2rad`, `radps2mdps`, `mdps2radps`, `c2k`,
  `k2c`, `mg2ms2`, `ms22mg`), bit helpers (`is_bit_set_all`,
  `is_bit_set_any`, `bit_mask`, `bit_set`, `bit_clear`, `bit_toggle`) and
  the constants `CONST_PI`, `CONST_G`, `CONST_E`.
- `embutils.errors` – `UtilsError` and its subclasses `FullError`,
  `EmptyError` and `ConvergenceError`, plus the `Vector3` dataclass.

## Installation

```
pip install .
```

## Examples

```python
from embutils.matrix import Matrix

a = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
print(a.det())                  # -2.0
print(a.inverse().get(0, 0))    # -2.0
print((a @ a.transpose()).get(0, 1))
```

```python
from embutils.linalg import lin_solve_lup

x = lin_solve_lup([[0.0, 1.0], [2.0, 0.0]], [[3.0], [4.0]])
print(x)  # [[2.0], [3.0]]
```

```python
from embutils.movingavg import MovingAverage

avg = MovingAverage(4)
for sample in (1.0, 2.0, 3.0, 4.0):
    avg.update(sample)
print(avg.latest())  # 2.5
```

The window starts filled with zeros, so before it is full the result is the
sum of the samples divided by the full window size.

```python
from embutils.event import Event, EventKind

ready = Event(EventKind.BASIC, 2)
ready.register(lambda: print("ready"))
ready.dispatch()
```

## Errors

- Registering a callback on a full `Event` raises `FullError`; registering
  or dispatching with the wrong kind of event raises `UtilsError`.
- Factorisations and solvers raise `UtilsError` on a zero pivot or a
  singular matrix, and `ValueError` on mismatched shapes.
- `dare` raises `ConvergenceError` after `nmax` iterations; the last
  iterate is kept on the exception's `result` attribute.
- `Matrix.det` returns `0.0` for a non-square matrix;
  `Matrix.normalized` raises `ValueError` for a zero matrix.

## What the package does not do

It has no PID controller, no hash tables, no general low-, high-, band-pass
or band-stop filters, and no Gauss-Newton sensor calibration. It has no
command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```