import pytest

from embutils.filters import DerivativeFilter, IntegratorFilter


def test_derivative_of_ramp_converges_to_slope():
    dt_ms = 10.0
    slope = 3.0
    filt = DerivativeFilter(50.0, dt_ms)
    out = None
    for step in range(2000):
        out = filt.process(slope * step * dt_ms * 1e-3)
    assert out == pytest.approx(slope, rel=1e-6)
    assert filt.output == out


def test_derivative_of_constant_decays_to_zero():
    filt = DerivativeFilter(20.0, 5.0)
    first = filt.process(4.0)
    assert first > 0
    for _ in range(3000):
        out = filt.process(4.0)
    assert abs(out) < 1e-9


def test_derivative_reset_restores_initial_response():
    filt = DerivativeFilter(30.0, 2.0)
    samples = [0.0, 1.0, 4.0, 9.0, 16.0]
    first_run = [filt.process(s) for s in samples]
    filt.reset()
    assert filt.output == 0.0
    second_run = [filt.process(s) for s in samples]
    assert second_run == first_run


def test_derivative_is_linear():
    a = DerivativeFilter(40.0, 1.0)
    b = DerivativeFilter(40.0, 1.0)
    samples = [0.5, -1.0, 2.0, 2.0, 0.0]
    for s in samples:
        out_a = a.process(s)
        out_b = b.process(2.0 * s)
        assert out_b == pytest.approx(2.0 * out_a)


def test_integrator_is_exact_for_ramp():
    dt_ms = 10.0
    steps = 100
    filt = IntegratorFilter(dt_ms)
    for step in range(steps + 1):
        filt.process(step * dt_ms * 1e-3)
    t_end = steps * dt_ms * 1e-3
    assert filt.output == pytest.approx(t_end**2 / 2)


def test_integrator_of_zero_stays_zero():
    filt = IntegratorFilter(1.0)
    for _ in range(10):
        assert filt.process(0.0) == 0.0


def test_integrator_reset_and_linearity():
    a = IntegratorFilter(20.0)
    b = IntegratorFilter(20.0)
    samples = [1.0, -2.0, 3.5, 0.25]
    for s in samples:
        a.process(s)
        b.process(-3.0 * s)
    assert b.output == pytest.approx(-3.0 * a.output)
    a.reset()
    assert a.output == 0.0
    for s in samples:
        a.process(-3.0 * s)
    assert a.output == pytest.approx(b.output)