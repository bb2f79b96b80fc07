import pytest

from embutils.movingavg import MovingAverage


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_size_rejected(size):
    with pytest.raises(ValueError):
        MovingAverage(size)


def test_size_one_returns_last_sample():
    avg = MovingAverage(1)
    assert avg.update(5.0) == pytest.approx(5.0)
    assert avg.update(-7.5) == pytest.approx(-7.5)
    assert avg.latest() == pytest.approx(-7.5)


def test_constant_input_converges_to_constant():
    avg = MovingAverage(4)
    for _ in range(4):
        result = avg.update(2.0)
    assert result == pytest.approx(2.0)
    assert avg.latest() == pytest.approx(2.0)


def test_full_window_average():
    avg = MovingAverage(4)
    for value in (1.0, 2.0, 3.0, 4.0):
        avg.update(value)
    assert avg.latest() == pytest.approx(2.5)


def test_partial_window_divides_by_full_size():
    avg = MovingAverage(4)
    assert avg.update(4.0) == pytest.approx(1.0)


def test_window_slides_dropping_oldest():
    avg = MovingAverage(2)
    avg.update(1.0)
    avg.update(3.0)
    assert avg.update(5.0) == pytest.approx(4.0)


def test_latest_matches_last_update():
    avg = MovingAverage(3)
    values = [0.5, 1.5, -2.0, 7.0, 3.25]
    for value in values:
        returned = avg.update(value)
        assert avg.latest() == pytest.approx(returned)


def test_flush_clears_state():
    avg = MovingAverage(3)
    for value in (3.0, 6.0, 9.0):
        avg.update(value)
    avg.flush()
    assert avg.latest() == 0.0
    assert avg.update(3.0) == pytest.approx(MovingAverage(3).update(3.0))


def test_flush_then_constant_fill():
    avg = MovingAverage(5)
    for value in (10.0, -4.0, 8.0):
        avg.update(value)
    avg.flush()
    for _ in range(5):
        avg.update(1.25)
    assert avg.latest() == pytest.approx(1.25)