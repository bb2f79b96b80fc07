import pytest

from embutils import basicmath as bm


@pytest.mark.parametrize("x", [0, 0.0, 2.5, 100])
def test_sign_non_negative(x):
    assert bm.sign(x) == 1


@pytest.mark.parametrize("x", [-0.1, -3, -1000])
def test_sign_negative(x):
    assert bm.sign(x) == -1


def test_constrain_limits():
    assert bm.constrain(5, 0, 10) == 5
    assert bm.constrain(-1, 0, 10) == 0
    assert bm.constrain(11, 0, 10) == 10


def test_remap_endpoints_with_common_origin():
    assert bm.remap(0.0, 0.0, 10.0, 0.0, 100.0) == pytest.approx(0.0)
    assert bm.remap(10.0, 0.0, 10.0, 0.0, 100.0) == pytest.approx(100.0)


def test_remap_adds_back_source_origin():
    assert bm.remap(2.0, 2.0, 4.0, 7.0, 9.0) == pytest.approx(2.0)


def test_deadband_inside_threshold_is_zero():
    assert bm.deadband(0.5, 1.0) == 0
    assert bm.deadband(-1.0, 1.0) == 0


@pytest.mark.parametrize("value", [1.5, 3.0, 42.0])
def test_deadband_shifts_and_is_odd(value):
    threshold = 1.0
    out = bm.deadband(value, threshold)
    assert out + threshold == pytest.approx(value)
    assert bm.deadband(-value, threshold) == pytest.approx(-out)


@pytest.mark.parametrize("x", [0.0, 1.0, -2.5, 90.0])
def test_angle_round_trip(x):
    assert bm.rad2deg(bm.deg2rad(x)) == pytest.approx(x, rel=1e-5, abs=1e-9)


def test_pi_is_180_degrees():
    assert bm.rad2deg(bm.CONST_PI) == pytest.approx(180.0, rel=1e-6)


@pytest.mark.parametrize("x", [0.0, 1.0, -3.0, 1e4])
def test_rate_round_trip(x):
    assert bm.mdps2radps(bm.radps2mdps(x)) == pytest.approx(x, rel=1e-6, abs=1e-9)


def test_temperature_round_trip():
    assert bm.c2k(0.0) == pytest.approx(273.15)
    for x in (-40.0, 0.0, 25.0, 1000.0):
        assert bm.k2c(bm.c2k(x)) == pytest.approx(x)


def test_milli_g_conversion():
    assert bm.mg2ms2(1000.0) == pytest.approx(bm.CONST_G)
    for x in (0.0, 1.0, -500.0):
        assert bm.ms22mg(bm.mg2ms2(x)) == pytest.approx(x, rel=1e-9, abs=1e-12)


@pytest.mark.parametrize("value,mask", [(0b1010, 0b0101), (0, 0xFF), (0xF0, 0x0F), (0x1234, 0x0F00)])
def test_bit_set_and_clear(value, mask):
    assert bm.is_bit_set_all(bm.bit_set(value, mask), mask)
    assert not bm.is_bit_set_any(bm.bit_clear(value, mask), mask)
    assert bm.bit_clear(bm.bit_set(value, mask), mask) == bm.bit_clear(value, mask)


@pytest.mark.parametrize("value,mask", [(0b1010, 0b0110), (0xFF, 0x0F), (0, 0x80)])
def test_bit_toggle_twice_is_identity(value, mask):
    assert bm.bit_toggle(bm.bit_toggle(value, mask), mask) == value
    assert bm.bit_toggle(value, mask) != value


def test_bit_mask_and_any():
    assert bm.bit_mask(0xF0, 0x0F) == 0
    assert not bm.is_bit_set_any(0xF0, 0x0F)
    assert bm.is_bit_set_any(0xF0, 0x1F)
    assert not bm.is_bit_set_all(0xF0, 0x1F)
    assert bm.bit_mask(0xF0, 0xF0) == 0xF0