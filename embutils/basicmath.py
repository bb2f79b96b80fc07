"""Small math helpers, unit conversions and bit operations."""

from __future__ import annotations

__all__ = [
    "CONST_PI",
    "CONST_G",
    "CONST_E",
    "sign",
    "constrain",
    "remap",
    "deadband",
    "rad2deg",
    "deg2rad",
    "radps2mdps",
    "mdps2radps",
    "c2k",
    "k2c",
    "mg2ms2",
    "ms22mg",
    "is_bit_set_all",
    "is_bit_set_any",
    "bit_mask",
    "bit_set",
    "bit_clear",
    "bit_toggle",
]

CONST_PI = 3.141592654
CONST_G = 9.80665
CONST_E = 2.71828182845904523536028747135266249

_RAD_TO_DEG = 57.29578
_DEG_TO_RAD = 0.0174533
_RADPS_TO_MDPS = 57295.779513
_MDPS_TO_RADPS = 1.745329252e-5
_ZERO_CELSIUS = 273.15
_MG_TO_MS2 = 0.00980665
_MS2_TO_MG = 101.9716212978


def sign(x):
    """Return 1 for non-negative values and -1 otherwise."""
    non_negative = x >= 0
    if non_negative:
        return 1
    return -1


def constrain(value, low, high):
    """Clamp value into [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def remap(x, from_low, from_high, to_low, to_high):
    """Rescale x from one range to another.

    The offset added back is ``from_low``, so the mapping is exact only when
    both ranges start at the same value.
    """
    return (x - from_low) * (to_high - to_low) / (from_high - from_low) + from_low


def deadband(value, threshold):
    """Zero values within the threshold and shift the rest towards zero."""
    if abs(value) <= threshold:
        return 0
    if value > 0:
        return value - threshold
    return value + threshold


def rad2deg(x):
    """Convert radians to degrees."""
    return x * _RAD_TO_DEG


def deg2rad(x):
    """Convert degrees to radians."""
    return x * _DEG_TO_RAD


def radps2mdps(x):
    """Convert rad/s to milli-degrees per second."""
    return x * _RADPS_TO_MDPS


def mdps2radps(x):
    """Convert milli-degrees per second to rad/s."""
    return x * _MDPS_TO_RADPS


def c2k(x):
    """Convert Celsius to Kelvin."""
    return x + _ZERO_CELSIUS


def k2c(x):
    """Convert Kelvin to Celsius."""
    return x - _ZERO_CELSIUS


def mg2ms2(x):
    """Convert milli-g to m/s^2."""
    return x * _MG_TO_MS2


def ms22mg(x):
    """Convert m/s^2 to milli-g."""
    return x * _MS2_TO_MG


def is_bit_set_all(value, mask):
    """True if every bit of mask is set in value."""
    return (value & mask) == mask


def is_bit_set_any(value, mask):
    """True if any bit of mask is set in value."""
    return (value & mask) != 0


def bit_mask(value, mask):
    """Keep only the bits of value selected by mask."""
    return value & mask


def bit_set(value, mask):
    """Set the bits of mask in value."""
    return value | mask


def bit_clear(value, mask):
    """Clear the bits of mask in value."""
    return value & ~mask


def bit_toggle(value, mask):
    """Flip the bits of mask in value."""
    return value ^ mask