"""Category predicates on binary16 bit patterns, without decoding."""

from .layout import BINARY16


_SIGN = BINARY16.sign_mask
_EXP = BINARY16.exp_mask
_FRAC = BINARY16.frac_mask
_MAG = BINARY16.magnitude_mask


def is_nan(h):
    return (h & _MAG) > _EXP

def is_inf(h):
    return (h & _MAG) == _EXP

def is_finite(h):
    return (h & _EXP) != _EXP

def is_normal(h):
    exponent = h & _EXP
    return exponent != _EXP and exponent != 0

def is_subnormal(h):
    return (h & _EXP) == 0 and (h & _FRAC) != 0

def is_zero(h):
    return (h & _MAG) == 0

def is_positive(h):
    """True if the sign bit is clear. This includes +0 and positive NaNs."""
    return (h & _SIGN) == 0

def is_negative(h):
    """True if the sign bit is set. This includes -0 and negative NaNs."""
    return (h & _SIGN) != 0

signbit = is_negative

def is_signaling(h):
    """A NaN with the quiet bit clear."""
    return is_nan(h) and not (h & BINARY16.quiet_bit)
