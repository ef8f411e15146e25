"""Conversion between IEEE 754 binary32 and binary16 bit patterns.

narrow() and widen() work only on integer bit patterns; the rest of this
module bridges those patterns to host values with numpy, which provides the
binary32 scalar type that Python itself lacks.

Both conversions are total: every input pattern (masked to its width) maps
to some output pattern, and exceptional cases are encoded in-band as
infinities, NaNs and signed zeros.
"""

import numpy as np

from .. import config
from .layout import BINARY16, BINARY32, REBIAS, FRAC_SHIFT


# first bit of the binary32 fraction that does not fit in binary16
_ROUND_BIT = 1 << (FRAC_SHIFT - 1)
_IMPLICIT_BIT = 1 << BINARY32.pbits


def narrow(i):
    """Round a binary32 bit pattern to the nearest binary16 bit pattern,
    ties to even.

    Finite values too large for binary16 become signed infinity, values too
    small become signed zero, and NaNs stay NaNs: the top of the payload is
    kept and the quiet bit is forced on.
    """
    S, E, C = BINARY32.split(i)
    half_sign = S << (BINARY16.nbits - 1)

    if E == BINARY32.exp_special:
        if C != 0:
            nan_bit = BINARY16.quiet_bit
        else:
            nan_bit = 0
        return BINARY16.pack(S, BINARY16.exp_special, nan_bit | (C >> FRAC_SHIFT))

    e = E - BINARY32.bias + BINARY16.bias

    if e >= BINARY16.exp_special:
        return BINARY16.pack(S, BINARY16.exp_special, 0)

    if e <= 0:
        # subnormal result, or too small even for that
        if e < -BINARY16.pbits:
            return half_sign

        c = C | _IMPLICIT_BIT
        shift = FRAC_SHIFT + 1 - e
        half_c = c >> shift
        round_bit = 1 << (shift - 1)

        # guard bit set, and either sticky bits below it or an odd lsb above it
        if (c & round_bit) and (c & (3 * round_bit - 1)):
            # A carry out of the fraction lands in the exponent field,
            # turning the largest subnormal into the smallest normal.
            half_c += 1

        return half_sign | half_c

    packed = BINARY16.pack(S, e, C >> FRAC_SHIFT)

    if (C & _ROUND_BIT) and (C & (3 * _ROUND_BIT - 1)):
        # Rounding is an increment of the packed integer: a carry out of the
        # fraction bumps the exponent, and from 0x7bff it reaches infinity.
        packed += 1

    return packed


def widen(h):
    """Convert a binary16 bit pattern to the binary32 bit pattern with
    exactly the same value. NaNs come out quiet, with the payload kept in
    the high fraction bits.
    """
    S, E, C = BINARY16.split(h)
    sign = S << (BINARY32.nbits - 1)
    c = C << FRAC_SHIFT

    if E == BINARY16.exp_special:
        if c == 0:
            return BINARY32.pack(S, BINARY32.exp_special, 0)
        else:
            return BINARY32.pack(S, BINARY32.exp_special, BINARY32.quiet_bit | c)

    if E == 0:
        if c == 0:
            return sign

        # subnormal: shift up until the leading one becomes the implicit bit
        E = 1
        while not (c & _IMPLICIT_BIT):
            c <<= 1
            E -= 1

        c &= BINARY32.frac_mask

    return BINARY32.pack(S, E + REBIAS, c)


# host values

def float32_to_bits(x):
    """Round any real number to binary32 (ties to even) and return its bit pattern."""
    if not isinstance(x, np.generic):
        try:
            x = float(x)
        except OverflowError:
            # out of double range, so out of binary32 range as well
            return BINARY32.pack(int(x < 0), BINARY32.exp_special, 0)
    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        f = np.float32(x)
    return int(f.view(np.uint32))

def bits_to_float32(i):
    return np.uint32(i & BINARY32.mask).view(np.float32)

def float_to_half_bits(x):
    """Round x first to binary32, then to binary16."""
    return narrow(float32_to_bits(x))

def half_bits_to_float(h):
    return float(bits_to_float32(widen(h)))


# storage

def half_to_bytes(h, byteorder=None):
    byteorder = config.check_byteorder(byteorder)
    return (h & BINARY16.mask).to_bytes(2, byteorder)

def half_from_bytes(b, byteorder=None):
    byteorder = config.check_byteorder(byteorder)
    b = bytes(b)
    if len(b) != 2:
        raise ValueError('binary16 value must be exactly 2 bytes, got {}'.format(repr(b)))
    return int.from_bytes(b, byteorder)
