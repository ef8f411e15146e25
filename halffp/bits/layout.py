"""Packed IEEE 754 binary interchange layouts.

A layout is described the same way as the rest of the package talks about
formats: w is the number of exponent bits, and p is the precision, counting
the implicit leading bit. The stored fraction field is therefore p - 1 bits
wide, and a format occupies 1 + w + (p - 1) bits, sign first.

Fields are always extracted with explicit shifts and masks over a Python
int, so the layout never depends on how a host would pack a struct.
"""

from .utils import bitmask


class BitLayout(object):

    def __init__(self, w, p):
        if w < 2 or p < 2:
            raise ValueError('format with w={}, p={} cannot be represented with IEEE 754 bit pattern'
                             .format(repr(w), repr(p)))
        self.w = w
        self.p = p
        self.pbits = p - 1
        self.nbits = 1 + w + self.pbits

        self.emax = (1 << (w - 1)) - 1
        self.emin = 1 - self.emax
        self.bias = self.emax

        self.sign_mask = 1 << (self.nbits - 1)
        self.exp_mask = bitmask(w) << self.pbits
        self.frac_mask = bitmask(self.pbits)
        self.magnitude_mask = self.exp_mask | self.frac_mask
        self.mask = bitmask(self.nbits)
        # biased exponent field value reserved for infinities and NaNs
        self.exp_special = bitmask(w)
        self.quiet_bit = 1 << (self.pbits - 1)

    def __repr__(self):
        return '{}(w={}, p={})'.format(type(self).__name__, repr(self.w), repr(self.p))

    def __eq__(self, other):
        if isinstance(other, BitLayout):
            return self.w == other.w and self.p == other.p
        return NotImplemented

    def __hash__(self):
        return hash((self.w, self.p))

    def split(self, i):
        """Split a bit pattern into its (S, E, C) fields: sign bit,
        biased exponent, and stored fraction.
        """
        i &= self.mask
        S = i >> (self.nbits - 1)
        E = (i >> self.pbits) & bitmask(self.w)
        C = i & self.frac_mask
        return S, E, C

    def pack(self, S, E, C):
        """Inverse of split. Fields are masked to their widths."""
        return (((S & 1) << (self.nbits - 1))
                | ((E & bitmask(self.w)) << self.pbits)
                | (C & self.frac_mask))


BINARY16 = BitLayout(5, 11)
BINARY32 = BitLayout(8, 24)

# the exponent bias difference between the two formats, 127 - 15
REBIAS = BINARY32.bias - BINARY16.bias
# the fraction width difference between the two formats, 23 - 10
FRAC_SHIFT = BINARY32.pbits - BINARY16.pbits
