"""IEEE 754 binary16 values, with arithmetic done in native binary32.

Every arithmetic operation widens its operands to binary32, computes with
numpy.float32, and narrows the result back; comparisons widen and compare
without narrowing. Sign manipulation (negation, abs) only touches the sign
bit, so it preserves NaN payloads exactly.
"""

import operator
import numbers

import numpy as np

from .. import config
from ..bits import classify, codec
from ..bits.layout import BINARY16
from . import fmt


def _to_float32(x):
    """Operand conversion for mixed Half / number arithmetic, or None if
    x is not a real number.
    """
    if isinstance(x, Half):
        return x.to_float32()
    elif isinstance(x, (numbers.Real, np.floating, np.integer)):
        return codec.bits_to_float32(codec.float32_to_bits(x))
    else:
        return None


class Half(object):
    """An immutable binary16 value.

    Half(x) rounds a number to binary32 and then to binary16, or parses a
    string; Half(bits=i) takes a raw 16-bit pattern as-is.
    """

    __slots__ = ('_bits',)

    def __init__(self, x=None, bits=None):
        if bits is not None:
            if x is not None:
                raise ValueError('cannot specify both a value {} and bits {}'
                                 .format(repr(x), repr(bits)))
            self._bits = int(bits) & BINARY16.mask
        elif x is None:
            self._bits = 0
        elif isinstance(x, Half):
            self._bits = x._bits
        elif isinstance(x, str):
            self._bits = fmt.parse_half_bits(x)
        elif isinstance(x, (numbers.Real, np.floating, np.integer)):
            self._bits = codec.float_to_half_bits(x)
        else:
            raise TypeError('cannot convert {} to {}'.format(repr(x), type(self).__name__))

    @classmethod
    def from_bits(cls, bits):
        return cls(bits=bits)

    @classmethod
    def from_float32(cls, x):
        return cls(bits=codec.narrow(codec.float32_to_bits(x)))

    @classmethod
    def from_bytes(cls, b, byteorder=None):
        return cls(bits=codec.half_from_bytes(b, byteorder=byteorder))

    @property
    def bits(self):
        """The raw 16-bit pattern."""
        return self._bits

    def to_float32(self):
        return codec.bits_to_float32(codec.widen(self._bits))

    def to_bytes(self, byteorder=None):
        return codec.half_to_bytes(self._bits, byteorder=byteorder)

    def __repr__(self):
        return '{}(bits=0x{:04x})'.format(type(self).__name__, self._bits)

    def __str__(self):
        return fmt.format_half(self._bits, debug=config.debug_mode)

    def __format__(self, format_spec):
        if format_spec:
            return format(float(self), format_spec)
        else:
            return str(self)

    def show_bitpattern(self):
        return fmt.show_bitpattern(self._bits)

    # conversions

    def __float__(self):
        return codec.half_bits_to_float(self._bits)

    def __int__(self):
        return int(float(self))

    def __bool__(self):
        return not classify.is_zero(self._bits)

    def __hash__(self):
        return hash(float(self))

    # classification

    def is_nan(self):
        return classify.is_nan(self._bits)

    def is_inf(self):
        return classify.is_inf(self._bits)

    def is_finite(self):
        return classify.is_finite(self._bits)

    def is_normal(self):
        return classify.is_normal(self._bits)

    def is_subnormal(self):
        return classify.is_subnormal(self._bits)

    def is_zero(self):
        return classify.is_zero(self._bits)

    def is_positive(self):
        return classify.is_positive(self._bits)

    def is_negative(self):
        return classify.is_negative(self._bits)

    # sign manipulation, on the bit pattern only

    def __neg__(self):
        return type(self)(bits=self._bits ^ BINARY16.sign_mask)

    def __pos__(self):
        return self

    def __abs__(self):
        return type(self)(bits=self._bits & BINARY16.magnitude_mask)

    # arithmetic, through binary32

    def _arith(self, other, op, reflected=False):
        y = _to_float32(other)
        if y is None:
            return NotImplemented
        x = self.to_float32()
        with np.errstate(all='ignore'):
            if reflected:
                result = op(y, x)
            else:
                result = op(x, y)
        return type(self).from_float32(result)

    def __add__(self, other):
        return self._arith(other, operator.add)

    def __radd__(self, other):
        return self._arith(other, operator.add, reflected=True)

    def __sub__(self, other):
        return self._arith(other, operator.sub)

    def __rsub__(self, other):
        return self._arith(other, operator.sub, reflected=True)

    def __mul__(self, other):
        return self._arith(other, operator.mul)

    def __rmul__(self, other):
        return self._arith(other, operator.mul, reflected=True)

    def __truediv__(self, other):
        return self._arith(other, operator.truediv)

    def __rtruediv__(self, other):
        return self._arith(other, operator.truediv, reflected=True)

    # comparison, in binary32 without narrowing

    def _compare(self, other, op):
        # Other numbers are compared exactly, not rounded first, so that
        # equal values also hash the same.
        if isinstance(other, Half):
            return bool(op(self.to_float32(), other.to_float32()))
        elif isinstance(other, (numbers.Real, np.floating, np.integer)):
            return bool(op(float(self), other))
        else:
            return NotImplemented

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __le__(self, other):
        return self._compare(other, operator.le)

    def __eq__(self, other):
        return self._compare(other, operator.eq)

    def __ne__(self, other):
        return self._compare(other, operator.ne)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __ge__(self, other):
        return self._compare(other, operator.ge)

    def is_identical_to(self, other):
        """Bitwise equality, which tells apart -0 and +0 and different NaNs."""
        return isinstance(other, Half) and self._bits == other._bits
