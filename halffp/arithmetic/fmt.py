"""Text formatting and parsing of binary16 values."""

import re

import gmpy2 as gmp

from ..bits import classify, codec
from ..bits.layout import BINARY16
from ..bits.utils import ParseError
from . import gmpmath


_digit_underscore = re.compile(r'(?<=[0-9])_(?=[0-9])')


def parse_half_bits(s):
    """Read a decimal string (or inf / nan) as a binary16 bit pattern.
    The text is rounded once to binary32, then narrowed, which is what
    reading a native float and assigning it to a half would do.
    Raises ParseError on malformed input.
    """
    if not isinstance(s, str):
        raise TypeError('expected a string, got {}'.format(repr(s)))

    # digit grouping, as in float(): one underscore between two digits
    text = _digit_underscore.sub('', s.strip())
    if '_' in text:
        raise ParseError('misplaced underscore in {}'.format(repr(s)))
    if not text:
        raise ParseError('cannot parse {} as a half-precision value'.format(repr(s)))

    try:
        with gmpmath.binary32_context():
            f = gmp.mpfr(text)
    except ValueError as e:
        raise ParseError('cannot parse {} as a half-precision value'.format(repr(s))) from e

    return codec.narrow(codec.float32_to_bits(gmpmath.mpfr_to_float32(f)))


def show_fields(h):
    """Sign, exponent and fraction fields of a binary16 pattern, in binary."""
    S, E, C = BINARY16.split(h)
    return ('{:01b} {:0' + str(BINARY16.w) + 'b} {:0' + str(BINARY16.pbits) + 'b}').format(S, E, C)

def show_bitpattern(h):
    S, E, C = BINARY16.split(h)
    if E == 0 or E == BINARY16.exp_special:
        hidden = 0
    else:
        hidden = 1

    return ('float{:d}({:d},{:d}): {:01b} {:0'+str(BINARY16.w)+'b} ({:01b}) {:0'+str(BINARY16.pbits)+'b}').format(
        BINARY16.nbits, BINARY16.w, BINARY16.p, S, E, hidden, C,
    )


def format_half(h, debug=False):
    """Shortest decimal string that reads back as the same binary16 value,
    spelled the way Python spells floats. With debug, the bit fields
    are appended in parentheses.
    """
    h &= BINARY16.mask

    if classify.is_nan(h):
        s = 'nan'
    elif classify.is_inf(h):
        s = '-inf' if classify.is_negative(h) else 'inf'
    else:
        x = codec.half_bits_to_float(h)
        # 5 significant digits always suffice for binary16; more only
        # guards against double rounding through binary32
        s = repr(x)
        for digits in range(1, 18):
            candidate = '{:.{}g}'.format(x, digits)
            if parse_half_bits(candidate) == h:
                s = repr(float(candidate))
                break

    if debug:
        return '{} ({})'.format(s, show_fields(h))
    else:
        return s
