"""Describe binary16 values: value, category and bit fields.

Inputs that start with 0x (or any input, with --bits) are read as raw
16-bit patterns; everything else is parsed as a number and rounded.

    python -m halffp.tools.describe 0x3c00 0.1 inf
    python -m halffp.tools.describe --table --exponent 0
"""

import logging
import sys

from ..bits import classify, codec
from ..bits.layout import BINARY16
from ..bits.utils import ParseError
from ..arithmetic import fmt


logger = logging.getLogger(__name__)


def category(h):
    if classify.is_nan(h):
        if classify.is_signaling(h):
            return 'snan'
        else:
            return 'nan'
    elif classify.is_inf(h):
        return 'inf'
    elif classify.is_zero(h):
        return 'zero'
    elif classify.is_subnormal(h):
        return 'subnormal'
    else:
        return 'normal'

def describe(h):
    return '0x{:04x}  {!s:<12}{:<10}{}'.format(
        h, fmt.format_half(h), category(h), fmt.show_bitpattern(h),
    )

def read_input(s, bits=False):
    if bits or s.lower().startswith('0x'):
        try:
            i = int(s, 16)
        except ValueError as e:
            raise ParseError('cannot read {} as a bit pattern'.format(repr(s))) from e
        if i < 0 or i > BINARY16.mask:
            raise ParseError('bit pattern {} does not fit in {:d} bits'.format(repr(s), BINARY16.nbits))
        logger.debug('%r read as bit pattern 0x%04x', s, i)
        return i
    else:
        h = fmt.parse_half_bits(s)
        logger.debug('%r rounded to 0x%04x (binary32 0x%08x)', s, h, codec.widen(h))
        return h

def table(exponent=None):
    for h in range(1 << BINARY16.nbits):
        if exponent is None or BINARY16.split(h)[1] == exponent:
            yield describe(h)


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description='describe IEEE 754 binary16 values')
    parser.add_argument('x', nargs='*',
                        help='values or bit patterns to describe')
    parser.add_argument('-b', '--bits', action='store_true',
                        help='read all inputs as hexadecimal bit patterns')
    parser.add_argument('-t', '--table', action='store_true',
                        help='list every binary16 value')
    parser.add_argument('-e', '--exponent', type=int, default=None,
                        help='with --table, only list this biased exponent field')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log how inputs were read')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(name)s: %(message)s')

    if args.table:
        for line in table(args.exponent):
            print(line)
        return 0

    if not args.x:
        print('no input; nothing to do')
        return 0

    status = 0
    for s in args.x:
        try:
            print(describe(read_input(s, bits=args.bits)))
        except ParseError as e:
            print('{}: {}'.format(parser.prog, e), file=sys.stderr)
            status = 1
    return status


if __name__ == '__main__':
    sys.exit(main())
