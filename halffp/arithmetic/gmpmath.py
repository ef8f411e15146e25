"""Common math operations (sqrt log exp etc.) on binary32 values,
implemented with GMP/MPFR as a backend.

Every operation is evaluated by MPFR inside a context that has exactly the
precision and exponent range of IEEE 754 binary32, with subnormals, so each
result is the correctly rounded binary32 answer. This is the native 32-bit
math library that half-precision functions are lifted through.
"""


import logging

import gmpy2 as gmp
import numpy as np

from ..bits.ops import OP, op_arity


logger = logging.getLogger(__name__)


def binary32_context(rounding=gmp.RoundToNearest):
    return gmp.context(
        precision=24,
        # MPFR exponents put the significand in [0.5, 1)
        emin=-148,
        emax=128,
        subnormalize=True,
        # exceptional results are produced in-band, as inf and nan
        trap_underflow=False,
        trap_overflow=False,
        trap_inexact=False,
        trap_invalid=False,
        trap_erange=False,
        trap_divzero=False,
        round=rounding,
    )

def wide_context():
    """Generous precision and range for intermediate results that are
    rounded to binary32 afterwards.
    """
    return gmp.context(
        precision=128,
        emin=gmp.get_emin_min(),
        emax=gmp.get_emax_max(),
        subnormalize=False,
        trap_underflow=False,
        trap_overflow=False,
        trap_inexact=False,
        trap_invalid=False,
        trap_erange=False,
        trap_divzero=False,
        round=gmp.RoundToNearest,
    )


def float32_to_mpfr(x):
    # binary32 values are exact in any context with p >= 24
    return gmp.mpfr(float(x))

def mpfr_to_float32(x):
    # exact when x already has binary32 precision and range
    with np.errstate(over='ignore', under='ignore'):
        return np.float32(float(x))


# emulated operations

def _fdim(x1, x2):
    if x1 > x2:
        return x1 - x2
    else:
        return gmp.mpfr(0)

def _fmax(x1, x2):
    # IEEE 754 maxNum: a quiet NaN operand is ignored
    if gmp.is_nan(x1):
        return x2
    elif gmp.is_nan(x2):
        return x1
    elif x1 == x2:
        # prefer +0 over -0
        if gmp.is_signed(x1):
            return x2
        else:
            return x1
    elif x1 > x2:
        return x1
    else:
        return x2

def _fmin(x1, x2):
    # IEEE 754 minNum: a quiet NaN operand is ignored
    if gmp.is_nan(x1):
        return x2
    elif gmp.is_nan(x2):
        return x1
    elif x1 == x2:
        # prefer -0 over +0
        if gmp.is_signed(x1):
            return x1
        else:
            return x2
    elif x1 < x2:
        return x1
    else:
        return x2

def _logb(x):
    if gmp.is_zero(x):
        return -gmp.inf()
    elif gmp.is_infinite(x):
        return gmp.inf()
    else:
        # MPFR exponents put the significand in [0.5, 1)
        return gmp.mpfr(gmp.get_exp(x) - 1)

def _lerp(a, b, t):
    # C++20 std::lerp, evaluated step by step in binary32
    if (a <= 0 and b >= 0) or (a >= 0 and b <= 0):
        return t * b + (1 - t) * a
    elif t == 1:
        return b
    x = a + t * (b - a)
    if (t > 1) == (b > a):
        return b if b > x else x
    else:
        return b if b < x else x

def _beta(x1, x2):
    with wide_context():
        result = gmp.gamma(x1) * gmp.gamma(x2) / gmp.gamma(x1 + x2)
    return gmp.mpfr(result)


# indexed by OP; the rint_* variants return mpfr, so infinities
# and the sign of zero survive
gmp_ops = [
    gmp.sqrt,
    gmp.fma,
    _fdim,
    _fmax,
    _fmin,
    gmp.fmod,
    gmp.remainder,
    gmp.rint_ceil,
    gmp.rint_floor,
    gmp.rint,
    gmp.round_away,
    gmp.rint_trunc,
    gmp.acos,
    gmp.acosh,
    gmp.asin,
    gmp.asinh,
    gmp.atan,
    gmp.atan2,
    gmp.atanh,
    gmp.cos,
    gmp.cosh,
    gmp.sin,
    gmp.sinh,
    gmp.tan,
    gmp.tanh,
    gmp.exp,
    gmp.exp2,
    gmp.expm1,
    gmp.log,
    gmp.log10,
    gmp.log1p,
    gmp.log2,
    gmp.cbrt,
    gmp.hypot,
    lambda x1, x2: x1 ** x2,
    gmp.erf,
    gmp.erfc,
    lambda x: gmp.lgamma(x)[0],
    gmp.gamma,
    gmp.rint,
    _logb,
    _lerp,
    _beta,
    gmp.eint,
    gmp.zeta,
]

def _nan_result(opcode, inputs):
    """C99 Annex F results for NaN arguments to pow and hypot,
    or None if the NaN just propagates.
    """
    if opcode == OP.pow:
        x, y = inputs
        if gmp.is_zero(y) or x == 1:
            return gmp.mpfr(1)
    elif opcode == OP.hypot:
        if any(gmp.is_infinite(f) for f in inputs):
            return gmp.inf()
    return None


def compute(opcode, *args):
    """Compute op(*args) in binary32, rounding to nearest even.
    op is specified via opcode, and arguments are binary32 values
    (numpy.float32, or any float that is exactly representable).
    The result is a numpy.float32.
    NOTE: this function does not trap on invalid operations, so it will give
    the mpfr answer for special cases like sqrt(-1), asin(3), and so on.
    """
    try:
        opcode = OP(opcode)
    except ValueError:
        raise ValueError('unknown opcode {}'.format(repr(opcode)))
    if len(args) != op_arity(opcode):
        raise ValueError('{} takes {:d} arguments, got {:d}'
                         .format(opcode.name, op_arity(opcode), len(args)))

    op = gmp_ops[opcode]

    with binary32_context():
        inputs = [float32_to_mpfr(arg) for arg in args]

        nans = [f for f in inputs if gmp.is_nan(f)]
        # fmax and fmin handle NaN operands themselves
        if nans and opcode not in (OP.fmax, OP.fmin):
            result = _nan_result(opcode, inputs)
            if result is None:
                # gmpy2 really doesn't like it when you pass nan as an argument
                result = nans[0]
            return mpfr_to_float32(result)

        result = op(*inputs)
        # results computed in a wider context still need one final rounding
        result = gmp.mpfr(result)

    if gmp.is_nan(result):
        logger.debug('invalid operation: %s%r', opcode.name, tuple(float(arg) for arg in args))

    return mpfr_to_float32(result)
