"""Math functions on Half values.

Almost everything here is a binary32 function lifted to binary16: the
arguments are widened, the binary32 result is computed by the gmpy2 backend
(or by scipy, for the elliptic and cylinder functions), and the result is
narrowed. Functions that only manipulate the sign, or that
step through representable values, work on the bit pattern directly.
"""

from ..bits import classify
from ..bits.layout import BINARY16
from ..bits.ops import OP, op_arity
from . import gmpmath, special
from .half import Half


def _as_half(x):
    if isinstance(x, Half):
        return x
    else:
        return Half(x)


def lift(func, arity):
    """Lift a function of arity binary32 arguments to Half arguments:
    widen each argument, apply func, narrow the result.
    Plain numbers are accepted too and are converted to Half first.
    """
    def lifted(*args):
        if len(args) != arity:
            raise TypeError('{}() takes {:d} arguments ({:d} given)'
                            .format(lifted.__name__, arity, len(args)))
        return Half.from_float32(func(*(_as_half(x).to_float32() for x in args)))

    lifted.__name__ = getattr(func, '__name__', 'lifted')
    lifted.__doc__ = getattr(func, '__doc__', None)
    return lifted

def lift_op(op):
    """Lift one of the backend's binary32 operations."""
    def compute(*args):
        return gmpmath.compute(op, *args)
    compute.__name__ = op.name
    compute.__doc__ = '{} of Half values, computed in binary32.'.format(op.name)
    return lift(compute, op_arity(op))


fmod = lift_op(OP.fmod)
remainder = lift_op(OP.remainder)
fma = lift_op(OP.fma)
fmax = lift_op(OP.fmax)
fmin = lift_op(OP.fmin)
fdim = lift_op(OP.fdim)
lerp = lift_op(OP.lerp)

exp = lift_op(OP.exp)
exp2 = lift_op(OP.exp2)
expm1 = lift_op(OP.expm1)
log = lift_op(OP.log)
log10 = lift_op(OP.log10)
log2 = lift_op(OP.log2)
log1p = lift_op(OP.log1p)

pow = lift_op(OP.pow)
sqrt = lift_op(OP.sqrt)
cbrt = lift_op(OP.cbrt)
hypot = lift_op(OP.hypot)

sin = lift_op(OP.sin)
sinh = lift_op(OP.sinh)
cos = lift_op(OP.cos)
cosh = lift_op(OP.cosh)
tan = lift_op(OP.tan)
tanh = lift_op(OP.tanh)
asin = lift_op(OP.asin)
asinh = lift_op(OP.asinh)
acos = lift_op(OP.acos)
acosh = lift_op(OP.acosh)
atan = lift_op(OP.atan)
atanh = lift_op(OP.atanh)
atan2 = lift_op(OP.atan2)

erf = lift_op(OP.erf)
erfc = lift_op(OP.erfc)
tgamma = lift_op(OP.tgamma)
lgamma = lift_op(OP.lgamma)

ceil = lift_op(OP.ceil)
floor = lift_op(OP.floor)
trunc = lift_op(OP.trunc)
round = lift_op(OP.round)
nearbyint = lift_op(OP.nearbyint)
rint = lift_op(OP.rint)

logb = lift_op(OP.logb)

beta = lift_op(OP.beta)
expint = lift_op(OP.expint)
riemann_zeta = lift_op(OP.riemann_zeta)

comp_ellint_1 = lift(special.comp_ellint_1, 1)
comp_ellint_2 = lift(special.comp_ellint_2, 1)
comp_ellint_3 = lift(special.comp_ellint_3, 2)
ellint_1 = lift(special.ellint_1, 2)
ellint_2 = lift(special.ellint_2, 2)
ellint_3 = lift(special.ellint_3, 3)
cyl_bessel_i = lift(special.cyl_bessel_i, 2)
cyl_bessel_j = lift(special.cyl_bessel_j, 2)
cyl_bessel_k = lift(special.cyl_bessel_k, 2)
cyl_neumann = lift(special.cyl_neumann, 2)


# bit-level functions

def fabs(x):
    return abs(_as_half(x))

def copysign(x, y):
    """Magnitude of x with the sign bit of y, NaNs included."""
    x = _as_half(x)
    y = _as_half(y)
    return Half(bits=(x.bits & BINARY16.magnitude_mask) | (y.bits & BINARY16.sign_mask))

def nextafter(x, y):
    """The next representable binary16 value after x in the direction of y."""
    x = _as_half(x)
    y = _as_half(y)

    if x.is_nan():
        return x
    elif y.is_nan():
        return y
    elif x == y:
        return y
    elif x.is_zero():
        # smallest subnormal, with the sign of the direction
        return Half(bits=(y.bits & BINARY16.sign_mask) | 1)
    elif (x < y) == x.is_positive():
        # away from zero
        return Half(bits=x.bits + 1)
    else:
        return Half(bits=x.bits - 1)


# classification of Half values

def is_nan(x):
    return classify.is_nan(_as_half(x).bits)

def is_inf(x):
    return classify.is_inf(_as_half(x).bits)

def is_finite(x):
    return classify.is_finite(_as_half(x).bits)

def is_normal(x):
    return classify.is_normal(_as_half(x).bits)

def is_positive(x):
    return classify.is_positive(_as_half(x).bits)

def is_negative(x):
    return classify.is_negative(_as_half(x).bits)

def signbit(x):
    return classify.signbit(_as_half(x).bits)
