"""Standard operation codes for the lifted math functions."""

from enum import IntEnum, unique

@unique
class OP(IntEnum):
    sqrt = 0
    fma = 1
    fdim = 2
    fmax = 3
    fmin = 4
    fmod = 5
    remainder = 6
    ceil = 7
    floor = 8
    nearbyint = 9
    round = 10
    trunc = 11
    acos = 12
    acosh = 13
    asin = 14
    asinh = 15
    atan = 16
    atan2 = 17
    atanh = 18
    cos = 19
    cosh = 20
    sin = 21
    sinh = 22
    tan = 23
    tanh = 24
    exp = 25
    exp2 = 26
    expm1 = 27
    log = 28
    log10 = 29
    log1p = 30
    log2 = 31
    cbrt = 32
    hypot = 33
    pow = 34
    erf = 35
    erfc = 36
    lgamma = 37
    tgamma = 38
    rint = 39
    logb = 40
    lerp = 41
    beta = 42
    expint = 43
    riemann_zeta = 44

# number of arguments taken by each operation
arity = {
    OP.fma: 3,
    OP.fdim: 2,
    OP.fmax: 2,
    OP.fmin: 2,
    OP.fmod: 2,
    OP.remainder: 2,
    OP.atan2: 2,
    OP.hypot: 2,
    OP.pow: 2,
    OP.lerp: 3,
    OP.beta: 2,
}

def op_arity(op):
    return arity.get(op, 1)
