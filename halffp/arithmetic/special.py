"""Elliptic integrals and cylinder functions on binary32 values,
computed with scipy.special.

scipy evaluates these in double precision; each result is then rounded to
binary32, like the float overloads of the C++ special math functions.
Arguments follow the C++ conventions: elliptic integrals take the modulus k
(scipy takes the parameter m = k**2), and the integral of the third kind
uses 1 - nu * sin(theta)**2 in its denominator.
"""

import functools
import logging

import numpy as np
from scipy import special as sp


logger = logging.getLogger(__name__)


def _binary32(func):
    @functools.wraps(func)
    def compute(*args):
        args = [np.float64(arg) for arg in args]
        with np.errstate(all='ignore'):
            result = np.float32(func(*args))
        if np.isnan(result) and not any(np.isnan(arg) for arg in args):
            logger.debug('invalid operation: %s%r', func.__name__, tuple(float(arg) for arg in args))
        return result
    return compute


def _complete_pi(k, nu):
    # Carlson symmetric forms
    y = 1 - k * k
    result = sp.elliprf(0, y, 1)
    if nu != 0:
        result += nu / 3 * sp.elliprj(0, y, 1, 1 - nu)
    return result


@_binary32
def comp_ellint_1(k):
    return sp.ellipk(k * k)

@_binary32
def comp_ellint_2(k):
    return sp.ellipe(k * k)

@_binary32
def comp_ellint_3(k, nu):
    return _complete_pi(k, nu)

@_binary32
def ellint_1(k, phi):
    return sp.ellipkinc(phi, k * k)

@_binary32
def ellint_2(k, phi):
    return sp.ellipeinc(phi, k * k)

@_binary32
def ellint_3(k, nu, phi):
    # reduce phi to [-pi/2, pi/2]; each half period adds twice the complete integral
    n = np.round(phi / np.pi)
    phi = phi - n * np.pi

    s = np.sin(phi)
    c2 = np.cos(phi) ** 2
    d = 1 - k * k * s * s
    result = s * sp.elliprf(c2, d, 1)
    if nu != 0:
        result += nu / 3 * s ** 3 * sp.elliprj(c2, d, 1, 1 - nu * s * s)
    if n != 0:
        result += 2 * n * _complete_pi(k, nu)
    return result


@_binary32
def cyl_bessel_i(nu, x):
    return sp.iv(nu, x)

@_binary32
def cyl_bessel_j(nu, x):
    return sp.jv(nu, x)

@_binary32
def cyl_bessel_k(nu, x):
    return sp.kv(nu, x)

@_binary32
def cyl_neumann(nu, x):
    return sp.yv(nu, x)
