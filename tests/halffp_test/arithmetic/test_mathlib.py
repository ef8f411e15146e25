import math
from unittest import TestCase

from halffp.arithmetic import constants, mathlib
from halffp.arithmetic.half import Half


class LiftTest(TestCase):
    def test_lift(self):
        double = mathlib.lift(lambda x: x * 2, 1)
        self.assertEqual(double(Half(3)).bits, Half(6).bits)
        self.assertEqual(double(3).bits, Half(6).bits)
        # overflow in binary32 is narrowed to infinity
        self.assertEqual(double(constants.max).bits, 0x7c00)

        add3 = mathlib.lift(lambda x, y, z: x + y + z, 3)
        self.assertEqual(add3(1, 2, 3).bits, Half(6).bits)

        with self.assertRaises(TypeError):
            double(1, 2)

    def test_names(self):
        self.assertEqual(mathlib.sqrt.__name__, 'sqrt')
        self.assertEqual(mathlib.atan2.__name__, 'atan2')

    def test_arity(self):
        with self.assertRaises(TypeError):
            mathlib.sqrt(1, 2)
        with self.assertRaises(TypeError):
            mathlib.fma(1, 2)


class FunctionTest(TestCase):
    def assertHalf(self, got, expected):
        self.assertIsInstance(got, Half)
        self.assertEqual(got.bits, Half(expected).bits, msg='{} != {}'.format(got, expected))

    def test_basic(self):
        self.assertHalf(mathlib.sqrt(Half(4)), 2)
        self.assertTrue(mathlib.sqrt(Half(-1)).is_nan())
        self.assertHalf(mathlib.cbrt(Half(-8)), -2)
        self.assertHalf(mathlib.pow(Half(2), Half(10)), 1024)
        self.assertHalf(mathlib.pow(2, 16), float('inf'))
        self.assertHalf(mathlib.hypot(3, 4), 5)
        self.assertHalf(mathlib.fma(2, 3, 1), 7)
        self.assertHalf(mathlib.fmod(7, 3), 1)
        self.assertHalf(mathlib.remainder(8, 3), -1)
        self.assertHalf(mathlib.fdim(3, 1), 2)
        self.assertHalf(mathlib.fdim(1, 3), 0)

    def test_nan_special_cases(self):
        self.assertHalf(mathlib.pow(constants.nan, 0), 1)
        self.assertHalf(mathlib.pow(1, constants.nan), 1)
        self.assertHalf(mathlib.hypot(constants.infinity, constants.nan), float('inf'))
        self.assertTrue(mathlib.sin(constants.nan).is_nan())

    def test_min_max(self):
        self.assertHalf(mathlib.fmin(1, 2), 1)
        self.assertHalf(mathlib.fmin(2, 1), 1)
        self.assertHalf(mathlib.fmax(1, 2), 2)
        self.assertHalf(mathlib.fmax(2, 1), 2)
        self.assertHalf(mathlib.fmin(constants.nan, 1), 1)
        self.assertHalf(mathlib.fmax(1, constants.nan), 1)
        self.assertTrue(mathlib.fmax(constants.nan, constants.nan).is_nan())
        self.assertEqual(mathlib.fmin(constants.zero, constants.negative_zero).bits, 0x8000)
        self.assertEqual(mathlib.fmax(constants.negative_zero, constants.zero).bits, 0x0000)

    def test_exponential(self):
        self.assertHalf(mathlib.exp(0), 1)
        self.assertHalf(mathlib.exp2(10), 1024)
        self.assertHalf(mathlib.expm1(0), 0)
        self.assertHalf(mathlib.log(1), 0)
        self.assertHalf(mathlib.log2(1024), 10)
        self.assertHalf(mathlib.log10(1000), 3)
        self.assertHalf(mathlib.log1p(0), 0)
        self.assertHalf(mathlib.log(0), float('-inf'))
        self.assertHalf(mathlib.exp(12), float('inf'))
        self.assertHalf(mathlib.exp(1), constants.e)

    def test_trig(self):
        self.assertHalf(mathlib.sin(0), 0)
        self.assertHalf(mathlib.cos(0), 1)
        self.assertHalf(mathlib.tan(0), 0)
        self.assertHalf(mathlib.sinh(0), 0)
        self.assertHalf(mathlib.cosh(0), 1)
        self.assertHalf(mathlib.tanh(0), 0)
        self.assertHalf(mathlib.asin(0), 0)
        self.assertHalf(mathlib.acos(1), 0)
        self.assertHalf(mathlib.atan(0), 0)
        self.assertHalf(mathlib.asinh(0), 0)
        self.assertHalf(mathlib.acosh(1), 0)
        self.assertHalf(mathlib.atanh(0), 0)
        self.assertHalf(mathlib.atan2(0, -1), constants.pi)
        self.assertHalf(mathlib.acos(-1), constants.pi)
        self.assertAlmostEqual(float(mathlib.atan2(1, 1)), math.pi / 4, places=3)
        self.assertTrue(mathlib.asin(2).is_nan())

    def test_special(self):
        self.assertHalf(mathlib.erf(0), 0)
        self.assertHalf(mathlib.erfc(0), 1)
        self.assertHalf(mathlib.tgamma(5), 24)
        self.assertHalf(mathlib.lgamma(1), 0)
        self.assertHalf(mathlib.lgamma(2), 0)
        self.assertHalf(mathlib.beta(1, 1), 1)
        self.assertHalf(mathlib.beta(2, 3), 1 / 12)
        self.assertAlmostEqual(float(mathlib.expint(1)), 1.8951178, places=2)
        self.assertAlmostEqual(float(mathlib.riemann_zeta(2)), math.pi ** 2 / 6, places=2)

    def test_rounding(self):
        self.assertHalf(mathlib.floor(2.5), 2)
        self.assertHalf(mathlib.ceil(2.5), 3)
        self.assertHalf(mathlib.trunc(-2.5), -2)
        self.assertHalf(mathlib.round(2.5), 3)
        self.assertHalf(mathlib.round(-2.5), -3)
        self.assertHalf(mathlib.rint(2.5), 2)
        self.assertHalf(mathlib.nearbyint(3.5), 4)
        self.assertEqual(mathlib.floor(Half(-0.5)).bits, 0xbc00)
        self.assertEqual(mathlib.ceil(Half(-0.5)).bits, 0x8000)
        self.assertEqual(mathlib.trunc(Half(-0.4)).bits, 0x8000)
        self.assertEqual(mathlib.round(Half(-0.4)).bits, 0x8000)
        self.assertEqual(mathlib.floor(Half(0.5)).bits, 0x0000)

    def test_rounding_infinities(self):
        for func in [mathlib.ceil, mathlib.floor, mathlib.trunc,
                     mathlib.round, mathlib.rint, mathlib.nearbyint]:
            self.assertEqual(func(constants.infinity).bits, 0x7c00, msg=func.__name__)
            self.assertEqual(func(constants.negative_infinity).bits, 0xfc00, msg=func.__name__)
            self.assertEqual(func(constants.negative_zero).bits, 0x8000, msg=func.__name__)
            self.assertTrue(func(constants.nan).is_nan())

    def test_logb(self):
        self.assertHalf(mathlib.logb(8), 3)
        self.assertHalf(mathlib.logb(0.75), -1)
        self.assertHalf(mathlib.logb(Half(bits=0x0001)), -24)
        self.assertHalf(mathlib.logb(0), float('-inf'))
        self.assertHalf(mathlib.logb(constants.negative_infinity), float('inf'))

    def test_lerp(self):
        self.assertHalf(mathlib.lerp(0, 10, 0.5), 5)
        self.assertHalf(mathlib.lerp(1, 3, 1), 3)
        self.assertHalf(mathlib.lerp(1, 3, 0), 1)
        self.assertHalf(mathlib.lerp(1, 3, 2), 5)


class BitFunctionTest(TestCase):
    def test_fabs(self):
        self.assertEqual(mathlib.fabs(Half(-2)).bits, 0x4000)
        self.assertEqual(mathlib.fabs(Half(bits=0xfd01)).bits, 0x7d01)

    def test_copysign(self):
        self.assertEqual(mathlib.copysign(Half(1), Half(-0.0)).bits, 0xbc00)
        self.assertEqual(mathlib.copysign(Half(-1), Half(2)).bits, 0x3c00)
        self.assertEqual(mathlib.copysign(constants.nan, -1).bits, 0xfe00)

    def test_nextafter(self):
        self.assertEqual(mathlib.nextafter(Half(1), Half(2)).bits, 0x3c01)
        self.assertEqual(mathlib.nextafter(Half(1), Half(0)).bits, 0x3bff)
        self.assertEqual(mathlib.nextafter(Half(-1), Half(0)).bits, 0xbbff)
        self.assertEqual(mathlib.nextafter(Half(-1), Half(-2)).bits, 0xbc01)
        self.assertEqual(mathlib.nextafter(constants.zero, Half(1)).bits, 0x0001)
        self.assertEqual(mathlib.nextafter(constants.zero, Half(-1)).bits, 0x8001)
        self.assertEqual(mathlib.nextafter(Half(bits=0x8001), Half(1)).bits, 0x8000)
        self.assertEqual(mathlib.nextafter(constants.max, constants.infinity).bits, 0x7c00)
        self.assertEqual(mathlib.nextafter(constants.infinity, constants.zero).bits, 0x7bff)
        self.assertEqual(mathlib.nextafter(constants.max_subnormal, Half(1)).bits, 0x0400)
        self.assertEqual(mathlib.nextafter(Half(1), Half(1)).bits, 0x3c00)
        self.assertEqual(mathlib.nextafter(constants.zero, constants.negative_zero).bits, 0x8000)
        self.assertTrue(mathlib.nextafter(constants.nan, Half(1)).is_nan())
        self.assertTrue(mathlib.nextafter(Half(1), constants.nan).is_nan())

    def test_classify(self):
        self.assertTrue(mathlib.is_nan(constants.nan))
        self.assertTrue(mathlib.is_inf(constants.negative_infinity))
        self.assertTrue(mathlib.is_finite(constants.max))
        self.assertTrue(mathlib.is_normal(constants.min_positive))
        self.assertFalse(mathlib.is_normal(constants.max_subnormal))
        self.assertTrue(mathlib.is_positive(constants.zero))
        self.assertTrue(mathlib.is_negative(constants.negative_zero))
        self.assertTrue(mathlib.signbit(-constants.nan))
        self.assertTrue(mathlib.is_normal(1.0))
