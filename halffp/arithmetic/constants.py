"""Named binary16 constants, as literal bit patterns."""

from .half import Half


infinity = Half(bits=0x7c00)
negative_infinity = Half(bits=0xfc00)
nan = Half(bits=0x7e00)

# 65504
max = Half(bits=0x7bff)
# -65504, the most negative finite value
lowest = Half(bits=0xfbff)
# 2**-14 ~= 6.1035e-05
min_positive = Half(bits=0x0400)
# 2**-24 ~= 5.9605e-08
min_positive_subnormal = Half(bits=0x0001)
# 1023 * 2**-24 ~= 6.0976e-05
max_subnormal = Half(bits=0x03ff)

one = Half(bits=0x3c00)
zero = Half(bits=0x0000)
negative_zero = Half(bits=0x8000)
# 2.71875
e = Half(bits=0x4170)
# 3.140625
pi = Half(bits=0x4248)
