"""Package-wide settings, read once from the environment at import time.

HALFFP_DEBUG      if set to a true value (1, true, yes, on), str() of a Half
                  also shows its bit pattern.
HALFFP_BYTEORDER  'little' or 'big': default byte order used when half
                  values are serialized to or read from bytes.

Both can also be changed at runtime by assigning to the module attributes.
"""

import os


byteorders = ('little', 'big')

def env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')

def check_byteorder(order=None):
    """Normalize a byte order name; None means the configured default."""
    if order is None:
        order = byteorder
    order = str(order).strip().lower()
    if order not in byteorders:
        raise ValueError('unknown byte order {}, expected one of {}'
                         .format(repr(order), repr(byteorders)))
    return order


debug_mode = env_flag('HALFFP_DEBUG')
byteorder = os.environ.get('HALFFP_BYTEORDER', 'little')
