"""General utilities, such as exception classes."""


# halffp-specific exceptions

class HalfError(Exception):
    """Base halffp error."""

class ParseError(HalfError, ValueError):
    """Malformed text that cannot be read as a half-precision value."""


# Useful things

def bitmask(n: int) -> int:
    """Produces a bitmask of n 1s if n is positive, or n 0s if n is negative."""
    if n >= 0:
        return (1 << n) - 1
    else:
        return -1 << -n
