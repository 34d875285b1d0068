"""Floating-point comparison for use inside test expressions."""

import math
from decimal import Decimal

EPSILON = 1e-4

_EPSILON = Decimal("1e-4")


def approx_equal(x: float, y: float) -> bool:
    """True iff ``x`` and ``y`` differ by strictly less than ``EPSILON``.

    The difference is taken between the decimal values the floats are written
    as, so ``approx_equal(1.0001, 1.0)`` sits exactly on the boundary and is
    False. Non-finite inputs fall back to plain float arithmetic.
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        return abs(x - y) < EPSILON
    return abs(Decimal(repr(float(x))) - Decimal(repr(float(y)))) < _EPSILON
