from __future__ import annotations

import numpy as np

from pyvec2.types import Number


def ieee_div(a: Number, b: Number) -> float:
    """
    Divides ``a`` by ``b`` following IEEE 754 rules instead of raising
    :class:`ZeroDivisionError`: ``x / 0`` is ``±inf`` and ``0 / 0`` is ``nan``.

    Non-zero divisors use plain Python division, so ``int / int`` is rounded
    once, exactly like ``a / b``.

    Args:
        a: The dividend.
        b: The divisor.

    Returns:
        The quotient as a Python float.
    """
    if b != 0:
        return float(a / b)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(a), np.float64(b)))
