# -*- coding: utf-8 -*-
"""
Galois Field GF(256) Module

Exponent and logarithm tables over GF(2^8) with the QR primitive polynomial
x^8 + x^4 + x^3 + x^2 + 1 (0x11D) and generator 2. The tables are built once
at import time and stored as tuples.

Functions:
    gf_mul: Multiply two field elements
"""

from typing import Tuple

PRIMITIVE_POLY = 0x11D


def _build_tables() -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    exp = [0] * 512
    log = [0] * 256
    x = 1
    for i in range(255):
        exp[i] = x
        log[x] = i
        x <<= 1
        if x & 0x100:
            x ^= PRIMITIVE_POLY
    # Doubled so LOG[a] + LOG[b] never needs a modulo
    for i in range(255, 512):
        exp[i] = exp[i - 255]
    return tuple(exp), tuple(log)


EXP, LOG = _build_tables()


def gf_mul(a: int, b: int) -> int:
    """
    Multiply two GF(256) elements using the log/exp tables.

    Args:
        a (int): Field element (0-255)
        b (int): Field element (0-255)

    Returns:
        int: Product in GF(256)

    Example:
        >>> gf_mul(2, 128)  # x * x^7 reduced by 0x11D
        29
    """
    if a == 0 or b == 0:
        return 0
    return EXP[LOG[a] + LOG[b]]
