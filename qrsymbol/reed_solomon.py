# -*- coding: utf-8 -*-
"""
Reed-Solomon Error Correction Module

Generator polynomial construction and systematic Reed-Solomon encoding over
GF(256), as used by QR codes (ISO/IEC 18004:2015 section 7.5.2).

Functions:
    generator_polynomial: Build the generator polynomial of a given degree
    encode_block: Compute the error correction codewords of a data block
"""

from functools import lru_cache
from typing import Iterable, Tuple

from .galois import EXP, gf_mul


@lru_cache(maxsize=None)
def generator_polynomial(ec_len: int) -> Tuple[int, ...]:
    """
    Build the generator polynomial (x - a^0)(x - a^1)...(x - a^(ec_len-1)).

    Coefficients are returned highest degree first, so the leading
    coefficient is always 1.

    Args:
        ec_len (int): Number of error correction codewords (polynomial degree)

    Returns:
        Tuple[int, ...]: ec_len + 1 coefficients

    Example:
        >>> generator_polynomial(2)
        (1, 3, 2)
    """
    poly = [1]
    for i in range(ec_len):
        product = [0] * (len(poly) + 1)
        for j, coeff in enumerate(poly):
            product[j] ^= coeff
            product[j + 1] ^= gf_mul(coeff, EXP[i])
        poly = product
    return tuple(poly)


def encode_block(data: Iterable[int], ec_len: int) -> bytes:
    """
    Compute the Reed-Solomon remainder of a data block.

    The data is treated as a polynomial multiplied by x^ec_len and divided by
    the generator polynomial; the division runs as a shift register of
    ec_len cells.

    Args:
        data (Iterable[int]): Data codewords
        ec_len (int): Number of error correction codewords to produce

    Returns:
        bytes: The ec_len error correction codewords

    Example:
        >>> encode_block(bytes([0x10, 0x20, 0x0C, 0x56, 0x61, 0x80, 0xEC, 0x11,
        ...                     0xEC, 0x11, 0xEC, 0x11, 0xEC, 0x11, 0xEC, 0x11]), 10).hex()
        'a524d4c1ed36c7872c55'
    """
    generator = generator_polynomial(ec_len)
    remainder = [0] * ec_len
    for byte in data:
        coeff = byte ^ remainder[0]
        del remainder[0]
        remainder.append(0)
        if coeff:
            for j in range(ec_len):
                remainder[j] ^= gf_mul(generator[j + 1], coeff)
    return bytes(remainder)
