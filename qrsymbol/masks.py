# -*- coding: utf-8 -*-
"""
QR Mask Pattern Module

The eight data mask patterns of ISO/IEC 18004:2015 table 10 and the
placement of the format and version information words.

Functions:
    apply_mask: XOR a mask pattern over the unreserved cells
    place_format_info: Write both copies of the 15-bit format word
    place_version_info: Write both copies of the 18-bit version word
"""

from typing import Callable, List, Tuple

from .matrix import ModuleGrid
from .tables import FORMAT_BITS, version_info_bits

MaskFunction = Callable[[int, int], bool]

# Indexed by mask pattern reference; (row, col) -> True inverts the module
MASK_FUNCTIONS: Tuple[MaskFunction, ...] = (
    lambda r, c: (r + c) % 2 == 0,
    lambda r, c: r % 2 == 0,
    lambda r, c: c % 3 == 0,
    lambda r, c: (r + c) % 3 == 0,
    lambda r, c: (r // 2 + c // 3) % 2 == 0,
    lambda r, c: (r * c) % 2 + (r * c) % 3 == 0,
    lambda r, c: ((r * c) % 2 + (r * c) % 3) % 2 == 0,
    lambda r, c: ((r + c) % 2 + (r * c) % 3) % 2 == 0,
)


def apply_mask(grid: ModuleGrid, reserved: List[List[bool]], mask: int) -> None:
    """
    Invert every unreserved module for which the mask function holds.

    Args:
        grid (ModuleGrid): Grid with data placed; modified in place
        reserved (List[List[bool]]): Reserved-cell mask
        mask (int): Mask pattern reference (0-7)
    """
    fn = MASK_FUNCTIONS[mask]
    for r in range(grid.size):
        for c in range(grid.size):
            if not reserved[r][c] and fn(r, c):
                grid.toggle(r, c)


def format_info_positions(size: int) -> Tuple[List[Tuple[int, int]], List[Tuple[int, int]]]:
    """
    Cell coordinates of both format word copies, indexed by bit (0 = LSB).

    Returns:
        Tuple[List, List]: (first copy around the top-left finder,
            second copy split between top-right and bottom-left)
    """
    first = [(i, 8) for i in range(6)] + [(7, 8), (8, 8), (8, 7)]
    first += [(8, 14 - i) for i in range(9, 15)]
    second = [(8, size - 1 - i) for i in range(8)]
    second += [(size - 15 + i, 8) for i in range(8, 15)]
    return first, second


def place_format_info(grid: ModuleGrid, mask: int) -> None:
    """Write the level L format word of `mask` into both reserved regions."""
    bits = FORMAT_BITS[mask]
    for positions in format_info_positions(grid.size):
        for i, (r, c) in enumerate(positions):
            grid[r, c] = (bits >> i) & 1 == 1


def place_version_info(grid: ModuleGrid, version: int) -> None:
    """
    Write the version word next to the top-right and bottom-left finders.

    Bit i goes to (i // 3, size - 11 + i % 3) and to its transpose. Versions
    below 7 carry no version information and are left untouched.
    """
    if version < 7:
        return
    bits = version_info_bits(version)
    size = grid.size
    for i in range(18):
        bit = (bits >> i) & 1 == 1
        r = i // 3
        c = size - 11 + i % 3
        grid[r, c] = bit
        grid[c, r] = bit
