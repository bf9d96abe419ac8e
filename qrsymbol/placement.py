# -*- coding: utf-8 -*-
"""
QR Data Placement Module

Places the codeword stream into the data region of the symbol following
the two-column zig-zag of ISO/IEC 18004:2015 section 7.7.3.

Functions:
    data_module_coords: Data cell coordinates in placement order
    place_data: Write codeword bits into a grid
"""

from typing import List, Tuple

from .matrix import ModuleGrid


def data_module_coords(size: int, reserved: List[List[bool]]) -> List[Tuple[int, int]]:
    """
    Get coordinates of non-functional modules in standard QR placement order.

    Column pairs are visited from the right edge leftwards, skipping the
    vertical timing pattern in column 6. The rightmost pair is walked upwards
    and the direction alternates on every pair. Within a pair the right
    column comes first.

    Args:
        size (int): QR code size in modules
        reserved (List[List[bool]]): Reserved-cell mask

    Returns:
        List[Tuple[int, int]]: (row, col) coordinates in placement order
    """
    coords = []
    upward = True
    col = size - 1

    while col > 0:
        if col == 6:
            col -= 1

        for i in range(size):
            r = (size - 1 - i) if upward else i
            for c in (col, col - 1):
                if not reserved[r][c]:
                    coords.append((r, c))

        upward = not upward
        col -= 2

    return coords


def place_data(grid: ModuleGrid, reserved: List[List[bool]], codewords: bytes) -> int:
    """
    Write the codeword stream into the unreserved cells of a grid.

    Bits are consumed MSB first. Cells left over once the stream is
    exhausted (remainder bits) are set light.

    Args:
        grid (ModuleGrid): Grid with function patterns placed
        reserved (List[List[bool]]): Reserved-cell mask of that grid
        codewords (bytes): Interleaved codeword stream

    Returns:
        int: Number of remainder cells filled with light modules
    """
    coords = data_module_coords(grid.size, reserved)
    total_bits = len(codewords) * 8
    if total_bits > len(coords):
        raise ValueError(
            f"Codeword stream of {total_bits} bits does not fit in {len(coords)} data modules"
        )
    for bit_index, (r, c) in enumerate(coords):
        if bit_index < total_bits:
            grid[r, c] = bool((codewords[bit_index >> 3] >> (7 - (bit_index & 7))) & 1)
        else:
            grid[r, c] = False
    return len(coords) - total_bits
