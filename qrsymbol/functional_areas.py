# -*- coding: utf-8 -*-
"""
QR Code Functional Areas Module

Lays out the function patterns of a symbol according to ISO/IEC 18004:2015
section 6.3: finder patterns with their separators, timing patterns,
alignment patterns, the reserved format and version information regions,
and the fixed dark module.

Functions:
    compute_alignment_centers: Alignment pattern center coordinates
    build_function_patterns: Grid with every function pattern placed
    build_function_mask: Reserved-cell mask of a function pattern grid
"""

from typing import List

from .matrix import ModuleGrid
from .tables import ALIGNMENT_POSITIONS, get_version


def compute_alignment_centers(version: int) -> List[int]:
    """
    Return the alignment pattern center coordinates for a version.

    Centers are used both as row and column coordinates; every pair is a
    pattern center except the three that collide with finder patterns.
    Version 1 has no alignment patterns.

    Args:
        version (int): QR code version (1-40)

    Returns:
        List[int]: Center coordinates, ascending

    Example:
        >>> compute_alignment_centers(7)
        [6, 22, 38]
    """
    get_version(version)
    return list(ALIGNMENT_POSITIONS[version - 1])


def place_finder_pattern(grid: ModuleGrid, row: int, col: int) -> None:
    """
    Place a 7x7 finder pattern with its top-left corner at (row, col).

    The surrounding one-module separator is set light, clipped to the grid.
    """
    size = grid.size
    for dr in range(-1, 8):
        for dc in range(-1, 8):
            r, c = row + dr, col + dc
            if not (0 <= r < size and 0 <= c < size):
                continue
            separator = dr in (-1, 7) or dc in (-1, 7)
            border = dr in (0, 6) or dc in (0, 6)
            core = 2 <= dr <= 4 and 2 <= dc <= 4
            grid[r, c] = not separator and (border or core)


def place_timing_patterns(grid: ModuleGrid) -> None:
    # Row 6 and column 6 between the finder separators
    for i in range(8, grid.size - 8):
        grid.set_if_unset(6, i, i % 2 == 0)
        grid.set_if_unset(i, 6, i % 2 == 0)


def place_alignment_pattern(grid: ModuleGrid, row: int, col: int) -> None:
    """Place a 5x5 alignment pattern centered on (row, col)."""
    for dr in range(-2, 3):
        for dc in range(-2, 3):
            grid[row + dr, col + dc] = abs(dr) == 2 or abs(dc) == 2 or (dr == 0 and dc == 0)


def place_alignment_patterns(grid: ModuleGrid, version: int) -> None:
    size = grid.size
    centers = compute_alignment_centers(version)
    for cy in centers:
        for cx in centers:
            # Skip the three corners occupied by finder patterns
            if (cy <= 8 and cx <= 8) or (cy <= 8 and cx >= size - 8) or (cy >= size - 8 and cx <= 8):
                continue
            place_alignment_pattern(grid, cy, cx)


def reserve_format_area(grid: ModuleGrid) -> None:
    """
    Reserve both 15-bit format information regions with light placeholders.

    The first copy wraps the top-left finder along row 8 and column 8; the
    second is split between row 8 under the top-right finder and column 8
    beside the bottom-left finder.
    """
    size = grid.size
    for i in range(8):
        grid.set_if_unset(8, i, False)
        grid.set_if_unset(8, size - 1 - i, False)
        grid.set_if_unset(i, 8, False)
        grid.set_if_unset(size - 1 - i, 8, False)
    grid.set_if_unset(8, 8, False)


def reserve_version_area(grid: ModuleGrid, version: int) -> None:
    """Reserve the two 6x3 version information blocks (versions 7-40)."""
    if version < 7:
        return
    size = grid.size
    for i in range(18):
        r = i // 3
        c = size - 11 + i % 3
        grid.set_if_unset(r, c, False)
        grid.set_if_unset(c, r, False)


def place_dark_module(grid: ModuleGrid) -> None:
    # Always dark, never masked
    grid[grid.size - 8, 8] = True


def build_function_patterns(version: int) -> ModuleGrid:
    """
    Build a grid holding every function pattern of a version.

    Data cells are left UNSET; all other cells are set.

    Args:
        version (int): QR code version (1-40)

    Returns:
        ModuleGrid: Grid of side 4 * version + 17

    Example:
        >>> grid = build_function_patterns(1)
        >>> grid.size, grid.unset_count()
        (21, 208)
    """
    grid = ModuleGrid.for_version(version)
    size = grid.size
    place_finder_pattern(grid, 0, 0)
    place_finder_pattern(grid, 0, size - 7)
    place_finder_pattern(grid, size - 7, 0)
    place_timing_patterns(grid)
    place_alignment_patterns(grid, version)
    reserve_format_area(grid)
    reserve_version_area(grid, version)
    place_dark_module(grid)
    return grid


def build_function_mask(grid: ModuleGrid) -> List[List[bool]]:
    """
    Record which cells belong to function patterns.

    Must be called on the grid returned by build_function_patterns, before
    any data is placed: every cell already set is reserved.

    Returns:
        List[List[bool]]: reserved[r][c] is True for function modules
    """
    return [[grid.is_set(r, c) for c in range(grid.size)] for r in range(grid.size)]
