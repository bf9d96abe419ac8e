# -*- coding: utf-8 -*-
"""
QR Module Matrix Module

Two representations of the symbol grid:

- ModuleGrid: the mutable tri-state grid used while the symbol is built.
  Every cell is Module.UNSET, Module.LIGHT or Module.DARK.
- Matrix: the immutable dark/light result returned by encode().
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Tuple

import numpy as np


class Module(IntEnum):
    UNSET = -1
    LIGHT = 0
    DARK = 1


class ModuleGrid:
    """Square tri-state grid of side 4 * version + 17."""

    def __init__(self, size: int):
        self.size = size
        self.cells: List[List[Module]] = [[Module.UNSET] * size for _ in range(size)]

    @classmethod
    def for_version(cls, version: int) -> "ModuleGrid":
        return cls(4 * version + 17)

    def __getitem__(self, pos: Tuple[int, int]) -> Module:
        row, col = pos
        return self.cells[row][col]

    def __setitem__(self, pos: Tuple[int, int], value) -> None:
        row, col = pos
        if not isinstance(value, Module):
            value = Module.DARK if value else Module.LIGHT
        self.cells[row][col] = value

    def is_set(self, row: int, col: int) -> bool:
        return self.cells[row][col] is not Module.UNSET

    def set_if_unset(self, row: int, col: int, dark: bool) -> None:
        if self.cells[row][col] is Module.UNSET:
            self[row, col] = dark

    def toggle(self, row: int, col: int) -> None:
        cell = self.cells[row][col]
        if cell is Module.UNSET:
            raise ValueError(f"Cannot toggle unset module at ({row}, {col})")
        self.cells[row][col] = Module.LIGHT if cell is Module.DARK else Module.DARK

    def clone(self) -> "ModuleGrid":
        copy = ModuleGrid(self.size)
        copy.cells = [list(row) for row in self.cells]
        return copy

    def unset_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell is Module.UNSET)

    def to_rows(self) -> List[List[bool]]:
        """
        Dark/light view of a finished grid.

        Raises:
            ValueError: If any module is still unset
        """
        rows = []
        for r, row in enumerate(self.cells):
            out = []
            for c, cell in enumerate(row):
                if cell is Module.UNSET:
                    raise ValueError(f"Module ({r}, {c}) was never set")
                out.append(cell is Module.DARK)
            rows.append(out)
        return rows


@dataclass(frozen=True)
class Matrix:
    """
    Finished QR symbol.

    Attributes:
        version (int): Symbol version (1-40)
        mask (int): Mask pattern applied (0-7)
        penalty (int): Penalty score of the applied mask
        modules (Tuple[Tuple[bool, ...], ...]): Rows of modules, True = dark
    """

    version: int
    mask: int
    penalty: int
    modules: Tuple[Tuple[bool, ...], ...]

    @classmethod
    def from_grid(cls, grid: ModuleGrid, version: int, mask: int, penalty: int) -> "Matrix":
        return cls(version, mask, penalty, tuple(tuple(row) for row in grid.to_rows()))

    @property
    def size(self) -> int:
        return len(self.modules)

    @property
    def dark_count(self) -> int:
        return sum(sum(row) for row in self.modules)

    def __len__(self) -> int:
        return len(self.modules)

    def __iter__(self) -> Iterator[Tuple[bool, ...]]:
        return iter(self.modules)

    def __getitem__(self, row: int) -> Tuple[bool, ...]:
        return self.modules[row]

    def to_array(self) -> np.ndarray:
        """Boolean numpy array of shape (size, size)."""
        return np.array(self.modules, dtype=bool)
