from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np

from .pieces import BOARD_HEIGHT, BOARD_WIDTH, PieceKind


Coordinate = Tuple[int, int]

EMPTY = 0
_MAX_COLOR = max(PieceKind)


class GameGrid:
    """Fixed 10x20 grid of locked cells.

    The grid uses 0 for empty cells and the piece kind value (1..7) for
    filled cells, so a cell's value is also its color id. Row 0 is the top.
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(EMPTY)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, x: int, y: int) -> bool:
        return self.is_inside(x, y) and self.grid[y, x] != EMPTY

    def cell(self, x: int, y: int) -> int:
        if not self.is_inside(x, y):
            return EMPTY
        return int(self.grid[y, x])

    def set_cell(self, x: int, y: int, value: int) -> None:
        if not EMPTY <= value <= _MAX_COLOR:
            raise ValueError(f"color id out of range: {value}")
        if self.is_inside(x, y):
            self.grid[y, x] = value

    def fill_row(self, y: int, value: int) -> None:
        for x in range(self.width):
            self.set_cell(x, y, value)

    def can_place(self, cells: Iterable[Coordinate]) -> bool:
        # Rows above the board (y < 0) are rejected like any other out-of-bounds cell.
        for x, y in cells:
            if not self.is_inside(x, y):
                return False
            if self.grid[y, x] != EMPTY:
                return False
        return True

    def place(self, cells: Iterable[Coordinate], value: int) -> None:
        for x, y in cells:
            self.set_cell(x, y, value)

    def full_rows(self) -> np.ndarray:
        return np.where(np.all(self.grid != EMPTY, axis=1))[0]

    def clear_full_rows(self) -> int:
        """Remove every full row, shift the rest down and return the count."""
        full_rows = self.full_rows()
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        # Surviving rows keep their order; empty rows refill the top
        kept = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        self.grid = np.vstack((new_rows, kept))
        return num

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()

    def __str__(self) -> str:
        return "\n".join("".join("#" if cell else "." for cell in row) for row in self.grid)
