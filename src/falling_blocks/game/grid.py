from __future__ import annotations

import logging

import numpy as np

from .pieces import Piece


logger = logging.getLogger(__name__)


class GameGrid:
    """Fixed-size playfield of locked cells.

    The grid uses 0 for empty cells and the piece color code (1..7) for filled
    cells. Row 0 is the top row. Cells of a piece above the top edge (negative
    rows) are legal while it is falling.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_valid_placement(self, piece: Piece) -> bool:
        for x, y in piece.cells():
            if x < 0 or x >= self.width or y >= self.height:
                return False
            if y >= 0 and self.grid[y, x] != 0:
                return False
        return True

    def lock(self, piece: Piece) -> None:
        """Write the piece color into the grid. Assumes a validated placement."""
        for x, y in piece.cells():
            if not self.is_inside(x, y):
                # rotation is not validated, so a resting piece may poke out
                logger.debug("Dropping out-of-grid cell (%d, %d) of %s", x, y, piece.kind.name)
                continue
            self.grid[y, x] = piece.color

    def clear_full_rows(self) -> int:
        full_rows = np.where(np.all(self.grid != 0, axis=1))[0]
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        # Remove full rows and add empty rows at the top
        survivors = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        self.grid = np.vstack((new_rows, survivors))
        return num

    def drop_distance(self, piece: Piece) -> int:
        """Rows ``piece`` can fall before the next position becomes invalid."""
        distance = 0
        while self.is_valid_placement(piece.translated(0, distance + 1)):
            distance += 1
        return distance

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
