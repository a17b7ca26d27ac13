from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray


def _frozen(rows: List[List[int]]) -> Shape:
    arr = np.array(rows, dtype=np.int8)
    arr.setflags(write=False)
    return arr


def _rot90(shape: Shape) -> Shape:
    # transpose then reverse each row == clockwise quarter turn
    rotated = np.ascontiguousarray(np.rot90(shape, 1, axes=(1, 0)))
    rotated.setflags(write=False)
    return rotated


BASE_SHAPES = {
    TetrominoType.I: _frozen([[1, 1, 1, 1]]),
    TetrominoType.O: _frozen([[1, 1], [1, 1]]),
    TetrominoType.T: _frozen([[0, 1, 0], [1, 1, 1]]),
    TetrominoType.S: _frozen([[0, 1, 1], [1, 1, 0]]),
    TetrominoType.Z: _frozen([[1, 1, 0], [0, 1, 1]]),
    TetrominoType.J: _frozen([[1, 0, 0], [1, 1, 1]]),
    TetrominoType.L: _frozen([[0, 0, 1], [1, 1, 1]]),
}

COLOR_NAMES = {
    TetrominoType.I: "cyan",
    TetrominoType.O: "yellow",
    TetrominoType.T: "purple",
    TetrominoType.S: "green",
    TetrominoType.Z: "red",
    TetrominoType.J: "blue",
    TetrominoType.L: "orange",
}


def shape_for(kind: TetrominoType) -> Tuple[Shape, int]:
    """Return the spawn-orientation matrix and the color code for ``kind``.

    The color code is what gets written into the board grid; it is the integer
    value of the type so that 0 stays free for empty cells.
    """
    kind = TetrominoType(kind)
    return BASE_SHAPES[kind], int(kind)


@dataclass(frozen=True, eq=False)
class Piece:
    """A placed tetromino: shape in its current rotation plus top-left anchor.

    Pieces are values. ``rotated`` and ``translated`` build new instances and
    never touch the receiver; none of them check the board.
    """

    kind: TetrominoType
    shape: Shape
    color: int
    x: int
    y: int

    @classmethod
    def spawn(cls, kind: TetrominoType, grid_width: int) -> "Piece":
        shape, color = shape_for(kind)
        return cls(TetrominoType(kind), shape, color, grid_width // 2 - 1, 0)

    def rotated(self) -> "Piece":
        return Piece(self.kind, _rot90(self.shape), self.color, self.x, self.y)

    def translated(self, dx: int, dy: int) -> "Piece":
        return Piece(self.kind, self.shape, self.color, self.x + dx, self.y + dy)

    def cells(self) -> List[Tuple[int, int]]:
        """Absolute (x, y) coordinates of every occupied cell."""
        h, w = self.shape.shape
        cells: List[Tuple[int, int]] = []
        for dy in range(h):
            for dx in range(w):
                if self.shape[dy, dx]:
                    cells.append((self.x + dx, self.y + dy))
        return cells

    @property
    def bottom_row(self) -> int:
        return max(y for _, y in self.cells())

    @property
    def color_name(self) -> str:
        return COLOR_NAMES[self.kind]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return (
            self.kind == other.kind
            and self.color == other.color
            and self.x == other.x
            and self.y == other.y
            and np.array_equal(self.shape, other.shape)
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.x, self.y, self.shape.tobytes(), self.shape.shape))
