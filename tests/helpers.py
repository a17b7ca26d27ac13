from __future__ import annotations

import numpy as np

from falling_blocks.game import GameConfig, SequencePieceSource, TetrisGame, TetrominoType


def make_game(*kinds: TetrominoType, **config) -> TetrisGame:
    source = SequencePieceSource(kinds or (TetrominoType.O,))
    return TetrisGame(GameConfig(**config), piece_source=source)


def fill_row(grid: np.ndarray, row: int, gaps=()) -> None:
    grid[row, :] = 1
    for x in gaps:
        grid[row, x] = 0


def fire_tick(game: TetrisGame) -> None:
    """Tick just past the drop interval so the threshold check fires."""
    game.tick(game.last_drop_time + game.drop_interval_ms + 1)
