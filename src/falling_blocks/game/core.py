from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Union

import numpy as np

from .grid import GameGrid
from .pieces import Piece
from .randomizer import PieceSource, RandomPieceSource
from .rules import ScoringRules


logger = logging.getLogger(__name__)


class Action(IntEnum):
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    MOVE_DOWN = 2
    ROTATE = 3
    HARD_DROP = 4
    HOLD = 5
    RESET = 6


class GameState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    initial_drop_interval_ms: float = 1000.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid must be at least 1x1, got {self.width}x{self.height}")
        if self.initial_drop_interval_ms <= 0:
            raise ValueError("initial_drop_interval_ms must be positive")


@dataclass(frozen=True, eq=False)
class GameSnapshot:
    """Read-only view of a session for renderers."""

    grid: np.ndarray
    active: Piece
    next: Piece
    score: int
    lines_cleared: int
    level: int
    game_over: bool


class TetrisGame:
    """Falling-block game session.

    The host loop calls :meth:`tick` once per frame with a non-decreasing
    millisecond timestamp and forwards player input through :meth:`apply`.
    Only the tick path locks pieces.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        piece_source: Optional[PieceSource] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.piece_source: PieceSource = piece_source or RandomPieceSource(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.state = GameState.RUNNING
        self.score = 0
        self.lines_cleared_total = 0
        self.level = 0
        self.drop_interval_ms = self.config.initial_drop_interval_ms
        self.last_drop_time = 0.0
        self.active_piece = self._random_piece()
        self.next_piece = self._random_piece()

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.piece_source.reseed(seed)
        self.grid.reset()
        self.state = GameState.RUNNING
        self.score = 0
        self.lines_cleared_total = 0
        self.level = 0
        self.drop_interval_ms = self.config.initial_drop_interval_ms
        self.last_drop_time = 0.0
        self.active_piece = self._random_piece()
        self.next_piece = self._random_piece()
        logger.info("Game reset")

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def _random_piece(self) -> Piece:
        return Piece.spawn(self.piece_source.next_kind(), self.grid.width)

    # -- clock feed -------------------------------------------------------

    def tick(self, timestamp: float) -> None:
        if self.game_over:
            return
        if timestamp - self.last_drop_time <= self.drop_interval_ms:
            return
        self.last_drop_time = timestamp
        moved = self.active_piece.translated(0, 1)
        if self.grid.is_valid_placement(moved):
            self.active_piece = moved
        else:
            self._lock_piece()

    def _lock_piece(self) -> None:
        locked = self.active_piece
        self.grid.lock(locked)
        logger.debug("Locked %s at (%d, %d)", locked.kind.name, locked.x, locked.y)

        self.active_piece = self.next_piece
        self.next_piece = self._random_piece()
        if not self.grid.is_valid_placement(self.active_piece):
            self.state = GameState.GAME_OVER
            logger.info("Game over: score=%d lines=%d level=%d", self.score, self.lines_cleared_total, self.level)
            return

        lines = self.grid.clear_full_rows()
        if lines:
            logger.debug("Cleared %d row(s)", lines)
        self.score += self.rules.score_for_lines(lines)
        self.lines_cleared_total += lines
        if self.lines_cleared_total >= self.rules.level_threshold(self.level):
            self.level += 1
            self.drop_interval_ms = self.rules.next_drop_interval(self.drop_interval_ms)
            logger.info("Level %d, drop interval %.1f ms", self.level, self.drop_interval_ms)

    # -- command feed -----------------------------------------------------

    def apply(self, action: Union[Action, int]) -> None:
        try:
            action = Action(action)
        except ValueError:
            logger.debug("Ignoring unknown command %r", action)
            return

        if action == Action.RESET:
            self.reset()
            return
        if self.game_over:
            return

        if action == Action.MOVE_LEFT:
            self._move(-1, 0)
        elif action == Action.MOVE_RIGHT:
            self._move(1, 0)
        elif action == Action.MOVE_DOWN:
            self._move(0, 1)
        elif action == Action.ROTATE:
            self._rotate()
        elif action == Action.HARD_DROP:
            self.hard_drop()
        elif action == Action.HOLD:
            pass

    def _move(self, dx: int, dy: int) -> None:
        moved = self.active_piece.translated(dx, dy)
        if self.grid.is_valid_placement(moved):
            self.active_piece = moved

    def _accept_rotation(self, rotated: Piece) -> bool:
        # Rotation is applied even into walls or locked cells. Return
        # self.grid.is_valid_placement(rotated) to validate it like moves.
        return True

    def _rotate(self) -> None:
        rotated = self.active_piece.rotated()
        if self._accept_rotation(rotated):
            self.active_piece = rotated

    def hard_drop(self) -> int:
        """Slide the active piece to its resting row; the next tick locks it."""
        distance = self.grid.drop_distance(self.active_piece)
        if distance:
            self.active_piece = self.active_piece.translated(0, distance)
        return distance

    # -- render feed ------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            grid=self.grid.clone_state(),
            active=self.active_piece,
            next=self.next_piece,
            score=self.score,
            lines_cleared=self.lines_cleared_total,
            level=self.level,
            game_over=self.game_over,
        )

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.grid.clone_state()
        if not self.game_over:
            for x, y in self.active_piece.cells():
                if self.grid.is_inside(x, y):
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -self.active_piece.color
        return state
