"""Piece sources feeding the session its next tetromino type."""

from __future__ import annotations

import itertools
import random
from typing import Iterable, Optional, Protocol

from .pieces import TetrominoType


class PieceSource(Protocol):
    def next_kind(self) -> TetrominoType: ...

    def reseed(self, seed: Optional[int]) -> None: ...


class RandomPieceSource:
    """Uniform choice over the seven types."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def next_kind(self) -> TetrominoType:
        return self.rng.choice(list(TetrominoType))

    def reseed(self, seed: Optional[int]) -> None:
        self.rng.seed(seed)


class SequencePieceSource:
    """Replays a fixed list of types, optionally forever.

    A non-repeating source raises ``StopIteration`` once the list runs out.
    """

    def __init__(self, kinds: Iterable[TetrominoType], repeat: bool = True) -> None:
        self.kinds = [TetrominoType(k) for k in kinds]
        if not self.kinds:
            raise ValueError("SequencePieceSource needs at least one piece type")
        self.repeat = repeat
        self._it = self._make_iter()

    def _make_iter(self):
        return itertools.cycle(self.kinds) if self.repeat else iter(self.kinds)

    def next_kind(self) -> TetrominoType:
        return next(self._it)

    def reseed(self, seed: Optional[int]) -> None:
        # deterministic by construction; restart from the beginning
        self._it = self._make_iter()
