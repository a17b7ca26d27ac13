from __future__ import annotations

import pytest

from falling_blocks.game import RandomPieceSource, SequencePieceSource, TetrominoType


def test_random_source_is_reproducible() -> None:
    a = RandomPieceSource(42)
    b = RandomPieceSource(42)
    assert [a.next_kind() for _ in range(20)] == [b.next_kind() for _ in range(20)]


def test_random_source_reseed() -> None:
    src = RandomPieceSource(5)
    first = [src.next_kind() for _ in range(10)]
    src.reseed(5)
    assert [src.next_kind() for _ in range(10)] == first


def test_sequence_source_cycles() -> None:
    src = SequencePieceSource([TetrominoType.I, TetrominoType.O])
    assert [src.next_kind() for _ in range(5)] == [
        TetrominoType.I, TetrominoType.O, TetrominoType.I, TetrominoType.O, TetrominoType.I,
    ]


def test_sequence_source_without_repeat_runs_out() -> None:
    src = SequencePieceSource([TetrominoType.L], repeat=False)
    assert src.next_kind() is TetrominoType.L
    with pytest.raises(StopIteration):
        src.next_kind()
    src.reseed(None)
    assert src.next_kind() is TetrominoType.L


def test_sequence_source_rejects_empty() -> None:
    with pytest.raises(ValueError):
        SequencePieceSource([])
