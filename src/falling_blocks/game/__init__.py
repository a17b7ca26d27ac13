"""Game module for falling_blocks.

Exports the core game engine and supporting classes:
- GameGrid: Board of locked cells, collision checks and line clearing
- Piece: Immutable tetromino value with rotation and translation
- TetrominoType: Enum of available piece types
- ScoringRules: Score and level/speed progression
- TetrisGame: Session state machine driven by ticks and commands
"""

from .grid import GameGrid
from .pieces import COLOR_NAMES, Piece, TetrominoType, shape_for
from .randomizer import PieceSource, RandomPieceSource, SequencePieceSource
from .rules import ScoringRules
from .core import Action, GameConfig, GameSnapshot, GameState, TetrisGame

__all__ = [
    "GameGrid",
    "Piece",
    "TetrominoType",
    "COLOR_NAMES",
    "shape_for",
    "PieceSource",
    "RandomPieceSource",
    "SequencePieceSource",
    "ScoringRules",
    "Action",
    "GameConfig",
    "GameSnapshot",
    "GameState",
    "TetrisGame",
]
