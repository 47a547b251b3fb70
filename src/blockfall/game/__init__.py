"""Game module for Blockfall.

Exports the engine and supporting classes:
- GameGrid: Locked-cell grid, placement checks and line clearing
- Piece, PieceKind: Piece catalog and movable piece instances
- ScoringRules: Line-clear table, level formula and drop intervals
- GravityTimer: Decides when the next automatic tick is due
- BlockfallGame: Engine state machine (move, rotate, hard drop, tick)
"""

from .grid import GameGrid
from .pieces import InvalidPieceError, Piece, PieceKind, color, shape
from .rules import ScoringRules
from .timing import GravityTimer
from .core import (
    Action,
    BlockfallGame,
    GameConfig,
    KICK_OFFSETS,
    Phase,
    PieceGenerator,
    RandomPieceGenerator,
)

__all__ = [
    "GameGrid",
    "InvalidPieceError",
    "Piece",
    "PieceKind",
    "color",
    "shape",
    "ScoringRules",
    "GravityTimer",
    "Action",
    "BlockfallGame",
    "GameConfig",
    "KICK_OFFSETS",
    "Phase",
    "PieceGenerator",
    "RandomPieceGenerator",
]
