from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Protocol, Tuple

import numpy as np

from .grid import GameGrid
from .pieces import Piece, PieceKind, to_kind
from .rules import ScoringRules


logger = logging.getLogger(__name__)

# Tried in order after a rotation; the first offset that fits wins.
KICK_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, 0),
    (-1, 0),
    (1, 0),
    (0, -1),
    (-2, 0),
    (2, 0),
    (0, -2),
)


class Phase(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Action(IntEnum):
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    SOFT_DROP = 2
    ROTATE_CW = 3
    ROTATE_CCW = 4
    HARD_DROP = 5
    PAUSE = 6
    QUIT = 7
    NONE = 8


class PieceGenerator(Protocol):
    def next_kind(self) -> PieceKind:
        ...


class RandomPieceGenerator:
    """Uniform choice over the seven kinds, seeded once at construction."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)
        self._kinds = list(PieceKind)

    def next_kind(self) -> PieceKind:
        return self.rng.choice(self._kinds)


@dataclass
class GameConfig:
    random_seed: Optional[int] = None


class BlockfallGame:
    """Falling-block game engine.

    Owns the grid, the active piece, the queued next kind and the
    score/lines counters. Every operation either commits fully or leaves
    the state untouched; blocked moves are reported through return values.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        generator: Optional[PieceGenerator] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.generator: PieceGenerator = generator or RandomPieceGenerator(self.config.random_seed)
        self.grid = GameGrid()
        self.score = 0
        self.lines_cleared = 0
        self.game_over = False
        self.paused = False
        self.running = True
        self.pieces_spawned = 0
        self.current: Piece = Piece.spawn(PieceKind.I)
        self.next_kind: PieceKind = PieceKind.I
        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        self.grid.reset()
        self.score = 0
        self.lines_cleared = 0
        self.game_over = False
        self.paused = False
        self.running = True
        self.pieces_spawned = 0
        first = self.generator.next_kind()
        self.next_kind = to_kind(self.generator.next_kind())
        self.spawn(first)
        logger.info("New game: current=%s next=%s", self.current.kind.name, self.next_kind.name)

    def spawn(self, kind: PieceKind) -> bool:
        """Make a fresh ``kind`` piece current; a blocked spawn ends the game."""
        piece = Piece.spawn(kind)
        if self.game_over:
            return False
        if not self.is_valid_placement(piece):
            self.game_over = True
            logger.info("No room to spawn %s, game over (score=%d)", piece.kind.name, self.score)
            return False
        self.current = piece
        self.pieces_spawned += 1
        return True

    def set_next_kind(self, kind: PieceKind) -> None:
        self.next_kind = to_kind(kind)

    def quit(self) -> None:
        self.running = False

    def toggle_pause(self) -> Phase:
        if not self.game_over:
            self.paused = not self.paused
        return self.phase

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def phase(self) -> Phase:
        if self.game_over:
            return Phase.GAME_OVER
        if self.paused:
            return Phase.PAUSED
        return Phase.PLAYING

    @property
    def level(self) -> int:
        return self.rules.level_for_lines(self.lines_cleared)

    @property
    def drop_interval_ms(self) -> int:
        return self.rules.drop_interval_ms(self.level)

    def cell(self, x: int, y: int) -> int:
        return self.grid.cell(x, y)

    def is_valid_placement(self, piece: Piece) -> bool:
        return self.grid.can_place(piece.cells())

    # ------------------------------------------------------------------
    # Player and gravity operations
    # ------------------------------------------------------------------
    def move(self, dx: int, dy: int) -> bool:
        if self.phase is not Phase.PLAYING:
            return False
        candidate = self.current.moved(dx, dy)
        if not self.is_valid_placement(candidate):
            return False
        self.current = candidate
        return True

    def soft_drop(self) -> bool:
        return self.move(0, 1)

    def rotate(self, clockwise: bool = True) -> bool:
        if self.phase is not Phase.PLAYING:
            return False
        rotated = self.current.rotated(1 if clockwise else -1)
        for dx, dy in KICK_OFFSETS:
            candidate = rotated.moved(dx, dy)
            if self.is_valid_placement(candidate):
                self.current = candidate
                return True
        return False

    def hard_drop(self) -> int:
        """Drop the piece as far as it goes, lock it and return the distance."""
        if self.phase is not Phase.PLAYING:
            return 0
        distance = 0
        while self.move(0, 1):
            distance += 1
        self.score += self.rules.score_for_hard_drop(distance)
        self._lock_piece()
        return distance

    def tick(self) -> bool:
        """One gravity step. Returns True if the piece fell, False if it locked."""
        if self.phase is not Phase.PLAYING:
            return False
        if self.move(0, 1):
            return True
        self._lock_piece()
        return False

    def apply(self, action: Action) -> bool:
        if action == Action.PAUSE:
            return self.toggle_pause() is not Phase.GAME_OVER
        if action == Action.QUIT:
            self.quit()
            return True
        if action == Action.NONE or self.phase is not Phase.PLAYING:
            return False

        if action == Action.MOVE_LEFT:
            return self.move(-1, 0)
        if action == Action.MOVE_RIGHT:
            return self.move(1, 0)
        if action == Action.SOFT_DROP:
            return self.soft_drop()
        if action == Action.ROTATE_CW:
            return self.rotate(clockwise=True)
        if action == Action.ROTATE_CCW:
            return self.rotate(clockwise=False)
        if action == Action.HARD_DROP:
            self.hard_drop()
            return True
        return False

    def _lock_piece(self) -> int:
        piece = self.current
        self.grid.place(piece.cells(), piece.color)
        lines = self.grid.clear_full_rows()
        if lines:
            # Scored at the level in force before these lines count
            self.score += self.rules.score_for_lines(lines, self.level)
            self.lines_cleared += lines
            logger.debug("Cleared %d line(s), total=%d level=%d", lines, self.lines_cleared, self.level)
        logger.debug("Locked %s at (%d, %d) rotation %d", piece.kind.name, piece.x, piece.y, piece.rotation)

        kind, self.next_kind = self.next_kind, to_kind(self.generator.next_kind())
        if not self.spawn(kind):
            logger.debug("Lock of %s ended the game", piece.kind.name)
        return lines

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid; negative values mark the falling piece
        state = self.grid.clone_state()
        if not self.game_over:
            for x, y in self.current.cells():
                if self.grid.is_inside(x, y):
                    state[y, x] = -int(self.current.kind)
        return state
