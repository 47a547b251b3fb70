from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import List, Tuple

import numpy as np


BOARD_WIDTH = 10
BOARD_HEIGHT = 20

ROTATION_COUNT = 4
MASK_SIZE = 4

SPAWN_X = BOARD_WIDTH // 2 - 2
SPAWN_Y = 0


class InvalidPieceError(ValueError):
    """Raised for an unknown piece kind or an out-of-range rotation index."""


class PieceKind(IntEnum):
    # Values double as color ids stored in the grid.
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Mask = np.ndarray


def _masks(*layouts: str) -> np.ndarray:
    rows = [[[ch == "#" for ch in line] for line in layout.split()] for layout in layouts]
    return np.array(rows, dtype=np.bool_)


# One string per rotation state (0..3), holding the mask's four rows left to right.
MASKS = {
    PieceKind.I: _masks(
        "....  ####  ....  ....",
        "..#.  ..#.  ..#.  ..#.",
        "....  ####  ....  ....",
        "..#.  ..#.  ..#.  ..#.",
    ),
    PieceKind.O: _masks(
        ".##.  .##.  ....  ....",
        ".##.  .##.  ....  ....",
        ".##.  .##.  ....  ....",
        ".##.  .##.  ....  ....",
    ),
    PieceKind.T: _masks(
        ".#..  ###.  ....  ....",
        ".#..  .##.  .#..  ....",
        "....  ###.  .#..  ....",
        ".#..  ##..  .#..  ....",
    ),
    PieceKind.S: _masks(
        ".##.  ##..  ....  ....",
        ".#..  .##.  ..#.  ....",
        ".##.  ##..  ....  ....",
        ".#..  .##.  ..#.  ....",
    ),
    PieceKind.Z: _masks(
        "##..  .##.  ....  ....",
        "..#.  .##.  .#..  ....",
        "##..  .##.  ....  ....",
        "..#.  .##.  .#..  ....",
    ),
    PieceKind.J: _masks(
        "#...  ###.  ....  ....",
        ".##.  .#..  .#..  ....",
        "....  ###.  ..#.  ....",
        ".#..  .#..  ##..  ....",
    ),
    PieceKind.L: _masks(
        "..#.  ###.  ....  ....",
        ".#..  .#..  .##.  ....",
        "....  ###.  #...  ....",
        "##..  .#..  .#..  ....",
    ),
}

for _mask in MASKS.values():
    _mask.setflags(write=False)


def to_kind(kind: object) -> PieceKind:
    if isinstance(kind, bool):
        raise InvalidPieceError(f"unknown piece kind: {kind!r}")
    try:
        return PieceKind(kind)
    except ValueError:
        raise InvalidPieceError(f"unknown piece kind: {kind!r}") from None


def shape(kind: PieceKind, rotation: int) -> Mask:
    """Return the read-only 4x4 occupancy mask of ``kind`` at ``rotation``.

    Rotation is not wrapped here; callers normalize with ``% ROTATION_COUNT``.
    """
    kind = to_kind(kind)
    if isinstance(rotation, bool) or not isinstance(rotation, (int, np.integer)):
        raise InvalidPieceError(f"rotation must be an int, got {rotation!r}")
    if not 0 <= rotation < ROTATION_COUNT:
        raise InvalidPieceError(f"rotation out of range: {rotation}")
    return MASKS[kind][rotation]


def color(kind: PieceKind) -> int:
    return int(to_kind(kind))


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    rotation: int = 0  # 0..3
    x: int = SPAWN_X
    y: int = SPAWN_Y

    @classmethod
    def spawn(cls, kind: PieceKind) -> "Piece":
        return cls(to_kind(kind), 0, SPAWN_X, SPAWN_Y)

    @property
    def color(self) -> int:
        return color(self.kind)

    def mask(self) -> Mask:
        return shape(self.kind, self.rotation)

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self, delta: int) -> "Piece":
        return replace(self, rotation=(self.rotation + delta) % ROTATION_COUNT)

    def cells(self) -> List[Tuple[int, int]]:
        """Absolute (x, y) board cells covered by the piece."""
        rows, cols = np.nonzero(self.mask())
        return [(self.x + int(dx), self.y + int(dy)) for dy, dx in zip(rows, cols)]
