from __future__ import annotations

import itertools
from typing import Callable, Iterable

import pytest

from blockfall.game import BlockfallGame, PieceKind


class SequenceGenerator:
    """Deals the given kinds in order, repeating the sequence forever."""

    def __init__(self, kinds: Iterable[PieceKind]) -> None:
        self._kinds = itertools.cycle(list(kinds))

    def next_kind(self) -> PieceKind:
        return next(self._kinds)


@pytest.fixture
def make_game() -> Callable[..., BlockfallGame]:
    def _make(*kinds: PieceKind) -> BlockfallGame:
        return BlockfallGame(generator=SequenceGenerator(kinds or [PieceKind.T]))

    return _make


@pytest.fixture
def game(make_game) -> BlockfallGame:
    return make_game(PieceKind.T, PieceKind.I, PieceKind.O)
