import numpy as np
import pytest

from blockfall.game import InvalidPieceError, Piece, PieceKind, color, shape
from blockfall.game.pieces import SPAWN_X, SPAWN_Y


@pytest.mark.parametrize("kind", list(PieceKind))
def test_every_rotation_has_four_cells(kind):
    for rotation in range(4):
        mask = shape(kind, rotation)
        assert mask.shape == (4, 4)
        assert int(mask.sum()) == 4


def test_o_piece_is_identical_in_every_rotation():
    first = shape(PieceKind.O, 0)
    for rotation in range(1, 4):
        assert np.array_equal(shape(PieceKind.O, rotation), first)


def test_i_piece_alternates_horizontal_and_vertical():
    horizontal = shape(PieceKind.I, 0)
    vertical = shape(PieceKind.I, 1)
    assert horizontal[1].all() and horizontal.sum() == 4
    assert vertical[:, 2].all() and vertical.sum() == 4
    assert np.array_equal(shape(PieceKind.I, 2), horizontal)
    assert np.array_equal(shape(PieceKind.I, 3), vertical)


def test_t_piece_layouts():
    assert shape(PieceKind.T, 0).astype(int).tolist() == [
        [0, 1, 0, 0],
        [1, 1, 1, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]
    assert shape(PieceKind.T, 3).astype(int).tolist() == [
        [0, 1, 0, 0],
        [1, 1, 0, 0],
        [0, 1, 0, 0],
        [0, 0, 0, 0],
    ]


def test_masks_are_read_only():
    with pytest.raises(ValueError):
        shape(PieceKind.L, 0)[0, 0] = True


@pytest.mark.parametrize("rotation", [-1, 4, 7])
def test_shape_rejects_out_of_range_rotation(rotation):
    with pytest.raises(InvalidPieceError):
        shape(PieceKind.S, rotation)


@pytest.mark.parametrize("kind", [0, 8, "X", None])
def test_catalog_rejects_unknown_kind(kind):
    with pytest.raises(InvalidPieceError):
        shape(kind, 0)
    with pytest.raises(InvalidPieceError):
        color(kind)


def test_colors_are_distinct_ids_one_to_seven():
    colors = [color(kind) for kind in PieceKind]
    assert sorted(colors) == list(range(1, 8))


def test_spawn_anchor_and_cells():
    piece = Piece.spawn(PieceKind.T)
    assert (piece.x, piece.y, piece.rotation) == (SPAWN_X, SPAWN_Y, 0) == (3, 0, 0)
    assert piece.cells() == [(4, 0), (3, 1), (4, 1), (5, 1)]


def test_move_and_rotate_do_not_validate():
    piece = Piece.spawn(PieceKind.I).moved(-10, -5)
    assert (piece.x, piece.y) == (-7, -5)
    assert piece.rotated(-1).rotation == 3
    assert piece.rotated(5).rotation == 1
