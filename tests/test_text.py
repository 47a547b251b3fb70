from blockfall.game import PieceKind
from blockfall.visualization.text import board_lines, piece_preview, render_text


def test_board_frame_shows_active_piece(game):
    lines = board_lines(game)
    assert len(lines) == 22
    assert lines[0] == "+" + "-" * 20 + "+"
    # T piece at spawn: one cell on row 0, three on row 1
    assert lines[1][9:11] == "[]"
    assert lines[2][7:13] == "[][][]"
    assert lines[20] == "|" + " ." * 10 + "|"


def test_locked_cells_are_drawn(game):
    game.grid.set_cell(0, 19, 3)
    assert board_lines(game)[20].startswith("|[] .")


def test_piece_preview():
    assert piece_preview(PieceKind.I) == ["", "[][][][]", "", ""]
    assert piece_preview(PieceKind.O) == ["  [][]", "  [][]", "", ""]


def test_sidebar_shows_counters(game):
    game.score = 1234
    game.lines_cleared = 12
    frame = render_text(game)
    assert "NEXT" in frame
    assert "Score: 1234" in frame
    assert "Level: 2" in frame
    assert "Lines: 12" in frame
    assert "Space       hard drop" in frame


def test_pause_and_game_over_overlays(game):
    assert "PAUSED" not in render_text(game)
    game.toggle_pause()
    assert "PAUSED" in render_text(game)
    game.toggle_pause()

    game.grid.fill_row(0, 1)
    game.spawn(PieceKind.O)
    frame = render_text(game)
    assert "GAME OVER" in frame
    assert all(len(line) == 22 for line in board_lines(game))
