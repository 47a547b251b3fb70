from __future__ import annotations

from typing import List

from blockfall.game import BlockfallGame, Phase, PieceKind, shape


FILLED = "[]"
EMPTY = " ."
SIDEBAR_GAP = "   "

CONTROLS = (
    "Left/Right  move",
    "Down        soft drop",
    "Up          rotate cw",
    "Z           rotate ccw",
    "Space       hard drop",
    "P           pause",
    "Q           quit",
)


def _overlay(line: str, text: str) -> str:
    inner = line[1:-1]
    start = max((len(inner) - len(text)) // 2, 0)
    inner = inner[:start] + text + inner[start + len(text):]
    return line[0] + inner[: len(line) - 2] + line[-1]


def board_lines(game: BlockfallGame) -> List[str]:
    state = game.get_state()
    h, w = state.shape
    border = "+" + "-" * (w * len(FILLED)) + "+"
    lines = [border]
    for row in state:
        lines.append("|" + "".join(FILLED if v else EMPTY for v in row) + "|")
    lines.append(border)

    banner = {Phase.PAUSED: " PAUSED ", Phase.GAME_OVER: " GAME OVER "}.get(game.phase)
    if banner is not None:
        mid = h // 2 + 1
        lines[mid] = _overlay(lines[mid], banner)
    return lines


def piece_preview(kind: PieceKind) -> List[str]:
    return ["".join(FILLED if v else "  " for v in row).rstrip() for row in shape(kind, 0)]


def sidebar_lines(game: BlockfallGame) -> List[str]:
    lines = ["NEXT"]
    lines.extend(piece_preview(game.next_kind))
    lines.append("")
    lines.append(f"Score: {game.score}")
    lines.append(f"Level: {game.level}")
    lines.append(f"Lines: {game.lines_cleared}")
    lines.append("")
    lines.extend(CONTROLS)
    return lines


def render_text(game: BlockfallGame) -> str:
    """Character-grid frame: bordered board on the left, sidebar on the right."""
    board = board_lines(game)
    side = sidebar_lines(game)
    rows = max(len(board), len(side))
    width = len(board[0])
    out = []
    for i in range(rows):
        left = board[i] if i < len(board) else " " * width
        right = side[i] if i < len(side) else ""
        out.append((left + SIDEBAR_GAP + right).rstrip())
    return "\n".join(out)
