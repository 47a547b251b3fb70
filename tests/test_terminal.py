import curses

import pytest

from blockfall.game import Action
from blockfall.visualization import terminal
from blockfall.visualization.terminal import KEY_TO_ACTION, action_for_key, build_parser


class FakeScreen:
    """Stands in for a curses window: replays keys, records drawn text."""

    def __init__(self, keys):
        self.keys = list(keys)
        self.lines = {}

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def nodelay(self, flag):
        pass

    def keypad(self, flag):
        pass

    def timeout(self, delay):
        pass

    def erase(self):
        self.lines.clear()

    def addstr(self, y, x, s, attr=0):
        self.lines[y] = s

    def refresh(self):
        pass


def test_every_logical_action_has_a_key():
    assert set(KEY_TO_ACTION.values()) == set(Action) - {Action.NONE}
    assert action_for_key(curses.KEY_LEFT) is Action.MOVE_LEFT
    assert action_for_key(curses.KEY_UP) is Action.ROTATE_CW
    assert action_for_key(ord("Z")) is Action.ROTATE_CCW
    assert action_for_key(ord(" ")) is Action.HARD_DROP
    assert action_for_key(ord("p")) is Action.PAUSE
    assert action_for_key(ord("q")) is Action.QUIT


@pytest.mark.parametrize("ch", [-1, ord("x"), curses.KEY_F1])
def test_no_key_or_unknown_key_is_none(ch):
    assert action_for_key(ch) is Action.NONE


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.seed is None
    assert args.log_file is None
    assert build_parser().parse_args(["--seed", "5"]).seed == 5


def test_play_drains_keys_and_draws_frame(monkeypatch):
    monkeypatch.setattr(curses, "curs_set", lambda visibility: None)
    screen = FakeScreen([curses.KEY_LEFT, ord(" "), ord("q")])

    score = terminal.play(screen, seed=3, frame_ms=0)

    # A hard drop from the top of an empty board falls at least 16 rows
    assert score >= 32
    frame = "\n".join(screen.lines[y] for y in sorted(screen.lines))
    assert f"Score: {score}" in frame
    assert frame.splitlines()[0].startswith("+--")
