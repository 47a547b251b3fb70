from __future__ import annotations

import argparse
import curses
import logging
import time
from typing import Dict, Optional, Sequence

from blockfall.game import Action, BlockfallGame, GameConfig, GravityTimer, Phase
from .text import render_text


logger = logging.getLogger(__name__)

KEY_TO_ACTION: Dict[int, Action] = {
    curses.KEY_LEFT: Action.MOVE_LEFT,
    curses.KEY_RIGHT: Action.MOVE_RIGHT,
    curses.KEY_DOWN: Action.SOFT_DROP,
    curses.KEY_UP: Action.ROTATE_CW,
    ord("z"): Action.ROTATE_CCW,
    ord("Z"): Action.ROTATE_CCW,
    ord(" "): Action.HARD_DROP,
    ord("p"): Action.PAUSE,
    ord("P"): Action.PAUSE,
    ord("q"): Action.QUIT,
    ord("Q"): Action.QUIT,
    27: Action.QUIT,  # Esc
}

RESTART_KEYS = (ord("r"), ord("R"))


def action_for_key(ch: int) -> Action:
    """Map a ``getch`` code to a logical action; no key or unknown keys give NONE."""
    return KEY_TO_ACTION.get(ch, Action.NONE)


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


def safe_addstr(stdscr, y: int, x: int, s: str, attr: int = 0) -> None:
    # Writing past the window edge raises; small terminals just get a clipped frame
    try:
        stdscr.addstr(y, x, s, attr)
    except curses.error:
        pass


def draw(stdscr, game: BlockfallGame) -> None:
    stdscr.erase()
    for y, line in enumerate(render_text(game).splitlines()):
        safe_addstr(stdscr, y, 0, line)
    if game.phase is Phase.GAME_OVER:
        safe_addstr(stdscr, game.grid.height + 3, 0, f"Final score {game.score} - R to restart, Q to quit", curses.A_BOLD)
    stdscr.refresh()


def play(stdscr, seed: Optional[int] = None, frame_ms: int = 10) -> int:
    """Curses loop: drain pending keys, tick on the gravity timer, redraw."""
    curses.curs_set(0)
    stdscr.nodelay(True)
    stdscr.keypad(True)
    stdscr.timeout(0)

    game = BlockfallGame(GameConfig(random_seed=seed))
    timer = GravityTimer(lambda: game.drop_interval_ms, _now_ms())
    spawned = game.pieces_spawned

    while game.running:
        ch = stdscr.getch()
        while ch != -1:
            if ch in RESTART_KEYS and game.phase is Phase.GAME_OVER:
                game.reset()
                timer.reset(_now_ms())
                spawned = game.pieces_spawned
            else:
                game.apply(action_for_key(ch))
            ch = stdscr.getch()

        now = _now_ms()
        if game.phase is Phase.PAUSED:
            timer.pause(now)
        else:
            timer.resume(now)
            if game.phase is Phase.PLAYING and timer.due(now):
                game.tick()

        if game.pieces_spawned != spawned:
            spawned = game.pieces_spawned
            timer.reset(now)

        draw(stdscr, game)
        time.sleep(frame_ms / 1000)

    logger.info("Quit with score %d, level %d, lines %d", game.score, game.level, game.lines_cleared)
    return game.score


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Blockfall in the terminal")
    p.add_argument("--seed", type=int, default=None, help="piece sequence seed")
    p.add_argument("--log-file", type=str, default=None, help="write logs here; the screen belongs to curses")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=args.log_level,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )
    score = curses.wrapper(play, args.seed)
    print(f"Final score: {score}")


if __name__ == "__main__":  # pragma: no cover
    main()
