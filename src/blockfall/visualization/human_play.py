from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional, Sequence

import pygame

from blockfall.game import Action, BlockfallGame, GameConfig, GravityTimer, Phase
from .renderer import Renderer


logger = logging.getLogger(__name__)

KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_UP: Action.ROTATE_CW,
    pygame.K_z: Action.ROTATE_CCW,
    pygame.K_SPACE: Action.HARD_DROP,
    pygame.K_p: Action.PAUSE,
    pygame.K_q: Action.QUIT,
    pygame.K_ESCAPE: Action.QUIT,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Blockfall")
    p.add_argument("--seed", type=int, default=None, help="piece sequence seed")
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def run(seed: Optional[int] = None, cell_size: int = 28, fps: int = 60) -> int:
    """Drive the game until the player quits. Returns the final score."""
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = BlockfallGame(GameConfig(random_seed=seed))
        renderer = Renderer(cell_size=cell_size)
        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("Blockfall")

        timer = GravityTimer(lambda: game.drop_interval_ms, pygame.time.get_ticks())
        spawned = game.pieces_spawned

        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.quit()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_r and game.phase is Phase.GAME_OVER:
                        game.reset()
                        timer.reset(pygame.time.get_ticks())
                        spawned = game.pieces_spawned
                        continue
                    action = KEY_TO_ACTION.get(event.key)
                    if action is not None:
                        game.apply(action)

            # Gravity
            now = pygame.time.get_ticks()
            if game.phase is Phase.PAUSED:
                timer.pause(now)
            else:
                timer.resume(now)
                if game.phase is Phase.PLAYING and timer.due(now):
                    game.tick()

            # A freshly spawned piece gets a full interval before its first tick
            if game.pieces_spawned != spawned:
                spawned = game.pieces_spawned
                timer.reset(now)

            renderer.draw(screen, game)
            clock.tick(fps)

        logger.info("Quit with score %d, level %d, lines %d", game.score, game.level, game.lines_cleared)
        return game.score
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    score = run(seed=args.seed, cell_size=args.cell_size, fps=args.fps)
    print(f"Final score: {score}")


if __name__ == "__main__":  # pragma: no cover
    main()
