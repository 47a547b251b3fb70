from __future__ import annotations

from typing import Tuple

import numpy as np
import pygame

from blockfall.game import BlockfallGame, Phase, shape
from .text import CONTROLS


def _color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (20, 20, 26),
        1: (0, 240, 240),    # I
        2: (240, 240, 0),    # O
        3: (160, 0, 240),    # T
        4: (0, 240, 0),      # S
        5: (240, 0, 0),      # Z
        6: (0, 0, 240),      # J
        7: (230, 230, 230),  # L
    }
    return palette.get(abs(v), (200, 200, 200))


class Renderer:
    def __init__(self, cell_size: int = 28, margin: int = 20, panel_cells: int = 8) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_w = panel_cells * cell_size
        self.font = pygame.font.SysFont(None, max(cell_size - 4, 16))
        self.big_font = pygame.font.SysFont(None, cell_size * 2)

    def window_size(self, game: BlockfallGame) -> Tuple[int, int]:
        width = self.margin * 3 + game.grid.width * self.cell_size + self.panel_w
        height = self.margin * 2 + game.grid.height * self.cell_size
        return width, height

    def _cell_rect(self, x0: int, y0: int, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(
            x0 + x * self.cell_size,
            y0 + y * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                pygame.draw.rect(surf, _color_for_value(int(state[y, x])), self._cell_rect(0, 0, x, y))
        return surf

    def _draw_panel(self, screen: pygame.Surface, game: BlockfallGame) -> None:
        x0 = self.margin * 2 + game.grid.width * self.cell_size
        y = self.margin
        text_color = (230, 230, 230)

        screen.blit(self.font.render("NEXT", True, text_color), (x0, y))
        y += self.cell_size
        mask = shape(game.next_kind, 0)
        for py in range(mask.shape[0]):
            for px in range(mask.shape[1]):
                if mask[py, px]:
                    rect = self._cell_rect(x0, y, px, py)
                    pygame.draw.rect(screen, _color_for_value(int(game.next_kind)), rect)
        y += mask.shape[0] * self.cell_size + self.cell_size // 2

        for label in (f"Score: {game.score}", f"Level: {game.level}", f"Lines: {game.lines_cleared}"):
            screen.blit(self.font.render(label, True, text_color), (x0, y))
            y += self.cell_size
        y += self.cell_size // 2
        for label in CONTROLS:
            screen.blit(self.font.render(label, True, (150, 150, 160)), (x0, y))
            y += self.font.get_linesize()

    def _draw_banner(self, screen: pygame.Surface, game: BlockfallGame, title: str, subtitle: str) -> None:
        board_w = game.grid.width * self.cell_size
        board_h = game.grid.height * self.cell_size
        center = (self.margin + board_w // 2, self.margin + board_h // 2)
        shade = pygame.Surface((board_w, board_h), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 160))
        screen.blit(shade, (self.margin, self.margin))
        text = self.big_font.render(title, True, (255, 255, 255))
        screen.blit(text, text.get_rect(center=center))
        if subtitle:
            sub = self.font.render(subtitle, True, (220, 220, 220))
            screen.blit(sub, sub.get_rect(center=(center[0], center[1] + self.cell_size * 2)))

    def draw(self, screen: pygame.Surface, game: BlockfallGame) -> None:
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(game.get_state()), (self.margin, self.margin))
        self._draw_panel(screen, game)
        if game.phase is Phase.PAUSED:
            self._draw_banner(screen, game, "PAUSED", "P to resume")
        elif game.phase is Phase.GAME_OVER:
            self._draw_banner(screen, game, "GAME OVER", f"Score {game.score} - R to restart, Q to quit")
        pygame.display.flip()
