from __future__ import annotations

from typing import Tuple

import pygame

from falling_blocks.game import GameSnapshot, Piece
from .palette import color_for_value as _color_for_value


class Renderer:
    """Draws a snapshot: board, falling piece, next-piece panel and counters."""

    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font = None

    def window_size(self, width: int, height: int) -> Tuple[int, int]:
        side_panel_w = 6 * self.cell_size
        return (
            width * self.cell_size + side_panel_w + self.margin * 3,
            height * self.cell_size + self.margin * 2,
        )

    def _cell_rect(self, x0: int, y0: int, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(
            x0 + x * self.cell_size,
            y0 + y * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )

    def _grid_surface(self, snap: GameSnapshot) -> pygame.Surface:
        h, w = snap.grid.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                pygame.draw.rect(surf, _color_for_value(int(snap.grid[y, x])), self._cell_rect(0, 0, x, y))
        for x, y in snap.active.cells():
            if 0 <= x < w and 0 <= y < h:
                pygame.draw.rect(surf, _color_for_value(snap.active.color), self._cell_rect(0, 0, x, y))
        return surf

    def _draw_preview(self, screen: pygame.Surface, piece: Piece, x0: int, y0: int) -> None:
        shape = piece.shape
        for py in range(shape.shape[0]):
            for px in range(shape.shape[1]):
                if shape[py, px]:
                    pygame.draw.rect(screen, _color_for_value(piece.color), self._cell_rect(x0, y0, px, py))

    def draw(self, screen: pygame.Surface, snap: GameSnapshot) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(snap), (self.margin, self.margin))

        panel_x = self.margin * 2 + snap.grid.shape[1] * self.cell_size
        label = self._font.render("Next", True, (230, 230, 230))
        screen.blit(label, (panel_x, self.margin))
        self._draw_preview(screen, snap.next, panel_x, self.margin + 30)

        info_lines = [
            f"Score: {snap.score}",
            f"Lines: {snap.lines_cleared}",
            f"Level: {snap.level}",
        ]
        y_text = self.margin + 30 + 5 * self.cell_size
        for i, txt in enumerate(info_lines):
            img = self._font.render(txt, True, (230, 230, 230))
            screen.blit(img, (panel_x, y_text + i * 26))

        if snap.game_over:
            text = self._font.render("Game Over - R to restart", True, (255, 80, 80))
            rect = text.get_rect(center=(self.margin + snap.grid.shape[1] * self.cell_size // 2, screen.get_height() // 2))
            screen.blit(text, rect)
        pygame.display.flip()
