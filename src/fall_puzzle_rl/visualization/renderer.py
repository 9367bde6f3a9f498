from __future__ import annotations

import numpy as np
import pygame

from .palette import BACKGROUND, color_for_code


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 0) -> None:
        self.cell_size = cell_size
        self.margin = margin

    def window_size(self, state: np.ndarray) -> tuple[int, int]:
        h, w = state.shape
        return w * self.cell_size + self.margin * 2, h * self.cell_size + self.margin * 2

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill(BACKGROUND)
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)
                pygame.draw.rect(surf, color_for_code(state[y, x]), rect)
        return surf

    def draw(self, screen: pygame.Surface, state: np.ndarray) -> None:
        screen.fill(BACKGROUND)
        screen.blit(self._grid_surface(state), (self.margin, self.margin))
        pygame.display.flip()
