from __future__ import annotations

import logging
from typing import Dict

import pygame

from fall_puzzle_rl.game import Direction, FallPuzzleGame
from .renderer import Renderer


logger = logging.getLogger(__name__)

KEY_TO_DIRECTION: Dict[int, Direction] = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
}


def run() -> None:
    logging.basicConfig(level=logging.INFO)
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallPuzzleGame()
        renderer = Renderer(cell_size=30)

        screen = pygame.display.set_mode(renderer.window_size(game.get_state()))
        pygame.display.set_caption("Fall Puzzle - Human Play")
        logger.info("Starting level %dx%d at %d fps", game.grid.width, game.grid.height, game.config.fps)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        game.reset()
                    else:
                        direction = KEY_TO_DIRECTION.get(event.key)
                        if direction is not None:
                            game.push_input(direction)

            game.advance()
            renderer.draw(screen, game.get_state())
            clock.tick(game.config.fps)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
