
import logging
import pygame, sys
from tetris_config import CONFIG
from tetris_game import Game
from tetris_audio import AudioService
from tetris_input import action_for
from tetris_overlay import GameOverOverlay
from tetris_layout import compute_dims, COLS, ROWS
from tetris_render import RenderAssets


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, COLS, ROWS)
    overlay = GameOverOverlay(render.board_rect, big_font)
    audio = AudioService()
    clock = pygame.time.Clock()

    game = Game(on_sound=audio.play, on_score=render.set_score)

    while True:
        dt = clock.tick_busy_loop(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                game.handle(action_for(e.key))

        game.tick(dt)

        render.draw_frame(screen, game)
        overlay.draw(screen, game.game_over)
        pygame.display.flip()


if __name__ == '__main__':
    main()
