import pygame
from tetris_render import adjust_color, make_block


def test_adjust_color_clamps():
    assert adjust_color((240,160,0), 50) == (255,210,50)
    assert adjust_color((240,160,0), -50) == (190,110,0)


def test_block_has_bevel():
    s = make_block((136,136,136), 30)
    assert s.get_size() == (29, 29)
    assert s.get_at((5, 1))[:3] == (186,186,186)
    assert s.get_at((15, 28))[:3] == (86,86,86)
    assert s.get_at((14, 14))[:3] == (136,136,136)


def test_frame_draws_board_piece_and_overlay(make_game):
    from tetris_layout import compute_dims, COLS, ROWS
    from tetris_render import RenderAssets, SETTLED
    from tetris_overlay import GameOverOverlay
    pygame.font.init()
    font = pygame.font.Font(None, 22)
    dims = compute_dims(COLS, ROWS, 30)
    render = RenderAssets(dims, font, COLS, ROWS)
    screen = pygame.Surface((dims.total_w, dims.total_h))

    g = make_game("O")
    g.board[19][0] = 1
    render.set_score(300)
    render.draw_frame(screen, g)
    assert render.hud.score == 300
    x, y = render.cell_pos(0, 19)
    assert screen.get_at((x + 14, y + 14))[:3] == SETTLED
    x, y = render.cell_pos(4, 0)
    assert screen.get_at((x + 14, y + 14))[:3] == g.piece.get_color()

    overlay = GameOverOverlay(render.board_rect, font)
    overlay.draw(screen, True)
    r, gr, b = screen.get_at((x + 14, y + 14))[:3]
    assert r < 240 and gr < 240
