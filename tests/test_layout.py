from tetris_layout import compute_dims, COLS, ROWS, MARGIN, PANEL_W


def test_board_is_cell_times_grid():
    d = compute_dims(COLS, ROWS, 30)
    assert (d.board_w, d.board_h) == (300, 600)
    assert d.panel_x == d.board_x + d.board_w + MARGIN
    assert d.total_w == d.panel_x + PANEL_W + MARGIN
    assert d.total_h == 600 + 2 * MARGIN


def test_defaults_from_config():
    assert compute_dims().cell == 30
