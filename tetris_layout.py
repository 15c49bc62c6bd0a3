# tetris_layout.py
from dataclasses import dataclass
from typing import Optional
from tetris_config import CONFIG

COLS, ROWS = 10, 20
MARGIN = 16
PANEL_W = 140

@dataclass
class Dims:
    """Pixel geometry: board of cols x rows cells, then a score panel on the right."""
    cell: int
    board_x: int
    board_y: int
    board_w: int
    board_h: int
    panel_x: int
    panel_y: int
    panel_w: int
    total_w: int
    total_h: int

def compute_dims(cols: int = COLS, rows: int = ROWS, cell: Optional[int] = None) -> Dims:
    cell = int(cell or CONFIG["CELL_SIZE"])
    board_w, board_h = cols * cell, rows * cell
    panel_x = MARGIN + board_w + MARGIN
    return Dims(
        cell=cell,
        board_x=MARGIN, board_y=MARGIN, board_w=board_w, board_h=board_h,
        panel_x=panel_x, panel_y=MARGIN, panel_w=PANEL_W,
        total_w=panel_x + PANEL_W + MARGIN,
        total_h=MARGIN + board_h + MARGIN,
    )
