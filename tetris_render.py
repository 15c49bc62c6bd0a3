
"""
Rendering helpers for the Tetris project.

- Pre-render one bevelled block Surface per colour and blit it per cell.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache the score text; re-render only when the score sink is told it changed.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, List, Optional
from tetris_layout import Dims
from tetris_piece import Piece

Color = Tuple[int,int,int]

SETTLED: Color = (136,136,136)
BORDER = 2

def adjust_color(color: Color, amount: int) -> Color:
    return tuple(max(0, min(255, c + amount)) for c in color)

def make_block(color: Color, cell: int) -> pygame.Surface:
    """Face plus a lighter top/left edge and a darker bottom/right edge."""
    size = cell - 1
    s = pygame.Surface((size, size))
    s.fill(color)
    b = BORDER
    light = [(0,0),(size,0),(size-b,b),(b,b),(b,size-b),(0,size)]
    dark = [(size,0),(size,size),(0,size),(b,size-b),(size-b,size-b),(size-b,b)]
    pygame.draw.polygon(s, adjust_color(color, 50), light)
    pygame.draw.polygon(s, adjust_color(color, -50), dark)
    return s

@dataclass
class HudCache:
    score: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, cols: int, rows: int):
        self.dims = dims
        self.font = font
        self.cols, self.rows = cols, rows
        self._make_static()
        self.blocks: Dict[Color, pygame.Surface] = {}
        self.hud = HudCache()
        self.board_rect = pygame.Rect(dims.board_x, dims.board_y, dims.board_w, dims.board_h)

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        pygame.draw.rect(self.bg, (0,0,0), (d.board_x, d.board_y, d.board_w, d.board_h))
        grid_col = (30,36,64)
        for x in range(self.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    def block(self, color: Color) -> pygame.Surface:
        s = self.blocks.get(color)
        if s is None:
            s = self.blocks[color] = make_block(color, self.dims.cell)
        return s

    def cell_pos(self, bx: int, by: int) -> Tuple[int,int]:
        return self.dims.board_x + bx*self.dims.cell, self.dims.board_y + by*self.dims.cell

    # ---------- Frame pieces ----------
    def draw_background(self, screen: pygame.Surface):
        screen.blit(self.bg, (0,0))

    def draw_board(self, screen: pygame.Surface, board: List[List[int]]):
        blk = self.block(SETTLED)
        for y, row in enumerate(board):
            for x, v in enumerate(row):
                if v: screen.blit(blk, self.cell_pos(x, y))

    def draw_piece(self, screen: pygame.Surface, piece: Optional[Piece]):
        if piece is None: return
        blk = self.block(piece.get_color())
        for bx, by in piece.cells():
            if by >= 0: screen.blit(blk, self.cell_pos(bx, by))

    def draw_particles(self, screen: pygame.Surface, particles):
        prev = screen.get_clip()
        screen.set_clip(self.board_rect)
        for p in particles:
            p.draw(screen, (self.dims.board_x, self.dims.board_y))
        screen.set_clip(prev)

    # ---------- Score sink / panel ----------
    def set_score(self, score: int):
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = self.font.render(f"Score: {score}", True, (200,210,240))

    def draw_panel_hud(self, screen: pygame.Surface):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if self.hud.score_s is None:
            self.set_score(0)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Soft drop", True, (165,175,215)),
                f.render("↑ Rotate", True, (165,175,215)),
            ]
        y = d.panel_y + 100
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def draw_frame(self, screen: pygame.Surface, game):
        self.draw_background(screen)
        self.draw_board(screen, game.board)
        self.draw_piece(screen, game.piece)
        self.draw_particles(screen, game.particles)
        self.draw_panel_hud(screen)
