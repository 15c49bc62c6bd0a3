
"""
Game state: active piece, grid, score and the timed drop.

Nothing here touches pygame. The window layer reads ``board``, ``piece``,
``particles``, ``score`` and ``game_over`` each frame, and the game reports
back through two callbacks:

  • on_sound(name)  : one of "move", "rotate", "drop", "clear", "gameOver"
  • on_score(score) : after every cleared row

Illegal moves and rotations are rejected and reported as False; nothing
raises during normal play.
"""
from __future__ import annotations
import logging
from typing import Callable, List, Optional

from tetris_config import CONFIG
from tetris_layout import COLS, ROWS
from tetris_piece import Piece
from tetris_board import Board, new_board, collide, merge, sweep
from tetris_rng import UniformRandom
from tetris_particle import Particle, burst

log = logging.getLogger(__name__)


def _noop(*_):
    pass


class Game:
    def __init__(self, rng=None,
                 on_sound: Optional[Callable[[str], None]] = None,
                 on_score: Optional[Callable[[int], None]] = None,
                 cols: int = COLS, rows: int = ROWS, cell: Optional[int] = None,
                 drop_interval: Optional[int] = None, line_score: Optional[int] = None):
        self.rng = rng or UniformRandom(CONFIG["SEED"])
        self.on_sound = on_sound or _noop
        self.on_score = on_score or _noop
        self.cols, self.rows = cols, rows
        self.cell = cell if cell is not None else int(CONFIG["CELL_SIZE"])
        self.drop_interval = drop_interval if drop_interval is not None else CONFIG["DROP_INTERVAL_MS"]
        self.line_score = line_score if line_score is not None else CONFIG["LINE_SCORE"]

        self.board: Board = new_board(cols, rows)
        self.piece: Piece
        self.particles: List[Particle] = []
        self.score = 0
        self.game_over = False
        self.drop_counter = 0
        self.spawn()

    @property
    def spawn_x(self) -> int:
        return self.cols // 2 - 1

    # ---------- Spawning ----------
    def spawn(self, t: Optional[str] = None):
        """Place a new piece at the top centre; a blocked spawn ends the game."""
        t = t or self.rng.next_piece()
        self.piece = Piece.spawn(t, self.spawn_x, 0)
        log.debug("spawned %s at (%d, %d)", t, self.piece.x, self.piece.y)
        if self.collides():
            self.game_over = True
            log.info("game over, final score %d", self.score)
            self.on_sound("gameOver")

    def collides(self) -> bool:
        return collide(self.board, self.piece)

    # ---------- Player actions ----------
    def move(self, dx: int, dy: int) -> bool:
        if self.game_over: return False
        p = self.piece
        p.x += dx; p.y += dy
        if self.collides():
            p.x -= dx; p.y -= dy
            return False
        if dx: self.on_sound("move")
        return True

    def rotate(self) -> bool:
        if self.game_over: return False
        self.piece.rotate()
        if self.collides():
            self.piece.rotate_back()
            return False
        self.on_sound("rotate")
        return True

    def handle(self, action: Optional[str]) -> bool:
        if self.game_over: return False
        if action == "left": return self.move(-1, 0)
        if action == "right": return self.move(1, 0)
        if action == "down": return self.move(0, 1)
        if action == "rotate": return self.rotate()
        return False

    # ---------- Locking ----------
    def merge(self):
        merge(self.board, self.piece)
        self.on_sound("drop")

    def clear_lines(self) -> int:
        rows = sweep(self.board)
        for y in rows:
            self.score += self.line_score
            self.on_score(self.score)
            self.particles.extend(burst(y, self.cols, self.cell, self.rng))
        if rows:
            log.info("cleared %d line(s), score %d", len(rows), self.score)
            self.on_sound("clear")
        return len(rows)

    def lock(self):
        self.merge()
        self.clear_lines()
        self.spawn()

    def drop(self) -> bool:
        """One gravity step: fall a row, or lock and spawn the next piece."""
        if self.game_over: return False
        if self.move(0, 1): return True
        self.lock()
        return False

    # ---------- Frame ----------
    def tick(self, dt: float):
        self.particles = [p for p in self.particles if p.update()]
        if self.game_over: return
        self.drop_counter += dt
        if self.drop_counter > self.drop_interval:
            self.drop()
            self.drop_counter = 0
