
"""Line-clear particles. Cosmetic only; nothing in the game reads them back."""
import random
import pygame
from typing import List, Tuple

GRAVITY = 0.2
DECAY = 0.02
BURST_PER_CELL = 5
BURST_COLORS: List[Tuple[int,int,int]] = [(255,255,255), (255,255,0), (255,0,255)]


class Particle:
    def __init__(self, x: float, y: float, color: Tuple[int,int,int], size: int = 4, rng=None):
        rng = rng or random
        self.x = x
        self.y = y
        self.color = color
        self.size = size
        self.life = 1.0
        self.vx = (rng.random() - 0.5) * 8
        self.vy = (rng.random() - 4) * 4

    @property
    def alive(self) -> bool:
        return self.life > 0

    def update(self) -> bool:
        self.x += self.vx
        self.y += self.vy
        self.vy += GRAVITY
        self.life -= DECAY
        return self.alive

    def draw(self, surface, offset=(0, 0)):
        if not self.alive: return
        s = pygame.Surface((self.size, self.size), pygame.SRCALPHA)
        s.fill((*self.color, int(255 * min(self.life, 1.0))))
        surface.blit(s, (offset[0] + int(self.x), offset[1] + int(self.y)))


def burst(row: int, cols: int, cell: int, rng=None) -> List[Particle]:
    rng = rng or random
    out = []
    for x in range(cols):
        for _ in range(BURST_PER_CELL):
            out.append(Particle(x * cell, row * cell, rng.choice(BURST_COLORS), rng=rng))
    return out
