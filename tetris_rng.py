
"""Uniform piece randomizer"""
import random
from typing import Optional
from tetris_piece import TYPES

class UniformRandom:
    """Every piece type equally likely on every draw, no history."""
    PIECES = TYPES
    def __init__(self, seed: Optional[int] = None):
        self._r = random.Random(seed)

    def next_piece(self) -> str:
        return self._r.choice(self.PIECES)

    # Particle bursts draw from the same stream
    def random(self) -> float:
        return self._r.random()

    def choice(self, seq):
        return self._r.choice(seq)
