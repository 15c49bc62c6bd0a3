
"""Piece model, shapes, colours, rotation"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

TYPES = ["I", "O", "T", "S", "Z", "J", "L"]

SHAPES: Dict[str, List[List[int]]] = {
    "I": [[1,1,1,1]],
    "O": [[1,1],[1,1]],
    "T": [[0,1,0],[1,1,1]],
    "S": [[0,1,1],[1,1,0]],
    "Z": [[1,1,0],[0,1,1]],
    "J": [[1,0,0],[1,1,1]],
    "L": [[0,0,1],[1,1,1]],
}

COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (0,240,240),
    "O": (240,240,0),
    "T": (160,0,240),
    "S": (0,240,0),
    "Z": (240,0,0),
    "J": (0,0,240),
    "L": (240,160,0),
}

def rotate_cw(m): return [list(r) for r in zip(*m[::-1])]
def rotate_ccw(m): return [list(c) for c in zip(*m)][::-1]

@dataclass
class Piece:
    t: str
    shape: List[List[int]]
    state: int  # orientation 0..3, 0 = spawn
    x: int
    y: int

    @staticmethod
    def spawn(t: str, x: int = 0, y: int = 0) -> "Piece":
        return Piece(t, [r[:] for r in SHAPES[t]], 0, x, y)

    def get_shape(self) -> List[List[int]]:
        return self.shape

    def get_color(self) -> Tuple[int,int,int]:
        return COLORS[self.t]

    def rotate(self) -> List[List[int]]:
        """Rotate 90° clockwise in place. Legality against the board is the caller's job."""
        self.shape = rotate_cw(self.shape)
        self.state = (self.state + 1) % 4
        return self.shape

    def rotate_back(self) -> List[List[int]]:
        self.shape = rotate_ccw(self.shape)
        self.state = (self.state - 1) % 4
        return self.shape

    def cells(self) -> Iterator[Tuple[int,int]]:
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c, self.y + r
