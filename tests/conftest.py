import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest


class FixedRandom:
    """Deals the given piece types in order, then repeats the last one."""
    def __init__(self, *types, unit=0.5):
        self.types = list(types) or ["O"]
        self.unit = unit

    def next_piece(self):
        return self.types.pop(0) if len(self.types) > 1 else self.types[0]

    def random(self):
        return self.unit

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def events():
    return {"sounds": [], "scores": []}


@pytest.fixture
def make_game(events):
    from tetris_game import Game

    def _make(*types, **kw):
        kw.setdefault("drop_interval", 1000)
        kw.setdefault("line_score", 100)
        kw.setdefault("cell", 30)
        return Game(rng=FixedRandom(*types),
                    on_sound=events["sounds"].append,
                    on_score=events["scores"].append, **kw)
    return _make
