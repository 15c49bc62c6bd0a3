import pytest
from tetris_piece import Piece, SHAPES, COLORS, TYPES, rotate_cw, rotate_ccw


@pytest.mark.parametrize("t", TYPES)
def test_four_rotations_restore_shape(t):
    p = Piece.spawn(t)
    original = [r[:] for r in p.get_shape()]
    for _ in range(4):
        p.rotate()
    assert p.get_shape() == original
    assert p.state == 0


@pytest.mark.parametrize("t", TYPES)
def test_rotate_back_undoes_rotate(t):
    p = Piece.spawn(t)
    original = [r[:] for r in p.shape]
    p.rotate()
    p.rotate_back()
    assert p.shape == original
    assert p.state == 0


def test_rotate_is_clockwise():
    p = Piece.spawn("T")
    assert p.rotate() == [[1,0],[1,1],[1,0]]
    assert p.state == 1


def test_rotate_rectangular_matrix():
    assert rotate_cw([[1,1,1,1]]) == [[1],[1],[1],[1]]
    assert rotate_ccw([[1],[1],[1],[1]]) == [[1,1,1,1]]


def test_spawn_copies_template():
    p = Piece.spawn("L", 4, 0)
    p.rotate()
    assert SHAPES["L"] == [[0,0,1],[1,1,1]]
    assert (p.x, p.y) == (4, 0)


def test_color_per_type():
    assert Piece.spawn("I").get_color() == (0,240,240)
    assert len(set(COLORS.values())) == 7


def test_cells_are_board_relative():
    p = Piece.spawn("O", 4, 18)
    assert sorted(p.cells()) == [(4,18),(4,19),(5,18),(5,19)]
