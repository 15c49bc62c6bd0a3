
"""Board helpers: new_board, collide, merge, sweep"""
from typing import List
from tetris_piece import Piece
from tetris_layout import COLS, ROWS

Board = List[List[int]]

def new_board(cols: int = COLS, rows: int = ROWS) -> Board:
    return [[0] * cols for _ in range(rows)]

def collide(board: Board, piece: Piece) -> bool:
    rows, cols = len(board), len(board[0])
    for bx, by in piece.cells():
        if bx < 0 or bx >= cols or by >= rows: return True
        # rows above the top only meet the side walls
        if by >= 0 and board[by][bx]: return True
    return False

def merge(board: Board, piece: Piece):
    for bx, by in piece.cells():
        if by >= 0: board[by][bx] = 1

def sweep(board: Board) -> List[int]:
    """Remove full rows bottom-up; returns the row index of each removal."""
    cols = len(board[0])
    cleared = []; y = len(board) - 1
    while y >= 0:
        if all(board[y]):
            del board[y]; board.insert(0, [0] * cols); cleared.append(y)
        else: y -= 1
    return cleared
