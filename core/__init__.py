"""
core - Ядро Peg Solitaire

Доска, клетки, ходы и утилиты координат.
"""

from .board import Board, Cell
from .moves import Move, jump_candidates, is_move_allowed, move_for
from .utils import (
    DIRECTIONS, PEG, HOLE, EMPTY, FP_BLOCKED, FP_HOLE, FP_PEG,
    index_to_coords, index_to_pos, is_valid_position
)

__all__ = [
    'Board', 'Cell', 'Move',
    'jump_candidates', 'is_move_allowed', 'move_for',
    'DIRECTIONS', 'PEG', 'HOLE', 'EMPTY', 'FP_BLOCKED', 'FP_HOLE', 'FP_PEG',
    'index_to_coords', 'index_to_pos', 'is_valid_position',
]
