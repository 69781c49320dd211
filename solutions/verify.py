"""
solutions/verify.py

Проверка решений повтором ходов на копии доски.
"""

from typing import Iterable, Sequence

from core.board import Board
from core.moves import Move, is_move_allowed
from utils.error_handling import ValidationError


def replay(board: Board, moves: Iterable[Sequence[int]]) -> Board:
    """
    Применяет ходы к копии доски.

    Raises:
        ValidationError: если очередной ход недопустим
    """
    current = board.clone()
    for step, move in enumerate(moves, 1):
        move = Move(*move)
        if not is_move_allowed(current, move.from_pos, move.to_pos):
            raise ValidationError(f"Ход {step} недопустим: {tuple(move)}")
        if move.jumped != (move.from_pos + move.to_pos) // 2:
            raise ValidationError(f"Ход {step}: неверная середина {move.jumped}")
        current.apply_move(move)
    return current


def verify_solution(board: Board, moves: Iterable[Sequence[int]]) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждый ход допустим в своей позиции (по строке или столбцу,
      через колышек, в пустую играбельную клетку);
    - после всех ходов остаётся ровно один колышек.
    Исходная доска не изменяется.
    """
    try:
        final = replay(board, moves)
    except ValidationError:
        return False
    return final.peg_count() == 1
