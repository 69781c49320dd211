"""
peg_io/layouts.py

Стандартные раскладки доски.
"""

from core.board import Board
from utils.error_handling import InvalidBoardError, validate_size


def cross_mask(size: int):
    """
    Маска креста: в углах вырезаны квадраты со стороной (size - 3) // 2.

    Для size=7 это классическая английская доска на 33 клетки.
    """
    validate_size(size)
    corner = (size - 3) // 2
    mask = []
    for r in range(size):
        for c in range(size):
            in_corner_rows = r < corner or r >= size - corner
            in_corner_cols = c < corner or c >= size - corner
            mask.append(not (in_corner_rows and in_corner_cols))
    return mask


def english_board(size: int = 7) -> Board:
    """Крест со всеми колышками, кроме центра."""
    if size % 2 == 0:
        raise InvalidBoardError("Крестовая доска требует нечётный размер")
    board = Board(size, [(playable, False) for playable in cross_mask(size)])
    board.reset()
    return board


def full_board(size: int) -> Board:
    """Квадрат без вырезов, колышки везде, кроме центра."""
    board = Board.empty(size)
    board.reset()
    return board


def default_layout(size: int) -> Board:
    """
    Раскладка по умолчанию для редактора: крест для нечётных
    размеров от 5, иначе полный квадрат.
    """
    if size >= 5 and size % 2 == 1:
        return english_board(size)
    return full_board(size)
