"""
peg_io/visualizer.py

Визуализация доски и решений.
"""

from typing import List, Optional

from core.board import Board
from core.moves import Move
from core.utils import index_to_coords, index_to_pos


def display_board(board: Board) -> str:
    """
    Красиво форматирует текстовое представление доски.

    Args:
        board: доска

    Returns:
        Строка для вывода
    """
    header = "   " + " ".join(chr(c + ord('A')) for c in range(board.size))
    lines = [header]

    for r, row in enumerate(board.to_rows()):
        lines.append(f"{r + 1:<2} " + " ".join(row))

    return "\n".join(lines)


def format_move(move: Move, size: int) -> str:
    """Ход в нотации 'B4 → D4'."""
    fr, fc = index_to_coords(move.from_pos, size)
    tr, tc = index_to_coords(move.to_pos, size)
    return f"{index_to_pos(fr, fc)} → {index_to_pos(tr, tc)}"


def format_solution(moves: Optional[List[Move]], size: int) -> str:
    """
    Форматирует список ходов для вывода.

    Args:
        moves: список ходов или None
        size: сторона доски

    Returns:
        Форматированная строка
    """
    if moves is None:
        return "❌ Решение не найдено"
    if not moves:
        return "✅ Доска уже решена"

    lines = [f"✅ Найдено решение за {len(moves)} ходов:"]
    for i, move in enumerate(moves, 1):
        lines.append(f"  {i:2}. {format_move(move, size)}")

    return "\n".join(lines)
