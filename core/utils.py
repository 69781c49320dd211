"""
core/utils.py

Общие утилиты и константы для Peg Solitaire.
"""

from typing import List, Tuple

# Направления прыжка в порядке перебора: вправо, влево, вниз, вверх.
# От этого порядка зависит, какое именно решение найдёт DFS.
DIRECTIONS: List[Tuple[int, int]] = [(0, 1), (0, -1), (1, 0), (-1, 0)]

# Символы для отображения
PEG = '●'       # Колышек
HOLE = '○'      # Пустое место (можно прыгнуть)
EMPTY = '▫'     # Недоступная клетка

# Алфавит отпечатка доски
FP_BLOCKED = 'x'
FP_HOLE = '0'
FP_PEG = '1'


def index_to_coords(index: int, size: int) -> Tuple[int, int]:
    """Линейный индекс → (row, col)."""
    return index // size, index % size


def index_to_pos(row: int, col: int) -> str:
    """Индекс (row, col) → шахматная нотация (A1, B2, ...)."""
    return f"{chr(col + ord('A'))}{row + 1}"


def is_valid_position(r: int, c: int, size: int) -> bool:
    """Проверяет, находится ли позиция в пределах квадратной доски."""
    return 0 <= r < size and 0 <= c < size
