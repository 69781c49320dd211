"""
core/moves.py

Ход и геометрия прыжков на квадратной доске.
"""

from typing import List, NamedTuple, Sequence

from .utils import DIRECTIONS, index_to_coords, is_valid_position


class Move(NamedTuple):
    """Прыжок: колышек из from_pos перепрыгивает jumped и встаёт в to_pos."""
    from_pos: int
    jumped: int
    to_pos: int

    @property
    def mid(self) -> int:
        return self.jumped

    @property
    def to(self) -> int:
        return self.to_pos


def jump_candidates(playable: Sequence[bool], size: int) -> List[Move]:
    """
    Все геометрически возможные прыжки, у которых три клетки играбельны.

    Порядок: источники построчно, затем направления вправо, влево, вниз,
    вверх. Генерация ходов лишь фильтрует эту таблицу по занятости,
    поэтому порядок ходов совпадает с порядком полного перебора.
    Границы проверяются по строке и столбцу отдельно, так что прыжок
    не может "перенестись" через край строки.
    """
    table = []
    for i in range(size * size):
        if not playable[i]:
            continue
        row, col = index_to_coords(i, size)
        for dr, dc in DIRECTIONS:
            r2, c2 = row + 2 * dr, col + 2 * dc
            if not is_valid_position(r2, c2, size):
                continue
            to_pos = r2 * size + c2
            jumped = (row + dr) * size + (col + dc)
            if playable[to_pos] and playable[jumped]:
                table.append(Move(i, jumped, to_pos))
    return table


def is_move_allowed(board, from_index: int, to_index: int) -> bool:
    """
    Допустим ли прыжок from_index → to_index на текущей доске.

    Прыжок только по строке или столбцу ровно на две клетки;
    в источнике и середине колышки, цель играбельна и пуста.
    """
    size = board.size
    n = size * size
    if not (0 <= from_index < n and 0 <= to_index < n):
        return False

    fr, fc = index_to_coords(from_index, size)
    tr, tc = index_to_coords(to_index, size)
    horizontal = fr == tr and abs(fc - tc) == 2
    vertical = fc == tc and abs(fr - tr) == 2
    if not (horizontal or vertical):
        return False

    mid = ((fr + tr) // 2) * size + (fc + tc) // 2
    source, middle, target = board[from_index], board[mid], board[to_index]
    return (
        source.is_playable and source.is_occupied and
        middle.is_playable and middle.is_occupied and
        target.is_playable and not target.is_occupied
    )


def move_for(board, from_index: int, to_index: int) -> Move:
    """Строит Move по двум индексам (без проверки допустимости)."""
    size = board.size
    fr, fc = index_to_coords(from_index, size)
    tr, tc = index_to_coords(to_index, size)
    return Move(from_index, ((fr + tr) // 2) * size + (fc + tc) // 2, to_index)
