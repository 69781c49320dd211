"""
tests/test_moves.py

Тесты генерации ходов, выполнения и отката.
"""

import random

from core.board import Board
from core.moves import Move, is_move_allowed, jump_candidates, move_for
from peg_io.layouts import english_board


def _full_3x3_with_hole(hole: int) -> Board:
    return Board(3, [(True, i != hole) for i in range(9)])


def _random_board(rng: random.Random, size: int) -> Board:
    cells = []
    for _ in range(size * size):
        playable = rng.random() < 0.8
        cells.append((playable, playable and rng.random() < 0.6))
    return Board(size, cells)


def test_three_by_three_corner_jump():
    """Тест: 3x3 без колышка в клетке 2 — ход 0 → 2 через 1."""
    board = _full_3x3_with_hole(2)

    moves = board.generate_moves()

    assert Move(0, 1, 2) in moves
    assert moves == [Move(0, 1, 2), Move(8, 5, 2)], "Порядок: построчно, затем вправо/влево/вниз/вверх"

    board.apply_move(Move(0, 1, 2))
    assert board[0].is_occupied is False
    assert board[1].is_occupied is False
    assert board[2].is_occupied is True


def test_single_source_all_directions():
    """Тест: колышек в центре 5x5 с четырьмя соседями и пустыми краями."""
    rows = [
        "00000",
        "00100",
        "01110",
        "00100",
        "00000",
    ]
    board = Board.from_rows(rows)
    center_moves = [m for m in jump_candidates([True] * 25, 5) if m.from_pos == 12]

    assert center_moves == [
        Move(12, 13, 14),
        Move(12, 11, 10),
        Move(12, 17, 22),
        Move(12, 7, 2),
    ]
    assert board.generate_moves() == center_moves, "Соседи центра прыгать не могут"


def test_no_horizontal_wrap():
    """Тест: прыжок не переносится через край строки."""
    board = Board(7, [(True, True)] * 49)
    # (0,6) → (1,1): при плоской арифметике середина была бы 7
    board.set_occupied(8, False)
    # (1,0) → (0,5): при плоской арифметике середина была бы 6
    board.set_occupied(5, False)

    moves = board.generate_moves()

    assert Move(6, 7, 8) not in moves
    assert Move(7, 6, 5) not in moves
    assert not is_move_allowed(board, 6, 8)
    assert not is_move_allowed(board, 7, 5)


def test_moves_stay_on_row_or_column():
    """Тест: каждый ход горизонтален или вертикален, ровно на две клетки."""
    rng = random.Random(20240501)
    for _ in range(50):
        size = rng.randint(1, 8)
        board = _random_board(rng, size)
        for m in board.generate_moves():
            same_row = m.from_pos // size == m.to_pos // size
            same_col = m.from_pos % size == m.to_pos % size
            assert same_row != same_col
            assert abs(m.from_pos - m.to_pos) in (2, 2 * size)
            assert m.mid == (m.from_pos + m.to_pos) // 2
            assert board[m.from_pos].is_occupied
            assert board[m.mid].is_occupied and board[m.mid].is_playable
            assert board[m.to].is_playable and not board[m.to].is_occupied


def test_apply_then_revert_is_identity():
    """Тест: откат хода возвращает доску в исходное состояние."""
    rng = random.Random(7)
    for _ in range(30):
        board = _random_board(rng, rng.randint(3, 7))
        original = board.clone()
        for m in board.generate_moves():
            pegs = board.peg_count()
            board.apply_move(m)
            assert board.peg_count() == pegs - 1
            board.revert_move(m)
            assert board.peg_count() == pegs
            assert board == original
            assert board.state_key() == original.state_key()


def test_unplayable_cells_block_jumps():
    """Тест: через вырезанную клетку и в неё прыгать нельзя."""
    board = Board.from_rows([
        "1x0",
        "1xx",
        "x00",
    ])

    assert board.generate_moves() == []


def test_jump_table_follows_geometry_changes():
    """Тест: таблица прыжков пересчитывается после смены геометрии."""
    board = _full_3x3_with_hole(2)
    assert Move(0, 1, 2) in board.generate_moves()

    board.set_playable(1, False)
    assert Move(0, 1, 2) not in board.generate_moves()

    board.set_playable(1, True)
    board.set_occupied(1, True)
    assert Move(0, 1, 2) in board.generate_moves()


def test_is_move_allowed_rules():
    """Тест: только по строке и столбцу, без переноса."""
    board = _full_3x3_with_hole(2)

    assert is_move_allowed(board, 0, 2)
    board.set_occupied(6, False)
    assert is_move_allowed(board, 0, 6)

    assert not is_move_allowed(board, 2, 4), "Не на расстоянии двух клеток"
    board.set_occupied(2, True)
    board.set_occupied(0, False)
    assert is_move_allowed(board, 2, 0)

    assert not is_move_allowed(board, 0, 8), "Диагональ запрещена"
    assert not is_move_allowed(board, -2, 0)
    assert not is_move_allowed(board, 7, 9)


def test_move_for_midpoint():
    """Тест: move_for вычисляет середину по строке и столбцу."""
    board = english_board()

    assert move_for(board, 10, 24) == Move(10, 17, 24)
    assert move_for(board, 22, 24) == Move(22, 23, 24)
    assert move_for(board, 22, 24).to == 24


def test_english_opening_moves():
    """Тест: на английской доске в начале ровно четыре хода в центр."""
    board = english_board()

    moves = board.generate_moves()

    assert moves == [
        Move(10, 17, 24),
        Move(22, 23, 24),
        Move(26, 25, 24),
        Move(38, 31, 24),
    ]
