"""
tests/test_io.py

Тесты для:
- peg_io (раскладки, парсинг, вывод)
- solutions.verify (проверка решений)
- main (командная строка)
"""

import pytest

import main
from core.board import Board
from core.moves import Move
from peg_io import (
    cross_mask, default_layout, display_board, english_board, format_solution,
    full_board, load_board, parse_board
)
from solutions.verify import replay, verify_solution
from utils.error_handling import InvalidBoardError, ValidationError


def test_english_board_layout():
    """Тест: английская доска — 33 клетки, 32 колышка, пустой центр."""
    board = english_board()

    assert board.size == 7
    assert sum(cross_mask(7)) == 33
    assert board.peg_count() == 32
    assert board[24].is_playable and not board[24].is_occupied
    assert not board[0].is_playable and not board[48].is_playable
    assert board.fingerprint()[:7] == "xx111xx"


def test_cross_layout_sizes():
    """Тест: крест 5x5 — вырезаны угловые клетки; чётный размер отклоняется."""
    assert sum(cross_mask(5)) == 21
    assert default_layout(5).peg_count() == 20
    with pytest.raises(InvalidBoardError):
        english_board(6)


def test_default_layout_falls_back_to_square():
    """Тест: для чётного размера раскладка по умолчанию — полный квадрат."""
    board = default_layout(4)

    assert board == full_board(4)
    assert all(cell.is_playable for cell in board)
    assert board.peg_count() == 15
    assert board[10].is_occupied is False


def test_parse_board_both_alphabets():
    """Тест: парсер понимает символы ●○▫ и 1/0/x, пробелы и комментарии."""
    text = """
    # простая позиция
    ▫ ● ○
    1 1 0
    x 0 x
    """
    board = parse_board(text)

    assert board.size == 3
    assert board.fingerprint() == "x10110x0x"


def test_parse_board_rejects_garbage():
    """Тест: пустое описание и неизвестные символы отклоняются."""
    with pytest.raises(InvalidBoardError):
        parse_board("   \n# только комментарий\n")
    with pytest.raises(InvalidBoardError):
        parse_board("12\n00")


def test_load_board(tmp_path):
    """Тест: чтение доски из файла."""
    path = tmp_path / "board.txt"
    path.write_text("000\n110\n000\n", encoding="utf-8")

    board = load_board(str(path))

    assert board.peg_count() == 2


def test_display_board():
    """Тест: вывод доски с заголовками столбцов и номерами строк."""
    board = Board.from_rows(["10", "0x"])

    assert display_board(board) == "   A B\n1  ● ○\n2  ○ ▫"


def test_format_solution():
    """Тест: форматирование решения в нотации A1."""
    text = format_solution([Move(3, 4, 5)], 3)

    assert "1 ходов" in text
    assert "A2 → C2" in text
    assert format_solution(None, 3) == "❌ Решение не найдено"
    assert "уже решена" in format_solution([], 3)


def test_verify_solution():
    """Тест: проверка принимает корректный путь и отклоняет некорректные."""
    board = Board.from_rows(["000", "110", "000"])

    assert verify_solution(board, [Move(3, 4, 5)])
    assert verify_solution(board, [(3, 4, 5)]), "Кортежи тоже принимаются"
    assert not verify_solution(board, []), "Два колышка — не решение"
    assert not verify_solution(board, [Move(5, 4, 3)]), "Из пустой клетки прыгать нельзя"
    assert not verify_solution(board, [Move(3, 1, 5)]), "Неверная середина"
    assert board.peg_count() == 2, "Исходная доска не меняется"


def test_replay_raises_on_illegal_move():
    """Тест: replay сообщает номер недопустимого хода."""
    board = Board.from_rows(["000", "110", "000"])

    with pytest.raises(ValidationError, match="Ход 2"):
        replay(board, [Move(3, 4, 5), Move(3, 4, 5)])


def test_cli_solves_board_file(tmp_path, capsys):
    """Тест: CLI решает доску из файла и печатает путь."""
    path = tmp_path / "board.txt"
    path.write_text("000\n110\n000\n", encoding="utf-8")

    code = main.main(["--board", str(path)])

    out = capsys.readouterr().out
    assert code == 0
    assert "Найдено решение за 1 ходов" in out
    assert "A2 → C2" in out


def test_cli_reports_unsolvable(capsys):
    """Тест: квадрат 3x3 с пустым центром — ходов нет, код 1."""
    code = main.main(["--layout", "full", "--size", "3", "--no-path"])

    out = capsys.readouterr().out
    assert code == 1
    assert "Решение не найдено" in out


def test_cli_timeout(capsys):
    """Тест: нулевой таймаут прерывает поиск."""
    code = main.main(["--timeout", "0", "--progress-every", "1000"])

    out = capsys.readouterr().out
    assert code == 1
    assert "Поиск прерван" in out


def test_cli_bad_board_file(tmp_path):
    """Тест: отсутствующий файл — код 2."""
    assert main.main(["--board", str(tmp_path / "missing.txt")]) == 2
