"""
peg_io/parser.py

Парсинг текстового описания доски.
"""

from core.board import Board
from utils.error_handling import InvalidBoardError


def parse_board(text: str) -> Board:
    """
    Парсит доску: одна строка текста — одна строка доски.

    Символы клеток: ● / 1 — колышек, ○ / 0 — дырка, ▫ / x — вне доски.
    Пробелы между клетками допускаются, строки с # игнорируются.

    Args:
        text: описание доски

    Returns:
        Board
    """
    rows = [
        line for line in text.splitlines()
        if line.strip() and not line.lstrip().startswith('#')
    ]
    if not rows:
        raise InvalidBoardError("Пустое описание доски")
    return Board.from_rows(rows)


def load_board(path: str) -> Board:
    """Читает доску из файла."""
    with open(path, 'r', encoding='utf-8') as f:
        return parse_board(f.read())
