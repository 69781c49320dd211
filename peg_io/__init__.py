"""
peg_io - Ввод/вывод для Peg Solitaire

Экспортирует:
- Стандартные раскладки
- Парсинг текстового описания доски
- Визуализация доски и решения
"""

from .layouts import cross_mask, english_board, full_board, default_layout
from .parser import parse_board, load_board
from .visualizer import display_board, format_move, format_solution

__all__ = [
    'cross_mask',
    'english_board',
    'full_board',
    'default_layout',
    'parse_board',
    'load_board',
    'display_board',
    'format_move',
    'format_solution',
]
