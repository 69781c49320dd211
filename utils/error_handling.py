"""
utils/error_handling.py

Исключения движка и проверка входных данных.
"""

from typing import Any, Optional

from .logging import get_logger


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidBoardError(SolverError):
    """Ошибка невалидной доски (нарушение контракта вызова)."""
    pass


class InvalidMoveError(SolverError):
    """Ошибка недопустимого изменения доски."""
    pass


class ValidationError(SolverError):
    """Ошибка валидации решения."""
    pass


def validate_size(size: Any) -> int:
    """
    Проверяет сторону квадратной доски.

    Raises:
        InvalidBoardError: если size не положительное целое
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidBoardError(f"Размер доски должен быть целым числом, получено {size!r}")
    if size < 1:
        raise InvalidBoardError(f"Размер доски должен быть положительным, получено {size}")
    return size


def validate_board(board, size: Optional[int] = None) -> bool:
    """
    Валидирует пару (доска, размер) перед поиском.

    Args:
        board: доска для валидации
        size: ожидаемая сторона доски (если None, берётся board.size)

    Returns:
        True если доска валидна

    Raises:
        InvalidBoardError: если доска невалидна
    """
    from core.board import Board

    if board is None:
        raise InvalidBoardError("Доска не может быть None")

    if not isinstance(board, Board):
        raise InvalidBoardError(f"Ожидается Board, получено {type(board).__name__}")

    if size is None:
        size = board.size
    validate_size(size)

    if size * size != len(board):
        raise InvalidBoardError(
            f"Размер {size} не соответствует доске из {len(board)} клеток"
        )

    return True


async def safe_solve(solver, board, default: Any = None):
    """
    Безопасное выполнение solve с обработкой ошибок.

    Args:
        solver: решатель
        board: доска
        default: значение по умолчанию при ошибке

    Returns:
        Результат или default
    """
    try:
        return await solver.solve(board)
    except SolverError as e:
        logger = get_logger()
        logger.error(f"Ошибка решателя {solver.__class__.__name__}: {str(e)}")
        return default
