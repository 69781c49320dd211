"""
utils - Логирование и обработка ошибок
"""

from .logging import SolverLogger, get_logger, setup_file_logging
from .error_handling import (
    SolverError, InvalidBoardError, InvalidMoveError, ValidationError,
    validate_board, validate_size, safe_solve
)

__all__ = [
    'SolverLogger', 'get_logger', 'setup_file_logging',
    'SolverError', 'InvalidBoardError', 'InvalidMoveError', 'ValidationError',
    'validate_board', 'validate_size', 'safe_solve',
]
