"""
solvers/base.py

Базовый класс для решателей, конфигурация и результат поиска.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional, Union

from core.board import Board
from core.moves import Move
from peg_io.visualizer import format_move
from utils.logging import get_logger


MaybeAwaitable = Union[None, Awaitable[None]]


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    nodes_pruned: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0
    cancelled: bool = False

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Pruned: {self.nodes_pruned}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


@dataclass
class SolveResult:
    """
    Результат одного вызова solve().

    path заполнен только если solved и включена запись пути;
    visited считает все вошедшие узлы, включая отсечённые.
    """
    solved: bool
    visited: int
    path: Optional[List[Move]] = None
    stats: SolverStats = field(default_factory=SolverStats)


@dataclass
class SolverConfig:
    """
    Параметры поиска.

    Args:
        size: сторона доски (size * size == len(board))
        should_stop: предикат отмены, опрашивается при входе в узел и перед каждым ходом
        step_delay: пауза в секундах после хода и после отката (0 — без пауз)
        on_visit: вызывается с новым значением счётчика узлов
        on_apply_move: вызывается после выполнения хода (move, depth)
        on_revert_move: вызывается перед откатом хода (move, depth)
        record_path: сохранять ли путь решения
        hooks: готовый объект SearchHooks; если задан, колбэки выше не используются
        verbose: отладочный вывод каждого хода
    """
    size: int
    should_stop: Optional[Callable[[], bool]] = None
    step_delay: float = 0.0
    on_visit: Optional[Callable[[int], MaybeAwaitable]] = None
    on_apply_move: Optional[Callable[[Move, int], MaybeAwaitable]] = None
    on_revert_move: Optional[Callable[[Move, int], MaybeAwaitable]] = None
    record_path: bool = False
    hooks: Optional[Any] = None
    verbose: bool = False

    def build_hooks(self):
        """Объект-наблюдатель для поиска."""
        from .hooks import CallbackHooks

        if self.hooks is not None:
            return self.hooks
        return CallbackHooks(
            should_stop=self.should_stop,
            on_visit=self.on_visit,
            on_apply_move=self.on_apply_move,
            on_revert_move=self.on_revert_move,
            step_delay=self.step_delay,
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Решатели реализуют корутину solve().
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()
        self.logger = get_logger()

    @abstractmethod
    async def solve(self, board: Board) -> SolveResult:
        """
        Решает головоломку.

        Args:
            board: начальная позиция (не изменяется)

        Returns:
            SolveResult
        """
        pass

    def _log(self, message: str) -> None:
        """Отладочное сообщение, если verbose=True."""
        if self.verbose:
            self.logger.debug(f"[{self.__class__.__name__}] {message}")

    @staticmethod
    def format_move(move: Move, size: int) -> str:
        """Форматирует ход для вывода."""
        return format_move(move, size)
