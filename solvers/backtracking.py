"""
solvers/backtracking.py

DFS с возвратом и мемоизацией неудачных состояний.

Поиск работает с одной приватной копией доски: ход выполняется на
месте и откатывается при возврате, копий на каждый узел нет.
Первое найденное решение завершает поиск.
"""

import asyncio
import time
from typing import List, Optional, Set

from .base import BaseSolver, SolveResult, SolverConfig, SolverStats
from core.board import Board
from core.moves import Move
from utils.error_handling import validate_board


class BacktrackingSolver(BaseSolver):
    """
    DFS решатель с откатом ходов.

    Особенности:
    - Проверка победы (ровно один колышек) раньше проверки мемо
    - Мемо отпечатков, исследованных без успеха
    - Фиксированный порядок ходов (построчно; вправо, влево, вниз, вверх)
    - Кооперативная отмена и колбэки через SearchHooks
    """

    def __init__(self, config: SolverConfig):
        super().__init__(verbose=config.verbose)
        self.config = config
        self.hooks = config.build_hooks()
        self._board: Optional[Board] = None
        self._seen: Set[int] = set()
        self._path: List[Move] = []

    async def solve(self, board: Board) -> SolveResult:
        """
        Ищет последовательность ходов до одного колышка.

        Args:
            board: начальная позиция; не изменяется

        Returns:
            SolveResult(solved, visited, path)

        Raises:
            InvalidBoardError: если доска не соответствует config.size
        """
        validate_board(board, self.config.size)

        self.stats = SolverStats()
        self._board = board.clone()
        self._seen = set()
        self._path = []

        self.logger.info(
            f"Starting backtracking DFS (size={board.size}, pegs={board.peg_count()})"
        )
        start = time.time()
        try:
            self.hooks.on_start()
            solved = await self._dfs()
            path = list(self._path) if solved and self.config.record_path else None
        finally:
            self.stats.time_elapsed = time.time() - start
            self._board = None
            self._seen = set()
            self._path = []

        if solved:
            self.stats.solution_length = board.peg_count() - 1
            self.logger.info(f"Solution found: {self.stats.solution_length} moves")
        elif self.stats.cancelled:
            self.logger.info("Search cancelled")
        else:
            self.logger.info("No solution found")
        self.logger.info(f"Stats: {self.stats}")

        return SolveResult(
            solved=solved,
            visited=self.stats.nodes_visited,
            path=path,
            stats=self.stats,
        )

    async def _enter(self, depth: int) -> Optional[bool]:
        """
        Вход в узел: отмена, счётчик, проверка победы, мемо.

        Returns:
            True — решено, False — узел закрыт, None — нужно перебрать ходы
        """
        if self.hooks.should_stop():
            self.stats.cancelled = True
            return False

        self.stats.nodes_visited += 1
        self.stats.max_depth = max(self.stats.max_depth, depth)
        await self.hooks.on_visit(self.stats.nodes_visited)

        board = self._board
        # Проверка победы: остался один колышек
        if board.peg_count() == 1:
            return True

        # Уже исследовали это состояние?
        key = board.state_key()
        if key in self._seen:
            self.stats.nodes_pruned += 1
            return False
        self._seen.add(key)
        return None

    async def _undo(self, move: Move, depth: int) -> None:
        await self.hooks.on_revert_move(move, depth)
        if self.config.record_path:
            self._path.pop()
        self._board.revert_move(move)
        if self.verbose:
            self._log(f"revert {self.format_move(move, self._board.size)} depth={depth}")
        await self.hooks.pause()

    async def _dfs(self) -> bool:
        """
        Поиск из текущего состояния self._board.

        Стек кадров вместо рекурсии: кадр — [ходы узла, индекс следующего
        хода], глубина узла равна индексу кадра. При неуспехе доска
        возвращается в начальное состояние; при успехе остаётся в конечной
        позиции.
        """
        verdict = await self._enter(0)
        if verdict is not None:
            return verdict

        hooks = self.hooks
        board = self._board
        record = self.config.record_path
        frames: List[list] = [[board.generate_moves(), 0]]

        while frames:
            depth = len(frames) - 1
            frame = frames[-1]
            moves, index = frame

            if index == len(moves) or hooks.should_stop():
                if index < len(moves):
                    self.stats.cancelled = True
                frames.pop()
                if frames:
                    parent = frames[-1]
                    await self._undo(parent[0][parent[1] - 1], depth - 1)
                continue

            move = moves[index]
            frame[1] = index + 1
            board.apply_move(move)
            await hooks.on_apply_move(move, depth)
            if record:
                self._path.append(move)
            if self.verbose:
                self._log(f"apply {self.format_move(move, board.size)} depth={depth}")
            await hooks.pause()

            verdict = await self._enter(depth + 1)
            if verdict:
                return True
            if verdict is None:
                frames.append([board.generate_moves(), 0])
            else:
                await self._undo(move, depth)

        return False


async def solve(board: Board, config: Optional[SolverConfig] = None, **options) -> SolveResult:
    """
    Корутина-обёртка: solve(board, record_path=True, step_delay=0.1, ...).

    Если config не задан, он собирается из options; size по умолчанию
    берётся из доски.
    """
    if config is None:
        options.setdefault('size', getattr(board, 'size', None))
        config = SolverConfig(**options)
    elif options:
        raise TypeError("Передайте либо config, либо именованные параметры")
    return await BacktrackingSolver(config).solve(board)


def solve_sync(board: Board, config: Optional[SolverConfig] = None, **options) -> SolveResult:
    """Синхронный запуск в новом цикле событий (вне работающего loop)."""
    return asyncio.run(solve(board, config, **options))
