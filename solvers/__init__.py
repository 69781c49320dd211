"""
solvers - Поиск решения Peg Solitaire

Экспортирует:
- BacktrackingSolver: DFS с откатом ходов и мемоизацией
- solve / solve_sync: короткие обёртки
- SearchHooks и готовые наблюдатели (колбэки, дедлайн, прогресс)
"""

from .base import BaseSolver, SolverConfig, SolverStats, SolveResult
from .hooks import (
    SearchHooks, CallbackHooks, DelegatingHooks, DeadlineHooks, SampledProgressHooks
)
from .backtracking import BacktrackingSolver, solve, solve_sync

__all__ = [
    'BaseSolver',
    'SolverConfig',
    'SolverStats',
    'SolveResult',
    'SearchHooks',
    'CallbackHooks',
    'DelegatingHooks',
    'DeadlineHooks',
    'SampledProgressHooks',
    'BacktrackingSolver',
    'solve',
    'solve_sync',
]
