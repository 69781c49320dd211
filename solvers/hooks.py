"""
solvers/hooks.py

Наблюдатели поиска: отмена, колбэки визуализации и паузы.

Поиск вызывает on_start перед первым узлом, затем четыре точки: вход в узел
(should_stop, on_visit), перед ходом (should_stop), после хода
(on_apply_move, pause) и при откате (on_revert_move, pause).
Все асинхронные методы ожидаются по очереди.
"""

import asyncio
import inspect
import time
from typing import Callable, Optional

from core.moves import Move
from utils.logging import get_logger


async def _maybe_await(result) -> None:
    if inspect.isawaitable(result):
        await result


class SearchHooks:
    """Наблюдатель по умолчанию: ничего не делает и никогда не останавливает."""

    def on_start(self) -> None:
        """Вызывается один раз перед первым узлом поиска."""

    def should_stop(self) -> bool:
        return False

    async def on_visit(self, visited: int) -> None:
        pass

    async def on_apply_move(self, move: Move, depth: int) -> None:
        pass

    async def on_revert_move(self, move: Move, depth: int) -> None:
        pass

    async def pause(self) -> None:
        pass


class CallbackHooks(SearchHooks):
    """
    Наблюдатель из отдельных функций.

    Колбэки могут быть обычными функциями или возвращать awaitable —
    тогда поиск ждёт их завершения.
    """

    def __init__(self, should_stop: Optional[Callable[[], bool]] = None,
                 on_visit: Optional[Callable] = None,
                 on_apply_move: Optional[Callable] = None,
                 on_revert_move: Optional[Callable] = None,
                 step_delay: float = 0.0):
        self._should_stop = should_stop
        self._on_visit = on_visit
        self._on_apply_move = on_apply_move
        self._on_revert_move = on_revert_move
        self.step_delay = step_delay or 0.0

    def should_stop(self) -> bool:
        return bool(self._should_stop and self._should_stop())

    async def on_visit(self, visited: int) -> None:
        if self._on_visit is not None:
            await _maybe_await(self._on_visit(visited))

    async def on_apply_move(self, move: Move, depth: int) -> None:
        if self._on_apply_move is not None:
            await _maybe_await(self._on_apply_move(move, depth))

    async def on_revert_move(self, move: Move, depth: int) -> None:
        if self._on_revert_move is not None:
            await _maybe_await(self._on_revert_move(move, depth))

    async def pause(self) -> None:
        if self.step_delay > 0:
            await asyncio.sleep(self.step_delay)


class DelegatingHooks(SearchHooks):
    """Обёртка, передающая все вызовы вложенному наблюдателю."""

    def __init__(self, inner: Optional[SearchHooks] = None):
        self.inner = inner if inner is not None else SearchHooks()

    def on_start(self) -> None:
        self.inner.on_start()

    def should_stop(self) -> bool:
        return self.inner.should_stop()

    async def on_visit(self, visited: int) -> None:
        await self.inner.on_visit(visited)

    async def on_apply_move(self, move: Move, depth: int) -> None:
        await self.inner.on_apply_move(move, depth)

    async def on_revert_move(self, move: Move, depth: int) -> None:
        await self.inner.on_revert_move(move, depth)

    async def pause(self) -> None:
        await self.inner.pause()


class DeadlineHooks(DelegatingHooks):
    """
    Отмена по истечении времени.

    Отсчёт начинается с запуска поиска (on_start) или с restart();
    до запуска — с момента создания.
    Остановка кооперативная: срабатывает в ближайшей точке опроса.
    """

    def __init__(self, timeout: float, inner: Optional[SearchHooks] = None,
                 clock: Callable[[], float] = time.monotonic):
        super().__init__(inner)
        self.timeout = timeout
        self._clock = clock
        self._started = clock()
        self.expired = False

    def restart(self) -> None:
        self._started = self._clock()
        self.expired = False

    def on_start(self) -> None:
        self.restart()
        self.inner.on_start()

    def should_stop(self) -> bool:
        if self.inner.should_stop():
            return True
        if self._clock() - self._started >= self.timeout:
            self.expired = True
        return self.expired


class SampledProgressHooks(DelegatingHooks):
    """Пишет в лог каждый every-й посещённый узел."""

    def __init__(self, every: int = 10000, inner: Optional[SearchHooks] = None):
        super().__init__(inner)
        if every < 1:
            raise ValueError("every должен быть >= 1")
        self.every = every
        self.logger = get_logger()

    async def on_visit(self, visited: int) -> None:
        if visited % self.every == 0:
            self.logger.info(f"Visited {visited} nodes")
        await self.inner.on_visit(visited)
