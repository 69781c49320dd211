#!/usr/bin/env python3
"""
main.py

Точка входа для решателя Peg Solitaire.

Использование:
    python main.py                            # английская доска 7x7
    python main.py --layout full --size 5     # квадрат 5x5
    python main.py --board my_board.txt       # своя позиция
    python main.py --timeout 10 --progress-every 50000
"""

import argparse
import asyncio
import logging
import sys

from peg_io import default_layout, display_board, english_board, format_solution, full_board, load_board
from solutions.verify import verify_solution
from solvers import BacktrackingSolver, CallbackHooks, DeadlineHooks, SampledProgressHooks, SolverConfig
from utils.error_handling import SolverError, safe_solve
from utils.logging import get_logger, setup_file_logging


LAYOUTS = {
    'english': english_board,
    'default': default_layout,
    'full': full_board,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Peg Solitaire backtracking solver")
    parser.add_argument('--layout', choices=sorted(LAYOUTS), default='english',
                        help="стандартная раскладка (по умолчанию english)")
    parser.add_argument('--size', type=int, default=7, help="сторона доски для --layout")
    parser.add_argument('--board', help="файл с доской (●/○/▫ или 1/0/x)")
    parser.add_argument('--delay', type=float, default=0.0,
                        help="пауза в секундах после каждого хода и отката")
    parser.add_argument('--timeout', type=float, default=None,
                        help="прервать поиск через N секунд")
    parser.add_argument('--no-path', action='store_true', help="не сохранять путь решения")
    parser.add_argument('--progress-every', type=int, default=0,
                        help="писать в лог каждый N-й узел")
    parser.add_argument('--log-file', help="дублировать лог в файл")
    parser.add_argument('--verbose', action='store_true', help="отладочный вывод ходов")
    return parser


def build_config(args, size: int) -> SolverConfig:
    """Собирает конфигурацию поиска из аргументов командной строки."""
    hooks = CallbackHooks(step_delay=args.delay)
    if args.progress_every:
        hooks = SampledProgressHooks(every=args.progress_every, inner=hooks)
    if args.timeout is not None:
        hooks = DeadlineHooks(args.timeout, inner=hooks)
    return SolverConfig(
        size=size,
        record_path=not args.no_path,
        hooks=hooks,
        verbose=args.verbose,
    )


async def run(args) -> int:
    logger = get_logger()

    try:
        board = load_board(args.board) if args.board else LAYOUTS[args.layout](args.size)
    except (OSError, SolverError) as e:
        logger.error(f"Не удалось загрузить доску: {e}")
        return 2

    print("Начальная позиция:")
    print(display_board(board))
    print(f"Колышков: {board.peg_count()}")
    print()

    solver = BacktrackingSolver(build_config(args, board.size))
    result = await safe_solve(solver, board)
    if result is None:
        return 2

    print(f"📊 Статистика: {result.stats}")
    if not result.solved:
        if result.stats.cancelled:
            print("⏹ Поиск прерван")
        else:
            print(format_solution(None, board.size))
        return 1

    if result.path is None:
        print(f"✅ Решение существует ({result.stats.solution_length} ходов)")
        return 0

    print(format_solution(result.path, board.size))
    if not verify_solution(board, result.path):
        print("❌ Решение некорректно!")
        return 1
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logger = get_logger()
    if args.verbose:
        logger.set_level(logging.DEBUG)
    if args.log_file:
        setup_file_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
