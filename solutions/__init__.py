"""
solutions - Проверка найденных решений.
"""

from .verify import replay, verify_solution

__all__ = [
    'replay',
    'verify_solution',
]
