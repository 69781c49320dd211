"""
core/board.py

Изменяемая квадратная доска: маска играбельных клеток + колышки.

Поиск мутирует одну доску на месте (apply/revert), поэтому кроме
списков клеток доска поддерживает битовую маску колышков и их
количество: подсчёт и ключ мемо — O(1).
"""

from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from .moves import Move, jump_candidates
from .utils import PEG, HOLE, EMPTY, FP_BLOCKED, FP_HOLE, FP_PEG
from utils.error_handling import InvalidBoardError, InvalidMoveError, validate_size


class Cell(NamedTuple):
    """Клетка доски."""
    is_playable: bool
    is_occupied: bool


class Board:
    """
    Доска size×size, клетки в построчном порядке.

    Индекс i ↔ (i // size, i % size). Неиграбельная клетка никогда
    не занята колышком.
    """
    __slots__ = ('size', '_playable', '_occupied', '_pegs', '_playable_mask', '_count', '_jumps')

    def __init__(self, size: int, cells: Iterable[Tuple[bool, bool]]):
        validate_size(size)
        playable = bytearray()
        occupied = bytearray()
        for is_playable, is_occupied in cells:
            playable.append(1 if is_playable else 0)
            # Колышек вне доски отбрасываем
            occupied.append(1 if (is_playable and is_occupied) else 0)

        if len(playable) != size * size:
            raise InvalidBoardError(
                f"Доска {size}x{size} должна содержать {size * size} клеток, получено {len(playable)}"
            )

        self.size = size
        self._playable = playable
        self._occupied = occupied
        self._pegs = sum(1 << i for i, flag in enumerate(occupied) if flag)
        self._playable_mask = sum(1 << i for i, flag in enumerate(playable) if flag)
        self._count = sum(occupied)
        self._jumps: Optional[List[Move]] = None

    @classmethod
    def empty(cls, size: int, playable: bool = True) -> 'Board':
        """Доска без колышков."""
        validate_size(size)
        return cls(size, [(playable, False)] * (size * size))

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Создаёт доску из строк символов.

        Понимает оба алфавита: PEG/HOLE/EMPTY и 1/0/x.
        Пробелы внутри строки игнорируются.
        """
        grid = [[ch for ch in row if not ch.isspace()] for row in rows if row.strip()]
        size = len(grid)
        cells = []
        for r, row in enumerate(grid):
            if len(row) != size:
                raise InvalidBoardError(
                    f"Строка {r + 1}: ожидалось {size} клеток, получено {len(row)}"
                )
            for ch in row:
                if ch in (PEG, FP_PEG):
                    cells.append((True, True))
                elif ch in (HOLE, FP_HOLE):
                    cells.append((True, False))
                elif ch in (EMPTY, FP_BLOCKED):
                    cells.append((False, False))
                else:
                    raise InvalidBoardError(f"Неизвестный символ клетки: {ch!r}")
        return cls(size, cells)

    @classmethod
    def from_fingerprint(cls, text: str, size: int) -> 'Board':
        """Обратное преобразование fingerprint() → доска."""
        validate_size(size)
        if len(text) != size * size:
            raise InvalidBoardError(
                f"Отпечаток длины {len(text)} не подходит для доски {size}x{size}"
            )
        return cls.from_rows([text[i * size:(i + 1) * size] for i in range(size)])

    def to_rows(self) -> List[str]:
        """Матрица символов PEG/HOLE/EMPTY по строкам."""
        symbols = []
        for playable, occupied in zip(self._playable, self._occupied):
            symbols.append((PEG if occupied else HOLE) if playable else EMPTY)
        return [''.join(symbols[r * self.size:(r + 1) * self.size]) for r in range(self.size)]

    def clone(self) -> 'Board':
        """Независимая копия (поиск работает только с копией)."""
        copy = Board.__new__(Board)
        copy.size = self.size
        copy._playable = bytearray(self._playable)
        copy._occupied = bytearray(self._occupied)
        copy._pegs = self._pegs
        copy._playable_mask = self._playable_mask
        copy._count = self._count
        copy._jumps = self._jumps
        return copy

    # --- клетки ---

    def __len__(self) -> int:
        return len(self._playable)

    def __getitem__(self, index: int) -> Cell:
        return Cell(bool(self._playable[index]), bool(self._occupied[index]))

    def __iter__(self) -> Iterator[Cell]:
        for playable, occupied in zip(self._playable, self._occupied):
            yield Cell(bool(playable), bool(occupied))

    def set_playable(self, index: int, playable: bool) -> None:
        """Меняет геометрию; клетка вне доски теряет колышек."""
        self._check_index(index)
        if not playable and self._occupied[index]:
            self._clear(index)
        if bool(self._playable[index]) != bool(playable):
            self._playable[index] = 1 if playable else 0
            self._playable_mask ^= 1 << index
            self._jumps = None

    def set_occupied(self, index: int, occupied: bool) -> None:
        """Ставит или убирает колышек."""
        self._check_index(index)
        if occupied and not self._playable[index]:
            raise InvalidMoveError(f"Клетка {index} не играбельна")
        if occupied and not self._occupied[index]:
            self._occupied[index] = 1
            self._pegs |= 1 << index
            self._count += 1
        elif not occupied and self._occupied[index]:
            self._clear(index)

    def _check_index(self, index: int) -> None:
        # отрицательный индекс bytearray допускает, а битовая маска — нет
        if not 0 <= index < len(self._playable):
            raise InvalidMoveError(f"Клетка {index} вне доски")

    def _clear(self, index: int) -> None:
        self._occupied[index] = 0
        self._pegs &= ~(1 << index)
        self._count -= 1

    def reset(self) -> None:
        """Колышки во всех играбельных клетках, кроме центральной."""
        center = (self.size // 2) * self.size + self.size // 2
        for i in range(len(self)):
            self.set_occupied(i, bool(self._playable[i]) and i != center)

    # --- ходы ---

    def generate_moves(self) -> List[Move]:
        """
        Все допустимые ходы в текущей позиции.

        Порядок: источники построчно, затем вправо, влево, вниз, вверх.
        """
        if self._jumps is None:
            self._jumps = jump_candidates(self._playable, self.size)
        occ = self._occupied
        return [m for m in self._jumps if occ[m[0]] and occ[m[1]] and not occ[m[2]]]

    def apply_move(self, move: Move) -> None:
        """Выполняет ход на месте. Ход должен быть допустимым."""
        from_pos, jumped, to_pos = move
        occ = self._occupied
        occ[from_pos] = 0
        occ[jumped] = 0
        occ[to_pos] = 1
        self._pegs ^= (1 << from_pos) | (1 << jumped) | (1 << to_pos)
        self._count -= 1

    def revert_move(self, move: Move) -> None:
        """Точная отмена apply_move."""
        from_pos, jumped, to_pos = move
        occ = self._occupied
        occ[from_pos] = 1
        occ[jumped] = 1
        occ[to_pos] = 0
        self._pegs ^= (1 << from_pos) | (1 << jumped) | (1 << to_pos)
        self._count += 1

    # --- состояние ---

    def peg_count(self) -> int:
        """Количество колышков на играбельных клетках — O(1)."""
        return self._count

    def fingerprint(self) -> str:
        """Каноническая строка: x — вне доски, 0 — дырка, 1 — колышек."""
        return ''.join(
            (FP_PEG if occupied else FP_HOLE) if playable else FP_BLOCKED
            for playable, occupied in zip(self._playable, self._occupied)
        )

    def state_key(self) -> int:
        """
        Упакованный отпечаток: по два бита на клетку (маска доски и маска
        колышков). Совпадает у досок с одинаковым fingerprint().
        """
        return (self._playable_mask << len(self._playable)) | self._pegs

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.size == other.size and
            self._playable == other._playable and
            self._occupied == other._occupied
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Board({self.size}x{self.size}, {self.peg_count()} pegs)"
