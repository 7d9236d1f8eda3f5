from typing import List, NamedTuple, Optional, Sequence, Set, Tuple

from .errors import (ImmutableCell, InvalidDimensions, InvalidEntrance,
                     InvalidExit, OutOfBounds)

CELL_WALL = '#'
CELL_OPEN = ' '
CELL_ENTRANCE = 'E'
CELL_EXIT = 'S'
CELL_MARKED = '*'


class Coordinate(NamedTuple):
    row: int
    col: int

    def __str__(self):
        return f"({self.row},{self.col})"


def _cell_from_char(ch: str) -> str:
    """Будь-який невідомий символ (зокрема пробіл) вважається проходом."""
    if ch in (CELL_WALL, CELL_ENTRANCE, CELL_EXIT, CELL_MARKED):
        return ch
    return CELL_OPEN


class Maze:
    """
    Клас для представлення 2D лабіринту, заданого текстовою сіткою.

    Базова сітка (стіни, проходи, вхід, вихід) після створення не змінюється.
    Клітинки поточного шляху зберігаються окремою множиною координат, а
    get() та текстове представлення показують їх як CELL_MARKED.
    """
    def __init__(self, rows: int, cols: int, lines: Sequence[str]):
        if rows < 1 or cols < 1 or len(lines) < rows:
            raise InvalidDimensions(
                f"Invalid dimensions or incomplete map: {rows}x{cols}, {len(lines)} line(s) supplied")
        self.rows = rows
        self.cols = cols
        self._grid: List[List[str]] = []
        self._marked: Set[Coordinate] = set()

        for r in range(rows):
            line = lines[r]
            row = []
            for c in range(cols):
                # Короткі рядки доповнюються проходами справа
                cell = _cell_from_char(line[c]) if c < len(line) else CELL_OPEN
                if cell == CELL_MARKED:
                    self._marked.add(Coordinate(r, c))
                    cell = CELL_OPEN
                row.append(cell)
            self._grid.append(row)

        self._validate_entrance_exit()

    def _on_border(self, r: int, c: int) -> bool:
        return r == 0 or r == self.rows - 1 or c == 0 or c == self.cols - 1

    def _validate_entrance_exit(self):
        """Рівно один вхід (на межі) та рівно один вихід (будь-де)."""
        entrances = 0
        exits = 0
        for r in range(self.rows):
            for c in range(self.cols):
                cell = self._grid[r][c]
                if cell == CELL_ENTRANCE:
                    if not self._on_border(r, c):
                        raise InvalidEntrance(f"Entrance is not on the border: {Coordinate(r, c)}")
                    entrances += 1
                elif cell == CELL_EXIT:
                    exits += 1
        if entrances != 1:
            raise InvalidEntrance(f"Invalid number of entrances: {entrances}")
        if exits != 1:
            raise InvalidExit(f"Invalid number of exits: {exits}")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, r: int, c: int) -> bool:
        """Перевіряє, чи знаходяться координати в межах лабіринту."""
        return 0 <= r < self.rows and 0 <= c < self.cols

    def get(self, r: int, c: int) -> str:
        """Повертає значення клітинки (з урахуванням позначок шляху)."""
        if not self.in_bounds(r, c):
            raise OutOfBounds(f"Coordinate out of bounds: ({r},{c})")
        if (r, c) in self._marked:
            return CELL_MARKED
        return self._grid[r][c]

    def set(self, r: int, c: int, value: str):
        """
        Позначає клітинку шляху (CELL_MARKED) або знімає позначку (CELL_OPEN).
        Стіни, вхід та вихід змінювати не можна.
        """
        self.get(r, c)
        if value not in (CELL_OPEN, CELL_MARKED) or self._grid[r][c] != CELL_OPEN:
            raise ImmutableCell(f"Cannot write {value!r} to {self._grid[r][c]!r} cell at ({r},{c})")
        if value == CELL_MARKED:
            self._marked.add(Coordinate(r, c))
        else:
            self._marked.discard(Coordinate(r, c))

    def find_entrance(self) -> Optional[Coordinate]:
        return self._find(CELL_ENTRANCE)

    def find_exit(self) -> Optional[Coordinate]:
        return self._find(CELL_EXIT)

    def _find(self, target: str) -> Optional[Coordinate]:
        for r in range(self.rows):
            for c in range(self.cols):
                if self._grid[r][c] == target:
                    return Coordinate(r, c)
        return None

    def marked_cells(self) -> Set[Coordinate]:
        return set(self._marked)

    def to_lines(self) -> List[str]:
        """Сітка у вигляді рядків, позначені клітинки як '*'."""
        return [''.join(self.get(r, c) for c in range(self.cols)) for r in range(self.rows)]

    def snapshot(self) -> Tuple[str, ...]:
        return tuple(self.to_lines())

    def display(self):
        """Виводить лабіринт у консоль."""
        for line in self.to_lines():
            print(line)
