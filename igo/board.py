# board.py
import hashlib
from enum import Enum
from typing import Iterator, List, Optional, Tuple

Point = Tuple[int, int]


class Color(str, Enum):
    BLACK = 'B'
    WHITE = 'W'


def opposite(color: Color) -> Color:
    return Color.WHITE if color == Color.BLACK else Color.BLACK


class Board:
    """
    Square grid of cells, each None (empty), Color.BLACK or Color.WHITE.
    Cells are stored row by row in a flat list indexed y * size + x.
    """

    def __init__(self, size: int = 19, cells: Optional[List[Optional[Color]]] = None):
        if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
            raise ValueError(f"Board size must be a positive integer, got {size!r}")
        self.size = size
        if cells is None:
            cells = [None] * (size * size)
        elif len(cells) != size * size:
            raise ValueError(f"Expected {size * size} cells, got {len(cells)}")
        self.cells: List[Optional[Color]] = list(cells)

    # --- helpers ---
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"Point {(x, y)} is off a {self.size}x{self.size} board")
        return y * self.size + x

    def get(self, x: int, y: int) -> Optional[Color]:
        return self.cells[self._index(x, y)]

    def set(self, x: int, y: int, color: Optional[Color]):
        self.cells[self._index(x, y)] = color

    def neighbors(self, x: int, y: int) -> Iterator[Point]:
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.size and 0 <= ny < self.size:
                yield nx, ny

    def points(self) -> Iterator[Point]:
        for y in range(self.size):
            for x in range(self.size):
                yield x, y

    def copy(self) -> 'Board':
        return Board(self.size, self.cells)

    def fingerprint(self) -> str:
        # deterministic hash over the stones only; side to move is not part of it
        raw = ''.join('.' if v is None else v.value for v in self.cells).encode('utf-8')
        return hashlib.sha256(raw).hexdigest()

    def rows(self) -> List[List[Optional[Color]]]:
        """Return a copy of the cells as a list of rows, suitable for a renderer."""
        return [self.cells[y * self.size:(y + 1) * self.size] for y in range(self.size)]

    # utility for tests
    def pretty(self) -> str:
        return '\n'.join(
            ''.join('.' if v is None else v.value for v in row)
            for row in self.rows()
        )

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __repr__(self):
        stones = sum(1 for v in self.cells if v is not None)
        return f"<Board {self.size}x{self.size} stones={stones}>"
