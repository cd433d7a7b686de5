# scoring.py
from dataclasses import dataclass
from typing import Optional, Set, Tuple

from igo.board import Board, Color, Point
from igo.config import DEFAULTS


@dataclass(frozen=True)
class ScoreEstimate:
    black_territory: int
    white_territory: int
    black_score: float
    white_score: float
    komi: float

    @property
    def winner(self) -> Optional[Color]:
        """Leading color, or None for jigo."""
        if self.black_score == self.white_score:
            return None
        return Color.BLACK if self.black_score > self.white_score else Color.WHITE

    def summary(self) -> str:
        if self.winner is None:
            result = "jigo (draw)"
        elif self.winner == Color.BLACK:
            result = "Black leads"
        else:
            result = "White leads"
        return (f"Estimate: Black {self.black_score:.1f}, White {self.white_score:.1f} "
                f"(komi {self.komi}) -> {result}")


def _flood_empty(board: Board, start: Point, visited: Set[Point]) -> Tuple[int, Set[Color]]:
    """Size of the empty region containing start and the colors that border it."""
    stack = [start]
    visited.add(start)
    count = 0
    touching = set()
    while stack:
        x, y = stack.pop()
        count += 1
        for nx, ny in board.neighbors(x, y):
            v = board.get(nx, ny)
            if v is None:
                if (nx, ny) not in visited:
                    visited.add((nx, ny))
                    stack.append((nx, ny))
            else:
                touching.add(v)
    return count, touching


def estimate_score(state, komi: Optional[float] = None) -> ScoreEstimate:
    """
    Simplified end-of-game count. Every stone on the board is treated as alive:
    an empty region bordered by a single color is that color's territory,
    anything else is dame. Prisoners are added, komi goes to White.
    """
    if komi is None:
        komi = DEFAULTS['komi']
    board = state.board
    visited: Set[Point] = set()
    territory = {Color.BLACK: 0, Color.WHITE: 0}
    for p in board.points():
        if board.get(*p) is not None or p in visited:
            continue
        count, touching = _flood_empty(board, p, visited)
        if len(touching) == 1:
            territory[touching.pop()] += count
    return ScoreEstimate(
        black_territory=territory[Color.BLACK],
        white_territory=territory[Color.WHITE],
        black_score=float(territory[Color.BLACK] + state.captures[Color.BLACK]),
        white_score=territory[Color.WHITE] + state.captures[Color.WHITE] + float(komi),
        komi=float(komi),
    )
