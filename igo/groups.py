# groups.py
from collections import namedtuple
from typing import List

from igo.board import Board, Color

# stones and liberties are sets of (x, y) points
Group = namedtuple('Group', ['stones', 'liberties'])


def analyze_group(board: Board, x: int, y: int) -> Group:
    """Return the group containing (x, y) and its liberties.

    An empty starting point yields an empty group.
    """
    color = board.get(x, y)
    if color is None:
        return Group(set(), set())
    visited = set()
    liberties = set()
    stack = [(x, y)]
    while stack:
        p = stack.pop()
        if p in visited:
            continue
        visited.add(p)
        for nx, ny in board.neighbors(*p):
            v = board.get(nx, ny)
            if v is None:
                liberties.add((nx, ny))
            elif v == color and (nx, ny) not in visited:
                stack.append((nx, ny))
    return Group(visited, liberties)


def adjacent_groups(board: Board, x: int, y: int, color: Color) -> List[Group]:
    """Distinct groups of `color` touching (x, y), each listed once."""
    groups = []
    seen = set()
    for nx, ny in board.neighbors(x, y):
        if board.get(nx, ny) != color or (nx, ny) in seen:
            continue
        group = analyze_group(board, nx, ny)
        seen |= group.stones
        groups.append(group)
    return groups
