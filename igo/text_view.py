# text_view.py
# Plain-text rendering of a game state, for terminals, logs and tests.
from typing import List, Tuple

from igo.board import Color

STONE_CHARS = {Color.BLACK: 'X', Color.WHITE: 'O'}


# Utility: column labels A.. (skip I)
def column_labels(n: int) -> List[str]:
    labels = []
    ch = ord('A')
    while len(labels) < n:
        c = chr(ch)
        if c == 'I':
            ch += 1
            continue
        labels.append(c)
        ch += 1
    return labels


def star_points(n: int) -> List[Tuple[int, int]]:
    if n < 7:
        return []
    if n == 9:
        pos = [2, 4, 6]
    elif n == 13:
        pos = [3, 6, 9]
    else:
        pos = [p for p in (3, 9, 15) if p < n]
    return [(x, y) for y in pos for x in pos]


def render_board(state) -> str:
    size = state.size
    stars = set(star_points(size))
    lines = []
    width = len(str(size))
    for y, row in enumerate(state.get_board()):
        cells = []
        for x, v in enumerate(row):
            if v is not None:
                cells.append(STONE_CHARS[v])
            elif (x, y) in stars:
                cells.append('+')
            else:
                cells.append('.')
        line = ' '.join(cells)
        if state.show_coords:
            line = f"{size - y:>{width}} {line}"
        lines.append(line)
    if state.show_coords:
        lines.insert(0, ' ' * (width + 1) + ' '.join(column_labels(size)))
    return '\n'.join(lines)
