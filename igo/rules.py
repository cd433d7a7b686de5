# rules.py
from collections import namedtuple
from enum import Enum

from igo.board import opposite
from igo.config import DEFAULTS
from igo.groups import adjacent_groups, analyze_group

DEBUG = DEFAULTS['debug']


class Reason(str, Enum):
    OCCUPIED = 'occupied'
    SUICIDE = 'suicide'
    KO = 'ko'
    GAME_OVER = 'game_over'


MoveOutcome = namedtuple('MoveOutcome', ['accepted', 'captured', 'reason', 'fingerprint'])


def accepted(captured: int, fingerprint: str) -> MoveOutcome:
    return MoveOutcome(True, captured, None, fingerprint)


def rejected(reason: Reason) -> MoveOutcome:
    return MoveOutcome(False, 0, reason, None)


def try_move(state, x: int, y: int) -> MoveOutcome:
    """
    Check a move by state.turn at (x, y) and, if legal, leave it on state.board.

    Order matters: opponent captures are resolved on all four sides before the
    mover's own liberties are looked at, so filling a last liberty is legal when
    it captures. Every rejection leaves the board exactly as it was.
    Turn, captures and history are left to the caller.
    """
    board = state.board
    if not board.in_bounds(x, y) or board.get(x, y) is not None:
        return rejected(Reason.OCCUPIED)
    me = state.turn
    before = list(board.cells)
    board.set(x, y, me)

    captured = 0
    for group in adjacent_groups(board, x, y, opposite(me)):
        if group.liberties:
            continue
        for sx, sy in group.stones:
            board.set(sx, sy, None)
        captured += len(group.stones)

    if captured == 0 and not analyze_group(board, x, y).liberties:
        board.cells = before
        if DEBUG:
            print("[rules] suicide at", (x, y), "by", me.value)
        return rejected(Reason.SUICIDE)

    new_hash = board.fingerprint()
    if new_hash == state.ko_guard_hash:
        board.cells = before
        if DEBUG:
            print("[rules] ko at", (x, y), "by", me.value)
        return rejected(Reason.KO)
    return accepted(captured, new_hash)
