# game_state.py
from typing import Dict, List, Optional

from igo.board import Board, Color, opposite
from igo.config import DEFAULTS
from igo.rules import MoveOutcome, Reason, rejected, try_move

DEBUG = DEFAULTS['debug']


# Exceptions
class IllegalMove(Exception): pass


class OccupiedPoint(IllegalMove): pass


class Suicide(IllegalMove): pass


class KoViolation(IllegalMove): pass


class GameOver(IllegalMove): pass


_REASON_ERRORS = {
    Reason.OCCUPIED: OccupiedPoint,
    Reason.SUICIDE: Suicide,
    Reason.KO: KoViolation,
    Reason.GAME_OVER: GameOver,
}


class GameState:
    def __init__(self, size: int = 19):
        self.board = Board(size)
        self.turn = Color.BLACK
        self.captures: Dict[Color, int] = {Color.BLACK: 0, Color.WHITE: 0}
        self.history: List[dict] = []  # stack of snapshots for undo
        self.passes_in_row = 0
        self.ko_guard_hash: Optional[str] = None
        self.show_coords = False
        self.game_over = False

    @property
    def size(self) -> int:
        return self.board.size

    # --- snapshots ---
    def _snapshot(self) -> dict:
        # independent copies only, so later play can't reach into history
        return {
            'board': self.board.copy(),
            'turn': self.turn,
            'captures': dict(self.captures),
            'passes_in_row': self.passes_in_row,
            'ko_guard_hash': self.ko_guard_hash,
            'show_coords': self.show_coords,
            'game_over': self.game_over,
        }

    def _restore(self, snap: dict):
        self.board = snap['board'].copy()
        self.turn = snap['turn']
        self.captures = dict(snap['captures'])
        self.passes_in_row = snap['passes_in_row']
        self.ko_guard_hash = snap['ko_guard_hash']
        self.show_coords = snap['show_coords']
        self.game_over = snap['game_over']

    # --- main API ---
    def apply_move(self, x: int, y: int) -> MoveOutcome:
        """Play a stone for the side to move. Rejections leave the state untouched."""
        if self.game_over:
            return rejected(Reason.GAME_OVER)
        pre = self._snapshot()
        pre_hash = self.board.fingerprint()
        outcome = try_move(self, x, y)
        if not outcome.accepted:
            if DEBUG:
                print("[GameState] rejected", (x, y), outcome.reason.value)
            return outcome
        self.history.append(pre)
        self.captures[self.turn] += outcome.captured
        # the opponent may not answer by recreating the position from before this move
        self.ko_guard_hash = pre_hash
        self.turn = opposite(self.turn)
        self.passes_in_row = 0
        if DEBUG:
            print("[GameState] move", (x, y), "captured", outcome.captured)
        return outcome

    def pass_turn(self):
        if self.game_over:
            return
        self.history.append(self._snapshot())
        self.ko_guard_hash = self.board.fingerprint()
        self.turn = opposite(self.turn)
        self.passes_in_row += 1
        if self.passes_in_row >= 2:
            self.game_over = True
            if DEBUG:
                print("[GameState] two passes, game over")

    def undo(self) -> bool:
        if not self.history:
            return False
        self._restore(self.history.pop())
        return True

    def can_undo(self) -> bool:
        return bool(self.history)

    def toggle_coords(self):
        self.show_coords = not self.show_coords

    # convenience wrapper
    def play(self, x: int, y: int) -> int:
        """Like apply_move, but raise an IllegalMove subclass on rejection.

        Returns the number of stones captured.
        """
        outcome = self.apply_move(x, y)
        if not outcome.accepted:
            raise _REASON_ERRORS[outcome.reason](f"{outcome.reason.value} at {(x, y)}")
        return outcome.captured

    # --- read accessors ---
    def color_at(self, x: int, y: int) -> Optional[Color]:
        return self.board.get(x, y)

    def current_player(self) -> Color:
        return self.turn

    def get_board(self) -> List[List[Optional[Color]]]:
        """Return a copy of the board as rows of None/Color.BLACK/Color.WHITE."""
        return self.board.rows()


def new_game(size: Optional[int] = None) -> GameState:
    if size is None:
        size = DEFAULTS['board_size']
    return GameState(size)
