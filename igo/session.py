# session.py
import threading
from typing import Callable, Optional, Tuple

from igo.board import Color
from igo.config import DEFAULTS
from igo.game_state import GameState, new_game
from igo.rules import Reason
from igo.scoring import ScoreEstimate, estimate_score
from igo.text_view import render_board

DEBUG = DEFAULTS['debug']

REJECT_MESSAGES = {
    Reason.OCCUPIED: "Can't play there (occupied)",
    Reason.SUICIDE: "Suicide is not allowed",
    Reason.KO: "Forbidden by ko",
    Reason.GAME_OVER: "The game is over",
}

COLOR_NAMES = {Color.BLACK: "Black", Color.WHITE: "White"}


class GameSession:
    """
    One player-facing game for a presentation layer.
    Responsible for:
      - owning the current GameState and replacing it on a new game
      - turning move outcomes into short user-facing messages
      - serialising every call under a single per-session lock
    """

    def __init__(self, size: Optional[int] = None, komi: Optional[float] = None):
        self._lock = threading.Lock()
        self.komi = DEFAULTS['komi'] if komi is None else komi
        self.state: GameState = new_game(size)
        # callback fired after every committed change
        self.on_change: Optional[Callable[[GameState], None]] = None

    def _changed(self):
        if self.on_change:
            try:
                self.on_change(self.state)
            except Exception as e:
                if DEBUG:
                    print("[GameSession] on_change callback error:", e)

    def new_game(self, size: Optional[int] = None):
        if size is None:
            size = self.state.size
        with self._lock:
            if DEBUG:
                print("[GameSession] new game", size)
            self.state = new_game(size)
        self._changed()

    def place(self, x: int, y: int) -> Tuple[bool, str]:
        """Try to play at (x, y). Returns (ok, message)."""
        with self._lock:
            outcome = self.state.apply_move(x, y)
        if not outcome.accepted:
            return False, REJECT_MESSAGES[outcome.reason]
        self._changed()
        if outcome.captured:
            return True, f"Captured {outcome.captured}"
        return True, ""

    def pass_turn(self) -> str:
        with self._lock:
            if self.state.game_over:
                return REJECT_MESSAGES[Reason.GAME_OVER]
            self.state.pass_turn()
            over = self.state.game_over
        self._changed()
        if over:
            return "Game over. You can run the score estimate."
        return f"{COLOR_NAMES[self.state.turn]} to play"

    def undo(self) -> Tuple[bool, str]:
        with self._lock:
            ok = self.state.undo()
        if not ok:
            return False, "Nothing to undo"
        self._changed()
        return True, ""

    def toggle_coords(self):
        with self._lock:
            self.state.toggle_coords()
        self._changed()

    def estimate(self) -> ScoreEstimate:
        with self._lock:
            return estimate_score(self.state, self.komi)

    def status(self) -> str:
        with self._lock:
            s = self.state
            return '\n'.join([
                f"Turn: {COLOR_NAMES[s.turn]}",
                f"Black captures: {s.captures[Color.BLACK]} / White captures: {s.captures[Color.WHITE]}",
                f"Passes in a row: {s.passes_in_row}",
            ])

    def render(self) -> str:
        with self._lock:
            return render_board(self.state)
