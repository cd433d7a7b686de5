# tests/test_suicide_and_merge.py
import pytest
from igo.board import Color
from igo.game_state import GameState, Suicide
from igo.rules import Reason


def test_simple_suicide_forbidden():
    s = GameState(size=3)
    # surround corner (0,0) so that W cannot play there
    s.play(1, 0)
    s.play(2, 2)
    s.play(0, 1)
    with pytest.raises(Suicide):
        s.play(0, 0)
    assert s.color_at(0, 0) is None
    assert s.turn == Color.WHITE
    assert len(s.history) == 3


def test_multi_stone_suicide_restores_board():
    s = GameState(size=5)
    s.board.set(0, 0, Color.WHITE)
    for p in [(1, 0), (1, 1), (0, 2)]:
        s.board.set(*p, Color.BLACK)
    s.turn = Color.WHITE
    before = s.board.copy()
    outcome = s.apply_move(0, 1)
    assert outcome.reason == Reason.SUICIDE
    assert s.board == before
    assert s.captures == {Color.BLACK: 0, Color.WHITE: 0}
    assert s.history == []


def test_merge_prevents_suicide():
    s = GameState(size=5)
    # two white stones that the connecting move joins into one living group
    s.play(1, 0)
    s.play(0, 1)
    s.play(2, 2)
    s.play(2, 1)
    s.pass_turn()
    s.play(1, 1)
    assert s.color_at(1, 1) == Color.WHITE


def test_capture_before_suicide():
    # black's stone at (0,0) has no liberty of its own until the captures resolve
    s = GameState(size=5)
    for p in [(2, 0), (1, 1), (0, 2)]:
        s.board.set(*p, Color.BLACK)
    for p in [(1, 0), (0, 1)]:
        s.board.set(*p, Color.WHITE)
    outcome = s.apply_move(0, 0)
    assert outcome.accepted
    assert outcome.captured == 2
    assert s.color_at(0, 0) == Color.BLACK
    assert s.color_at(1, 0) is None and s.color_at(0, 1) is None
    assert s.captures[Color.BLACK] == 2


def test_filling_own_eye_with_liberties_left_is_legal():
    s = GameState(size=5)
    for p in [(1, 0), (0, 1)]:
        s.board.set(*p, Color.BLACK)
    outcome = s.apply_move(0, 0)
    assert outcome.accepted
    assert outcome.captured == 0
