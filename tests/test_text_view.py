# tests/test_text_view.py
from igo.game_state import GameState
from igo.text_view import column_labels, render_board, star_points


def test_column_labels_skip_i():
    labels = column_labels(10)
    assert "I" not in labels
    assert labels[-2:] == ["J", "K"]
    assert len(column_labels(19)) == 19


def test_star_points():
    assert star_points(5) == []
    assert len(star_points(9)) == 9
    assert (4, 4) in star_points(9)
    assert (6, 6) in star_points(13)
    assert (15, 3) in star_points(19)
    assert star_points(7) == [(3, 3)]


def test_render_without_coords():
    s = GameState(size=5)
    s.play(0, 0)
    s.play(4, 4)
    assert render_board(s) == "\n".join([
        "X . . . .",
        ". . . . .",
        ". . . . .",
        ". . . . .",
        ". . . . O",
    ])


def test_render_with_coords():
    s = GameState(size=9)
    s.toggle_coords()
    lines = render_board(s).splitlines()
    assert lines[0] == "  A B C D E F G H J"
    assert lines[1].startswith("9 . .")
    assert lines[3] == "7 . . + . + . + . ."
    assert lines[-1].startswith("1 ")
