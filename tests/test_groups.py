# tests/test_groups.py
from igo.board import Board, Color
from igo.groups import adjacent_groups, analyze_group


def test_group_and_liberties():
    b = Board(5)
    for p in [(1, 1), (2, 1), (2, 2)]:
        b.set(*p, Color.BLACK)
    b.set(3, 1, Color.WHITE)
    group = analyze_group(b, 1, 1)
    assert group.stones == {(1, 1), (2, 1), (2, 2)}
    assert group.liberties == {(0, 1), (1, 0), (1, 2), (2, 0), (3, 2), (2, 3)}


def test_corner_stone_has_two_liberties():
    b = Board(9)
    b.set(0, 0, Color.WHITE)
    assert analyze_group(b, 0, 0).liberties == {(1, 0), (0, 1)}


def test_empty_point_has_no_group():
    b = Board(5)
    group = analyze_group(b, 2, 2)
    assert group.stones == set()
    assert group.liberties == set()


def test_diagonal_stones_are_separate_groups():
    b = Board(5)
    b.set(1, 1, Color.BLACK)
    b.set(2, 2, Color.BLACK)
    assert analyze_group(b, 1, 1).stones == {(1, 1)}


def test_adjacent_groups_listed_once():
    b = Board(5)
    for p in [(1, 1), (1, 2), (2, 2)]:
        b.set(*p, Color.WHITE)
    groups = adjacent_groups(b, 2, 1, Color.WHITE)
    assert len(groups) == 1
    assert groups[0].stones == {(1, 1), (1, 2), (2, 2)}
    assert adjacent_groups(b, 2, 1, Color.BLACK) == []
