from dataclasses import replace

from npuzzle.domains.state import Move, PuzzleState, goal_positions, goal_tiles, state_key


def test_from_grid_locates_blank():
    s = PuzzleState.from_grid([1, 2, 0, 4, 5, 3, 7, 8, 6])
    assert s.tiles == (1, 2, 0, 4, 5, 3, 7, 8, 6)
    assert s.blank_index == 2
    assert s.dim == 3
    assert s.g == 0 and s.h == 0 and s.f == 0
    assert s.move == Move.START
    assert s.parent_key is None


def test_equality_ignores_bookkeeping():
    s = PuzzleState.from_grid(goal_tiles(3))
    t = replace(s, g=7, h=3.5, move=Move.LEFT, parent_key=123)
    assert s == t
    assert hash(s) == hash(t)
    assert t.f == 10.5
    assert {s: 1}[t] == 1


def test_key_is_collision_free_for_two_digit_tiles():
    a = [1, 11, 2, 3, 4, 5, 6, 7, 8, 9, 10, 12, 13, 14, 15, 0]
    b = [11, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 12, 13, 14, 15, 0]
    # naive string concatenation gives "1112..." for both
    assert "".join(map(str, a)) == "".join(map(str, b))
    assert state_key(a) != state_key(b)
    assert PuzzleState.from_grid(a).key == state_key(a)


def test_goal_tables():
    assert goal_tiles(2) == (1, 2, 3, 0)
    assert goal_positions(3)[1] == (0, 0)
    assert goal_positions(3)[8] == (2, 1)
    assert goal_positions(4)[12] == (2, 3)
    assert 0 not in goal_positions(4)


def test_move_inverse():
    assert Move.UP.inverse == Move.DOWN
    assert Move.DOWN.inverse == Move.UP
    assert Move.LEFT.inverse == Move.RIGHT
    assert Move.RIGHT.inverse == Move.LEFT
    assert Move.START.inverse == Move.START
    assert Move.RIGHT.label == "RIGHT"
