import pytest

from snakegrid.snake import Direction, Snake


def test_initial_head_position():
    assert Snake(5, 10).head == (5, 10)


def test_initial_body_size():
    assert len(Snake(3, 3).body) == 1


def test_occupies_start_cell():
    s = Snake(4, 7)
    assert s.occupies(4, 7)
    assert not s.occupies(0, 0)


def test_default_direction_is_right():
    assert Snake(0, 0).direction is Direction.RIGHT


def test_moves_right_by_default():
    s = Snake(5, 5)
    assert s.move()
    assert s.head == (6, 5)
    assert len(s.body) == 1


def test_moves_left_after_perpendicular_turn():
    s = Snake(5, 5)
    s.set_direction(Direction.UP)
    s.set_direction(Direction.LEFT)
    s.move()
    assert s.head == (4, 5)


def test_moves_up():
    s = Snake(5, 5)
    s.set_direction(Direction.UP)
    s.move()
    assert s.head == (5, 4)


def test_moves_down():
    s = Snake(5, 5)
    s.set_direction(Direction.DOWN)
    s.move()
    assert s.head == (5, 6)


def test_tail_removed_after_move():
    s = Snake(5, 5)
    s.move()
    assert not s.occupies(5, 5)


def test_grow_increases_length():
    s = Snake(5, 5)
    s.grow()
    s.move()
    assert len(s.body) == 2


def test_grow_keeps_tail_cell():
    s = Snake(5, 5)
    s.grow()
    s.move()
    assert s.occupies(5, 5)
    assert s.occupies(6, 5)


def test_pending_grow_resets_after_one_move():
    s = Snake(5, 5)
    s.grow()
    s.move()
    s.move()
    assert len(s.body) == 2


def test_multiple_grows():
    s = Snake(1, 1)
    for _ in range(3):
        s.grow()
        s.move()
    assert len(s.body) == 4


def test_cannot_reverse_right_to_left():
    s = Snake(5, 5)
    s.set_direction(Direction.LEFT)
    s.move()
    assert s.head == (6, 5)
    assert s.direction is Direction.RIGHT


def test_cannot_reverse_up_to_down():
    s = Snake(5, 5)
    s.set_direction(Direction.UP)
    s.move()
    s.set_direction(Direction.DOWN)
    s.move()
    assert s.head == (5, 3)


def test_perpendicular_change_accepted():
    s = Snake(5, 5)
    s.set_direction(Direction.UP)
    s.move()
    assert s.head == (5, 4)


@pytest.mark.parametrize(
    "path",
    [
        (Direction.UP,),
        (Direction.DOWN,),
        (Direction.RIGHT,),
        (Direction.UP, Direction.LEFT),
    ],
)
def test_opposite_turn_is_refused(path):
    s = Snake(5, 5)
    for step in path:
        s.set_direction(step)
    direction = path[-1]
    assert s.direction is direction
    s.set_direction(direction.opposite)
    assert s.direction is direction
    assert direction.opposite.opposite is direction


def test_no_self_collision_when_short():
    s = Snake(5, 5)
    assert s.move()


def test_loop_back_without_collision():
    s = Snake(2, 2)
    for _ in range(4):
        s.grow()
        s.move()
    assert s.body == ((6, 2), (5, 2), (4, 2), (3, 2), (2, 2))
    s.set_direction(Direction.DOWN)
    s.move()
    s.set_direction(Direction.LEFT)
    for _ in range(4):
        s.move()
    assert s.head == (2, 3)
    s.set_direction(Direction.UP)
    assert s.move()
    assert s.head == (2, 2)


def test_walkthrough_ends_in_self_collision():
    s = Snake(5, 5)
    s.move()
    s.move()
    assert s.body == ((7, 5),)
    s.grow()
    s.move()
    assert s.body == ((8, 5), (7, 5))
    s.set_direction(Direction.LEFT)
    s.move()
    assert s.body == ((9, 5), (8, 5))
    for _ in range(3):
        s.grow()
        s.move()
    s.set_direction(Direction.UP)
    assert s.move()
    s.set_direction(Direction.LEFT)
    assert s.move()
    s.set_direction(Direction.DOWN)
    assert not s.move()
    assert s.body == ((11, 4), (12, 4), (12, 5), (11, 5), (10, 5))


def test_body_set_matches_body():
    s = Snake(3, 3)
    s.grow()
    s.move()
    s.grow()
    s.move()
    assert s.body_set == frozenset(s.body)
    assert len(s.body_set) == len(s.body)