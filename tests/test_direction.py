import pytest

from adventkit.direction import Direction, step, step_back


def test_coords_fixed_by_source():
    assert Direction.NORTH.to_coord() == (-1, 0)
    assert Direction.EAST.to_coord() == (0, 1)
    assert Direction.SOUTH.to_coord() == (1, 0)
    assert Direction.WEST.to_coord() == (0, -1)


def test_all_order():
    assert Direction.all() == (
        Direction.NORTH,
        Direction.EAST,
        Direction.SOUTH,
        Direction.WEST,
    )


@pytest.mark.parametrize("direction", list(Direction))
def test_index_round_trip(direction):
    assert Direction.from_index(direction.to_index()) is direction


def test_index_matches_position_in_all():
    assert [d.to_index() for d in Direction.all()] == list(range(4))


@pytest.mark.parametrize("index", [-1, 4])
def test_from_index_out_of_range(index):
    with pytest.raises(ValueError):
        Direction.from_index(index)


@pytest.mark.parametrize("index", range(4))
def test_four_right_turns_return(index):
    start = Direction.from_index(index)
    d = start
    for _ in range(4):
        d = Direction.right(d)
    assert d is start


@pytest.mark.parametrize("index", range(4))
def test_left_undoes_right(index):
    direction = Direction.from_index(index)
    assert Direction.left(Direction.right(direction)) is direction
    assert Direction.right(Direction.left(direction)) is direction


def test_right_from_north_is_east():
    assert Direction.NORTH.right() is Direction.EAST
    assert Direction.NORTH.left() is Direction.WEST


@pytest.mark.parametrize("index", range(4))
def test_vertical_alternates(index):
    direction = Direction.from_index(index)
    turned = Direction.right(direction)
    assert Direction.is_vertical(direction) != Direction.is_vertical(turned)


def test_north_is_vertical():
    assert Direction.NORTH.is_vertical()
    assert not Direction.EAST.is_vertical()


@pytest.mark.parametrize("direction", list(Direction))
def test_step_back_inverts_step(direction):
    pos = (5, -3)
    assert step_back(step(pos, direction), direction) == pos


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_steps_cancel(direction):
    pos = (2, 9)
    opposite = direction.right().right()
    assert step(step(pos, direction), opposite) == pos


@pytest.mark.parametrize("direction", list(Direction))
def test_distance_shrinks_when_stepping(direction):
    pos = (4, 11)
    coord = 20
    before = direction.distance_to_coord(pos, coord)
    after = direction.distance_to_coord(step(pos, direction), coord)
    assert after == before - 1


@pytest.mark.parametrize("index", range(4))
def test_distance_zero_on_own_line(index):
    direction = Direction.from_index(index)
    pos = (6, 8)
    coord = pos[0] if Direction.is_vertical(direction) else pos[1]
    assert Direction.distance_to_coord(direction, pos, coord) == 0