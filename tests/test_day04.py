from adventkit.days.day04 import make_grid, neighbors, part_one, part_two

EXAMPLE = (
    b"..@@.@@@@.\n"
    b"@@@.@.@.@@\n"
    b"@@@@@.@.@@\n"
    b"@.@@@@..@.\n"
    b"@@.@@@@.@@\n"
    b".@@@@@@@.@\n"
    b".@.@.@.@@@\n"
    b"@.@@@.@@@@\n"
    b".@@@@@@@@.\n"
    b"@.@.@@@.@.\n"
)
FULL = b"@@@\n@@@\n@@@\n"


def test_example_part_one():
    assert part_one(EXAMPLE) == 13


def test_example_part_two():
    assert part_two(EXAMPLE) == 43


def test_make_grid():
    assert make_grid(b"@.\n.@\n") == [[True, False], [False, True]]


def test_make_grid_drops_last_byte_of_each_line():
    assert make_grid(b"@@\n@@") == [[True, True], [True]]


def test_center_sees_every_other_cell():
    grid = make_grid(FULL)
    cells = sum(len(row) for row in grid)
    assert len(list(neighbors(grid, 1, 1))) == cells - 1
    assert all(neighbors(grid, 1, 1))


def test_corner_sees_fewer_than_center():
    grid = make_grid(FULL)
    assert len(list(neighbors(grid, 0, 0))) < len(list(neighbors(grid, 1, 1)))


def test_full_block_is_cleared_completely():
    assert part_two(FULL) == FULL.count(b"@")


def test_empty_floor():
    floor = b"...\n...\n"
    assert part_one(floor) == part_two(floor) == FULL.count(b"#")


def test_part_two_at_least_part_one():
    assert part_two(EXAMPLE) >= part_one(EXAMPLE)
    assert part_two(EXAMPLE) <= EXAMPLE.count(b"@")