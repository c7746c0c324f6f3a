from pellet_duel.grid import (
    GRID_COLS,
    GRID_ROWS,
    MAP,
    cell_key,
    floor_cells,
    is_wall,
    power_spots,
)


def test_map_dimensions():
    assert len(MAP) == GRID_ROWS
    assert all(len(row) == GRID_COLS for row in MAP)


def test_out_of_bounds_is_wall():
    for x, y in [(-1, 0), (0, -1), (GRID_COLS, 3), (3, GRID_ROWS), (-5, -5), (100, 100)]:
        assert is_wall(x, y)


def test_border_is_wall():
    for x in range(GRID_COLS):
        assert is_wall(x, 0)
        assert is_wall(x, GRID_ROWS - 1)
    for y in range(GRID_ROWS):
        assert is_wall(0, y)
        assert is_wall(GRID_COLS - 1, y)


def test_known_cells():
    assert not is_wall(1, 1)
    assert not is_wall(2, 1)
    assert is_wall(10, 1)
    assert is_wall(2, 2)


def test_power_spots_are_floor():
    for x, y in power_spots():
        assert not is_wall(x, y)


def test_floor_cells_match_map():
    cells = floor_cells()
    assert len(cells) == sum(row.count("0") for row in MAP)
    assert all(not is_wall(x, y) for x, y in cells)


def test_cell_key():
    assert cell_key(3, 7) == "3,7"
