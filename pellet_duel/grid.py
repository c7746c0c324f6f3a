# pellet_duel/grid.py - Fixed maze and wall lookup

GRID_COLS = 21
GRID_ROWS = 15

# 1 = wall, 0 = floor. Rendering clients run their own wall checks against
# this same layout, so it must never change at runtime.
MAP = (
    "111111111111111111111",
    "100000000010000000001",
    "101111011010110111101",
    "100000010000010000001",
    "101111010111010111101",
    "100000010010010000001",
    "111011111010111110111",
    "100010000000000010001",
    "101010111111111010101",
    "101010000010000010101",
    "101011111010111110101",
    "100000000000000000001",
    "101111011111110111101",
    "100000000010000000001",
    "111111111111111111111",
)

# Unit offsets for left, right, up, down
LEFT = (-1, 0)
RIGHT = (1, 0)
UP = (0, -1)
DOWN = (0, 1)


def in_bounds(x, y):
    return 0 <= x < GRID_COLS and 0 <= y < GRID_ROWS


def is_wall(x, y):
    """True for wall cells and for anything outside the grid."""
    if not in_bounds(x, y):
        return True
    return MAP[y][x] == "1"


def cell_key(x, y):
    """Wire key for a cell, e.g. "3,7"."""
    return f"{x},{y}"


def floor_cells():
    """All non-wall cells in row-major order."""
    return [
        (x, y)
        for y in range(GRID_ROWS)
        for x in range(GRID_COLS)
        if not is_wall(x, y)
    ]


def power_spots():
    """The four power pellet spots, one cell in from each corner."""
    return [
        (1, 1),
        (GRID_COLS - 2, 1),
        (1, GRID_ROWS - 2),
        (GRID_COLS - 2, GRID_ROWS - 2),
    ]
