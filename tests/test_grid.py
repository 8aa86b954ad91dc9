import pytest

from astar_visualizer.grid import Cell, Grid, Point, create_grid, scatter_obstacles


def test_create_grid_defaults():
    grid = create_grid(6, 4)
    assert (grid.width, grid.height) == (6, 4)
    assert len(grid.cells) == 4 and all(len(row) == 6 for row in grid.cells)
    assert grid.start == Point(0, 0)
    assert grid.end == Point(5, 3)
    assert grid.cell((0, 0)).is_start
    assert grid.cell((5, 3)).is_end
    assert not any(cell.is_wall for cell in grid)


def test_cells_are_indexed_row_major():
    grid = create_grid(5, 3)
    assert grid.cells[2][4].point == Point(4, 2)
    assert grid.cell((4, 2)) is grid.cells[2][4]


def test_is_valid_bounds():
    grid = create_grid(5, 3)
    assert grid.is_valid((0, 0))
    assert grid.is_valid((4, 2))
    assert not grid.is_valid((5, 0))
    assert not grid.is_valid((0, 3))
    assert not grid.is_valid((-1, 1))


def test_cell_out_of_bounds_raises():
    grid = create_grid(5, 5)
    with pytest.raises(IndexError):
        grid.cell((5, 5))


def test_neighbors_fixed_order_in_center():
    grid = create_grid(5, 5)
    assert grid.neighbors((2, 2)) == [(2, 3), (3, 2), (2, 1), (1, 2)]


def test_neighbors_skip_bounds_and_walls():
    grid = create_grid(5, 5)
    assert grid.neighbors((0, 0)) == [(0, 1), (1, 0)]
    grid.set_obstacle((0, 1))
    assert grid.neighbors((0, 0)) == [(1, 0)]
    assert grid.is_obstacle((0, 1))


def test_cell_f_tracks_g_and_h():
    cell = Cell(Point(1, 1))
    cell.g = 3
    cell.h = 2.5
    assert cell.f == 5.5
    cell.g = 1
    assert cell.f == 3.5


def test_reset_clears_search_state_only():
    grid = create_grid(5, 5)
    grid.set_obstacle((2, 2))
    cell = grid.cell((1, 1))
    cell.g, cell.h = 4, 2
    cell.parent = Point(1, 0)
    cell.is_path = cell.visited = cell.in_open_set = True

    grid.reset()

    assert (cell.g, cell.h, cell.f) == (0, 0, 0)
    assert cell.parent is None
    assert not (cell.is_path or cell.visited or cell.in_open_set)
    assert grid.cell((2, 2)).is_wall
    assert grid.cell((0, 0)).is_start and grid.cell((4, 4)).is_end


def test_set_start_and_end_move_flags():
    grid = create_grid(5, 5)
    grid.set_start((1, 2))
    grid.set_end((3, 0))
    assert grid.start == Point(1, 2) and grid.end == Point(3, 0)
    assert [c.point for c in grid if c.is_start] == [Point(1, 2)]
    assert [c.point for c in grid if c.is_end] == [Point(3, 0)]


def test_grid_accepts_prebuilt_cells():
    cells = [[Cell(Point(x, y), is_wall=(x == 1)) for x in range(3)] for y in range(2)]
    grid = Grid(3, 2, start=(0, 0), end=(2, 1), cells=cells)
    assert grid.cell((0, 0)).is_start
    assert grid.cell((2, 1)).is_end
    assert grid.neighbors((0, 0)) == [(0, 1)]


def test_scatter_obstacles_is_seeded():
    a, b = create_grid(20, 20), create_grid(20, 20)
    scatter_obstacles(a, density=0.3, seed=42)
    scatter_obstacles(b, density=0.3, seed=42)
    assert [c.is_wall for c in a] == [c.is_wall for c in b]


def test_scatter_obstacles_never_blocks_start_or_end():
    grid = create_grid(10, 10)
    placed = scatter_obstacles(grid, density=1.0, seed=1)
    assert placed == 98
    assert not grid.cell(grid.start).is_wall
    assert not grid.cell(grid.end).is_wall


def test_scatter_obstacles_zero_density():
    grid = create_grid(10, 10)
    assert scatter_obstacles(grid, density=0.0) == 0
    assert not any(c.is_wall for c in grid)


@pytest.mark.parametrize("density", [-0.1, 1.5])
def test_scatter_obstacles_rejects_bad_density(density):
    with pytest.raises(ValueError):
        scatter_obstacles(create_grid(5, 5), density=density)
