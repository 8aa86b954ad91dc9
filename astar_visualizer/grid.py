import logging
import random
from typing import List, NamedTuple, Optional

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: int
    y: int


# down, right, up, left. Fixed so that tie-breaking in the search is reproducible.
DIRECTIONS = [(0, 1), (1, 0), (0, -1), (-1, 0)]


class Cell:
    """Pathfinding state for one grid position."""

    def __init__(self, point, is_wall=False, is_start=False, is_end=False):
        self.point = point
        self.is_wall = is_wall
        self.is_start = is_start
        self.is_end = is_end
        self.reset()

    @property
    def f(self):
        return self.g + self.h

    def reset(self):
        self.g = 0.0
        self.h = 0.0
        self.parent: Optional[Point] = None  # coordinate of the predecessor, not the Cell itself
        self.is_path = False
        self.visited = False
        self.in_open_set = False

    def __repr__(self):
        return f"Cell({self.point.x}, {self.point.y}, g={self.g}, h={self.h}, wall={self.is_wall})"


class Grid:
    """
    Fixed-size occupancy grid. Cells are stored row-major: cells[y][x].

    A Grid is mutated in place by every search, so it must not be shared
    between concurrent searches.
    """

    def __init__(self, width: int, height: int, start: Point, end: Point, cells: List[List[Cell]] = None):
        self.width = width
        self.height = height
        if cells is None:
            cells = [[Cell(Point(x, y)) for x in range(width)] for y in range(height)]
        self.cells = cells
        self.start = Point(*start)
        self.end = Point(*end)
        if self.is_valid(self.start):
            self.cell(self.start).is_start = True
        if self.is_valid(self.end):
            self.cell(self.end).is_end = True

    def is_valid(self, p) -> bool:
        return 0 <= p[0] < self.width and 0 <= p[1] < self.height

    def cell(self, p) -> Cell:
        if not self.is_valid(p):
            raise IndexError(f"Point {tuple(p)} is outside a {self.width}x{self.height} grid")
        return self.cells[p[1]][p[0]]

    def is_obstacle(self, p) -> bool:
        return self.cell(p).is_wall

    def neighbors(self, p) -> List[Point]:
        """In-bounds, non-obstacle 4-connected neighbors of p, in DIRECTIONS order."""
        result = []
        for dx, dy in DIRECTIONS:
            candidate = Point(p[0] + dx, p[1] + dy)
            if self.is_valid(candidate) and not self.cells[candidate.y][candidate.x].is_wall:
                result.append(candidate)
        return result

    def set_start(self, p):
        p = Point(*p)
        self.cell(p).is_start = True
        if self.is_valid(self.start) and self.start != p:
            self.cell(self.start).is_start = False
        self.start = p

    def set_end(self, p):
        p = Point(*p)
        self.cell(p).is_end = True
        if self.is_valid(self.end) and self.end != p:
            self.cell(self.end).is_end = False
        self.end = p

    def set_obstacle(self, p, blocked=True):
        self.cell(p).is_wall = blocked

    def reset(self):
        """Clear per-search state on every cell. Obstacle/start/end flags are kept."""
        for row in self.cells:
            for cell in row:
                cell.reset()

    def __iter__(self):
        for row in self.cells:
            yield from row


def create_grid(width: int, height: int) -> Grid:
    """Empty width x height grid with start at the top-left and end at the bottom-right corner."""
    return Grid(width, height, start=Point(0, 0), end=Point(width - 1, height - 1))


def scatter_obstacles(grid: Grid, density=0.3, seed=None) -> int:
    """
    Mark each free cell (other than start and end) as an obstacle with
    probability `density`. Returns the number of obstacles placed.
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"Obstacle density must be between 0 and 1, got {density}")

    rng = random.Random(seed)
    placed = 0
    for cell in grid:
        if cell.is_start or cell.is_end:
            continue
        if rng.random() < density:
            cell.is_wall = True
            placed += 1

    logger.debug(f"Placed {placed} obstacles on a {grid.width}x{grid.height} grid (density={density}, seed={seed})")
    return placed
