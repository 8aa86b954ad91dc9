import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .frontier import Frontier
from .grid import Grid, Point
from .heuristics import euclidean, get_heuristic

logger = logging.getLogger(__name__)


@dataclass
class Step:
    """Snapshot of the search right after one cell was expanded."""
    current_node: Point
    open_set: List[Point]
    closed_set: List[Point]
    path: Optional[List[Point]] = None
    is_complete: bool = False


@dataclass
class SearchResult:
    success: bool
    path: List[Point] = field(default_factory=list)
    explored_nodes: List[Point] = field(default_factory=list)
    path_length: float = 0.0
    nodes_explored: int = 0
    steps: Optional[List[Step]] = None  # None unless animation was requested


def astar(grid: Grid, heuristic='manhattan', animate=False, max_iterations=None) -> SearchResult:
    """
    Run A* from grid.start to grid.end with 4-directional unit-cost moves.

    The grid is reset first and then annotated in place (visited, in_open_set,
    is_path, costs and parents). `heuristic` is a name ('manhattan' or
    'euclidean'); anything else falls back to Manhattan. With `animate` a Step
    is recorded for every expansion. `max_iterations` caps the number of
    expansions; hitting the cap is reported as "no path".

    Always returns a SearchResult; success=False means the end is unreachable.
    """
    grid.reset()
    estimate = get_heuristic(heuristic)
    end = grid.end

    start_cell = grid.cell(grid.start)
    start_cell.g = 0.0
    start_cell.h = estimate(grid.start, end)

    open_set = Frontier()
    open_set.push(start_cell)
    start_cell.in_open_set = True

    closed_set = set()
    explored = []
    steps = [] if animate else None

    while open_set:
        if max_iterations is not None and len(explored) >= max_iterations:
            logger.debug(f"Search stopped after {len(explored)} expansions (cap {max_iterations})")
            break

        current = open_set.pop()
        current.in_open_set = False
        current.visited = True
        closed_set.add(current.point)
        explored.append(current.point)

        if current.point == end:
            path = reconstruct_path(grid, current.point)
            for p in path:
                if p != grid.start and p != end:
                    grid.cell(p).is_path = True

            if animate:
                steps.append(Step(
                    current_node=current.point,
                    open_set=open_set.points(),
                    closed_set=list(explored),
                    path=list(path),
                    is_complete=True,
                ))

            return SearchResult(
                success=True,
                path=path,
                explored_nodes=explored,
                path_length=calculate_path_length(path),
                nodes_explored=len(explored),
                steps=steps,
            )

        if animate:
            steps.append(Step(
                current_node=current.point,
                open_set=open_set.points(),
                closed_set=list(explored),
            ))

        for neighbor_point in grid.neighbors(current.point):
            if neighbor_point in closed_set:
                continue

            neighbor = grid.cell(neighbor_point)
            tentative_g = current.g + 1  # every move costs 1

            if not neighbor.in_open_set:
                neighbor.parent = current.point
                neighbor.g = tentative_g
                neighbor.h = estimate(neighbor_point, end)
                neighbor.in_open_set = True
                open_set.push(neighbor)
            elif tentative_g < neighbor.g:
                # Cheaper route to a queued cell. Its queue entry keeps the old key.
                neighbor.parent = current.point
                neighbor.g = tentative_g

    logger.debug(f"No path from {tuple(grid.start)} to {tuple(end)} after exploring {len(explored)} nodes")
    return SearchResult(
        success=False,
        path=[],
        explored_nodes=explored,
        path_length=0.0,
        nodes_explored=len(explored),
        steps=steps,
    )


def reconstruct_path(grid, end_point):
    """Follow parent coordinates back from end_point and return the path start-first."""
    path = [end_point]
    current = grid.cell(end_point)
    while current.parent is not None:
        path.append(current.parent)
        current = grid.cell(current.parent)
    return path[::-1]


def calculate_path_length(path):
    """Sum of Euclidean distances between consecutive points, rounded to 2 decimals."""
    if len(path) < 2:
        return 0.0
    length = sum(euclidean(a, b) for a, b in zip(path, path[1:]))
    return round(length, 2)
