from flask import jsonify
from pydantic import ValidationError
from .grid import Cell, Grid, Point
from .models import (
    ErrorResponse, GridModel, NodeModel, PointModel, StepModel, PathfindingResponse
)

def make_response(data, status_code=200):
    """Standard way to create JSON responses."""
    return jsonify(data), status_code

def error_response(detail, status_code=400):
    return jsonify(ErrorResponse(detail=detail).dict()), status_code

def handle_pydantic_error(error: ValidationError, status_code=400):
    """Handles Pydantic validation errors by returning a structured error response."""
    # include_context=False keeps raw exception objects out of the JSON body
    return error_response(error.errors(include_url=False, include_context=False), status_code)

def validate_grid(grid: GridModel):
    """
    Checks a requested grid before it is handed to the search.
    Returns an error message, or None if the grid is usable.
    """
    width, height = grid.width, grid.height
    if width <= 0 or height <= 0:
        return 'Invalid grid dimensions'

    def in_bounds(p):
        return 0 <= p.x < width and 0 <= p.y < height

    if not in_bounds(grid.start):
        return 'Invalid start point'
    if not in_bounds(grid.end):
        return 'Invalid end point'
    if (grid.start.x, grid.start.y) == (grid.end.x, grid.end.y):
        return 'Start and end points cannot be the same'

    if len(grid.nodes) != height:
        return 'Grid nodes array height mismatch'
    for i, row in enumerate(grid.nodes):
        if len(row) != width:
            return f'Grid nodes array width mismatch at row {i}'

    if grid.nodes[grid.start.y][grid.start.x].is_wall:
        return 'Start point cannot be an obstacle'
    if grid.nodes[grid.end.y][grid.end.x].is_wall:
        return 'End point cannot be an obstacle'
    return None

def point_to_model(p):
    return PointModel(x=p[0], y=p[1])

def points_to_models(points):
    return [point_to_model(p) for p in points]

def grid_from_model(model: GridModel) -> Grid:
    """Builds a core Grid from a validated request grid. Only obstacles are taken from the nodes."""
    cells = [
        [Cell(Point(x, y), is_wall=node.is_wall) for x, node in enumerate(row)]
        for y, row in enumerate(model.nodes)
    ]
    return Grid(
        model.width, model.height,
        start=Point(model.start.x, model.start.y),
        end=Point(model.end.x, model.end.y),
        cells=cells,
    )

def grid_to_model(grid: Grid) -> GridModel:
    nodes = [
        [
            NodeModel(
                point=point_to_model(cell.point),
                g=cell.g, h=cell.h, f=cell.f,
                is_wall=cell.is_wall,
                is_start=cell.is_start,
                is_end=cell.is_end,
                is_path=cell.is_path,
                visited=cell.visited,
                in_open_set=cell.in_open_set,
            )
            for cell in row
        ]
        for row in grid.cells
    ]
    return GridModel(
        width=grid.width,
        height=grid.height,
        nodes=nodes,
        start=point_to_model(grid.start),
        end=point_to_model(grid.end),
    )

def step_to_model(step) -> StepModel:
    return StepModel(
        current_node=point_to_model(step.current_node),
        open_set=points_to_models(step.open_set),
        closed_set=points_to_models(step.closed_set),
        path=points_to_models(step.path) if step.path is not None else None,
        is_complete=step.is_complete,
    )

def result_to_response(result) -> PathfindingResponse:
    return PathfindingResponse(
        success=result.success,
        path=points_to_models(result.path),
        explored_nodes=points_to_models(result.explored_nodes),
        path_length=result.path_length,
        nodes_explored=result.nodes_explored,
        steps=[step_to_model(s) for s in result.steps] if result.steps is not None else None,
    )
