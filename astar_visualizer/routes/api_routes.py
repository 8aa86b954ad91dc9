from flask import Blueprint, request, jsonify, current_app
from pydantic import ValidationError
from astar_visualizer.models import PathfindingRequest, GridResponse, HealthResponse, ErrorResponse
from astar_visualizer.grid import create_grid, scatter_obstacles
from astar_visualizer.pathfinding import astar
from astar_visualizer.utils import (
    make_response, handle_pydantic_error, error_response, validate_grid,
    grid_from_model, grid_to_model, result_to_response
)
import logging

logger = logging.getLogger(__name__)
bp = Blueprint('api', __name__, url_prefix='/api')

@bp.route('/pathfind', methods=['POST'])
def pathfind_route():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        logger.warning("Pathfinding request without a JSON object body")
        return error_response('Request body must be a JSON object.')

    try:
        data = PathfindingRequest(**payload)
    except ValidationError as e:
        logger.warning(f"Invalid pathfinding request: {e.error_count()} validation error(s)")
        return handle_pydantic_error(e)

    grid_data = data.grid
    current_app.logger.info(
        f"Received pathfinding request - Grid: {grid_data.width}x{grid_data.height}, "
        f"Start: ({grid_data.start.x}, {grid_data.start.y}), End: ({grid_data.end.x}, {grid_data.end.y})"
    )

    problem = validate_grid(grid_data)
    if problem:
        logger.warning(f"Rejected pathfinding request: {problem}")
        return error_response(problem)

    heuristic = data.heuristic or current_app.config['DEFAULT_HEURISTIC']
    try:
        grid = grid_from_model(grid_data)
        current_app.logger.info(f"Starting A* search (heuristic={heuristic}, animate={data.animate})")
        result = astar(
            grid,
            heuristic=heuristic,
            animate=data.animate,
            max_iterations=current_app.config.get('SEARCH_MAX_ITERATIONS'),
        )
        current_app.logger.info(
            f"A* result - Success: {result.success}, Path length: {result.path_length:.2f}, "
            f"Nodes explored: {result.nodes_explored}"
        )
        return jsonify(result_to_response(result).dict(exclude_none=True)), 200
    except Exception as e:
        logger.error(f"Error running pathfinding on {grid_data.width}x{grid_data.height} grid: {e}")
        return jsonify(ErrorResponse(detail='Internal server error').dict()), 500

@bp.route('/grid/<width>/<height>', methods=['GET'])
def create_grid_route(width, height):
    min_size = current_app.config['GRID_MIN_SIZE']
    max_size = current_app.config['GRID_MAX_SIZE']

    width = _parse_dimension(width, min_size, max_size)
    if width is None:
        return error_response(f'Invalid width. Must be between {min_size} and {max_size}')
    height = _parse_dimension(height, min_size, max_size)
    if height is None:
        return error_response(f'Invalid height. Must be between {min_size} and {max_size}')

    density = request.args.get('obstacle_density', type=float)
    seed = request.args.get('seed', type=int)
    if density is None and 'obstacle_density' in request.args:
        return error_response('Invalid obstacle_density. Must be a number between 0 and 1')
    if seed is None and 'seed' in request.args:
        return error_response('Invalid seed. Must be an integer')

    grid = create_grid(width, height)
    if density is not None:
        try:
            placed = scatter_obstacles(grid, density=density, seed=seed)
        except ValueError as e:
            logger.warning(f"Rejected grid request: {e}")
            return error_response('Invalid obstacle_density. Must be a number between 0 and 1')
        logger.info(f"Created {width}x{height} grid with {placed} obstacles")
    else:
        logger.info(f"Created empty {width}x{height} grid")

    return make_response(GridResponse(grid=grid_to_model(grid)).dict(exclude_none=True))

@bp.route('/health', methods=['GET'])
def health_route():
    return make_response(HealthResponse(status='ok').dict())

def _parse_dimension(value, min_size, max_size):
    try:
        size = int(value)
    except (TypeError, ValueError):
        return None
    if size < min_size or size > max_size:
        return None
    return size
