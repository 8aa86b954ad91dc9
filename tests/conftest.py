# tests/conftest.py
import pytest

from astar_visualizer import create_app
from astar_visualizer.grid import create_grid


@pytest.fixture
def app():
    return create_app({'TESTING': True})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_grid():
    """Build a core Grid with the given obstacles and optional start/end."""

    def _make(width, height, walls=(), start=None, end=None):
        grid = create_grid(width, height)
        if start is not None:
            grid.set_start(start)
        if end is not None:
            grid.set_end(end)
        for p in walls:
            grid.set_obstacle(p)
        return grid

    return _make


@pytest.fixture
def grid_payload():
    """Build the JSON grid a browser client would post to /api/pathfind."""

    def _payload(width, height, walls=(), start=(0, 0), end=None):
        if end is None:
            end = (width - 1, height - 1)
        walls = set(walls)
        return {
            'width': width,
            'height': height,
            'nodes': [
                [{'point': {'x': x, 'y': y}, 'is_wall': (x, y) in walls} for x in range(width)]
                for y in range(height)
            ],
            'start': {'x': start[0], 'y': start[1]},
            'end': {'x': end[0], 'y': end[1]},
        }

    return _payload
