import math

DEFAULT_HEURISTIC = 'manhattan'


def manhattan(a, b):
    # Admissible and consistent for 4-directional unit-cost movement
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


def euclidean(a, b):
    return math.hypot(a[0] - b[0], a[1] - b[1])


HEURISTICS = {
    'manhattan': manhattan,
    'euclidean': euclidean,
}


def get_heuristic(name):
    """Look up a heuristic by exact name. Unknown or missing names fall back to Manhattan."""
    return HEURISTICS.get(name, HEURISTICS[DEFAULT_HEURISTIC])
