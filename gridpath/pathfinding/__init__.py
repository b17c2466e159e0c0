# gridpath/pathfinding/__init__.py
from .astar_pathfinder import (
    GridPathfinder,
    PathfindingRequest,
    PathfindingResult,
    Route,
    SearchOutcome,
    estimate_remaining_cost,
    find_path,
    min_by,
    neighbors,
    path_cost,
    search,
    total_cost,
)
from .errors import Exhausted, InvalidCoordinate, InvalidGrid, PathfindingError
from .frontier import Frontier
from .grid import Grid
from .visualize import render_route

__all__ = [
    'GridPathfinder', 'PathfindingRequest', 'PathfindingResult', 'Route', 'SearchOutcome',
    'find_path', 'search', 'neighbors', 'estimate_remaining_cost', 'path_cost', 'total_cost', 'min_by',
    'Grid', 'Frontier', 'render_route',
    'PathfindingError', 'InvalidGrid', 'InvalidCoordinate', 'Exhausted',
]
