# gridpath/pathfinding/visualize.py
from typing import Optional

from .astar_pathfinder import GridLike, Route
from .grid import Grid


def render_route(grid: GridLike, route: Optional[Route] = None) -> str:
    """
    Create a simple ASCII picture of the grid with the route drawn over it.

    Legend: S start, G goal, * path, . cost-1 cell, 2-9 cell cost, # cost >= 10.
    """
    grid = Grid.from_rows(grid)
    on_path = set(route.path) if route else set()
    start = route.path[0] if route and route.path else None
    goal = route.path[-1] if route and route.path else None

    lines = []
    for r, row in enumerate(grid.rows):
        cells = []
        for c, cost in enumerate(row):
            coord = (r, c)
            if coord == start:
                cells.append("S")
            elif coord == goal:
                cells.append("G")
            elif coord in on_path:
                cells.append("*")
            elif cost == 1:
                cells.append(".")
            elif cost < 10:
                cells.append(str(cost))
            else:
                cells.append("#")
        lines.append(" ".join(cells))

    return "\n".join(lines)
