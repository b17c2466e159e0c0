# gridpath/pathfinding/astar_pathfinder.py
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from gridpath.utils.logger_config import get_search_logger

from .errors import Exhausted, PathfindingError
from .frontier import Frontier
from .grid import Coordinate, Grid

logger = logging.getLogger(__name__)

# North, south, west, east. Order matters for tie-breaking between neighbors.
NEIGHBOR_DELTAS: Tuple[Coordinate, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

GridLike = Union[Grid, Sequence[Sequence[int]]]


@dataclass(frozen=True)
class Route:
    """Cheapest known way of reaching a coordinate."""
    cost: int
    path: Tuple[Coordinate, ...] = ()


RouteUpdateHook = Callable[[Coordinate, Optional[Route], Route], None]


def neighbors(grid_size: int, coord: Coordinate,
              deltas: Iterable[Coordinate] = NEIGHBOR_DELTAS) -> List[Coordinate]:
    """Axis-aligned cells next to ``coord`` that lie inside the grid."""
    row, col = coord
    result = []
    for d_row, d_col in deltas:
        r, c = row + d_row, col + d_col
        if 0 <= r < grid_size and 0 <= c < grid_size:
            result.append((r, c))
    return result


def estimate_remaining_cost(step_cost_estimate: float, grid_size: int, coord: Coordinate) -> float:
    """
    Straight-line estimate of the cost left to reach the bottom-right corner.

    Assumes travel to the far edge and then down (or across), charging
    ``step_cost_estimate`` per step. Zero at ``(grid_size - 1, grid_size - 1)``.
    """
    row, col = coord
    return step_cost_estimate * (2 * grid_size - row - col - 2)


def path_cost(node_cost: int, cheapest_neighbor: Optional[Route]) -> int:
    """Cost of entering a node from its cheapest known neighbor."""
    if cheapest_neighbor is None:
        return node_cost
    return node_cost + cheapest_neighbor.cost


def total_cost(new_cost: float, step_cost_estimate: float, grid_size: int, coord: Coordinate) -> float:
    """Estimated total cost (cost so far plus estimated remaining cost)."""
    return new_cost + estimate_remaining_cost(step_cost_estimate, grid_size, coord)


def min_by(key: Callable, items: Iterable):
    """Return the item with the smallest ``key``; the first one wins on ties, None if empty."""
    best = None
    best_key = None
    found = False
    for item in items:
        item_key = key(item)
        if not found or best_key > item_key:
            best, best_key, found = item, item_key, True
    return best


@dataclass
class SearchProgress:
    """Mutable state of a single search call."""
    steps: int = 0
    truncated: bool = False
    routes: Dict[Coordinate, Route] = field(default_factory=dict)


@dataclass
class SearchOutcome:
    """Everything a finished search knows."""
    goal: Coordinate
    route: Optional[Route]
    steps_examined: int
    truncated: bool
    routes: Dict[Coordinate, Route]


def _validate_step_cost_estimate(step_cost_estimate) -> None:
    if isinstance(step_cost_estimate, bool) or not isinstance(step_cost_estimate, (int, float)):
        raise PathfindingError(f"step_cost_estimate must be a number, got {step_cost_estimate!r}")
    if step_cost_estimate < 0:
        raise PathfindingError(f"step_cost_estimate must not be negative, got {step_cost_estimate}")


def _validate_max_steps(max_steps) -> None:
    if max_steps is None:
        return
    if isinstance(max_steps, bool) or not isinstance(max_steps, int) or max_steps <= 0:
        raise PathfindingError(f"max_steps must be a positive integer, got {max_steps!r}")


def _run(grid: Grid, start: Coordinate, step_cost_estimate: float,
         max_steps: Optional[int], on_route_update: Optional[RouteUpdateHook]) -> SearchProgress:
    """Drain the frontier, recording the cheapest route found for every coordinate."""
    size = grid.size
    progress = SearchProgress()
    routes = progress.routes
    search_log = get_search_logger(progress, 'search.astar')

    frontier = Frontier()
    frontier.push(0, start)

    while frontier:
        if max_steps is not None and progress.steps >= max_steps:
            progress.truncated = True
            search_log.debug(f"Step limit {max_steps} reached with {len(frontier)} items pending")
            break

        _, current = frontier.pop()
        progress.steps += 1

        nbrs = neighbors(size, current)
        cheapest = min_by(lambda route: route.cost, [routes[n] for n in nbrs if n in routes])
        new_cost = path_cost(grid.cost_at(current), cheapest)
        old_route = routes.get(current)

        if old_route is not None and new_cost >= old_route.cost:
            continue

        prefix = cheapest.path if cheapest is not None else ()
        new_route = Route(cost=new_cost, path=prefix + (current,))
        routes[current] = new_route
        if on_route_update is not None:
            on_route_update(current, old_route, new_route)
        search_log.debug(
            f"{current}: cost {old_route.cost if old_route else '-'} -> {new_cost}"
        )

        for nbr in nbrs:
            frontier.push(total_cost(new_cost, step_cost_estimate, size, nbr), nbr)

    return progress


def search(grid: GridLike, start: Coordinate, step_cost_estimate: float,
           goal: Optional[Coordinate] = None, max_steps: Optional[int] = None,
           on_route_update: Optional[RouteUpdateHook] = None) -> SearchOutcome:
    """
    Run a best-first search over ``grid`` and report the route table.

    The frontier is always drained (or cut off by ``max_steps``); the goal
    only selects which recorded route is reported. Raises InvalidGrid or
    InvalidCoordinate before searching if the inputs are unusable.
    """
    grid = Grid.from_rows(grid)
    start = grid.validate_coordinate(start, role="start")
    goal = grid.corner if goal is None else grid.validate_coordinate(goal, role="goal")
    _validate_step_cost_estimate(step_cost_estimate)
    _validate_max_steps(max_steps)

    if step_cost_estimate > grid.min_cost():
        # Costs stay optimal because the frontier is always drained; only the step count suffers
        logger.warning(
            f"step_cost_estimate {step_cost_estimate} exceeds the cheapest cell cost "
            f"{grid.min_cost()}; the heuristic is inadmissible"
        )

    progress = _run(grid, start, step_cost_estimate, max_steps, on_route_update)
    route = progress.routes.get(goal)

    logger.info(
        f"Search {start} -> {goal} on {grid!r}: "
        f"{'cost ' + str(route.cost) if route else 'no route'} after {progress.steps} steps"
        f"{' (truncated)' if progress.truncated else ''}"
    )
    return SearchOutcome(
        goal=goal,
        route=route,
        steps_examined=progress.steps,
        truncated=progress.truncated,
        routes=progress.routes,
    )


def find_path(grid: GridLike, start: Coordinate, step_cost_estimate: float,
              goal: Optional[Coordinate] = None, max_steps: Optional[int] = None,
              on_route_update: Optional[RouteUpdateHook] = None) -> Tuple[Route, int]:
    """Cheapest discovered route to ``goal`` (default: bottom-right) and the number of steps examined."""
    outcome = search(grid, start, step_cost_estimate, goal=goal,
                     max_steps=max_steps, on_route_update=on_route_update)
    if outcome.route is None:
        raise Exhausted(outcome.goal, outcome.steps_examined, outcome.truncated)
    return outcome.route, outcome.steps_examined


@dataclass
class PathfindingRequest:
    """Request for pathfinding service."""
    grid: GridLike
    start: Coordinate = (0, 0)
    goal: Optional[Coordinate] = None  # Defaults to the bottom-right cell
    step_cost_estimate: Optional[float] = None  # Falls back to the pathfinder's estimate
    max_steps: Optional[int] = None
    request_id: str = ""

@dataclass
class PathfindingResult:
    """Result of pathfinding operation."""
    success: bool
    route: Optional[Route] = None
    path: List[Coordinate] = field(default_factory=list)
    path_cost: int = 0
    steps_examined: int = 0
    computation_time: float = 0.0
    truncated: bool = False
    failure_reason: Optional[str] = None


class GridPathfinder:
    """
    Best-first (A*) pathfinder over weighted square grids.

    Features:
    - Deduplicating frontier ordered by (estimated cost, coordinate)
    - Full frontier drain with an optional step cap
    - Failures reported on the result instead of raised
    - Per-instance request statistics
    """

    def __init__(self, step_cost_estimate: float, max_steps: Optional[int] = None,
                 on_route_update: Optional[RouteUpdateHook] = None):
        _validate_step_cost_estimate(step_cost_estimate)
        _validate_max_steps(max_steps)
        self.step_cost_estimate = step_cost_estimate
        self.max_steps = max_steps
        self.on_route_update = on_route_update

        # Statistics
        self.total_requests = 0
        self.successful_paths = 0

    def find_path(self, request: PathfindingRequest) -> PathfindingResult:
        """Find the cheapest route described by ``request``."""
        start_time = time.time()
        self.total_requests += 1

        step_cost_estimate = request.step_cost_estimate
        if step_cost_estimate is None:
            step_cost_estimate = self.step_cost_estimate
        max_steps = request.max_steps if request.max_steps is not None else self.max_steps

        try:
            outcome = search(request.grid, request.start, step_cost_estimate,
                             goal=request.goal, max_steps=max_steps,
                             on_route_update=self.on_route_update)
        except PathfindingError as e:
            logger.warning(f"Request {request.request_id or '<anonymous>'} rejected: {e}")
            return PathfindingResult(
                success=False,
                computation_time=time.time() - start_time,
                failure_reason=str(e),
            )

        computation_time = time.time() - start_time
        if outcome.route is None:
            failure = Exhausted(outcome.goal, outcome.steps_examined, outcome.truncated)
            return PathfindingResult(
                success=False,
                steps_examined=outcome.steps_examined,
                computation_time=computation_time,
                truncated=outcome.truncated,
                failure_reason=str(failure),
            )

        self.successful_paths += 1
        return PathfindingResult(
            success=True,
            route=outcome.route,
            path=list(outcome.route.path),
            path_cost=outcome.route.cost,
            steps_examined=outcome.steps_examined,
            computation_time=computation_time,
            truncated=outcome.truncated,
        )

    def get_statistics(self) -> Dict:
        """Get pathfinding statistics."""
        success_rate = (self.successful_paths / self.total_requests * 100) if self.total_requests > 0 else 0

        return {
            'total_requests': self.total_requests,
            'successful_paths': self.successful_paths,
            'success_rate': success_rate,
            'step_cost_estimate': self.step_cost_estimate,
            'max_steps': self.max_steps,
        }
