#!/usr/bin/env python3
# gridpath/main.py

"""
Command line entry point for the grid pathfinder.

Loads a demonstration world from config/worlds.yml, runs the best-first
search on it and prints the route:
- cost, path and number of steps examined
- an ASCII map of the route (unless --no-render)
- or a JSON RouteReport with --json
"""

import argparse
import logging
import sys
from typing import Optional, Tuple

from pydantic import ValidationError

from config.schemas import RouteReport, WorldConfig
from config.settings import DEFAULT_WORLD, LOG_DIR, LOG_LEVEL, MAX_STEPS, STEP_COST_ESTIMATE
from gridpath.pathfinding import GridPathfinder, PathfindingRequest, Route, render_route
from gridpath.utils.config_loader import ConfigLoader, get_config_loader
from gridpath.utils.logger_config import setup_logging
from gridpath.utils.safe_output import safe_print, safe_print_block

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_ROUTE = 1
EXIT_CONFIG_ERROR = 2


def parse_coordinate(text: str) -> Tuple[int, int]:
    """Parse 'row,col' into a coordinate tuple."""
    try:
        row, col = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL but got '{text}'") from None
    return row, col


class PathfinderRunner:
    """
    Runs the pathfinder against one configured world and reports the outcome.
    """

    def __init__(self, world: WorldConfig, step_cost_estimate: Optional[float] = None,
                 max_steps: Optional[int] = None):
        self.world = world
        if step_cost_estimate is None:
            step_cost_estimate = world.step_cost_estimate
        if step_cost_estimate is None:
            step_cost_estimate = STEP_COST_ESTIMATE
        self.pathfinder = GridPathfinder(step_cost_estimate, max_steps=max_steps)

    def run(self, start: Optional[Tuple[int, int]] = None,
            goal: Optional[Tuple[int, int]] = None) -> RouteReport:
        grid = self.world.to_grid()
        start = start if start is not None else self.world.start
        goal = goal if goal is not None else self.world.goal

        logger.info(f"Searching '{self.world.name}' from {start} "
                    f"(step cost estimate {self.pathfinder.step_cost_estimate})")
        result = self.pathfinder.find_path(PathfindingRequest(
            grid=grid,
            start=start,
            goal=goal,
            request_id=self.world.name,
        ))

        return RouteReport(
            world=self.world.name,
            success=result.success,
            start=start,
            goal=goal if goal is not None else grid.corner,
            cost=result.path_cost if result.success else None,
            path=result.path,
            steps_examined=result.steps_examined,
            truncated=result.truncated,
            failure_reason=result.failure_reason,
        )


def print_report(report: RouteReport, world: WorldConfig, render: bool = True):
    """Print a human readable summary of a route report."""
    safe_print(f"World: {report.world}" + (f" - {world.description}" if world.description else ""))
    if not report.success:
        safe_print(f"No route: {report.failure_reason}")
        return

    safe_print(f"Cost:  {report.cost}")
    safe_print(f"Steps: {report.steps_examined}" + (" (truncated)" if report.truncated else ""))
    safe_print("Path:  " + " ".join(f"[{r} {c}]" for r, c in report.path))
    if render:
        safe_print()
        route = Route(cost=report.cost, path=tuple(report.path))
        safe_print_block(render_route(world.to_grid(), route))


def main(argv=None, loader: Optional[ConfigLoader] = None):
    """Main function."""
    parser = argparse.ArgumentParser(description="Best-first grid pathfinder")
    parser.add_argument("--world", default=DEFAULT_WORLD, help="Name of the world in worlds.yml to search.")
    parser.add_argument("--list", action="store_true", help="List the available worlds and exit.")
    parser.add_argument("--step-estimate", type=float, default=None,
                        help="Per-step cost used by the heuristic (overrides the world's setting).")
    parser.add_argument("--start", type=parse_coordinate, default=None, help="Start cell as ROW,COL.")
    parser.add_argument("--goal", type=parse_coordinate, default=None, help="Goal cell as ROW,COL.")
    parser.add_argument("--max-steps", type=int, default=MAX_STEPS, help="Stop after this many steps.")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")
    parser.add_argument("--no-render", action="store_true", help="Do not draw the ASCII map.")
    parser.add_argument("--log-level", default=LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Console log level.")
    parser.add_argument("--log-dir", default=LOG_DIR, help="Directory for log files.")
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level), log_dir=args.log_dir)
    loader = loader or get_config_loader()

    try:
        if args.list:
            for name in loader.list_worlds():
                safe_print(name)
            return EXIT_OK
        world = loader.load_world(args.world)
        runner = PathfinderRunner(world, step_cost_estimate=args.step_estimate, max_steps=args.max_steps)
    except (FileNotFoundError, KeyError, ValueError, ValidationError) as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    report = runner.run(start=args.start, goal=args.goal)
    if args.json:
        safe_print(report.model_dump_json(indent=2))
    else:
        print_report(report, world, render=not args.no_render)

    return EXIT_OK if report.success else EXIT_NO_ROUTE

if __name__ == "__main__":
    sys.exit(main())
