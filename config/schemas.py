# config/schemas.py
from typing import List, Optional, Tuple
from pydantic import BaseModel, Field, PositiveInt, model_validator

from gridpath.pathfinding.grid import Grid

# --- World definitions (loaded from worlds.yml) ---

class WorldConfig(BaseModel):
    """A named grid plus the search parameters it is meant to be run with."""
    name: str = Field(..., description="World name, the key in worlds.yml.")
    description: str = Field("", description="Human readable summary of the world.")
    cells: List[List[PositiveInt]] = Field(..., description="Square table of cell costs, row by row.")
    start: Tuple[int, int] = Field((0, 0), description="Start cell as (row, column).")
    goal: Optional[Tuple[int, int]] = Field(None, description="Goal cell; defaults to the bottom-right cell.")
    step_cost_estimate: Optional[float] = Field(None, ge=0, description="Per-step heuristic cost; defaults to settings.")

    @model_validator(mode="after")
    def check_geometry(self):
        size = len(self.cells)
        if size == 0:
            raise ValueError("cells must contain at least one row")
        for r, row in enumerate(self.cells):
            if len(row) != size:
                raise ValueError(f"cells must be square: row {r} has {len(row)} cells, expected {size}")
        for label, coord in (("start", self.start), ("goal", self.goal)):
            if coord is not None and not all(0 <= v < size for v in coord):
                raise ValueError(f"{label} {coord} is outside a {size}x{size} grid")
        return self

    def to_grid(self) -> Grid:
        return Grid.from_rows(self.cells)

# --- Output of the command line runner ---

class RouteReport(BaseModel):
    """Outcome of running the pathfinder on one world."""
    world: str = Field(..., description="Name of the world that was searched.")
    success: bool = Field(..., description="Whether a route to the goal was found.")
    start: Tuple[int, int] = Field(..., description="Start cell.")
    goal: Tuple[int, int] = Field(..., description="Goal cell.")
    cost: Optional[int] = Field(None, description="Cumulative cost of the route, start cell included.")
    path: List[Tuple[int, int]] = Field([], description="Cells of the route from start to goal.")
    steps_examined: int = Field(0, description="Number of frontier items processed.")
    truncated: bool = Field(False, description="True when the step limit stopped the search.")
    failure_reason: Optional[str] = Field(None, description="Why no route was returned.")
