"""
Maze generation - randomized DFS carving and wall emission
"""

import logging
import random

from frustration_maze.utils.constants import DIRS, MAZE_WALL_THICKNESS, INNER_WALL_CHANCE, MIN_CELL_SIZE
from frustration_maze.maze.maze_core import MazeGrid, Maze, Wall, carve_passage

logger = logging.getLogger(__name__)


# ========== CARVING: DFS BACKTRACKER ==========

def gen_dfs_backtracker(cols, rows, rng=None):
    """
    Depth-First Search with backtracking - animated generator

    Carves from cell (0, 0). Each step yields a state dict so a host can draw
    the carving as it happens; the final state has done=True.

    Args:
        cols, rows: Grid size (>= 1)
        rng: random.Random instance (module random when None)
    """
    rng = rng or random
    grid = MazeGrid(cols, rows)
    walls = grid.walls
    visited = grid.visited

    stack = [(0, 0)]
    visited[grid.idx(0, 0)] = True
    grid.visit_order.append((0, 0))

    yield {"grid": grid, "walls": walls, "visited": visited, "current": (0, 0), "carved": None, "done": False}

    while stack:
        cx, cy = stack[-1]
        neighbors = []

        for dx, dy, _, _ in DIRS:
            nx, ny = cx + dx, cy + dy
            if grid.in_bounds(nx, ny) and not visited[grid.idx(nx, ny)]:
                neighbors.append((nx, ny))

        if neighbors:
            nx, ny = rng.choice(neighbors)
            carve_passage(walls, cols, cx, cy, nx, ny)
            visited[grid.idx(nx, ny)] = True
            grid.visit_order.append((nx, ny))
            stack.append((nx, ny))

            yield {"grid": grid, "walls": walls, "visited": visited, "current": (nx, ny), "carved": ((cx, cy), (nx, ny)), "done": False}
        else:
            stack.pop()
            yield {"grid": grid, "walls": walls, "visited": visited, "current": (cx, cy), "carved": None, "done": False}

    yield {"grid": grid, "walls": walls, "visited": visited, "current": (0, 0), "carved": None, "done": True}


def carve_maze(cols, rows, rng=None):
    """Run the DFS carver to completion and return the MazeGrid"""
    last_state = None
    for state in gen_dfs_backtracker(cols, rows, rng):
        last_state = state
    return last_state["grid"]


# ========== WALL EMISSION ==========

def compute_cell_size(cols, rows, play_w, play_h, thickness=MAZE_WALL_THICKNESS):
    """
    Pixel size of one maze cell inside the boundary walls

    Never smaller than MIN_CELL_SIZE, so a zero-area play field still gives
    a usable (if degenerate) layout.
    """
    cell = min(
        (play_w - thickness * 2) / cols,
        (play_h - thickness * 2) / rows
    )
    return max(MIN_CELL_SIZE, cell)


def boundary_walls(play_w, play_h, thickness=MAZE_WALL_THICKNESS):
    """Top, bottom, left, right walls spanning the play area"""
    return [
        Wall(0, 0, play_w, thickness),
        Wall(0, play_h - thickness, play_w, thickness),
        Wall(0, 0, thickness, play_h),
        Wall(play_w - thickness, 0, thickness, play_h),
    ]


def emit_walls(cols, rows, play_w, play_h, rng=None, thickness=MAZE_WALL_THICKNESS):
    """
    Convert a maze grid to wall rectangles

    Only a few inner walls are kept: each cell independently gets a vertical
    segment on its left edge and a horizontal segment on its top edge, each
    with INNER_WALL_CHANCE. The result looks like a maze but stays mostly open.

    Returns:
        (walls, cell_size) - boundary walls first, then inner walls in
        row-major order, vertical before horizontal per cell
    """
    rng = rng or random
    play_w = max(0, play_w)
    play_h = max(0, play_h)
    cell_size = compute_cell_size(cols, rows, play_w, play_h, thickness)

    walls = boundary_walls(play_w, play_h, thickness)

    for y in range(rows):
        for x in range(cols):
            x0 = thickness + x * cell_size
            y0 = thickness + y * cell_size

            if rng.random() < INNER_WALL_CHANCE:
                walls.append(Wall(x0, y0, thickness, cell_size))

            if rng.random() < INNER_WALL_CHANCE:
                walls.append(Wall(x0, y0, cell_size, thickness))

    return walls, cell_size


def generate_maze(cols, rows, play_w, play_h, rng=None):
    """
    Carve a cols x rows maze and emit its walls for the given play area

    Returns:
        Maze object
    """
    grid = carve_maze(cols, rows, rng)
    walls, cell_size = emit_walls(cols, rows, play_w, play_h, rng)
    logger.debug("Generated %dx%d maze: %d walls, cell size %.2f",
                 cols, rows, len(walls), cell_size)
    return Maze(grid, walls, cell_size)
