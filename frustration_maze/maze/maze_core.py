"""
Core maze structures - carved grid, wall rectangles and passage queries
"""

from collections import deque
from frustration_maze.utils.constants import TOP, RIGHT, BOTTOM, LEFT, DIR_TO_BITS


class MazeGrid:
    """
    Carved maze grid with wall-based representation
    Each cell has 4 possible walls: TOP, RIGHT, BOTTOM, LEFT
    """
    def __init__(self, cols, rows):
        if cols < 1 or rows < 1:
            raise ValueError(f"Maze grid needs at least one cell, got {cols}x{rows}")

        self.cols = cols
        self.rows = rows
        # Initialize all walls closed
        self.walls = [TOP | RIGHT | BOTTOM | LEFT for _ in range(cols * rows)]
        self.visited = [False] * (cols * rows)
        self.visit_order = []  # Cells in the order carving first reached them

    def idx(self, x, y):
        """Convert 2D coordinates to 1D index"""
        return y * self.cols + x

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def visited_count(self):
        """Number of cells the carving reached"""
        return sum(1 for v in self.visited if v)

    def __repr__(self):
        return f"MazeGrid(size={self.cols}x{self.rows}, visited={self.visited_count()})"


class Wall:
    """
    Axis-aligned wall rectangle in play-area pixels
    """
    __slots__ = ('x', 'y', 'width', 'height')

    def __init__(self, x, y, width, height):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def as_tuple(self):
        """(x, y, width, height)"""
        return (self.x, self.y, self.width, self.height)

    def __eq__(self, other):
        if not isinstance(other, Wall):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def __repr__(self):
        return f"Wall(x={self.x}, y={self.y}, w={self.width}, h={self.height})"


class Maze:
    """
    A generated maze: carved grid plus the wall rectangles emitted from it
    """
    def __init__(self, grid, walls, cell_size):
        self.grid = grid
        self.walls = walls
        self.cell_size = cell_size

    @property
    def cols(self):
        return self.grid.cols

    @property
    def rows(self):
        return self.grid.rows

    def boundary_walls(self):
        """The four outer walls (always emitted first)"""
        return self.walls[:4]

    def inner_walls(self):
        """Probabilistic inner wall segments"""
        return self.walls[4:]

    def __repr__(self):
        return f"Maze(size={self.cols}x{self.rows}, walls={len(self.walls)}, cell={self.cell_size:.1f})"


def carve_passage(walls, cols, ax, ay, bx, by):
    """Carve a passage between two adjacent cells"""
    dx = bx - ax
    dy = by - ay
    bits = DIR_TO_BITS.get((dx, dy))
    if bits is None:
        return
    wall_bit, opp_bit = bits
    idx_a = ay * cols + ax
    idx_b = by * cols + bx
    walls[idx_a] &= ~wall_bit
    walls[idx_b] &= ~opp_bit


def is_open_between(walls, cols, ax, ay, bx, by):
    """Check if passage is open between two adjacent cells"""
    dx = bx - ax
    dy = by - ay
    bits = DIR_TO_BITS.get((dx, dy))
    if bits is None:
        return False
    wall_bit, _ = bits
    idx_a = ay * cols + ax
    return (walls[idx_a] & wall_bit) == 0


def neighbors_open(walls, cols, rows, x, y):
    """Get list of neighbour cells reachable through a carved passage"""
    res = []
    for (dx, dy) in DIR_TO_BITS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < cols and 0 <= ny < rows and is_open_between(walls, cols, x, y, nx, ny):
            res.append((nx, ny))
    return res


def reachable_cells(walls, cols, rows, start=(0, 0)):
    """BFS over carved passages, returns the set of cells reachable from start"""
    q = deque([start])
    seen = {start}

    while q:
        x, y = q.popleft()
        for n in neighbors_open(walls, cols, rows, x, y):
            if n not in seen:
                seen.add(n)
                q.append(n)
    return seen
