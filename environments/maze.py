"""
Grid maze spatial model.

This module turns a flat, row-major occupancy grid (0 = passable, 1 = blocked)
into positioned obstacle instances and answers neighborhood queries around
arbitrary world positions. Rendering is left to consumers of the published
instance table (see environments.scene).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, NamedTuple, Optional, Sequence, Tuple
import math
import operator
import numpy as np

from core.algebra import Vector3, floor_quantize


CYAN_COLOR = "\033[96m"
RESET_COLOR = "\033[0m"

PASSABLE = 0
BLOCKED = 1


class InvalidDimensions(ValueError):
    """Raised when the cell data does not match the declared grid shape."""


class GridCoordinate(NamedTuple):
    column: int
    row: int


@dataclass(frozen=True)
class ObstacleInstance:
    """Placement of one blocked cell in world space."""

    column: int
    row: int
    index: int
    position: Vector3

    @property
    def coordinate(self) -> GridCoordinate:
        return GridCoordinate(self.column, self.row)


@dataclass
class MazeParams:
    cell_size: float = 1.0
    obstacle_height: float = 1.0
    window_width: int = 10
    window_height: int = 10
    verbose: bool = False

    @staticmethod
    def from_box(width: float, depth: float, height: float, **kwargs) -> MazeParams:
        """
        Derive the parameters from an obstacle box.

        The box footprint must be square seen from above (width == depth),
        its edge becomes the cell size.
        """
        if float(width) != float(depth):
            raise ValueError(f"Obstacle footprint must be square, got {width} x {depth}")
        return MazeParams(cell_size=float(width), obstacle_height=float(height), **kwargs)


class ObstacleWindow:
    """
    Lazy view over the obstacles inside a rectangular window of the grid.

    Every iteration rescans the window in row-major order, so the view can be
    consumed any number of times and always yields the same instances.
    """

    def __init__(self, maze: GridMaze, columns: range, rows: range):
        self.maze = maze
        self.columns = columns
        self.rows = rows

    def __iter__(self) -> Iterator[ObstacleInstance]:
        for row in self.rows:
            for column in self.columns:
                if not self.maze.in_bounds(column, row):
                    continue
                instance = self.maze.instance_at(column, row)
                if instance is not None:
                    yield instance

    def contains(self, column: int, row: int) -> bool:
        return column in self.columns and row in self.rows

    def __repr__(self) -> str:
        return (f"ObstacleWindow(columns=[{self.columns.start}, {self.columns.stop}), "
                f"rows=[{self.rows.start}, {self.rows.stop}))")


def centered_range(center: int, size: int) -> range:
    """Range of `size` integers around center: [center - floor(size/2), center + ceil(size/2))."""
    if size <= 0:
        return range(center, center)
    return range(center - size // 2, center + (size + 1) // 2)


def _as_coordinate(column, row) -> Optional[GridCoordinate]:
    """Integral (column, row) as ints, numpy integers included; None for anything else."""
    try:
        return GridCoordinate(operator.index(column), operator.index(row))
    except TypeError:
        return None


class GridMaze:
    """
    Occupancy grid with its derived obstacle table.

    The grid is immutable once built: the cells are stored as a tuple and the
    instance table is computed eagerly by the constructor.
    """

    def __init__(self, cells: Sequence[int], width: int, height: int, cell_size: float = 1.0, obstacle_height: float = 1.0, window_width: int = 10, window_height: int = 10, verbose: bool = False) -> None:
        """
        Build the maze and its obstacle table.

        Args:
            cells: Row-major cell values, index = row * width + column
            width: Number of columns
            height: Number of rows
            cell_size: World edge length of one cell
            obstacle_height: Vertical extent of an obstacle
            window_width, window_height: Default window of obstacles_near
            verbose: Print a summary line after building

        Raises:
            InvalidDimensions: If width * height != len(cells), or a dimension is not positive
        """

        width = int(width)
        height = int(height)
        if width <= 0 or height <= 0:
            raise InvalidDimensions(f"Grid dimensions must be positive, got {width}x{height}")
        cells = tuple(int(c) for c in cells)
        if len(cells) != width * height:
            raise InvalidDimensions(
                f"Grid of {width}x{height} needs {width * height} cells, got {len(cells)}"
            )
        if cell_size <= 0:
            raise InvalidDimensions(f"Cell size must be positive, got {cell_size}")

        self._cells = cells
        self._width = width
        self._height = height
        self._cell_size = float(cell_size)
        self._obstacle_height = float(obstacle_height)
        self._window = (int(window_width), int(window_height))
        self._verbose = verbose

        self._instances: Tuple[ObstacleInstance, ...] = ()
        self._by_index: Dict[int, ObstacleInstance] = {}
        self._build()

    @classmethod
    def from_params(cls, cells: Sequence[int], width: int, height: int, params: MazeParams) -> GridMaze:
        return cls(cells, width, height, cell_size=params.cell_size, obstacle_height=params.obstacle_height,
                   window_width=params.window_width, window_height=params.window_height, verbose=params.verbose)

    @classmethod
    def from_rows(cls, rows, cell_size: float = 1.0, obstacle_height: float = 1.0, window_width: int = 10, window_height: int = 10, verbose: bool = False) -> GridMaze:
        """Build from a 2D array-like indexed as [row, column]."""
        grid = np.asarray(rows, dtype=int)
        if grid.ndim != 2:
            raise InvalidDimensions(f"Expected a 2D grid, got an array of shape {grid.shape}")
        height, width = grid.shape
        return cls(grid.ravel().tolist(), width, height, cell_size=cell_size, obstacle_height=obstacle_height,
                   window_width=window_width, window_height=window_height, verbose=verbose)

    @property
    def cells(self) -> Tuple[int, ...]:
        return self._cells

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cell_size(self) -> float:
        return self._cell_size

    @property
    def obstacle_height(self) -> float:
        return self._obstacle_height

    @property
    def instances(self) -> Tuple[ObstacleInstance, ...]:
        """Obstacle instances in row-major build order."""
        return self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def __iter__(self) -> Iterator[ObstacleInstance]:
        return iter(self._instances)

    def __repr__(self) -> str:
        return f"GridMaze({self._width}x{self._height}, cell_size={self._cell_size}, obstacles={len(self._instances)})"

    #================= Index conversion =================#

    @property
    def window(self) -> Tuple[int, int]:
        """Default (columns, rows) scanned by obstacles_near."""
        return self._window

    def in_bounds(self, column: int, row: int) -> bool:
        coordinate = _as_coordinate(column, row)
        if coordinate is None:
            return False
        column, row = coordinate
        return 0 <= column < self._width and 0 <= row < self._height

    def to_linear_index(self, column: int, row: int) -> Optional[int]:
        coordinate = _as_coordinate(column, row)
        if coordinate is None:
            return None
        column, row = coordinate
        index = row * self._width + column
        if index < 0 or len(self._cells) <= index:
            return None
        return index

    def to_world_position(self, column: int, row: int) -> Vector3:
        x = self._cell_size * column
        y = self._obstacle_height / 2.0
        z = self._cell_size * row
        return Vector3(x, y, z)

    def to_grid_coordinate(self, x: float, y: float, z: float) -> Optional[GridCoordinate]:
        """Cell containing (x, z), or None when x or z is NaN or infinite."""
        # y is ignored: obstacles span the full vertical extent of their cell
        if not (math.isfinite(x / self._cell_size) and math.isfinite(z / self._cell_size)):
            return None
        column = floor_quantize(x, self._cell_size)
        row = floor_quantize(z, self._cell_size)
        return GridCoordinate(column, row)

    #================= Cell lookup =================#

    def cell_type(self, column: int, row: int) -> Optional[int]:
        index = self.to_linear_index(column, row)
        if index is None:
            return None
        return self._cells[index]

    def instance_at(self, column: int, row: int) -> Optional[ObstacleInstance]:
        index = self.to_linear_index(column, row)
        if index is None:
            return None
        return self._by_index.get(index)

    def to_array(self) -> np.ndarray:
        """Occupancy as an int array of shape (height, width), indexed [row, column]."""
        return np.array(self._cells, dtype=int).reshape(self._height, self._width)

    #================= Queries =================#

    def obstacles_near(self, x: float, y: float, z: float, window_width: Optional[int] = None, window_height: Optional[int] = None) -> ObstacleWindow:
        """
        Obstacles inside a window of cells centered on a world position.

        Args:
            x, y, z: World position of the query
            window_width: Number of columns scanned (maze default if None)
            window_height: Number of rows scanned (maze default if None)

        Returns:
            Lazy, restartable iterable of ObstacleInstance in row-major window order.
            Cells outside the grid contribute nothing, a non-finite position gives an empty window.
        """

        if window_width is None:
            window_width = self._window[0]
        if window_height is None:
            window_height = self._window[1]
        center = self.to_grid_coordinate(x, y, z)
        if center is None:
            return ObstacleWindow(self, centered_range(0, 0), centered_range(0, 0))
        columns = centered_range(center.column, int(window_width))
        rows = centered_range(center.row, int(window_height))
        return ObstacleWindow(self, columns, rows)

    #================= Build =================#

    def _build(self) -> None:
        instances = []
        by_index = {}
        index = 0
        for row in range(self._height):
            for column in range(self._width):
                if self._cells[index] == BLOCKED:
                    instance = ObstacleInstance(column, row, index, self.to_world_position(column, row))
                    instances.append(instance)
                    by_index[index] = instance
                index += 1

        self._instances = tuple(instances)
        self._by_index = by_index

        if self._verbose:
            print(f"[{CYAN_COLOR}Maze{RESET_COLOR}] Built {len(instances)} obstacles from {self._width}x{self._height} grid")
