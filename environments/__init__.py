"""
Environments package for grid mazes.

This package provides the grid-to-world spatial model (occupancy grid,
obstacle placement, neighborhood queries) and a Swift scene adapter that
materializes the obstacles.
"""

from .maze import (
    BLOCKED,
    PASSABLE,
    GridCoordinate,
    GridMaze,
    InvalidDimensions,
    MazeParams,
    ObstacleInstance,
    ObstacleWindow,
    centered_range,
)

__all__ = [
    "BLOCKED",
    "PASSABLE",
    "GridCoordinate",
    "GridMaze",
    "InvalidDimensions",
    "MazeParams",
    "ObstacleInstance",
    "ObstacleWindow",
    "centered_range",
]
