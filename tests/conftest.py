"""Shared fixtures: sample 10x10 mazes, all with a blocked border row/column."""

import pytest

from environments.maze import GridMaze


MAZE_A = [
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
    1, 0, 0, 0, 1, 0, 0, 0, 0, 1,
    1, 0, 0, 0, 1, 0, 1, 1, 1, 1,
    1, 0, 0, 0, 1, 0, 0, 0, 1, 1,
    1, 1, 0, 1, 1, 0, 1, 0, 0, 1,
    1, 1, 0, 1, 0, 0, 1, 1, 0, 1,
    1, 1, 0, 1, 1, 0, 1, 0, 0, 1,
    1, 0, 0, 0, 0, 0, 1, 0, 1, 1,
    1, 0, 1, 0, 1, 0, 1, 0, 0, 0,
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
]

MAZE_B = [
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
    1, 0, 1, 0, 0, 0, 0, 1, 0, 0,
    1, 0, 0, 0, 1, 1, 0, 1, 0, 1,
    1, 0, 1, 0, 0, 1, 0, 1, 0, 1,
    1, 0, 0, 1, 0, 1, 0, 1, 0, 1,
    1, 1, 0, 1, 0, 1, 0, 1, 0, 1,
    1, 0, 0, 1, 0, 1, 0, 1, 0, 1,
    1, 0, 1, 1, 1, 1, 1, 1, 0, 1,
    1, 0, 0, 0, 0, 0, 0, 0, 0, 1,
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
]

MAZE_C = [
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
    1, 0, 1, 0, 0, 0, 0, 0, 0, 1,
    1, 0, 1, 0, 1, 1, 0, 1, 0, 1,
    1, 0, 0, 0, 0, 1, 0, 1, 0, 1,
    1, 1, 1, 0, 1, 1, 0, 1, 0, 1,
    1, 0, 0, 0, 1, 0, 0, 1, 0, 1,
    1, 0, 1, 1, 1, 0, 1, 0, 0, 1,
    1, 0, 0, 0, 1, 0, 1, 1, 1, 1,
    1, 0, 1, 0, 1, 0, 0, 0, 0, 0,
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
]

OBSTACLE_HEIGHT = 3.0


@pytest.fixture
def maze_cells():
    return list(MAZE_A)


@pytest.fixture(params=[MAZE_A, MAZE_B, MAZE_C], ids=["a", "b", "c"])
def any_maze_cells(request):
    return list(request.param)


@pytest.fixture
def maze(maze_cells):
    return GridMaze(maze_cells, 10, 10, cell_size=1.0, obstacle_height=OBSTACLE_HEIGHT)


@pytest.fixture
def scaled_maze(maze_cells):
    return GridMaze(maze_cells, 10, 10, cell_size=2.0, obstacle_height=OBSTACLE_HEIGHT)
