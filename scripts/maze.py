from __future__ import annotations

import numpy as np
import spatialgeometry as sg
import spatialmath as sm
import swift

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.algebra import Vector3
from environments.maze import GridMaze, MazeParams
from environments.scene import MazeScene
from plotting.maze import plot_maze_2d


YELLOW_COLOR = "\033[93m"
RESET_COLOR = "\033[0m"

GRID_FILE = Path(__file__).parent.parent / "data" / "maze.txt"
PLOT_FILE = "maze_neighborhood.html"

BOX_SIZE = 0.4
BOX_HEIGHT = 0.5
PROBE_RADIUS = 0.08
PROBE_COLOR = (0.9, 0.8, 0.2, 1.0)
PROBE_ROW = 7
WINDOW = (3, 3)
DT = 0.05
STEPS_PER_CELL = 10


def load_grid(path: Path) -> np.ndarray:
    """Load a whitespace-separated 0/1 grid, one maze row per line."""
    return np.loadtxt(path, dtype=int, ndmin=2)


def main():
    params = MazeParams.from_box(BOX_SIZE, BOX_SIZE, BOX_HEIGHT, window_width=WINDOW[0], window_height=WINDOW[1], verbose=True)
    grid = load_grid(GRID_FILE)
    maze = GridMaze.from_rows(grid, cell_size=params.cell_size, obstacle_height=params.obstacle_height,
                             window_width=params.window_width, window_height=params.window_height, verbose=params.verbose)

    env = None
    try:
        env = swift.Swift()
        env.launch(realtime=True)

        print(f"[{YELLOW_COLOR}Environment{RESET_COLOR}] Adding obstacles and floor")
        scene = MazeScene(env)
        scene.add_maze(maze)

        probe = sg.Sphere(radius=PROBE_RADIUS, color=PROBE_COLOR)
        env.add(probe)

        print(f"[{YELLOW_COLOR}Environment{RESET_COLOR}] Walking probe along row {PROBE_ROW}")
        z = PROBE_ROW * maze.cell_size
        last = None
        for column in range(maze.width):
            for k in range(STEPS_PER_CELL):
                x = (column + k / STEPS_PER_CELL) * maze.cell_size
                probe.T = sm.SE3(x, z, PROBE_RADIUS)
                coord = maze.to_grid_coordinate(x, 0.0, z)
                if coord != last:
                    near = list(maze.obstacles_near(x, 0.0, z))
                    print(f"[{YELLOW_COLOR}Environment{RESET_COLOR}] Cell ({coord.column}, {coord.row}): {len(near)} obstacles nearby")
                    last = coord
                scene.step(DT)
                if not env.keep_running:
                    print(f"\n[{YELLOW_COLOR}Environment{RESET_COLOR}] Swift window closed. Exiting simulation.")
                    return

        query = Vector3(1 * maze.cell_size, 0.0, PROBE_ROW * maze.cell_size)
        fig = plot_maze_2d(maze, query=query, window=WINDOW)
        fig.write_html(PLOT_FILE)
        print(f"[{YELLOW_COLOR}Environment{RESET_COLOR}] Plot written to {PLOT_FILE}")
    except KeyboardInterrupt:
        print(f"\n[{YELLOW_COLOR}Environment{RESET_COLOR}] Simulation stopped by user.")
    finally:
        if env is not None:
            if env.keep_running:
                print(f"[{YELLOW_COLOR}Environment{RESET_COLOR}] Closing environment.")
                env.close()
            else:
                print(f"[{YELLOW_COLOR}Environment{RESET_COLOR}] Environment already closed.")


if __name__ == "__main__":
    main()
