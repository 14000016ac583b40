"""
Swift scene adapter for grid mazes.

Consumes the obstacle instances published by a GridMaze and materializes
them as cuboids in a Swift 3D environment. The maze itself is only read.
"""

from __future__ import annotations

from typing import List, Optional
import spatialgeometry as sg
import spatialmath as sm
import swift

from environments.maze import GridMaze, ObstacleInstance


YELLOW_COLOR = "\033[93m"
RESET_COLOR = "\033[0m"

MAZE_WALL_COLOR = (0.2, 0.3, 0.6, 1.0)
MAZE_FLOOR_COLOR = (0.25, 0.25, 0.25, 1.0)
FLOOR_THICKNESS = 0.02


def instance_pose(instance: ObstacleInstance) -> sm.SE3:
    """
    Pose of an obstacle in the Swift frame.

    Instances are placed y-up (x across, y vertical, z along the rows),
    Swift is z-up, so the vertical and row axes are swapped.
    """
    x, y, z = instance.position.as_tuple()
    return sm.SE3(x, z, y)


class MazeScene:
    """
    Holds the Swift shapes created for one maze.

    Shapes are tracked so the scene can be cleared and rebuilt when a new
    maze is loaded.
    """

    def __init__(self, swift_env=None, launch: bool = False, color=MAZE_WALL_COLOR):
        """
        Args:
            swift_env: Swift environment (created if None)
            launch: Launch the Swift window immediately
            color: RGBA color of the obstacle cuboids
        """

        if swift_env is None:
            swift_env = swift.Swift()
        self.swift = swift_env
        if launch:
            self.swift.launch(realtime=True)
        self.color = color
        self.shapes: List[sg.Cuboid] = []
        self.floor: Optional[sg.Cuboid] = None

    def add_maze(self, maze: GridMaze, with_floor: bool = True) -> int:
        """
        Add one cuboid per obstacle instance (and optionally a floor slab).

        Returns:
            Number of obstacle cuboids added
        """

        size = maze.cell_size
        height = maze.obstacle_height
        for instance in maze.instances:
            cube = sg.Cuboid(scale=[size, size, height], pose=instance_pose(instance), color=self.color)
            self.swift.add(cube)
            self.shapes.append(cube)

        if with_floor:
            self.add_floor(maze)

        print(f"[{YELLOW_COLOR}Scene{RESET_COLOR}] Added {len(maze)} obstacles")
        return len(maze)

    def add_floor(self, maze: GridMaze, color=MAZE_FLOOR_COLOR) -> sg.Cuboid:
        # anchors are cell corners, so the floor spans [-size/2, (n - 1/2) * size] on each axis
        sx = maze.width * maze.cell_size
        sy = maze.height * maze.cell_size
        cx = sx / 2.0 - maze.cell_size / 2.0
        cy = sy / 2.0 - maze.cell_size / 2.0
        floor = sg.Cuboid(scale=[sx, sy, FLOOR_THICKNESS], pose=sm.SE3(cx, cy, -FLOOR_THICKNESS / 2.0), color=color)
        self.swift.add(floor)
        self.floor = floor
        return floor

    def clear(self) -> None:
        shapes = list(self.shapes)
        if self.floor is not None:
            shapes.append(self.floor)
        for shape in shapes:
            self.swift.remove(shape)
        self.shapes = []
        self.floor = None

    def step(self, dt: float = 0.05) -> None:
        self.swift.step(dt)
