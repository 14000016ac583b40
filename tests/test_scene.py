"""Tests for the Swift scene adapter, using a recording stand-in for swift.Swift."""

import numpy as np

from environments.maze import GridMaze
from environments.scene import MazeScene, instance_pose


class RecordingSwift:
    def __init__(self):
        self.added = []
        self.removed = []
        self.launched = False
        self.steps = []

    def launch(self, **kwargs):
        self.launched = True

    def add(self, obj):
        self.added.append(obj)

    def remove(self, obj):
        self.removed.append(obj)

    def step(self, dt):
        self.steps.append(dt)


def test_instance_pose_swaps_to_z_up(scaled_maze):
    inst = scaled_maze.instance_at(2, 0)
    pose = instance_pose(inst)
    np.testing.assert_allclose(pose.t, [4.0, 0.0, 1.5])

    inst = scaled_maze.instance_at(0, 3)
    np.testing.assert_allclose(instance_pose(inst).t, [0.0, 6.0, 1.5])


def test_add_maze_adds_one_cuboid_per_obstacle(maze, capsys):
    env = RecordingSwift()
    scene = MazeScene(env)
    added = scene.add_maze(maze, with_floor=False)

    assert added == len(maze)
    assert len(env.added) == len(maze)
    assert scene.shapes == env.added
    assert scene.floor is None
    assert "Scene" in capsys.readouterr().out


def test_add_maze_with_floor_and_clear(maze):
    env = RecordingSwift()
    scene = MazeScene(env, launch=True)
    scene.add_maze(maze)

    assert env.launched
    assert scene.floor is not None
    assert len(env.added) == len(maze) + 1

    scene.clear()
    assert len(env.removed) == len(maze) + 1
    assert scene.shapes == []
    assert scene.floor is None


def test_scene_does_not_modify_maze(maze):
    before = maze.instances
    MazeScene(RecordingSwift()).add_maze(maze)
    assert maze.instances == before


def test_empty_maze_adds_only_floor():
    maze = GridMaze([0] * 4, 2, 2)
    env = RecordingSwift()
    assert MazeScene(env).add_maze(maze) == 0
    assert len(env.added) == 1


def test_step_advances_swift():
    env = RecordingSwift()
    MazeScene(env).step(0.1)
    assert env.steps == [0.1]
