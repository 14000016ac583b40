"""
Plotting utilities for grid mazes (top-down view).
"""

from typing import Optional, Tuple
import plotly.graph_objects as go

from core.algebra import Vector3
from environments.maze import GridMaze


OBSTACLE_COLOR = 'rgba(51, 77, 153, 0.6)'
NEAR_COLOR = 'rgba(255, 99, 71, 0.8)'


def _square(x: float, z: float, size: float):
    h = size / 2.0
    xs = [x - h, x + h, x + h, x - h, x - h]
    zs = [z - h, z - h, z + h, z + h, z - h]
    return xs, zs


def plot_maze_2d(
    maze: GridMaze,
    query: Optional[Vector3] = None,
    window: Tuple[int, int] = (10, 10),
    title: str = "Grid Maze",
) -> go.Figure:
    """
    Create a top-down (x/z) plot of the maze obstacles.

    Args:
        maze: GridMaze to draw
        query: Optional world position of a neighborhood query
        window: (columns, rows) of the query window
        title: Figure title

    Returns:
        Plotly figure. Obstacles returned by the query are drawn in a second color
        together with the window outline and the query point.
    """
    fig = go.Figure()
    size = maze.cell_size

    near = set()
    if query is not None:
        near = {inst.coordinate for inst in maze.obstacles_near(query.x, query.y, query.z, window[0], window[1])}

    for i, inst in enumerate(maze.instances):
        xs, zs = _square(inst.position.x, inst.position.z, size)
        is_near = inst.coordinate in near
        fig.add_trace(go.Scatter(
            x=xs,
            y=zs,
            mode='lines',
            fill='toself',
            fillcolor=NEAR_COLOR if is_near else OBSTACLE_COLOR,
            line=dict(width=1, color='black'),
            name=f'({inst.column}, {inst.row})',
            showlegend=False,
            hoverinfo='name'
        ))

    if query is not None:
        result = maze.obstacles_near(query.x, query.y, query.z, window[0], window[1])
        h = size / 2.0
        x0 = result.columns.start * size - h
        x1 = result.columns.stop * size - h
        z0 = result.rows.start * size - h
        z1 = result.rows.stop * size - h
        fig.add_trace(go.Scatter(
            x=[x0, x1, x1, x0, x0],
            y=[z0, z0, z1, z1, z0],
            mode='lines',
            name=f'Window {window[0]}x{window[1]}',
            line=dict(color='red', width=2, dash='dash'),
            hoverinfo='skip'
        ))
        fig.add_trace(go.Scatter(
            x=[query.x],
            y=[query.z],
            mode='markers',
            name=f'Query ({query.x:.2f}, {query.z:.2f})',
            marker=dict(size=12, color='green', symbol='circle'),
            hoverinfo='name'
        ))

    fig.update_layout(
        title=f"{title}: {maze.width}x{maze.height}, {len(maze)} obstacles",
        xaxis_title="X",
        yaxis_title="Z",
        height=700,
        width=700,
        showlegend=True,
        yaxis_scaleanchor="x",
        yaxis_scaleratio=1,
        yaxis_autorange="reversed",
    )

    return fig
