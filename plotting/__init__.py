"""
Plotting package.
Contains utilities for generating interactive visualizations.
"""

from .maze import plot_maze_2d

__all__ = ['plot_maze_2d']
