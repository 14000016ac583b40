"""
Core utilities package.
Contains the vector type and numeric helpers shared by the maze model.
"""

from .algebra import Vector3, floor_quantize

__all__ = ['Vector3', 'floor_quantize']
