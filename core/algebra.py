from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple
import math


@dataclass(frozen=True)
class Vector3:
    x: float
    y: float
    z: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)



#================= Helpers =================#

def floor_quantize(value: float, step: float) -> int:
    """
    Index of the step-sized bucket containing value (floor semantics).

    The result is corrected so that value == index * step always maps back to
    index, even when value / step lands just below an integer.
    """
    index = math.floor(value / step)
    if (index + 1) * step <= value:
        index += 1
    elif index * step > value:
        index -= 1
    return int(index)

#============================================#
