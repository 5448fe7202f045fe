"""
Trajectory model and generation.

- E6Pos: the point record written to KRL data lists
- CircularMotion / generate_circle: analytic circle paths
- residual_time / total_time: timing carried across spline blocks
"""

from kukagen.motion.geometry import (
    CircularMotion,
    circle_step_count,
    generate_circle,
)
from kukagen.motion.point import E6Pos
from kukagen.motion.timing import residual_time, total_time

__all__ = [
    "E6Pos",
    # Geometry generators
    "CircularMotion",
    "circle_step_count",
    "generate_circle",
    # Timing
    "residual_time",
    "total_time",
]
