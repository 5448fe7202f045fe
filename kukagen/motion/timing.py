"""
Time accounting for spline blocks.

A KRL TIME_BLOCK splits its duration into PART segments, one per checkpoint.
When a block ends on a point that is not itself a checkpoint, the time between
the last checkpoint and that final point has to be added as one more PART so
the next block starts at the right absolute time.
"""

from __future__ import annotations

from collections.abc import Sequence

from kukagen.motion.point import E6Pos


def residual_time(points: Sequence[E6Pos]) -> float:
    """Time from the last checkpoint in `points` to the last point.

    Walks back from the last point (inclusive) to the first checkpoint found.
    Without any checkpoint the first point's time code is the reference.
    """
    if not points:
        raise ValueError("residual_time needs at least one point")

    checkpoint_time = points[0].time_code
    for p in reversed(points):
        if p.is_checkpoint:
            checkpoint_time = p.time_code
            break
    return points[-1].time_code - checkpoint_time


def total_time(points: Sequence[E6Pos]) -> float:
    """Sum of all time marks plus the trailing residual."""
    return sum(p.time_mark for p in points) + residual_time(points)
