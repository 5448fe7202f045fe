"""
Split a trajectory into spline blocks.

The controller accepts a bounded number of points per SPLINE block, so long
trajectories are cut into consecutive chunks of at most `max_size` points.
Point indices are global and are not renumbered per chunk.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from kukagen.motion.point import E6Pos
from kukagen.motion.timing import residual_time, total_time

logger = logging.getLogger(__name__)


def chunk_trajectory(points: Sequence[E6Pos], max_size: int) -> list[list[E6Pos]]:
    """Cut `points` into ordered chunks of at most `max_size` points.

    max_size <= 0 keeps the whole trajectory in a single chunk. The last
    chunk holds the remainder. An empty trajectory yields no chunks.
    """
    n = len(points)
    if n == 0:
        return []
    if max_size <= 0:
        max_size = n

    num_chunks = math.ceil(n / max_size)
    chunks = [
        list(points[i * max_size : min((i + 1) * max_size, n)])
        for i in range(num_chunks)
    ]
    logger.debug("Split %d points into %d chunks of <= %d", n, num_chunks, max_size)
    return chunks


@dataclass(frozen=True)
class Chunk:
    """One spline block and the values the KRL writers derive from it.

    Attributes:
        points: Contiguous, non-empty slice of a trajectory
        ordinal: Position of this chunk in the output sequence
    """

    points: Sequence[E6Pos]
    ordinal: int = 0

    def __post_init__(self) -> None:
        if not self.points:
            raise ValueError(f"chunk {self.ordinal} has no points")

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[E6Pos]:
        return iter(self.points)

    @property
    def size(self) -> int:
        return len(self.points)

    @property
    def first_index(self) -> int:
        return self.points[0].index

    @property
    def last_index(self) -> int:
        return self.points[-1].index

    @property
    def last_time_code(self) -> float:
        return self.points[-1].time_code

    @property
    def residual_time(self) -> float:
        return residual_time(self.points)

    @property
    def total_time(self) -> float:
        return total_time(self.points)

    def is_first(self, index: int) -> bool:
        return index == self.first_index

    def is_last(self, index: int) -> bool:
        return index == self.last_index

    @staticmethod
    def is_multiple_of(i: int, n: int) -> bool:
        return i % n == 0

    def needs_residual_part(self, point: E6Pos) -> bool:
        """Last point without its own mark: the block needs a trailing PART."""
        return not point.is_checkpoint and self.is_last(point.index)

    def padded_total(self, width: int) -> str:
        """Point count left-justified in a fixed-width header field."""
        return f"{self.size:<{width}d}"
