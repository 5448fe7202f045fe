"""
kukagen Python Package

Generates KUKA Robot Language (KRL) spline programs from analytic circles or
imported CSV point tables, split into blocks the controller can load.

Key components:
- CircularMotion: circle trajectories with globally numbered points
- read_table / parse_table: CSV point import
- chunk_trajectory: split a trajectory into bounded spline blocks
- ChunkEmitter: render and write .dat/.src file pairs per block
"""

from ._version import __version__
from .motion import CircularMotion, E6Pos, generate_circle, residual_time, total_time
from .output import Chunk, ChunkEmitter, chunk_trajectory
from .protocol import parse_table, read_table

__all__ = [
    "__version__",
    "E6Pos",
    "CircularMotion",
    "generate_circle",
    "residual_time",
    "total_time",
    "parse_table",
    "read_table",
    "Chunk",
    "chunk_trajectory",
    "ChunkEmitter",
]
