"""
E6POS point record.

One pose sample of a KRL spline: Cartesian position (mm), ABC orientation
(degrees), status/turn codes, six external axes and trajectory timing.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class E6Pos:
    """A single trajectory point.

    Attributes:
        index: 1-based point number, unique across the whole trajectory
        time_code: Time from the start of the trajectory to this point
        time_mark: Time since the previous checkpoint (0 if not a checkpoint)
        x, y, z: Position in mm
        a, b, c: Orientation in degrees
        s, t: Status and turn codes, passed through untouched
        e1..e6: External axis values
    """

    index: int
    x: float
    y: float
    z: float
    a: float
    b: float
    c: float
    s: int
    t: int
    time_code: float = 0.0
    time_mark: float = 0.0
    e1: float = 0.0
    e2: float = 0.0
    e3: float = 0.0
    e4: float = 0.0
    e5: float = 0.0
    e6: float = 0.0

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def orientation(self) -> tuple[float, float, float]:
        return (self.a, self.b, self.c)

    @property
    def external_axes(self) -> tuple[float, ...]:
        return (self.e1, self.e2, self.e3, self.e4, self.e5, self.e6)

    @property
    def is_checkpoint(self) -> bool:
        """True when this point records an explicit time mark."""
        return self.time_mark != 0
