"""
Geometry generation for circular spline paths.

Circles are sampled at a fixed angular step in the robot's Y-Z plane at a
constant X, with a constant tool orientation. Generated points carry no
timing; timing only comes from imported tables.

Point numbering is threaded explicitly: every generator takes the running
index and returns the updated value alongside the points, so several circles
appended into one trajectory keep indices contiguous.
"""

import logging
import math
from collections.abc import Sequence

import numpy as np

from kukagen import config as cfg
from kukagen.config import TRACE
from kukagen.motion.point import E6Pos

logger = logging.getLogger(__name__)

Triple = Sequence[float]

# Guards ceil() against 2*pi/step landing a hair above an integer
_STEP_EPS = 1e-9


def circle_step_count(angle_step: float) -> int:
    """Number of samples covering [0, 2*pi) at the given step."""
    if angle_step <= 0:
        raise ValueError(f"angle_step must be positive, got {angle_step}")
    return math.ceil(2 * math.pi / angle_step - _STEP_EPS)


class CircularMotion:
    """Generate circle trajectories as lists of E6Pos points.

    Center and orientation are (x, y, z) mm and (a, b, c) degrees.
    """

    def __init__(
        self,
        angle_step: float | None = None,
        status: int = cfg.CIRCLE_STATUS,
        turn: int = cfg.CIRCLE_TURN,
    ):
        self.angle_step = angle_step if angle_step is not None else cfg.ANGLE_STEP
        self.status = status
        self.turn = turn
        self.steps = circle_step_count(self.angle_step)

    def generate_circle(
        self,
        radius: float,
        center: Triple,
        orientation: Triple,
        index: int = 0,
    ) -> tuple[list[E6Pos], int]:
        """Sample one full circle.

        Args:
            radius: Circle radius in mm, must be positive
            center: Circle center [x, y, z]; x is held for every point
            orientation: Tool orientation [a, b, c] copied to every point
            index: Last index already used in the trajectory

        Returns:
            (points, index) where index is the last index assigned
        """
        if radius <= 0:
            raise ValueError(f"radius must be positive, got {radius}")

        cx, cy, cz = (float(v) for v in center)
        a, b, c = (float(v) for v in orientation)

        angles = np.arange(self.steps, dtype=np.float64) * self.angle_step
        ys = np.sin(angles) * radius + cy
        zs = np.cos(angles) * radius + cz

        points = [
            E6Pos(
                index=index + i + 1,
                x=cx,
                y=float(y),
                z=float(z),
                a=a,
                b=b,
                c=c,
                s=self.status,
                t=self.turn,
            )
            for i, (y, z) in enumerate(zip(ys, zs))
        ]
        index += len(points)
        logger.log(
            TRACE,
            "Circle r=%.1f at (%.1f, %.1f, %.1f): %d points, last index %d",
            radius,
            cx,
            cy,
            cz,
            len(points),
            index,
        )
        return points, index

    def repeat_circle(
        self,
        radius: float = cfg.REPEAT_RADIUS,
        center: Triple = cfg.REPEAT_CENTER,
        orientation: Triple = cfg.REPEAT_ORIENTATION,
    ) -> list[E6Pos]:
        """The single circle that the repeat program traverses over and over."""
        points, _ = self.generate_circle(radius, center, orientation)
        return points

    def random_circles(
        self,
        count: int,
        rng: np.random.Generator | None = None,
        index: int = 0,
    ) -> tuple[list[E6Pos], int]:
        """Append `count` randomly placed and sized circles into one path.

        Center x/z, the A angle and the radius are integers drawn from the
        configured [low, high) ranges; y is 0, B and C are fixed.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        rng = rng if rng is not None else np.random.default_rng()
        b, c = cfg.RANDOM_ORIENTATION_BC

        points: list[E6Pos] = []
        for _ in range(count):
            x = float(rng.integers(*cfg.RANDOM_X_RANGE))
            z = float(rng.integers(*cfg.RANDOM_Z_RANGE))
            a = float(rng.integers(*cfg.RANDOM_A_RANGE))
            radius = float(rng.integers(*cfg.RANDOM_RADIUS_RANGE))
            circle, index = self.generate_circle(radius, (x, 0.0, z), (a, b, c), index)
            points.extend(circle)

        logger.debug("Generated %d random circles, %d points", count, len(points))
        return points, index


def generate_circle(
    radius: float,
    center: Triple,
    orientation: Triple,
    index: int = 0,
    angle_step: float | None = None,
) -> tuple[list[E6Pos], int]:
    """Module-level shortcut for CircularMotion(angle_step).generate_circle()."""
    return CircularMotion(angle_step).generate_circle(
        radius, center, orientation, index
    )
