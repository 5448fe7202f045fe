"""
Central configuration for kukagen tunables and shared constants.
"""

from __future__ import annotations

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("KUKAGEN_TRACE", "0")).lower() in (
    "1",
    "true",
    "yes",
    "on",
)

# Circle sampling step (radians)
ANGLE_STEP: float = float(os.getenv("KUKAGEN_ANGLE_STEP", "0.1"))

# Max points per spline block; 0 means one block for the whole trajectory
MAX_POINTS_DEFAULT: int = int(os.getenv("KUKAGEN_MAX_POINTS", "0"))

OUTPUT_DIR: str = os.getenv("KUKAGEN_OUTPUT_DIR", ".")

# Progress dot interval while generating (seconds)
PROGRESS_INTERVAL_S: float = float(os.getenv("KUKAGEN_PROGRESS_INTERVAL_S", "0.5"))

# Decimal places for numbers written to KRL files
PRECISION: int = int(os.getenv("KUKAGEN_PRECISION", "6"))

# Status (S) and turn (T) codes tagging the point source
CIRCLE_STATUS: int = 2
CIRCLE_TURN: int = 43
TABLE_STATUS: int = 6
TABLE_TURN: int = 19

# Minimum CSV fields per row: time, x, y, z, a, b, c, time mark
TABLE_MIN_FIELDS: int = 8
# Optional trailing external axes E1..E6
TABLE_MAX_AXES: int = 6

# Repeated circle defaults (mm / deg)
REPEAT_RADIUS: float = 100.0
REPEAT_CENTER: tuple[float, float, float] = (700.0, 0.0, 600.0)
REPEAT_ORIENTATION: tuple[float, float, float] = (90.0, 0.0, -180.0)

# Random circle ranges, [low, high) integers (mm / deg)
RANDOM_X_RANGE: tuple[int, int] = (550, 650)
RANDOM_Z_RANGE: tuple[int, int] = (450, 550)
RANDOM_A_RANGE: tuple[int, int] = (45, 90)
RANDOM_RADIUS_RANGE: tuple[int, int] = (30, 130)
RANDOM_ORIENTATION_BC: tuple[float, float] = (0.0, -180.0)

CIRCLE_COUNT_DEFAULT: int = 30

# Output file base names per command
RANDOM_BASE_NAME: str = "randomCircleSpline"
REPEAT_BASE_NAME: str = "repeatCircleSpline"
TABLE_BASE_NAME: str = "fileSpline"

# Points per fold group in .dat files
DAT_GROUP_SIZE: int = 10
# Header field widths for the padded point totals
DAT_TOTAL_WIDTH: int = 23
SRC_TOTAL_WIDTH: int = 19
