"""
CSV spline table import.

Each record holds at least eight numeric fields, no header row:

    time, x, y, z, a, b, c, time_mark[, e1, ..., e6]
    1.0000, 44.9624, 8.7501, 1119.9937, 9.2796, 0.0000, 0.0000, 0.0

Points are numbered 1..N in row order and tagged with the table status/turn
codes. A field that is not a number is logged and read as 0.0, or raises
TableFormatError when parsing strictly. Short rows always raise.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from kukagen import config as cfg
from kukagen.motion.point import E6Pos
from kukagen.utils.errors import TableFormatError, TableReadError

logger = logging.getLogger(__name__)

# Column order of the mandatory fields
FIELDS: tuple[str, ...] = ("time_code", "x", "y", "z", "a", "b", "c", "time_mark")
AXIS_FIELDS: tuple[str, ...] = ("e1", "e2", "e3", "e4", "e5", "e6")


def _parse_field(text: object, row: int, column: str, strict: bool) -> float:
    raw = str(text).strip()
    try:
        return float(raw)
    except ValueError:
        if strict:
            raise TableFormatError(row, f"{column}: not a number: {raw!r}") from None
        logger.warning("Row %d %s: not a number %r, using 0.0", row, column, raw)
        return 0.0


def parse_row(
    record: Sequence[object], index: int, row: int, strict: bool = False
) -> E6Pos:
    """Convert one table record to a point numbered `index`."""
    if len(record) < cfg.TABLE_MIN_FIELDS:
        raise TableFormatError(
            row,
            f"expected at least {cfg.TABLE_MIN_FIELDS} fields, got {len(record)}",
        )

    values = {
        name: _parse_field(record[i], row, name, strict)
        for i, name in enumerate(FIELDS)
    }
    extra = record[cfg.TABLE_MIN_FIELDS : cfg.TABLE_MIN_FIELDS + cfg.TABLE_MAX_AXES]
    for name, text in zip(AXIS_FIELDS, extra):
        values[name] = _parse_field(text, row, name, strict)

    return E6Pos(index=index, s=cfg.TABLE_STATUS, t=cfg.TABLE_TURN, **values)


def parse_table(
    rows: Iterable[Sequence[object]], strict: bool = False, index: int = 0
) -> list[E6Pos]:
    """Parse table records into points numbered from `index` + 1.

    `index` is the last index already used in the trajectory, so a table can
    follow generated circles on the same counter. Blank records are skipped.
    An empty table gives an empty list.
    """
    points: list[E6Pos] = []
    for row, record in enumerate(rows, start=1):
        if not record or all(not str(f).strip() for f in record):
            continue
        points.append(parse_row(record, index + len(points) + 1, row, strict))

    logger.debug("Parsed %d points from table", len(points))
    return points


def read_table(
    path: str | Path, strict: bool = False, index: int = 0
) -> list[E6Pos]:
    """Open a CSV file and parse it with parse_table()."""
    path = Path(path)
    try:
        with path.open(newline="", encoding="utf-8") as f:
            return parse_table(csv.reader(f), strict=strict, index=index)
    except OSError as e:
        raise TableReadError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise TableReadError(path, f"not a text file: {e.reason}") from e
    except csv.Error as e:
        raise TableReadError(path, str(e)) from e
