"""Exception types raised by the kukagen pipeline."""

from __future__ import annotations

from pathlib import Path


class KukagenError(Exception):
    """Base class for kukagen failures."""


class TableFormatError(KukagenError):
    """A CSV row could not be turned into a point."""

    def __init__(self, row: int, message: str):
        self.row = row
        super().__init__(f"row {row}: {message}")


class TableReadError(KukagenError):
    """The source table could not be read."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        super().__init__(f"cannot read {self.path}: {reason}")


class EmptyTrajectoryError(KukagenError):
    """Nothing to emit."""


class EmissionError(KukagenError):
    """Writing a rendered chunk failed."""

    def __init__(self, ordinal: int, path: str | Path, reason: str):
        self.ordinal = ordinal
        self.path = Path(path)
        super().__init__(f"chunk {ordinal}: cannot write {self.path}: {reason}")
