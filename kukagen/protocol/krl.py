"""
KRL file writers.

Every chunk becomes a pair of KUKA Robot Language modules:

- `.dat` data list declaring one E6POS variable per point (XP<index>)
- `.src` program running those points as one SPLINE block

Timed trajectories get a TIME_BLOCK: a PART after each checkpoint, a trailing
PART for the residual time when the block does not end on a checkpoint, and
END with the block's total time.
"""

from __future__ import annotations

from kukagen import config as cfg
from kukagen.motion.point import E6Pos
from kukagen.output.chunking import Chunk

HEADER = ("&ACCESS RVP", "&REL 1")


class KrlRenderer:
    """Base class for KRL writers. Subclasses set `suffix` and build the body."""

    suffix: str = ""

    def __init__(self, precision: int | None = None):
        self._precision = precision

    @property
    def precision(self) -> int:
        return self._precision if self._precision is not None else cfg.PRECISION

    def num(self, value: float) -> str:
        return f"{value:.{self.precision}f}"

    def point_name(self, point: E6Pos) -> str:
        return f"XP{point.index}"

    def render(self, chunk: Chunk, name: str, **options) -> str:
        lines = [*HEADER, *self.body(chunk, name, **options)]
        return "\n".join(lines) + "\n"

    def body(self, chunk: Chunk, name: str, **options) -> list[str]:
        raise NotImplementedError


class DatRenderer(KrlRenderer):
    """E6POS declarations for every point of the chunk."""

    suffix = ".dat"

    def __init__(self, precision: int | None = None, group_size: int | None = None):
        super().__init__(precision)
        self._group_size = group_size

    @property
    def group_size(self) -> int:
        return self._group_size if self._group_size is not None else cfg.DAT_GROUP_SIZE

    def declaration(self, p: E6Pos) -> str:
        n = self.num
        fields = [
            f"X {n(p.x)}",
            f"Y {n(p.y)}",
            f"Z {n(p.z)}",
            f"A {n(p.a)}",
            f"B {n(p.b)}",
            f"C {n(p.c)}",
            f"S {p.s}",
            f"T {p.t}",
        ]
        fields += [f"E{i} {n(v)}" for i, v in enumerate(p.external_axes, start=1)]
        return f"DECL E6POS {self.point_name(p)}={{{','.join(fields)}}}"

    def body(self, chunk: Chunk, name: str, **options) -> list[str]:
        lines = [
            f"DEFDAT {name}",
            f";POINTS {chunk.padded_total(cfg.DAT_TOTAL_WIDTH)}",
        ]
        points = chunk.points
        for pos, p in enumerate(points):
            if chunk.is_multiple_of(pos, self.group_size):
                end = points[min(pos + self.group_size, chunk.size) - 1]
                lines.append(f";{self.point_name(p)}-{self.point_name(end)}")
            lines.append(self.declaration(p))
        lines.append("ENDDAT")
        return lines


class SrcRenderer(KrlRenderer):
    """SPLINE program moving through the chunk's points.

    Options:
        repeats: Number of passes over the points (default 1). Each pass
            closes with its own residual PART, so the PARTs add up to END.
    """

    suffix = ".src"

    def body(self, chunk: Chunk, name: str, **options) -> list[str]:
        repeats = int(options.get("repeats", 1))
        if repeats < 1:
            raise ValueError(f"repeats must be >= 1, got {repeats}")

        total = chunk.total_time * repeats
        timed = total > 0

        lines = [
            f"DEF {name}( )",
            f";POINTS {chunk.padded_total(cfg.SRC_TOTAL_WIDTH)}",
            f"PTP XP{chunk.first_index}",
            "SPLINE",
        ]
        for rep in range(repeats):
            first_pass = rep == 0
            for p in chunk.points:
                lines.append(f"  SPL {self.point_name(p)}")
                if not timed:
                    continue
                if first_pass and chunk.is_first(p.index):
                    lines.append("  TIME_BLOCK START")
                if p.is_checkpoint:
                    lines.append(f"  TIME_BLOCK PART = {self.num(p.time_mark)}")
                elif chunk.needs_residual_part(p):
                    lines.append(
                        f"  TIME_BLOCK PART = {self.num(chunk.residual_time)}"
                    )
        if timed:
            lines.append(f"  TIME_BLOCK END = {self.num(total)}")
        lines += ["ENDSPLINE", "END"]
        return lines


DEFAULT_RENDERERS: tuple[KrlRenderer, ...] = (DatRenderer(), SrcRenderer())
