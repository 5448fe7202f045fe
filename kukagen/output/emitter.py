"""
Chunk emission: render each spline block once per KRL format and write it.

File names are `<base_name><ordinal><suffix>`, e.g. fileSpline0.dat and
fileSpline0.src. The module name inside each file matches the file stem.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from kukagen import config as cfg
from kukagen.motion.point import E6Pos
from kukagen.output.chunking import Chunk
from kukagen.protocol.krl import DEFAULT_RENDERERS, KrlRenderer
from kukagen.utils.errors import EmissionError

logger = logging.getLogger(__name__)


class ChunkEmitter:
    """Writes rendered chunks into `output_dir`.

    Holds no per-chunk state; every call derives its values from the chunk
    it is given.
    """

    def __init__(
        self,
        base_name: str,
        output_dir: str | Path | None = None,
        renderers: Sequence[KrlRenderer] = DEFAULT_RENDERERS,
    ):
        if not renderers:
            raise ValueError("ChunkEmitter needs at least one renderer")
        self.base_name = base_name
        self.output_dir = Path(output_dir if output_dir is not None else cfg.OUTPUT_DIR)
        self.renderers = tuple(renderers)

    def _write(self, chunk: Chunk, stem: str, **options) -> list[Path]:
        # Render every format before touching the disk
        rendered = [
            (self.output_dir / f"{stem}{renderer.suffix}", renderer.render(chunk, stem, **options))
            for renderer in self.renderers
        ]

        written: list[Path] = []
        for path, text in rendered:
            try:
                self.output_dir.mkdir(parents=True, exist_ok=True)
                path.write_text(text)
            except OSError as e:
                self._discard(written)
                raise EmissionError(chunk.ordinal, path, e.strerror or str(e)) from e
            written.append(path)
        logger.info(
            "Chunk %d (%d points, P%d-P%d) saved as: %s",
            chunk.ordinal,
            chunk.size,
            chunk.first_index,
            chunk.last_index,
            " & ".join(p.name for p in written),
        )
        return written

    @staticmethod
    def _discard(paths: list[Path]) -> None:
        """Remove the files of a chunk whose set could not be completed."""
        for path in paths:
            try:
                path.unlink()
            except OSError as e:
                logger.warning("Could not remove partial output %s: %s", path, e)

    def emit(self, points: Sequence[E6Pos], ordinal: int, **options) -> list[Path]:
        """Render and write one chunk under its numbered file names."""
        chunk = Chunk(points, ordinal)
        return self._write(chunk, f"{self.base_name}{ordinal}", **options)

    def emit_single(self, points: Sequence[E6Pos], **options) -> list[Path]:
        """Write the whole sequence as one unnumbered block."""
        chunk = Chunk(points, 0)
        return self._write(chunk, self.base_name, **options)

    def emit_all(self, chunks: Iterable[Sequence[E6Pos]], **options) -> list[Path]:
        """Emit chunks in order. Nothing is written for an empty iterable."""
        written: list[Path] = []
        for ordinal, points in enumerate(chunks):
            written.extend(self.emit(points, ordinal, **options))
        return written
