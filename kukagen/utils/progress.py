"""Background progress dots while a trajectory is generated and written."""

from __future__ import annotations

import logging
import sys
import threading
from typing import TextIO

from kukagen import config as cfg

logger = logging.getLogger(__name__)


class ProgressIndicator:
    """
    Prints a dot to `stream` every `interval` seconds on a daemon thread.

    Shares no data with the work it reports on. Use as a context manager or
    call start()/stop():

        with ProgressIndicator():
            run_pipeline()
    """

    def __init__(
        self,
        interval: float | None = None,
        stream: TextIO | None = None,
        mark: str = ".",
    ):
        self.interval = interval if interval is not None else cfg.PROGRESS_INTERVAL_S
        self._stream = stream
        self.mark = mark
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(self) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        while not self._stop_event.wait(self.interval):
            stream.write(self.mark + "\n")
            stream.flush()
            self.ticks += 1

    def start(self) -> None:
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run, name="kukagen-progress", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: float = 1.0) -> None:
        """Signal the thread and wait for it to exit. Safe to call twice."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                logger.warning("Progress indicator did not stop within %.1fs", timeout)
            self._thread = None

    def __enter__(self) -> "ProgressIndicator":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
