"""Unit tests for the background progress indicator."""

import io
import time

from kukagen.utils.progress import ProgressIndicator


class TestProgressIndicator:
    """Start/stop lifecycle of ProgressIndicator."""

    def test_prints_dots_until_stopped(self):
        stream = io.StringIO()
        indicator = ProgressIndicator(interval=0.01, stream=stream)
        indicator.start()
        deadline = time.monotonic() + 2.0
        while indicator.ticks < 3 and time.monotonic() < deadline:
            time.sleep(0.01)
        indicator.stop()

        assert not indicator.running
        assert indicator.ticks >= 3
        ticks = indicator.ticks
        assert stream.getvalue().count(".") == ticks

        time.sleep(0.05)
        assert indicator.ticks == ticks

    def test_context_manager_stops(self):
        stream = io.StringIO()
        with ProgressIndicator(interval=10.0, stream=stream) as indicator:
            assert indicator.running
        assert not indicator.running
        assert stream.getvalue() == ""

    def test_stop_without_start(self):
        indicator = ProgressIndicator(interval=0.01)
        indicator.stop()
        indicator.stop()
        assert not indicator.running

    def test_restart(self):
        indicator = ProgressIndicator(interval=10.0, stream=io.StringIO())
        indicator.start()
        indicator.stop()
        indicator.start()
        assert indicator.running
        indicator.stop()
