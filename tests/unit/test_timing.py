"""Unit tests for residual and total time of spline blocks."""

import pytest

from kukagen.motion import E6Pos, residual_time, total_time


def _timed(codes, marks, start_index=1) -> list[E6Pos]:
    return [
        E6Pos(
            index=start_index + i,
            x=0.0,
            y=0.0,
            z=0.0,
            a=0.0,
            b=0.0,
            c=0.0,
            s=6,
            t=19,
            time_code=code,
            time_mark=mark,
        )
        for i, (code, mark) in enumerate(zip(codes, marks))
    ]


class TestResidualTime:
    """Tests for residual_time()."""

    def test_checkpoint_on_first_point(self):
        points = _timed([1.0, 2.0, 3.0], [1.0, 0.0, 0.0])
        assert residual_time(points) == pytest.approx(2.0)

    def test_most_recent_checkpoint_wins(self):
        points = _timed([1.0, 2.0, 3.0, 4.0, 5.0], [1.0, 0.0, 2.0, 0.0, 0.0])
        assert residual_time(points) == pytest.approx(2.0)

    def test_last_point_is_checkpoint(self):
        points = _timed([1.0, 2.0, 3.0], [0.0, 0.0, 3.0])
        assert residual_time(points) == 0.0

    def test_no_checkpoint_uses_first_point(self):
        points = _timed([4.0, 5.0, 7.5], [0.0, 0.0, 0.0])
        assert residual_time(points) == pytest.approx(3.5)

    def test_untimed_points(self):
        points = _timed([0.0] * 4, [0.0] * 4)
        assert residual_time(points) == 0.0

    def test_single_point(self):
        assert residual_time(_timed([3.0], [0.0])) == 0.0
        assert residual_time(_timed([3.0], [1.0])) == 0.0

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            residual_time([])


class TestTotalTime:
    """Tests for total_time()."""

    def test_marks_plus_residual(self):
        points = _timed([1.0, 2.0, 3.0, 4.0], [1.0, 0.0, 2.0, 0.0])
        # marks 3.0 + residual (4.0 - 3.0)
        assert total_time(points) == pytest.approx(4.0)

    def test_block_ending_on_checkpoint(self):
        points = _timed([1.0, 2.0], [1.0, 1.0])
        assert total_time(points) == pytest.approx(2.0)
