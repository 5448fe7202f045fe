"""End-to-end tests for the kukagen command line."""

import pytest

from kukagen.cli import build_parser, main

CSV_TEXT = (
    "1.0000, 44.9624, 8.7501, 1119.9937, 9.2796, 0.0000, 0.0000, 1.0\n"
    "2.0000, 45.0000, 8.8000, 1120.0000, 9.2796, 0.0000, 0.0000, 0.0\n"
    "3.0000, 45.5000, 8.9000, 1120.5000, 9.2796, 0.0000, 0.0000, 0.0\n"
    "4.0000, 46.0000, 9.0000, 1121.0000, 9.2796, 0.0000, 0.0000, 3.0\n"
    "5.0000, 46.5000, 9.1000, 1121.5000, 9.2796, 0.0000, 0.0000, 0.0\n"
)


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "spline.csv"
    path.write_text(CSV_TEXT)
    return path


class TestCsvCommand:
    """kukagen csv FILE."""

    def test_chunks_into_numbered_files(self, tmp_path, csv_file):
        out = tmp_path / "out"
        assert main(["csv", str(csv_file), "-m", "2", "-o", str(out)]) == 0

        names = sorted(p.name for p in out.iterdir())
        assert names == [
            "fileSpline0.dat",
            "fileSpline0.src",
            "fileSpline1.dat",
            "fileSpline1.src",
            "fileSpline2.dat",
            "fileSpline2.src",
        ]

    def test_timing_carried_per_chunk(self, tmp_path, csv_file):
        out = tmp_path / "out"
        assert main(["csv", str(csv_file), "-m", "3", "-o", str(out)]) == 0

        # points 1-3: mark 1.0 on point 1, residual 3.0 - 1.0
        src0 = (out / "fileSpline0.src").read_text()
        assert "TIME_BLOCK PART = 2.000000" in src0
        assert "TIME_BLOCK END = 3.000000" in src0

        # points 4-5: mark 3.0 on point 4, residual 5.0 - 4.0
        src1 = (out / "fileSpline1.src").read_text()
        assert "PTP XP4" in src1
        assert "TIME_BLOCK END = 4.000000" in src1

    def test_default_max_writes_one_pair(self, tmp_path, csv_file):
        out = tmp_path / "out"
        assert main(["csv", str(csv_file), "-o", str(out)]) == 0
        assert sorted(p.name for p in out.iterdir()) == [
            "fileSpline0.dat",
            "fileSpline0.src",
        ]

    def test_missing_file_fails(self, tmp_path):
        assert main(["csv", str(tmp_path / "nope.csv"), "-o", str(tmp_path)]) == 1

    def test_empty_table_fails(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        assert main(["csv", str(path), "-o", str(tmp_path / "out")]) == 1
        assert not (tmp_path / "out").exists()

    def test_short_row_fails(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("1.0, 2.0, 3.0\n")
        assert main(["csv", str(path), "-o", str(tmp_path / "out")]) == 1

    def test_strict_rejects_bad_field(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("1.0, 2.0, 3.0, oops, 5, 6, 7, 0\n")
        out = tmp_path / "out"
        assert main(["csv", str(path), "-o", str(out)]) == 0
        assert main(["csv", str(path), "--strict", "-o", str(tmp_path / "o2")]) == 1

    def test_negative_max_rejected(self, csv_file):
        with pytest.raises(SystemExit) as excinfo:
            main(["csv", str(csv_file), "-m", "-1"])
        assert excinfo.value.code == 2


class TestCircleCommands:
    """kukagen random / repeat."""

    def test_random_with_seed(self, tmp_path):
        out = tmp_path / "out"
        assert main(["random", "-n", "4", "--seed", "1", "-o", str(out)]) == 0

        dat = (out / "randomCircleSpline0.dat").read_text()
        assert dat.count("DECL E6POS") == 4 * 63
        assert "XP252=" in dat

    def test_random_chunked(self, tmp_path):
        out = tmp_path / "out"
        assert main(["r", "-n", "2", "-m", "100", "-o", str(out)]) == 0
        assert (out / "randomCircleSpline1.src").exists()
        assert not (out / "randomCircleSpline2.src").exists()

    def test_repeat(self, tmp_path):
        out = tmp_path / "out"
        assert main(["repeat", "-n", "5", "-o", str(out)]) == 0

        dat = (out / "repeatCircleSpline.dat").read_text()
        src = (out / "repeatCircleSpline.src").read_text()
        assert dat.count("DECL E6POS") == 63
        assert src.count("SPL XP") == 5 * 63

    def test_repeat_zero_fails(self, tmp_path):
        assert main(["repeat", "-n", "0", "-o", str(tmp_path)]) == 1


class TestParser:
    """Argument parsing."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "random" in capsys.readouterr().out

    def test_defaults(self):
        args = build_parser().parse_args(["random"])
        assert args.number_of == 30
        assert args.max == 0
