"""Command-line interface for the KUKA spline generator."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np

import kukagen.config as cfg
from kukagen._version import __version__
from kukagen.config import TRACE
from kukagen.motion.geometry import CircularMotion
from kukagen.motion.point import E6Pos
from kukagen.output.chunking import chunk_trajectory
from kukagen.output.emitter import ChunkEmitter
from kukagen.protocol.table import read_table
from kukagen.utils.errors import EmptyTrajectoryError, KukagenError
from kukagen.utils.progress import ProgressIndicator

logger = logging.getLogger("kukagen.cli")


def non_negative_int(value: str) -> int:
    try:
        val = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    if val < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return val


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kukagen", description="A Kuka Robot Language spline generator"
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Enable quiet logging (WARNING level)",
    )
    parser.add_argument(
        "--log-level",
        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set specific log level",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    def output_arg(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "-o",
            "--output-dir",
            type=Path,
            default=Path(cfg.OUTPUT_DIR),
            help="Directory for the generated .dat/.src files",
        )

    random_p = sub.add_parser(
        "random", aliases=["r"], help="Generate random circle spline paths"
    )
    random_p.add_argument(
        "-n",
        "--number-of",
        type=non_negative_int,
        default=cfg.CIRCLE_COUNT_DEFAULT,
        help="Set the number of random circles",
    )
    random_p.add_argument("--seed", type=int, help="Random seed for repeatable paths")
    random_p.add_argument(
        "-m",
        "--max",
        type=non_negative_int,
        default=cfg.MAX_POINTS_DEFAULT,
        help="Sets the max number of points per file (0 = one file)",
    )
    output_arg(random_p)
    random_p.set_defaults(handler=run_random)

    repeat_p = sub.add_parser(
        "repeat", aliases=["p"], help="Generate n circles of the same size"
    )
    repeat_p.add_argument(
        "-n",
        "--number-of",
        type=non_negative_int,
        default=cfg.CIRCLE_COUNT_DEFAULT,
        help="Set the number of times the circle is traversed",
    )
    output_arg(repeat_p)
    repeat_p.set_defaults(handler=run_repeat)

    csv_p = sub.add_parser(
        "csv", aliases=["c"], help="Read a spline point csv from FILE"
    )
    csv_p.add_argument("file", type=Path, help="CSV: time,x,y,z,a,b,c,time_mark")
    csv_p.add_argument(
        "-m",
        "--max",
        type=non_negative_int,
        default=cfg.MAX_POINTS_DEFAULT,
        help="Sets the max number of points per file (0 = one file)",
    )
    csv_p.add_argument(
        "--strict",
        action="store_true",
        help="Fail on non-numeric fields instead of reading them as 0.0",
    )
    output_arg(csv_p)
    csv_p.set_defaults(handler=run_csv)

    return parser


def _emit_chunked(
    points: list[E6Pos], max_points: int, base_name: str, output_dir: Path
) -> list[Path]:
    if not points:
        raise EmptyTrajectoryError("trajectory has no points")
    chunks = chunk_trajectory(points, max_points)
    logger.info("number of files: %d", len(chunks))
    return ChunkEmitter(base_name, output_dir).emit_all(chunks)


def run_random(args: argparse.Namespace) -> list[Path]:
    rng = np.random.default_rng(args.seed)
    points, _ = CircularMotion().random_circles(args.number_of, rng)
    return _emit_chunked(points, args.max, cfg.RANDOM_BASE_NAME, args.output_dir)


def run_repeat(args: argparse.Namespace) -> list[Path]:
    if args.number_of < 1:
        raise EmptyTrajectoryError("repeat needs at least one circle")
    points = CircularMotion().repeat_circle()
    emitter = ChunkEmitter(cfg.REPEAT_BASE_NAME, args.output_dir)
    return emitter.emit_single(points, repeats=args.number_of)


def run_csv(args: argparse.Namespace) -> list[Path]:
    points = read_table(args.file, strict=args.strict)
    return _emit_chunked(points, args.max, cfg.TABLE_BASE_NAME, args.output_dir)


def configure_logging(args: argparse.Namespace) -> int:
    # Precedence:
    #   1) Explicit --log-level
    #   2) Verbose / quiet flags
    #   3) Environment-driven TRACE (KUKAGEN_TRACE=1 via TRACE_ENABLED)
    #   4) Default INFO
    if args.log_level:
        if args.log_level == "TRACE":
            log_level = TRACE
            cfg.TRACE_ENABLED = True
        else:
            log_level = getattr(logging, args.log_level)
    elif args.verbose >= 3:
        log_level = TRACE
        cfg.TRACE_ENABLED = True
    elif args.verbose >= 2:
        log_level = logging.DEBUG
    elif args.verbose == 1:
        log_level = logging.INFO
    elif args.quiet:
        log_level = logging.WARNING
    elif cfg.TRACE_ENABLED:
        log_level = TRACE
    else:
        log_level = logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger("kukagen").setLevel(log_level)
    return log_level


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the generator."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args)

    if getattr(args, "handler", None) is None:
        parser.print_help()
        return 0

    logger.info("Generating...")
    try:
        with ProgressIndicator():
            written = args.handler(args)
    except KukagenError as e:
        logger.error("%s", e)
        return 1
    except ValueError as e:
        logger.error("Invalid input: %s", e)
        return 1

    logger.info("Done, %d files written", len(written))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
