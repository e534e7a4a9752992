"""CLI interface for take-snapshots."""

import argparse
import sys
from pathlib import Path
from typing import Sequence

from video_snapshots import __version__
from video_snapshots.config.runtime_config import load_config
from video_snapshots.exceptions import VideoSnapshotsError
from video_snapshots.logging.logger import setup_logging
from video_snapshots.models import FORCEABLE_COLOR_SPACES, ColorSpace, SnapshotConfig, SnapshotRun
from video_snapshots.pipeline import run_snapshots


def build_arg_parser() -> argparse.ArgumentParser:
    """Build command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="take-snapshots",
        description="Take snapshots from a video file at random times, using ffmpeg and ffprobe.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
  take-snapshots -n 5 -f bt709 -r -d /path/to/save -p myprefix --silent --debug video.mkv
        """,
    )
    parser.add_argument("video_file", nargs="?", help="Path to video file")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version {__version__}",
        help="Show version and exit",
    )
    parser.add_argument(
        "-n",
        "--num-screenshots",
        type=int,
        default=3,
        help="Number of screenshots to take (default: 3)",
    )
    parser.add_argument(
        "-f",
        "--force-format",
        choices=[str(color_space) for color_space in FORCEABLE_COLOR_SPACES],
        default=None,
        help="Force specific color format instead of detecting it",
    )
    parser.add_argument(
        "-r",
        "--remove-pixfmt",
        action="store_true",
        help="Remove -pix_fmt rgb24 to allow 16bit PNG",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory to save snapshots (default: current directory)",
    )
    parser.add_argument(
        "-p",
        "--prefix",
        default="snapshot",
        help="Prefix for snapshot filenames (default: snapshot)",
    )
    parser.add_argument(
        "-s",
        "--silent",
        action="store_true",
        help="Suppress output and only print filenames at the end",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show the exact ffmpeg/ffprobe commands being run",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to wait between snapshots (default: 1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible snapshot times",
    )
    return parser


def config_from_args(args: argparse.Namespace, runtime) -> SnapshotConfig:
    """Build the immutable run configuration."""
    return SnapshotConfig(
        video_path=Path(args.video_file),
        num_screenshots=args.num_screenshots,
        force_format=ColorSpace(args.force_format) if args.force_format else None,
        remove_pixfmt=args.remove_pixfmt,
        output_dir=args.directory if args.directory is not None else Path.cwd(),
        prefix=args.prefix,
        silent=args.silent,
        debug=args.debug,
        pacing_delay=args.delay if args.delay is not None else runtime.pacing_delay,
        seed=args.seed,
        ffmpeg_binary=runtime.ffmpeg_binary,
        ffprobe_binary=runtime.ffprobe_binary,
    )


def report_results(run: SnapshotRun, silent: bool, logger) -> None:
    """Print the produced snapshot files."""
    paths = " ".join(str(path) for path in run.produced_paths)
    if silent:
        print(paths)
        return

    if run.failed:
        logger.warning(
            f"{len(run.failed)} of {len(run.results)} snapshots failed: "
            + ", ".join(f"{result.timestamp}s" for result in run.failed)
        )
    print(f"Snapshots taken: {paths}")


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI function."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        runtime = load_config()
    except VideoSnapshotsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger = setup_logging(
        silent=args.silent,
        debug=args.debug,
        level=runtime.log_level,
        log_dir=runtime.log_dir,
    )
    logger.info("Starting take-snapshots...")
    logger.info("This tool takes snapshots from video files at random times within a specified range.")

    if not args.video_file:
        logger.error("Error: No video file provided.")
        parser.print_usage(sys.stderr)
        return 1

    try:
        config = config_from_args(args, runtime)
        run = run_snapshots(config)
    except VideoSnapshotsError as exc:
        logger.error(f"Error: {exc}")
        return 1

    report_results(run, config.silent, logger)
    return 0


def main_entry() -> None:
    """Console script entry point."""
    sys.exit(main())
