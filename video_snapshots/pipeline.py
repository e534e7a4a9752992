"""Snapshot pipeline: probe, sample, extract."""

import os
import random
from pathlib import Path
from typing import Optional

from video_snapshots.core.color_space import resolve_color_space
from video_snapshots.core.probe import ensure_tools_installed, probe_duration, probe_resolution
from video_snapshots.core.sampler import generate_random_times
from video_snapshots.core.video_processing import take_snapshots
from video_snapshots.exceptions import InvalidInputError
from video_snapshots.logging.logger import get_logger
from video_snapshots.models import SnapshotConfig, SnapshotRun, VideoMetadata


def validate_video_file(video_path: Path) -> None:
    """Check the input video exists and can be read."""
    if not video_path.is_file():
        raise InvalidInputError(f"Video file '{video_path}' does not exist")
    if not os.access(video_path, os.R_OK):
        raise InvalidInputError(f"Video file '{video_path}' is not readable")


def prepare_output_dir(output_dir: Path) -> None:
    """Create the output directory if needed and check it is writable."""
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise InvalidInputError(f"Cannot create output directory '{output_dir}': {exc}") from exc
    if not os.access(output_dir, os.W_OK):
        raise InvalidInputError(f"Output directory '{output_dir}' is not writable")


def probe_video(config: SnapshotConfig) -> VideoMetadata:
    """Collect duration, resolution and color space of the input video."""
    logger = get_logger()

    duration = probe_duration(config.video_path, config.ffprobe_binary)
    resolution = probe_resolution(config.video_path, config.ffprobe_binary)
    logger.info(f"Video resolution is: {resolution}")

    color_space = resolve_color_space(
        config.video_path,
        force_format=config.force_format,
        ffprobe=config.ffprobe_binary,
    )
    return VideoMetadata(
        path=config.video_path,
        duration=duration,
        resolution=resolution,
        color_space=color_space,
    )


def run_snapshots(config: SnapshotConfig, rng: Optional[random.Random] = None) -> SnapshotRun:
    """Run the whole snapshot workflow.

    Fatal precondition failures raise immediately. Failed extractions are
    kept in the returned results with success=False.
    """
    logger = get_logger()

    ensure_tools_installed([config.ffmpeg_binary, config.ffprobe_binary])
    validate_video_file(config.video_path)
    prepare_output_dir(config.output_dir)

    metadata = probe_video(config)

    if rng is None:
        rng = random.Random(config.seed)
    timestamps = generate_random_times(metadata.duration, config.num_screenshots, rng)
    logger.debug(f"Snapshot times (seconds): {timestamps}")

    results = take_snapshots(timestamps, metadata, config)
    return SnapshotRun(metadata=metadata, timestamps=timestamps, results=results)
