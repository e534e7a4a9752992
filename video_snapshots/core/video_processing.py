"""Snapshot extraction with ffmpeg."""

import time
from pathlib import Path
from typing import List, Optional, Sequence

import cv2

from video_snapshots.config.config import SCALE_FILTER_TEMPLATE, SNAPSHOT_PIXEL_FORMAT
from video_snapshots.core.commands import run_command
from video_snapshots.exceptions import SnapshotError
from video_snapshots.logging.logger import get_logger
from video_snapshots.models import (
    ColorSpace,
    Resolution,
    SnapshotConfig,
    SnapshotResult,
    VideoMetadata,
)
from video_snapshots.utils.time_utils import format_timestamp, snapshot_filename


def build_scale_filter(color_space: ColorSpace) -> str:
    """Chroma-aware rescale filter for the given color matrix."""
    return SCALE_FILTER_TEMPLATE.format(color_matrix=str(color_space))


def build_snapshot_command(
    video_path: Path,
    timestamp: int,
    output_path: Path,
    color_space: ColorSpace,
    remove_pixfmt: bool = False,
    ffmpeg: str = "ffmpeg",
) -> List[str]:
    """Build the ffmpeg argument list rendering one frame at timestamp."""
    cmd = [
        ffmpeg,
        "-y",
        "-loglevel", "error",
        "-ss", format_timestamp(timestamp),
        "-i", str(video_path),
        "-vf", build_scale_filter(color_space),
    ]
    if not remove_pixfmt:
        cmd += ["-pix_fmt", SNAPSHOT_PIXEL_FORMAT]
    cmd += ["-vframes", "1", str(output_path)]
    return cmd


def read_image_resolution(image_path: Path) -> Optional[Resolution]:
    """Read image size back from disk, None if it cannot be loaded.

    OpenCV loads the PNG directly (16-bit included), so no extra ffprobe
    call is made and nothing is echoed for this step in debug mode.
    """
    image = cv2.imread(str(image_path), cv2.IMREAD_UNCHANGED)
    if image is None:
        return None
    height, width = image.shape[:2]
    return Resolution(width, height)


def take_snapshot(
    index: int,
    timestamp: int,
    metadata: VideoMetadata,
    config: SnapshotConfig,
) -> SnapshotResult:
    """Render one snapshot and check its resolution against the video.

    Raises SnapshotError if ffmpeg fails. A resolution mismatch is only
    reported.
    """
    logger = get_logger()
    output_path = config.output_dir / snapshot_filename(config.prefix, timestamp)
    cmd = build_snapshot_command(
        metadata.path,
        timestamp,
        output_path,
        metadata.color_space,
        remove_pixfmt=config.remove_pixfmt,
        ffmpeg=config.ffmpeg_binary,
    )

    logger.info(
        f"Taking snapshot {index + 1} at position {format_timestamp(timestamp)} "
        f"(Resolution: {metadata.resolution})..."
    )

    result = run_command(cmd)
    if result.returncode != 0:
        raise SnapshotError(f"Error taking snapshot at {timestamp} seconds")

    snapshot_resolution = read_image_resolution(output_path)
    resolution_match = snapshot_resolution == metadata.resolution
    if not resolution_match:
        logger.warning(
            f"Resolution mismatch for snapshot at {timestamp} seconds: "
            f"{snapshot_resolution or 'unreadable'} (snapshot) vs {metadata.resolution} (video)"
        )

    return SnapshotResult(
        index=index,
        timestamp=timestamp,
        output_path=output_path,
        success=True,
        resolution_match=resolution_match,
        snapshot_resolution=snapshot_resolution,
    )


def take_snapshots(
    timestamps: Sequence[int],
    metadata: VideoMetadata,
    config: SnapshotConfig,
) -> List[SnapshotResult]:
    """Take one snapshot per timestamp, continuing past failed ones."""
    logger = get_logger()
    results: List[SnapshotResult] = []

    for index, timestamp in enumerate(timestamps):
        if index and config.pacing_delay:
            time.sleep(config.pacing_delay)

        try:
            results.append(take_snapshot(index, timestamp, metadata, config))
        except SnapshotError as exc:
            logger.error(str(exc))
            results.append(SnapshotResult(
                index=index,
                timestamp=timestamp,
                output_path=config.output_dir / snapshot_filename(config.prefix, timestamp),
                success=False,
                error=str(exc),
            ))

    return results
