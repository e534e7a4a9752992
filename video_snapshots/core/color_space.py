"""Color space detection."""

from pathlib import Path
from typing import Optional

from video_snapshots.config.config import COLOR_TAGS
from video_snapshots.core.probe import probe_color_info
from video_snapshots.logging.logger import get_logger
from video_snapshots.models import ColorSpace


def color_space_from_probe(color_info: str) -> ColorSpace:
    """Map ffprobe color tags to a color matrix."""
    for tag, color_space in COLOR_TAGS:
        if tag in color_info:
            return ColorSpace(color_space)
    return ColorSpace.UNKNOWN


def resolve_color_space(
    video_path: Path,
    force_format: Optional[ColorSpace] = None,
    ffprobe: str = "ffprobe",
) -> ColorSpace:
    """Use the forced format if given, otherwise detect it with ffprobe."""
    logger = get_logger()

    if force_format is not None:
        logger.info(f"Forcing color space to {force_format}.")
        return ColorSpace(force_format)

    color_space = color_space_from_probe(probe_color_info(video_path, ffprobe))
    if color_space is ColorSpace.UNKNOWN:
        logger.warning(
            "The color space of the video is not explicitly BT.709, BT.601, or BT.2020."
        )
    else:
        logger.info(f"The video uses {color_space.label} color space.")
    return color_space
