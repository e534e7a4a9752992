"""Time and filename utilities."""

from video_snapshots.config.config import DEFAULT_IMAGE_FORMAT
from video_snapshots.exceptions import VideoSnapshotsError


def format_timestamp(seconds: float) -> str:
    """Format seconds as HH:MM:SS.mmm for the decoder's seek option."""
    if seconds < 0:
        raise VideoSnapshotsError("Time must be >= 0")

    total_millis = int(round(seconds * 1000))
    total_seconds, millis = divmod(total_millis, 1000)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}"


def snapshot_filename(prefix: str, seconds: int, image_format: str = DEFAULT_IMAGE_FORMAT) -> str:
    """File name of the snapshot taken at the given second."""
    return f"{prefix}_{seconds}.{image_format}"
