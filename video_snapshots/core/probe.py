"""Video probing with ffprobe."""

import shutil
from pathlib import Path
from typing import Iterable

from video_snapshots.core.commands import run_command
from video_snapshots.exceptions import MissingDependencyError, ProbeError
from video_snapshots.models import Resolution


def ensure_tools_installed(binaries: Iterable[str]) -> None:
    """Fail if any of the external tools is not on PATH."""
    for binary in binaries:
        if shutil.which(binary) is None:
            raise MissingDependencyError(
                f"{binary} could not be found. Please install ffmpeg to use this tool."
            )


def probe_duration(video_path: Path, ffprobe: str = "ffprobe") -> int:
    """Return the container duration in whole seconds."""
    result = run_command([
        ffprobe,
        "-v", "error",
        "-select_streams", "v:0",
        "-show_entries", "format=duration",
        "-of", "default=noprint_wrappers=1:nokey=1",
        str(video_path),
    ])
    output = result.stdout.strip() if result.returncode == 0 else ""
    if not output:
        raise ProbeError("Could not determine video duration.")

    whole_seconds = output.splitlines()[0].strip().split(".")[0]
    try:
        duration = int(whole_seconds)
    except ValueError as exc:
        raise ProbeError(f"Could not determine video duration (got '{output}').") from exc

    if duration < 1:
        raise ProbeError(f"Video duration is too short: {output} seconds.")
    return duration


def probe_resolution(media_path: Path, ffprobe: str = "ffprobe") -> Resolution:
    """Return the width and height of the first video stream."""
    result = run_command([
        ffprobe,
        "-v", "error",
        "-select_streams", "v:0",
        "-show_entries", "stream=width,height",
        "-of", "csv=p=0:s=x",
        str(media_path),
    ])
    lines = [line.strip() for line in result.stdout.splitlines() if line.strip()]
    if result.returncode != 0 or not lines:
        raise ProbeError("Could not determine video resolution.")

    try:
        return Resolution.parse(lines[0])
    except ValueError as exc:
        raise ProbeError(f"Could not determine video resolution (got '{lines[0]}').") from exc


def probe_color_info(video_path: Path, ffprobe: str = "ffprobe") -> str:
    """Return raw color_space/color_primaries/color_transfer entries."""
    result = run_command([
        ffprobe,
        "-v", "error",
        "-select_streams", "v:0",
        "-show_entries", "stream=color_space,color_primaries,color_transfer",
        "-of", "default=nw=1",
        str(video_path),
    ])
    output = result.stdout.strip() if result.returncode == 0 else ""
    if not output:
        raise ProbeError("Error determining color space. Make sure the video file is valid.")
    return output
