"""Data models for video-snapshots module."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from video_snapshots.config.config import (
    DEFAULT_NUM_SCREENSHOTS,
    DEFAULT_PACING_DELAY,
    DEFAULT_SNAPSHOT_PREFIX,
    FFMPEG_BINARY,
    FFPROBE_BINARY,
)
from video_snapshots.exceptions import ConfigError


class ColorSpace(str, Enum):
    """Color matrix passed to the decoder's scale filter."""
    BT709 = "bt709"
    BT601 = "bt601"
    BT2020 = "bt2020"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Human readable name, e.g. BT.709."""
        if self is ColorSpace.UNKNOWN:
            return "unknown"
        return f"BT.{self.value[2:]}"


FORCEABLE_COLOR_SPACES = [ColorSpace.BT709, ColorSpace.BT601, ColorSpace.BT2020]


@dataclass(frozen=True)
class Resolution:
    """Frame size in pixels."""
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"

    @classmethod
    def parse(cls, value: str) -> "Resolution":
        """Parse 'WIDTHxHEIGHT' as printed by ffprobe, ignoring a trailing separator."""
        try:
            width_str, height_str = value.strip().lower().strip("x").split("x")[:2]
            width, height = int(width_str), int(height_str)
        except ValueError as exc:
            raise ValueError(f"Invalid resolution '{value}'") from exc
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid resolution '{value}'")
        return cls(width, height)


@dataclass(frozen=True)
class SnapshotConfig:
    """Snapshot run configuration. Validated on creation."""
    video_path: Path
    num_screenshots: int = DEFAULT_NUM_SCREENSHOTS
    force_format: Optional[ColorSpace] = None
    remove_pixfmt: bool = False
    output_dir: Path = field(default_factory=Path.cwd)
    prefix: str = DEFAULT_SNAPSHOT_PREFIX
    silent: bool = False
    debug: bool = False
    pacing_delay: float = DEFAULT_PACING_DELAY
    seed: Optional[int] = None
    ffmpeg_binary: str = FFMPEG_BINARY
    ffprobe_binary: str = FFPROBE_BINARY

    def __post_init__(self):
        if isinstance(self.num_screenshots, bool) or not isinstance(self.num_screenshots, int):
            raise ConfigError(f"Number of screenshots must be an integer, got {self.num_screenshots!r}")
        if self.num_screenshots < 1:
            raise ConfigError(
                f"Number of screenshots must be a positive integer, got {self.num_screenshots}"
            )
        if self.force_format is not None and self.force_format not in FORCEABLE_COLOR_SPACES:
            raise ConfigError(f"Unsupported color format: {self.force_format}")
        if not self.prefix:
            raise ConfigError("Snapshot prefix must not be empty")
        if self.pacing_delay < 0:
            raise ConfigError("Delay between snapshots must be >= 0")


@dataclass(frozen=True)
class VideoMetadata:
    """Video file information."""
    path: Path
    duration: int
    resolution: Resolution
    color_space: ColorSpace = ColorSpace.UNKNOWN


@dataclass
class SnapshotResult:
    """Outcome of a single snapshot extraction."""
    index: int
    timestamp: int
    output_path: Path
    success: bool
    resolution_match: bool = False
    snapshot_resolution: Optional[Resolution] = None
    error: Optional[str] = None


@dataclass
class SnapshotRun:
    """Result of a complete snapshot run."""
    metadata: VideoMetadata
    timestamps: List[int]
    results: List[SnapshotResult]

    @property
    def produced_paths(self) -> List[Path]:
        return [result.output_path for result in self.results if result.success]

    @property
    def failed(self) -> List[SnapshotResult]:
        return [result for result in self.results if not result.success]
