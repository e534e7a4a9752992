"""Video Snapshots - take still snapshots from video files at random times."""

__version__ = "0.3.0"

from .exceptions import (
    ConfigError,
    InsufficientDurationError,
    InvalidDurationError,
    InvalidInputError,
    MissingDependencyError,
    ProbeError,
    SnapshotError,
    VideoSnapshotsError,
)

__all__ = [
    "ConfigError",
    "InsufficientDurationError",
    "InvalidDurationError",
    "InvalidInputError",
    "MissingDependencyError",
    "ProbeError",
    "SnapshotError",
    "VideoSnapshotsError",
    "__version__",
]
