"""Exceptions for video-snapshots module."""


class VideoSnapshotsError(Exception):
    """Base exception for video-snapshots."""
    pass


class ConfigError(VideoSnapshotsError):
    """Configuration error."""
    pass


class MissingDependencyError(VideoSnapshotsError):
    """Required external tool is not installed."""
    pass


class InvalidInputError(VideoSnapshotsError):
    """Input video or output directory cannot be used."""
    pass


class ProbeError(VideoSnapshotsError):
    """Video metadata could not be determined."""
    pass


class SamplingError(VideoSnapshotsError):
    """Snapshot timestamps could not be generated."""
    pass


class InsufficientDurationError(SamplingError):
    """Sampling window is empty for the requested number of snapshots."""
    pass


class InvalidDurationError(SamplingError):
    """Interval between snapshots is too small to randomize."""
    pass


class SnapshotError(VideoSnapshotsError):
    """A single snapshot extraction failed."""
    pass
