"""Core snapshot operations."""

from .color_space import resolve_color_space
from .probe import ensure_tools_installed, probe_duration, probe_resolution
from .sampler import generate_random_times
from .video_processing import take_snapshot, take_snapshots

__all__ = [
    "ensure_tools_installed",
    "generate_random_times",
    "probe_duration",
    "probe_resolution",
    "resolve_color_space",
    "take_snapshot",
    "take_snapshots",
]
