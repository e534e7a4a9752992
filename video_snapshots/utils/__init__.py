"""Utilities for video-snapshots module."""

from .time_utils import format_timestamp, snapshot_filename

__all__ = ["format_timestamp", "snapshot_filename"]
