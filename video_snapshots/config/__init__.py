"""Configuration for video-snapshots."""

from .runtime_config import RuntimeConfig, get_config, load_config, set_config

__all__ = ["RuntimeConfig", "get_config", "load_config", "set_config"]
