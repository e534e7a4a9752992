"""Runtime configuration loaded from the environment."""

from dataclasses import dataclass, asdict
from typing import Dict, Optional
import os

from dotenv import load_dotenv

from video_snapshots.config.config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_PACING_DELAY,
    ENV_DELAY,
    ENV_FFMPEG,
    ENV_FFPROBE,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    FFMPEG_BINARY,
    FFPROBE_BINARY,
)
from video_snapshots.exceptions import ConfigError


@dataclass
class RuntimeConfig:
    """Settings that do not come from the command line."""
    ffmpeg_binary: str = FFMPEG_BINARY
    ffprobe_binary: str = FFPROBE_BINARY
    pacing_delay: float = DEFAULT_PACING_DELAY
    log_level: str = DEFAULT_LOG_LEVEL
    log_dir: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> 'RuntimeConfig':
        """Create configuration from dictionary."""
        known = {key: value for key, value in data.items() if key in cls.__dataclass_fields__}
        config = cls(**known)
        try:
            config.pacing_delay = float(config.pacing_delay)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid pacing delay: {config.pacing_delay!r}") from exc
        return config

    @classmethod
    def from_env(cls) -> 'RuntimeConfig':
        """Load configuration from environment variables (and .env)."""
        load_dotenv()

        data = {}
        if os.getenv(ENV_FFMPEG):
            data["ffmpeg_binary"] = os.getenv(ENV_FFMPEG)
        if os.getenv(ENV_FFPROBE):
            data["ffprobe_binary"] = os.getenv(ENV_FFPROBE)
        if os.getenv(ENV_DELAY):
            data["pacing_delay"] = os.getenv(ENV_DELAY)
        if os.getenv(ENV_LOG_DIR):
            data["log_dir"] = os.getenv(ENV_LOG_DIR)
        data["log_level"] = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)

        return cls.from_dict(data)

    def to_dict(self) -> Dict:
        """Convert configuration to dictionary."""
        return asdict(self)


# Global configuration instance
_config_instance: Optional[RuntimeConfig] = None


def get_config() -> RuntimeConfig:
    """Get or create the global configuration instance."""
    global _config_instance
    if _config_instance is None:
        _config_instance = RuntimeConfig.from_env()
    return _config_instance


def set_config(config: Optional[RuntimeConfig]) -> None:
    """Set the global configuration instance."""
    global _config_instance
    _config_instance = config


def load_config() -> RuntimeConfig:
    """Reload configuration from the environment."""
    config = RuntimeConfig.from_env()
    set_config(config)
    return config
