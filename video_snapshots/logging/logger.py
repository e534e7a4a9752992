"""Logging for take-snapshots runs."""

import logging
import shlex
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence


class SnapshotLogger:
    """Centralized logger for snapshot operations.

    Normal mode writes progress to stdout. Silent mode keeps stdout free for
    the final list of files and only reports errors on stderr.
    """

    def __init__(self, name: str = "take_snapshots", level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.level = getattr(logging, level.upper(), logging.INFO)
        self.logger.setLevel(logging.DEBUG)
        self.debug_mode = False

    def configure(
        self,
        silent: bool = False,
        debug: bool = False,
        level: Optional[str] = None,
        log_dir: Optional[str] = None,
    ) -> None:
        """Replace handlers for the current run."""
        if level:
            self.level = getattr(logging, level.upper(), logging.INFO)
        self.debug_mode = debug

        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        if silent:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(logging.ERROR)
            console_handler.setFormatter(logging.Formatter('%(message)s'))
        else:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(logging.DEBUG if debug else self.level)
            console_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(levelname)s - %(message)s',
                datefmt='%H:%M:%S'
            ))
        self.logger.addHandler(console_handler)

        if log_dir:
            self._add_file_handler(Path(log_dir))

    def _add_file_handler(self, log_dir: Path) -> None:
        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        file_handler = logging.FileHandler(
            log_dir / f"take_snapshots_{timestamp}.log",
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        ))
        self.logger.addHandler(file_handler)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self.logger.info(message, **kwargs)

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self.logger.debug(message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self.logger.error(message, **kwargs)

    def log_command(self, cmd: Sequence[str]) -> None:
        """Echo an external invocation exactly as it will be executed."""
        if self.debug_mode:
            self.debug(f"Executing command: {shlex.join(str(part) for part in cmd)}")


# Global logger instance
_logger_instance: Optional[SnapshotLogger] = None


def get_logger(name: str = "take_snapshots", level: str = "INFO") -> SnapshotLogger:
    """Get or create the global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = SnapshotLogger(name, level)
    return _logger_instance


def setup_logging(
    silent: bool = False,
    debug: bool = False,
    level: str = "INFO",
    log_dir: Optional[str] = None,
) -> SnapshotLogger:
    """Setup logging for a run."""
    logger = get_logger()
    logger.configure(silent=silent, debug=debug, level=level, log_dir=log_dir)
    return logger
