"""Running the external ffmpeg tools."""

import subprocess
from typing import List, Sequence

from video_snapshots.exceptions import MissingDependencyError
from video_snapshots.logging.logger import get_logger


def run_command(cmd: Sequence[str]) -> subprocess.CompletedProcess:
    """Run an external tool and capture its output.

    The command is an argument list and never goes through a shell.
    Non-zero exit codes are returned to the caller, not raised.
    """
    args: List[str] = [str(part) for part in cmd]
    logger = get_logger()
    logger.log_command(args)

    try:
        result = subprocess.run(
            args,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise MissingDependencyError(
            f"{args[0]} could not be found. Please install ffmpeg to use this tool."
        ) from exc

    if result.returncode != 0 and result.stderr:
        logger.debug(f"{args[0]} exited with {result.returncode}: {result.stderr.strip()}")
    return result
