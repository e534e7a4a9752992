from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set

import cv2
import numpy as np
import pytest

from video_snapshots.config.runtime_config import set_config
from video_snapshots.logging.logger import setup_logging


@dataclass
class FakeToolchain:
    """Stand-in for ffprobe/ffmpeg driven through subprocess.run."""

    duration: str = "1200.480000"
    resolution: str = "640x360"
    color_info: str = "color_space=bt709\ncolor_transfer=bt709\ncolor_primaries=bt709"
    snapshot_size: Optional[tuple] = None
    failing_positions: Set[str] = field(default_factory=set)
    calls: List[List[str]] = field(default_factory=list)

    def __call__(self, args, **kwargs) -> subprocess.CompletedProcess:
        args = [str(arg) for arg in args]
        self.calls.append(args)
        if args[0] == "ffprobe":
            return self._probe(args)
        if args[0] == "ffmpeg":
            return self._render(args)
        raise FileNotFoundError(args[0])

    def _probe(self, args: List[str]) -> subprocess.CompletedProcess:
        entries = args[args.index("-show_entries") + 1]
        if entries == "format=duration":
            stdout = self.duration + "\n"
        elif entries == "stream=width,height":
            stdout = self.resolution + "\n"
        else:
            stdout = self.color_info + "\n" if self.color_info else ""
        return subprocess.CompletedProcess(args, 0, stdout, "")

    def _render(self, args: List[str]) -> subprocess.CompletedProcess:
        position = args[args.index("-ss") + 1]
        if position in self.failing_positions:
            return subprocess.CompletedProcess(args, 1, "", "Invalid data found\n")

        if self.snapshot_size is not None:
            width, height = self.snapshot_size
        else:
            width, height = (int(part) for part in self.resolution.split("x"))
        cv2.imwrite(args[-1], np.zeros((height, width, 3), dtype=np.uint8))
        return subprocess.CompletedProcess(args, 0, "", "")

    @property
    def render_calls(self) -> List[List[str]]:
        return [call for call in self.calls if call[0] == "ffmpeg"]

    @property
    def probe_calls(self) -> List[List[str]]:
        return [call for call in self.calls if call[0] == "ffprobe"]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "TAKE_SNAPSHOTS_FFMPEG",
        "TAKE_SNAPSHOTS_FFPROBE",
        "TAKE_SNAPSHOTS_LOG_DIR",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TAKE_SNAPSHOTS_DELAY", "0")
    yield
    set_config(None)


@pytest.fixture
def fake_tools(monkeypatch: pytest.MonkeyPatch, capsys) -> FakeToolchain:
    tools = FakeToolchain()
    monkeypatch.setattr(subprocess, "run", tools)
    monkeypatch.setattr(shutil, "which", lambda name: f"/usr/bin/{name}")
    setup_logging()
    return tools


@pytest.fixture
def video_file(tmp_path: Path) -> Path:
    path = tmp_path / "movie.mkv"
    path.write_bytes(b"\x1a\x45\xdf\xa3")
    return path
