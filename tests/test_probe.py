import shutil
from pathlib import Path

import pytest

from video_snapshots.core.color_space import color_space_from_probe, resolve_color_space
from video_snapshots.core.probe import ensure_tools_installed, probe_duration, probe_resolution
from video_snapshots.exceptions import MissingDependencyError, ProbeError
from video_snapshots.models import ColorSpace, Resolution


def test_duration_is_truncated(fake_tools, video_file: Path) -> None:
    fake_tools.duration = "1234.987000"
    assert probe_duration(video_file) == 1234


@pytest.mark.parametrize("value", ["", "N/A", "0.400000"])
def test_undeterminable_duration(fake_tools, video_file: Path, value: str) -> None:
    fake_tools.duration = value
    with pytest.raises(ProbeError):
        probe_duration(video_file)


def test_resolution(fake_tools, video_file: Path) -> None:
    fake_tools.resolution = "1920x1080"
    assert probe_resolution(video_file) == Resolution(1920, 1080)
    assert fake_tools.probe_calls[-1][-1] == str(video_file)


def test_resolution_with_trailing_separator(fake_tools, video_file: Path) -> None:
    fake_tools.resolution = "640x360x"
    assert probe_resolution(video_file) == Resolution(640, 360)


def test_missing_resolution(fake_tools, video_file: Path) -> None:
    fake_tools.resolution = ""
    with pytest.raises(ProbeError):
        probe_resolution(video_file)


def test_missing_tool(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(shutil, "which", lambda name: None if name == "ffmpeg" else "/bin/x")
    with pytest.raises(MissingDependencyError, match="ffmpeg"):
        ensure_tools_installed(["ffmpeg", "ffprobe"])


def test_unlisted_binary_raises_missing_dependency(fake_tools, video_file: Path) -> None:
    with pytest.raises(MissingDependencyError):
        probe_duration(video_file, ffprobe="avprobe")


@pytest.mark.parametrize(
    "info,expected",
    [
        ("color_space=bt709\ncolor_transfer=bt709\ncolor_primaries=bt709", ColorSpace.BT709),
        ("color_space=smpte170m\ncolor_transfer=bt709\ncolor_primaries=smpte170m", ColorSpace.BT709),
        ("color_space=smpte170m\ncolor_transfer=smpte170m", ColorSpace.BT601),
        ("color_space=bt2020nc\ncolor_transfer=smpte2084\ncolor_primaries=bt2020", ColorSpace.BT2020),
        ("color_space=unknown\ncolor_transfer=unknown", ColorSpace.UNKNOWN),
    ],
)
def test_color_tags(info: str, expected: ColorSpace) -> None:
    assert color_space_from_probe(info) is expected


def test_detected_color_space(fake_tools, video_file: Path) -> None:
    fake_tools.color_info = "color_space=bt2020nc\ncolor_primaries=bt2020"
    assert resolve_color_space(video_file) is ColorSpace.BT2020


def test_forced_color_space_skips_probe(fake_tools, video_file: Path) -> None:
    assert resolve_color_space(video_file, force_format=ColorSpace.BT601) is ColorSpace.BT601
    assert fake_tools.calls == []


def test_empty_color_info(fake_tools, video_file: Path) -> None:
    fake_tools.color_info = ""
    with pytest.raises(ProbeError):
        resolve_color_space(video_file)
