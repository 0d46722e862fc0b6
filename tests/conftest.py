"""
Pytest configuration and shared fixtures for partmerge tests.

This module provides common fixtures and configuration that can be used
across all test modules in the project.
"""

from __future__ import annotations

import subprocess
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from partmerge.cli.common.context import clear_cli_context
from partmerge.utils.logging_config import cleanup_logging

DJI_PARTS = [
    "DJI_1234_001.mp4",
    "DJI_1234_002.mp4",
    "DJI_1234_003.mp4",
    "DJI_5678_001.MP4",
    "DJI_5678_002.MP4",
]


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Keep user configuration, ``.env`` files and PARTMERGE_* variables out of tests."""
    home = tmp_path_factory.mktemp("home")
    workdir = tmp_path_factory.mktemp("cwd")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(workdir)
    for name in [
        "PARTMERGE_GLOBAL_MATCHER",
        "PARTMERGE_GROUPING_MATCHER",
        "PARTMERGE_SOURCE_DIRECTORY",
        "PARTMERGE_OUTPUT_DIRECTORY",
        "PARTMERGE_FFMPEG_BINARY",
        "PARTMERGE_OUTPUT_EXTENSION",
        "PARTMERGE_NATURAL_SORT",
        "PARTMERGE_OVERWRITE",
    ]:
        monkeypatch.delenv(name, raising=False)

    yield

    clear_cli_context()
    cleanup_logging()


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Create a card-like directory with split DJI recordings.

    Contents:
        - DJI_1234 in three parts, DJI_5678 in two (upper-case extension)
        - DJI_9999_001.mp4, a single-part recording
        - notes.txt, not a video
        - DJI_0000_001.mp4/, a directory that looks like a video
    """
    directory = tmp_path / "card"
    directory.mkdir()
    for name in [*DJI_PARTS, "DJI_9999_001.mp4", "notes.txt"]:
        (directory / name).write_bytes(b"\x00")
    (directory / "DJI_0000_001.mp4").mkdir()
    return directory


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Create an empty directory."""
    directory = tmp_path / "empty"
    directory.mkdir()
    return directory


def _completed(command: list[str], returncode: int = 0, stdout: str = "") -> subprocess.CompletedProcess[str]:
    """Build the value returned by a fake ``subprocess.run``."""
    return subprocess.CompletedProcess(command, returncode, stdout=stdout)


@pytest.fixture
def ffmpeg_run(mocker) -> MagicMock:  # type: ignore[no-untyped-def]
    """Replace ``subprocess.run`` in the concat module.

    Each call records the manifest text (the file is gone once the call
    returns) in ``ffmpeg_run.manifests``.
    """
    manifests: list[str] = []

    def _run(command: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        manifest = Path(command[command.index("-i") + 1])
        manifests.append(manifest.read_text(encoding="utf-8"))
        return _completed(command, stdout="frame=1 done\n")

    mock = mocker.patch("partmerge.core.concat.subprocess.run", side_effect=_run)
    mock.manifests = manifests
    return mock