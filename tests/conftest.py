"""Pytest configuration and fixtures."""

import subprocess

import pytest
from pathlib import Path

from vidgroup.config import SessionContext
from vidgroup.notifications import RecordingNotifier


@pytest.fixture
def recorder():
    """Notifier keeping every event."""
    return RecordingNotifier()


@pytest.fixture
def ctx(recorder):
    """Session context wired to the recorder."""
    return SessionContext(notifier=recorder, ffmpeg="ffmpeg")


@pytest.fixture
def video_files(tmp_path):
    """Five small .m4v files in a 'show' folder."""
    show = tmp_path / "show"
    show.mkdir()
    files = []
    for i in range(1, 6):
        video = show / f"episode{i}.m4v"
        video.write_bytes(f"fake video {i}".encode())
        files.append(video)
    return files


@pytest.fixture
def jpeg_bytes():
    """Bytes standing in for an ffmpeg JPEG frame."""
    return b"\xff\xd8\xff\xe0fake-jpeg\xff\xd9"


@pytest.fixture
def completed_process():
    """Factory for subprocess.CompletedProcess results."""
    def make(returncode=0, stdout=b"", stderr=b""):
        return subprocess.CompletedProcess(
            args=["ffmpeg"], returncode=returncode, stdout=stdout, stderr=stderr
        )
    return make
