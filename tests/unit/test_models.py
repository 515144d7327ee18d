"""Tests for data models."""

import base64

import pytest
from pathlib import Path

from vidgroup.exceptions import EmptyMoveRequestError, ThumbnailNoDataError
from vidgroup.models import (
    MoveRequest,
    MoveResult,
    Thumbnail,
    ThumbnailOutcome,
    is_video_file,
)


class TestIsVideoFile:
    """Tests for is_video_file function."""

    def test_matches_case_insensitively(self):
        assert is_video_file(Path("a.M4V"), {".m4v"})

    def test_rejects_other_extensions(self):
        assert not is_video_file(Path("a.mp4"), {".m4v"})

    def test_rejects_missing_extension(self):
        assert not is_video_file(Path("m4v"), {".m4v"})


class TestMoveRequest:
    """Tests for MoveRequest."""

    def test_of_converts_strings(self):
        """Strings become Paths, order is kept."""
        request = MoveRequest.of(["/v/b.m4v", "/v/a.m4v"])
        assert request.paths == (Path("/v/b.m4v"), Path("/v/a.m4v"))
        assert request.first == Path("/v/b.m4v")
        assert len(request) == 2

    def test_empty_request_is_rejected(self):
        """Empty requests cannot be built."""
        with pytest.raises(EmptyMoveRequestError):
            MoveRequest.of([])

    def test_is_iterable(self):
        """Iterating yields the paths in order."""
        request = MoveRequest.of(["/v/1.m4v", "/v/2.m4v"])
        assert list(request) == [Path("/v/1.m4v"), Path("/v/2.m4v")]


class TestMoveResult:
    """Tests for MoveResult."""

    def test_summary(self):
        """Summary states the count and destination."""
        result = MoveResult(
            destination=Path("/v/a"),
            moved=[(Path("/v/a.m4v"), Path("/v/a/a.m4v"))],
        )
        assert result.moved_count == 1
        assert result.summary == "Successfully moved 1 files to /v/a"

    def test_dry_run_summary(self):
        """Simulated results say so."""
        result = MoveResult(destination=Path("/v/a"), dry_run=True)
        assert result.summary.startswith("SIMULATION")


class TestThumbnail:
    """Tests for Thumbnail."""

    def test_data_url(self):
        """Data URL embeds the MIME type and base64 payload."""
        thumbnail = Thumbnail(source=Path("/v/a.m4v"), data=b"\xff\xd8abc")
        expected = base64.b64encode(b"\xff\xd8abc").decode("ascii")
        assert thumbnail.data_url == f"data:image/jpeg;base64,{expected}"

    def test_size(self):
        assert Thumbnail(source=Path("/v/a.m4v"), data=b"1234").size == 4


class TestThumbnailOutcome:
    """Tests for ThumbnailOutcome."""

    def test_ok_with_thumbnail(self):
        thumbnail = Thumbnail(source=Path("/v/a.m4v"), data=b"x")
        assert ThumbnailOutcome(Path("/v/a.m4v"), thumbnail=thumbnail).ok

    def test_not_ok_with_error(self):
        error = ThumbnailNoDataError(Path("/v/a.m4v"))
        assert not ThumbnailOutcome(Path("/v/a.m4v"), error=error).ok
