"""Tests for SessionContext and notifiers."""

import pytest

from vidgroup.config.context import SessionContext, default_ffmpeg, resolve_context
from vidgroup.notifications import (
    COMPLETE,
    ERROR,
    STATUS,
    Notifier,
    NullNotifier,
    RecordingNotifier,
    emit,
)


class TestSessionContext:
    """Tests for SessionContext dataclass."""

    def test_default_values(self, monkeypatch):
        """Default values are set correctly."""
        monkeypatch.delenv("VIDGROUP_FFMPEG", raising=False)
        ctx = SessionContext()
        assert ctx.dry_run is False
        assert ctx.destination_rule == "stem"
        assert ctx.ffmpeg == "ffmpeg"
        assert ctx.extensions == {".m4v"}
        assert isinstance(ctx.notifier, NullNotifier)

    def test_is_simulation_property(self):
        """is_simulation returns dry_run value."""
        assert SessionContext(dry_run=True).is_simulation is True
        assert SessionContext(dry_run=False).is_simulation is False

    def test_contexts_are_independent(self):
        """Two sessions never share a notifier."""
        first = SessionContext()
        second = SessionContext()
        assert first.notifier is not second.notifier

    def test_events_reach_notifier(self, recorder):
        """status, complete and error forward to the sink."""
        ctx = SessionContext(notifier=recorder)
        ctx.status("working")
        ctx.complete("done")
        ctx.error("oops")

        assert recorder.events == [
            (STATUS, "working"),
            (COMPLETE, "done"),
            (ERROR, "oops"),
        ]


class TestDefaultFfmpeg:
    """Tests for default_ffmpeg function."""

    def test_env_override(self, monkeypatch):
        """VIDGROUP_FFMPEG overrides the executable."""
        monkeypatch.setenv("VIDGROUP_FFMPEG", "/opt/bin/ffmpeg")
        assert default_ffmpeg() == "/opt/bin/ffmpeg"
        assert SessionContext().ffmpeg == "/opt/bin/ffmpeg"

    def test_fallback(self, monkeypatch):
        """Without override, plain 'ffmpeg' is used."""
        monkeypatch.delenv("VIDGROUP_FFMPEG", raising=False)
        assert default_ffmpeg() == "ffmpeg"


class TestResolveContext:
    """Tests for resolve_context function."""

    def test_returns_given_context(self):
        ctx = SessionContext(dry_run=True)
        assert resolve_context(ctx) is ctx

    def test_builds_default(self):
        assert resolve_context(None).dry_run is False


class TestNotifiers:
    """Tests for notifier implementations."""

    def test_recording_notifier_is_a_notifier(self):
        assert isinstance(RecordingNotifier(), Notifier)

    def test_null_notifier_is_a_notifier(self):
        assert isinstance(NullNotifier(), Notifier)

    def test_recording_notifier_filters_messages(self):
        recorder = RecordingNotifier()
        recorder.on_status("a")
        recorder.on_error("b")
        recorder.on_status("c")

        assert recorder.kinds == [STATUS, ERROR, STATUS]
        assert recorder.messages(STATUS) == ["a", "c"]

    def test_emit_swallows_sink_failures(self):
        """A raising sink does not propagate to the caller."""

        class Broken:
            def on_status(self, text):
                raise RuntimeError("boom")

            def on_complete(self, summary):
                pass

            def on_error(self, text):
                pass

        emit(Broken(), STATUS, "hello")

    def test_emit_rejects_unknown_kind(self):
        with pytest.raises(KeyError):
            emit(NullNotifier(), "progress", "hello")
