"""Notification sinks receiving progress events from long operations."""

from dataclasses import dataclass, field
from typing import List, Protocol, Tuple, runtime_checkable

from loguru import logger

STATUS = "status"
COMPLETE = "complete"
ERROR = "error"


@runtime_checkable
class Notifier(Protocol):
    """
    Push-style sink for progress events.

    Implementations must return quickly: callers never wait for the
    sink to acknowledge an event.
    """

    def on_status(self, text: str) -> None:
        ...

    def on_complete(self, summary: str) -> None:
        ...

    def on_error(self, text: str) -> None:
        ...


class NullNotifier:
    """Discards every event."""

    def on_status(self, text: str) -> None:
        pass

    def on_complete(self, summary: str) -> None:
        pass

    def on_error(self, text: str) -> None:
        pass


@dataclass
class RecordingNotifier:
    """
    Keeps every event as a ``(kind, text)`` tuple.

    Useful to bridge events to another thread or UI, and in tests.
    """

    events: List[Tuple[str, str]] = field(default_factory=list)

    def on_status(self, text: str) -> None:
        self.events.append((STATUS, text))

    def on_complete(self, summary: str) -> None:
        self.events.append((COMPLETE, summary))

    def on_error(self, text: str) -> None:
        self.events.append((ERROR, text))

    @property
    def kinds(self) -> List[str]:
        """Event kinds in emission order."""
        return [kind for kind, _ in self.events]

    def messages(self, kind: str) -> List[str]:
        """Texts of all events of the given kind."""
        return [text for event_kind, text in self.events if event_kind == kind]


def emit(notifier: Notifier, kind: str, text: str) -> None:
    """
    Send one event to a sink without letting the sink break the caller.

    Args:
        notifier: Destination sink.
        kind: One of STATUS, COMPLETE or ERROR.
        text: Human readable message.
    """
    handler = {
        STATUS: notifier.on_status,
        COMPLETE: notifier.on_complete,
        ERROR: notifier.on_error,
    }[kind]
    try:
        handler(text)
    except Exception as e:
        logger.warning(f"Notifier failed on {kind} event: {e}")
