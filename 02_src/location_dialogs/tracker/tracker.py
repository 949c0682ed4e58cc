"""Tracker implementation for recording TraceEvents."""

import uuid
from datetime import datetime, timezone
from typing import Protocol

from ..models import TraceEvent


class ITracker(Protocol):
    """Recording TraceEvents about conversations and intercepted commands."""

    async def track(self, event_type: str, actor: str, data: dict) -> None:
        """Create TraceEvent and keep it."""
        ...

    async def get_trace_events(
        self,
        after: datetime | None = None,
        event_types: list[str] | None = None,
        actor: str | None = None,
        limit: int = 100,
    ) -> list[TraceEvent]:
        """Query kept TraceEvents, oldest first."""
        ...

    async def clear(self) -> None:
        """Drop all TraceEvents."""
        ...


class Tracker:
    """Keeps TraceEvents in memory, bounded by max_events."""

    def __init__(self, max_events: int = 10_000):
        self._max_events = max_events
        self._events: list[TraceEvent] = []

    async def track(self, event_type: str, actor: str, data: dict) -> None:
        """Create TraceEvent and keep it."""
        trace_event = TraceEvent(
            id=str(uuid.uuid4()),
            event_type=event_type,
            actor=actor,
            data=data,
            timestamp=datetime.now(timezone.utc),
        )
        self._events.append(trace_event)

        # Drop oldest events past the cap
        if len(self._events) > self._max_events:
            del self._events[: len(self._events) - self._max_events]

    async def get_trace_events(
        self,
        after: datetime | None = None,
        event_types: list[str] | None = None,
        actor: str | None = None,
        limit: int = 100,
    ) -> list[TraceEvent]:
        """Query kept TraceEvents, oldest first."""
        # Naive timestamps are taken as UTC
        if after is not None and after.tzinfo is None:
            after = after.replace(tzinfo=timezone.utc)

        events = [
            e
            for e in self._events
            if (after is None or e.timestamp > after)
            and (event_types is None or e.event_type in event_types)
            and (actor is None or e.actor == actor)
        ]
        return events[:limit]

    async def clear(self) -> None:
        """Drop all TraceEvents."""
        self._events.clear()
