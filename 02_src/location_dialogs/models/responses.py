"""Per-turn dialog data models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass
class IncomingMessage:
    """A raw message delivered by the host for one turn."""

    text: str | None
    user_id: str = ""
    id: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class DialogResponse:
    """What arrived this turn: trimmed user text or a completed child's result.

    The same shape travels up the stack when a child completes, so a relayed
    command is classified again by the parent.
    """

    message: str | None = None
    location: Any | None = None  # opaque payload from a completed child
