"""Application bootstrap and lifecycle management."""

import os
import uuid
from dataclasses import dataclass, field
from typing import Protocol

from .config import PathLike
from .dialogs import build_location_dialog
from .host import DialogStack
from .logging_config import get_logger
from .models import DialogResponse, IncomingMessage, ResourceSet
from .resources import load_resource_set
from .tracker import ITracker, Tracker

logger = get_logger(__name__)


@dataclass
class TurnResult:
    """Outcome of one user turn."""

    replies: list[str] = field(default_factory=list)
    completed: bool = False
    result: DialogResponse | None = None
    started: bool = False  # this turn only started the conversation


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Resolve resources and create the tracker."""
        ...

    async def stop(self) -> None:
        """Drop all conversations."""
        ...

    async def reset(self) -> None:
        """Drop conversations and trace events between test runs."""
        ...

    async def handle_message(self, user_id: str, text: str | None) -> TurnResult:
        """Run one user turn and return what the dialogs sent back."""
        ...

    def get_conversation(self, user_id: str) -> DialogStack | None:
        """Active conversation for a user, if any."""
        ...

    @property
    def tracker(self) -> ITracker:
        """Trace events of all conversations."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        locale: str | None = None,
        bundle_dir: PathLike | None = None,
    ):
        self._locale = locale if locale is not None else os.getenv("DIALOG_LOCALE")
        self._bundle_dir = (
            bundle_dir if bundle_dir is not None else os.getenv("DIALOG_BUNDLE_DIR")
        )

        # Components (will be initialized in start())
        self._resources: ResourceSet | None = None
        self._tracker: ITracker | None = None
        self._conversations: dict[str, DialogStack] = {}
        self._running = False

    async def start(self) -> None:
        """Resolve resources and create the tracker."""
        logger.info("Starting application")

        # 1. Resources (no dependencies)
        self._resources = load_resource_set(self._locale, self._bundle_dir)
        logger.info("Resources loaded for locale %s", self._resources.locale)

        # 2. Tracker (no dependencies)
        self._tracker = Tracker()
        self._running = True
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Drop all conversations."""
        self._running = False
        self._conversations.clear()
        logger.info("Application stopped")

    async def reset(self) -> None:
        """Drop conversations and trace events between test runs."""
        self._conversations.clear()
        if self._tracker:
            await self._tracker.clear()
        logger.info("Reset complete")

    async def handle_message(self, user_id: str, text: str | None) -> TurnResult:
        """Run one user turn and return what the dialogs sent back.

        The first message of a conversation only starts the root dialog.
        A completed conversation is dropped so the next message starts over.
        """
        if not self._running:
            raise RuntimeError("Application not started")

        await self.tracker.track(
            event_type="message_received",
            actor="application",
            data={"user_id": user_id, "message_text": text},
        )

        stack = self._conversations.get(user_id)
        started = stack is None
        if started:
            stack = DialogStack(conversation_id=str(uuid.uuid4()))
            self._conversations[user_id] = stack
            await stack.begin(
                build_location_dialog(self.resources, tracker=self._tracker)
            )
            await self.tracker.track(
                event_type="conversation_started",
                actor="application",
                data={"user_id": user_id, "conversation_id": stack.conversation_id},
            )
        else:
            await stack.deliver(
                IncomingMessage(text=text, user_id=user_id, id=str(uuid.uuid4()))
            )

        turn = TurnResult(
            replies=stack.drain_outbox(),
            completed=stack.completed,
            result=stack.result,
            started=started,
        )

        if stack.completed:
            del self._conversations[user_id]
            await self.tracker.track(
                event_type="conversation_completed",
                actor="application",
                data={
                    "user_id": user_id,
                    "conversation_id": stack.conversation_id,
                    "cancelled": stack.result is None,
                },
            )

        return turn

    def get_conversation(self, user_id: str) -> DialogStack | None:
        """Active conversation for a user, if any."""
        return self._conversations.get(user_id)

    @property
    def resources(self) -> ResourceSet:
        """Get resource set."""
        if not self._resources:
            raise RuntimeError("Application not started")
        return self._resources

    @property
    def tracker(self) -> ITracker:
        """Get tracker instance."""
        if not self._tracker:
            raise RuntimeError("Application not started")
        return self._tracker
