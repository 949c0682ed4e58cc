"""In-process dialog stack hosting one conversation."""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol

from ..dialogs.context import IDialog, MessageHandler, ResumeHandler
from ..logging_config import get_logger
from ..models import DialogResponse, IncomingMessage

logger = get_logger(__name__)


@dataclass
class _Frame:
    """One dialog on the stack."""

    dialog: IDialog
    resume: ResumeHandler | None = None  # parent's handler for our result
    handler: MessageHandler | None = None
    completed: bool = False
    result: DialogResponse | None = None


class IDialogStack(Protocol):
    """Host engine for one conversation."""

    async def begin(self, root: IDialog) -> None:
        """Push the root dialog and run its start routine."""
        ...

    async def deliver(self, message: IncomingMessage) -> None:
        """Deliver a message to the dialog waiting for one."""
        ...

    def drain_outbox(self) -> list[str]:
        """Return and clear messages sent since the last drain."""
        ...


class DialogStack:
    """Stack of dialogs for one conversation; implements the dialog context."""

    def __init__(self, conversation_id: str = ""):
        self._conversation_id = conversation_id
        self._frames: list[_Frame] = []
        self._outbox: list[str] = []
        self._transcript: list[dict] = []
        self._completed = False
        self._result: DialogResponse | None = None
        self._lock = asyncio.Lock()

    @property
    def conversation_id(self) -> str:
        return self._conversation_id

    @property
    def depth(self) -> int:
        """Number of active dialogs."""
        return len(self._frames)

    @property
    def completed(self) -> bool:
        """Whether the root dialog has completed."""
        return self._completed

    @property
    def result(self) -> DialogResponse | None:
        """Result the root dialog completed with."""
        return self._result

    @property
    def transcript(self) -> list[dict]:
        return list(self._transcript)

    @property
    def waiting(self) -> bool:
        """Whether a dialog is waiting for the next message."""
        return bool(self._frames) and self._frames[-1].handler is not None

    async def begin(self, root: IDialog) -> None:
        """Push the root dialog and run its start routine."""
        async with self._lock:
            if self._frames or self._completed:
                raise RuntimeError("Conversation already started")

            logger.info("Conversation %s started", self._conversation_id)
            self._frames.append(_Frame(dialog=root))
            await root.start(self)
            await self._settle()

    async def deliver(self, message: IncomingMessage) -> None:
        """Deliver a message to the dialog waiting for one."""
        async with self._lock:
            if self._completed:
                raise RuntimeError("Conversation already completed")
            if not self.waiting:
                raise RuntimeError("No dialog is waiting for a message")

            self._transcript.append(
                {
                    "role": "user",
                    "content": message.text,
                    "timestamp": message.timestamp.isoformat(),
                }
            )

            frame = self._frames[-1]
            handler, frame.handler = frame.handler, None
            try:
                await handler(self, message)
            except Exception:
                # Re-arm so the conversation can take the next message
                if frame.handler is None and not frame.completed:
                    frame.handler = handler
                logger.error(
                    "Dialog handler failed",
                    exc_info=True,
                    extra={"context": {"conversation_id": self._conversation_id}},
                )
                raise
            await self._settle()

    def drain_outbox(self) -> list[str]:
        """Return and clear messages sent since the last drain."""
        sent, self._outbox = self._outbox, []
        return sent

    # Dialog context primitives

    async def send(self, text: str) -> None:
        """Queue an outgoing message for the user."""
        self._outbox.append(text)
        self._transcript.append(
            {
                "role": "assistant",
                "content": text,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )

    def wait(self, handler: MessageHandler) -> None:
        """Arm the top dialog to receive the next message."""
        if not self._frames:
            raise RuntimeError("No active dialog")
        self._frames[-1].handler = handler

    def done(self, result: DialogResponse | None) -> None:
        """Complete the top dialog; its parent resumes once the turn unwinds."""
        if not self._frames:
            raise RuntimeError("No active dialog")

        frame = self._frames[-1]
        if frame.completed:
            raise RuntimeError("Dialog already completed")
        frame.completed = True
        frame.result = result
        frame.handler = None

    async def call(self, child: IDialog, resume: ResumeHandler) -> None:
        """Push a child dialog and run its start routine."""
        if not self._frames:
            raise RuntimeError("No active dialog")

        self._frames.append(_Frame(dialog=child, resume=resume))
        await child.start(self)

    async def _settle(self) -> None:
        """Pop completed dialogs and resume their parents."""
        while self._frames and self._frames[-1].completed:
            frame = self._frames.pop()

            if not self._frames:
                self._completed = True
                self._result = frame.result
                logger.info(
                    "Conversation %s completed",
                    self._conversation_id,
                    extra={"context": {"cancelled": frame.result is None}},
                )
                return

            await frame.resume(self, frame.result)
