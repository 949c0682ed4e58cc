"""Reserved command interception shared by all dialogs."""

from typing import Awaitable, Callable

from ..logging_config import get_logger
from ..models import Command, DialogResponse, ResourceSet
from ..tracker import ITracker
from .context import IDialogContext, MessageHandler

logger = get_logger(__name__)


RestartRoutine = Callable[[IDialogContext], Awaitable[None]]


class CommandInterceptor:
    """Claims cancel, help and reset turns before dialog-specific handling.

    Commands are matched in order: cancel, help, reset. A missing response
    counts as cancel. Reset restarts a root dialog; any other dialog completes
    with the unconsumed response so its parent classifies it in turn.
    """

    def __init__(
        self,
        resources: ResourceSet,
        *,
        is_root: bool,
        restart: RestartRoutine,
        message_handler: MessageHandler,
        name: str = "dialog",
        tracker: ITracker | None = None,
    ):
        self._resources = resources
        self._is_root = is_root
        self._restart = restart
        self._message_handler = message_handler
        self._name = name
        self._tracker = tracker

    async def classify(
        self, context: IDialogContext, response: DialogResponse | None
    ) -> bool:
        """Run a command's side effect and return True, or return False."""
        if response is None:
            command = Command.CANCEL
        else:
            command = self._resources.command_for(response.message)

        if command is None:
            return False

        logger.info(
            "Dialog %s intercepted %s",
            self._name,
            command.value,
            extra={"context": {"dialog": self._name, "command": command.value, "is_root": self._is_root}},
        )
        if self._tracker:
            await self._tracker.track(
                event_type="command_intercepted",
                actor=f"dialog:{self._name}",
                data={
                    "command": command.value,
                    "is_root": self._is_root,
                    "message": response.message if response else None,
                },
            )

        if command is Command.CANCEL:
            # Pass a null result up to the parent
            context.done(None)
        elif command is Command.HELP:
            await context.send(self._resources.help_message)
            context.wait(self._message_handler)
        elif self._is_root:
            await self._restart(context)
        else:
            # Relay reset to the parent; only the root can claim it
            context.done(response)

        return True
