"""Dialog-specific behavior plugged into a CommandDialog."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol

from ..models import DialogResponse, IncomingMessage
from .context import IDialogContext

if TYPE_CHECKING:
    from .base import CommandDialog


class IDialogHooks(Protocol):
    """Capabilities of one dialog variant. Never called on command turns."""

    async def start(self, dialog: "CommandDialog", context: IDialogContext) -> None:
        """Begin the dialog; also re-entered when a root dialog is reset."""
        ...

    async def on_message(
        self, dialog: "CommandDialog", context: IDialogContext, message: IncomingMessage
    ) -> None:
        """Handle a new message that is not a reserved command."""
        ...

    async def on_child_resume(
        self, dialog: "CommandDialog", context: IDialogContext, response: DialogResponse
    ) -> None:
        """Handle a child dialog's result that is not a reserved command."""
        ...


class DialogHooks(ABC):
    """Base hooks with no-op turn handlers. Subclasses must provide start."""

    @abstractmethod
    async def start(self, dialog: "CommandDialog", context: IDialogContext) -> None:
        ...

    async def on_message(
        self, dialog: "CommandDialog", context: IDialogContext, message: IncomingMessage
    ) -> None:
        return

    async def on_child_resume(
        self, dialog: "CommandDialog", context: IDialogContext, response: DialogResponse
    ) -> None:
        return
