"""Host primitives consumed by dialogs."""

from typing import Awaitable, Callable, Protocol

from ..models import DialogResponse, IncomingMessage


class IDialog(Protocol):
    """Anything the host can put on the dialog stack."""

    async def start(self, context: "IDialogContext") -> None:
        """Run the dialog's start routine."""
        ...


MessageHandler = Callable[["IDialogContext", IncomingMessage | None], Awaitable[None]]
ResumeHandler = Callable[["IDialogContext", DialogResponse | None], Awaitable[None]]


class IDialogContext(Protocol):
    """Active dialog context supplied by the hosting dialog-stack engine."""

    async def send(self, text: str) -> None:
        """Deliver an outgoing message to the user."""
        ...

    def wait(self, handler: MessageHandler) -> None:
        """Suspend the current dialog until the next message, then call handler."""
        ...

    def done(self, result: DialogResponse | None) -> None:
        """Complete the current dialog and hand result to whatever invoked it."""
        ...

    async def call(self, child: IDialog, resume: ResumeHandler) -> None:
        """Start child on top of the current dialog; resume receives its result."""
        ...
