"""Minimal location prompts for exercising the dialog flow."""

from ..logging_config import get_logger
from ..models import DialogResponse, IncomingMessage, ResourceSet
from ..tracker import ITracker
from .base import CommandDialog
from .context import IDialogContext
from .hooks import DialogHooks

logger = get_logger(__name__)

DEFAULT_PROMPT = "Where should I look? Please enter an address."
DEFAULT_CONFIRMATION = "Thanks, I have {location}."


class AddressPromptHooks(DialogHooks):
    """Child prompt: asks once and completes with the typed address."""

    def __init__(self, prompt: str = DEFAULT_PROMPT):
        self._prompt = prompt

    async def start(self, dialog: CommandDialog, context: IDialogContext) -> None:
        await context.send(self._prompt)
        dialog.wait_for_message(context)

    async def on_message(
        self, dialog: CommandDialog, context: IDialogContext, message: IncomingMessage
    ) -> None:
        context.done(DialogResponse(location=message.text.strip()))


class LocationCaptureHooks(DialogHooks):
    """Root flow: runs an address prompt and confirms the result."""

    def __init__(
        self,
        resources: ResourceSet,
        prompt: str = DEFAULT_PROMPT,
        confirmation: str = DEFAULT_CONFIRMATION,
        tracker: ITracker | None = None,
    ):
        self._resources = resources
        self._prompt = prompt
        self._confirmation = confirmation
        self._tracker = tracker
        self.location = None

    async def start(self, dialog: CommandDialog, context: IDialogContext) -> None:
        # A reset lands here too; forget anything captured so far
        self.location = None
        child = CommandDialog(
            AddressPromptHooks(self._prompt),
            self._resources,
            name="address_prompt",
            tracker=self._tracker,
        )
        await dialog.call_child(context, child)

    async def on_child_resume(
        self, dialog: CommandDialog, context: IDialogContext, response: DialogResponse
    ) -> None:
        self.location = response.location
        logger.info("Location captured by %s: %s", dialog.name, self.location)
        await context.send(self._confirmation.format(location=self.location))
        context.done(response)


def build_location_dialog(
    resources: ResourceSet,
    prompt: str = DEFAULT_PROMPT,
    confirmation: str = DEFAULT_CONFIRMATION,
    tracker: ITracker | None = None,
) -> CommandDialog:
    """Create the root location capture dialog."""
    hooks = LocationCaptureHooks(
        resources, prompt=prompt, confirmation=confirmation, tracker=tracker
    )
    return CommandDialog(
        hooks, resources, is_root=True, name="location_capture", tracker=tracker
    )
