"""CommandDialog: a dialog whose turns pass through the command interceptor."""

from ..logging_config import get_logger
from ..models import DialogResponse, IncomingMessage, ResourceSet
from ..tracker import ITracker
from .context import IDialog, IDialogContext
from .hooks import IDialogHooks
from .interceptor import CommandInterceptor

logger = get_logger(__name__)


class CommandDialog:
    """Runs reserved commands first, then the dialog's own hooks."""

    def __init__(
        self,
        hooks: IDialogHooks,
        resources: ResourceSet,
        is_root: bool = False,
        name: str | None = None,
        tracker: ITracker | None = None,
    ):
        self._hooks = hooks
        self._resources = resources
        self._is_root = is_root
        self._name = name or type(hooks).__name__
        self._interceptor = CommandInterceptor(
            resources,
            is_root=is_root,
            restart=self.start,
            message_handler=self.on_message_event,
            name=self._name,
            tracker=tracker,
        )

    @property
    def is_root(self) -> bool:
        """Whether this dialog is the top of the stack."""
        return self._is_root

    @property
    def name(self) -> str:
        return self._name

    @property
    def hooks(self) -> IDialogHooks:
        return self._hooks

    @property
    def resources(self) -> ResourceSet:
        return self._resources

    async def start(self, context: IDialogContext) -> None:
        """Start the dialog from the beginning."""
        logger.debug("Starting dialog %s", self._name)
        await self._hooks.start(self, context)

    async def on_message_event(
        self, context: IDialogContext, message: IncomingMessage | None
    ) -> None:
        """Handle a new message from the user."""
        text = message.text.strip() if message and message.text is not None else None
        response = DialogResponse(message=text) if text else None

        if not await self._interceptor.classify(context, response):
            await self._hooks.on_message(self, context, message)

    async def on_child_completion_event(
        self, context: IDialogContext, result: DialogResponse | None
    ) -> None:
        """Handle the result of a child dialog started by this one."""
        if not await self._interceptor.classify(context, result):
            await self._hooks.on_child_resume(self, context, result)

    def wait_for_message(self, context: IDialogContext) -> None:
        """Arm the context to deliver the next message to this dialog."""
        context.wait(self.on_message_event)

    async def call_child(self, context: IDialogContext, child: IDialog) -> None:
        """Start a child dialog; its result comes back through the interceptor."""
        await context.call(child, self.on_child_completion_event)
