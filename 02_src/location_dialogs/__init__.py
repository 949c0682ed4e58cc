"""Location Dialogs: reserved command handling for location capture flows."""

from .app import Application, IApplication, TurnResult
from .dialogs import (
    AddressPromptHooks,
    CommandDialog,
    CommandInterceptor,
    DialogHooks,
    IDialog,
    IDialogContext,
    IDialogHooks,
    LocationCaptureHooks,
    build_location_dialog,
)
from .host import DialogStack, IDialogStack
from .models import (
    Command,
    DialogResponse,
    IncomingMessage,
    ResourceSet,
    TraceEvent,
)
from .resources import ResourceBundleError, available_locales, load_resource_set
from .tracker import ITracker, Tracker

__all__ = [
    # Application
    "Application",
    "IApplication",
    "TurnResult",
    # Models
    "Command",
    "DialogResponse",
    "IncomingMessage",
    "ResourceSet",
    "TraceEvent",
    # Resources
    "ResourceBundleError",
    "available_locales",
    "load_resource_set",
    # Dialogs
    "CommandDialog",
    "CommandInterceptor",
    "IDialog",
    "IDialogContext",
    "IDialogHooks",
    "DialogHooks",
    "AddressPromptHooks",
    "LocationCaptureHooks",
    "build_location_dialog",
    # Components
    "IDialogStack",
    "DialogStack",
    "ITracker",
    "Tracker",
]
