"""Dialogs module."""

from .base import CommandDialog
from .context import IDialog, IDialogContext, MessageHandler, ResumeHandler
from .hooks import DialogHooks, IDialogHooks
from .interceptor import CommandInterceptor
from .prompts import AddressPromptHooks, LocationCaptureHooks, build_location_dialog

__all__ = [
    "CommandDialog",
    "CommandInterceptor",
    "IDialog",
    "IDialogContext",
    "MessageHandler",
    "ResumeHandler",
    "DialogHooks",
    "IDialogHooks",
    "AddressPromptHooks",
    "LocationCaptureHooks",
    "build_location_dialog",
]
