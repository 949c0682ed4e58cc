"""Dialog host module."""

from .stack import DialogStack, IDialogStack

__all__ = ["DialogStack", "IDialogStack"]
