"""Core data models for Location Dialogs."""

from .resources import Command, ResourceSet
from .responses import DialogResponse, IncomingMessage
from .tracing import TraceEvent

__all__ = [
    # Responses
    "DialogResponse",
    "IncomingMessage",
    # Resources
    "Command",
    "ResourceSet",
    # Tracing
    "TraceEvent",
]
