"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from location_dialogs.dialogs import DialogHooks  # noqa: E402
from location_dialogs.models import ResourceSet  # noqa: E402

HELP_TEXT = "Type an address, or say cancel, help or reset."


class RecordingContext:
    """Dialog context that records every host primitive call."""

    def __init__(self):
        self.sent: list[str] = []
        self.waits: list = []
        self.done_results: list = []
        self.calls: list = []

    async def send(self, text: str) -> None:
        self.sent.append(text)

    def wait(self, handler) -> None:
        self.waits.append(handler)

    def done(self, result) -> None:
        self.done_results.append(result)

    async def call(self, child, resume) -> None:
        self.calls.append((child, resume))


class RecordingHooks(DialogHooks):
    """Hooks that record what reaches the dialog-specific handlers."""

    def __init__(self, prompt: str | None = None):
        self.prompt = prompt
        self.starts = 0
        self.messages: list = []
        self.resumes: list = []

    async def start(self, dialog, context) -> None:
        self.starts += 1
        if self.prompt:
            await context.send(self.prompt)
        dialog.wait_for_message(context)

    async def on_message(self, dialog, context, message) -> None:
        self.messages.append(message)

    async def on_child_resume(self, dialog, context, response) -> None:
        self.resumes.append(response)


@pytest.fixture
def resources():
    """Create English resource set for testing."""
    return ResourceSet(
        cancel="cancel",
        help="help",
        reset="reset",
        help_message=HELP_TEXT,
    )


@pytest.fixture
def context():
    """Create recording dialog context."""
    return RecordingContext()


@pytest.fixture
def hooks():
    """Create recording hooks."""
    return RecordingHooks()


@pytest.fixture
def tracker():
    """Create in-memory tracker."""
    from location_dialogs.tracker import Tracker

    return Tracker()


@pytest.fixture
def bundle_dir(tmp_path):
    """Create a directory of resource bundles for testing."""
    return tmp_path


@pytest_asyncio.fixture
async def app():
    """Create and start an English application."""
    from location_dialogs.app import Application

    application = Application(locale="en")
    await application.start()
    yield application
    await application.stop()
