"""Tests for CommandInterceptor."""

import pytest

from conftest import HELP_TEXT
from location_dialogs.dialogs import CommandInterceptor
from location_dialogs.models import DialogResponse


def make_interceptor(resources, is_root=False, tracker=None):
    """Create interceptor with recorded restart calls."""
    restarts = []

    async def restart(context):
        restarts.append(context)

    async def message_handler(context, message):
        pass

    interceptor = CommandInterceptor(
        resources,
        is_root=is_root,
        restart=restart,
        message_handler=message_handler,
        name="test",
        tracker=tracker,
    )
    return interceptor, restarts, message_handler


class TestInterceptorCancel:
    """Tests for the cancel command."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["cancel", "CANCEL", "Cancel", "cAnCeL"])
    @pytest.mark.parametrize("is_root", [True, False])
    async def test_cancel_any_case_completes_with_none(
        self, resources, context, text, is_root
    ):
        """Test that cancel in any case completes with a null result."""
        interceptor, restarts, _ = make_interceptor(resources, is_root=is_root)

        handled = await interceptor.classify(context, DialogResponse(message=text))

        assert handled is True
        assert context.done_results == [None]
        assert context.sent == []
        assert restarts == []

    @pytest.mark.asyncio
    async def test_missing_response_is_cancel(self, resources, context):
        """Test that a missing response is treated as cancel."""
        interceptor, _, _ = make_interceptor(resources)

        handled = await interceptor.classify(context, None)

        assert handled is True
        assert context.done_results == [None]


class TestInterceptorHelp:
    """Tests for the help command."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("is_root", [True, False])
    async def test_help_sends_message_and_waits(self, resources, context, is_root):
        """Test that help sends the help text once and re-arms the wait."""
        interceptor, restarts, handler = make_interceptor(resources, is_root=is_root)

        handled = await interceptor.classify(context, DialogResponse(message="HELP"))

        assert handled is True
        assert context.sent == [HELP_TEXT]
        assert context.waits == [handler]
        assert context.done_results == []
        assert restarts == []


class TestInterceptorReset:
    """Tests for the reset command."""

    @pytest.mark.asyncio
    async def test_reset_at_root_restarts(self, resources, context):
        """Test that root claims reset and restarts without sending anything."""
        interceptor, restarts, _ = make_interceptor(resources, is_root=True)

        handled = await interceptor.classify(context, DialogResponse(message="reset"))

        assert handled is True
        assert restarts == [context]
        assert context.sent == []
        assert context.done_results == []

    @pytest.mark.asyncio
    async def test_reset_below_root_relays_original_response(self, resources, context):
        """Test that a non-root dialog completes with the unconsumed response."""
        interceptor, restarts, _ = make_interceptor(resources, is_root=False)
        response = DialogResponse(message="RESET")

        handled = await interceptor.classify(context, response)

        assert handled is True
        assert restarts == []
        assert len(context.done_results) == 1
        assert context.done_results[0] is response
        assert context.done_results[0].message == "RESET"


class TestInterceptorPassThrough:
    """Tests for responses that are not commands."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "text", ["resetting", "cancel please", "helpful", "1 Main St", "re set"]
    )
    async def test_non_command_is_not_handled(self, resources, context, text):
        """Test that near misses fall through without side effects."""
        interceptor, restarts, _ = make_interceptor(resources, is_root=True)

        handled = await interceptor.classify(context, DialogResponse(message=text))

        assert handled is False
        assert context.sent == []
        assert context.waits == []
        assert context.done_results == []
        assert restarts == []

    @pytest.mark.asyncio
    async def test_structured_child_result_is_not_handled(self, resources, context):
        """Test that a child result without a message falls through."""
        interceptor, _, _ = make_interceptor(resources)

        handled = await interceptor.classify(
            context, DialogResponse(location="1 Main St")
        )

        assert handled is False
        assert context.done_results == []


class TestInterceptorTracking:
    """Tests for trace events of intercepted commands."""

    @pytest.mark.asyncio
    async def test_intercepted_command_is_tracked(self, resources, context, tracker):
        """Test that an intercepted command creates a TraceEvent."""
        interceptor, _, _ = make_interceptor(resources, tracker=tracker)

        await interceptor.classify(context, DialogResponse(message="Help"))

        events = await tracker.get_trace_events(event_types=["command_intercepted"])
        assert len(events) == 1
        assert events[0].actor == "dialog:test"
        assert events[0].data["command"] == "Help"
        assert events[0].data["is_root"] is False

    @pytest.mark.asyncio
    async def test_pass_through_is_not_tracked(self, resources, context, tracker):
        """Test that ordinary input creates no TraceEvent."""
        interceptor, _, _ = make_interceptor(resources, tracker=tracker)

        await interceptor.classify(context, DialogResponse(message="Paris"))

        assert await tracker.get_trace_events() == []
