"""Messaging API routes."""

from typing import Any

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...app import IApplication


class MessageRequest(BaseModel):
    """Request model for sending a message."""

    user_id: str
    text: str | None = None


class DialogResultModel(BaseModel):
    """Result a conversation completed with."""

    message: str | None = None
    location: Any | None = None


class MessageResponse(BaseModel):
    """Response model for one turn.

    `started` is true when the message opened a new conversation. Its text is
    not read as an answer; the replies carry the first prompt.
    """

    replies: list[str]
    completed: bool
    result: DialogResultModel | None = None
    started: bool = False


def create_messaging_router(app: IApplication) -> APIRouter:
    """Create messaging router."""
    router = APIRouter(prefix="/api", tags=["messaging"])

    @router.post("/messages", response_model=MessageResponse)
    async def send_message(request: MessageRequest) -> dict:
        """Send a message to the user's conversation.

        With no active conversation the message only starts one and is not
        consumed as an answer. Send the answer in the next request.
        """
        try:
            turn = await app.handle_message(user_id=request.user_id, text=request.text)
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

        result = None
        if turn.result is not None:
            result = {"message": turn.result.message, "location": turn.result.location}
        return {
            "replies": turn.replies,
            "completed": turn.completed,
            "result": result,
            "started": turn.started,
        }

    return router
