"""SIM implementation - hardcoded conversations exercising reserved commands."""

import asyncio
import random
from typing import Protocol

import httpx

from location_dialogs.logging_config import get_logger

logger = get_logger(__name__)

# Each script starts a conversation, then sends the remaining turns
SCRIPTS = {
    "user_001": ["hi", "1 Microsoft Way, Redmond, WA"],
    "user_002": ["hello", "help", "350 5th Ave, New York"],
    "user_003": ["hey", "Resetting my router", "reset", "cancel"],
}


class ISim(Protocol):
    """Generate test traffic against the messaging API."""

    async def start(self) -> None:
        """Start hardcoded scenario."""
        ...

    async def stop(self) -> None:
        """Stop scenario."""
        ...


class Sim:
    """SIM with hardcoded scenario for testing."""

    def __init__(
        self,
        api_url: str = "http://localhost:8000",
        scripts: dict[str, list[str]] | None = None,
        delay: tuple[float, float] = (1.0, 3.0),
    ):
        self._api_url = api_url
        self._scripts = scripts or SCRIPTS
        self._delay = delay
        self._running = False
        self._task: asyncio.Task | None = None
        self._client: httpx.AsyncClient | None = None

    async def start(self) -> None:
        """Start hardcoded scenario."""
        if self._running:
            return

        self._running = True
        self._client = httpx.AsyncClient()

        self._task = asyncio.create_task(self._run_scenario())

    async def stop(self) -> None:
        """Stop scenario."""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass

        if self._client:
            await self._client.aclose()

    async def _run_scenario(self) -> None:
        """Interleave the scripted users turn by turn."""
        rounds = max(len(turns) for turns in self._scripts.values())

        try:
            for i in range(rounds):
                for user_id, turns in self._scripts.items():
                    if not self._running:
                        return

                    if i < len(turns):
                        await self._send_message(user_id, turns[i])
                        await asyncio.sleep(random.uniform(*self._delay))

        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error("SIM scenario error: %s", e)

    async def _send_message(self, user_id: str, text: str) -> None:
        """Send a message via HTTP API."""
        if not self._client:
            return

        try:
            response = await self._client.post(
                f"{self._api_url}/api/messages",
                json={"user_id": user_id, "text": text},
                timeout=10.0,
            )

            if response.status_code == 200:
                data = response.json()
                logger.info("SIM: %s -> %s", user_id, text)
                for reply in data.get("replies", []):
                    logger.info("SIM: Reply: %s", reply)
                if data.get("completed"):
                    logger.info("SIM: %s finished with %s", user_id, data.get("result"))
            else:
                logger.error(
                    "SIM: Error sending message: %s",
                    response.status_code,
                )

        except Exception as e:
            logger.error("SIM: Failed to send message: %s", e)
