"""
Rotating status phrases shown while a brand bible is being generated.

Purely cosmetic: the ticker never affects the result. It lives exactly as
long as the ``async with`` block that owns it and is cancelled on every exit
path, so no timer outlives the operation.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Sequence

from . import config

logger = logging.getLogger(__name__)

StatusCallback = Callable[[str], None]

LOADING_MESSAGES = (
    "Analyzing your mission...",
    "Crafting brand strategy...",
    "Designing logo concepts...",
    "Mixing the perfect color palette...",
    "Pairing elegant fonts...",
    "Finalizing your brand bible...",
)


class StatusTicker:
    """Publishes ``messages`` in a loop, one every ``interval`` seconds."""

    def __init__(
        self,
        on_status: Optional[StatusCallback],
        messages: Sequence[str] = LOADING_MESSAGES,
        interval: Optional[float] = None,
    ) -> None:
        if not messages:
            raise ValueError("StatusTicker needs at least one message")
        self.on_status = on_status
        self.messages = tuple(messages)
        self.interval = interval if interval is not None else config.get_status_interval()
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def __aenter__(self) -> "StatusTicker":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

    def start(self) -> None:
        if self.on_status is None or self.running:
            return
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _run(self) -> None:
        index = 0
        while True:
            self._publish(self.messages[index % len(self.messages)])
            index += 1
            await asyncio.sleep(self.interval)

    def _publish(self, message: str) -> None:
        try:
            self.on_status(message)
        except Exception:
            logger.debug("status callback failed", exc_info=True)
