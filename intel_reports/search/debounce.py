"""Cancellable debounce handle with latest-ticket tracking."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Owns one pending delayed call and the ticket of the latest issued call.

    Scheduling a new call cancels the pending one and issues a new ticket.
    Work started by an older call can check is_current(ticket) before it
    publishes anything, so a slow response never overwrites a fresher one.
    """

    def __init__(self, delay_seconds: float):
        self.delay_seconds = delay_seconds
        self._pending: Optional[asyncio.Task] = None
        self._latest_ticket = 0

    @property
    def latest_ticket(self) -> int:
        return self._latest_ticket

    @property
    def pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def is_current(self, ticket: int) -> bool:
        return ticket == self._latest_ticket

    def cancel(self) -> int:
        """Cancel the pending call and invalidate every ticket issued so far."""
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None
        self._latest_ticket += 1
        return self._latest_ticket

    def schedule(self, call: Callable[[int], Awaitable[None]]) -> int:
        """
        Run call(ticket) after the quiet period, superseding any pending call.

        Must be called from within a running event loop.
        """
        ticket = self.cancel()
        loop = asyncio.get_running_loop()
        self._pending = loop.create_task(self._run(ticket, call))
        return ticket

    async def _run(self, ticket: int, call: Callable[[int], Awaitable[None]]):
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        await call(ticket)

    async def wait(self):
        """Wait for the pending call, if any, to finish or be cancelled."""
        task = self._pending
        if task is not None and not task.done():
            await asyncio.wait({task})
