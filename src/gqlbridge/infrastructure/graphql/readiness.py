"""Start-once readiness gate for asynchronous initialisation."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class ReadinessGate:
    """Runs ``startup`` exactly once; every caller awaits the same run.

    The first caller schedules the startup task. Concurrent and later callers
    await that task, shielded so a cancelled caller does not cancel startup
    for the others. A failed startup is not retried: every caller sees the
    same exception.
    """

    def __init__(self, startup: Callable[[], Awaitable[None]]) -> None:
        self._startup = startup
        self._task: asyncio.Future[None] | None = None

    @property
    def done(self) -> bool:
        """True once startup completed successfully."""
        task = self._task
        return (
            task is not None
            and task.done()
            and not task.cancelled()
            and task.exception() is None
        )

    async def wait(self) -> None:
        if self._task is None:
            logger.debug("Starting up")
            self._task = asyncio.ensure_future(self._startup())
        if not self._task.done():
            await asyncio.shield(self._task)
        self._task.result()
