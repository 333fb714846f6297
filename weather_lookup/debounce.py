# ABOUTME: Asyncio debounce timer used for suggestion lookups.
# ABOUTME: Rescheduling cancels a timer that is still waiting; a call that already started is left alone.

import asyncio
from collections.abc import Awaitable, Callable


class Debouncer:
    """Run an async callable once the caller has been quiet for `delay` seconds."""

    def __init__(self, delay: float):
        self.delay = delay
        self._task: asyncio.Task | None = None
        self._fired = False

    @property
    def pending(self) -> bool:
        """True while a timer is counting down and has not yet called its function."""
        return self._task is not None and not self._task.done() and not self._fired

    def schedule(self, func: Callable[[], Awaitable[None]]) -> None:
        self.cancel()
        self._fired = False
        self._task = asyncio.create_task(self._run(func))

    def cancel(self) -> None:
        if self.pending:
            self._task.cancel()

    async def wait(self) -> None:
        """Wait until the current timer has been cancelled or its call has finished."""
        task = self._task
        if task is not None:
            await asyncio.wait({task})

    async def _run(self, func: Callable[[], Awaitable[None]]) -> None:
        await asyncio.sleep(self.delay)
        self._fired = True
        await func()
