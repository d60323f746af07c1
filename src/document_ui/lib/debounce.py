"""
Trailing-edge debounce for asyncio callbacks.

A Debouncer wraps an async callback. Every call cancels the pending
invocation (if any) and schedules a new one after the delay, so only the
last call in a burst reaches the callback. Awaiting a call tells the caller
whether its invocation actually ran or was superseded by a later one.
"""

import asyncio
from typing import Any, Awaitable, Callable

from document_ui.lib import logs

LOG = logs.logger(__file__)


class Debouncer:
    """
    Cancellable scheduled task that fires an async callback after a quiet period.

    Attributes:
        delay: Quiet period in seconds before the callback runs.
    """

    def __init__(self, callback: Callable[..., Awaitable[Any]], delay: float) -> None:
        self.delay = delay
        self._callback = callback
        self._task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        """True while an invocation is scheduled but has not finished."""
        return self._task is not None and not self._task.done()

    async def __call__(self, *args: Any) -> bool:
        """
        Schedule the callback with the given arguments.

        Returns:
            True if this invocation ran the callback, False if it was
            cancelled by a later call or by cancel().
        """
        self.cancel()
        task = asyncio.ensure_future(self._fire(args))
        self._task = task
        try:
            await asyncio.wait({task})
        except asyncio.CancelledError:
            task.cancel()
            raise
        finally:
            if self._task is task and task.done():
                self._task = None
        if task.cancelled():
            return False
        task.result()
        return True

    def cancel(self) -> None:
        """Cancel the scheduled invocation, if any."""
        if self.pending:
            LOG.debug("Debounced call superseded")
            self._task.cancel()
        self._task = None

    async def _fire(self, args: tuple) -> None:
        await asyncio.sleep(self.delay)
        await self._callback(*args)
