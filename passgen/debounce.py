"""Coalesce bursts of triggers into a single delayed call."""

import asyncio
import inspect
from typing import Any, Callable

from loguru import logger


class Debouncer:
    """Delay an action until *delay* seconds pass without a new trigger.

    Each instance holds at most one pending timer; scheduling again replaces
    it.  Coroutine actions run as tasks tracked until they finish.  After
    :meth:`dispose` nothing fires and new triggers are ignored.

    Must be used from within a running event loop.
    """

    def __init__(self, delay: float, *, name: str = "debounce"):
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self.delay = delay
        self.name = name
        self._handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task] = set()
        self._disposed = False

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def disposed(self) -> bool:
        return self._disposed

    def schedule(self, action: Callable[..., Any], *args: Any) -> None:
        """Arm the timer for ``action(*args)``, cancelling any pending one."""
        if self._disposed:
            logger.debug(f"{self.name}: ignoring trigger after dispose")
            return
        loop = asyncio.get_running_loop()
        self.cancel()
        self._handle = loop.call_later(self.delay, self._fire, action, args)

    def cancel(self) -> None:
        """Drop the pending timer, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def dispose(self) -> None:
        self.cancel()
        self._disposed = True

    async def join(self) -> None:
        """Wait until no timer is pending and every fired action finished."""
        loop = asyncio.get_running_loop()
        while self._handle is not None or self._tasks:
            if self._tasks:
                await asyncio.gather(*self._tasks, return_exceptions=True)
            else:
                await asyncio.sleep(max(0.0, self._handle.when() - loop.time()))

    def _fire(self, action: Callable[..., Any], args: tuple) -> None:
        self._handle = None
        try:
            result = action(*args)
        except Exception:
            logger.exception(f"{self.name}: action failed")
            return
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._tasks.add(task)
            task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.opt(exception=task.exception()).error(
                f"{self.name}: action failed"
            )

    async def __aenter__(self) -> "Debouncer":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.dispose()
