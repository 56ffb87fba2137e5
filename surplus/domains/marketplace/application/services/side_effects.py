"""
Side-Effect Dispatcher

Runs notifier and rating calls in the background once a state change has
been committed, so a slow or failing collaborator never delays or undoes it.
"""

import asyncio
from collections.abc import Coroutine
from typing import Any

from surplus.core.shared.logger import get_service_logger

logger = get_service_logger("side_effects")


class SideEffectDispatcher:
    """
    Fire-and-forget scheduler for post-commit side effects.

    Keeps a strong reference to every in-flight task until it finishes and
    logs failures. Holds no domain state.

    Example:
        ```python
        dispatcher = SideEffectDispatcher()
        dispatcher.dispatch(notifier.notify_buyer(buyer_id, message), "notify buyer")
        await dispatcher.drain()  # on shutdown
        ```
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task[Any]] = set()
        self.failures = 0

    @property
    def pending(self) -> int:
        """Number of side effects still running."""
        return len(self._tasks)

    def dispatch(self, coro: Coroutine[Any, Any, Any], description: str) -> asyncio.Task[Any]:
        """
        Schedule a side effect on the running loop.

        Args:
            coro: Collaborator call to run
            description: Short label used in failure logs

        Returns:
            The scheduled task
        """
        task = asyncio.create_task(coro, name=f"side-effect:{description}")
        self._tasks.add(task)
        task.add_done_callback(lambda done: self._on_done(done, description))
        return task

    def _on_done(self, task: asyncio.Task[Any], description: str) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logger.warning("Side effect cancelled", side_effect=description)
            return
        error = task.exception()
        if error is not None:
            self.failures += 1
            logger.warning(
                f"Side effect failed: {error!r}",
                side_effect=description,
                error_type=type(error).__name__,
            )

    async def drain(self) -> None:
        """Wait until every scheduled side effect has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)


__all__ = ["SideEffectDispatcher"]
