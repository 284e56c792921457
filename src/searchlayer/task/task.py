"""Task handles — Caller-facing handles for asynchronous engine operations.

Engines acknowledge writes as soon as they are enqueued and apply them
later. A task handle lets a caller opt into waiting until the operation is
actually applied::

    task = await engine.save_document("blog", doc, return_slow_promise_result=True)
    await task.wait()
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Iterable
from typing import Any


class TaskInterface(ABC):
    """A pending (or already finished) operation."""

    @abstractmethod
    async def wait(self) -> Any:
        """Block until the operation is done and return its result.

        Errors raised while waiting propagate to the caller.
        """


class SyncTask(TaskInterface):
    """A task whose result is already known."""

    def __init__(self, result: Any = None) -> None:
        self._result = result

    async def wait(self) -> Any:
        return self._result


class AsyncTask(TaskInterface):
    """A task resolved by calling a deferred async callback.

    The callback runs on every ``wait()``; the handle keeps no retry or
    completion state of its own.
    """

    def __init__(self, callback: Callable[[], Awaitable[Any]]) -> None:
        self._callback = callback

    async def wait(self) -> Any:
        return await self._callback()


class TaskHelper:
    """Collects task handles and waits for all of them concurrently.

    ``None`` entries (fire-and-forget writes) are skipped. The collected tasks
    are kept, so waiting again waits on every one of them again.
    """

    def __init__(self, tasks: Iterable[TaskInterface | None] = ()) -> None:
        self.tasks: list[TaskInterface | None] = list(tasks)

    def add(self, task: TaskInterface | None) -> None:
        self.tasks.append(task)

    async def wait_for_all(self) -> list[Any]:
        pending = [task for task in self.tasks if task is not None]
        return list(await asyncio.gather(*(task.wait() for task in pending)))
