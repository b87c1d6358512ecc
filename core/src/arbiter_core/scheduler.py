"""Delayed coordinator replies, delivered in a deterministic order."""

from __future__ import annotations

import asyncio
import heapq
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .transcript import Message

log = logging.getLogger(__name__)

Deliver = Callable[[str, tuple[str, ...]], Message]


@dataclass(order=True)
class _Scheduled:
    due: float
    seq: int = field(compare=True)
    content: str = field(compare=False)
    options: tuple[str, ...] = field(compare=False)
    future: asyncio.Future = field(compare=False)


class ReplyScheduler:
    """Single worker that appends replies once their delay has passed.

    Replies come out in due-time order; replies due at the same moment
    come out in the order they were scheduled. Delivery happens on the
    event loop between turns, so a reply never lands inside a turn that
    is being processed synchronously.

    Usage:
        scheduler = ReplyScheduler(transcript.add_coordinator)
        future = scheduler.schedule("hello", delay=0.5)
        message = await future
    """

    def __init__(self, deliver: Deliver) -> None:
        self._deliver = deliver
        self._heap: list[_Scheduled] = []
        self._seq = 0
        self._wakeup: asyncio.Event | None = None
        self._task: asyncio.Task | None = None
        self._running = False

    @property
    def pending(self) -> int:
        return len(self._heap)

    def schedule(
        self,
        content: str,
        delay: float = 0.0,
        options: Sequence[str] = (),
    ) -> asyncio.Future[Message]:
        """Queue *content* for delivery after *delay* seconds.

        Must be called while an event loop is running. The returned future
        resolves to the appended message.
        """
        loop = asyncio.get_running_loop()
        future: asyncio.Future[Message] = loop.create_future()
        self._seq += 1
        item = _Scheduled(
            due=loop.time() + max(delay, 0.0),
            seq=self._seq,
            content=content,
            options=tuple(options),
            future=future,
        )
        heapq.heappush(self._heap, item)
        self._ensure_running(loop)
        self._wakeup.set()
        return future

    async def drain(self) -> None:
        """Wait until every reply scheduled so far has been delivered."""
        futures = [item.future for item in self._heap]
        if futures:
            await asyncio.gather(*futures, return_exceptions=True)

    async def run(self) -> None:
        """Deliver due replies. Run this as a background task."""
        loop = asyncio.get_running_loop()
        if self._wakeup is None:
            self._wakeup = asyncio.Event()
        self._running = True
        try:
            while self._running:
                if not self._heap:
                    self._wakeup.clear()
                    await self._wakeup.wait()
                    continue
                wait = self._heap[0].due - loop.time()
                if wait > 0:
                    self._wakeup.clear()
                    try:
                        await asyncio.wait_for(self._wakeup.wait(), timeout=wait)
                    except asyncio.TimeoutError:
                        pass
                    continue
                self._deliver_item(heapq.heappop(self._heap))
        except asyncio.CancelledError:
            self._running = False

    def _deliver_item(self, item: _Scheduled) -> None:
        if item.future.done():
            return
        try:
            message = self._deliver(item.content, item.options)
        except Exception as exc:
            log.exception("failed to deliver scheduled reply")
            item.future.set_exception(exc)
            return
        item.future.set_result(message)

    def _ensure_running(self, loop: asyncio.AbstractEventLoop) -> None:
        if self._wakeup is None:
            self._wakeup = asyncio.Event()
        if self._running or (self._task is not None and not self._task.done()):
            return
        self._task = loop.create_task(self.run())

    def stop(self) -> None:
        """Stop the worker and cancel replies that have not been delivered."""
        self._running = False
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        while self._heap:
            item = heapq.heappop(self._heap)
            if not item.future.done():
                item.future.cancel()
