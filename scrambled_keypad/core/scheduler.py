"""
Schedulers for the scramble timers.

ManualScheduler keeps a virtual clock that tests advance synchronously.
The tkinter-backed scheduler lives in scrambled_keypad.ui.tk_scheduler.
"""
import heapq
import itertools
from typing import Callable, List, Tuple

from scrambled_keypad.core.interfaces import IScheduler


class ManualScheduler(IScheduler):
    """
    Virtual-time scheduler.

    Callbacks fire in due-time order (ties in scheduling order) when
    ``advance()`` moves the clock past their due time.
    """

    def __init__(self):
        self.now_ms = 0
        self._seq = itertools.count()
        self._queue: List[Tuple[int, int, Callable[[], None]]] = []
        self._cancelled = set()

    def call_later(self, delay_ms, callback):
        handle = next(self._seq)
        heapq.heappush(self._queue, (self.now_ms + max(0, delay_ms), handle, callback))
        return handle

    def cancel(self, handle):
        self._cancelled.add(handle)

    @property
    def pending(self) -> int:
        return sum(1 for _, h, _ in self._queue if h not in self._cancelled)

    def advance(self, delta_ms):
        """Move the clock forward, running everything that falls due."""
        target = self.now_ms + delta_ms
        while self._queue and self._queue[0][0] <= target:
            due, handle, callback = heapq.heappop(self._queue)
            if handle in self._cancelled:
                self._cancelled.discard(handle)
                continue
            self.now_ms = due
            callback()
        self.now_ms = target

    def run_all(self):
        """Drain the queue, including callbacks scheduled while draining."""
        while self.pending:
            self.advance(self._queue[0][0] - self.now_ms)
