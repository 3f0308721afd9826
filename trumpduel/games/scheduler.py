'''
    File name: trumpduel/games/scheduler.py
    Date created: 10/05/2026
    Date last modified: 10/19/2026
    Python Version: 3.9+
'''

import heapq
import itertools
import time
from typing import Any, Callable, List, Tuple


class TaskScheduler:
    """
    Runs delayed engine steps one at a time, ordered by due time and then by scheduling order.
    Nothing runs on its own: the owner calls run_pending() from its loop or run_all() to fast-forward.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """
        Initializes TaskScheduler.
        """

        self.clock: Callable[[], float] = clock
        self._queue: List[Tuple[float, int, Callable, tuple]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> None:
        """
        Schedules a callback to run after delay seconds.
        """

        due = self.clock() + max(0.0, delay)
        heapq.heappush(self._queue, (due, next(self._counter), callback, args))

    def has_pending(self) -> bool:
        return bool(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def run_pending(self) -> int:
        """
        Runs every task that is due now. Returns the number of tasks run.
        """

        count = 0
        while self._queue and self._queue[0][0] <= self.clock():
            _, _, callback, args = heapq.heappop(self._queue)
            callback(*args)
            count += 1

        return count

    def run_all(self, max_tasks: int = 10000) -> int:
        """
        Runs all tasks regardless of their due time, including tasks scheduled meanwhile.
        """

        count = 0
        while self._queue:
            assert count < max_tasks, "Scheduler did not settle, tasks keep rescheduling themselves."
            _, _, callback, args = heapq.heappop(self._queue)
            callback(*args)
            count += 1

        return count
