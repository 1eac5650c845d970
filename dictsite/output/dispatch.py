"""Bounded task dispatch on a thread pool.

ThreadPoolExecutor queues every submitted task, so a large batch would be
held in memory all at once. BoundedDispatcher adds a slot semaphore in front
of the pool: dispatch() blocks while `max_workers` tasks are in flight, and
each finished task (successful or not) gives its slot back.
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Callable, List

from dictsite.common.logging import DEFAULT_PARALLEL_WORKERS


class BoundedDispatcher:
    """Run tasks on at most `max_workers` threads at a time.

    Usage:
        with BoundedDispatcher(4) as dispatcher:
            for item in items:
                dispatcher.dispatch(work, item)
            results = dispatcher.await_all()
    """

    def __init__(self, max_workers: int = DEFAULT_PARALLEL_WORKERS):
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.max_workers = max_workers
        self._slots = threading.BoundedSemaphore(max_workers)
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="render"
        )
        self._futures: List[Future] = []

    def __enter__(self) -> "BoundedDispatcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def __len__(self) -> int:
        return len(self._futures)

    def _release_slot(self, _fut: Future) -> None:
        self._slots.release()

    def dispatch(self, fn: Callable[..., Any], *args: Any) -> Future:
        """Start fn(*args) once a slot is free. Blocks until then."""
        self._slots.acquire()
        try:
            fut = self._executor.submit(fn, *args)
        except BaseException:
            self._slots.release()
            raise
        fut.add_done_callback(self._release_slot)
        self._futures.append(fut)
        return fut

    def await_all(self) -> List[Any]:
        """Block until every dispatched task has finished.

        Returns task results in dispatch order. If a task raised, the first
        such exception (in dispatch order) is re-raised once all tasks are done.
        """
        wait(self._futures)
        return [fut.result() for fut in self._futures]

    def shutdown(self) -> None:
        """Stop accepting tasks and wait for running ones."""
        self._executor.shutdown(wait=True)
