"""A fixed pool of worker threads applying one function to queued items."""

from __future__ import annotations

import queue
import threading
from collections import deque
from collections.abc import Callable
from typing import Generic, TypeVar

from fragsynth.constants import THREAD_POOL_SIZE

In = TypeVar("In")
Out = TypeVar("Out")

_POLL_SECONDS = 0.05


class ThreadPool(Generic[In, Out]):
    """Workers take items from an input queue and append results to an output queue.

    Closing stops the workers once their current item is done; items not yet
    taken stay in the input queue.
    """

    def __init__(
        self, process: Callable[[In], Out], num_threads: int = THREAD_POOL_SIZE
    ) -> None:
        if num_threads < 1:
            raise ValueError("a thread pool needs at least one thread")
        self._process = process
        self._in: queue.Queue[In] = queue.Queue()
        self._out: deque[Out] = deque()
        self._out_lock = threading.Lock()
        self._stop = threading.Event()
        self._errors: list[Exception] = []
        self._workers = [
            threading.Thread(target=self._work, name=f"pool-worker-{n}", daemon=True)
            for n in range(num_threads)
        ]
        for worker in self._workers:
            worker.start()

    @property
    def num_threads(self) -> int:
        return len(self._workers)

    def _work(self) -> None:
        while not self._stop.is_set():
            try:
                item = self._in.get(timeout=_POLL_SECONDS)
            except queue.Empty:
                continue
            try:
                result = self._process(item)
            except Exception as error:  # noqa: BLE001 - reported on close
                with self._out_lock:
                    self._errors.append(error)
                continue
            with self._out_lock:
                self._out.append(result)

    def push(self, item: In) -> None:
        """Queue an item for processing."""
        self._in.put(item)

    def in_queue_size(self) -> int:
        """Return the number of items not yet taken by a worker."""
        return self._in.qsize()

    def out_queue_size(self) -> int:
        """Return the number of finished results waiting to be read."""
        with self._out_lock:
            return len(self._out)

    def front(self) -> Out:
        """Return the oldest finished result without removing it."""
        with self._out_lock:
            if not self._out:
                raise IndexError("no finished results")
            return self._out[0]

    def pop(self) -> None:
        """Remove the oldest finished result."""
        with self._out_lock:
            if not self._out:
                raise IndexError("no finished results")
            self._out.popleft()

    def close(self) -> None:
        """Stop the workers and wait for them; re-raise the first processing error."""
        self._stop.set()
        for worker in self._workers:
            worker.join()
        with self._out_lock:
            errors, self._errors = self._errors, []
        if errors:
            raise errors[0]

    def __enter__(self) -> ThreadPool[In, Out]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"ThreadPool(num_threads={self.num_threads}, "
            f"in_queue={self.in_queue_size()}, out_queue={self.out_queue_size()})"
        )