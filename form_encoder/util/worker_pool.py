"""Pool of reusable per-call encode workers"""

import contextlib
import logging
import threading
from typing import Callable, Iterator, Optional

logger = logging.getLogger(__name__)


class WorkerPool:
    """
    Hands out workers for exclusive use by one call at a time.

    The pool grows whenever every worker is busy. A worker is reset and
    returned when the acquiring block exits, including when it raises.

    Parameters:
        factory: builds a new worker; workers must provide reset()
        max_idle: how many idle workers to keep, None for no limit
    """

    def __init__(self, factory: Callable, max_idle: Optional[int] = None) -> None:
        self.factory = factory
        self.max_idle = max_idle
        self._idle: list = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._idle)

    @contextlib.contextmanager
    def acquire(self) -> Iterator:
        """Yields: a worker nobody else is using"""
        worker = None
        with self._lock:
            if self._idle:
                worker = self._idle.pop()
        if worker is None:
            worker = self.factory()
            logger.debug("Created encode worker %#x", id(worker))
        try:
            yield worker
        finally:
            worker.reset()
            with self._lock:
                if self.max_idle is None or len(self._idle) < self.max_idle:
                    self._idle.append(worker)
