"""A thread barrier that also counts arrivals."""

import threading


class PBarrier:
    """Block ``num`` threads until all have arrived, tracking who is left."""

    def __init__(self, num):
        if num <= 0:
            raise ValueError("barrier size must be positive")
        self._barrier = threading.Barrier(num)
        self._wait_num = num
        self._lock = threading.Lock()

    def wait(self):
        """Record arrival and block until every party has arrived."""
        with self._lock:
            self._wait_num -= 1
        self._barrier.wait()

    def done(self):
        """Record arrival without blocking."""
        with self._lock:
            self._wait_num -= 1

    def ready(self):
        """Return True once every party has arrived."""
        return self._wait_num == 0

    def wait_num(self):
        """Return how many parties have not yet arrived."""
        return self._wait_num