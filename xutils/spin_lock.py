"""A busy-waiting mutual-exclusion lock."""

import time

from .atomic import AtomicInt


def cpu_relax():
    """Yield the processor briefly while spinning."""
    time.sleep(0)


class SpinLock:
    """A lock that spins until it is free. State 0 is free, 1 is busy."""

    def __init__(self):
        self._state = AtomicInt(0, 16)

    def lock(self):
        """Acquire the lock, spinning until it is available."""
        while True:
            if not self._state.xchg(1):
                return
            while self._state.value():
                cpu_relax()

    def unlock(self):
        """Release the lock."""
        self._state.xchg(0)

    def try_lock(self):
        """Try once to take the lock; returns the previous state (0 = acquired)."""
        return self._state.xchg(1)

    def is_locked(self):
        """Return the current state: 0 when free, 1 when held."""
        return self._state.value()

    def __enter__(self):
        self.lock()
        return self

    def __exit__(self, *args):
        self.unlock()
        return False