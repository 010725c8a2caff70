"""Fixed-width unsigned integers with atomic read-modify-write operations."""

import threading

_SUPPORTED_BITS = (8, 16, 32, 64)
_PAIR_BITS = (32, 64)


class AtomicInt:
    """An unsigned integer of 8, 16, 32 or 64 bits whose updates are atomic.

    Arithmetic wraps around modulo ``2 ** bits``, as a machine word does.
    """

    def __init__(self, value=0, bits=64):
        if bits not in _SUPPORTED_BITS:
            raise ValueError(f"unsupported data size: {bits}")
        self.bits = bits
        self._mask = (1 << bits) - 1
        self._value = value & self._mask
        self._lock = threading.Lock()

    def __repr__(self):
        return f"AtomicInt({self._value}, bits={self.bits})"

    def value(self):
        """Return the current value."""
        with self._lock:
            return self._value

    def inc(self):
        """Add one."""
        with self._lock:
            self._value = (self._value + 1) & self._mask

    def dec(self):
        """Subtract one."""
        with self._lock:
            self._value = (self._value - 1) & self._mask

    def add(self, val):
        """Add ``val``."""
        with self._lock:
            self._value = (self._value + val) & self._mask

    def cmpxchg(self, oldval, newval):
        """Store ``newval`` if the value equals ``oldval``.

        Returns the value held before the call; the swap happened when that
        equals ``oldval``.
        """
        oldval &= self._mask
        with self._lock:
            previous = self._value
            if previous == oldval:
                self._value = newval & self._mask
            return previous

    def xchg(self, val):
        """Store ``val`` and return the previous value."""
        with self._lock:
            previous = self._value
            self._value = val & self._mask
            return previous

    def and_(self, mask):
        """Bitwise-and the value with ``mask``."""
        with self._lock:
            self._value &= mask & self._mask

    def or_(self, mask):
        """Bitwise-or the value with ``mask``."""
        with self._lock:
            self._value = (self._value | mask) & self._mask

    def fetch_and_add(self, val):
        """Add ``val`` and return the value held before the addition."""
        with self._lock:
            previous = self._value
            self._value = (previous + val) & self._mask
            return previous


class AtomicPair:
    """Two adjacent words of 32 or 64 bits compared and swapped together."""

    def __init__(self, first=0, second=0, bits=64):
        if bits not in _PAIR_BITS:
            raise ValueError(f"unsupported data size: {bits}")
        self.bits = bits
        self._mask = (1 << bits) - 1
        self._words = (first & self._mask, second & self._mask)
        self._lock = threading.Lock()

    def __repr__(self):
        first, second = self._words
        return f"AtomicPair({first}, {second}, bits={self.bits})"

    def value(self):
        """Return both words as a tuple."""
        with self._lock:
            return self._words

    def cmpxchg(self, old0, old1, new0, new1):
        """Replace both words if they equal ``(old0, old1)``.

        Returns True when the swap happened.
        """
        expected = (old0 & self._mask, old1 & self._mask)
        with self._lock:
            if self._words != expected:
                return False
            self._words = (new0 & self._mask, new1 & self._mask)
            return True