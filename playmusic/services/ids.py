"""Identifier generation for library records."""

import random
import threading
import time

RANDOM_RANGE = 10000


class IdGenerator:
    """Produces ids of the form ``<epoch-millis>-<random>``.

    The millisecond component never goes backwards within a process, and the ids
    handed out during the current millisecond are remembered so two calls in the
    same millisecond cannot return the same id.
    """

    def __init__(self, clock=None, rng: random.Random | None = None):
        self._clock = clock or time.time
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._last_ms = 0
        self._issued: set[int] = set()

    def __call__(self) -> str:
        with self._lock:
            now_ms = int(self._clock() * 1000)
            if now_ms > self._last_ms:
                self._last_ms = now_ms
                self._issued.clear()
            elif len(self._issued) >= RANDOM_RANGE:
                # Every suffix for this millisecond is taken
                self._last_ms += 1
                self._issued.clear()

            suffix = self._rng.randrange(RANDOM_RANGE)
            while suffix in self._issued:
                suffix = self._rng.randrange(RANDOM_RANGE)
            self._issued.add(suffix)
            return f"{self._last_ms}-{suffix}"


_default_generator = IdGenerator()


def generate_id() -> str:
    """Generate a new record id using the process-wide generator."""
    return _default_generator()
