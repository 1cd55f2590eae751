"""
Incremental prime generation on top of a range calculator.

The generator keeps every prime it has found, in order, so ``cache[i]`` is the
i-th prime. A query for an unknown index sieves fixed-size windows starting
right after the largest known prime and appends their primes until the index
is covered. The cache only grows; nothing is recomputed.

Cancellation is checked between windows: a window that is being sieved when
the signal fires runs to completion and its primes are kept, and no further
window is started.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

from .calculators import MAX_INT64, Calculator
from .cancel import CancelSignal
from .config import DEFAULT_WINDOW_SIZE
from .errors import (CalculatorError, Cancelled, GenerationStalled,
                     InvalidIndex)

log = logging.getLogger(__name__)

# how often a caller blocked behind another query re-checks its own signal
LOCK_POLL_INTERVAL = 0.05


class PrimeGenerator:
    """Answers "which prime sits at index k" from a growing cache.

    Only one query generates at a time. Other callers that miss the cache
    block until the running query finishes (or their own cancel signal
    fires), then continue from whatever the first one appended. Cache hits
    never block.

    A window narrower than the prime gaps it crosses can hold no prime and
    raises GenerationStalled; keep window_size well above the largest gap
    below the primes you ask for. The default of 1000 is wider than every
    prime gap below 10**15.
    """

    def __init__(self,
                 calculator: Calculator,
                 window_size: int = DEFAULT_WINDOW_SIZE):
        if window_size < 2:
            raise ValueError(f"window size must be at least 2, got {window_size}")
        self.calculator = calculator
        self._window_size = window_size
        self._primes: list[int] = []
        self._lock = threading.Lock()
        self._executor = ThreadPoolExecutor(max_workers=1,
                                            thread_name_prefix="nthprime")
        self.windows = 0

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def primes(self) -> tuple:
        """Snapshot of every prime found so far."""
        return tuple(self._primes)

    def __len__(self):
        return len(self._primes)

    def prime_at_index(self,
                       index: int,
                       cancel: Optional[CancelSignal] = None) -> int:
        """Return the prime at zero-based 'index' (index 0 is 2).

        Raises InvalidIndex for a negative index, Cancelled if 'cancel' fires
        first, GenerationStalled if a window yields no primes and
        CalculatorError if the calculator fails.
        """
        if index < 0:
            raise InvalidIndex(index)

        primes = self._primes
        if index < len(primes):
            log.debug("cache hit for index %d", index)
            return primes[index]

        self._acquire(index, cancel)
        try:
            return self._generate(index, cancel)
        finally:
            self._lock.release()

    def submit(self,
               index: int,
               cancel: Optional[CancelSignal] = None) -> Future:
        """Run prime_at_index on the generator's worker thread.

        Submitted queries run one at a time in submission order. The caller
        never touches the cache while the worker owns it; the result (or the
        error) arrives through the returned future.
        """
        return self._executor.submit(self.prime_at_index, index, cancel)

    def close(self, wait: bool = True):
        self._executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _acquire(self, index, cancel):
        if cancel is None:
            self._lock.acquire()
            return
        while not self._lock.acquire(timeout=LOCK_POLL_INTERVAL):
            if cancel.cancelled:
                log.info("query for index %d cancelled while waiting (%s)",
                         index, cancel.reason)
                raise Cancelled(index, len(self._primes), cancel.reason)

    def _generate(self, index, cancel):
        primes = self._primes

        # another query may have covered the index while we waited
        if index < len(primes):
            return primes[index]

        window_start = primes[-1] + 1 if primes else 2
        while True:
            if cancel is not None and cancel.cancelled:
                log.info("query for index %d stopped with %d primes known (%s)",
                         index, len(primes), cancel.reason)
                raise Cancelled(index, len(primes), cancel.reason)

            if window_start > MAX_INT64:
                raise GenerationStalled(window_start, window_start,
                                        "window leaves the signed 64-bit range")
            window_end = min(window_start + self._window_size - 1, MAX_INT64)

            try:
                found = self.calculator.primes_in_range(window_start, window_end)
            except Exception as exc:
                raise CalculatorError(window_start, window_end, exc) from exc
            self.windows += 1

            if not found:
                log.error("window [%d, %d] produced no primes", window_start,
                          window_end)
                raise GenerationStalled(window_start, window_end)

            primes.extend(found)
            log.debug("window [%d, %d] added %d primes, %d known", window_start,
                      window_end, len(found), len(primes))

            if len(primes) > index:
                return primes[index]

            window_start = window_end + 1
