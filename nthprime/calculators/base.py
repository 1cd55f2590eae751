import functools
import math
from abc import ABC, abstractmethod

from ..errors import InvalidRange

MAX_INT64 = 2**63 - 1


# consecutive windows high up the number line share sqrt(end), so the last
# few base sieves are kept
@functools.lru_cache(maxsize=8)
def base_primes(limit: int) -> tuple:
    """Plain Sieve of Eratosthenes, returns every prime <= 'limit'."""
    if limit < 2:
        return ()
    size = limit + 1
    is_prime = bytearray(b"\x01") * size
    is_prime[0:2] = b"\x00\x00"
    for p in range(2, math.isqrt(limit) + 1):
        if is_prime[p]:
            start = p * p
            is_prime[start:size:p] = b"\x00" * (((size - 1 - start) // p) + 1)
    return tuple(i for i, v in enumerate(is_prime) if v)


def first_multiple(p: int, start: int) -> int:
    """Smallest multiple of p that is >= start and >= p*p."""
    return max(p * p, ((start + p - 1) // p) * p)


def check_range(start: int, end: int) -> None:
    if start <= 0:
        raise InvalidRange(start, end, "start must be a positive number")
    if start > end:
        raise InvalidRange(start, end, "start must not exceed end")
    if end > MAX_INT64:
        raise InvalidRange(start, end, "end exceeds the signed 64-bit range")


class Calculator(ABC):
    """A prime calculator returns every prime of a closed range.

    Implementations keep no state between calls and may be shared between
    threads and generators.
    """

    @abstractmethod
    def primes_in_range(self, start: int, end: int) -> list[int]:
        """Return the primes p with start <= p <= end, ascending.

        Raises InvalidRange if start <= 0, start > end or end does not fit
        in a signed 64-bit integer.
        """

    def __repr__(self):
        return f"{type(self).__name__}()"
