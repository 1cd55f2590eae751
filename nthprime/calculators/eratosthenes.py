import math

from .base import Calculator, base_primes, check_range, first_multiple


class EratosthenesCalculator(Calculator):
    """Segmented Sieve of Eratosthenes in pure Python.

    Only the primes up to sqrt(end) are sieved in full; they are then used to
    cross off composites in [start, end], so memory is bounded by the size of
    the segment rather than by 'end'.
    """

    def primes_in_range(self, start: int, end: int) -> list[int]:
        check_range(start, end)

        size = end - start + 1
        is_prime = bytearray(b"\x01") * size
        if start == 1:
            is_prime[0] = 0

        for p in base_primes(math.isqrt(end)):
            first = first_multiple(p, start)
            if first > end:
                continue
            offset = first - start
            is_prime[offset::p] = b"\x00" * (((size - 1 - offset) // p) + 1)

        return [start + i for i, v in enumerate(is_prime) if v]
