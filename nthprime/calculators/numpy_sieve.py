import math

import numpy as np

from .base import Calculator, base_primes, check_range, first_multiple


class NumpyCalculator(Calculator):
    """Segmented sieve with a NumPy mask and vectorized strided clears.

    Offsets are computed with Python ints before indexing, so p*p and the
    first-multiple arithmetic never overflow int64 near the top of the range.
    """

    def primes_in_range(self, start: int, end: int) -> list[int]:
        check_range(start, end)

        mask = np.ones(end - start + 1, dtype=bool)
        if start == 1:
            mask[0] = False

        for p in base_primes(math.isqrt(end)):
            first = first_multiple(p, start)
            if first > end:
                continue
            mask[first - start::p] = False  # vectorized strided clear

        # offsets stay small, add start as Python ints
        return [start + int(i) for i in np.flatnonzero(mask)]
