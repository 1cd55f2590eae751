"""Exceptions raised by the prime calculators and the generator."""


class PrimeError(Exception):
    """Base class for every error raised by nthprime."""


class InvalidRange(PrimeError, ValueError):
    def __init__(self, start: int, end: int, reason: str):
        super().__init__(f"invalid range [{start}, {end}]: {reason}")
        self.start = start
        self.end = end


class InvalidIndex(PrimeError, ValueError):
    def __init__(self, index: int):
        super().__init__(f"index must be a non-negative number, got {index}")
        self.index = index


class Cancelled(PrimeError):
    """The cancel signal fired before the requested index was reached.

    ``known`` is the number of primes cached when generation stopped; that
    progress is kept and reused by the next call.
    """

    def __init__(self, index: int, known: int, reason: str = "cancelled"):
        super().__init__(
            f"{reason} before prime #{index} was found ({known} primes known)")
        self.index = index
        self.known = known
        self.reason = reason


class GenerationStalled(PrimeError):
    def __init__(self, start: int, end: int, reason: str = "no primes found"):
        super().__init__(f"generation stalled in window [{start}, {end}]: "
                         f"{reason}")
        self.start = start
        self.end = end


class CalculatorError(PrimeError):
    """A calculator failed while sieving a window; the cause is chained."""

    def __init__(self, start: int, end: int, error: BaseException):
        super().__init__(
            f"error generating primes in range [{start}, {end}]: {error}")
        self.start = start
        self.end = end
