"""Shared fixtures for calculator and generator tests."""

import pytest

from nthprime.calculators import get_calculator


@pytest.fixture(params=["eratosthenes", "numpy", "torch"])
def calculator(request):
    """Every registered calculator; torch is skipped when it is not installed."""
    if request.param == "torch":
        pytest.importorskip("torch")
    return get_calculator(request.param)


class RecordingCalculator:
    """Wraps a calculator and remembers every window it was asked for."""

    def __init__(self, inner, hook=None):
        self.inner = inner
        self.hook = hook
        self.calls = []

    def primes_in_range(self, start, end):
        self.calls.append((start, end))
        if self.hook is not None:
            self.hook(len(self.calls))
        return self.inner.primes_in_range(start, end)


@pytest.fixture
def recording():
    return lambda hook=None: RecordingCalculator(
        get_calculator("eratosthenes"), hook)
