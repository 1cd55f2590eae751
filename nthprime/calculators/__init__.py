import importlib

from .base import MAX_INT64, Calculator, base_primes, check_range
from .eratosthenes import EratosthenesCalculator
from .numpy_sieve import NumpyCalculator

# method name -> "module:class"; modules are imported when first selected so
# the optional torch backend costs nothing unless it is asked for.
CALCULATORS = {
    "eratosthenes": "nthprime.calculators.eratosthenes:EratosthenesCalculator",
    "numpy": "nthprime.calculators.numpy_sieve:NumpyCalculator",
    "torch": "nthprime.calculators.torch_sieve:TorchCalculator",
}


def get_calculator(name: str, **options) -> Calculator:
    """Build the calculator registered under 'name'."""
    try:
        target = CALCULATORS[name.lower()]
    except KeyError:
        raise ValueError(f"unknown calculation method {name!r}, "
                         f"choose from {', '.join(sorted(CALCULATORS))}") from None
    module_name, cls_name = target.split(":")
    cls = getattr(importlib.import_module(module_name), cls_name)
    return cls(**options)


__all__ = [
    "CALCULATORS", "MAX_INT64", "Calculator", "EratosthenesCalculator",
    "NumpyCalculator", "base_primes", "check_range", "get_calculator"
]
