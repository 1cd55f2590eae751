from .calculators import (Calculator, EratosthenesCalculator, NumpyCalculator,
                          get_calculator)
from .cancel import CancelSignal
from .errors import (CalculatorError, Cancelled, GenerationStalled,
                     InvalidIndex, InvalidRange, PrimeError)
from .generator import PrimeGenerator

__version__ = "0.1.0"
