"""
Segmented sieve on a PyTorch device (CPU, CUDA or Apple Silicon MPS).

The mask lives on the device; base primes are sieved on the host and only the
surviving offsets are copied back.
"""

import math

import torch

from .base import Calculator, base_primes, check_range, first_multiple


def pick_device(name: str = "cpu") -> torch.device:
    """Resolve 'auto', 'cpu', 'cuda' or 'mps' to an available torch device."""
    if name == "auto":
        if torch.cuda.is_available():
            return torch.device("cuda")
        if torch.backends.mps.is_available():
            return torch.device("mps")
        return torch.device("cpu")
    if name == "cuda" and not torch.cuda.is_available():
        raise ValueError("CUDA device requested but not available")
    if name == "mps" and not torch.backends.mps.is_available():
        raise ValueError("MPS device requested but not available")
    return torch.device(name)


class TorchCalculator(Calculator):
    def __init__(self, device: str = "cpu"):
        self.device = pick_device(device)

    def primes_in_range(self, start: int, end: int) -> list[int]:
        check_range(start, end)

        mask = torch.ones(end - start + 1, dtype=torch.bool, device=self.device)
        if start == 1:
            mask[0] = False

        # Mark composites (strided stores on device)
        for p in base_primes(math.isqrt(end)):
            first = first_multiple(p, start)
            if first > end:
                continue
            mask[first - start::p] = False

        idx = torch.nonzero(mask, as_tuple=False).squeeze(1)
        return [start + i for i in idx.to("cpu").tolist()]

    def __repr__(self):
        return f"TorchCalculator(device={str(self.device)!r})"
