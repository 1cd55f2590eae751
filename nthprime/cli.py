#!/usr/bin/env python3
"""
Find the prime at a given index.

Examples:
  # index 0 is 2, so this prints the 101st prime
  nthprime --index 100

  # give up after 5 seconds, sieve 100,000 numbers per window with NumPy
  nthprime --index 1000000 --timeout 5 --method numpy --window-size 100000

  # PyTorch backend on whatever accelerator is available
  nthprime --index 1000000 --method torch --device auto
"""

import argparse
import logging
import sys
import time

from .calculators import CALCULATORS, get_calculator
from .cancel import CancelSignal
from .config import DEFAULT_INDEX, load_defaults
from .errors import PrimeError
from .generator import PrimeGenerator

log = logging.getLogger(__name__)


def build_parser(defaults: dict) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="nthprime",
        description="Compute the prime at a zero-based index with a segmented sieve.")
    ap.add_argument("--method", default=defaults["method"],
                    choices=sorted(CALCULATORS),
                    help="Calculation method used to generate primes "
                    "(default: %(default)s).")
    ap.add_argument("--index", "-n", type=int, default=DEFAULT_INDEX,
                    help="Index of the prime to calculate, 0 is 2 "
                    "(default: %(default)s).")
    ap.add_argument("--timeout", type=float, default=None,
                    help="Seconds after which generation is cancelled "
                    "(default: no timeout).")
    ap.add_argument("--window-size", type=int,
                    default=defaults["window_size"],
                    help="Numbers sieved per window; windows narrower than a "
                    "prime gap stall (default: %(default)s).")
    ap.add_argument("--device", default="cpu",
                    choices=["auto", "cpu", "cuda", "mps"],
                    help="Device for the torch method (default: %(default)s).")
    g = ap.add_mutually_exclusive_group()
    g.add_argument("-v", "--verbose", action="store_true",
                   help="Log window progress.")
    g.add_argument("-q", "--quiet", action="store_true",
                   help="Only log errors.")
    return ap


def main(argv=None) -> int:
    try:
        defaults = load_defaults()
    except ValueError as exc:
        print(f"nthprime: {exc}", file=sys.stderr)
        return 2

    ap = build_parser(defaults)
    args = ap.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.INFO
    logging.basicConfig(level=level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.window_size < 2:
        ap.error("--window-size must be at least 2")

    options = {"device": args.device} if args.method == "torch" else {}
    try:
        calculator = get_calculator(args.method, **options)
    except (ImportError, ValueError) as exc:
        log.error("cannot use method %r: %s", args.method, exc)
        return 1

    cancel = None
    if args.timeout is not None and args.timeout > 0:
        cancel = CancelSignal.after(args.timeout)

    generator = PrimeGenerator(calculator, window_size=args.window_size)
    t0 = time.perf_counter()
    try:
        result = generator.prime_at_index(args.index, cancel)
    except PrimeError as exc:
        log.error("%s", exc)
        return 1
    finally:
        generator.close()
    dt = time.perf_counter() - t0

    log.debug("%s: %d windows, %d primes known, %.3fs", calculator,
              generator.windows, len(generator), dt)
    print(f"The {args.index} prime number is {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
