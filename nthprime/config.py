"""Defaults for the generator and the command line, with environment overrides."""

import os

DEFAULT_WINDOW_SIZE = 1000
DEFAULT_METHOD = "eratosthenes"
DEFAULT_INDEX = 100

ENV_WINDOW_SIZE = "NTHPRIME_WINDOW_SIZE"
ENV_METHOD = "NTHPRIME_METHOD"


def load_defaults(environ=None) -> dict:
    """Return {'window_size', 'method'} with NTHPRIME_* overrides applied."""
    if environ is None:
        environ = os.environ

    window_size = DEFAULT_WINDOW_SIZE
    raw = environ.get(ENV_WINDOW_SIZE)
    if raw:
        try:
            window_size = int(raw)
        except ValueError:
            raise ValueError(
                f"{ENV_WINDOW_SIZE} must be an integer, got {raw!r}") from None
        if window_size < 2:
            raise ValueError(f"{ENV_WINDOW_SIZE} must be at least 2, got {raw}")

    method = environ.get(ENV_METHOD) or DEFAULT_METHOD

    return {"window_size": window_size, "method": method.lower()}
