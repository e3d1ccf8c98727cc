from __future__ import annotations

import functools
import logging
import time
from typing import Callable, TypeVar

F = TypeVar("F", bound=Callable)

logger = logging.getLogger(__name__)


def timeit(label: str) -> Callable[[F], F]:
    """Log the wall time of every call under `label`."""

    def deco(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            t0 = time.perf_counter()
            try:
                return fn(*args, **kwargs)
            finally:
                logger.info("%s took %.3fs", label, time.perf_counter() - t0)

        return wrapper  # type: ignore[return-value]

    return deco
