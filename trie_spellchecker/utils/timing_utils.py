# timing_utils.py - small timing helpers

from functools import wraps
import time
from typing import Callable


def timed(func: Callable) -> Callable:
    """Decorator returns tuple: (result, elapsed seconds)"""
    @wraps(func)
    def _wrap(*a, **kw):
        t0 = time.perf_counter()
        res = func(*a, **kw)
        t1 = time.perf_counter()
        return res, (t1 - t0)
    return _wrap
