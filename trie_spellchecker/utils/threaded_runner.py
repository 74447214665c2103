# threaded_runner.py - run read-only lookups in a small thread pool.

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def run_parallel(fn: Callable[[T], R], items: Iterable[T], max_workers: int = 4) -> List[R]:
    """
    Apply `fn` to every item in a thread pool; results come back in input order.
    Only safe for functions that don't mutate shared state (e.g. Trie queries).
    """
    items = list(items)
    if max_workers <= 1 or len(items) <= 1:
        return [fn(x) for x in items]
    with ThreadPoolExecutor(max_workers=max_workers) as ex:
        return list(ex.map(fn, items))
