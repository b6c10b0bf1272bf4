from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class SequentialScope:
    parallel = False

    def map(self, fn: Callable[[T], R], items: Iterable[T]) -> List[R]:
        return [fn(item) for item in items]


class ParallelScope:
    """Fork-join map over the thread pool owned by the enclosing ``maybe_scope`` call."""

    parallel = True

    def __init__(self, executor: ThreadPoolExecutor):
        self._executor = executor

    def map(self, fn: Callable[[T], R], items: Iterable[T]) -> List[R]:
        # Executor.map yields results in submission order
        return list(self._executor.map(fn, items))


Scope = Union[SequentialScope, ParallelScope]


def maybe_scope(op: Callable[[Scope], R], parallel: bool = False, workers: Optional[int] = None) -> R:
    if not parallel:
        return op(SequentialScope())
    if workers is not None and workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="FlockWorker") as executor:
        logger.debug("Running parallel scope (workers=%s)", workers or "default")
        return op(ParallelScope(executor))
