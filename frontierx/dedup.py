"""Duplicate filtering for frontier traversals.

``DuplicateFilter`` wraps a frontier together with a set of identity keys
already processed. Items are deduplicated when they are popped, not when
they are pushed: a state may sit in the frontier several times, but only the
first copy to come out reaches the step function. Later copies are counted
as duplicates and dropped.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from beartype import beartype
from beartype.typing import Callable, Hashable

from ._drive_impl import (
    StatsLogger,
    TraversalCounters,
    find_loop,
    fold_loop,
    iter_loop,
    run_traversal,
)
from .protocols import Frontier, KeyFn

S = TypeVar("S")
R = TypeVar("R")
Q = TypeVar("Q")


def _identity(item: Any) -> Hashable:
    return item


class DuplicateFilter(Generic[Q]):
    """Frontier decorator guaranteeing at-most-once processing per key.

    Parameters
    ----------
    frontier:
        Empty or pre-seeded frontier; the filter owns it from now on.
    key:
        Projection of an outbound item onto the hashable value that
        identifies it. Defaults to the item itself.

    A filter drives exactly one traversal. Afterwards ``seen`` holds the key
    of every processed item, e.g. to count reachable states.
    """

    def __init__(self, frontier: Q, key: Optional[KeyFn] = None) -> None:
        if not isinstance(frontier, Frontier):
            raise TypeError(
                f"{type(frontier).__name__} does not implement remove_next/add_many"
            )
        self.frontier = frontier
        self.key = _identity if key is None else key
        self.seen: set[Hashable] = set()
        self._counters = TraversalCounters()
        self._consumed = False

    def __len__(self) -> int:
        return len(self.seen)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(frontier={self.frontier!r}, "
            f"seen={len(self.seen)})"
        )

    def _first_visit(self, item: Any) -> bool:
        key = self.key(item)
        if key in self.seen:
            self._counters.duplicates += 1
            return False
        self.seen.add(key)
        return True

    def _claim(self, operation: str) -> None:
        if self._consumed:
            raise RuntimeError(
                f"{operation} called on a DuplicateFilter that already drove a "
                "traversal; wrap a fresh frontier instead"
            )
        self._consumed = True

    def _run(self, operation: str, run, *, fallible: bool, stats_logger):
        return run_traversal(
            operation,
            self.frontier,
            run,
            fallible=fallible,
            stats_logger=stats_logger,
            counters=self._counters,
            seen=self.seen,
        )

    def _fold(self, operation, initial, step, *, fallible, stats_logger):
        self._claim(operation)
        return self._run(
            operation,
            lambda: (
                "exhausted",
                fold_loop(
                    self.frontier, initial, step, self._counters, self._first_visit
                ),
            ),
            fallible=fallible,
            stats_logger=stats_logger,
        )

    def _find(self, operation, step, *, fallible, stats_logger):
        self._claim(operation)

        def run():
            found, value = find_loop(
                self.frontier, step, self._counters, self._first_visit
            )
            return ("found", value) if found else ("exhausted", None)

        return self._run(operation, run, fallible=fallible, stats_logger=stats_logger)

    def _iter(self, operation, step, *, fallible, stats_logger):
        self._claim(operation)
        self._run(
            operation,
            lambda: (
                "exhausted",
                iter_loop(self.frontier, step, self._counters, self._first_visit),
            ),
            fallible=fallible,
            stats_logger=stats_logger,
        )

    def recursive_fold(
        self,
        initial: S,
        step: Callable,
        *,
        stats_logger: Optional[StatsLogger] = None,
    ) -> S:
        """Deduplicated ``recursive_fold``; repeats leave the accumulator as is."""

        return self._fold(
            "recursive_fold", initial, step, fallible=False, stats_logger=stats_logger
        )

    def try_recursive_fold(
        self,
        initial: S,
        step: Callable,
        *,
        stats_logger: Optional[StatsLogger] = None,
    ) -> S:
        return self._fold(
            "try_recursive_fold",
            initial,
            step,
            fallible=True,
            stats_logger=stats_logger,
        )

    def recursive_find(
        self,
        step: Callable,
        *,
        stats_logger: Optional[StatsLogger] = None,
    ) -> Optional[R]:
        """Deduplicated ``recursive_find``.

        As with the undecorated search, ``FindResult(None)`` and exhaustion
        both return ``None``; the reported stats ``outcome`` tells them apart.
        """

        return self._find(
            "recursive_find", step, fallible=False, stats_logger=stats_logger
        )

    def try_recursive_find(
        self,
        step: Callable,
        *,
        stats_logger: Optional[StatsLogger] = None,
    ) -> Optional[R]:
        return self._find(
            "try_recursive_find", step, fallible=True, stats_logger=stats_logger
        )

    def recursive_iter(
        self,
        step: Callable,
        *,
        stats_logger: Optional[StatsLogger] = None,
    ) -> None:
        self._iter("recursive_iter", step, fallible=False, stats_logger=stats_logger)

    def try_recursive_iter(
        self,
        step: Callable,
        *,
        stats_logger: Optional[StatsLogger] = None,
    ) -> None:
        self._iter(
            "try_recursive_iter", step, fallible=True, stats_logger=stats_logger
        )


@beartype
def filter_duplicates(
    frontier: Frontier, key: Optional[KeyFn] = None
) -> DuplicateFilter:
    """Wrap ``frontier`` so each distinct item is processed at most once."""

    return DuplicateFilter(frontier, key=key)


__all__ = ["DuplicateFilter", "filter_duplicates"]
