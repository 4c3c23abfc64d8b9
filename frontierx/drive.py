"""Public traversal API for Frontierx.

The three drive algorithms pop items from a caller-supplied frontier, feed
them to a step function and act on the returned signal:

* ``recursive_fold`` threads an accumulator through every reachable item and
  returns it once the frontier is exhausted.
* ``recursive_find`` stops at the first ``FindResult`` and returns its value,
  or ``None`` when the frontier runs dry without one.
* ``recursive_iter`` visits items purely for their side effects.

The traversal takes over the frontier for the duration of the call; callers
must not touch it until the call returns. A step function reports failure by
raising. The ``try_`` variants re-raise that exception unchanged after
clearing the frontier, so no partially explored work survives the failure;
the plain variants leave the frontier as it was at the moment of failure.
"""

from __future__ import annotations

from typing import Optional, TypeVar

from beartype import beartype
from beartype.typing import Callable

from ._drive_impl import (
    StatsLogger,
    TraversalCounters,
    find_loop,
    fold_loop,
    iter_loop,
    run_traversal,
)
from .protocols import Frontier

S = TypeVar("S")
R = TypeVar("R")


def _fold(operation, frontier, initial, step, *, fallible, stats_logger):
    counters = TraversalCounters()
    return run_traversal(
        operation,
        frontier,
        lambda: ("exhausted", fold_loop(frontier, initial, step, counters)),
        fallible=fallible,
        stats_logger=stats_logger,
        counters=counters,
    )


def _find(operation, frontier, step, *, fallible, stats_logger):
    counters = TraversalCounters()

    def run():
        found, value = find_loop(frontier, step, counters)
        return ("found", value) if found else ("exhausted", None)

    return run_traversal(
        operation,
        frontier,
        run,
        fallible=fallible,
        stats_logger=stats_logger,
        counters=counters,
    )


def _iter(operation, frontier, step, *, fallible, stats_logger):
    counters = TraversalCounters()
    run_traversal(
        operation,
        frontier,
        lambda: ("exhausted", iter_loop(frontier, step, counters)),
        fallible=fallible,
        stats_logger=stats_logger,
        counters=counters,
    )


@beartype
def recursive_fold(
    frontier: Frontier,
    initial: S,
    step: Callable,
    *,
    stats_logger: Optional[StatsLogger] = None,
) -> S:
    """Drain ``frontier`` and return the accumulator threaded through ``step``.

    ``step(state, item)`` returns ``FoldBranch(state, children)`` or
    ``FoldLeaf(state)``. There is no early exit.
    """

    return _fold(
        "recursive_fold",
        frontier,
        initial,
        step,
        fallible=False,
        stats_logger=stats_logger,
    )


@beartype
def try_recursive_fold(
    frontier: Frontier,
    initial: S,
    step: Callable,
    *,
    stats_logger: Optional[StatsLogger] = None,
) -> S:
    """Fallible ``recursive_fold``: a raising step aborts the whole fold."""

    return _fold(
        "try_recursive_fold",
        frontier,
        initial,
        step,
        fallible=True,
        stats_logger=stats_logger,
    )


@beartype
def recursive_find(
    frontier: Frontier,
    step: Callable,
    *,
    stats_logger: Optional[StatsLogger] = None,
) -> Optional[R]:
    """Return the value of the first ``FindResult`` produced by ``step``.

    Returns ``None`` when the frontier is exhausted without an answer. Over a
    FIFO frontier the first answer is found at the shallowest depth.

    ``FindResult(None)`` also returns ``None``. Callers whose answers may be
    ``None`` should wrap them, or read ``outcome`` (``"found"`` or
    ``"exhausted"``) from the ``TraversalStats`` passed to ``stats_logger``.
    """

    return _find(
        "recursive_find", frontier, step, fallible=False, stats_logger=stats_logger
    )


@beartype
def try_recursive_find(
    frontier: Frontier,
    step: Callable,
    *,
    stats_logger: Optional[StatsLogger] = None,
) -> Optional[R]:
    """Fallible ``recursive_find``; ``None`` still means "no answer"."""

    return _find(
        "try_recursive_find", frontier, step, fallible=True, stats_logger=stats_logger
    )


@beartype
def recursive_iter(
    frontier: Frontier,
    step: Callable,
    *,
    stats_logger: Optional[StatsLogger] = None,
) -> None:
    """Visit every reachable item for ``step``'s side effects."""

    _iter("recursive_iter", frontier, step, fallible=False, stats_logger=stats_logger)


@beartype
def try_recursive_iter(
    frontier: Frontier,
    step: Callable,
    *,
    stats_logger: Optional[StatsLogger] = None,
) -> None:
    """Fallible ``recursive_iter``."""

    _iter(
        "try_recursive_iter", frontier, step, fallible=True, stats_logger=stats_logger
    )


__all__ = [
    "recursive_find",
    "recursive_fold",
    "recursive_iter",
    "try_recursive_find",
    "try_recursive_fold",
    "try_recursive_iter",
]
