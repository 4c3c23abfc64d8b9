"""Drive loops shared by the public traversal entry points.

Every loop has the same shape: pop the next item from the frontier, hand it
to the step function, interpret the returned signal and, for branches, push
the children back. The loops are written once against the two-method
frontier contract and never recurse, so the call stack stays flat however
deep the explored state space is.

An optional ``admit`` predicate sees each popped item first; rejected items
count as popped but never reach the step function.
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple, Optional

from beartype.typing import Callable

from .signals import (
    FIND_VARIANTS,
    FOLD_VARIANTS,
    ITER_VARIANTS,
    FindBranch,
    FindLeaf,
    FindResult,
    FoldBranch,
    FoldLeaf,
    IterBranch,
    IterLeaf,
    unexpected_signal,
)

logger = logging.getLogger(__name__)


class TraversalStats(NamedTuple):
    """Summary of a single finished (or aborted) traversal."""

    operation: str
    outcome: str
    popped: int
    branched: int
    leaves: int
    duplicates: int = 0
    seen: Optional[int] = None


StatsLogger = Callable[[TraversalStats], None]


class TraversalCounters:
    """Mutable tallies updated by a drive loop while it runs."""

    __slots__ = ("popped", "branched", "leaves", "duplicates")

    def __init__(self) -> None:
        self.popped = 0
        self.branched = 0
        self.leaves = 0
        self.duplicates = 0

    def snapshot(
        self, operation: str, outcome: str, seen: Optional[int] = None
    ) -> TraversalStats:
        return TraversalStats(
            operation=operation,
            outcome=outcome,
            popped=self.popped,
            branched=self.branched,
            leaves=self.leaves,
            duplicates=self.duplicates,
            seen=seen,
        )


def log_traversal_stats(
    stats: TraversalStats,
    *,
    level: int = logging.DEBUG,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Log traversal stats using the provided (or module) logger."""

    target_logger = logger or logging.getLogger(__name__)
    if stats.seen is None:
        target_logger.log(
            level,
            "%s %s: popped=%d, branched=%d, leaves=%d",
            stats.operation,
            stats.outcome,
            stats.popped,
            stats.branched,
            stats.leaves,
        )
        return
    target_logger.log(
        level,
        "%s %s: popped=%d, branched=%d, leaves=%d, duplicates=%d, seen=%d",
        stats.operation,
        stats.outcome,
        stats.popped,
        stats.branched,
        stats.leaves,
        stats.duplicates,
        stats.seen,
    )


def report_stats(stats: TraversalStats, stats_logger: Optional[StatsLogger]) -> None:
    """Deliver ``stats`` to the caller's callback, or the module logger."""

    if stats_logger is None:
        log_traversal_stats(stats)
        return
    try:
        stats_logger(stats)
    except Exception:  # pragma: no cover
        logger.exception("stats_logger raised", exc_info=True)


def fold_loop(
    frontier: Any,
    state: Any,
    step: Callable,
    counters: TraversalCounters,
    admit: Optional[Callable[[Any], bool]] = None,
) -> Any:
    while True:
        item = frontier.remove_next()
        if item is None:
            break
        counters.popped += 1
        if admit is not None and not admit(item):
            continue
        signal = step(state, item)
        if isinstance(signal, FoldBranch):
            counters.branched += 1
            state = signal.state
            frontier.add_many(signal.children)
        elif isinstance(signal, FoldLeaf):
            counters.leaves += 1
            state = signal.state
        else:
            raise unexpected_signal("recursive_fold", signal, FOLD_VARIANTS)
    return state


def find_loop(
    frontier: Any,
    step: Callable,
    counters: TraversalCounters,
    admit: Optional[Callable[[Any], bool]] = None,
) -> tuple[bool, Any]:
    """Return ``(found, value)``; ``value`` is meaningful only when found."""

    while True:
        item = frontier.remove_next()
        if item is None:
            break
        counters.popped += 1
        if admit is not None and not admit(item):
            continue
        signal = step(item)
        if isinstance(signal, FindResult):
            return True, signal.value
        if isinstance(signal, FindBranch):
            counters.branched += 1
            frontier.add_many(signal.children)
        elif isinstance(signal, FindLeaf):
            counters.leaves += 1
        else:
            raise unexpected_signal("recursive_find", signal, FIND_VARIANTS)
    return False, None


def iter_loop(
    frontier: Any,
    step: Callable,
    counters: TraversalCounters,
    admit: Optional[Callable[[Any], bool]] = None,
) -> None:
    while True:
        item = frontier.remove_next()
        if item is None:
            break
        counters.popped += 1
        if admit is not None and not admit(item):
            continue
        signal = step(item)
        if isinstance(signal, IterBranch):
            counters.branched += 1
            frontier.add_many(signal.children)
        elif isinstance(signal, IterLeaf):
            counters.leaves += 1
        else:
            raise unexpected_signal("recursive_iter", signal, ITER_VARIANTS)


def discard_frontier(frontier: Any) -> None:
    """Drop pending items after a failed traversal, when the frontier allows it."""

    clear = getattr(frontier, "clear", None)
    if callable(clear):
        clear()


def run_traversal(
    operation: str,
    frontier: Any,
    run: Callable[[], tuple[str, Any]],
    *,
    fallible: bool,
    stats_logger: Optional[StatsLogger],
    counters: TraversalCounters,
    seen: Optional[set] = None,
) -> Any:
    """Execute ``run`` and report its stats; ``run`` returns ``(outcome, value)``.

    Step exceptions always propagate unchanged. Fallible traversals also drop
    the pending frontier and the seen set before re-raising, so nothing
    partial outlives the failure.
    """

    try:
        outcome, value = run()
    except Exception:
        stats = counters.snapshot(
            operation, "failed", None if seen is None else len(seen)
        )
        if fallible:
            discard_frontier(frontier)
            if seen is not None:
                seen.clear()
        report_stats(stats, stats_logger)
        raise
    report_stats(
        counters.snapshot(operation, outcome, None if seen is None else len(seen)),
        stats_logger,
    )
    return value


__all__ = [
    "StatsLogger",
    "TraversalCounters",
    "TraversalStats",
    "discard_frontier",
    "find_loop",
    "fold_loop",
    "iter_loop",
    "log_traversal_stats",
    "report_stats",
    "run_traversal",
]
