"""Concrete frontiers and the frontier registry for Frontierx."""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from typing import Any, Generic, Literal, Optional, TypeVar

from beartype import beartype
from beartype.typing import Callable, Iterable

from . import drive
from .dedup import DuplicateFilter
from .protocols import Frontier, KeyFn

T = TypeVar("T")
P = TypeVar("P")

FrontierKind = Literal["fifo", "lifo", "priority"]


def _checked_items(owner: str, items: Iterable[Any]) -> list[Any]:
    checked = list(items)
    if any(item is None for item in checked):
        raise ValueError(
            f"{owner} cannot hold None; remove_next() returns None once the "
            "frontier is exhausted"
        )
    return checked


class QueueFrontier(Generic[T]):
    """Base class giving concrete frontiers the drive operations as methods.

    Subclasses implement ``remove_next``, ``add_many``, ``clear`` and
    ``__len__``. Traversal methods hand the frontier over to the drive loop,
    so it must not be used elsewhere until the call returns.
    """

    def remove_next(self) -> Optional[T]:
        raise NotImplementedError

    def add_many(self, items: Iterable[Any]) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    def __bool__(self) -> bool:
        return len(self) > 0

    def push(self, item: Any) -> None:
        self.add_many((item,))

    def filter_duplicates(self, key: Optional[KeyFn] = None) -> DuplicateFilter:
        return DuplicateFilter(self, key=key)

    def recursive_fold(self, initial, step, *, stats_logger=None):
        return drive.recursive_fold(self, initial, step, stats_logger=stats_logger)

    def try_recursive_fold(self, initial, step, *, stats_logger=None):
        return drive.try_recursive_fold(
            self, initial, step, stats_logger=stats_logger
        )

    def recursive_find(self, step, *, stats_logger=None):
        return drive.recursive_find(self, step, stats_logger=stats_logger)

    def try_recursive_find(self, step, *, stats_logger=None):
        return drive.try_recursive_find(self, step, stats_logger=stats_logger)

    def recursive_iter(self, step, *, stats_logger=None):
        drive.recursive_iter(self, step, stats_logger=stats_logger)

    def try_recursive_iter(self, step, *, stats_logger=None):
        drive.try_recursive_iter(self, step, stats_logger=stats_logger)


class FifoFrontier(QueueFrontier[T]):
    """First-in-first-out buffer; yields breadth-first exploration order."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(_checked_items("FifoFrontier", items))

    def remove_next(self) -> Optional[T]:
        return self._items.popleft() if self._items else None

    def add_many(self, items: Iterable[T]) -> None:
        self._items.extend(_checked_items("FifoFrontier", items))

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"FifoFrontier({list(self._items)!r})"


class LifoFrontier(QueueFrontier[T]):
    """Last-in-first-out stack; yields depth-first exploration order.

    Children pushed together come back out in reverse order.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = _checked_items("LifoFrontier", items)

    def remove_next(self) -> Optional[T]:
        return self._items.pop() if self._items else None

    def add_many(self, items: Iterable[T]) -> None:
        self._items.extend(_checked_items("LifoFrontier", items))

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"LifoFrontier({self._items!r})"


class _Descending:
    """Priority wrapper inverting the natural ordering."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __lt__(self, other: "_Descending") -> bool:
        return other.value < self.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Descending) and self.value == other.value


class PriorityFrontier(QueueFrontier[T], Generic[T, P]):
    """Heap-ordered frontier; yields best-first (Dijkstra-style) order.

    Inbound items are ``(item, priority)`` pairs, outbound items are the bare
    ``item``. The lowest priority comes out first, or the highest when
    ``reverse=True``. Equal priorities come out in insertion order.
    """

    def __init__(
        self, items: Iterable[tuple[T, P]] = (), *, reverse: bool = False
    ) -> None:
        self.reverse = reverse
        self._heap: list[tuple[Any, int, T, P]] = []
        self._counter = itertools.count()
        self.add_many(items)

    def _entry(self, item: T, priority: P) -> tuple[Any, int, T, P]:
        order_key = _Descending(priority) if self.reverse else priority
        return (order_key, next(self._counter), item, priority)

    def remove_next_with_priority(self) -> Optional[tuple[T, P]]:
        """Pop the next item together with the priority it was pushed with."""

        if not self._heap:
            return None
        _, _, item, priority = heapq.heappop(self._heap)
        return item, priority

    def remove_next(self) -> Optional[T]:
        entry = self.remove_next_with_priority()
        return None if entry is None else entry[0]

    def add_many(self, items: Iterable[tuple[T, P]]) -> None:
        entries = list(items)
        _checked_items("PriorityFrontier", (item for item, _ in entries))
        for item, priority in entries:
            heapq.heappush(self._heap, self._entry(item, priority))

    def peek_priority(self) -> Optional[P]:
        return self._heap[0][3] if self._heap else None

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"PriorityFrontier(size={len(self._heap)}, reverse={self.reverse})"


FrontierFactory = Callable[..., Frontier]


def _reject_options(name: str, options: dict[str, Any]) -> None:
    if options:
        unexpected = ", ".join(sorted(options))
        raise ValueError(f"{name} does not accept options: {unexpected}")


def _build_priority(seeds: Iterable[Any], **options: Any) -> Frontier:
    reverse = bool(options.pop("reverse", False))
    _reject_options("PriorityFrontier", options)
    return PriorityFrontier(seeds, reverse=reverse)


def _build_plain(cls: type) -> FrontierFactory:
    def build(seeds: Iterable[Any], **options: Any) -> Frontier:
        # ordering direction is meaningless for plain buffers
        options.pop("reverse", None)
        _reject_options(cls.__name__, options)
        return cls(seeds)

    return build


_FRONTIER_FACTORIES: dict[str, FrontierFactory] = {
    "fifo": _build_plain(FifoFrontier),
    "lifo": _build_plain(LifoFrontier),
    "priority": _build_priority,
}


def available_frontier_kinds() -> tuple[str, ...]:
    """Return registered frontier identifiers."""

    return tuple(sorted(_FRONTIER_FACTORIES.keys()))


@beartype
def make_frontier(
    kind: str = "fifo", seeds: Iterable[Any] = (), **options: Any
) -> Frontier:
    """Build a registered frontier seeded with ``seeds``."""

    factory = _FRONTIER_FACTORIES.get(kind)
    if factory is None:
        supported = ", ".join(f"'{name}'" for name in available_frontier_kinds())
        raise ValueError(
            f"Unsupported frontier kind '{kind}'. Supported: ({supported})"
        )
    return factory(seeds, **options)


def register_frontier(
    kind: str, factory: FrontierFactory, *, overwrite: bool = False
) -> None:
    """Register a new frontier factory for ``make_frontier`` dispatch."""

    normalized = kind.strip()
    if not normalized:
        raise ValueError("kind must be a non-empty string")
    if (normalized in _FRONTIER_FACTORIES) and (not overwrite):
        raise ValueError(
            f"frontier kind '{normalized}' is already registered; "
            "pass overwrite=True to replace it"
        )
    _FRONTIER_FACTORIES[normalized] = factory


__all__ = [
    "FifoFrontier",
    "FrontierFactory",
    "FrontierKind",
    "LifoFrontier",
    "PriorityFrontier",
    "QueueFrontier",
    "available_frontier_kinds",
    "make_frontier",
    "register_frontier",
]
