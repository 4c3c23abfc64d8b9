"""Traversal policy helpers for Frontierx."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from beartype.typing import Iterable

from .dedup import DuplicateFilter
from .frontiers import make_frontier
from .protocols import Frontier, KeyFn


@dataclass(frozen=True)
class TraversalPolicy:
    """Top-level traversal policy contract."""

    frontier: str = "fifo"
    deduplicate: bool = False
    reverse: bool = False
    description: str = "Breadth-first traversal without duplicate filtering."

    def prepare(
        self, seeds: Iterable[Any] = (), *, key: Optional[KeyFn] = None
    ) -> Union[Frontier, DuplicateFilter]:
        """Build the configured frontier holding ``seeds``."""

        if key is not None and not self.deduplicate:
            raise ValueError("key is only used when deduplicate=True")
        options = {"reverse": True} if self.reverse else {}
        frontier = make_frontier(self.frontier, seeds, **options)
        if self.deduplicate:
            return DuplicateFilter(frontier, key=key)
        return frontier


__all__ = ["TraversalPolicy"]
