"""Depth-tagged search states."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SearchDepth(Generic[T]):
    """A state paired with the number of expansions needed to reach it.

    Equality and hashing only look at ``state``, so two tags for the same
    state at different depths count as one item for ``DuplicateFilter``.
    """

    state: T
    depth: int = field(default=0, compare=False)

    def descend(self, state: T) -> "SearchDepth[T]":
        """Return ``state`` tagged one level below this one."""

        return SearchDepth(state, self.depth + 1)


__all__ = ["SearchDepth"]
