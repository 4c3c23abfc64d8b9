"""Structural protocols for frontier capabilities."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, TypeVar, runtime_checkable

from beartype.typing import Callable, Hashable

In = TypeVar("In")
Out = TypeVar("Out")
In_contra = TypeVar("In_contra", contravariant=True)
Out_co = TypeVar("Out_co", covariant=True)


@runtime_checkable
class Frontier(Protocol[In_contra, Out_co]):
    """Pending-work container driving traversal order.

    ``remove_next`` returns ``None`` once the frontier is exhausted; that is
    the normal terminal condition. ``None`` is therefore never a valid item:
    the bundled frontiers reject it in ``add_many`` with ``ValueError``, and a
    custom frontier holding one would end the traversal early.
    """

    def remove_next(self) -> Optional[Out_co]: ...

    def add_many(self, items: Iterable[In_contra]) -> None: ...


# Projection of an outbound item onto the value that identifies it for
# deduplication (e.g. the state without its search depth).
KeyFn = Callable[[Out], Hashable]


__all__ = ["Frontier", "In", "KeyFn", "Out"]
