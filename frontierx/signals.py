"""Control-flow signals returned by step functions.

Each traversal flavour has a small closed set of variants. The drive loops
dispatch on the concrete variant class, so variants of different families
never alias each other (``FoldLeaf(0) != IterLeaf()``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, TypeVar, Union

S = TypeVar("S")
R = TypeVar("R")
In = TypeVar("In")


@dataclass(frozen=True)
class FoldBranch(Generic[S, In]):
    """Continue with ``state`` and push ``children`` into the frontier."""

    state: S
    children: Iterable[In] = ()


@dataclass(frozen=True)
class FoldLeaf(Generic[S]):
    """Continue with ``state``; nothing new enters the frontier."""

    state: S


@dataclass(frozen=True)
class FindResult(Generic[R]):
    """Stop the whole traversal and return ``value``."""

    value: R


@dataclass(frozen=True)
class FindBranch(Generic[In]):
    children: Iterable[In] = ()


@dataclass(frozen=True)
class FindLeaf:
    pass


@dataclass(frozen=True)
class IterBranch(Generic[In]):
    children: Iterable[In] = ()


@dataclass(frozen=True)
class IterLeaf:
    pass


FoldState = Union[FoldBranch, FoldLeaf]
FindState = Union[FindResult, FindBranch, FindLeaf]
IterState = Union[IterBranch, IterLeaf]

FOLD_VARIANTS: tuple[type, ...] = (FoldBranch, FoldLeaf)
FIND_VARIANTS: tuple[type, ...] = (FindResult, FindBranch, FindLeaf)
ITER_VARIANTS: tuple[type, ...] = (IterBranch, IterLeaf)


def unexpected_signal(operation: str, signal: Any, expected: tuple[type, ...]) -> TypeError:
    """Build the error raised when a step returns a foreign signal."""

    names = ", ".join(cls.__name__ for cls in expected)
    return TypeError(
        f"{operation} step returned unsupported signal {signal!r}; "
        f"expected one of ({names})"
    )


__all__ = [
    "FIND_VARIANTS",
    "FOLD_VARIANTS",
    "ITER_VARIANTS",
    "FindBranch",
    "FindLeaf",
    "FindResult",
    "FindState",
    "FoldBranch",
    "FoldLeaf",
    "FoldState",
    "IterBranch",
    "IterLeaf",
    "IterState",
    "unexpected_signal",
]
