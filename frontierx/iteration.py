"""Small iteration helpers used alongside the traversal engine."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Generic, Iterator, Literal, Optional, TypeVar, Union

from beartype import beartype
from beartype.typing import Callable, Iterable

T = TypeVar("T")
S = TypeVar("S")


def generate(seed: T, step: Callable[[T], Optional[T]]) -> Iterator[T]:
    """Yield ``seed``, ``step(seed)``, ... until ``step`` returns ``None``."""

    current: Optional[T] = seed
    while current is not None:
        yield current
        current = step(current)


@dataclass(frozen=True)
class Continue(Generic[S]):
    value: S


@dataclass(frozen=True)
class Done(Generic[S]):
    value: S


FoldWhileState = Union[Continue, Done]


@beartype
def try_fold_while(iterable: Iterable[Any], initial: S, folder: Callable) -> S:
    """Left fold that stops as soon as ``folder`` returns ``Done``.

    ``folder(state, item)`` returns ``Continue(state)`` to keep going or
    ``Done(result)`` to finish with ``result``; failures are raised by the
    folder and propagate unchanged.
    """

    state = initial
    for item in iterable:
        signal = folder(state, item)
        if isinstance(signal, Done):
            return signal.value
        if not isinstance(signal, Continue):
            raise TypeError(
                f"try_fold_while folder returned {signal!r}; expected Continue or Done"
            )
        state = signal.value
    return state


class SingleError(ValueError):
    """Raised when an iterable does not hold exactly one element."""

    def __init__(self, reason: Literal["none", "more"]) -> None:
        self.reason = reason
        if reason == "none":
            message = "Iterable yielded no elements"
        else:
            message = "Iterable yielded more than one element"
        super().__init__(message)


def single(iterable: Iterable[T]) -> T:
    """Return the only element of ``iterable``."""

    it = iter(iterable)
    sentinel = object()
    first = next(it, sentinel)
    if first is sentinel:
        raise SingleError("none")
    if next(it, sentinel) is not sentinel:
        raise SingleError("more")
    return first  # type: ignore[return-value]


def multi_mode(iterable: Iterable[T]) -> list[T]:
    """Return every element tied for the highest frequency, first-seen order."""

    counts = Counter(iterable)
    if not counts:
        return []
    top = max(counts.values())
    return [value for value, count in counts.items() if count == top]


def mode(iterable: Iterable[T]) -> Optional[T]:
    """Return the most frequent element (first seen on ties), or ``None``."""

    modes = multi_mode(iterable)
    return modes[0] if modes else None


__all__ = [
    "Continue",
    "Done",
    "FoldWhileState",
    "SingleError",
    "generate",
    "mode",
    "multi_mode",
    "single",
    "try_fold_while",
]
