"""Tests for iteration helpers."""

import itertools

import pytest

from frontierx import (
    Continue,
    Done,
    SearchDepth,
    SingleError,
    generate,
    mode,
    multi_mode,
    single,
    try_fold_while,
)


def test_generate_stops_when_step_returns_none():
    collatz = generate(6, lambda n: None if n == 1 else (n // 2 if n % 2 == 0 else 3 * n + 1))
    assert list(collatz) == [6, 3, 10, 5, 16, 8, 4, 2, 1]


def test_generate_is_lazy_for_unbounded_sequences():
    powers = generate(1, lambda n: n * 2)
    assert list(itertools.islice(powers, 5)) == [1, 2, 4, 8, 16]


def test_try_fold_while_returns_early_on_done():
    seen = []

    def folder(total, item):
        seen.append(item)
        if total + item > 10:
            return Done(total)
        return Continue(total + item)

    assert try_fold_while(range(1, 100), 0, folder) == 10
    assert seen == [1, 2, 3, 4, 5]


def test_try_fold_while_runs_to_completion():
    assert try_fold_while([1, 2, 3], 0, lambda acc, x: Continue(acc + x)) == 6


def test_try_fold_while_propagates_folder_errors():
    def folder(total, item):
        if item == 3:
            raise ArithmeticError("overflow")
        return Continue(total + item)

    with pytest.raises(ArithmeticError, match="overflow"):
        try_fold_while([1, 2, 3, 4], 0, folder)


def test_try_fold_while_rejects_foreign_signals():
    with pytest.raises(TypeError, match="expected Continue or Done"):
        try_fold_while([1], 0, lambda acc, x: acc + x)


def test_single_returns_only_element():
    assert single([42]) == 42
    assert single(x for x in range(10) if x == 7) == 7


@pytest.mark.parametrize(
    "values, reason",
    [([], "none"), ([1, 2], "more")],
)
def test_single_reports_reason(values, reason):
    with pytest.raises(SingleError) as excinfo:
        single(values)
    assert excinfo.value.reason == reason
    assert isinstance(excinfo.value, ValueError)


def test_mode_and_multi_mode():
    assert mode("abracadabra") == "a"
    assert multi_mode([3, 1, 3, 1, 2]) == [3, 1]
    assert mode([]) is None
    assert multi_mode([]) == []


def test_search_depth_identity_ignores_depth():
    root = SearchDepth("start")
    child = root.descend("next")
    assert root.depth == 0
    assert child.depth == 1
    assert child.descend("last").depth == 2
    assert SearchDepth("next", depth=7) == child
    assert hash(SearchDepth("next", depth=7)) == hash(child)
