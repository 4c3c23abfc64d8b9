"""Tests for the duplicate-filtering frontier decorator."""

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from frontierx import (
    DuplicateFilter,
    FifoFrontier,
    FindBranch,
    FindResult,
    FoldBranch,
    IterBranch,
    IterLeaf,
    PriorityFrontier,
    SearchDepth,
    filter_duplicates,
)
from tests.unit.graph_fixtures import (
    WEIGHTED_GRAPH,
    cycle_graph,
    grid_neighbours,
    parse_maze,
)

MAZE = """
.#....
.#.##.
...#..
##.#.#
...#..
"""


def test_two_node_cycle_terminates_with_both_nodes_seen():
    other = {"A": "B", "B": "A"}
    dedup = filter_duplicates(FifoFrontier(["A"]))
    dedup.recursive_iter(lambda node: IterBranch([other[node]]))

    assert dedup.seen == {"A", "B"}
    assert len(dedup) == 2


def test_fold_over_cycle_processes_each_node_once():
    graph = cycle_graph(4)
    processed = []

    def step(total, node):
        processed.append(node)
        return FoldBranch(total + 1, graph[node])

    total = FifoFrontier([0]).filter_duplicates().recursive_fold(0, step)
    assert total == 4
    assert processed == [0, 1, 2, 3]


def test_items_are_deduplicated_when_popped_not_when_pushed():
    frontier = FifoFrontier(["x", "x", "y", "x"])
    calls = []

    def step(total, item):
        calls.append(item)
        return FoldBranch(total + 1, [])

    records = []
    total = DuplicateFilter(frontier).recursive_fold(
        0, step, stats_logger=records.append
    )

    assert total == 2
    assert calls == ["x", "y"]
    (stats,) = records
    assert stats.popped == 4
    assert stats.duplicates == 2
    assert stats.branched == 2
    assert stats.leaves == 0
    assert stats.seen == 2


def test_key_projection_ignores_search_depth():
    walls = parse_maze(MAZE)
    target = (5, 4)

    def step(search):
        if search.state == target:
            return FindResult(search.depth)
        return FindBranch(search.descend(p) for p in grid_neighbours(walls, search.state))

    dedup = filter_duplicates(FifoFrontier([SearchDepth((0, 0))]))
    assert dedup.recursive_find(step) == 15
    assert SearchDepth((0, 0), depth=99) in dedup.seen


def test_reachable_tile_count_from_seen_set():
    walls = parse_maze(MAZE)
    dedup = filter_duplicates(FifoFrontier([(0, 0)]))
    dedup.recursive_iter(lambda p: IterBranch(grid_neighbours(walls, p)))

    open_tiles = int((~walls).sum())
    assert len(dedup.seen) == open_tiles
    assert (0, 0) in dedup.seen


def test_explicit_key_function_on_priority_frontier():
    def step(item):
        node, distance = item
        if node == "D":
            return FindResult(distance)
        return FindBranch(
            ((neighbour, distance + weight), distance + weight)
            for neighbour, weight in WEIGHTED_GRAPH[node]
        )

    dedup = filter_duplicates(
        PriorityFrontier([(("A", 0), 0)]), key=lambda item: item[0]
    )
    assert dedup.recursive_find(step) == 4
    assert dedup.seen == {"A", "B", "C", "D"}


def test_filter_drives_only_one_traversal():
    dedup = filter_duplicates(FifoFrontier([1]))
    dedup.recursive_iter(lambda item: IterBranch([]))
    with pytest.raises(RuntimeError, match="already drove a traversal"):
        dedup.recursive_iter(lambda item: IterBranch([]))


def test_try_variant_clears_frontier_and_seen_on_failure():
    frontier = FifoFrontier([0])
    dedup = DuplicateFilter(frontier)

    def step(total, node):
        if node == 3:
            raise ValueError("node 3 is poisoned")
        return FoldBranch(total + node, [node + 1, node + 2])

    with pytest.raises(ValueError, match="poisoned"):
        dedup.try_recursive_fold(0, step)
    assert dedup.seen == set()
    assert len(frontier) == 0


def test_plain_variant_keeps_seen_on_failure():
    dedup = DuplicateFilter(FifoFrontier([0]))

    def step(node):
        if node == 2:
            raise ValueError("stop")
        return IterBranch([node + 1])

    with pytest.raises(ValueError):
        dedup.recursive_iter(step)
    assert dedup.seen == {0, 1, 2}


def test_try_find_returns_answer_through_filter():
    dedup = DuplicateFilter(FifoFrontier([0]))
    result = dedup.try_recursive_find(
        lambda n: FindResult(n) if n == 5 else FindBranch([n + 1, n + 1])
    )
    assert result == 5


def test_filter_rejects_non_frontiers():
    with pytest.raises(TypeError, match="does not implement"):
        DuplicateFilter([1, 2, 3])
    with pytest.raises(BeartypeCallHintParamViolation):
        filter_duplicates({1, 2, 3})


def test_skipped_duplicates_are_not_counted_as_leaves():
    records = []
    dedup = DuplicateFilter(FifoFrontier(["a", "a", "b", "a", "b"]))
    dedup.recursive_iter(lambda item: IterLeaf(), stats_logger=records.append)

    (stats,) = records
    assert stats.popped == 5
    assert stats.leaves == 2
    assert stats.duplicates == 3
    assert stats.popped == stats.branched + stats.leaves + stats.duplicates
