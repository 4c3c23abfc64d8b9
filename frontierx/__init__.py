"""Frontierx: frontier-driven fold, find, and iterate traversals."""

from ._drive_impl import TraversalStats, log_traversal_stats
from .dedup import DuplicateFilter, filter_duplicates
from .drive import (
    recursive_find,
    recursive_fold,
    recursive_iter,
    try_recursive_find,
    try_recursive_fold,
    try_recursive_iter,
)
from .frontiers import (
    FifoFrontier,
    FrontierKind,
    LifoFrontier,
    PriorityFrontier,
    QueueFrontier,
    available_frontier_kinds,
    make_frontier,
    register_frontier,
)
from .iteration import (
    Continue,
    Done,
    SingleError,
    generate,
    mode,
    multi_mode,
    single,
    try_fold_while,
)
from .policies import TraversalPolicy
from .protocols import Frontier, KeyFn
from .search_depth import SearchDepth
from .signals import (
    FindBranch,
    FindLeaf,
    FindResult,
    FindState,
    FoldBranch,
    FoldLeaf,
    FoldState,
    IterBranch,
    IterLeaf,
    IterState,
)

__all__ = [
    "Continue",
    "Done",
    "DuplicateFilter",
    "FifoFrontier",
    "FindBranch",
    "FindLeaf",
    "FindResult",
    "FindState",
    "FoldBranch",
    "FoldLeaf",
    "FoldState",
    "Frontier",
    "FrontierKind",
    "IterBranch",
    "IterLeaf",
    "IterState",
    "KeyFn",
    "LifoFrontier",
    "PriorityFrontier",
    "QueueFrontier",
    "SearchDepth",
    "SingleError",
    "TraversalPolicy",
    "TraversalStats",
    "available_frontier_kinds",
    "filter_duplicates",
    "generate",
    "log_traversal_stats",
    "make_frontier",
    "mode",
    "multi_mode",
    "recursive_find",
    "recursive_fold",
    "recursive_iter",
    "register_frontier",
    "single",
    "try_fold_while",
    "try_recursive_find",
    "try_recursive_fold",
    "try_recursive_iter",
]
