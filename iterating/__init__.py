"""Lazy combinators over single-use iterators.

Combinators that share a name with a builtin (``map``, ``filter``, ``zip``,
``reduce``, ``range``) are only reachable through their modules, e.g.
``combinators.map`` or ``sequences.range``.
"""
from . import combinators, sequences
from .combinators import (
    apply_on_each_of,
    check_all_fulfill,
    check_any_fulfills,
    chunk,
    get_iterator_from,
    reverse,
    smear,
    spread,
    sum_cumulatively,
    take,
)
from .iterator_types import Flow, IteratorResult, SmearStep, Stop, UnequalLengthError, pull
from .peekable import PeekableIterator
from .sequences import repeat

__all__ = [
    "combinators",
    "sequences",
    "apply_on_each_of",
    "check_all_fulfill",
    "check_any_fulfills",
    "chunk",
    "get_iterator_from",
    "reverse",
    "smear",
    "spread",
    "sum_cumulatively",
    "take",
    "repeat",
    "Flow",
    "IteratorResult",
    "SmearStep",
    "Stop",
    "UnequalLengthError",
    "pull",
    "PeekableIterator",
]
