from __future__ import annotations

from typing import Iterator, TypeVar, Union

T = TypeVar("T")

Number = Union[int, float]


def range(
        start: Number,
        stop: Number,
        step_size: Number = 1,
        stop_included: bool = False,
    ) -> Iterator[Number]:
    """Yield ``start, start + step_size, ...`` while short of ``stop``.

    Counts up for a positive ``step_size`` and down otherwise. With
    ``stop_included``, ``stop`` itself is yielded once at the end whether or
    not the steps land on it. ``step_size`` must not be 0.
    """
    is_increasing = step_size > 0

    def continue_predicate(i: Number) -> bool:
        if is_increasing:
            return i < stop
        return i > stop

    i = start
    while continue_predicate(i):
        yield i
        i += step_size

    if stop_included:
        yield stop


def repeat(value: T, times: int) -> Iterator[T]:
    """Yield ``value`` exactly ``times`` times."""
    # counting 1..times relies on the inclusive stop, which would emit one
    # element even for times < 1
    if times < 1:
        return

    for _ in range(1, times, 1, stop_included=True):
        yield value
