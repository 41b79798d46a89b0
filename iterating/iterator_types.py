from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Iterator, NamedTuple, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_NO_VALUE = object()


@dataclass(frozen=True)
class IteratorResult(Generic[T]):
    """Outcome of a single pull: either a value or exhaustion."""
    done: bool
    value: Any = None

    @classmethod
    def of(cls, value: T) -> "IteratorResult[T]":
        return cls(done=False, value=value)

    @classmethod
    def exhausted(cls) -> "IteratorResult[T]":
        return cls(done=True)

    @property
    def has_value(self) -> bool:
        return not self.done


def pull(iterator: Iterator[T]) -> IteratorResult[T]:
    """Pull one element from ``iterator`` and wrap the outcome."""
    value = next(iterator, _NO_VALUE)
    if value is _NO_VALUE:
        return IteratorResult.exhausted()
    return IteratorResult.of(value)


class Flow(Enum):
    """Signal returned by an ``apply_on_each_of`` functor"""
    CONTINUE = "continue"
    BREAK = "break"


@dataclass(frozen=True)
class Stop(Generic[U]):
    """Returned by a ``reduce`` functor to finish with ``value`` and stop pulling."""
    value: U


class SmearStep(NamedTuple):
    """Result of a ``smear`` functor: the accumulator to carry on and the value to yield"""
    give_on: Any
    output: Any


class UnequalLengthError(ValueError):
    """Raised by ``zip`` when some iterators are consumed before others."""

    def __init__(self, step: int, exhausted: Tuple[int, ...], total: int):
        self.step = step
        self.exhausted = tuple(exhausted)
        self.total = total
        super().__init__(
            f"some iterators are consumed before others: "
            f"step={step} exhausted={list(self.exhausted)} of {total}"
        )
