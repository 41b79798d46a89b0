"""Lazy combinators over single-use iterators.

Every combinator takes exclusive pull access to the iterator(s) it is given.
Lazy combinators are generators and do no work until their output is pulled;
``spread``, ``reduce``, ``apply_on_each_of`` and the quantifiers consume eagerly.
"""
from __future__ import annotations

import itertools
import logging
from typing import (
    Any, Callable, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar, Union,
)

from .iterator_types import Flow, IteratorResult, SmearStep, Stop, UnequalLengthError, pull

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

MappingFunctor = Callable[[T], U]
Predicate = Callable[[T], bool]
ApplyFunctor = Callable[[T], Optional[Flow]]
SmearFunctor = Callable[[U, T], Tuple[U, V]]
ReduceFunctor = Callable[[U, T], Union[U, Stop]]


def get_iterator_from(iterable: Iterable[T]) -> Iterator[T]:
    return iter(iterable)


def map(iterator: Iterator[T], functor: MappingFunctor) -> Iterator[U]:
    for element in get_iterator_from(iterator):
        yield functor(element)


def filter(iterator: Iterator[T], predicate: Predicate) -> Iterator[T]:
    for element in get_iterator_from(iterator):
        if predicate(element):
            yield element


def take(iterator: Iterator[T], n: int) -> Iterator[T]:
    """Yield at most the first ``n`` elements; element ``n + 1`` is never pulled."""
    if n < 0:
        raise ValueError(f"take count must be >= 0, got {n}")
    return itertools.islice(get_iterator_from(iterator), n)


def chunk(iterator: Iterator[T], size: int, include_partial: bool = True) -> Iterator[Tuple[T, ...]]:
    """Group consecutive elements into tuples of ``size``.

    The trailing short tuple is only yielded when ``include_partial`` is set.
    """
    if size < 1:
        raise ValueError(f"chunk size must be >= 1, got {size}")

    def operation(it: Iterator[T]) -> Iterator[Tuple[T, ...]]:
        buf: List[T] = []
        for x in it:
            buf.append(x)
            if len(buf) == size:
                yield tuple(buf)
                buf.clear()
        if include_partial and buf:
            yield tuple(buf)

    return operation(get_iterator_from(iterator))


def reverse(iterator: Iterator[T]) -> Iterator[T]:
    """Yield the elements of ``iterator`` back to front.

    The whole sequence is buffered on the first pull, so the source must be
    finite and fit in memory. An infinite source never yields.
    """
    sequence = spread(iterator)
    logger.debug("reverse buffered %d elements", len(sequence))

    while sequence:
        yield sequence.pop()


def zip(iterators: Sequence[Iterator[Any]]) -> Iterator[Tuple[Any, ...]]:
    """Combine a tuple of iterators into an iterator of value tuples.

    Each step pulls once from every iterator, in order. Raises
    ``UnequalLengthError`` on the step where some iterators are exhausted and
    others are not. Zipping no iterators yields nothing.
    """
    sources = tuple(get_iterator_from(iterator) for iterator in iterators)
    if not sources:
        return

    step = 0
    while True:
        results = [pull(source) for source in sources]

        some_have_next = check_any_fulfills(iter(results), _has_value)
        all_have_next = check_all_fulfill(iter(results), _has_value)

        if some_have_next and not all_have_next:
            exhausted = tuple(index for index, result in enumerate(results) if result.done)
            logger.warning(
                "zip step %d: iterators %s of %d are exhausted", step, list(exhausted), len(sources)
            )
            raise UnequalLengthError(step, exhausted, len(sources))
        if not all_have_next:
            return

        yield tuple(result.value for result in results)
        step += 1


def _has_value(result: IteratorResult) -> bool:
    return result.has_value


def smear(iterator: Iterator[T], functor: SmearFunctor, initial_value: U) -> Iterator[V]:
    """Map with a carried accumulator.

    ``functor(give_on, element)`` returns ``(next_give_on, output)``; ``output``
    is yielded and ``next_give_on`` is handed to the following call. Useful for
    cumulative sums, moving averages and consecutive differences.
    """
    give_on = initial_value

    for element in get_iterator_from(iterator):
        give_on, output = functor(give_on, element)
        yield output


def sum_cumulatively(iterator: Iterator[Any]) -> Iterator[Any]:
    def functor(given_on, element):
        cumulative_sum = given_on + element
        return SmearStep(give_on=cumulative_sum, output=cumulative_sum)

    return smear(iterator, functor, 0)


def apply_on_each_of(iterator: Iterator[T], functor: ApplyFunctor) -> None:
    """Call ``functor`` on each element until it returns ``Flow.BREAK``."""
    for element in get_iterator_from(iterator):
        if functor(element) is Flow.BREAK:
            break


def reduce(iterator: Iterator[T], functor: ReduceFunctor, initial_value: U) -> U:
    """Fold ``iterator`` into ``initial_value``.

    ``functor(accumulator, element)`` returns the next accumulator, or
    ``Stop(value)`` to finish with ``value`` without pulling further elements.
    """
    accumulator = initial_value

    def apply_functor(element: T) -> Flow:
        nonlocal accumulator
        outcome = functor(accumulator, element)
        if isinstance(outcome, Stop):
            accumulator = outcome.value
            logger.debug("reduce stopped early at element %r", element)
            return Flow.BREAK
        accumulator = outcome
        return Flow.CONTINUE

    apply_on_each_of(iterator, apply_functor)
    return accumulator


def check_all_fulfill(iterator: Iterator[T], predicate: Predicate) -> bool:
    def reduce_functor(accumulator: bool, element: T) -> Union[bool, Stop]:
        element_fulfills_predicate = bool(predicate(element))

        # not all elements can fulfill the predicate anymore
        if not element_fulfills_predicate:
            return Stop(False)

        return accumulator and element_fulfills_predicate

    return reduce(iterator, reduce_functor, True)


def check_any_fulfills(iterator: Iterator[T], predicate: Predicate) -> bool:
    # ∃x: p(x) ≡ ¬∀x: ¬p(x)
    def negated_predicate(element: T) -> bool:
        return not predicate(element)

    return not check_all_fulfill(iterator, negated_predicate)


def spread(iterator: Iterator[T]) -> List[T]:
    """Drain ``iterator`` into a list, preserving pull order."""
    return [*get_iterator_from(iterator)]
