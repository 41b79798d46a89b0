from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Sequence

from iterating import combinators, sequences
from iterating.combinators import ApplyFunctor, MappingFunctor, Predicate, ReduceFunctor, SmearFunctor
from iterating.peekable import PeekableIterator


class IteratorObject:
    """Fluent façade over a single iterator.

    ``IteratorObject(iterable).map(f).reverse().spread()`` instead of
    ``spread(reverse(map(iterator, f)))``. Chaining hands the wrapped iterator
    to the new combinator, so the façade it was called on is left exhausted.
    """

    def __init__(self, iterable: Iterable[Any]):
        self._iterator: Iterator[Any] = combinators.get_iterator_from(iterable)

    def __iter__(self) -> "IteratorObject":
        return self

    def __next__(self) -> Any:
        return next(self._iterator)

    def _hand_over(self) -> Iterator[Any]:
        iterator, self._iterator = self._iterator, iter(())
        return iterator

    def _extend(self, operation, *args) -> "IteratorObject":
        # let the combinator reject its arguments before the iterator is given up
        extended = operation(self._iterator, *args)
        self._hand_over()
        return IteratorObject(extended)

    # ------------------------------------------------------------------
    # Lazy operations, returning new façades
    # ------------------------------------------------------------------
    def map(self, functor: MappingFunctor) -> "IteratorObject":
        return self._extend(combinators.map, functor)

    def filter(self, predicate: Predicate) -> "IteratorObject":
        return self._extend(combinators.filter, predicate)

    def take(self, n: int) -> "IteratorObject":
        return self._extend(combinators.take, n)

    def chunk(self, size: int, include_partial: bool = True) -> "IteratorObject":
        return self._extend(combinators.chunk, size, include_partial)

    def reverse(self) -> "IteratorObject":
        return self._extend(combinators.reverse)

    def smear(self, functor: SmearFunctor, initial_value: Any) -> "IteratorObject":
        return self._extend(combinators.smear, functor, initial_value)

    def zip(self, *iterators: Iterator[Any]) -> "IteratorObject":
        """Zip with further iterators, yielding ``(own_value, *other_values)``."""
        return IteratorObject(combinators.zip((self._hand_over(), *iterators)))

    def peekable(self) -> PeekableIterator:
        return PeekableIterator(self._hand_over())

    # ------------------------------------------------------------------
    # Eager operations
    # ------------------------------------------------------------------
    def apply(self, functor: ApplyFunctor) -> None:
        combinators.apply_on_each_of(self._iterator, functor)

    def reduce(self, functor: ReduceFunctor, initial_value: Any) -> Any:
        return combinators.reduce(self._iterator, functor, initial_value)

    def check_all_fulfill(self, predicate: Predicate) -> bool:
        return combinators.check_all_fulfill(self._iterator, predicate)

    def check_any_fulfills(self, predicate: Predicate) -> bool:
        return combinators.check_any_fulfills(self._iterator, predicate)

    def spread(self) -> List[Any]:
        return combinators.spread(self._iterator)

    # ------------------------------------------------------------------
    # Named constructors
    # ------------------------------------------------------------------
    @classmethod
    def create_zipping(cls, iterators: Sequence[Iterator[Any]]) -> "IteratorObject":
        return cls(combinators.zip(iterators))

    @classmethod
    def create_summing_cumulatively(cls, iterator: Iterator[Any]) -> "IteratorObject":
        return cls(combinators.sum_cumulatively(iterator))

    @classmethod
    def create_ranging(cls, start, stop, step_size=1, stop_included=False) -> "IteratorObject":
        return cls(sequences.range(start, stop, step_size, stop_included))

    @classmethod
    def create_repeating(cls, value: Any, times: int) -> "IteratorObject":
        return cls(sequences.repeat(value, times))
