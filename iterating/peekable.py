from __future__ import annotations

from typing import Generic, Iterable, TypeVar

from .iterator_types import IteratorResult, pull

T = TypeVar("T")


class PeekableIterator(Generic[T]):
    """Wrap an iterator to allow one element of lookahead.

    Unlike ``more_itertools.peekable`` the next result is fetched eagerly:
    wrapping an iterator advances it by one element right away, and every
    ``next()`` pulls the replacement immediately.
    """

    def __init__(self, iterable: Iterable[T]):
        self._it = iter(iterable)
        self._next_result: IteratorResult[T] = pull(self._it)

    def __iter__(self) -> PeekableIterator[T]:
        return self

    def __next__(self) -> T:
        result = self.next_result()
        if result.done:
            raise StopIteration
        return result.value

    def __bool__(self) -> bool:
        return self._next_result.has_value

    def next_result(self) -> IteratorResult[T]:
        """Return the buffered result and buffer the one after it."""
        current_result = self._next_result
        # exhaustion is final, the source is not pulled again
        if current_result.has_value:
            self._next_result = pull(self._it)
        return current_result

    def peek(self) -> IteratorResult[T]:
        """Return the result the next ``next()`` will emit, without advancing."""
        return self._next_result
