"""Consumable range iterators.

These are the stateful, single-use counterparts of the descriptors in
``copyrange.ranges``. Each produces its elements once and is then exhausted;
a descriptor hands out a fresh one every time it is iterated.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, override

from copyrange.bounds import Bound, Excluded, Included, RangeBounds, Unbounded
from copyrange.step import distance, forward

T = TypeVar("T")


@dataclass
class BoundedRangeIter(RangeBounds[T], Iterator[T], Generic[T]):
    """Half-open iterator over ``start..end``.

    ``start`` advances as elements are produced, so the bounds always describe
    what remains.
    """

    start: T
    end: T

    @override
    def __next__(self) -> T:
        if self.start < self.end:
            value = self.start
            self.start = forward(value)
            return value
        raise StopIteration

    def __length_hint__(self) -> int:
        return distance(self.start, self.end) or 0

    def is_empty(self) -> bool:
        return not self.start < self.end

    @override
    def start_bound(self) -> Bound[T]:
        return Included(self.start)

    @override
    def end_bound(self) -> Bound[T]:
        return Excluded(self.end)

    @override
    def __str__(self) -> str:
        return f"{self.start!r}..{self.end!r}"


@dataclass
class UnboundedStartRangeIter(RangeBounds[T], Iterator[T], Generic[T]):
    """Endless iterator over ``start..``."""

    start: T

    @override
    def __next__(self) -> T:
        value = self.start
        self.start = forward(value)
        return value

    def is_empty(self) -> bool:
        return False

    @override
    def start_bound(self) -> Bound[T]:
        return Included(self.start)

    @override
    def end_bound(self) -> Bound[T]:
        return Unbounded()

    @override
    def __str__(self) -> str:
        return f"{self.start!r}.."


@dataclass
class ClosedRangeIter(RangeBounds[T], Iterator[T], Generic[T]):
    """Inclusive iterator over ``start..=end``.

    The stored ``start`` and ``end`` never change. Progress is tracked by a
    private cursor plus the ``exhausted`` flag, which is raised when ``end``
    itself has been produced. ``end`` is never stepped past, so a range ending
    at the last value of its type still terminates.

    Reading ``start``/``end`` after iteration therefore reports the original
    bounds even though nothing is left to produce.
    """

    start: T
    end: T
    exhausted: bool = False
    _cursor: Any = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._cursor = self.start

    @property
    def cursor(self) -> T:
        """The next element to produce, unless the iterator is empty."""
        return self._cursor

    @override
    def __next__(self) -> T:
        if self.is_empty():
            raise StopIteration
        value = self._cursor
        if self._cursor < self.end:
            self._cursor = forward(value)
        else:
            self.exhausted = True
        return value

    def __length_hint__(self) -> int:
        if self.is_empty():
            return 0
        steps = distance(self._cursor, self.end)
        return 0 if steps is None else steps + 1

    def is_empty(self) -> bool:
        return self.exhausted or not self._cursor <= self.end

    @override
    def start_bound(self) -> Bound[T]:
        return Included(self._cursor)

    @override
    def end_bound(self) -> Bound[T]:
        # Once exhausted the cursor sits on end, so this describes an empty span
        if self.exhausted:
            return Excluded(self.end)
        return Included(self.end)

    @override
    def __str__(self) -> str:
        text = f"{self.start!r}..={self.end!r}"
        if self.exhausted:
            text += " (exhausted)"
        return text
