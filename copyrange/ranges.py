"""Duplicable range descriptors.

Each descriptor is a frozen value: assigning, passing or copying one never
shares iteration state. Iterating a descriptor hands out a fresh consumable
iterator from ``copyrange.iters``, so the same descriptor can be iterated any
number of times.

Example:
    >>> r = BoundedRange(start=1, end=4)
    >>> list(r), list(r)
    ([1, 2, 3], [1, 2, 3])
    >>> 3 in r, 4 in r
    (True, False)
    >>> str(ClosedRange(start=1, end=3))
    '1..=3'
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, override

from loguru import logger

from copyrange.bounds import Bound, Excluded, Included, RangeBounds, Unbounded
from copyrange.errors import ExhaustedRangeError
from copyrange.iters import BoundedRangeIter, ClosedRangeIter, UnboundedStartRangeIter

T = TypeVar("T")


def _expect(source: Any, kind: type, target: str) -> None:
    if not isinstance(source, kind):
        raise TypeError(
            f"{target}.from_std() expects a {kind.__name__}, "
            f"got {type(source).__name__!r}: {source!r}\n"
            f"Hint: Build descriptors directly with {target}(...) or "
            f"convert from the matching iterator."
        )


@dataclass(frozen=True, kw_only=True, order=True)
class BoundedRange(RangeBounds[T], Generic[T]):
    """Half-open range ``start..end``: start included, end excluded.

    Construction never validates the bounds; ``is_empty()`` answers whether the
    range holds anything.
    """

    start: T
    end: T

    @override
    def __str__(self) -> str:
        return f"{self.start!r}..{self.end!r}"

    def __iter__(self) -> BoundedRangeIter[T]:
        return self.into_iter()

    def into_iter(self) -> BoundedRangeIter[T]:
        """Return a fresh consumable iterator over the same bounds."""
        return BoundedRangeIter(self.start, self.end)

    into_std = into_iter

    @classmethod
    def from_std(cls, source: BoundedRangeIter[T]) -> "BoundedRange[T]":
        """Capture the bounds a BoundedRangeIter has left to produce."""
        _expect(source, BoundedRangeIter, cls.__name__)
        return cls(start=source.start, end=source.end)

    @classmethod
    def from_range(cls, source: range) -> "BoundedRange[int]":
        if source.step != 1:
            raise ValueError(
                f"Only ranges with step 1 convert to {cls.__name__}, "
                f"got step={source.step}."
            )
        return cls(start=source.start, end=source.stop)

    def to_range(self) -> range:
        return range(self.start, self.end)  # type: ignore[arg-type]

    def is_empty(self) -> bool:
        return not self.start < self.end

    @override
    def start_bound(self) -> Bound[T]:
        return Included(self.start)

    @override
    def end_bound(self) -> Bound[T]:
        return Excluded(self.end)


@dataclass(frozen=True, kw_only=True, order=True)
class UnboundedStartRange(RangeBounds[T], Generic[T]):
    """Range ``start..`` with an inclusive start and no end."""

    start: T

    @override
    def __str__(self) -> str:
        return f"{self.start!r}.."

    def __iter__(self) -> UnboundedStartRangeIter[T]:
        return self.into_iter()

    def into_iter(self) -> UnboundedStartRangeIter[T]:
        return UnboundedStartRangeIter(self.start)

    into_std = into_iter

    @classmethod
    def from_std(
        cls, source: UnboundedStartRangeIter[T]
    ) -> "UnboundedStartRange[T]":
        _expect(source, UnboundedStartRangeIter, cls.__name__)
        return cls(start=source.start)

    @override
    def start_bound(self) -> Bound[T]:
        return Included(self.start)

    @override
    def end_bound(self) -> Bound[T]:
        return Unbounded()


@dataclass(frozen=True, kw_only=True, order=True)
class ClosedRange(RangeBounds[T], Generic[T]):
    """Closed range ``start..=end``: both ends included.

    ``start > end`` denotes the empty set.
    """

    start: T
    end: T

    @override
    def __str__(self) -> str:
        return f"{self.start!r}..={self.end!r}"

    def __iter__(self) -> ClosedRangeIter[T]:
        return self.into_iter()

    def into_iter(self) -> ClosedRangeIter[T]:
        return ClosedRangeIter(self.start, self.end)

    into_std = into_iter

    @classmethod
    def from_std(
        cls, source: ClosedRangeIter[T], *, strict: bool = False
    ) -> "ClosedRange[T]":
        """Capture the stored bounds of a ClosedRangeIter.

        Only the stored ``start`` and ``end`` are read. An iterator that has
        been partly or fully consumed therefore converts back into the full,
        unconsumed range it was created from. Pass ``strict=True`` to reject
        exhausted iterators instead.

        Raises:
            ExhaustedRangeError: If ``strict`` and the iterator is exhausted
        """
        _expect(source, ClosedRangeIter, cls.__name__)
        if source.exhausted:
            if strict:
                raise ExhaustedRangeError(
                    f"Cannot convert exhausted iterator {source} into {cls.__name__}.\n"
                    f"Hint: Its stored bounds no longer describe what it will produce; "
                    f"convert before iterating or pass strict=False."
                )
            logger.debug("Converting exhausted iterator {} back into full bounds", source)
        return cls(start=source.start, end=source.end)

    def to_range(self) -> range:
        return range(self.start, self.end + 1)  # type: ignore[arg-type, operator]

    def is_empty(self) -> bool:
        return not self.start <= self.end

    @override
    def start_bound(self) -> Bound[T]:
        return Included(self.start)

    @override
    def end_bound(self) -> Bound[T]:
        return Included(self.end)


@dataclass(frozen=True, kw_only=True, order=True)
class EndBoundedRange(RangeBounds[T], Generic[T]):
    """Range ``..end`` with no start and an exclusive end."""

    end: T

    @override
    def __str__(self) -> str:
        return f"..{self.end!r}"

    @override
    def start_bound(self) -> Bound[T]:
        return Unbounded()

    @override
    def end_bound(self) -> Bound[T]:
        return Excluded(self.end)


@dataclass(frozen=True, kw_only=True, order=True)
class ClosedEndRange(RangeBounds[T], Generic[T]):
    """Range ``..=end`` with no start and an inclusive end."""

    end: T

    @override
    def __str__(self) -> str:
        return f"..={self.end!r}"

    @override
    def start_bound(self) -> Bound[T]:
        return Unbounded()

    @override
    def end_bound(self) -> Bound[T]:
        return Included(self.end)


@dataclass(frozen=True)
class FullRange(RangeBounds[Any]):
    """Range ``..`` covering everything."""

    @override
    def __str__(self) -> str:
        return ".."

    @override
    def start_bound(self) -> Bound[Any]:
        return Unbounded()

    @override
    def end_bound(self) -> Bound[Any]:
        return Unbounded()
