from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from operator import index as as_index
from typing import Any, Generic, TypeAlias, TypeVar, override

from copyrange import util
from copyrange.errors import IndexOutOfBoundsError, SliceIndexOrderError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Unbounded:
    """An endpoint with no limit."""

    def map(self, fn: Callable[[Any], Any]) -> "Unbounded":
        return self


@dataclass(frozen=True)
class Included(Generic[T]):
    """An endpoint that belongs to the range."""

    value: T

    def map(self, fn: Callable[[T], U]) -> "Included[U]":
        return Included(fn(self.value))


@dataclass(frozen=True)
class Excluded(Generic[T]):
    """An endpoint that limits the range without belonging to it."""

    value: T

    def map(self, fn: Callable[[T], U]) -> "Excluded[U]":
        return Excluded(fn(self.value))


Bound: TypeAlias = Unbounded | Included[T] | Excluded[T]


class RangeBounds(ABC, Generic[T]):
    """Uniform view of a range's two endpoints.

    Consumers that only need to know where a range starts and stops (range
    removal, range queries, index resolution) accept any RangeBounds and never
    look at the concrete range shape.
    """

    @abstractmethod
    def start_bound(self) -> Bound[T]:
        pass

    @abstractmethod
    def end_bound(self) -> Bound[T]:
        pass

    def contains(self, item: Any) -> bool:
        """Return True if ``item`` lies between the two bounds."""
        start = self.start_bound()
        if isinstance(start, Included):
            if not start.value <= item:
                return False
        elif isinstance(start, Excluded):
            if not start.value < item:
                return False

        end = self.end_bound()
        if isinstance(end, Included):
            return item <= end.value
        if isinstance(end, Excluded):
            return item < end.value
        return True

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)


@dataclass(frozen=True)
class BoundPair(RangeBounds[T]):
    """Explicit pair of bounds, used to adapt native ``range``/``slice``."""

    start: Bound[T]
    end: Bound[T]

    @override
    def start_bound(self) -> Bound[T]:
        return self.start

    @override
    def end_bound(self) -> Bound[T]:
        return self.end


def as_bounds(obj: Any) -> RangeBounds[Any]:
    """Adapt ``obj`` to the RangeBounds interface.

    Accepts:
    - RangeBounds: returned unchanged
    - range: step must be 1, becomes Included(start)/Excluded(stop)
    - slice: step must be None or 1, None endpoints become Unbounded

    Raises:
        ValueError: If a range or slice has a step other than 1
        TypeError: If ``obj`` has no bounds interpretation
    """
    if isinstance(obj, RangeBounds):
        return obj
    if isinstance(obj, range):
        if obj.step != 1:
            raise ValueError(
                f"Only ranges with step 1 have contiguous bounds, got step={obj.step}.\n"
                f"Hint: Use range(start, stop) or a copyrange descriptor instead."
            )
        return BoundPair(Included(obj.start), Excluded(obj.stop))
    if isinstance(obj, slice):
        if obj.step not in (None, 1):
            raise ValueError(
                f"Only slices with step 1 have contiguous bounds, got step={obj.step}."
            )
        start: Bound[Any] = Unbounded() if obj.start is None else Included(obj.start)
        end: Bound[Any] = Unbounded() if obj.stop is None else Excluded(obj.stop)
        return BoundPair(start, end)
    raise TypeError(
        f"Expected RangeBounds, range or slice, got {type(obj).__name__!r}: {obj!r}\n"
        f"Hint: Construct a descriptor, e.g. BoundedRange(start=1, end=4)."
    )


def slice_range(bounds: RangeBounds[int], length: int) -> tuple[int, int]:
    """Resolve ``bounds`` against a sequence of ``length`` items.

    Returns the half-open ``(start, stop)`` pair selected by the bounds.

    Raises:
        SliceIndexOrderError: If the resolved start is after the resolved stop
        IndexOutOfBoundsError: If a bound is negative or past ``length``
    """
    start_bound = bounds.start_bound()
    if isinstance(start_bound, Included):
        start = as_index(start_bound.value)
    elif isinstance(start_bound, Excluded):
        start = as_index(start_bound.value)
        if start < 0:
            raise IndexOutOfBoundsError.start(start, length)
        if start >= util.MAX_INDEX:
            raise IndexOutOfBoundsError(
                "attempted to index slice from after maximum usize", index=start
            )
        start += 1
    else:
        start = 0

    end_bound = bounds.end_bound()
    if isinstance(end_bound, Included):
        end = as_index(end_bound.value)
        if end < 0:
            raise IndexOutOfBoundsError.end(end, length)
        if end >= util.MAX_INDEX:
            raise IndexOutOfBoundsError(
                "attempted to index slice up to maximum usize", index=end
            )
        end += 1
    elif isinstance(end_bound, Excluded):
        end = as_index(end_bound.value)
    else:
        end = length

    return checked_span(start, end, length)


def checked_span(start: int, end: int, length: int) -> tuple[int, int]:
    """Validate a half-open ``start..end`` span against ``length``."""
    # Bounds are unsigned; negative values never wrap around
    if start < 0:
        raise IndexOutOfBoundsError.start(start, length)
    if end < 0:
        raise IndexOutOfBoundsError.end(end, length)
    if start > end:
        raise SliceIndexOrderError(start, end)
    if end > length:
        raise IndexOutOfBoundsError.end(end, length)
    return start, end
