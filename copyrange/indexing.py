"""Indexing sequences with ranges.

``index`` and ``index_mut`` accept any descriptor from ``copyrange.ranges``,
any consumable from ``copyrange.iters`` or any other RangeBounds, and return a
borrowed view of the selected items. Descriptors are converted into their
consumable form before indexing, so both give identical results and identical
errors.

Views never copy the selected items:

- ``str`` returns the ``str`` slice; strings are immutable, so a copy cannot
  be told apart from a view.
- buffers (``bytes``, ``bytearray``, ``memoryview``, ``array.array``) return a
  ``memoryview`` slice.
- any other sequence returns a SequenceView or MutableSequenceView.

Aliasing is by contract: hold either one mutable view of a region or any
number of read-only views, never both at once. Views keep reading the base
sequence, so resizing the base while a view is alive leaves the view pointing
at whatever now occupies its positions.

Growable containers (``list``, ``bytearray``, ``array.array`` and other
mutable sequences) require extended-allocation mode, see ``copyrange.util``.
"""

from array import array
from collections.abc import Iterator, MutableSequence, Sequence, Sized
from operator import index as as_index
from typing import Any, Generic, TypeVar, overload, override

from loguru import logger

from copyrange import util
from copyrange.bounds import RangeBounds, as_bounds, checked_span, slice_range
from copyrange.errors import IndexOutOfBoundsError
from copyrange.iters import BoundedRangeIter, ClosedRangeIter, UnboundedStartRangeIter
from copyrange.ranges import BoundedRange, ClosedRange, UnboundedStartRange

T = TypeVar("T")

_BUFFER_TYPES = (bytes, bytearray, memoryview, array)
_GROWABLE_TYPES = (list, bytearray, array)


class SequenceView(Sequence[T], Generic[T]):
    """Read-only window onto ``base[start:stop]``."""

    __slots__ = ("_base", "_start", "_stop")

    def __init__(self, base: Sequence[T], start: int, stop: int):
        self._base: Sequence[T] = base
        self._start: int = start
        self._stop: int = stop

    @property
    def base(self) -> Sequence[T]:
        return self._base

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    @override
    def __len__(self) -> int:
        return self._stop - self._start

    @overload
    def __getitem__(self, item: int) -> T: ...

    @overload
    def __getitem__(self, item: slice) -> Sequence[T]: ...

    @override
    def __getitem__(self, item: int | slice) -> T | Sequence[T]:
        """Index relative to the view; contiguous slices give sub-views.

        Stepped slices cannot be borrowed and come back as lists.
        """
        if isinstance(item, slice):
            positions = range(self._start, self._stop)[item]
            if positions.step == 1:
                return type(self)(self._base, positions.start, positions.stop)
            return [self._base[i] for i in positions]
        return self._base[self._position(item)]

    @override
    def __iter__(self) -> Iterator[T]:
        for i in range(self._start, self._stop):
            yield self._base[i]

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, str) or not isinstance(other, Sequence):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _position(self, item: int) -> int:
        offset = as_index(item)
        length = len(self)
        if offset < 0:
            offset += length
        if not 0 <= offset < length:
            raise IndexError(f"view index {item} out of range for view of length {length}")
        return self._start + offset


class MutableSequenceView(SequenceView[T]):
    """Writable window onto ``base[start:stop]``.

    Assignments write through to the base. The window has a fixed size: slice
    assignment must supply exactly as many items as it replaces, and items can
    never be removed or inserted through it.
    """

    __slots__ = ()

    def __init__(self, base: MutableSequence[T], start: int, stop: int):
        super().__init__(base, start, stop)

    def __setitem__(self, item: int | slice, value: Any) -> None:
        base: MutableSequence[T] = self._base  # type: ignore[assignment]
        if isinstance(item, slice):
            positions = range(self._start, self._stop)[item]
            values = list(value)
            if len(values) != len(positions):
                raise ValueError(
                    f"Cannot resize a view: slice selects {len(positions)} items, "
                    f"got {len(values)}.\n"
                    f"Hint: Use drain() to remove items from the underlying sequence."
                )
            for i, v in zip(positions, values):
                base[i] = v
            return
        base[self._position(item)] = value

    def __delitem__(self, item: int | slice) -> None:
        raise TypeError(
            f"{type(self).__name__} cannot remove items.\n"
            f"Hint: Use drain(sequence, bounds) to remove a range in place."
        )


def resolve(rng: Any, length: int) -> tuple[int, int]:
    """Resolve a range index against a sequence of ``length`` items.

    Returns the half-open ``(start, stop)`` positions the index selects.

    Raises:
        SliceIndexOrderError: If the range starts after it ends
        IndexOutOfBoundsError: If a bound is negative or beyond ``length``
        TypeError: If ``rng`` is not a range
    """
    if isinstance(rng, (BoundedRange, UnboundedStartRange, ClosedRange)):
        rng = rng.into_iter()

    if isinstance(rng, BoundedRangeIter):
        return checked_span(as_index(rng.start), as_index(rng.end), length)

    if isinstance(rng, UnboundedStartRangeIter):
        start = as_index(rng.start)
        if not 0 <= start <= length:
            raise IndexOutOfBoundsError.start(start, length)
        return start, length

    if isinstance(rng, ClosedRangeIter):
        end = as_index(rng.end)
        # Checked before the successor is taken, so -1 cannot become 0
        if end < 0:
            raise IndexOutOfBoundsError.end(end, length)
        if end >= util.MAX_INDEX:
            raise IndexOutOfBoundsError(
                "attempted to index slice up to maximum usize", index=end
            )
        stop = end + 1
        # An exhausted iterator selects the empty span just past its end
        start = stop if rng.exhausted else as_index(rng.cursor)
        return checked_span(start, stop, length)

    if isinstance(rng, RangeBounds):
        return slice_range(rng, length)

    raise TypeError(
        f"Sequence index must be a range, got {type(rng).__name__!r}: {rng!r}\n"
        f"Examples:\n"
        f"  index(seq, BoundedRange(start=1, end=4))  # seq[1..4]\n"
        f"  index(seq, UnboundedStartRange(start=2))  # seq[2..]\n"
        f"  index(seq, ClosedRange(start=1, end=3))  # seq[1..=3]"
    )


def index(seq: Sequence[T], rng: Any) -> Sequence[T]:
    """Return a read-only borrowed view of ``seq`` selected by ``rng``.

    Example:
        >>> list(index([10, 20, 30, 40, 50], BoundedRange(start=1, end=4)))
        [20, 30, 40]
    """
    _check_container(seq)
    start, stop = _span(seq, rng)

    if isinstance(seq, str):
        return seq[start:stop]
    if isinstance(seq, _BUFFER_TYPES):
        return _buffer(seq)[start:stop]
    return SequenceView(seq, start, stop)


def index_mut(seq: MutableSequence[T], rng: Any) -> MutableSequence[T]:
    """Return a writable borrowed view of ``seq`` selected by ``rng``.

    Raises:
        TypeError: If ``seq`` cannot be written to
    """
    _check_container(seq)
    if isinstance(seq, str) or not isinstance(seq, (MutableSequence, *_BUFFER_TYPES)):
        raise TypeError(
            f"Cannot borrow a mutable view of immutable {type(seq).__name__!r}.\n"
            f"Hint: Use index() for a read-only view."
        )
    start, stop = _span(seq, rng)

    if isinstance(seq, _BUFFER_TYPES):
        view = _buffer(seq)
        if view.readonly:
            raise TypeError(
                f"Cannot borrow a mutable view of read-only buffer {type(seq).__name__!r}."
            )
        return view[start:stop]  # type: ignore[return-value]
    return MutableSequenceView(seq, start, stop)


def drain(seq: MutableSequence[T], bounds: Any) -> list[T]:
    """Remove the items selected by ``bounds`` from ``seq`` and return them.

    ``bounds`` is anything ``as_bounds`` accepts: a descriptor, a consumable,
    a step-1 ``range`` or ``slice``.

    Example:
        >>> items = [10, 20, 30, 40, 50]
        >>> drain(items, ClosedRange(start=1, end=2))
        [20, 30]
        >>> items
        [10, 40, 50]
    """
    if not isinstance(seq, MutableSequence):
        raise TypeError(
            f"drain() needs a mutable sequence, got {type(seq).__name__!r}."
        )
    _check_container(seq)
    start, stop = _span(seq, as_bounds(bounds))
    removed = list(seq[start:stop])
    del seq[start:stop]
    return removed


def _span(seq: Sized, rng: Any) -> tuple[int, int]:
    try:
        return resolve(rng, len(seq))
    except IndexError as e:
        logger.debug("Indexing {} with {} failed: {}", type(seq).__name__, rng, e)
        raise


def _check_container(seq: Any) -> None:
    growable = isinstance(seq, _GROWABLE_TYPES) or (
        isinstance(seq, MutableSequence) and not isinstance(seq, memoryview)
    )
    if growable and not util.ALLOC:
        raise TypeError(
            f"Indexing growable {type(seq).__name__!r} requires extended-allocation mode.\n"
            f"Hint: Unset COPYRANGE_ALLOC=0 or index a tuple, str, bytes or memoryview."
        )
    if not isinstance(seq, (Sequence, *_BUFFER_TYPES)):
        raise TypeError(
            f"Expected a sequence, got {type(seq).__name__!r}: {seq!r}"
        )


def _buffer(seq: Any) -> memoryview:
    view = seq if isinstance(seq, memoryview) else memoryview(seq)
    if view.ndim != 1:
        raise TypeError(
            f"Only one-dimensional buffers can be indexed by a range, got ndim={view.ndim}."
        )
    return view
