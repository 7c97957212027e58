import copy
from dataclasses import FrozenInstanceError, replace
from datetime import date

import pytest
from hypothesis import given
from hypothesis import strategies as st
from loguru import logger

from copyrange import (
    BoundedRange,
    BoundedRangeIter,
    ClosedEndRange,
    ClosedRange,
    ClosedRangeIter,
    EndBoundedRange,
    Excluded,
    ExhaustedRangeError,
    FullRange,
    Included,
    Unbounded,
    UnboundedStartRange,
    UnboundedStartRangeIter,
)


def test_descriptor_iterates_from_the_start_every_time() -> None:
    r = BoundedRange(start=1, end=4)

    assert list(r) == [1, 2, 3]
    assert list(r) == [1, 2, 3]


def test_iterating_does_not_touch_the_descriptor() -> None:
    r = ClosedRange(start=1, end=3)
    it = iter(r)
    next(it)
    next(it)

    assert r == ClosedRange(start=1, end=3)
    assert list(r) == [1, 2, 3]


def test_into_iter_returns_matching_consumable() -> None:
    assert BoundedRange(start=1, end=4).into_iter() == BoundedRangeIter(1, 4)
    assert UnboundedStartRange(start=7).into_iter() == UnboundedStartRangeIter(7)
    assert ClosedRange(start=1, end=3).into_std() == ClosedRangeIter(1, 3)


def test_inverted_ranges_convert_to_empty_iterators() -> None:
    assert list(BoundedRange(start=4, end=2)) == []
    assert list(ClosedRange(start=4, end=2)) == []


@given(st.integers(), st.integers())
def test_bounded_round_trip(start: int, end: int) -> None:
    r = BoundedRange(start=start, end=end)
    assert BoundedRange.from_std(r.into_iter()) == r


@given(st.integers())
def test_unbounded_start_round_trip(start: int) -> None:
    r = UnboundedStartRange(start=start)
    assert UnboundedStartRange.from_std(r.into_iter()) == r


def test_bounded_from_partly_consumed_iterator_keeps_what_remains() -> None:
    it = BoundedRange(start=1, end=4).into_iter()
    next(it)

    assert BoundedRange.from_std(it) == BoundedRange(start=2, end=4)


def test_exhausted_closed_iterator_converts_back_to_full_range() -> None:
    """A consumed ClosedRangeIter still reports its original bounds."""
    r = ClosedRange(start=1, end=3)
    it = r.into_iter()

    assert list(it) == [1, 2, 3]
    assert it.exhausted
    assert list(it) == []

    resurrected = ClosedRange.from_std(it)
    assert resurrected == r
    assert list(resurrected) == [1, 2, 3]


def test_strict_conversion_rejects_exhausted_iterator() -> None:
    it = ClosedRange(start=1, end=3).into_iter()
    list(it)

    with pytest.raises(ExhaustedRangeError, match="exhausted"):
        ClosedRange.from_std(it, strict=True)


def test_strict_conversion_accepts_fresh_iterator() -> None:
    it = ClosedRangeIter(1, 3)
    assert ClosedRange.from_std(it, strict=True) == ClosedRange(start=1, end=3)


def test_exhausted_conversion_is_logged_when_enabled() -> None:
    messages: list[str] = []
    logger.enable("copyrange")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        it = ClosedRangeIter(1, 2)
        list(it)
        ClosedRange.from_std(it)
    finally:
        logger.remove(handler_id)
        logger.disable("copyrange")

    assert any("exhausted iterator 1..=2" in message for message in messages)


def test_from_std_rejects_other_iterator_kinds() -> None:
    with pytest.raises(TypeError, match="expects a BoundedRangeIter"):
        BoundedRange.from_std(ClosedRangeIter(1, 3))  # type: ignore[arg-type]


def test_native_range_conversions() -> None:
    assert BoundedRange.from_range(range(2, 5)) == BoundedRange(start=2, end=5)
    assert BoundedRange(start=2, end=5).to_range() == range(2, 5)
    assert ClosedRange(start=1, end=3).to_range() == range(1, 4)

    with pytest.raises(ValueError, match="step=2"):
        BoundedRange.from_range(range(0, 10, 2))


def test_duplicate_is_independent_of_original_binding() -> None:
    original = BoundedRange(start=1, end=4)
    duplicate = original

    original = replace(original, start=2)

    assert duplicate == BoundedRange(start=1, end=4)
    assert original == BoundedRange(start=2, end=4)


def test_copies_are_equal_and_hash_alike() -> None:
    r = ClosedRange(start=1, end=3)
    dup = copy.copy(r)

    assert dup == r
    assert hash(dup) == hash(r)
    assert len({r, dup, copy.deepcopy(r)}) == 1


def test_descriptors_are_frozen() -> None:
    r = UnboundedStartRange(start=1)

    with pytest.raises(FrozenInstanceError):
        r.start = 5  # type: ignore[misc]


def test_ordering_compares_fields_in_order() -> None:
    assert BoundedRange(start=1, end=9) < BoundedRange(start=2, end=0)
    assert ClosedRange(start=1, end=2) < ClosedRange(start=1, end=3)
    assert sorted([UnboundedStartRange(start=3), UnboundedStartRange(start=1)]) == [
        UnboundedStartRange(start=1),
        UnboundedStartRange(start=3),
    ]


def test_display_uses_range_notation() -> None:
    assert str(BoundedRange(start=1, end=4)) == "1..4"
    assert str(UnboundedStartRange(start=1)) == "1.."
    assert str(ClosedRange(start=1, end=3)) == "1..=3"
    assert str(EndBoundedRange(end=4)) == "..4"
    assert str(ClosedEndRange(end=3)) == "..=3"
    assert str(FullRange()) == ".."
    assert str(ClosedRange(start="a", end="e")) == "'a'..='e'"
    assert repr(BoundedRange(start=1, end=4)) == "BoundedRange(start=1, end=4)"


def test_is_empty() -> None:
    assert BoundedRange(start=3, end=3).is_empty()
    assert not BoundedRange(start=3, end=4).is_empty()
    assert not ClosedRange(start=3, end=3).is_empty()
    assert ClosedRange(start=4, end=3).is_empty()
    assert ClosedRange(start=0.0, end=float("nan")).is_empty()


def test_bounds_classification() -> None:
    assert BoundedRange(start=1, end=4).start_bound() == Included(1)
    assert BoundedRange(start=1, end=4).end_bound() == Excluded(4)
    assert UnboundedStartRange(start=1).end_bound() == Unbounded()
    assert ClosedRange(start=1, end=3).end_bound() == Included(3)
    assert EndBoundedRange(end=4).start_bound() == Unbounded()
    assert ClosedEndRange(end=4).end_bound() == Included(4)
    assert FullRange().start_bound() == FullRange().end_bound() == Unbounded()


@given(st.integers(), st.integers(), st.integers())
def test_bounded_containment_law(x: int, start: int, end: int) -> None:
    r = BoundedRange(start=start, end=end)
    assert r.contains(x) == (start <= x < end)
    assert (x in r) == r.contains(x)


@given(st.integers(), st.integers())
def test_unbounded_start_containment_law(x: int, start: int) -> None:
    assert UnboundedStartRange(start=start).contains(x) == (start <= x)


@given(st.integers(), st.integers(), st.integers())
def test_closed_containment_law(x: int, start: int, end: int) -> None:
    assert ClosedRange(start=start, end=end).contains(x) == (start <= x <= end)


@given(st.integers(), st.integers())
def test_end_only_containment_laws(x: int, end: int) -> None:
    assert EndBoundedRange(end=end).contains(x) == (x < end)
    assert ClosedEndRange(end=end).contains(x) == (x <= end)
    assert FullRange().contains(x)


def test_containment_works_for_any_ordered_type() -> None:
    january = ClosedRange(start=date(2025, 1, 1), end=date(2025, 1, 31))

    assert date(2025, 1, 31) in january
    assert date(2025, 2, 1) not in january
    assert "m" in BoundedRange(start="a", end="n")


def test_iterating_non_steppable_type_raises() -> None:
    january = ClosedRange(start=date(2025, 1, 1), end=date(2025, 1, 3))

    with pytest.raises(TypeError, match="Cannot step"):
        list(january)


def test_character_ranges_iterate() -> None:
    assert list(ClosedRange(start="a", end="e")) == ["a", "b", "c", "d", "e"]
    assert "".join(BoundedRange(start="x", end="{")) == "xyz"
