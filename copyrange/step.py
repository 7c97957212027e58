"""Successor function for range elements.

Integers step by one. Single characters step to the next Unicode scalar value,
skipping the surrogate block, so ``ClosedRange(start="a", end="e")`` iterates
letters the same way it would over code points.
"""

from operator import index as as_index
from typing import Any

_SURROGATE_START = 0xD800
_SURROGATE_END = 0xDFFF
_MAX_SCALAR = 0x10FFFF


def forward(value: Any) -> Any:
    """Return the element that follows ``value``.

    Raises:
        TypeError: If ``value`` has no successor
        OverflowError: If a character is already the last Unicode scalar value
    """
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(
                f"Only single characters can be stepped, got {value!r}.\n"
                f"Hint: Character ranges look like ClosedRange(start='a', end='z')."
            )
        code = ord(value) + 1
        if code == _SURROGATE_START:
            code = _SURROGATE_END + 1
        if code > _MAX_SCALAR:
            raise OverflowError(f"cannot step past {value!r}, the last character")
        return chr(code)

    # bool is an int subclass, but True + 1 is not a bool
    if isinstance(value, bool):
        raise TypeError(
            f"Cannot step values of type 'bool': {value!r}\n"
            f"Hint: Use 0 and 1 for integer ranges."
        )

    if isinstance(value, int):
        return value + 1

    try:
        return as_index(value) + 1
    except TypeError:
        raise TypeError(
            f"Cannot step values of type {type(value).__name__!r}: {value!r}\n"
            f"Hint: Iteration needs int-like elements or single characters; "
            f"containment checks work for any ordered type."
        ) from None


def distance(start: Any, end: Any) -> int | None:
    """Number of steps from ``start`` to ``end``, or None when unknown."""
    if isinstance(start, int) and isinstance(end, int):
        return max(end - start, 0)
    return None
