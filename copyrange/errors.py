"""Exceptions raised by copyrange.

Indexing failures subclass IndexError so they propagate exactly where native
sequence indexing failures would.
"""


class IndexOutOfBoundsError(IndexError):
    """A range bound falls outside the indexed sequence."""

    def __init__(self, message: str, *, index: int, length: int | None = None):
        super().__init__(message)
        self.index: int = index
        self.length: int | None = length

    @classmethod
    def start(cls, index: int, length: int) -> "IndexOutOfBoundsError":
        return cls(
            f"range start index {index} out of range for slice of length {length}",
            index=index,
            length=length,
        )

    @classmethod
    def end(cls, index: int, length: int) -> "IndexOutOfBoundsError":
        return cls(
            f"range end index {index} out of range for slice of length {length}",
            index=index,
            length=length,
        )


class SliceIndexOrderError(IndexError):
    """A range used as an index starts after it ends."""

    def __init__(self, start: int, end: int):
        super().__init__(f"slice index starts at {start} but ends at {end}")
        self.start: int = start
        self.end: int = end


class ExhaustedRangeError(ValueError):
    """Strict conversion was asked to read bounds from an exhausted iterator."""
