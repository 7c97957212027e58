from loguru import logger

from .bounds import (
    Bound,
    BoundPair,
    Excluded,
    Included,
    RangeBounds,
    Unbounded,
    as_bounds,
    slice_range,
)
from .errors import ExhaustedRangeError, IndexOutOfBoundsError, SliceIndexOrderError
from .indexing import MutableSequenceView, SequenceView, drain, index, index_mut
from .iters import BoundedRangeIter, ClosedRangeIter, UnboundedStartRangeIter
from .ranges import (
    BoundedRange,
    ClosedEndRange,
    ClosedRange,
    EndBoundedRange,
    FullRange,
    UnboundedStartRange,
)

# Library logging stays silent until the application opts in
logger.disable(__name__)

__all__ = [
    "BoundedRange",
    "UnboundedStartRange",
    "ClosedRange",
    "EndBoundedRange",
    "ClosedEndRange",
    "FullRange",
    "BoundedRangeIter",
    "UnboundedStartRangeIter",
    "ClosedRangeIter",
    "Bound",
    "BoundPair",
    "Included",
    "Excluded",
    "Unbounded",
    "RangeBounds",
    "as_bounds",
    "slice_range",
    "index",
    "index_mut",
    "drain",
    "SequenceView",
    "MutableSequenceView",
    "IndexOutOfBoundsError",
    "SliceIndexOrderError",
    "ExhaustedRangeError",
]
