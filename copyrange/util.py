"""Configuration for copyrange.

Index limits mirror the largest length a Python sequence can report.
Extended-allocation mode controls whether growable containers can be indexed.

Environment Variables:
    COPYRANGE_ALLOC: "0"/"false"/"no"/"off" disables extended-allocation mode
"""

import sys

from pydantic_settings import BaseSettings, SettingsConfigDict

# Largest index a sequence can hold; an inclusive end here has no successor
MAX_INDEX = sys.maxsize


class CopyRangeSettings(BaseSettings):
    """Settings read from ``COPYRANGE_*`` environment variables.

    Attributes:
        alloc: Allow indexing growable containers (list, bytearray, array.array).
    """

    model_config = SettingsConfigDict(
        env_prefix="COPYRANGE_",
        extra="ignore",
    )

    alloc: bool = True


settings = CopyRangeSettings()

# Read per call by copyrange.indexing, so it can be patched at runtime
ALLOC = settings.alloc
