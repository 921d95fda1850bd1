"""
Navigation package -- grouping and ordering of monument records.

Re-exports key entry points so callers can do::

    from navigation import Dimension, derive_category_keys, neighbors
"""

from navigation.records import Monument
from navigation.engine import (
    Dimension,
    cumulative_timeline,
    derive_category_keys,
    neighbors,
    select_records,
    sort_newest_first,
)

__all__ = [
    "Monument",
    "Dimension",
    "cumulative_timeline",
    "derive_category_keys",
    "neighbors",
    "select_records",
    "sort_newest_first",
]
