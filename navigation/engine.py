"""
Category & ordering engine.

Pure functions over a snapshot of ``Monument`` records:

    derive_category_keys  -- sorted, deduplicated keys for a dimension
    select_records        -- records matching a key, newest first
    neighbors             -- wrap-around previous/next key
    cumulative_timeline   -- running monument count per calendar year

Callers fetch the snapshot once per request and pass the same list to every
function, so a key returned by ``derive_category_keys`` is always present
when ``neighbors`` is asked about it.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Union

from navigation.records import Monument
from utils.config import DEFAULT_LEGISLATIVE_MARKER, STATE_MATCH_MODES

Key = Union[str, int]


class Dimension(str, Enum):
    """Navigation axis along which monuments are grouped."""

    PRESIDENT = "president"
    STATE = "state"
    YEAR = "year"

    @classmethod
    def parse(cls, value: str) -> "Dimension":
        """Accept ``president``/``presidents``, ``state``/``states``, ``year``/``years``."""
        text = str(value).strip().lower()
        if text.endswith("s") and text[:-1] in cls._value2member_map_:
            text = text[:-1]
        try:
            return cls(text)
        except ValueError:
            raise ValueError(
                f"dimension must be one of: {[d.value for d in cls]}, got '{value}'"
            ) from None


def sort_newest_first(records: Iterable[Monument]) -> list[Monument]:
    """Return records ordered by ``(year, month, day)``, newest first.

    The sort is stable: records with identical dates keep their input order.
    """
    return sorted(records, key=lambda r: r.ordering_key, reverse=True)


def derive_category_keys(
    records: Iterable[Monument],
    dimension: Dimension,
    legislative_marker: str = DEFAULT_LEGISLATIVE_MARKER,
) -> list[Key]:
    """Return the sorted, duplicate-free keys of ``dimension``.

    - president: non-empty owner values, minus any containing ``legislative_marker``
    - state: every trimmed, non-empty name from the region lists
    - year: every positive year, ascending numerically (zero and negative
      years are unknown dates, not keys)

    An empty list means nothing qualifies.
    """
    dimension = Dimension(dimension)
    if dimension is Dimension.PRESIDENT:
        owners = {r.owner for r in records if r.owner}
        if legislative_marker:
            owners = {o for o in owners if legislative_marker not in o}
        return sorted(owners)
    if dimension is Dimension.STATE:
        return sorted({name for r in records for name in r.state_list})
    return sorted({r.year for r in records if r.year > 0})


def _matches(record: Monument, dimension: Dimension, key: Key, state_match: str) -> bool:
    if dimension is Dimension.PRESIDENT:
        return record.owner == key
    if dimension is Dimension.YEAR:
        return record.year == key
    if state_match == "substring":
        return str(key) in record.states
    return key in record.state_list


def select_records(
    records: Iterable[Monument],
    dimension: Dimension,
    key: Key,
    state_match: str = "exact",
) -> list[Monument]:
    """Return the records belonging to ``key``, newest first.

    President and year use exact equality.  For states, ``state_match``
    chooses between matching a whole name in the region list ("exact") and
    the legacy containment test on the raw text ("substring").
    """
    dimension = Dimension(dimension)
    if state_match not in STATE_MATCH_MODES:
        raise ValueError(
            f"state_match must be one of {sorted(STATE_MATCH_MODES)}, got '{state_match}'"
        )
    return sort_newest_first(
        r for r in records if _matches(r, dimension, key, state_match)
    )


def neighbors(ordered_keys: Sequence[Key], current_key: Key) -> tuple[Key, Key]:
    """Return the ``(previous, next)`` keys around ``current_key``, wrapping.

    Raises:
        ValueError: if ``ordered_keys`` is empty or does not contain
            ``current_key``.  Routes check membership first.
    """
    if not ordered_keys:
        raise ValueError("cannot navigate an empty key list")
    index = list(ordered_keys).index(current_key)
    size = len(ordered_keys)
    return ordered_keys[(index - 1) % size], ordered_keys[(index + 1) % size]


def cumulative_timeline(records: Iterable[Monument]) -> list[tuple[int, int]]:
    """Running count of dated monuments for every year from first to last.

    Years without new monuments repeat the previous total, so the series
    has no gaps and never decreases.
    """
    per_year = Counter(r.year for r in records if r.year > 0)
    if not per_year:
        return []
    timeline: list[tuple[int, int]] = []
    total = 0
    for year in range(min(per_year), max(per_year) + 1):
        total += per_year.get(year, 0)
        timeline.append((year, total))
    return timeline
