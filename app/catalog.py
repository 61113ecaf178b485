"""
Catalog queries

- sample_entries: random sample of deduplicated entries, drawn without
  replacement and clamped to the number of distinct entries
- aggregate_scores: score filter kept exactly as the site has always
  served it (returns no records, see docstring)
"""
import json
import math
import random
from typing import Any, List, Optional

from app.models import ScoreRecord


DEFAULT_SAMPLE_SIZE = 5

SCORES_AGGREGATE_WARNING = (
    "Score aggregate never carries its running total; /scores returns no records"
)


def _normalize(value: Any) -> Any:
    """Whole-number floats become ints so 2 and 2.0 compare equal; bools stay bools"""
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {k: _normalize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_normalize(v) for v in value]
    return value


def _entry_key(entry: Any) -> str:
    """
    Canonical value key for an entry

    Objects compare by content regardless of key order, so dicts and
    lists (unhashable) can be deduplicated too.
    """
    return json.dumps(_normalize(entry), sort_keys=True, separators=(',', ':'), default=str)


def dedupe_entries(entries: List[Any]) -> List[Any]:
    """
    Remove value-equal duplicates, keeping the first occurrence

    Example:
        >>> dedupe_entries(["a", "b", "a", {"x": 1}, {"x": 1}])
        ['a', 'b', {'x': 1}]
    """
    seen = set()
    unique = []

    for entry in entries:
        key = _entry_key(entry)
        if key in seen:
            continue
        seen.add(key)
        unique.append(entry)

    return unique


def sample_entries(
    entries: List[Any],
    size: int = DEFAULT_SAMPLE_SIZE,
    rng: Optional[random.Random] = None
) -> List[Any]:
    """
    Draw a random sample of distinct entries

    Every call is an independent draw, so repeated calls may return
    different subsets in different orders.

    Args:
        entries: Catalog entries (may contain duplicates)
        size: Maximum number of entries to return
        rng: Random source (defaults to the module-level generator)

    Returns:
        min(size, number of distinct entries) entries, no repeats
    """
    unique = dedupe_entries(entries)
    count = min(max(size, 0), len(unique))

    if count == 0:
        return []

    return (rng or random).sample(unique, count)


def _add_points(memo: Optional[float], points: Optional[float]) -> float:
    # Missing operand yields NaN
    if memo is None or points is None:
        return math.nan
    return memo + points


def aggregate_scores(scores: List[ScoreRecord]) -> List[ScoreRecord]:
    """
    Filter scores by running total

    Known defect: the running total is never carried from one record to
    the next, so every step computes "nothing + points", which is NaN, and
    NaN never passes the filter. The result is always an empty list.
    Served unchanged until product decides what the aggregate should be.

    Args:
        scores: Catalog score records

    Returns:
        Records whose running total is truthy (none, in practice)
    """
    kept = []
    for score in scores:
        memo = None
        total = _add_points(memo, score.points)
        if total and not math.isnan(total):
            kept.append(score)

    return kept
