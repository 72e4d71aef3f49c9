"""Pick which two demographic subgroups a comparison chart should contrast."""

from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Optional, Tuple

import pandas as pd


def _entry_value(entry: Any) -> Any:
    if isinstance(entry, Mapping):
        return entry.get("value")
    return entry


def subgroup_means(groups: Mapping[str, Mapping[str, Any]]) -> Dict[str, float]:
    """Average each subgroup's ``value`` across categories.

    Args:
        groups: Mapping of category to a mapping of subgroup key to an entry,
            where an entry is either ``{"value": float, ...}`` or a bare
            number.

    Returns:
        dict[str, float]: Mean per subgroup, in the order the keys appear in
        the first category. Missing, ``None`` and ``NaN`` values are skipped
        rather than counted as zero; subgroups with no values are omitted.
        Keys that only appear in later categories are ignored.
    """
    if not groups:
        return {}
    first = next(iter(groups.values())) or {}
    keys = list(first.keys())
    if not keys:
        return {}

    rows = [
        {key: _entry_value((items or {}).get(key)) for key in keys}
        for items in groups.values()
    ]
    frame = pd.DataFrame(rows, columns=keys, dtype=object)
    frame = frame.apply(pd.to_numeric, errors="coerce").astype(float)
    means = frame.mean(axis=0, skipna=True)
    return {key: float(means[key]) for key in keys if not math.isnan(means[key])}


def find_most_divergent_pair(
    groups: Mapping[str, Mapping[str, Any]],
) -> Optional[Tuple[str, str]]:
    """Return the two subgroups whose mean values differ the most.

    Args:
        groups: Same shape as for :func:`subgroup_means`.

    Returns:
        tuple[str, str] | None: The pair with the largest absolute difference
        of means, ordered as the keys appear in the first category. The first
        pair encountered wins ties. ``None`` when fewer than two subgroups
        have any data.
    """
    means = subgroup_means(groups)
    keys = list(means)
    if len(keys) < 2:
        return None

    best: Optional[Tuple[str, str]] = None
    best_diff = -1.0
    for i, key_a in enumerate(keys):
        for key_b in keys[i + 1:]:
            diff = abs(means[key_a] - means[key_b])
            if diff > best_diff:
                best_diff = diff
                best = (key_a, key_b)
    return best
