"""Label set helpers."""

from __future__ import annotations

from typing import Mapping


def merge_labels(*label_maps: Mapping[str, str] | None) -> dict[str, str]:
    """Merge label maps into a new dict.

    Later maps override earlier ones on key conflicts; ``None`` is skipped.

    Example:
        >>> merge_labels({"team": "a", "window": "1h"}, {"window": "5m"})
        {'team': 'a', 'window': '5m'}
    """
    merged: dict[str, str] = {}
    for labels in label_maps:
        if labels:
            merged.update(labels)
    return merged
