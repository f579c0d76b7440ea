from __future__ import annotations

import logging
from typing import Iterable

from .models import DEFAULT_SORT_KEY, RestaurantRecord, SortKey, SortOption

logger = logging.getLogger(__name__)


def parse_sort_key(value: SortKey | str | None) -> SortKey:
    """Map a raw sort value onto a ``SortKey``, falling back to distance."""
    if isinstance(value, SortKey):
        return value
    if value is None or value == "":
        return DEFAULT_SORT_KEY
    try:
        return SortKey(value)
    except ValueError:
        logger.debug("Unknown sort key %r, falling back to %s", value, DEFAULT_SORT_KEY.value)
        return DEFAULT_SORT_KEY


def sort_restaurants(
    records: Iterable[RestaurantRecord],
    sort_by: SortKey | str | None = DEFAULT_SORT_KEY,
) -> list[RestaurantRecord]:
    """
    Return a new list of ``records`` ordered for display.

    ``sorted`` is stable, so restaurants with equal keys keep their
    directory order. The input is never reordered in place.
    """
    key = parse_sort_key(sort_by)
    if key is SortKey.rating:
        return sorted(records, key=lambda r: -r.rating)
    if key is SortKey.eta:
        return sorted(records, key=lambda r: r.eta_min)
    return sorted(records, key=lambda r: r.distance_mi)


def sort_options() -> list[SortOption]:
    return [SortOption(id=key, label=key.label) for key in SortKey]
