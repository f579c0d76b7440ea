from __future__ import annotations

from urllib.parse import quote, urlencode

from ..directory.models import DEFAULT_SORT_KEY, SortKey

HOME_PATH = "/home"


def detail_path(restaurant_id: str) -> str:
    """Path of a restaurant's detail page. The id is an opaque path segment."""
    return f"/restaurants/{quote(restaurant_id, safe='')}"


def home_path(sort_by: SortKey = DEFAULT_SORT_KEY, panel: str | None = None) -> str:
    """Path of the home page carrying the current sort key and a panel event."""
    params: dict[str, str] = {}
    if sort_by is not DEFAULT_SORT_KEY:
        params["sort"] = sort_by.value
    if panel:
        params["panel"] = panel
    return f"{HOME_PATH}?{urlencode(params)}" if params else HOME_PATH
