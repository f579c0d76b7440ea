from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

import pandas as pd
from pydantic import ValidationError

from ..config import DEFAULT_APP_CONFIG, AppConfig
from .errors import DirectoryError
from .models import MenuItem, RestaurantRecord

logger = logging.getLogger(__name__)

RESTAURANT_COLUMNS: list[str] = ["id", "name", "cuisine", "distance_mi", "eta_min", "rating"]
MENU_ITEM_COLUMNS: list[str] = ["id", "restaurant_id", "name", "price"]

_directory: RestaurantDirectory | None = None


class RestaurantDirectory:
    """Read-only collection of restaurant records in fixture order."""

    def __init__(self, records: Iterable[RestaurantRecord]) -> None:
        self._records = tuple(records)
        self._by_id: dict[str, RestaurantRecord] = {}
        for record in self._records:
            if record.id in self._by_id:
                raise DirectoryError(f"duplicate restaurant id {record.id!r}")
            self._by_id[record.id] = record

    def list(self) -> list[RestaurantRecord]:
        """Return every record in insertion order, as a fresh list."""
        return list(self._records)

    def find(self, restaurant_id: str) -> RestaurantRecord | None:
        """Return the record with ``restaurant_id``, or ``None``."""
        return self._by_id.get(restaurant_id)

    def __len__(self) -> int:
        return len(self._records)


def _read_csv(path: Path, columns: list[str]) -> list[dict[str, Any]]:
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except FileNotFoundError as exc:
        raise DirectoryError("fixture file not found", path) from exc
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise DirectoryError(f"unreadable CSV ({exc})", path) from exc

    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise DirectoryError(f"missing columns: {', '.join(missing)}", path)

    # Cells stay text here; pydantic coerces the numeric fields
    df = df[columns].copy()
    for col in columns:
        df[col] = df[col].str.strip()

    return df.to_dict(orient="records")


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    field = ".".join(str(part) for part in first["loc"])
    return f"{field}: {first['msg']}"


def _load_menus(path: Path, restaurant_ids: set[str]) -> dict[str, list[MenuItem]]:
    menus: dict[str, list[MenuItem]] = {}
    seen: set[tuple[str, str]] = set()

    # Row numbers are reported 1-based with the header as row 1
    for row_number, row in enumerate(_read_csv(path, MENU_ITEM_COLUMNS), start=2):
        restaurant_id = row.pop("restaurant_id")
        if restaurant_id not in restaurant_ids:
            raise DirectoryError(
                f"row {row_number}: unknown restaurant id {restaurant_id!r}", path
            )
        if (restaurant_id, row["id"]) in seen:
            raise DirectoryError(
                f"row {row_number}: duplicate menu item id {row['id']!r} "
                f"for restaurant {restaurant_id!r}",
                path,
            )
        seen.add((restaurant_id, row["id"]))

        try:
            item = MenuItem(**row)
        except ValidationError as exc:
            raise DirectoryError(f"row {row_number}: {_describe(exc)}", path) from exc
        menus.setdefault(restaurant_id, []).append(item)

    return menus


def load_directory(config: AppConfig = DEFAULT_APP_CONFIG) -> RestaurantDirectory:
    """
    Build a directory from the CSV fixture.

    Steps:
    - Read restaurants and menu items with pandas.
    - Attach menu items to their restaurant, keeping file order.
    - Validate every row into an immutable record.
    """
    rows = _read_csv(config.restaurants_path, RESTAURANT_COLUMNS)
    restaurant_ids = {row["id"] for row in rows}
    menus = _load_menus(config.menu_items_path, restaurant_ids)

    records: list[RestaurantRecord] = []
    for row_number, row in enumerate(rows, start=2):
        try:
            records.append(
                RestaurantRecord(**row, menu=tuple(menus.get(row["id"], [])))
            )
        except ValidationError as exc:
            raise DirectoryError(
                f"row {row_number}: {_describe(exc)}", config.restaurants_path
            ) from exc

    try:
        directory = RestaurantDirectory(records)
    except DirectoryError as exc:
        raise DirectoryError(exc.reason, config.restaurants_path) from exc

    logger.info(
        "Loaded %d restaurants from %s", len(directory), config.restaurants_path
    )
    return directory


def get_directory() -> RestaurantDirectory:
    """Return the in-memory directory, loading it on first call."""
    global _directory
    if _directory is None:
        _directory = load_directory()
    return _directory


def reset_directory() -> None:
    global _directory
    _directory = None
