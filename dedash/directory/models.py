from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SortKey(str, Enum):
    distance = "distance"
    rating = "rating"
    eta = "eta"

    @property
    def label(self) -> str:
        return SORT_LABELS[self]


SORT_LABELS: dict[SortKey, str] = {
    SortKey.distance: "Closest",
    SortKey.rating: "Best rated",
    SortKey.eta: "Fastest",
}

DEFAULT_SORT_KEY = SortKey.distance


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    price: float = Field(..., ge=0.0)


class RestaurantRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    cuisine: str
    distance_mi: float = Field(..., ge=0.0)
    eta_min: int = Field(..., ge=0)
    rating: float = Field(..., ge=0.0, le=5.0)
    menu: tuple[MenuItem, ...] = ()


class SortOption(BaseModel):
    id: SortKey
    label: str


class RestaurantSummary(BaseModel):
    """Card-level view of a restaurant, without its menu."""

    id: str
    name: str
    cuisine: str
    distance_mi: float
    eta_min: int
    rating: float


class RestaurantListResponse(BaseModel):
    sort_by: SortKey
    restaurants: list[RestaurantSummary]
