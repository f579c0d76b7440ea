from __future__ import annotations

import logging
from dataclasses import dataclass

from ..directory.data_store import RestaurantDirectory
from ..directory.models import RestaurantRecord, RestaurantSummary, SortKey
from ..directory.ordering import parse_sort_key, sort_options, sort_restaurants
from .navigation import detail_path

logger = logging.getLogger(__name__)

LIST_HEADING = "Restaurants near you"
NOT_FOUND_MESSAGE = "Restaurant not found"


def format_price(price: float) -> str:
    return f"${price:.2f}"


def format_distance(distance_mi: float) -> str:
    return f"{distance_mi:.1f} mi away"


def format_eta(eta_min: int) -> str:
    return f"{eta_min} min"


def format_rating(rating: float) -> str:
    return f"⭐ {rating:g}"


@dataclass(frozen=True)
class RestaurantCard:
    id: str
    name: str
    cuisine: str
    distance: str
    eta: str
    rating: str
    href: str

    @classmethod
    def from_record(cls, record: RestaurantRecord, href: str) -> RestaurantCard:
        return cls(
            id=record.id,
            name=record.name,
            cuisine=record.cuisine,
            distance=format_distance(record.distance_mi),
            eta=format_eta(record.eta_min),
            rating=format_rating(record.rating),
            href=href,
        )


@dataclass(frozen=True)
class MenuLine:
    id: str
    name: str
    price: str


class ListView:
    """Home page listing: the directory ordered by the active sort key."""

    heading = LIST_HEADING

    def __init__(self, directory: RestaurantDirectory, sort_by: SortKey | str | None = None) -> None:
        self._directory = directory
        self.sort_by = parse_sort_key(sort_by)

    def change_sort(self, value: SortKey | str | None) -> None:
        self.sort_by = parse_sort_key(value)

    @property
    def restaurants(self) -> list[RestaurantRecord]:
        return sort_restaurants(self._directory.list(), self.sort_by)

    def summaries(self) -> list[RestaurantSummary]:
        return [
            RestaurantSummary(**r.model_dump(exclude={"menu"}))
            for r in self.restaurants
        ]

    def cards(self) -> list[RestaurantCard]:
        return [RestaurantCard.from_record(r, self.select(r)) for r in self.restaurants]

    def options(self) -> list[dict]:
        return [
            {"id": opt.id.value, "label": opt.label, "selected": opt.id is self.sort_by}
            for opt in sort_options()
        ]

    def select(self, restaurant: RestaurantRecord) -> str:
        """Navigation target when the user activates a restaurant card."""
        return detail_path(restaurant.id)


class DetailView:
    """Restaurant page. A missing id yields the terminal not-found state."""

    def __init__(self, directory: RestaurantDirectory, restaurant_id: str) -> None:
        self.restaurant = directory.find(restaurant_id)
        if self.restaurant is None:
            logger.info("Restaurant %r not found", restaurant_id)

    @property
    def found(self) -> bool:
        return self.restaurant is not None

    def menu_lines(self) -> list[MenuLine]:
        if self.restaurant is None:
            return []
        return [
            MenuLine(id=item.id, name=item.name, price=format_price(item.price))
            for item in self.restaurant.menu
        ]
