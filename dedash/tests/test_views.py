from __future__ import annotations

import pytest

from dedash.directory.data_store import RestaurantDirectory, get_directory
from dedash.directory.models import MenuItem, RestaurantRecord, SortKey
from dedash.ui.navigation import detail_path, home_path
from dedash.ui.panel import PanelEvent, ProfilePanel
from dedash.ui.views import (
    DetailView,
    ListView,
    format_distance,
    format_eta,
    format_price,
    format_rating,
)


@pytest.fixture()
def scenario_directory() -> RestaurantDirectory:
    return RestaurantDirectory([
        RestaurantRecord(
            id="a", name="Alpha", cuisine="Thai", distance_mi=3, eta_min=20, rating=4.5,
            menu=(MenuItem(id="m1", name="Pad Thai", price=12.5),),
        ),
        RestaurantRecord(
            id="b", name="Beta", cuisine="Greek", distance_mi=1, eta_min=15, rating=4.0,
        ),
    ])


# ── Formatting ───────────────────────────────────────────────────────────


class TestFormatting:
    def test_price_two_decimals(self):
        assert format_price(12.5) == "$12.50"
        assert format_price(9) == "$9.00"

    def test_distance_one_decimal(self):
        assert format_distance(0.6) == "0.6 mi away"
        assert format_distance(3) == "3.0 mi away"

    def test_eta(self):
        assert format_eta(25) == "25 min"

    def test_rating(self):
        assert format_rating(4.7) == "⭐ 4.7"
        assert format_rating(4.0) == "⭐ 4"


# ── List view ────────────────────────────────────────────────────────────


class TestListView:
    def test_defaults_to_distance(self, scenario_directory):
        view = ListView(scenario_directory)
        assert view.sort_by is SortKey.distance
        assert [r.id for r in view.restaurants] == ["b", "a"]

    def test_change_sort_recomputes(self, scenario_directory):
        view = ListView(scenario_directory)
        view.change_sort("rating")
        assert [r.id for r in view.restaurants] == ["a", "b"]
        view.change_sort("eta")
        assert [r.id for r in view.restaurants] == ["b", "a"]

    def test_unknown_sort_falls_back(self, scenario_directory):
        view = ListView(scenario_directory, "cheapest")
        assert view.sort_by is SortKey.distance

    def test_directory_untouched(self, scenario_directory):
        ListView(scenario_directory, "rating").cards()
        assert [r.id for r in scenario_directory.list()] == ["a", "b"]

    def test_cards_link_to_detail_page(self, scenario_directory):
        cards = ListView(scenario_directory).cards()
        assert [c.href for c in cards] == ["/restaurants/b", "/restaurants/a"]
        assert cards[1].distance == "3.0 mi away"
        assert cards[1].eta == "20 min"
        assert cards[1].rating == "⭐ 4.5"

    def test_select_returns_detail_path(self, scenario_directory):
        view = ListView(scenario_directory)
        assert view.select(scenario_directory.find("a")) == "/restaurants/a"

    def test_options_mark_selected(self, scenario_directory):
        options = ListView(scenario_directory, "eta").options()
        assert [o["id"] for o in options if o["selected"]] == ["eta"]

    def test_summaries_exclude_menu(self, scenario_directory):
        summary = ListView(scenario_directory).summaries()[1]
        assert summary.id == "a"
        assert "menu" not in summary.model_dump()


# ── Detail view ──────────────────────────────────────────────────────────


class TestDetailView:
    def test_found(self, scenario_directory):
        view = DetailView(scenario_directory, "a")
        assert view.found
        assert view.restaurant.name == "Alpha"
        lines = view.menu_lines()
        assert [(line.name, line.price) for line in lines] == [("Pad Thai", "$12.50")]

    def test_not_found(self, scenario_directory):
        view = DetailView(scenario_directory, "z")
        assert not view.found
        assert view.restaurant is None
        assert view.menu_lines() == []

    def test_fixture_menu_prices(self):
        lines = DetailView(get_directory(), "6").menu_lines()
        assert [line.price for line in lines] == ["$9.50", "$28.00", "$22.50"]


# ── Profile panel ────────────────────────────────────────────────────────


class TestProfilePanel:
    def test_starts_closed(self):
        assert ProfilePanel().open is False

    def test_profile_opens(self):
        panel = ProfilePanel()
        assert panel.handle(PanelEvent.profile) is True

    @pytest.mark.parametrize("event", ["close", "overlay"])
    def test_close_events_close(self, event):
        panel = ProfilePanel(open=True)
        assert panel.handle(event) is False

    def test_open_is_idempotent(self):
        panel = ProfilePanel(open=True)
        assert panel.handle("profile") is True

    @pytest.mark.parametrize("event", ["bogus", None, ""])
    def test_unknown_event_keeps_state(self, event):
        assert ProfilePanel(open=True).handle(event) is True
        assert ProfilePanel().handle(event) is False

    def test_after_applies_event_to_fresh_panel(self):
        assert ProfilePanel.after("profile").open is True
        assert ProfilePanel.after("overlay").open is False
        assert ProfilePanel.after(None).open is False


# ── Navigation ───────────────────────────────────────────────────────────


def test_detail_path_quotes_id():
    assert detail_path("1") == "/restaurants/1"
    assert detail_path("a/b c") == "/restaurants/a%2Fb%20c"


def test_home_path():
    assert home_path() == "/home"
    assert home_path(SortKey.rating) == "/home?sort=rating"
    assert home_path(SortKey.eta, "profile") == "/home?sort=eta&panel=profile"
    assert home_path(SortKey.distance, "close") == "/home?panel=close"
