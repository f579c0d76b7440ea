from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from .config import DEFAULT_APP_CONFIG
from .directory.data_store import get_directory
from .directory.models import RestaurantListResponse, RestaurantRecord, SortOption
from .directory.ordering import sort_options
from .ui.navigation import HOME_PATH, detail_path, home_path
from .ui.panel import PANEL_ENTRIES, PANEL_TITLE, PanelEvent, ProfilePanel
from .ui.views import NOT_FOUND_MESSAGE, DetailView, ListView

app = FastAPI(title="DeDash", version="0.1.0")

_PACKAGE_DIR = Path(__file__).resolve().parent
_STATIC_DIR = _PACKAGE_DIR / "static"

templates = Jinja2Templates(directory=str(_PACKAGE_DIR / "templates"))
templates.env.globals.update(
    home_path=home_path,
    detail_path=detail_path,
    location_label=DEFAULT_APP_CONFIG.location_label,
    panel_title=PANEL_TITLE,
    panel_entries=PANEL_ENTRIES,
    PanelEvent=PanelEvent,
)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Pages ────────────────────────────────────────────────────────────────


@app.get("/")
def root():
    return RedirectResponse(HOME_PATH)


@app.get("/home", response_class=HTMLResponse)
def home(request: Request, sort: str | None = None, panel: str | None = None):
    # Sort key and panel state are per-visit; a bare /home starts from defaults
    view = ListView(get_directory(), sort)
    profile_panel = ProfilePanel.after(panel)
    return templates.TemplateResponse(
        request,
        "home.html",
        {"view": view, "panel": profile_panel},
    )


@app.get("/restaurants/{restaurant_id:path}", response_class=HTMLResponse)
def restaurant_page(request: Request, restaurant_id: str):
    view = DetailView(get_directory(), restaurant_id)
    if not view.found:
        return templates.TemplateResponse(
            request,
            "not_found.html",
            {"message": NOT_FOUND_MESSAGE},
            status_code=404,
        )
    return templates.TemplateResponse(request, "restaurant.html", {"view": view})


# ── JSON API ─────────────────────────────────────────────────────────────


@app.get("/api/sort-options", response_model=list[SortOption])
def api_sort_options() -> list[SortOption]:
    return sort_options()


@app.get("/api/restaurants", response_model=RestaurantListResponse)
def api_list_restaurants(sort: str | None = None) -> RestaurantListResponse:
    view = ListView(get_directory(), sort)
    return RestaurantListResponse(sort_by=view.sort_by, restaurants=view.summaries())


@app.get("/api/restaurants/{restaurant_id:path}", response_model=RestaurantRecord)
def api_get_restaurant(restaurant_id: str) -> RestaurantRecord:
    restaurant = get_directory().find(restaurant_id)
    if restaurant is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return restaurant


# ── Static ───────────────────────────────────────────────────────────────


app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")
