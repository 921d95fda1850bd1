"""
Frontend HTML routes.

Serves the Jinja2 pages for browsing monuments by president, state and
year, each with previous/next links that wrap around and a Chart.js chart.

Routes:
    GET /                   → redirect to /president
    GET /president          → redirect to the first president
    GET /president/{name}   → president.html
    GET /states             → redirect to the first state
    GET /state/{name}       → state.html
    GET /years              → redirect to the first year
    GET /year/{year}        → year.html
    GET /timeline           → timeline.html (cumulative monuments per year)

Each request fetches the monuments table once and derives keys, records
and neighbours from that one snapshot.
"""

import logging
import sqlite3
from urllib.parse import quote

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.database import get_db
from api.routes.monuments import get_config, resolve_group
from navigation import Dimension, cumulative_timeline, derive_category_keys
from utils.config import AppConfig
from utils.formatting import chart_json, chart_series, portrait_url
from utils.query import fetch_all

router = APIRouter(tags=["frontend"])

_logger = logging.getLogger("monuments_api")

# Templates instance is set by create_app() after mounting.
_templates: Jinja2Templates | None = None

_EMPTY_MESSAGES = {
    Dimension.PRESIDENT: "No president data found",
    Dimension.STATE: "No state data found",
    Dimension.YEAR: "No year data found",
}

# URL prefix of the detail page for each dimension
_PAGE_PREFIX = {
    Dimension.PRESIDENT: "/president",
    Dimension.STATE: "/state",
    Dimension.YEAR: "/year",
}


def set_templates(t: Jinja2Templates) -> None:
    global _templates
    _templates = t


def _tmpl() -> Jinja2Templates:
    if _templates is None:
        raise RuntimeError("Templates not initialised; call set_templates() first")
    return _templates


def page_link(dimension: Dimension, key) -> str:
    """URL of the detail page for ``key``, with the key percent-encoded."""
    return f"{_PAGE_PREFIX[dimension]}/{quote(str(key), safe='')}"


def _redirect_to_first(
    dimension: Dimension, conn: sqlite3.Connection, cfg: AppConfig
) -> RedirectResponse:
    keys = derive_category_keys(fetch_all(conn), dimension, cfg.legislative_marker)
    if not keys:
        raise HTTPException(status_code=404, detail=_EMPTY_MESSAGES[dimension])
    return RedirectResponse(page_link(dimension, keys[0]), status_code=302)


def _render_group(
    request: Request,
    template: str,
    dimension: Dimension,
    raw_key: str,
    conn: sqlite3.Connection,
    cfg: AppConfig,
    title_format: str = "{key}",
    label_attr: str = "year",
    **extra,
) -> HTMLResponse:
    group = resolve_group(fetch_all(conn), dimension, raw_key, cfg)
    chart_labels, chart_values = chart_series(group.records, label_attr)
    return _tmpl().TemplateResponse(
        request,
        template,
        {
            "page_title": title_format.format(key=group.key),
            "dimension": dimension.value,
            "items": group.records,
            "prev_link": page_link(dimension, group.previous),
            "next_link": page_link(dimension, group.next),
            "prev_key": group.previous,
            "next_key": group.next,
            "chart_labels": chart_labels,
            "chart_values": chart_values,
            **extra,
        },
    )


# ── Routes ────────────────────────────────────────────────────────────────────

@router.get("/", include_in_schema=False)
def index() -> RedirectResponse:
    """Send visitors straight to the president pages."""
    return RedirectResponse("/president", status_code=302)


@router.get("/president", include_in_schema=False)
def president_index(
    conn: sqlite3.Connection = Depends(get_db),
    cfg: AppConfig = Depends(get_config),
) -> RedirectResponse:
    """Redirect to the alphabetically first president."""
    return _redirect_to_first(Dimension.PRESIDENT, conn, cfg)


@router.get("/president/{name}", response_class=HTMLResponse, include_in_schema=False)
def president_page(
    name: str,
    request: Request,
    conn: sqlite3.Connection = Depends(get_db),
    cfg: AppConfig = Depends(get_config),
) -> HTMLResponse:
    """Monuments proclaimed by one president; chart of acres by year."""
    return _render_group(
        request, "president.html", Dimension.PRESIDENT, name, conn, cfg,
        img=portrait_url(name, cfg.portrait_url),
    )


@router.get("/states", include_in_schema=False)
def state_index(
    conn: sqlite3.Connection = Depends(get_db),
    cfg: AppConfig = Depends(get_config),
) -> RedirectResponse:
    """Redirect to the alphabetically first state."""
    return _redirect_to_first(Dimension.STATE, conn, cfg)


@router.get("/state/{name}", response_class=HTMLResponse, include_in_schema=False)
def state_page(
    name: str,
    request: Request,
    conn: sqlite3.Connection = Depends(get_db),
    cfg: AppConfig = Depends(get_config),
) -> HTMLResponse:
    """Monuments in one state (full state name, e.g. "Utah")."""
    return _render_group(
        request, "state.html", Dimension.STATE, name, conn, cfg,
        title_format="State: {key}",
    )


@router.get("/years", include_in_schema=False)
def year_index(
    conn: sqlite3.Connection = Depends(get_db),
    cfg: AppConfig = Depends(get_config),
) -> RedirectResponse:
    """Redirect to the earliest year."""
    return _redirect_to_first(Dimension.YEAR, conn, cfg)


@router.get("/year/{year}", response_class=HTMLResponse, include_in_schema=False)
def year_page(
    year: str,
    request: Request,
    conn: sqlite3.Connection = Depends(get_db),
    cfg: AppConfig = Depends(get_config),
) -> HTMLResponse:
    """Monuments of one year; chart of acres by monument name."""
    return _render_group(
        request, "year.html", Dimension.YEAR, year, conn, cfg,
        title_format="Year: {key}",
        label_attr="current_name",
    )


@router.get("/timeline", response_class=HTMLResponse, include_in_schema=False)
def timeline_page(
    request: Request,
    conn: sqlite3.Connection = Depends(get_db),
) -> HTMLResponse:
    """Cumulative number of monuments over time."""
    points = cumulative_timeline(fetch_all(conn))
    if not points:
        raise HTTPException(status_code=404, detail=_EMPTY_MESSAGES[Dimension.YEAR])
    return _tmpl().TemplateResponse(
        request,
        "timeline.html",
        {
            "page_title": "Monuments over time",
            "points": points,
            "chart_labels": chart_json(year for year, _ in points),
            "chart_values": chart_json(count for _, count in points),
        },
    )


# ── Error pages ───────────────────────────────────────────────────────────────

def _error_message(request: Request, exc: StarletteHTTPException) -> str:
    if exc.status_code == 404 and exc.detail == "Not Found":
        return f'Error 404: "{request.url.path}" not found'
    return f"Error: {exc.detail}"


def register_error_handlers(app: FastAPI) -> None:
    """Answer HTTP errors with an HTML page, or JSON under /api."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        headers = getattr(exc, "headers", None)
        _logger.info(
            "http_error status=%d path=%s detail=%s",
            exc.status_code, request.url.path, exc.detail,
        )
        if request.url.path.startswith("/api/"):
            return JSONResponse(
                status_code=exc.status_code,
                content={
                    "error": "Not found" if exc.status_code == 404 else "Error",
                    "detail": exc.detail,
                    "status_code": exc.status_code,
                },
                headers=headers,
            )
        return _tmpl().TemplateResponse(
            request,
            "error.html",
            {
                "page_title": f"Error {exc.status_code}",
                "message": _error_message(request, exc),
                "status_code": exc.status_code,
            },
            status_code=exc.status_code,
            headers=headers,
        )
