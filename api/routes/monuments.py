"""
Monument listing endpoints.

GET /api/v1/monuments?dimension=president&key=Theodore+Roosevelt
    → monuments for one key, newest first, with previous/next keys
GET /api/v1/monuments/navigation/{dimension}/{key}
    → previous/next keys only

resolve_group() is shared with the HTML routes in frontend.py so both
surfaces answer "not found" the same way.
"""

import sqlite3
from dataclasses import dataclass, field

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi import Query as FQuery

from api.database import get_db
from api.models import ErrorResponse, MonumentListOut, MonumentOut, NavigationOut
from navigation import (
    Dimension,
    Monument,
    derive_category_keys,
    neighbors,
    select_records,
)
from navigation.engine import Key
from utils.config import AppConfig
from utils.query import fetch_all

router = APIRouter(prefix="/monuments", tags=["monuments"])

NOT_FOUND_MESSAGES = {
    Dimension.PRESIDENT: 'no data for president "{key}"',
    Dimension.STATE: 'no data for state "{key}"',
    Dimension.YEAR: "no data for year {key}",
}


@dataclass
class Group:
    """Everything a page needs for one key of a dimension."""
    dimension: Dimension
    key: Key
    keys: list[Key]
    previous: Key
    next: Key
    records: list[Monument] = field(default_factory=list)


def get_config(request: Request) -> AppConfig:
    """FastAPI dependency: the AppConfig the application was created with."""
    return request.app.state.config


def parse_key(dimension: Dimension, raw_key: str) -> Key | None:
    """Year keys are plain digit strings parsed to int; other keys are text.

    Returns None for a year that is not all digits ("1906.9", "1,906").
    """
    if dimension is Dimension.YEAR:
        text = raw_key.strip()
        if not (text.isascii() and text.isdigit()):
            return None
        return int(text)
    return raw_key


def resolve_group(
    records: list[Monument],
    dimension: Dimension,
    raw_key: str,
    cfg: AppConfig,
) -> Group:
    """Select one key's records and its neighbours from a single snapshot.

    Raises:
        HTTPException: 404 when the key has no records, or when it selects
            records but is not itself a key of the dimension (a legislative
            owner, or a partial state name under substring matching).
    """
    key = parse_key(dimension, raw_key)
    keys = derive_category_keys(records, dimension, cfg.legislative_marker)
    selected = [] if key is None else select_records(records, dimension, key, cfg.state_match)
    if not selected or key not in keys:
        raise HTTPException(
            status_code=404,
            detail=NOT_FOUND_MESSAGES[dimension].format(key=raw_key),
        )
    previous, next_key = neighbors(keys, key)
    return Group(
        dimension=dimension,
        key=key,
        keys=keys,
        previous=previous,
        next=next_key,
        records=selected,
    )


@router.get(
    "",
    response_model=MonumentListOut,
    summary="Monuments for one president, state or year",
    responses={
        400: {"model": ErrorResponse, "description": "Unknown dimension"},
        404: {"model": ErrorResponse, "description": "No monuments for this key"},
    },
)
def list_monuments(
    dimension: str = FQuery(..., description="president, state or year"),
    key: str = FQuery(..., description="President name, state name or year"),
    conn: sqlite3.Connection = Depends(get_db),
    cfg: AppConfig = Depends(get_config),
) -> MonumentListOut:
    """Return the monuments for ``key`` newest first, plus wrap-around neighbours."""
    dim = Dimension.parse(dimension)
    group = resolve_group(fetch_all(conn), dim, key, cfg)
    return MonumentListOut(
        dimension=dim.value,
        key=group.key,
        previous=group.previous,
        next=group.next,
        total=len(group.records),
        items=[MonumentOut(**r.to_dict()) for r in group.records],
    )


@router.get(
    "/navigation/{dimension}/{key}",
    response_model=NavigationOut,
    summary="Previous and next key",
    responses={404: {"model": ErrorResponse, "description": "Unknown key"}},
)
def navigation(
    dimension: str,
    key: str,
    conn: sqlite3.Connection = Depends(get_db),
    cfg: AppConfig = Depends(get_config),
) -> NavigationOut:
    """Return the keys before and after ``key``, wrapping at both ends."""
    dim = Dimension.parse(dimension)
    group = resolve_group(fetch_all(conn), dim, key, cfg)
    return NavigationOut(
        dimension=dim.value, key=group.key,
        previous=group.previous, next=group.next,
    )
