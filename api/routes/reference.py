"""
Reference data endpoints.

GET /api/v1/reference/presidents  → presidents with monuments (no Congress)
GET /api/v1/reference/states      → every state named in a region list
GET /api/v1/reference/years       → every known year
GET /api/v1/reference/{dimension} → same, singular dimension names accepted
"""

import sqlite3

from fastapi import APIRouter, Depends

from api.database import get_db
from api.models import CategoryKeysOut, ErrorResponse
from api.routes.monuments import get_config
from navigation import Dimension, derive_category_keys
from utils.config import AppConfig
from utils.query import fetch_all

router = APIRouter(prefix="/reference", tags=["reference"])


@router.get(
    "/{dimension}",
    response_model=CategoryKeysOut,
    summary="List the keys of a dimension",
    responses={400: {"model": ErrorResponse, "description": "Unknown dimension"}},
)
def list_keys(
    dimension: str,
    conn: sqlite3.Connection = Depends(get_db),
    cfg: AppConfig = Depends(get_config),
) -> CategoryKeysOut:
    """Return the sorted, duplicate-free keys of ``dimension``.

    An empty list means the dimension has no data.
    """
    dim = Dimension.parse(dimension)
    keys = derive_category_keys(fetch_all(conn), dim, cfg.legislative_marker)
    return CategoryKeysOut(dimension=dim.value, keys=keys)
