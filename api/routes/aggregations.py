"""
GET /api/v1/aggregations/timeline endpoint.

Cumulative number of dated monuments per calendar year, one row per year
from the earliest to the latest year in the table.
"""

import sqlite3

from fastapi import APIRouter, Depends

from api.database import get_db
from api.models import TimelinePointOut
from navigation import cumulative_timeline
from utils.query import fetch_all

router = APIRouter(prefix="/aggregations", tags=["aggregations"])


@router.get(
    "/timeline",
    response_model=list[TimelinePointOut],
    summary="Cumulative monuments per year",
)
def timeline(conn: sqlite3.Connection = Depends(get_db)) -> list[TimelinePointOut]:
    """Return the running monument count for every year, with no gaps.

    Records without a year are left out.
    """
    return [
        TimelinePointOut(year=year, cumulative_count=count)
        for year, count in cumulative_timeline(fetch_all(conn))
    ]
