"""
Pydantic response models for the JSON API.

Optional fields default to None so that partial responses stay valid when
database rows have NULL columns.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# ── Record models ─────────────────────────────────────────────────────────────

class MonumentOut(BaseModel):
    """A single monument row. Acreage is in acres."""
    current_name: str = Field(..., description="Current monument name", examples=["Devils Tower"])
    original_name: str | None = Field(None, description="Name at proclamation time", examples=["Devils Tower"])
    owner: str = Field(..., description="President or legislative body that acted", examples=["Theodore Roosevelt"])
    states: str | None = Field(None, description="Comma-separated list of states", examples=["Wyoming"])
    current_agency: str | None = Field(None, description="Managing agency", examples=["NPS"])
    action: str | None = Field(None, description="Establishment, enlargement, diminishment, ...", examples=["Establishment"])
    date: str | None = Field(None, description="Month/day of the action", examples=["9/24"])
    year: int = Field(0, description="Year of the action; 0 when unknown", examples=[1906])
    acres_affected: float = Field(0.0, description="Acres affected by the action", examples=[1347.0])


class MonumentListOut(BaseModel):
    """Monuments for one key of a dimension, newest first, with navigation."""
    dimension: str = Field(..., examples=["president"])
    key: str | int = Field(..., examples=["Theodore Roosevelt"])
    previous: str | int = Field(..., description="Previous key, wrapping at the start")
    next: str | int = Field(..., description="Next key, wrapping at the end")
    total: int = Field(..., description="Number of monuments returned")
    items: list[MonumentOut]


# ── Navigation models ─────────────────────────────────────────────────────────

class CategoryKeysOut(BaseModel):
    """All keys of a dimension in ascending order."""
    dimension: str = Field(..., examples=["state"])
    keys: list[str | int] = Field(..., examples=[["Montana", "Wyoming"]])


class NavigationOut(BaseModel):
    """Wrap-around neighbours of one key."""
    dimension: str = Field(..., examples=["year"])
    key: str | int = Field(..., examples=[1906])
    previous: str | int = Field(..., examples=[1996])
    next: str | int = Field(..., examples=[1907])


# ── Aggregation models ────────────────────────────────────────────────────────

class TimelinePointOut(BaseModel):
    """Cumulative number of dated monuments up to and including ``year``."""
    year: int = Field(..., examples=[1906])
    cumulative_count: int = Field(..., examples=[12])


class ErrorResponse(BaseModel):
    """Standard error body for /api routes."""
    error: str = Field(..., examples=["Not found"])
    detail: str | None = Field(None, examples=['no data for state "Atlantis"'])
    status_code: int = Field(..., examples=[404])
