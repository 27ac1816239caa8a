from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

# Reference fields hold an id, or the nested record when expanded (e.g. "cover.url").
Reference = int | dict[str, Any]


class Game(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: Optional[str] = None
    slug: Optional[str] = None
    summary: Optional[str] = None
    storyline: Optional[str] = None
    url: Optional[str] = None

    rating: Optional[float] = None
    rating_count: Optional[int] = None
    aggregated_rating: Optional[float] = None
    total_rating: Optional[float] = None

    # unix timestamps on the wire
    first_release_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    category: Optional[int] = None
    status: Optional[int] = None
    cover: Optional[Reference] = None
    franchise: Optional[Reference] = None
    genres: list[Reference] = []
    platforms: list[Reference] = []


class Count(BaseModel):
    count: int
