"""Schemas for filtered catalog views and API payloads."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from patent_catalog.schemas.dataset import (
    CategoryBucket,
    CategoryCount,
    ContentGroup,
    PatentType,
    PersonTypePair,
)

ALL = "all"


class ViewState(BaseModel):
    """User selections driving the filtered view."""

    patent_type: PatentType = PatentType.GRANTED
    query: str = ""
    year: str = Field(ALL, description="Year filter for Content files, or 'all'.")
    content_type: str = Field(ALL, description="Content-type filter, or 'all'.")

    model_config = ConfigDict(frozen=True)


class FilteredView(BaseModel):
    """Per-category buckets for one patent type, parallel in shape to the taxonomy."""

    patent_type: PatentType
    categories: Dict[str, CategoryBucket] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class CatalogViewRead(BaseModel):
    view_state: ViewState
    total: int
    categories: List[CategoryCount]
    buckets: Dict[str, CategoryBucket]


class CategoryDetailRead(BaseModel):
    name: str
    count: int
    bucket: CategoryBucket
    person_types: Optional[List[PersonTypePair]] = Field(
        None, description="Role-aligned rows, present only for grouped categories."
    )
    content_groups: Optional[List[ContentGroup]] = None
