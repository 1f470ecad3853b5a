"""Dataset catalog browsing endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from patent_catalog import schemas
from patent_catalog.api.dependencies import Catalog
from patent_catalog.services import CatalogStore
from patent_catalog.services.classifier import CONTENT_CATEGORY

router = APIRouter(prefix="/catalog", tags=["catalog"])


def open_session(
    catalog: CatalogStore,
    patent_type: schemas.PatentType,
    q: str = "",
    year: str = schemas.ALL,
    content_type: str = schemas.ALL,
) -> CatalogStore:
    """Replay the request's selections in the order the interface applies them."""

    session = catalog.new_session()
    session.select_patent_type(patent_type)
    session.set_content_type(content_type)
    session.set_year(year)
    session.set_query(q)
    return session


@router.get("/facets", response_model=schemas.FacetState)
def get_facets(catalog: Catalog) -> schemas.FacetState:
    """Return every release year and content type across both patent types."""

    return catalog.facets()


@router.get("/{patent_type}/years", response_model=List[str])
def list_years(
    patent_type: schemas.PatentType,
    catalog: Catalog,
    content_type: str = Query(schemas.ALL, description="Restrict to one content type."),
) -> List[str]:
    session = open_session(catalog, patent_type, content_type=content_type)
    return session.available_years()


@router.get("/{patent_type}", response_model=schemas.CatalogViewRead)
def get_catalog_view(
    patent_type: schemas.PatentType,
    catalog: Catalog,
    q: str = Query("", description="Case-insensitive search over name and description."),
    year: str = Query(schemas.ALL, description="Release year of content files."),
    content_type: str = Query(schemas.ALL, description="Content type of content files."),
) -> schemas.CatalogViewRead:
    """Return the filtered categories for one patent type."""

    session = open_session(catalog, patent_type, q, year, content_type)
    view = session.filtered_view()
    return schemas.CatalogViewRead(
        view_state=session.state,
        total=session.total_count(),
        categories=session.categories_with_counts(),
        buckets=view.categories,
    )


@router.get("/{patent_type}/categories/{category}", response_model=schemas.CategoryDetailRead)
def get_category(
    patent_type: schemas.PatentType,
    category: str,
    catalog: Catalog,
    q: str = Query(""),
    year: str = Query(schemas.ALL),
    content_type: str = Query(schemas.ALL),
) -> schemas.CategoryDetailRead:
    """Return one filtered category with its role rows or content groups."""

    session = open_session(catalog, patent_type, q, year, content_type)
    bucket = session.filtered_view().categories.get(category)
    if bucket is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")

    detail = schemas.CategoryDetailRead(name=category, count=bucket.count, bucket=bucket)
    if isinstance(bucket, schemas.GroupedBucket):
        detail.person_types = session.person_type_pairs(category)
    if category == CONTENT_CATEGORY:
        detail.content_groups = session.content_groups()
    return detail
