"""Derive filterable facets (years, content types) from the taxonomy."""

from __future__ import annotations

from typing import Iterator, List, Set

from patent_catalog.schemas import ALL, ClassifiedDataset, FacetState, PatentType, Taxonomy
from patent_catalog.services.classifier import CONTENT_CATEGORY


def iter_content_items(taxonomy: Taxonomy, patent_type: PatentType) -> Iterator[ClassifiedDataset]:
    bucket = taxonomy.for_type(patent_type).get(CONTENT_CATEGORY)
    if bucket is not None:
        yield from bucket.iter_items()


def _sort_years(years: Set[str]) -> List[str]:
    return sorted(years, key=int, reverse=True)


def available_years(taxonomy: Taxonomy) -> List[str]:
    years = {
        item.year
        for patent_type in PatentType
        for item in iter_content_items(taxonomy, patent_type)
        if item.year
    }
    return _sort_years(years)


def available_content_types(taxonomy: Taxonomy) -> List[str]:
    content_types = {
        item.content_type
        for patent_type in PatentType
        for item in iter_content_items(taxonomy, patent_type)
        if item.content_type
    }
    return sorted(content_types)


def years_for_content_type(
    taxonomy: Taxonomy, patent_type: PatentType, content_type: str = ALL
) -> List[str]:
    """Years offered for one patent type, narrowed to a content type unless it is 'all'."""

    years = {
        item.year
        for item in iter_content_items(taxonomy, patent_type)
        if item.year and (content_type == ALL or item.content_type == content_type)
    }
    return _sort_years(years)


def build_facets(taxonomy: Taxonomy) -> FacetState:
    return FacetState(
        years=available_years(taxonomy),
        content_types=available_content_types(taxonomy),
    )
