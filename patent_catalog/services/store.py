"""Catalog store: immutable taxonomy plus the user's current selections."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from patent_catalog.schemas import (
    ALL,
    CategoryCount,
    ContentGroup,
    DatasetDescriptor,
    FacetState,
    FilteredView,
    GroupedBucket,
    PatentType,
    PersonTypePair,
    Taxonomy,
    ViewState,
)
from patent_catalog.services.classifier import CONTENT_CATEGORY
from patent_catalog.services.facets import build_facets, years_for_content_type
from patent_catalog.services.filtering import (
    categories_with_counts,
    compute_filtered_view,
    total_count,
)
from patent_catalog.services.taxonomy import (
    build_taxonomy,
    group_content_by_type,
    pair_person_types,
)

LOGGER = logging.getLogger(__name__)


class CatalogStore:
    """Holds the taxonomy and view state; every read is recomputed from both."""

    def __init__(self, essential_identifiers: Optional[Iterable[str]] = None) -> None:
        self._essential_identifiers = (
            list(essential_identifiers) if essential_identifiers is not None else None
        )
        self.taxonomy: Optional[Taxonomy] = None
        self.state = ViewState()

    @property
    def is_loaded(self) -> bool:
        return self.taxonomy is not None

    def new_session(self) -> "CatalogStore":
        """Share this store's taxonomy under a fresh, independent view state."""

        session = CatalogStore(self._essential_identifiers)
        session.taxonomy = self.taxonomy
        return session

    # -- events ------------------------------------------------------------

    def load(self, descriptors: Iterable[DatasetDescriptor]) -> None:
        descriptors = list(descriptors)
        self.taxonomy = build_taxonomy(descriptors, self._essential_identifiers)
        self.state = ViewState()
        LOGGER.info("Loaded catalog with %s datasets", len(descriptors))

    def select_patent_type(self, patent_type: PatentType) -> None:
        self._update(patent_type=PatentType(patent_type), year=ALL, content_type=ALL)

    def set_query(self, query: str) -> None:
        self._update(query=query)

    def set_content_type(self, content_type: str) -> None:
        self._update(content_type=content_type)

    def set_year(self, year: str) -> None:
        self._update(year=year)

    def _update(self, **changes: object) -> None:
        state = self.state.model_copy(update=changes)
        if state.year != ALL and state.year not in self._years_for(state):
            LOGGER.debug("Year %s unavailable for %s; resetting", state.year, state.content_type)
            state = state.model_copy(update={"year": ALL})
        self.state = state

    def _years_for(self, state: ViewState) -> List[str]:
        if self.taxonomy is None:
            return []
        return years_for_content_type(self.taxonomy, state.patent_type, state.content_type)

    # -- derived reads -----------------------------------------------------

    def facets(self) -> FacetState:
        if self.taxonomy is None:
            return FacetState()
        return build_facets(self.taxonomy)

    def available_years(self) -> List[str]:
        return self._years_for(self.state)

    def filtered_view(self) -> FilteredView:
        if self.taxonomy is None:
            return FilteredView(patent_type=self.state.patent_type)
        return compute_filtered_view(self.taxonomy, self.state)

    def categories_with_counts(self) -> List[CategoryCount]:
        return categories_with_counts(self.filtered_view())

    def total_count(self) -> int:
        return total_count(self.filtered_view())

    def person_type_pairs(self, category: str) -> List[PersonTypePair]:
        bucket = self.filtered_view().categories.get(category)
        if not isinstance(bucket, GroupedBucket):
            return []
        return pair_person_types(bucket)

    def content_groups(self) -> List[ContentGroup]:
        bucket = self.filtered_view().categories.get(CONTENT_CATEGORY)
        if bucket is None:
            return []
        return group_content_by_type(bucket.iter_items())
