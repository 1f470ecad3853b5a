"""Shape-preserving search and facet filtering plus category ordering."""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from patent_catalog.schemas import (
    ALL,
    CategoryBucket,
    CategoryCount,
    ClassifiedDataset,
    FilteredView,
    FlatBucket,
    GroupedBucket,
    Taxonomy,
    ViewState,
)
from patent_catalog.services.classifier import CONTENT_CATEGORY
from patent_catalog.services.taxonomy import ESSENTIALS_CATEGORY

Predicate = Callable[[ClassifiedDataset], bool]

CATEGORY_ORDER = [
    ESSENTIALS_CATEGORY,
    "General",
    "People",
    "Classification",
    "Legal",
    "Government",
    "Geography",
    "Other Documentation",
    "Citations",
    "Mapping",
    "Other",
    CONTENT_CATEGORY,
]


def text_predicate(query: str) -> Predicate:
    needle = query.lower()

    def matches(item: ClassifiedDataset) -> bool:
        return needle in item.display_name.lower() or needle in item.description.lower()

    return matches


def content_predicate(year: str, content_type: str) -> Predicate:
    def matches(item: ClassifiedDataset) -> bool:
        if year != ALL and item.year != year:
            return False
        if content_type != ALL and item.content_type != content_type:
            return False
        return True

    return matches


def filter_bucket(category: str, bucket: CategoryBucket, state: ViewState) -> CategoryBucket:
    matches_text = text_predicate(state.query)

    if isinstance(bucket, GroupedBucket):
        # Grouped categories never carry content files, so only the search applies.
        return GroupedBucket(
            disambiguated=[item for item in bucket.disambiguated if matches_text(item)],
            raw=[item for item in bucket.raw if matches_text(item)],
            main=[item for item in bucket.main if matches_text(item)],
        )

    predicates: List[Predicate] = [matches_text]
    if category == CONTENT_CATEGORY:
        predicates.append(content_predicate(state.year, state.content_type))
    return FlatBucket(
        items=[item for item in bucket.items if all(predicate(item) for predicate in predicates)]
    )


def compute_filtered_view(taxonomy: Taxonomy, state: ViewState) -> FilteredView:
    """Re-derive the active patent type's categories under the current selections.

    Every category of the taxonomy is present in the result with the same
    bucket kind, even when no item survives the filters.
    """

    source = taxonomy.for_type(state.patent_type)
    return FilteredView(
        patent_type=state.patent_type,
        categories={
            category: filter_bucket(category, bucket, state)
            for category, bucket in source.items()
        },
    )


def order_categories(names: Sequence[str]) -> List[str]:
    """Sort by display priority; unlisted categories follow in encounter order."""

    def rank(name: str) -> int:
        if name in CATEGORY_ORDER:
            return CATEGORY_ORDER.index(name)
        return len(CATEGORY_ORDER)

    return sorted(names, key=rank)


def categories_with_counts(view: FilteredView) -> List[CategoryCount]:
    counts: Dict[str, int] = {name: bucket.count for name, bucket in view.categories.items()}
    return [
        CategoryCount(name=name, count=counts[name])
        for name in order_categories(list(counts))
        if counts[name] > 0
    ]


def total_count(view: FilteredView) -> int:
    """Number of distinct datasets in the view; the Essentials overlay is not counted twice."""

    return sum(
        bucket.count for name, bucket in view.categories.items() if name != ESSENTIALS_CATEGORY
    )
