"""Aggregate classified datasets into the patent-type/category taxonomy."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from patent_catalog.core.config import DEFAULT_ESSENTIAL_IDENTIFIERS
from patent_catalog.schemas import (
    CategoryBucket,
    ClassifiedDataset,
    ContentGroup,
    DatasetDescriptor,
    FlatBucket,
    GroupedBucket,
    PatentType,
    PersonTypePair,
    Taxonomy,
)
from patent_catalog.services.classifier import FALLBACK_CATEGORY, classify, detect_person_type

LOGGER = logging.getLogger(__name__)

ESSENTIALS_CATEGORY = "Essentials"
DISAMBIGUATION_CATEGORIES = ("People", "Geography")

CONTENT_TYPE_ORDER = [
    "Abstract",
    "Brief Summary",
    "Claims",
    "Detailed Description",
    "Drawing Description",
    FALLBACK_CATEGORY,
]


def split_by_disambiguation(items: Sequence[ClassifiedDataset]) -> CategoryBucket:
    """Separate disambiguated and raw files, keeping a flat bucket when neither occurs."""

    disambiguated: List[ClassifiedDataset] = []
    raw: List[ClassifiedDataset] = []
    main: List[ClassifiedDataset] = []
    for item in items:
        # "_not_disambiguated" also contains "_disambiguated"; test it first.
        if "_not_disambiguated" in item.identifier:
            raw.append(item)
        elif "_disambiguated" in item.identifier:
            disambiguated.append(item)
        else:
            main.append(item)

    if not disambiguated and not raw:
        return FlatBucket(items=list(items))
    return GroupedBucket(disambiguated=disambiguated, raw=raw, main=main)


def build_taxonomy(
    descriptors: Iterable[DatasetDescriptor],
    essential_identifiers: Optional[Iterable[str]] = None,
) -> Taxonomy:
    if essential_identifiers is None:
        essential_identifiers = DEFAULT_ESSENTIAL_IDENTIFIERS
    essentials = set(essential_identifiers)

    grouped: Dict[PatentType, Dict[str, List[ClassifiedDataset]]] = {
        patent_type: {ESSENTIALS_CATEGORY: []} for patent_type in PatentType
    }
    for descriptor in descriptors:
        item = classify(descriptor)
        categories = grouped[item.patent_type]
        categories.setdefault(item.category, []).append(item)
        if item.identifier in essentials:
            categories[ESSENTIALS_CATEGORY].append(item)

    buckets: Dict[PatentType, Dict[str, CategoryBucket]] = {}
    for patent_type, categories in grouped.items():
        buckets[patent_type] = {}
        for category, items in categories.items():
            if category in DISAMBIGUATION_CATEGORIES and items:
                buckets[patent_type][category] = split_by_disambiguation(items)
            else:
                buckets[patent_type][category] = FlatBucket(items=items)
        LOGGER.info(
            "Built %s taxonomy with %s categories",
            patent_type.value,
            len(buckets[patent_type]),
        )

    return Taxonomy(
        granted=buckets[PatentType.GRANTED],
        pregrant=buckets[PatentType.PREGRANT],
    )


def pair_person_types(bucket: GroupedBucket) -> List[PersonTypePair]:
    """Align disambiguated, raw and main files by role, one row per role."""

    def by_role(items: Sequence[ClassifiedDataset]) -> Dict[str, List[ClassifiedDataset]]:
        roles: Dict[str, List[ClassifiedDataset]] = {}
        for item in items:
            roles.setdefault(detect_person_type(item.identifier), []).append(item)
        return roles

    disambiguated = by_role(bucket.disambiguated)
    raw = by_role(bucket.raw)
    main = by_role(bucket.main)

    roles = sorted({*disambiguated, *raw, *main})
    return [
        PersonTypePair(
            role=role,
            disambiguated=disambiguated.get(role, []),
            raw=raw.get(role, []),
            main=main.get(role, []),
        )
        for role in roles
    ]


def group_content_by_type(items: Iterable[ClassifiedDataset]) -> List[ContentGroup]:
    grouped: Dict[str, List[ClassifiedDataset]] = {}
    for item in items:
        grouped.setdefault(item.content_type or FALLBACK_CATEGORY, []).append(item)

    def rank(content_type: str) -> int:
        if content_type in CONTENT_TYPE_ORDER:
            return CONTENT_TYPE_ORDER.index(content_type)
        return len(CONTENT_TYPE_ORDER)

    return [
        ContentGroup(content_type=content_type, items=members)
        for content_type, members in sorted(grouped.items(), key=lambda entry: rank(entry[0]))
    ]
