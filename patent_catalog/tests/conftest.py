from __future__ import annotations

from typing import Dict, List

import pytest

from patent_catalog.schemas import DatasetDescriptor, Taxonomy
from patent_catalog.services import CatalogStore, build_taxonomy

BASE_URL = "https://s3.amazonaws.com/data.patentsview.org/download"


def link(table_name: str, description: str) -> Dict[str, str]:
    return {
        "table_name": table_name,
        "description": description,
        "shareable_link": f"{BASE_URL}/{table_name}.tsv.zip",
    }


SAMPLE_LINKS: List[Dict[str, str]] = [
    link("g_claims_2021", "Claims text for patents granted in 2021"),
    link("g_claims_2022", "Claims text for patents granted in 2022"),
    link("g_brf_sum_text_2022", "Brief summary text for 2022 grants"),
    link("g_detail_desc_text_2021", "Detailed description text for 2021 grants"),
    link("g_patent", "Data on granted patents"),
    link("g_application", "Application data for granted patents"),
    link("g_assignee_disambiguated", "Disambiguated assignee data"),
    link("g_assignee_not_disambiguated", "Raw assignee data as it appears on the patent"),
    link("g_inventor_disambiguated", "Disambiguated inventor data"),
    link("g_inventor_not_disambiguated", "Raw inventor data"),
    link("g_persistent_inventor", "Persistent inventor identifiers across data updates"),
    link("g_attorney_not_disambiguated", "Raw attorney and agent data"),
    link("g_location_disambiguated", "Disambiguated location data"),
    link("g_location_not_disambiguated", "Raw location data"),
    link("g_cpc_at_issue", "CPC classification at issue"),
    link("g_uspc_at_issue", "USPC classification at issue"),
    link("g_us_patent_citation", "Citations made to US granted patents"),
    link("g_gov_interest", "Federal funding statements"),
    link("g_pct_data", "PCT filing data"),
    link("g_figures", "Number of figures and sheets"),
    link("g_wayback_snapshot", "Archived release notes"),
    link("pg_published_application", "Data on published patent applications"),
    link("pg_assignee_disambiguated", "Disambiguated assignee data for applications"),
    link("pg_assignee_not_disambiguated", "Raw assignee data for applications"),
    link("pg_claims_2023", "Claims text for applications published in 2023"),
    link("pg_abstract", "Abstract text for all applications"),
    link("pg_rel_app_text", "Related application text"),
]


@pytest.fixture
def sample_links() -> List[Dict[str, str]]:
    return [dict(entry) for entry in SAMPLE_LINKS]


@pytest.fixture
def descriptors(sample_links) -> List[DatasetDescriptor]:
    return [DatasetDescriptor.model_validate(entry) for entry in sample_links]


@pytest.fixture
def taxonomy(descriptors) -> Taxonomy:
    return build_taxonomy(descriptors)


@pytest.fixture
def store(descriptors) -> CatalogStore:
    catalog = CatalogStore()
    catalog.load(descriptors)
    return catalog
