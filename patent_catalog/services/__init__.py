"""Service exports."""

from patent_catalog.services.classifier import classify, format_display_name
from patent_catalog.services.facets import build_facets, years_for_content_type
from patent_catalog.services.filtering import (
	categories_with_counts,
	compute_filtered_view,
	order_categories,
	total_count,
)
from patent_catalog.services.loader import load_descriptors
from patent_catalog.services.store import CatalogStore
from patent_catalog.services.taxonomy import (
	build_taxonomy,
	group_content_by_type,
	pair_person_types,
)

__all__ = [
	"classify",
	"format_display_name",
	"build_facets",
	"years_for_content_type",
	"categories_with_counts",
	"compute_filtered_view",
	"order_categories",
	"total_count",
	"load_descriptors",
	"CatalogStore",
	"build_taxonomy",
	"group_content_by_type",
	"pair_person_types",
]
