"""Schema exports."""

from patent_catalog.schemas.catalog import (
	ALL,
	CatalogViewRead,
	CategoryDetailRead,
	FilteredView,
	ViewState,
)
from patent_catalog.schemas.dataset import (
	CategoryBucket,
	CategoryCount,
	ClassifiedDataset,
	ContentGroup,
	DatasetDescriptor,
	FacetState,
	FlatBucket,
	GroupedBucket,
	PatentType,
	PersonTypePair,
	Taxonomy,
)

__all__ = [
	"ALL",
	"CatalogViewRead",
	"CategoryDetailRead",
	"FilteredView",
	"ViewState",
	"CategoryBucket",
	"CategoryCount",
	"ClassifiedDataset",
	"ContentGroup",
	"DatasetDescriptor",
	"FacetState",
	"FlatBucket",
	"GroupedBucket",
	"PatentType",
	"PersonTypePair",
	"Taxonomy",
]
