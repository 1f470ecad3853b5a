"""Pydantic models for dataset descriptors and the category taxonomy."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Dict, Iterator, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class PatentType(str, Enum):
    GRANTED = "granted"
    PREGRANT = "pregrant"


class DatasetDescriptor(BaseModel):
    """One downloadable file as listed in the upstream links.json feed."""

    identifier: str = Field(
        ...,
        validation_alias=AliasChoices("identifier", "table_name"),
        description="Unique table name encoding the naming convention.",
    )
    description: str = ""
    download_url: str = Field(
        "",
        validation_alias=AliasChoices("download_url", "shareable_link"),
        description="Direct link to the zipped dataset.",
    )

    model_config = ConfigDict(frozen=True, extra="allow")


class ClassifiedDataset(DatasetDescriptor):
    display_name: str
    patent_type: PatentType
    category: str
    content_type: Optional[str] = None
    year: Optional[str] = Field(None, description="Four-digit release year of content files.")

    @model_validator(mode="after")
    def _year_requires_content_type(self) -> "ClassifiedDataset":
        if self.year is not None and self.content_type is None:
            raise ValueError("year is only meaningful for content datasets")
        return self


class FlatBucket(BaseModel):
    kind: Literal["flat"] = "flat"
    items: List[ClassifiedDataset] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def count(self) -> int:
        return len(self.items)

    def iter_items(self) -> Iterator[ClassifiedDataset]:
        return iter(self.items)


class GroupedBucket(BaseModel):
    """Category split into disambiguated, raw and residual (main) files."""

    kind: Literal["grouped"] = "grouped"
    disambiguated: List[ClassifiedDataset] = Field(default_factory=list)
    raw: List[ClassifiedDataset] = Field(default_factory=list)
    main: List[ClassifiedDataset] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def count(self) -> int:
        return len(self.disambiguated) + len(self.raw) + len(self.main)

    def iter_items(self) -> Iterator[ClassifiedDataset]:
        yield from self.disambiguated
        yield from self.raw
        yield from self.main


CategoryBucket = Annotated[Union[FlatBucket, GroupedBucket], Field(discriminator="kind")]


class Taxonomy(BaseModel):
    """Patent type -> category -> bucket, built once per catalog load."""

    granted: Dict[str, CategoryBucket] = Field(default_factory=dict)
    pregrant: Dict[str, CategoryBucket] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def for_type(self, patent_type: PatentType) -> Dict[str, CategoryBucket]:
        if patent_type is PatentType.PREGRANT:
            return self.pregrant
        return self.granted


class PersonTypePair(BaseModel):
    role: str
    disambiguated: List[ClassifiedDataset] = Field(default_factory=list)
    raw: List[ClassifiedDataset] = Field(default_factory=list)
    main: List[ClassifiedDataset] = Field(default_factory=list)


class ContentGroup(BaseModel):
    content_type: str
    items: List[ClassifiedDataset]


class FacetState(BaseModel):
    years: List[str] = Field(default_factory=list, description="Release years, newest first.")
    content_types: List[str] = Field(default_factory=list)


class CategoryCount(BaseModel):
    name: str
    count: int
