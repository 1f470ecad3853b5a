"""Shared API dependencies for FastAPI routes."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from patent_catalog.core.config import get_settings
from patent_catalog.services import CatalogStore, load_descriptors


@lru_cache()
def get_catalog() -> CatalogStore:
    """Load the descriptor list once per process and build the taxonomy."""

    settings = get_settings()
    store = CatalogStore(settings.essential_identifiers)
    store.load(load_descriptors(settings))
    return store


Catalog = Annotated[CatalogStore, Depends(get_catalog)]
