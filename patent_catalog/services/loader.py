"""Retrieve the raw dataset descriptor list from disk or the published catalog."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import httpx
from pydantic import TypeAdapter

from patent_catalog.core.config import Settings, get_settings
from patent_catalog.schemas import DatasetDescriptor

LOGGER = logging.getLogger(__name__)

_DESCRIPTORS = TypeAdapter(List[DatasetDescriptor])


def parse_descriptors(payload: Any) -> List[DatasetDescriptor]:
    return _DESCRIPTORS.validate_python(payload)


def read_local_descriptors(path: Path) -> List[DatasetDescriptor]:
    with Path(path).expanduser().open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    return parse_descriptors(payload)


def fetch_remote_descriptors(url: str, client: httpx.Client) -> List[DatasetDescriptor]:
    response = client.get(url)
    response.raise_for_status()
    return parse_descriptors(response.json())


def load_descriptors(
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> List[DatasetDescriptor]:
    """Return the catalog descriptors, or an empty list when every source fails."""

    settings = settings or get_settings()

    if settings.links_path and Path(settings.links_path).expanduser().exists():
        try:
            descriptors = read_local_descriptors(settings.links_path)
            LOGGER.info("Read %s descriptors from %s", len(descriptors), settings.links_path)
            return descriptors
        except (OSError, ValueError) as exc:
            LOGGER.warning("Could not read %s: %s", settings.links_path, exc)

    owns_client = client is None
    client = client or httpx.Client(timeout=settings.request_timeout, follow_redirects=True)
    try:
        descriptors = fetch_remote_descriptors(settings.links_url, client)
        LOGGER.info("Fetched %s descriptors from %s", len(descriptors), settings.links_url)
        return descriptors
    except (httpx.HTTPError, ValueError) as exc:
        LOGGER.warning("Catalog fetch from %s failed: %s", settings.links_url, exc)
        return []
    finally:
        if owns_client:
            client.close()
