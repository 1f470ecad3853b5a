"""Browse the PatentsView dataset catalog from the command line."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from patent_catalog.core.config import get_settings
from patent_catalog.schemas import ALL, PatentType
from patent_catalog.services import CatalogStore, load_descriptors

LOGGER = logging.getLogger("browse_catalog")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="List dataset categories with filter counts")
    parser.add_argument(
        "--patent-type",
        default=PatentType.GRANTED.value,
        choices=[patent_type.value for patent_type in PatentType],
        help="Granted patents or pre-grant applications",
    )
    parser.add_argument("--query", default="", help="Search text matched against names and descriptions")
    parser.add_argument("--year", default=ALL, help="Release year for content files")
    parser.add_argument("--content-type", default=ALL, help="Content type such as Claims or Abstract")
    parser.add_argument("--links", type=Path, help="Local links.json used instead of the remote catalog")
    parser.add_argument("--facets", action="store_true", help="Print available years and content types")
    parser.add_argument(
        "--log-level",
        default=settings.log_level.upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (defaults to the LOG_LEVEL setting)",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format="%(asctime)s %(levelname)s %(message)s")


def render(store: CatalogStore, show_facets: bool = False) -> List[str]:
    lines: List[str] = []
    if show_facets:
        facets = store.facets()
        lines.append("Years: " + (", ".join(facets.years) or "-"))
        lines.append("Content types: " + (", ".join(facets.content_types) or "-"))

    state = store.state
    lines.append(
        f"{state.patent_type.value}: {store.total_count()} datasets "
        f"(query={state.query!r}, year={state.year}, content_type={state.content_type})"
    )
    for entry in store.categories_with_counts():
        lines.append(f"  {entry.name:<20} {entry.count:>4}")
    return lines


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level)

    settings = get_settings()
    if args.links:
        settings = settings.model_copy(update={"links_path": args.links})

    store = CatalogStore(settings.essential_identifiers)
    store.load(load_descriptors(settings))
    store.select_patent_type(PatentType(args.patent_type))
    store.set_content_type(args.content_type)
    store.set_year(args.year)
    store.set_query(args.query)

    if args.year != ALL and store.state.year == ALL:
        LOGGER.warning("Year %s is not available for this selection; showing all years", args.year)

    for line in render(store, show_facets=args.facets):
        print(line)


if __name__ == "__main__":
    main()
