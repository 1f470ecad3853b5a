"""Naming-convention rules that classify PatentsView dataset files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from patent_catalog.schemas import ClassifiedDataset, DatasetDescriptor, PatentType


@dataclass(frozen=True)
class SubstringRule:
    """Assign ``label`` when the identifier contains any of ``needles``."""

    label: str
    needles: Tuple[str, ...]

    def matches(self, identifier: str) -> bool:
        return any(needle in identifier for needle in self.needles)


def first_match(rules: Sequence[SubstringRule], identifier: str) -> Optional[str]:
    for rule in rules:
        if rule.matches(identifier):
            return rule.label
    return None


# ---------------------------------------------------------------------------
# Rule tables (evaluated top to bottom, first match wins)
# ---------------------------------------------------------------------------


CONTENT_CATEGORY = "Content"
FALLBACK_CATEGORY = "Other"

CONTENT_TYPE_RULES: Tuple[SubstringRule, ...] = (
    SubstringRule("Brief Summary", ("brf_sum_text_",)),
    SubstringRule("Claims", ("claims_",)),
    SubstringRule("Detailed Description", ("detail_desc_text_",)),
    SubstringRule("Drawing Description", ("draw_desc_text_",)),
    SubstringRule("Abstract", ("abstract",)),
)

CATEGORY_RULES: Tuple[SubstringRule, ...] = (
    SubstringRule("People", ("inventor", "attorney", "lawyer", "assignee", "applicant", "examiner")),
    SubstringRule("Geography", ("location", "geography")),
    SubstringRule("Classification", ("cpc", "uspc", "ipc", "wipo")),
    SubstringRule("Citations", ("citation", "reference")),
    SubstringRule("Government", ("gov_interest", "federal")),
    SubstringRule("Legal", ("priority", "rel_", "term", "pct")),
    SubstringRule("Mapping", ("persistent", "crosswalk", "granted_pgpubs")),
    SubstringRule("Other Documentation", ("figures", "botanic")),
    SubstringRule("General", ("patent", "application")),
)

PERSON_TYPE_RULES: Tuple[SubstringRule, ...] = (
    SubstringRule("Assignee", ("assignee",)),
    SubstringRule("Attorney", ("attorney", "lawyer")),
    SubstringRule("Inventor", ("inventor",)),
    SubstringRule("Applicant", ("applicant",)),
    SubstringRule("Examiner", ("examiner",)),
    SubstringRule("Persistent", ("persistent",)),
)

ACRONYMS = ("PCT", "WIPO", "CPC", "IPC", "USPC", "US")

PREGRANT_PREFIX = "pg_"
_PREFIX_RE = re.compile(r"^(g|pg)_")
_YEAR_SUFFIX_RE = re.compile(r"_([0-9]{4})\Z")


# ---------------------------------------------------------------------------
# Field derivations
# ---------------------------------------------------------------------------


def detect_patent_type(identifier: str) -> PatentType:
    if identifier.startswith(PREGRANT_PREFIX):
        return PatentType.PREGRANT
    return PatentType.GRANTED


def detect_content_type(identifier: str) -> Optional[str]:
    return first_match(CONTENT_TYPE_RULES, identifier)


def detect_category(identifier: str, content_type: Optional[str] = None) -> str:
    """Functional area of a non-content file; content files always land in Content."""

    if content_type:
        return CONTENT_CATEGORY
    return first_match(CATEGORY_RULES, identifier) or FALLBACK_CATEGORY


def extract_year(identifier: str) -> Optional[str]:
    match = _YEAR_SUFFIX_RE.search(identifier)
    return match.group(1) if match else None


def detect_person_type(identifier: str) -> str:
    return first_match(PERSON_TYPE_RULES, identifier) or FALLBACK_CATEGORY


def apply_acronym_casing(name: str) -> str:
    """Uppercase the first case-insensitive occurrence of each known acronym.

    Acronyms are applied in ``ACRONYMS`` order and only once each, so a name
    such as ``"Uspc Us"`` keeps its second ``Us`` untouched.
    """

    for acronym in ACRONYMS:
        name = re.sub(re.escape(acronym), acronym, name, count=1, flags=re.IGNORECASE)
    return name


def format_display_name(identifier: str) -> str:
    stripped = _PREFIX_RE.sub("", identifier)
    words = [word[:1].upper() + word[1:] for word in stripped.split("_")]
    return apply_acronym_casing(" ".join(words))


def classify(descriptor: DatasetDescriptor) -> ClassifiedDataset:
    """Attach display name, patent type, category, content type and year."""

    identifier = descriptor.identifier
    content_type = detect_content_type(identifier)
    derived = {
        "display_name": format_display_name(identifier),
        "patent_type": detect_patent_type(identifier),
        "category": detect_category(identifier, content_type),
        "content_type": content_type,
        "year": extract_year(identifier) if content_type else None,
    }
    # Derived fields replace pass-through fields of the same name.
    return ClassifiedDataset(**{**descriptor.model_dump(), **derived})
