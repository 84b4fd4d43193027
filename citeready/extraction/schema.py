"""Structured data (JSON-LD) extraction.

Parses ``<script type="application/ld+json">`` blocks into plain dicts and
summarizes each typed object. Malformed blocks are skipped with a warning
and the remaining blocks are still processed.
"""

import json
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import structlog

from citeready.extraction.text import parse_html

logger = structlog.get_logger(__name__)


@dataclass
class StructuredDataRecord:
    """Summary of one typed JSON-LD object."""

    type: str
    has_rating: bool = False
    has_reviews: bool = False
    has_breadcrumb: bool = False
    has_faq: bool = False
    has_howto: bool = False
    has_organization: bool = False
    has_product: bool = False

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "has_rating": self.has_rating,
            "has_reviews": self.has_reviews,
            "has_breadcrumb": self.has_breadcrumb,
            "has_faq": self.has_faq,
            "has_howto": self.has_howto,
            "has_organization": self.has_organization,
            "has_product": self.has_product,
        }


def schema_types(item: dict) -> list[str]:
    """Return the ``@type`` of a JSON-LD object as a list of names."""
    raw = item.get("@type")
    if isinstance(raw, str):
        return [raw]
    if isinstance(raw, list):
        return [t for t in raw if isinstance(t, str)]
    return []


def _expand(data: Any) -> Iterator[dict]:
    if isinstance(data, list):
        for entry in data:
            yield from _expand(entry)
    elif isinstance(data, dict):
        if "@graph" in data:
            yield from _expand(data["@graph"])
        elif "@type" in data:
            yield data


def parse_json_ld(content: str, warn: bool = True) -> list[dict]:
    """
    Parse all JSON-LD blocks in a document.

    ``@graph`` containers and top-level arrays are flattened, so every
    returned dict is a typed object.

    Args:
        content: HTML content
        warn: Log a warning for each malformed block

    Returns:
        List of typed JSON-LD objects in document order
    """
    if "ld+json" not in content.lower():
        return []

    soup = parse_html(content)
    items: list[dict] = []

    for position, script in enumerate(soup.find_all("script", type="application/ld+json")):
        body = script.get_text()
        if not body.strip():
            continue
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, TypeError) as e:
            if warn:
                logger.warning(
                    "schema_parse_failed",
                    block=position,
                    error=str(e),
                    snippet=body.strip()[:80],
                )
            continue
        items.extend(_expand(data))

    return items


def extract_structured_data(content: str) -> list[StructuredDataRecord]:
    """Summarize each typed JSON-LD object found in the content."""
    records = []
    for item in parse_json_ld(content):
        types = schema_types(item)
        if not types:
            continue
        records.append(
            StructuredDataRecord(
                type=", ".join(types),
                has_rating=bool(item.get("aggregateRating")),
                has_reviews=bool(item.get("review")),
                has_breadcrumb="BreadcrumbList" in types,
                has_faq="FAQPage" in types,
                has_howto="HowTo" in types,
                has_organization="Organization" in types,
                has_product="Product" in types,
            )
        )
    return records
