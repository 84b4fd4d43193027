"""Brand mention and entity signal extraction.

Brand matching is built from the site's domain label. The label is
regex-escaped before any pattern is compiled, so a hostile or unusual
domain string can only ever match itself literally.
"""

import re
from collections import Counter
from dataclasses import dataclass, field
from urllib.parse import urlparse

from citeready.extraction.schema import parse_json_ld, schema_types
from citeready.extraction.text import parse_html, visible_text

CONTEXT_RADIUS = 50
MAX_LOCATIONS = 50

# Capitalized multi-word sequences seen more often than this are entities
MIN_PHRASE_OCCURRENCES = 2

CAPITALIZED_PHRASE_PATTERN = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)+\b")

# JSON-LD types reported as entities, with their confidence
ENTITY_SCHEMA_TYPES = {
    "Organization": ("organization", 0.9),
    "Person": ("person", 0.8),
}
PHRASE_CONFIDENCE = 0.5


@dataclass
class BrandMention:
    term: str
    position: int
    context: str

    def to_dict(self) -> dict:
        return {"term": self.term, "position": self.position, "context": self.context}


@dataclass
class BrandMentions:
    """How often, and where, the brand appears."""

    brand: str = ""
    total: int = 0
    density: float = 0.0  # Mentions per 1000 characters
    in_title: bool = False
    in_h1: bool = False
    locations: list[BrandMention] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "brand": self.brand,
            "total": self.total,
            "density": round(self.density, 3),
            "in_title": self.in_title,
            "in_h1": self.in_h1,
            "locations": [loc.to_dict() for loc in self.locations],
        }


@dataclass
class Entity:
    name: str
    type: str  # organization, person, phrase
    confidence: float
    count: int = 1

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.type,
            "confidence": self.confidence,
            "count": self.count,
        }


@dataclass
class EntitySignals:
    entities: list[Entity] = field(default_factory=list)
    brand_density: float = 0.0

    def to_dict(self) -> dict:
        return {
            "entities": [e.to_dict() for e in self.entities],
            "brand_density": round(self.brand_density, 3),
        }


def brand_label(domain: str) -> str:
    """
    Derive the brand label from a domain or URL.

    ``https://www.acme-tools.co.uk/x`` -> ``acme-tools``
    """
    value = (domain or "").strip().lower()
    if "://" in value:
        value = urlparse(value).hostname or ""
    value = value.split("/")[0]
    if value.startswith("www."):
        value = value[4:]
    return value.split(".")[0]


def brand_pattern(label: str) -> re.Pattern:
    """Compile a case-insensitive whole-word matcher for a literal brand label."""
    return re.compile(rf"(?<!\w){re.escape(label)}(?!\w)", re.IGNORECASE)


def count_brand_mentions(content: str, domain: str) -> BrandMentions:
    """
    Count case-insensitive whole-word mentions of the brand.

    Args:
        content: HTML or plain text
        domain: Site domain (or URL) the brand label is taken from

    Returns:
        BrandMentions with total, density per 1000 characters and title/H1 flags
    """
    label = brand_label(domain)
    result = BrandMentions(brand=label)
    if not label or not content:
        return result

    pattern = brand_pattern(label)

    for match in pattern.finditer(content):
        result.total += 1
        if len(result.locations) < MAX_LOCATIONS:
            start = max(0, match.start() - CONTEXT_RADIUS)
            end = min(len(content), match.start() + CONTEXT_RADIUS)
            result.locations.append(
                BrandMention(
                    term=match.group(0),
                    position=match.start(),
                    context=content[start:end],
                )
            )

    result.density = result.total / (len(content) / 1000)

    soup = parse_html(content)
    if soup.title is not None:
        result.in_title = bool(pattern.search(soup.title.get_text(" ", strip=True)))
    result.in_h1 = any(pattern.search(h1.get_text(" ", strip=True)) for h1 in soup.find_all("h1"))

    return result


def _schema_entities(content: str) -> list[Entity]:
    """Collect Organization and Person names from JSON-LD, including nested objects."""
    found: dict[tuple[str, str], Entity] = {}

    def visit(node: object) -> None:
        if isinstance(node, list):
            for child in node:
                visit(child)
            return
        if not isinstance(node, dict):
            return
        name = node.get("name")
        for schema_type in schema_types(node):
            if schema_type in ENTITY_SCHEMA_TYPES and isinstance(name, str) and name.strip():
                entity_type, confidence = ENTITY_SCHEMA_TYPES[schema_type]
                key = (name.strip(), entity_type)
                if key in found:
                    found[key].count += 1
                else:
                    found[key] = Entity(name=key[0], type=entity_type, confidence=confidence)
        for value in node.values():
            visit(value)

    visit(parse_json_ld(content, warn=False))
    return list(found.values())


def extract_entities(content: str, domain: str = "") -> EntitySignals:
    """
    Find entity-like names in the content.

    Structured-data Organization/Person names are reported first, followed
    by capitalized multi-word phrases that occur more than twice. This is
    frequency filtering, not named-entity recognition.
    """
    signals = EntitySignals(entities=_schema_entities(content))

    text = visible_text(parse_html(content))
    phrase_counts = Counter(CAPITALIZED_PHRASE_PATTERN.findall(text))
    phrases = [
        Entity(name=phrase, type="phrase", confidence=PHRASE_CONFIDENCE, count=count)
        for phrase, count in phrase_counts.items()
        if count > MIN_PHRASE_OCCURRENCES
    ]
    phrases.sort(key=lambda e: (-e.count, e.name))
    signals.entities.extend(phrases)

    if domain:
        signals.brand_density = count_brand_mentions(content, domain).density

    return signals
