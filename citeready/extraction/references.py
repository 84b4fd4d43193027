"""Citation and freshness signal extraction.

Finds in-text citation styles (numbered references, parenthetical years,
<cite> tags, "source:" and "according to" phrases) and date markers that
tell an answer engine how current a page is.
"""

import re
from dataclasses import dataclass, field

from citeready.extraction.text import strip_tags

# Order matters: citations are reported grouped by strategy in this order
CITATION_PATTERNS = [
    ("numbered", re.compile(r"\[(\d+)\]")),
    ("parenthetical", re.compile(r"\(([^)]*\d{4}[^)]*)\)")),
    ("cite_tag", re.compile(r"<cite[^>]*>(.*?)</cite>", re.IGNORECASE | re.DOTALL)),
    ("source_ref", re.compile(r"source:\s*([^<\n]+)", re.IGNORECASE)),
    ("attribution", re.compile(r"according to\s+([^<\n]+)", re.IGNORECASE)),
]

# Priority order: the first pattern that matches wins
LAST_MODIFIED_PATTERNS = [
    ("last_modified_label", re.compile(r"last\s+(?:modified|updated)\s*:\s*([^<\n]+)", re.I)),
    ("updated_on", re.compile(r"\bupdated\s+(?:on\s*)?:?\s*([^<\n]+)", re.I)),
    ("date_modified", re.compile(r'"dateModified"\s*:\s*"([^"]+)"', re.I)),
    ("last_reviewed", re.compile(r'"lastReviewed"\s*:\s*"([^"]+)"', re.I)),
]

PUBLISH_DATE_PATTERNS = [
    ("date_published", re.compile(r'"datePublished"\s*:\s*"([^"]+)"', re.I)),
    ("published_on", re.compile(r"\bpublished\s+on\s*:?\s*([^<\n]+)", re.I)),
    ("time_tag", re.compile(r"<time[^>]*datetime=[\"']([^\"']+)[\"']", re.I)),
    ("slash_date", re.compile(r"\b(\d{1,2}/\d{1,2}/\d{4})\b")),
    ("iso_date", re.compile(r"\b(\d{4}-\d{2}-\d{2})\b")),
]

UPDATE_INDICATORS = [
    "updated",
    "revised",
    "edited",
    "refreshed",
    "latest",
    "current",
    "recent",
    "new",
    "changelog",
    "version",
]

MAX_MARKER_LENGTH = 100


@dataclass
class CitationMention:
    """An in-text citation and where it starts in the content."""

    text: str
    type: str  # numbered, parenthetical, cite_tag, source_ref, attribution
    position: int

    def to_dict(self) -> dict:
        return {"text": self.text, "type": self.type, "position": self.position}


@dataclass
class DateMarker:
    found: bool = False
    value: str | None = None
    pattern: str | None = None

    def to_dict(self) -> dict:
        return {"found": self.found, "value": self.value, "pattern": self.pattern}


@dataclass
class FreshnessSignals:
    """Last-modified and publish markers plus update vocabulary counts."""

    last_modified: DateMarker = field(default_factory=DateMarker)
    publish_date: DateMarker = field(default_factory=DateMarker)
    update_indicators: dict[str, int] = field(default_factory=dict)
    update_score: int = 0

    def to_dict(self) -> dict:
        return {
            "last_modified": self.last_modified.to_dict(),
            "publish_date": self.publish_date.to_dict(),
            "update_indicators": self.update_indicators,
            "update_score": self.update_score,
        }


def extract_citations(content: str) -> list[CitationMention]:
    """
    Find in-text citations using five independent patterns.

    Args:
        content: HTML or plain text

    Returns:
        CitationMention list grouped by pattern, each with its match offset
    """
    citations = []
    for citation_type, pattern in CITATION_PATTERNS:
        for match in pattern.finditer(content):
            text = strip_tags(match.group(1)) if citation_type == "cite_tag" else match.group(1)
            citations.append(
                CitationMention(text=text.strip(), type=citation_type, position=match.start())
            )
    return citations


def _first_marker(content: str, patterns: list[tuple[str, re.Pattern]]) -> DateMarker:
    for name, pattern in patterns:
        match = pattern.search(content)
        if match:
            value = match.group(1).strip()[:MAX_MARKER_LENGTH]
            return DateMarker(found=True, value=value, pattern=name)
    return DateMarker()


def extract_freshness(content: str) -> FreshnessSignals:
    """Find last-modified and publish dates and count update vocabulary."""
    signals = FreshnessSignals(
        last_modified=_first_marker(content, LAST_MODIFIED_PATTERNS),
        publish_date=_first_marker(content, PUBLISH_DATE_PATTERNS),
    )

    for indicator in UPDATE_INDICATORS:
        count = len(re.findall(rf"\b{indicator}\b", content, re.IGNORECASE))
        if count:
            signals.update_indicators[indicator] = count
            signals.update_score += count

    return signals
