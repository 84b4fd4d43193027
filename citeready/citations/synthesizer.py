"""Synthesize citation-like records from extracted signals.

These candidates describe what on-page evidence an answer engine could
cite (FAQ, tables, how-to content, structured data, outbound authority
links, heading structure). They are display records, not observations of
real external citations, and their confidence values are fixed per
template rather than computed from the data.
"""

from dataclasses import dataclass, field
from typing import Any

from citeready.extraction.signals import PageSignals

ON_PAGE_DOMAIN = "on-page"

FAQ_CONFIDENCE = 0.9
TABLE_CONFIDENCE = 0.85
HOWTO_CONFIDENCE = 0.88
SCHEMA_CONFIDENCE = 0.95
AUTHORITY_CONFIDENCE = 0.87
STRUCTURE_CONFIDENCE = 0.82

# Authority link type -> diversity bucket (and document type)
AUTHORITY_BUCKETS = {
    "academic": "research",
    "government": "official",
    "news": "news",
    "encyclopedia": "reference",
}
DEFAULT_AUTHORITY_BUCKET = "authority"


@dataclass(frozen=True)
class CitationCandidate:
    """A normalized citation-like record for display."""

    source_ref: str
    domain: str
    title: str
    snippet: str
    credibility_signals: dict[str, Any] = field(default_factory=dict)
    confidence: float = 0.0
    diversity_bucket: str = ""

    def to_dict(self) -> dict:
        return {
            "source_ref": self.source_ref,
            "domain": self.domain,
            "title": self.title,
            "snippet": self.snippet,
            "credibility_signals": dict(self.credibility_signals),
            "confidence": self.confidence,
            "diversity_bucket": self.diversity_bucket,
        }


def authority_bucket(authority_type: str) -> str:
    return AUTHORITY_BUCKETS.get(authority_type, DEFAULT_AUTHORITY_BUCKET)


class CitationSynthesizer:
    """Turns populated signal collections into citation candidates."""

    def synthesize(self, signals: PageSignals) -> list[CitationCandidate]:
        """
        Emit fixed-template candidates for each non-empty signal collection.

        Args:
            signals: Output of the signal extractors

        Returns:
            Candidates in template order: FAQ, tables, how-to, structured
            data, authority links, heading structure
        """
        candidates: list[CitationCandidate] = []

        if signals.faqs:
            candidates.append(
                CitationCandidate(
                    source_ref="#faq-section",
                    domain=ON_PAGE_DOMAIN,
                    title=f"{len(signals.faqs)} FAQ entries detected",
                    snippet=(
                        "FAQ content provides direct answers to user questions, "
                        "enhancing AI visibility"
                    ),
                    credibility_signals={
                        "official": True,
                        "doc_type": "docs",
                        "structured_data": True,
                    },
                    confidence=FAQ_CONFIDENCE,
                    diversity_bucket="official",
                )
            )

        for index, table in enumerate(signals.tables):
            candidates.append(
                CitationCandidate(
                    source_ref=f"#table-{index}",
                    domain=ON_PAGE_DOMAIN,
                    title=f"{table.type} table with {table.row_count} rows",
                    snippet=(
                        f"Structured {table.type} data in tabular format "
                        "improves data accessibility"
                    ),
                    credibility_signals={
                        "official": True,
                        "doc_type": "reference",
                        "structured_data": True,
                    },
                    confidence=TABLE_CONFIDENCE,
                    diversity_bucket="reference",
                )
            )

        if signals.howto_steps:
            candidates.append(
                CitationCandidate(
                    source_ref="#how-to-content",
                    domain=ON_PAGE_DOMAIN,
                    title=f"{len(signals.howto_steps)} how-to steps found",
                    snippet=(
                        "Step-by-step instructional content enhances procedural "
                        "search visibility"
                    ),
                    credibility_signals={
                        "official": True,
                        "doc_type": "guide",
                        "instructional": True,
                    },
                    confidence=HOWTO_CONFIDENCE,
                    diversity_bucket="educational",
                )
            )

        if signals.structured_data:
            schema_types = ", ".join(record.type for record in signals.structured_data)
            candidates.append(
                CitationCandidate(
                    source_ref="#schema-markup",
                    domain=ON_PAGE_DOMAIN,
                    title=f"Structured data: {schema_types}",
                    snippet="Schema.org markup provides rich structured data for AI platforms",
                    credibility_signals={
                        "official": True,
                        "doc_type": "structured",
                        "machine_readable": True,
                    },
                    confidence=SCHEMA_CONFIDENCE,
                    diversity_bucket="technical",
                )
            )

        for link in signals.authority_links:
            bucket = authority_bucket(link.type)
            candidates.append(
                CitationCandidate(
                    source_ref=link.url or "#authority-link",
                    domain=link.domain,
                    title=f"Authority link: {link.domain}",
                    snippet="External authority link enhances credibility and trust signals",
                    credibility_signals={
                        "official": True,
                        "doc_type": bucket,
                        "external_validation": True,
                    },
                    confidence=AUTHORITY_CONFIDENCE,
                    diversity_bucket=bucket,
                )
            )

        if signals.headings.total_headings > 0:
            hierarchy_note = (
                "proper hierarchy" if signals.headings.hierarchy_valid else "skipped levels"
            )
            candidates.append(
                CitationCandidate(
                    source_ref="#content-structure",
                    domain=ON_PAGE_DOMAIN,
                    title=f"Content structure: {signals.headings.total_headings} headings",
                    snippet=(
                        f"Well-structured content with {signals.headings.h1_count} H1 "
                        f"and {hierarchy_note}"
                    ),
                    credibility_signals={
                        "official": True,
                        "doc_type": "content",
                        "well_structured": True,
                        "hierarchy_valid": signals.headings.hierarchy_valid,
                    },
                    confidence=STRUCTURE_CONFIDENCE,
                    diversity_bucket="structural",
                )
            )

        return candidates


def synthesize_citations(signals: PageSignals) -> list[CitationCandidate]:
    """Convenience function to synthesize citation candidates."""
    return CitationSynthesizer().synthesize(signals)
