"""Run every content extractor over a page.

SignalExtractorSet is the single entry point the pipeline uses. Each
extractor runs independently over the same immutable input; a failure in
one is logged and leaves its collection empty without affecting the rest.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

import structlog

from citeready.extraction.authority import (
    AuthorityLink,
    CredibilitySignals,
    count_internal_links,
    extract_credibility,
    find_authority_links,
)
from citeready.extraction.brand import (
    BrandMentions,
    EntitySignals,
    count_brand_mentions,
    extract_entities,
)
from citeready.extraction.references import (
    CitationMention,
    FreshnessSignals,
    extract_citations,
    extract_freshness,
)
from citeready.extraction.schema import StructuredDataRecord, extract_structured_data
from citeready.extraction.structure import (
    ComparisonSignal,
    FAQEntry,
    HeadingProfile,
    HowToStep,
    ListRecord,
    TableRecord,
    analyze_headings,
    extract_comparisons,
    extract_faqs,
    extract_howto_steps,
    extract_lists,
    extract_tables,
)

logger = structlog.get_logger(__name__)

T = TypeVar("T")


@dataclass
class PageSignals:
    """All structured signals extracted from one page."""

    # Entity & brand
    entities: EntitySignals = field(default_factory=EntitySignals)
    brand_mentions: BrandMentions = field(default_factory=BrandMentions)
    authority_links: list[AuthorityLink] = field(default_factory=list)

    # Content structure
    faqs: list[FAQEntry] = field(default_factory=list)
    tables: list[TableRecord] = field(default_factory=list)
    howto_steps: list[HowToStep] = field(default_factory=list)
    comparisons: list[ComparisonSignal] = field(default_factory=list)
    lists: list[ListRecord] = field(default_factory=list)

    # Technical
    structured_data: list[StructuredDataRecord] = field(default_factory=list)
    headings: HeadingProfile = field(default_factory=HeadingProfile)
    internal_links: int = 0
    citations: list[CitationMention] = field(default_factory=list)

    # Freshness & credibility
    freshness: FreshnessSignals = field(default_factory=FreshnessSignals)
    credibility: CredibilitySignals = field(default_factory=CredibilitySignals)

    def to_dict(self) -> dict[str, Any]:
        return {
            "entities": self.entities.to_dict(),
            "brand_mentions": self.brand_mentions.to_dict(),
            "authority_links": [link.to_dict() for link in self.authority_links],
            "faqs": [faq.to_dict() for faq in self.faqs],
            "tables": [table.to_dict() for table in self.tables],
            "howto_steps": [step.to_dict() for step in self.howto_steps],
            "comparisons": [c.to_dict() for c in self.comparisons],
            "lists": [lst.to_dict() for lst in self.lists],
            "structured_data": [record.to_dict() for record in self.structured_data],
            "headings": self.headings.to_dict(),
            "internal_links": self.internal_links,
            "citations": [c.to_dict() for c in self.citations],
            "freshness": self.freshness.to_dict(),
            "credibility": self.credibility.to_dict(),
        }


class SignalExtractorSet:
    """Runs the full battery of signal extractors over page content."""

    def extract(self, content: str, domain: str = "") -> PageSignals:
        """
        Extract every signal collection from content.

        Args:
            content: Page HTML or manually pasted text
            domain: Site domain used for brand matching

        Returns:
            PageSignals with one collection per extractor
        """
        content = content or ""

        signals = PageSignals(
            entities=self._run("entities", EntitySignals, extract_entities, content, domain),
            brand_mentions=self._run(
                "brand_mentions", BrandMentions, count_brand_mentions, content, domain
            ),
            authority_links=self._run("authority_links", list, find_authority_links, content),
            faqs=self._run("faqs", list, extract_faqs, content),
            tables=self._run("tables", list, extract_tables, content),
            howto_steps=self._run("howto_steps", list, extract_howto_steps, content),
            comparisons=self._run("comparisons", list, extract_comparisons, content),
            lists=self._run("lists", list, extract_lists, content),
            structured_data=self._run("structured_data", list, extract_structured_data, content),
            headings=self._run("headings", HeadingProfile, analyze_headings, content),
            internal_links=self._run("internal_links", int, count_internal_links, content),
            citations=self._run("citations", list, extract_citations, content),
            freshness=self._run("freshness", FreshnessSignals, extract_freshness, content),
            credibility=self._run("credibility", CredibilitySignals, extract_credibility, content),
        )

        logger.debug(
            "signals_extracted",
            domain=domain,
            faqs=len(signals.faqs),
            tables=len(signals.tables),
            howto_steps=len(signals.howto_steps),
            structured_data=len(signals.structured_data),
            authority_links=len(signals.authority_links),
        )
        return signals

    @staticmethod
    def _run(name: str, empty: Callable[[], T], extractor: Callable[..., T], *args: Any) -> T:
        try:
            return extractor(*args)
        except Exception as e:
            logger.warning("extractor_failed", extractor=name, error=str(e), exc_info=True)
            return empty()


def extract_signals(content: str, domain: str = "") -> PageSignals:
    """
    Convenience function to extract all signals from content.

    Args:
        content: Page HTML or manually pasted text
        domain: Site domain used for brand matching

    Returns:
        PageSignals
    """
    return SignalExtractorSet().extract(content, domain)
