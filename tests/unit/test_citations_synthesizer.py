"""Tests for citation candidate synthesis."""

from citeready.citations.synthesizer import (
    CitationSynthesizer,
    authority_bucket,
    synthesize_citations,
)
from citeready.extraction.authority import AuthorityLink
from citeready.extraction.schema import StructuredDataRecord
from citeready.extraction.signals import PageSignals
from citeready.extraction.structure import FAQEntry, HeadingProfile, HowToStep, TableRecord


class TestCitationSynthesizer:
    """Tests for CitationSynthesizer."""

    def test_empty_signals_produce_nothing(self) -> None:
        assert CitationSynthesizer().synthesize(PageSignals()) == []

    def test_template_order_and_fields(self) -> None:
        signals = PageSignals(
            faqs=[FAQEntry(question="Why?", answer="Because.", source="heading")],
            tables=[
                TableRecord(type="pricing", row_count=3, column_count=2),
                TableRecord(type="general", row_count=1, column_count=1),
            ],
            howto_steps=[HowToStep(text="Mix", source="howto_list")],
            structured_data=[
                StructuredDataRecord(type="Organization"),
                StructuredDataRecord(type="FAQPage"),
            ],
            authority_links=[
                AuthorityLink(domain="mit.edu", url="https://mit.edu/paper", type="academic")
            ],
            headings=HeadingProfile(total_headings=4, h1_count=1, hierarchy_valid=True),
        )
        candidates = synthesize_citations(signals)

        assert [c.source_ref for c in candidates] == [
            "#faq-section",
            "#table-0",
            "#table-1",
            "#how-to-content",
            "#schema-markup",
            "https://mit.edu/paper",
            "#content-structure",
        ]
        assert [c.confidence for c in candidates] == [0.9, 0.85, 0.85, 0.88, 0.95, 0.87, 0.82]
        assert [c.diversity_bucket for c in candidates] == [
            "official",
            "reference",
            "reference",
            "educational",
            "technical",
            "research",
            "structural",
        ]
        assert candidates[1].title == "pricing table with 3 rows"
        assert candidates[4].title == "Structured data: Organization, FAQPage"
        assert candidates[5].domain == "mit.edu"
        assert "proper hierarchy" in candidates[6].snippet

    def test_skipped_heading_levels_noted(self) -> None:
        signals = PageSignals(
            headings=HeadingProfile(total_headings=2, h1_count=1, hierarchy_valid=False)
        )
        candidate = CitationSynthesizer().synthesize(signals)[0]

        assert "skipped levels" in candidate.snippet
        assert candidate.credibility_signals["hierarchy_valid"] is False

    def test_to_dict(self) -> None:
        signals = PageSignals(faqs=[FAQEntry(question="Q?", answer="A", source="schema")])
        data = CitationSynthesizer().synthesize(signals)[0].to_dict()

        assert data["source_ref"] == "#faq-section"
        assert data["credibility_signals"]["structured_data"] is True


class TestAuthorityBucket:
    """Tests for authority type bucketing."""

    def test_known_types(self) -> None:
        assert authority_bucket("academic") == "research"
        assert authority_bucket("government") == "official"
        assert authority_bucket("news") == "news"
        assert authority_bucket("encyclopedia") == "reference"

    def test_other_types(self) -> None:
        assert authority_bucket("code_repository") == "authority"
        assert authority_bucket("general_authority") == "authority"
