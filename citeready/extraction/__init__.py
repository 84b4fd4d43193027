"""Content signal extraction package."""

# Lazy imports - use explicit imports when needed:
# from citeready.extraction.signals import SignalExtractorSet, PageSignals, extract_signals
# from citeready.extraction.structure import extract_faqs, extract_tables, analyze_headings
# from citeready.extraction.schema import extract_structured_data
# from citeready.extraction.references import extract_citations, extract_freshness
# from citeready.extraction.authority import find_authority_links
# from citeready.extraction.brand import count_brand_mentions, extract_entities

__all__ = [
    # Aggregate
    "SignalExtractorSet",
    "PageSignals",
    "extract_signals",
    # Structure
    "FAQEntry",
    "TableRecord",
    "HowToStep",
    "ComparisonSignal",
    "ListRecord",
    "HeadingProfile",
    "extract_faqs",
    "extract_tables",
    "extract_howto_steps",
    "extract_comparisons",
    "extract_lists",
    "analyze_headings",
    # Structured data
    "StructuredDataRecord",
    "extract_structured_data",
    "parse_json_ld",
    # References
    "CitationMention",
    "FreshnessSignals",
    "extract_citations",
    "extract_freshness",
    # Authority
    "AuthorityLink",
    "CredibilitySignals",
    "find_authority_links",
    "count_internal_links",
    "extract_credibility",
    # Brand
    "BrandMentions",
    "EntitySignals",
    "count_brand_mentions",
    "extract_entities",
]
