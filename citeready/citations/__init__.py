"""Citation candidate synthesis package."""

# Lazy imports - use explicit imports when needed:
# from citeready.citations.synthesizer import CitationSynthesizer, CitationCandidate

__all__ = [
    "CitationCandidate",
    "CitationSynthesizer",
    "synthesize_citations",
]
