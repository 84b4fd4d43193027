"""CiteReady - AI citation readiness analysis."""

# Lazy imports to avoid requiring all dependencies at import time
# Use explicit imports when these are needed:
# from citeready.pipeline import ContentAnalyzer, AnalysisResult, analyze_content

__all__ = [
    "ContentAnalyzer",
    "AnalysisResult",
    "analyze_content",
]


from typing import Any


def __getattr__(name: str) -> Any:
    """Lazy import for citeready submodules."""
    if name in ("ContentAnalyzer", "AnalysisResult", "analyze_content"):
        from citeready.pipeline import AnalysisResult, ContentAnalyzer, analyze_content

        return locals()[name]
    raise AttributeError(f"module 'citeready' has no attribute '{name}'")
