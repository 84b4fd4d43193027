"""Improvement recommendation package."""

# Lazy imports - use explicit imports when needed:
# from citeready.fixes.recommendations import RecommendationEngine, RecommendationSet

__all__ = [
    "RecommendationTier",
    "RecommendationRule",
    "Recommendation",
    "RecommendationSet",
    "RecommendationEngine",
    "RECOMMENDATION_RULES",
    "recommend",
]
