"""Readiness scoring package."""

# Lazy imports to avoid requiring all dependencies at import time
# Use explicit imports when needed:
# from citeready.scoring.categories import CATEGORIES, RankingCategory
# from citeready.scoring.scorer import WeightedCategoryScorer, BooleanHeuristicScorer, get_scorer

__all__ = [
    # Category table
    "CATEGORIES",
    "CategoryBucket",
    "RankingCategory",
    "get_category",
    # Scorers
    "ScoringMode",
    "CategoryScore",
    "ScoreResult",
    "ReadinessScorer",
    "WeightedCategoryScorer",
    "BooleanHeuristicScorer",
    "get_scorer",
    "score_content",
]
