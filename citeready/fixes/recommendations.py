"""Tiered improvement recommendations.

Each rule watches one ranking category and fires when that category had
no matches. Rules are evaluated independently, so one page can collect
recommendations in every tier. Output order follows the order of the
category scores, which is the category table order.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

import structlog

from citeready.scoring.scorer import CategoryScore

logger = structlog.get_logger(__name__)


class RecommendationTier(str, Enum):
    """Priority tier of a recommendation."""

    CRITICAL = "critical"
    IMPORTANT = "important"
    NICE_TO_HAVE = "nice_to_have"


@dataclass(frozen=True)
class RecommendationRule:
    """Fixed recommendation issued when a category is missing."""

    category: str
    tier: RecommendationTier
    text: str


@dataclass(frozen=True)
class Recommendation:
    tier: RecommendationTier
    text: str
    category: str

    def to_dict(self) -> dict:
        return {"tier": self.tier.value, "text": self.text, "category": self.category}


RECOMMENDATION_RULES: dict[str, RecommendationRule] = {
    rule.category: rule
    for rule in [
        # Critical
        RecommendationRule(
            category="direct_answer",
            tier=RecommendationTier.CRITICAL,
            text=(
                "Add direct question-answering phrasing (\"What is...\", \"In short...\") "
                "so answer engines can quote a clear answer"
            ),
        ),
        RecommendationRule(
            category="how_to",
            tier=RecommendationTier.CRITICAL,
            text="Create step-by-step how-to content for procedural queries",
        ),
        RecommendationRule(
            category="domain_authority",
            tier=RecommendationTier.CRITICAL,
            text=(
                "Add domain-authority signals such as certifications, accreditations "
                "or official affiliations"
            ),
        ),
        # Important
        RecommendationRule(
            category="data_visualization",
            tier=RecommendationTier.IMPORTANT,
            text="Summarize key data in charts, graphs or infographics",
        ),
        RecommendationRule(
            category="faq",
            tier=RecommendationTier.IMPORTANT,
            text="Add an FAQ section for better Q&A visibility",
        ),
        RecommendationRule(
            category="comparison",
            tier=RecommendationTier.IMPORTANT,
            text="Add comparison content (versus, alternatives, pros and cons)",
        ),
        # Nice to have
        RecommendationRule(
            category="testimonials",
            tier=RecommendationTier.NICE_TO_HAVE,
            text="Include customer testimonials or reviews",
        ),
        RecommendationRule(
            category="social_mentions",
            tier=RecommendationTier.NICE_TO_HAVE,
            text="Reference your social profiles and community mentions",
        ),
    ]
}


@dataclass
class RecommendationSet:
    """Recommendations grouped by tier."""

    items: list[Recommendation] = field(default_factory=list)

    def for_tier(self, tier: RecommendationTier) -> list[str]:
        return [item.text for item in self.items if item.tier == tier]

    @property
    def critical(self) -> list[str]:
        return self.for_tier(RecommendationTier.CRITICAL)

    @property
    def important(self) -> list[str]:
        return self.for_tier(RecommendationTier.IMPORTANT)

    @property
    def nice_to_have(self) -> list[str]:
        return self.for_tier(RecommendationTier.NICE_TO_HAVE)

    def to_dict(self) -> dict:
        return {
            "critical": self.critical,
            "important": self.important,
            "nice_to_have": self.nice_to_have,
        }


class RecommendationEngine:
    """Maps missing categories to tiered recommendations."""

    def __init__(self, rules: dict[str, RecommendationRule] | None = None):
        self.rules = rules if rules is not None else RECOMMENDATION_RULES

    def recommend(self, category_scores: Sequence[CategoryScore]) -> RecommendationSet:
        """
        Build recommendations from category scores.

        A rule fires when its category is present in ``category_scores``
        with a score of zero. Categories without a rule, and rules whose
        category was not scored, are ignored.

        Args:
            category_scores: Scores in category table order

        Returns:
            RecommendationSet
        """
        result = RecommendationSet()

        for category_score in category_scores:
            rule = self.rules.get(category_score.category)
            if rule is None or category_score.score > 0:
                continue
            result.items.append(
                Recommendation(tier=rule.tier, text=rule.text, category=rule.category)
            )

        logger.debug(
            "recommendations_built",
            critical=len(result.critical),
            important=len(result.important),
            nice_to_have=len(result.nice_to_have),
        )
        return result


def recommend(category_scores: Sequence[CategoryScore]) -> RecommendationSet:
    """Convenience function using the default rule set."""
    return RecommendationEngine().recommend(category_scores)
