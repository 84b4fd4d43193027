"""Readiness scoring strategies.

Two models turn page content into a 0-100 readiness score:

- WeightedCategoryScorer (canonical): each ranking category scores
  ``matched_phrases * weight``; the total is normalized against the
  maximum attainable score. Empty content scores 0.
- BooleanHeuristicScorer (legacy): a fixed base of 50 plus 3 points for
  each of 16 boolean detectors that fires. Empty content scores 50.

The two are never blended. Callers pick one by ScoringMode.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

import structlog

from citeready.extraction.brand import brand_label
from citeready.scoring.categories import CATEGORIES, RankingCategory

logger = structlog.get_logger(__name__)

MAX_READINESS = 100

LEGACY_BASE_SCORE = 50
LEGACY_POINTS_PER_SIGNAL = 3


class ScoringMode(StrEnum):
    """Named scoring strategy."""

    WEIGHTED = "weighted"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class CategoryScore:
    """Score contribution of one category for one piece of content."""

    category: str
    label: str
    weight: int
    matched_terms: frozenset[str]
    score: int
    bucket: str | None = None

    @property
    def matched(self) -> bool:
        return self.score > 0

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "label": self.label,
            "bucket": self.bucket,
            "weight": self.weight,
            "matched_terms": sorted(self.matched_terms),
            "score": self.score,
        }


@dataclass
class ScoreResult:
    """Readiness score with its per-category breakdown."""

    mode: ScoringMode
    readiness: int
    category_scores: list[CategoryScore] = field(default_factory=list)
    total_score: int = 0
    max_score: int = 0

    def get(self, category: str) -> CategoryScore | None:
        for category_score in self.category_scores:
            if category_score.category == category:
                return category_score
        return None

    def to_dict(self) -> dict:
        return {
            "mode": self.mode.value,
            "readiness": self.readiness,
            "total_score": self.total_score,
            "max_score": self.max_score,
            "category_scores": [cs.to_dict() for cs in self.category_scores],
        }


def normalize_readiness(total: float, maximum: float) -> int:
    """Scale ``total`` against ``maximum`` to an integer in [0, 100], rounding halves up."""
    if maximum <= 0:
        return 0
    percent = min(MAX_READINESS, total / maximum * 100)
    return max(0, int(percent + 0.5))


class ReadinessScorer(ABC):
    """Base class for readiness scoring strategies."""

    mode: ScoringMode

    @abstractmethod
    def score(
        self,
        content: str,
        categories: Sequence[RankingCategory] | None = None,
        domain: str = "",
    ) -> ScoreResult:
        """Score content, returning readiness and a category breakdown."""


class WeightedCategoryScorer(ReadinessScorer):
    """Weighted trigger-phrase scoring over the ranking category table."""

    mode = ScoringMode.WEIGHTED

    def __init__(self, categories: Sequence[RankingCategory] | None = None):
        self.categories = list(categories) if categories is not None else CATEGORIES

    def score(
        self,
        content: str,
        categories: Sequence[RankingCategory] | None = None,
        domain: str = "",
    ) -> ScoreResult:
        """
        Score content against a category table.

        Matching is case-insensitive substring presence; each phrase counts
        at most once regardless of how often it appears.

        Args:
            content: Page HTML or text
            categories: Category table (defaults to the scorer's table)
            domain: Unused by this model

        Returns:
            ScoreResult with readiness in [0, 100]
        """
        table = list(categories) if categories is not None else self.categories
        lowered = (content or "").lower()

        category_scores = []
        for category in table:
            matched = frozenset(phrase for phrase in category.phrases if phrase in lowered)
            category_scores.append(
                CategoryScore(
                    category=category.key,
                    label=category.label,
                    weight=category.weight,
                    matched_terms=matched,
                    score=len(matched) * category.weight,
                    bucket=category.bucket.value,
                )
            )

        total = sum(cs.score for cs in category_scores)
        maximum = sum(category.max_score for category in table)

        return ScoreResult(
            mode=self.mode,
            readiness=normalize_readiness(total, maximum),
            category_scores=category_scores,
            total_score=total,
            max_score=maximum,
        )


def _pattern_detector(pattern: str, flags: int = re.IGNORECASE) -> Callable[[str, str], str | None]:
    compiled = re.compile(pattern, flags)

    def detect(content: str, domain: str) -> str | None:
        match = compiled.search(content)
        return match.group(0) if match else None

    return detect


def _count_detector(
    pattern: str, threshold: int, flags: int = re.IGNORECASE
) -> Callable[[str, str], str | None]:
    compiled = re.compile(pattern, flags)

    def detect(content: str, domain: str) -> str | None:
        count = len(compiled.findall(content))
        return f"{count} matches" if count > threshold else None

    return detect


def _detect_brand_consistency(content: str, domain: str) -> str | None:
    label = brand_label(domain)
    if not label:
        return None
    count = len(re.findall(re.escape(label), content, re.IGNORECASE))
    return f"{count} mentions" if count > 5 else None


# (key, label, detector) - detectors return the evidence found, or None
LEGACY_DETECTORS: list[tuple[str, str, Callable[[str, str], str | None]]] = [
    ("faq", "FAQ content", _pattern_detector(r"faq|frequently asked|common questions")),
    (
        "how_to",
        "How-to content",
        _pattern_detector(r"how to|step by step|tutorial|guide|instructions"),
    ),
    ("tables", "Tables", _pattern_detector(r"<table")),
    ("lists", "Lists", _count_detector(r"<[ou]l[\s>]", threshold=2)),
    (
        "comparison",
        "Comparisons",
        _pattern_detector(r"versus|vs\.|compared to|comparison|better than|alternative"),
    ),
    ("structured_data", "Schema markup", _pattern_detector(r"application/ld\+json|itemscope")),
    (
        "authority_links",
        "Authority links",
        _pattern_detector(r"\.gov|\.edu|\.org|wikipedia|pubmed|scholar"),
    ),
    (
        "citations",
        "Citations",
        _pattern_detector(r"\[\d+\]|citation|reference|source:|according to"),
    ),
    (
        "expert_quotes",
        "Expert quotes",
        _pattern_detector(r"\"[^\"]{50,}\"|said|stated|according|expert|professor|doctor"),
    ),
    (
        "official_sources",
        "Official sources",
        _pattern_detector(r"official|authorized|certified|verified|authentic"),
    ),
    (
        "date_markers",
        "Date markers",
        _pattern_detector(
            r"\d{4}|\d{1,2}/\d{1,2}|january|february|march|april|may|june|july|august"
            r"|september|october|november|december"
        ),
    ),
    (
        "update_signals",
        "Update signals",
        _pattern_detector(r"updated|revised|last modified|current as of|latest"),
    ),
    ("versioning", "Versioning", _pattern_detector(r"version|v\d+|\d+\.\d+|release|edition")),
    ("brand_consistency", "Brand consistency", _detect_brand_consistency),
    (
        "entity_diversity",
        "Entity diversity",
        _count_detector(r"[A-Z][a-z]+\s+[A-Z][a-z]+", threshold=10, flags=0),
    ),
    (
        "wikipedia_style",
        "Wikipedia-style markup",
        _pattern_detector(
            r"\[edit\]|^== .+ ==|\{\{|\}\}|\[\[|\]\]|infobox",
            re.IGNORECASE | re.MULTILINE,
        ),
    ),
]


class BooleanHeuristicScorer(ReadinessScorer):
    """
    Legacy additive scoring: base 50 plus 3 per detected signal.

    Each of the 16 detectors is reported as a CategoryScore of weight 3
    whose matched_terms hold the evidence that triggered it.
    """

    mode = ScoringMode.BOOLEAN

    def score(
        self,
        content: str,
        categories: Sequence[RankingCategory] | None = None,
        domain: str = "",
    ) -> ScoreResult:
        content = content or ""
        category_scores = []

        for key, label, detector in LEGACY_DETECTORS:
            evidence = detector(content, domain)
            category_scores.append(
                CategoryScore(
                    category=key,
                    label=label,
                    weight=LEGACY_POINTS_PER_SIGNAL,
                    matched_terms=frozenset({evidence}) if evidence else frozenset(),
                    score=LEGACY_POINTS_PER_SIGNAL if evidence else 0,
                )
            )

        total = LEGACY_BASE_SCORE + sum(cs.score for cs in category_scores)

        return ScoreResult(
            mode=self.mode,
            readiness=min(MAX_READINESS, total),
            category_scores=category_scores,
            total_score=total,
            max_score=MAX_READINESS,
        )


def get_scorer(mode: ScoringMode | str = ScoringMode.WEIGHTED) -> ReadinessScorer:
    """
    Return the scorer for a named mode.

    Raises:
        ValueError: If the mode is not a known ScoringMode
    """
    mode = ScoringMode(mode)
    if mode == ScoringMode.BOOLEAN:
        return BooleanHeuristicScorer()
    return WeightedCategoryScorer()


def score_content(
    content: str,
    mode: ScoringMode | str = ScoringMode.WEIGHTED,
    domain: str = "",
) -> ScoreResult:
    """Convenience function to score content with the named strategy."""
    result = get_scorer(mode).score(content, domain=domain)
    logger.debug("content_scored", mode=result.mode.value, readiness=result.readiness)
    return result
