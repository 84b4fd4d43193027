"""Tests for readiness scoring."""

import pytest

from citeready.scoring.categories import CATEGORIES, CategoryBucket, RankingCategory, get_category
from citeready.scoring.scorer import (
    LEGACY_DETECTORS,
    BooleanHeuristicScorer,
    ScoringMode,
    WeightedCategoryScorer,
    get_scorer,
    normalize_readiness,
    score_content,
)


class TestCategoryTable:
    """Tests for the ranking category table."""

    def test_thirty_unique_categories(self) -> None:
        keys = [c.key for c in CATEGORIES]

        assert len(keys) == 30
        assert len(set(keys)) == 30

    def test_weights_in_range(self) -> None:
        assert all(4 <= c.weight <= 10 for c in CATEGORIES)

    def test_phrases_are_lowercase(self) -> None:
        for category in CATEGORIES:
            assert all(phrase == phrase.lower() for phrase in category.phrases)

    def test_every_bucket_used(self) -> None:
        assert {c.bucket for c in CATEGORIES} == set(CategoryBucket)

    def test_get_category(self) -> None:
        assert get_category("faq").weight == 9
        assert get_category("missing") is None


class TestNormalizeReadiness:
    """Tests for score normalization."""

    def test_rounds_half_up(self) -> None:
        assert normalize_readiness(1, 2) == 50
        assert normalize_readiness(1, 3) == 33
        assert normalize_readiness(2, 3) == 67
        assert normalize_readiness(1, 8) == 13

    def test_zero_maximum(self) -> None:
        assert normalize_readiness(0, 0) == 0

    def test_clamped_to_hundred(self) -> None:
        assert normalize_readiness(5, 2) == 100


class TestWeightedCategoryScorer:
    """Tests for the weighted model."""

    def test_empty_content_scores_zero(self) -> None:
        result = WeightedCategoryScorer().score("")

        assert result.mode == ScoringMode.WEIGHTED
        assert result.readiness == 0
        assert len(result.category_scores) == 30
        assert all(cs.score == 0 for cs in result.category_scores)

    def test_matched_phrases_times_weight(self) -> None:
        result = WeightedCategoryScorer().score("What is X? In short, it is Y.")
        direct = result.get("direct_answer")

        assert direct.matched_terms == frozenset({"what is", "in short"})
        assert direct.score == 20

    def test_phrase_counts_once(self) -> None:
        once = WeightedCategoryScorer().score("tutorial")
        many = WeightedCategoryScorer().score("tutorial tutorial tutorial")

        assert once.get("how_to").score == many.get("how_to").score == 9

    def test_case_insensitive(self) -> None:
        result = WeightedCategoryScorer().score("FREQUENTLY ASKED questions")
        assert "frequently asked" in result.get("faq").matched_terms

    def test_all_phrases_score_hundred(self) -> None:
        content = " | ".join(phrase for c in CATEGORIES for phrase in c.phrases)
        result = WeightedCategoryScorer().score(content)

        assert result.readiness == 100
        assert result.total_score == result.max_score

    def test_custom_category_table(self) -> None:
        table = [
            RankingCategory(
                key="greek",
                label="Greek letters",
                bucket=CategoryBucket.CONTENT_QUALITY,
                weight=5,
                phrases=("alpha", "beta"),
            )
        ]
        result = WeightedCategoryScorer().score("alpha only", categories=table)

        assert result.total_score == 5
        assert result.max_score == 10
        assert result.readiness == 50

    def test_custom_phrases_match_regardless_of_case(self) -> None:
        category = RankingCategory(
            key="greek",
            label="Greek letters",
            bucket=CategoryBucket.CONTENT_QUALITY,
            weight=5,
            phrases=("Alpha", "BETA", "alpha"),
        )
        result = WeightedCategoryScorer().score("alpha and Beta", categories=[category])

        assert category.phrases == ("alpha", "beta")
        assert result.get("greek").matched_terms == frozenset({"alpha", "beta"})
        assert result.readiness == 100

    def test_scores_reported_in_table_order(self) -> None:
        result = WeightedCategoryScorer().score("anything")
        assert [cs.category for cs in result.category_scores] == [c.key for c in CATEGORIES]

    def test_readiness_bounded(self) -> None:
        for content in ["", "faq", "<h1>How to</h1> what is pricing vs. cost", "x" * 1000]:
            assert 0 <= WeightedCategoryScorer().score(content).readiness <= 100


class TestBooleanHeuristicScorer:
    """Tests for the legacy additive model."""

    def test_empty_content_scores_fifty(self) -> None:
        result = BooleanHeuristicScorer().score("")

        assert result.mode == ScoringMode.BOOLEAN
        assert result.readiness == 50
        assert len(result.category_scores) == len(LEGACY_DETECTORS) == 16

    def test_each_signal_adds_three(self) -> None:
        result = BooleanHeuristicScorer().score("<table>")

        assert result.get("tables").score == 3
        assert result.readiness == 53

    def test_brand_consistency_needs_more_than_five(self) -> None:
        scorer = BooleanHeuristicScorer()

        five = scorer.score("acme " * 5, domain="acme.com")
        six = scorer.score("acme " * 6, domain="acme.com")

        assert five.get("brand_consistency").score == 0
        assert six.get("brand_consistency").score == 3

    def test_never_exceeds_hundred(self) -> None:
        content = (
            "FAQ how to <table><ul></ul><ul></ul><ol></ol> versus "
            '<script type="application/ld+json"></script> wikipedia [1] expert official '
            "2024 updated version 2.0 infobox "
            + "Big Name " * 12
        )
        result = BooleanHeuristicScorer().score(content, domain="acme.com")
        assert result.readiness <= 100


class TestGetScorer:
    """Tests for scorer selection."""

    def test_known_modes(self) -> None:
        assert isinstance(get_scorer("weighted"), WeightedCategoryScorer)
        assert isinstance(get_scorer(ScoringMode.BOOLEAN), BooleanHeuristicScorer)

    def test_unknown_mode(self) -> None:
        with pytest.raises(ValueError):
            get_scorer("blended")

    def test_score_content(self) -> None:
        assert score_content("", mode="boolean").readiness == 50
        assert score_content("").readiness == 0
