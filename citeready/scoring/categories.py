"""Ranking category table for the weighted readiness score.

Each category is a group of trigger phrases that answer engines are
known to reward, with a relative weight (4-10). Categories are grouped
into six thematic buckets. Table order is significant: category scores
and recommendations are reported in this order.
"""

from dataclasses import dataclass
from enum import Enum


class CategoryBucket(str, Enum):
    """Thematic grouping of ranking categories."""

    CONTENT_QUALITY = "content_quality"
    AUTHORITY = "authority"
    FRESHNESS = "freshness"
    STRUCTURE = "structure"
    USER_INTENT = "user_intent"
    SOCIAL_PROOF = "social_proof"


@dataclass(frozen=True)
class RankingCategory:
    """A weighted group of trigger phrases, stored lowercased and deduplicated."""

    key: str
    label: str
    bucket: CategoryBucket
    weight: int
    phrases: tuple[str, ...]

    def __post_init__(self) -> None:
        phrases = tuple(dict.fromkeys(phrase.lower() for phrase in self.phrases if phrase))
        object.__setattr__(self, "phrases", phrases)

    @property
    def max_score(self) -> int:
        return self.weight * len(self.phrases)

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "label": self.label,
            "bucket": self.bucket.value,
            "weight": self.weight,
            "phrases": list(self.phrases),
        }


CATEGORIES: list[RankingCategory] = [
    # Content quality
    RankingCategory(
        key="direct_answer",
        label="Direct answers",
        bucket=CategoryBucket.CONTENT_QUALITY,
        weight=10,
        phrases=(
            "what is",
            "the answer is",
            "in short",
            "simply put",
            "in summary",
            "tl;dr",
            "the best way",
            "here's how",
            "the short answer",
            "bottom line",
        ),
    ),
    RankingCategory(
        key="how_to",
        label="How-to and step content",
        bucket=CategoryBucket.CONTENT_QUALITY,
        weight=9,
        phrases=(
            "how to",
            "step 1",
            "step-by-step",
            "step by step",
            "follow these steps",
            "instructions",
            "tutorial",
            "walkthrough",
        ),
    ),
    RankingCategory(
        key="definitions",
        label="Definitions",
        bucket=CategoryBucket.CONTENT_QUALITY,
        weight=7,
        phrases=(
            "is defined as",
            "refers to",
            "definition",
            "also known as",
            "in other words",
            "stands for",
        ),
    ),
    RankingCategory(
        key="statistics",
        label="Statistics and data points",
        bucket=CategoryBucket.CONTENT_QUALITY,
        weight=8,
        phrases=(
            "percent",
            "statistics",
            "survey",
            "study found",
            "data shows",
            "on average",
            "million",
            "billion",
        ),
    ),
    RankingCategory(
        key="examples",
        label="Examples",
        bucket=CategoryBucket.CONTENT_QUALITY,
        weight=6,
        phrases=("for example", "for instance", "such as", "e.g.", "example:"),
    ),
    # Authority
    RankingCategory(
        key="domain_authority",
        label="Domain authority",
        bucket=CategoryBucket.AUTHORITY,
        weight=10,
        phrases=(
            "official",
            "certified",
            "accredited",
            "award-winning",
            "industry leader",
            "trusted by",
            "founded in",
            "licensed",
            "accreditation",
        ),
    ),
    RankingCategory(
        key="expert_quotes",
        label="Expert quotes",
        bucket=CategoryBucket.AUTHORITY,
        weight=8,
        phrases=("according to", "expert", "professor", "ph.d", "dr.", "researcher", "analyst"),
    ),
    RankingCategory(
        key="citations",
        label="Source citations",
        bucket=CategoryBucket.AUTHORITY,
        weight=8,
        phrases=("source:", "sources", "references", "cited", "<cite", "journal", "[1]"),
    ),
    RankingCategory(
        key="credentials",
        label="Author credentials",
        bucket=CategoryBucket.AUTHORITY,
        weight=7,
        phrases=(
            "written by",
            "reviewed by",
            "fact-checked",
            "medically reviewed",
            "years of experience",
            "about the author",
        ),
    ),
    RankingCategory(
        key="original_research",
        label="Original research",
        bucket=CategoryBucket.AUTHORITY,
        weight=7,
        phrases=(
            "our research",
            "we surveyed",
            "we analyzed",
            "our data",
            "methodology",
            "findings",
            "whitepaper",
        ),
    ),
    # Freshness
    RankingCategory(
        key="recency",
        label="Recency markers",
        bucket=CategoryBucket.FRESHNESS,
        weight=7,
        phrases=("updated", "last modified", "latest", "recently", "as of", "this year"),
    ),
    RankingCategory(
        key="publish_dates",
        label="Publication dates",
        bucket=CategoryBucket.FRESHNESS,
        weight=6,
        phrases=("published", "datepublished", "datemodified", "posted on", "<time"),
    ),
    RankingCategory(
        key="versioning",
        label="Version tracking",
        bucket=CategoryBucket.FRESHNESS,
        weight=5,
        phrases=("version", "changelog", "release notes", "what's new"),
    ),
    RankingCategory(
        key="trending",
        label="Trending topics",
        bucket=CategoryBucket.FRESHNESS,
        weight=5,
        phrases=("trending", "breaking", "just announced", "emerging", "this week", "this month"),
    ),
    RankingCategory(
        key="update_cadence",
        label="Update cadence",
        bucket=CategoryBucket.FRESHNESS,
        weight=4,
        phrases=(
            "regularly updated",
            "updated weekly",
            "updated monthly",
            "maintained",
            "reviewed annually",
        ),
    ),
    # Structure
    RankingCategory(
        key="faq",
        label="FAQ structure",
        bucket=CategoryBucket.STRUCTURE,
        weight=9,
        phrases=("faq", "frequently asked", "common questions", "faqpage", "q&a"),
    ),
    RankingCategory(
        key="headings",
        label="Heading hierarchy",
        bucket=CategoryBucket.STRUCTURE,
        weight=7,
        phrases=("<h1", "<h2", "<h3", "overview", "introduction", "conclusion"),
    ),
    RankingCategory(
        key="lists",
        label="Lists",
        bucket=CategoryBucket.STRUCTURE,
        weight=6,
        phrases=("<ul", "<ol", "<li", "key points", "key takeaways", "checklist"),
    ),
    RankingCategory(
        key="tables",
        label="Tables",
        bucket=CategoryBucket.STRUCTURE,
        weight=6,
        phrases=("<table", "<th", "<td", "table of contents"),
    ),
    RankingCategory(
        key="structured_data",
        label="Structured data",
        bucket=CategoryBucket.STRUCTURE,
        weight=8,
        phrases=("application/ld+json", "schema.org", "itemscope", "itemprop", "@type"),
    ),
    RankingCategory(
        key="data_visualization",
        label="Data visualization",
        bucket=CategoryBucket.STRUCTURE,
        weight=7,
        phrases=("chart", "graph", "infographic", "diagram", "visualization", "<svg", "<canvas"),
    ),
    # User intent
    RankingCategory(
        key="comparison",
        label="Comparisons",
        bucket=CategoryBucket.USER_INTENT,
        weight=8,
        phrases=(
            " vs ",
            "vs.",
            "versus",
            "compared to",
            "comparison",
            "alternative",
            "pros and cons",
        ),
    ),
    RankingCategory(
        key="pricing",
        label="Pricing",
        bucket=CategoryBucket.USER_INTENT,
        weight=6,
        phrases=("price", "pricing", "cost", "free trial", "per month", "plans"),
    ),
    RankingCategory(
        key="problem_solution",
        label="Problem and solution",
        bucket=CategoryBucket.USER_INTENT,
        weight=7,
        phrases=("problem", "solution", "solve", "troubleshoot", "fix", "challenge"),
    ),
    RankingCategory(
        key="use_cases",
        label="Use cases",
        bucket=CategoryBucket.USER_INTENT,
        weight=6,
        phrases=("use case", "ideal for", "best for", "who should", "perfect for", "designed for"),
    ),
    RankingCategory(
        key="local_intent",
        label="Local intent",
        bucket=CategoryBucket.USER_INTENT,
        weight=4,
        phrases=("near me", "opening hours", "directions", "located in", "service area"),
    ),
    # Social proof
    RankingCategory(
        key="testimonials",
        label="Testimonials",
        bucket=CategoryBucket.SOCIAL_PROOF,
        weight=6,
        phrases=(
            "testimonial",
            "customer review",
            "what our customers say",
            "5-star",
            "five-star",
            "rated",
        ),
    ),
    RankingCategory(
        key="social_mentions",
        label="Social mentions",
        bucket=CategoryBucket.SOCIAL_PROOF,
        weight=5,
        phrases=("twitter", "linkedin", "facebook", "instagram", "youtube", "reddit"),
    ),
    RankingCategory(
        key="case_studies",
        label="Case studies",
        bucket=CategoryBucket.SOCIAL_PROOF,
        weight=6,
        phrases=("case study", "success story", "customer story", "roi"),
    ),
    RankingCategory(
        key="community",
        label="Community engagement",
        bucket=CategoryBucket.SOCIAL_PROOF,
        weight=4,
        phrases=("community", "forum", "discussion", "join us", "discord", "comments"),
    ),
]


def get_category(key: str) -> RankingCategory | None:
    """Look up a category by key."""
    for category in CATEGORIES:
        if category.key == key:
            return category
    return None
