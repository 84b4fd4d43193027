"""Content analysis pipeline.

Permission check -> fetch (or manually supplied content) -> signal
extraction -> readiness scoring -> recommendations. Citation candidates
are synthesized from the extracted signals independently of the score.

A permission decision with ``allowed=False`` stops the pipeline unless the
caller supplies the page content itself, which skips the check entirely.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from urllib.parse import urlparse

import structlog

from api.exceptions import AnalysisBlockedError, AnalysisFailedError, ValidationError
from citeready.citations.synthesizer import CitationCandidate, CitationSynthesizer
from citeready.crawler.permissions import PermissionDecision, PermissionResolver
from citeready.extraction.signals import PageSignals, SignalExtractorSet
from citeready.fetcher import HttpPageFetcher, PageFetcher
from citeready.fixes.recommendations import RecommendationEngine, RecommendationSet
from citeready.scoring.scorer import ReadinessScorer, ScoreResult, ScoringMode, get_scorer

logger = structlog.get_logger(__name__)


@dataclass
class AnalysisResult:
    """Everything produced by one analysis run."""

    domain: str
    signals: PageSignals
    score: ScoreResult
    recommendations: RecommendationSet
    citations: list[CitationCandidate] = field(default_factory=list)
    url: str | None = None
    permission: PermissionDecision | None = None
    manual_content: bool = False
    analyzed_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def readiness_score(self) -> int:
        return self.score.readiness

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "domain": self.domain,
            "signals": self.signals.to_dict(),
            "readiness_score": self.score.readiness,
            "scoring_mode": self.score.mode.value,
            "category_scores": [cs.to_dict() for cs in self.score.category_scores],
            "recommendations": self.recommendations.to_dict(),
            "citations": [c.to_dict() for c in self.citations],
            "permission": self.permission.to_dict() if self.permission else None,
            "manual_content": self.manual_content,
            "analyzed_at": self.analyzed_at.isoformat(),
        }


def normalize_url(url: str) -> str:
    """Add an https scheme to bare domains."""
    url = url.strip()
    return url if "://" in url else f"https://{url}"


def domain_from_url(url: str | None) -> str:
    if not url:
        return ""
    return (urlparse(normalize_url(url)).hostname or "").lower()


class ContentAnalyzer:
    """Runs the permission-gated analysis pipeline."""

    def __init__(
        self,
        resolver: PermissionResolver | None = None,
        fetcher: PageFetcher | None = None,
        scorer: ReadinessScorer | None = None,
        extractor: SignalExtractorSet | None = None,
        engine: RecommendationEngine | None = None,
        synthesizer: CitationSynthesizer | None = None,
    ):
        self.resolver = resolver or PermissionResolver()
        self.fetcher = fetcher or HttpPageFetcher()
        self.scorer = scorer or get_scorer(ScoringMode.WEIGHTED)
        self.extractor = extractor or SignalExtractorSet()
        self.engine = engine or RecommendationEngine()
        self.synthesizer = synthesizer or CitationSynthesizer()

    async def analyze(
        self,
        url: str | None = None,
        content: str | None = None,
        domain: str | None = None,
    ) -> AnalysisResult:
        """
        Analyze a page by URL, or analyze supplied content directly.

        Args:
            url: Page URL; required unless ``content`` is given
            content: Manually supplied page content; skips the permission check
            domain: Site domain for brand matching (defaults to the URL host)

        Returns:
            AnalysisResult

        Raises:
            ValidationError: Neither url nor content was given, or the url is malformed
            AnalysisBlockedError: The site does not permit automated analysis
            AnalysisFailedError: The page could not be fetched
        """
        if content is None and not (url and url.strip()):
            raise ValidationError("Either url or content is required", field="url")

        try:
            domain = domain or domain_from_url(url)
        except ValueError as e:
            raise ValidationError(f"Invalid url: {e}", field="url") from e

        if content is not None:
            logger.info("analysis_manual_content", url=url, domain=domain, length=len(content))
            return self.analyze_content(content, domain=domain, url=url, manual_content=True)

        page_url = normalize_url(url)
        permission = await self.resolver.resolve(page_url)
        if not permission.allowed:
            logger.info(
                "analysis_blocked",
                url=page_url,
                source=permission.source.value,
                reason=permission.reason,
            )
            raise AnalysisBlockedError(page_url, permission.to_dict())

        fetch = await self.fetcher.fetch(page_url)
        if not fetch.success:
            logger.warning(
                "analysis_fetch_failed",
                url=page_url,
                status_code=fetch.status_code,
                error=fetch.error,
            )
            raise AnalysisFailedError(page_url, fetch.error or "no content returned")

        return self.analyze_content(
            fetch.html or "",
            domain=domain,
            url=page_url,
            permission=permission,
        )

    def analyze_content(
        self,
        content: str,
        domain: str = "",
        url: str | None = None,
        permission: PermissionDecision | None = None,
        manual_content: bool = False,
    ) -> AnalysisResult:
        """Run extraction, scoring, recommendations and citation synthesis over content."""
        signals = self.extractor.extract(content, domain)
        score = self.scorer.score(content, domain=domain)
        recommendations = self.engine.recommend(score.category_scores)
        citations = self.synthesizer.synthesize(signals)

        logger.info(
            "analysis_complete",
            url=url,
            domain=domain,
            mode=score.mode.value,
            readiness=score.readiness,
            critical=len(recommendations.critical),
            citations=len(citations),
        )

        return AnalysisResult(
            domain=domain,
            signals=signals,
            score=score,
            recommendations=recommendations,
            citations=citations,
            url=url,
            permission=permission,
            manual_content=manual_content,
        )


def analyze_content(
    content: str,
    domain: str = "",
    mode: ScoringMode | str = ScoringMode.WEIGHTED,
) -> AnalysisResult:
    """
    Convenience function to analyze content without any network access.

    Args:
        content: Page HTML or pasted text
        domain: Site domain for brand matching
        mode: Scoring strategy

    Returns:
        AnalysisResult
    """
    analyzer = ContentAnalyzer(scorer=get_scorer(mode))
    return analyzer.analyze_content(content, domain=domain, manual_content=True)
