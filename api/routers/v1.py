"""V1 API router - analysis and permission endpoints."""

import structlog
from fastapi import APIRouter

from api.deps import FetcherDep, ResolverDep, SettingsDep
from api.schemas.analysis import (
    AnalysisResponse,
    AnalyzeRequest,
    PermissionRequest,
    PermissionResponse,
)
from citeready.pipeline import ContentAnalyzer
from citeready.scoring.scorer import get_scorer

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Analysis"])


@router.get("/")
async def v1_root() -> dict[str, str]:
    """V1 API root endpoint."""
    return {
        "version": "1",
        "status": "active",
    }


@router.post("/permissions", response_model=PermissionResponse)
async def check_permission(body: PermissionRequest, resolver: ResolverDep) -> PermissionResponse:
    """Check whether llms.txt / robots.txt permit automated analysis of a URL."""
    decision = await resolver.resolve(body.url)
    return PermissionResponse(**decision.to_dict())


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze(
    body: AnalyzeRequest,
    settings: SettingsDep,
    resolver: ResolverDep,
    fetcher: FetcherDep,
) -> AnalysisResponse:
    """
    Analyze a page for AI citation readiness.

    Either fetches ``url`` (after a permission check) or analyzes the
    supplied ``content`` directly. A blocked site returns 403 with the
    permission decision so the client can fall back to pasting content.
    """
    analyzer = ContentAnalyzer(
        resolver=resolver,
        fetcher=fetcher,
        scorer=get_scorer(body.scoring_mode or settings.scoring_mode),
    )
    result = await analyzer.analyze(url=body.url, content=body.content, domain=body.domain)
    return AnalysisResponse(**result.to_dict())
