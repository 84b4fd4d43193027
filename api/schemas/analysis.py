"""Analysis request and response schemas."""

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

MAX_CONTENT_LENGTH = 5_000_000


class PermissionRequest(BaseModel):
    """Request schema for a permission check."""

    url: str = Field(..., min_length=1, max_length=2048)


class PermissionResponse(BaseModel):
    """Permission decision for a URL."""

    allowed: bool
    reason: str
    source: Literal["llms.txt", "robots.txt", "none", "error"]
    requires_manual: bool = False


class AnalyzeRequest(BaseModel):
    """Request schema for content analysis.

    Supplying ``content`` analyzes it directly and skips the permission
    check (the manual path offered when a site blocks crawlers).
    """

    url: str | None = Field(None, max_length=2048)
    content: str | None = Field(None, max_length=MAX_CONTENT_LENGTH)
    domain: str | None = Field(None, max_length=255)
    scoring_mode: Literal["weighted", "boolean"] | None = None

    @model_validator(mode="after")
    def require_url_or_content(self) -> "AnalyzeRequest":
        if self.content is None and not (self.url and self.url.strip()):
            raise ValueError("Either url or content is required")
        return self


class RecommendationsResponse(BaseModel):
    critical: list[str] = Field(default_factory=list)
    important: list[str] = Field(default_factory=list)
    nice_to_have: list[str] = Field(default_factory=list)


class CitationCandidateResponse(BaseModel):
    source_ref: str
    domain: str
    title: str
    snippet: str
    credibility_signals: dict[str, Any] = Field(default_factory=dict)
    confidence: float
    diversity_bucket: str


class CategoryScoreResponse(BaseModel):
    category: str
    label: str
    bucket: str | None = None
    weight: int
    matched_terms: list[str] = Field(default_factory=list)
    score: int


class AnalysisResponse(BaseModel):
    """Full analysis result."""

    url: str | None = None
    domain: str
    readiness_score: int = Field(..., ge=0, le=100)
    scoring_mode: Literal["weighted", "boolean"]
    signals: dict[str, Any]
    category_scores: list[CategoryScoreResponse]
    recommendations: RecommendationsResponse
    citations: list[CitationCandidateResponse]
    permission: PermissionResponse | None = None
    manual_content: bool = False
    analyzed_at: str
