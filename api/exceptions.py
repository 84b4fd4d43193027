"""Custom exceptions and error handling."""

from typing import Any

from fastapi import status


class CiteReadyError(Exception):
    """Base exception for CiteReady."""

    def __init__(
        self,
        message: str,
        code: str = "error",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ValidationError(CiteReadyError):
    """Request is missing or has invalid input."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            code="validation_error",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
        )


class AnalysisBlockedError(CiteReadyError):
    """The site's llms.txt or robots.txt does not permit automated analysis.

    ``details`` carries the permission decision so callers can offer the
    manual-content path when ``requires_manual`` is set.
    """

    def __init__(self, url: str, decision: dict[str, Any]):
        super().__init__(
            message=f"Automated analysis of {url} is not permitted: {decision.get('reason')}",
            code="analysis_blocked",
            status_code=status.HTTP_403_FORBIDDEN,
            details={"url": url, "permission": decision},
        )

    @property
    def requires_manual(self) -> bool:
        return bool(self.details.get("permission", {}).get("requires_manual"))


class AnalysisFailedError(CiteReadyError):
    """Analysis could not be completed (e.g. the page could not be fetched)."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            message="Analysis failed",
            code="analysis_failed",
            status_code=status.HTTP_502_BAD_GATEWAY,
            details={"url": url, "reason": reason},
        )
