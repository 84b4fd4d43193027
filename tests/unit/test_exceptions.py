"""Tests for application exceptions."""

from api.exceptions import (
    AnalysisBlockedError,
    AnalysisFailedError,
    CiteReadyError,
    ValidationError,
)


class TestCiteReadyError:
    """Tests for the base exception."""

    def test_defaults(self) -> None:
        error = CiteReadyError("boom")

        assert error.message == "boom"
        assert error.code == "error"
        assert error.status_code == 500
        assert error.details == {}
        assert str(error) == "boom"


class TestValidationError:
    """Tests for ValidationError."""

    def test_with_field(self) -> None:
        error = ValidationError("Either url or content is required", field="url")

        assert error.status_code == 422
        assert error.code == "validation_error"
        assert error.details == {"field": "url"}

    def test_without_field(self) -> None:
        assert ValidationError("bad").details == {}


class TestAnalysisBlockedError:
    """Tests for AnalysisBlockedError."""

    def test_carries_permission_decision(self) -> None:
        decision = {
            "allowed": False,
            "reason": "robots.txt blocks AI crawlers",
            "source": "robots.txt",
            "requires_manual": True,
        }
        error = AnalysisBlockedError("https://example.com", decision)

        assert isinstance(error, CiteReadyError)
        assert error.status_code == 403
        assert error.code == "analysis_blocked"
        assert error.details["url"] == "https://example.com"
        assert error.details["permission"] == decision
        assert error.requires_manual is True
        assert "robots.txt blocks AI crawlers" in error.message


class TestAnalysisFailedError:
    """Tests for AnalysisFailedError."""

    def test_reason_in_details(self) -> None:
        error = AnalysisFailedError("https://example.com", "Request timed out")

        assert error.status_code == 502
        assert error.message == "Analysis failed"
        assert error.details == {"url": "https://example.com", "reason": "Request timed out"}
