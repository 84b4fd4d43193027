"""Page content fetching.

The analysis core only needs page markup; where it comes from is the
caller's concern. PageFetcher is that seam, and HttpPageFetcher is the
default httpx implementation with a bounded retry on timeouts.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import UTC, datetime

import httpx
import structlog

logger = structlog.get_logger(__name__)

DEFAULT_USER_AGENT = "CiteReadyBot/1.0"


@dataclass
class FetchResult:
    """Result of fetching a page."""

    url: str
    final_url: str  # After redirects
    status_code: int
    content_type: str | None
    html: str | None
    error: str | None
    fetch_time_ms: int
    fetched_at: datetime

    @property
    def success(self) -> bool:
        return self.status_code == 200 and self.html is not None


class PageFetcher(ABC):
    """Source of page markup for analysis."""

    @abstractmethod
    async def fetch(self, url: str) -> FetchResult:
        """Fetch one page."""
        ...


class HttpPageFetcher(PageFetcher):
    """Fetches pages over HTTP with httpx."""

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 15.0,
        max_retries: int = 1,
        retry_delay: float = 1.0,
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch a page, retrying timeouts and transport errors.

        Args:
            url: Page URL

        Returns:
            FetchResult; ``html`` is only set for 200 responses with an HTML
            or plain-text content type
        """
        start_time = datetime.now(UTC)
        error = None

        for attempt in range(self.max_retries + 1):
            try:
                async with httpx.AsyncClient(
                    timeout=self.timeout,
                    follow_redirects=True,
                    max_redirects=5,
                ) as client:
                    response = await client.get(
                        url,
                        headers={
                            "User-Agent": self.user_agent,
                            "Accept": "text/html,application/xhtml+xml,text/plain;q=0.9,*/*;q=0.8",
                        },
                    )

                fetch_time = int((datetime.now(UTC) - start_time).total_seconds() * 1000)
                content_type = response.headers.get("content-type", "")

                html = None
                error = None
                if response.status_code != 200:
                    error = f"HTTP error: {response.status_code}"
                elif "html" in content_type.lower() or "text/plain" in content_type.lower():
                    html = response.text
                else:
                    error = f"Unsupported content type: {content_type or 'unknown'}"

                return FetchResult(
                    url=url,
                    final_url=str(response.url),
                    status_code=response.status_code,
                    content_type=content_type,
                    html=html,
                    error=error,
                    fetch_time_ms=fetch_time,
                    fetched_at=start_time,
                )

            except httpx.TimeoutException:
                error = "Request timed out"
                if attempt < self.max_retries:
                    logger.warning("page_fetch_timeout_retry", url=url, attempt=attempt + 1)
                    await asyncio.sleep(self.retry_delay * (attempt + 1))
                    continue

            except (httpx.HTTPError, httpx.InvalidURL) as e:
                error = str(e) or type(e).__name__
                if attempt < self.max_retries:
                    logger.warning(
                        "page_fetch_error_retry",
                        url=url,
                        error=error,
                        attempt=attempt + 1,
                    )
                    await asyncio.sleep(self.retry_delay * (attempt + 1))
                    continue

        fetch_time = int((datetime.now(UTC) - start_time).total_seconds() * 1000)
        return FetchResult(
            url=url,
            final_url=url,
            status_code=0,
            content_type=None,
            html=None,
            error=error,
            fetch_time_ms=fetch_time,
            fetched_at=start_time,
        )
