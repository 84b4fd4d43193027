"""Crawl permission resolution from llms.txt and robots.txt.

Decides whether a page may be fetched and analyzed by consulting the
site's llms.txt first and falling back to robots.txt. Both files are read
with the same line-oriented directive grammar (User-agent, Disallow,
Allow, Crawl-delay).

The gate is binary: only a whole-site Disallow (``/`` or empty path)
blocks, and only a whole-site Allow lifts the block again. There is no
longest-match path precedence. llms.txt has no standard directive syntax;
it is read as if it mirrored robots.txt.

Unreachable files and transport errors fail open, while an explicit
disallow fails closed and asks the caller for manually supplied content.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING
from urllib.parse import urlparse

import httpx
import structlog

if TYPE_CHECKING:
    from citeready.crawler.cache import PermissionCache

logger = structlog.get_logger(__name__)

DEFAULT_USER_AGENT = "CiteReadyBot/1.0"
DEFAULT_CRAWLER_NAME = "citereadybot"
DEFAULT_TIMEOUT_SECONDS = 5.0
DEFAULT_MAX_CRAWL_DELAY_SECONDS = 10.0

# Generic tokens that make a user-agent section apply to us
GENERIC_AGENT_TOKENS = ("ai", "bot")

# Known AI crawler identifiers, only consulted for robots.txt
AI_CRAWLER_TOKENS = (
    "gptbot",
    "chatgpt",
    "ccbot",
    "anthropic",
    "claude-bot",
    "claudebot",
    "perplexitybot",
    "google-extended",
)

FAIL_OPEN_REASON = "no restrictions found or could not check"


class PermissionSource(StrEnum):
    """Which file (if any) produced a permission decision."""

    LLMS_TXT = "llms.txt"
    ROBOTS_TXT = "robots.txt"
    NONE = "none"
    ERROR = "error"


@dataclass(frozen=True)
class PermissionDecision:
    """Outcome of a permission check for one URL."""

    allowed: bool
    reason: str
    source: PermissionSource
    requires_manual: bool = False

    def to_dict(self) -> dict:
        return {
            "allowed": self.allowed,
            "reason": self.reason,
            "source": self.source.value,
            "requires_manual": self.requires_manual,
        }

    @classmethod
    def from_dict(cls, data: dict) -> PermissionDecision:
        return cls(
            allowed=bool(data["allowed"]),
            reason=data["reason"],
            source=PermissionSource(data["source"]),
            requires_manual=bool(data.get("requires_manual", False)),
        )


@dataclass
class DirectiveVerdict:
    """What the directive parser concluded for our crawler."""

    disallowed: bool = False
    crawl_delay: float | None = None  # Highest delay seen in a relevant section
    crawl_delay_exceeded: bool = False

    @property
    def blocked(self) -> bool:
        return self.disallowed or self.crawl_delay_exceeded


def get_origin(url: str) -> str:
    """Return ``scheme://host`` for a URL, assuming https when no scheme is given."""
    url = url.strip()
    if "://" not in url:
        url = f"https://{url}"
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


def _is_relevant_agent(agent: str, tokens: tuple[str, ...]) -> bool:
    if agent == "*":
        return True
    return any(token in agent for token in tokens)


def parse_directives(
    content: str,
    agent_tokens: tuple[str, ...],
    max_crawl_delay: float = DEFAULT_MAX_CRAWL_DELAY_SECONDS,
) -> DirectiveVerdict:
    """
    Evaluate directive file content for the given crawler identity.

    Lines are trimmed and lowercased; comments and blank lines are skipped.
    Each User-agent line opens a new section, which is relevant when its
    agent is ``*`` or contains one of ``agent_tokens``.

    Args:
        content: Raw llms.txt or robots.txt body
        agent_tokens: Lowercase substrings identifying our crawler
        max_crawl_delay: Crawl-delay (seconds) above which we treat the site as blocked

    Returns:
        DirectiveVerdict for the relevant sections
    """
    verdict = DirectiveVerdict()
    relevant = False

    for raw_line in content.splitlines():
        line = raw_line.strip().lower()
        if not line or line.startswith("#"):
            continue
        if ":" not in line:
            continue

        key, _, value = line.partition(":")
        key = key.strip()
        value = value.strip()

        if key == "user-agent":
            relevant = _is_relevant_agent(value, agent_tokens)
            continue

        if not relevant:
            continue

        if key == "disallow":
            if value in ("", "/"):
                verdict.disallowed = True
        elif key == "allow":
            if value in ("", "/"):
                verdict.disallowed = False
        elif key == "crawl-delay":
            try:
                delay = float(value)
            except ValueError:
                continue
            if verdict.crawl_delay is None or delay > verdict.crawl_delay:
                verdict.crawl_delay = delay
            if delay > max_crawl_delay:
                verdict.crawl_delay_exceeded = True

    return verdict


class PermissionResolver:
    """Resolves whether automated analysis of a URL is permitted."""

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        crawler_name: str = DEFAULT_CRAWLER_NAME,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        max_crawl_delay: float = DEFAULT_MAX_CRAWL_DELAY_SECONDS,
        cache: PermissionCache | None = None,
    ):
        self.user_agent = user_agent
        self.crawler_name = crawler_name.lower()
        self.timeout = timeout
        self.max_crawl_delay = max_crawl_delay
        self.cache = cache

    @property
    def llms_agent_tokens(self) -> tuple[str, ...]:
        return (self.crawler_name, *GENERIC_AGENT_TOKENS)

    @property
    def robots_agent_tokens(self) -> tuple[str, ...]:
        return (self.crawler_name, *GENERIC_AGENT_TOKENS, *AI_CRAWLER_TOKENS)

    async def resolve(self, url: str) -> PermissionDecision:
        """
        Decide whether the page at ``url`` may be analyzed.

        llms.txt is consulted first; if it can be read its verdict is final.
        robots.txt is only consulted when llms.txt is unavailable.

        Args:
            url: Page URL or bare domain

        Returns:
            PermissionDecision
        """
        try:
            origin = get_origin(url)
        except ValueError as e:
            logger.warning("permission_invalid_url", url=url, error=str(e))
            return PermissionDecision(
                allowed=True,
                reason=FAIL_OPEN_REASON,
                source=PermissionSource.ERROR,
            )

        if self.cache is not None:
            cached = await self.cache.get(origin)
            if cached is not None:
                return cached

        decision = await self._resolve_origin(origin)

        logger.info(
            "permission_resolved",
            origin=origin,
            allowed=decision.allowed,
            source=decision.source.value,
            reason=decision.reason,
        )

        if self.cache is not None and decision.source in (
            PermissionSource.LLMS_TXT,
            PermissionSource.ROBOTS_TXT,
        ):
            await self.cache.set(origin, decision)

        return decision

    async def _resolve_origin(self, origin: str) -> PermissionDecision:
        transport_failed = False

        try:
            llms_txt = await self._fetch_text(f"{origin}/llms.txt")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("llms_txt_fetch_failed", origin=origin, error=str(e))
            llms_txt = None
            transport_failed = True

        if llms_txt is not None:
            return self._decide(llms_txt, PermissionSource.LLMS_TXT, self.llms_agent_tokens)

        try:
            robots_txt = await self._fetch_text(f"{origin}/robots.txt")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("robots_txt_fetch_failed", origin=origin, error=str(e))
            robots_txt = None
            transport_failed = True

        if robots_txt is not None:
            return self._decide(robots_txt, PermissionSource.ROBOTS_TXT, self.robots_agent_tokens)

        source = PermissionSource.ERROR if transport_failed else PermissionSource.NONE
        logger.warning("permission_fail_open", origin=origin, source=source.value)
        return PermissionDecision(allowed=True, reason=FAIL_OPEN_REASON, source=source)

    def _decide(
        self,
        content: str,
        source: PermissionSource,
        agent_tokens: tuple[str, ...],
    ) -> PermissionDecision:
        verdict = parse_directives(content, agent_tokens, self.max_crawl_delay)

        if verdict.disallowed:
            return PermissionDecision(
                allowed=False,
                reason=f"{source.value} blocks AI crawlers",
                source=source,
                requires_manual=True,
            )
        if verdict.crawl_delay_exceeded:
            return PermissionDecision(
                allowed=False,
                reason=f"{source.value} sets high crawl delay ({verdict.crawl_delay:g}s)",
                source=source,
                requires_manual=True,
            )

        if source == PermissionSource.LLMS_TXT:
            reason = "llms.txt permits crawling"
        else:
            reason = "no crawling restrictions found"
        return PermissionDecision(allowed=True, reason=reason, source=source)

    async def _fetch_text(self, url: str) -> str | None:
        """
        Fetch a plain-text directive file.

        Returns None for non-200 responses and HTML bodies (SPA fallbacks).
        Transport errors propagate to the caller.
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    url,
                    headers={"User-Agent": self.user_agent},
                    follow_redirects=True,
                )
        except httpx.TimeoutException:
            logger.warning("directive_fetch_timeout", url=url, timeout=self.timeout)
            raise

        if response.status_code != 200:
            logger.debug("directive_not_found", url=url, status_code=response.status_code)
            return None

        content_type = response.headers.get("content-type", "")
        if content_type and ("text/" not in content_type or "html" in content_type):
            logger.debug("directive_wrong_content_type", url=url, content_type=content_type)
            return None

        return response.text


async def resolve_permission(
    url: str,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> PermissionDecision:
    """
    Convenience function to check crawl permission for a URL.

    Args:
        url: Page URL or bare domain
        timeout: Per-file fetch timeout in seconds

    Returns:
        PermissionDecision
    """
    resolver = PermissionResolver(timeout=timeout)
    return await resolver.resolve(url)
