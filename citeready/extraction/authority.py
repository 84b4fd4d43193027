"""Authority and credibility signal extraction.

Outbound links to well-known reference, academic, news and code-hosting
domains, internal link counts, and trust vocabulary (official, verified,
certified...) that answer engines weigh when choosing sources.
"""

import re
from collections import Counter
from dataclasses import dataclass, field
from urllib.parse import urlparse

from citeready.extraction.text import parse_html, visible_text

# Known authority domains (any .edu/.gov host also counts)
AUTHORITY_DOMAINS = [
    "wikipedia.org",
    "github.com",
    "stackoverflow.com",
    "medium.com",
    "harvard.edu",
    "stanford.edu",
    "mit.edu",
    "ieee.org",
    "acm.org",
    "nature.com",
    "science.org",
    "pubmed.ncbi.nlm.nih.gov",
    "techcrunch.com",
    "reuters.com",
    "bloomberg.com",
    "wsj.com",
]

NEWS_DOMAINS = {"techcrunch.com", "reuters.com", "bloomberg.com", "wsj.com"}

SOCIAL_PLATFORMS = ["twitter.com", "x.com", "linkedin.com", "facebook.com", "instagram.com"]

ACADEMIC_DOMAINS = [
    "arxiv.org",
    "pubmed.ncbi.nlm.nih.gov",
    "scholar.google.com",
    "researchgate.net",
    "academia.edu",
    "jstor.org",
]

OFFICIAL_INDICATORS = [
    "verified",
    "official",
    "certified",
    "authentic",
    "badge",
    "accredited",
    "licensed",
    "authorized",
]

INTERNAL_LINK_PREFIXES = ("/", "#", "./")


@dataclass
class AuthorityLink:
    """An outbound link to a known authority domain."""

    domain: str
    url: str
    type: str  # academic, government, encyclopedia, code_repository, news, general_authority

    def to_dict(self) -> dict:
        return {"domain": self.domain, "url": self.url, "type": self.type}


@dataclass
class CredibilitySignals:
    """Trust vocabulary and credibility-bearing outbound links."""

    official_indicators: dict[str, int] = field(default_factory=dict)
    verified_accounts: dict[str, int] = field(default_factory=dict)
    github_links: int = 0
    academic_references: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "official_indicators": self.official_indicators,
            "verified_accounts": self.verified_accounts,
            "github_links": self.github_links,
            "academic_references": self.academic_references,
        }


def get_authority_type(domain: str) -> str:
    """Map an authority domain to its source type."""
    if domain.endswith(".edu"):
        return "academic"
    if domain.endswith(".gov"):
        return "government"
    if "wikipedia" in domain:
        return "encyclopedia"
    if "github" in domain:
        return "code_repository"
    if domain in NEWS_DOMAINS:
        return "news"
    return "general_authority"


def _host(href: str) -> str:
    host = (urlparse(href).hostname or "").lower()
    return host[4:] if host.startswith("www.") else host


def _host_matches(host: str, domain: str) -> bool:
    return host == domain or host.endswith(f".{domain}")


def _outbound_hrefs(content: str) -> list[str]:
    soup = parse_html(content)
    hrefs = []
    for anchor in soup.find_all("a", href=True):
        href = anchor["href"].strip()
        if href.lower().startswith(("http://", "https://", "//")):
            hrefs.append(href)
    return hrefs


def _match_authority_domain(host: str) -> str | None:
    for domain in AUTHORITY_DOMAINS:
        if _host_matches(host, domain):
            return domain
    if host.endswith((".edu", ".gov")):
        return host
    return None


def find_authority_links(content: str) -> list[AuthorityLink]:
    """Find outbound links to known authority domains, in document order."""
    links = []
    for href in _outbound_hrefs(content):
        domain = _match_authority_domain(_host(href))
        if domain:
            links.append(AuthorityLink(domain=domain, url=href, type=get_authority_type(domain)))
    return links


def count_internal_links(content: str) -> int:
    """Count anchors pointing within the page or site (``/``, ``#``, ``./``)."""
    soup = parse_html(content)
    count = 0
    for anchor in soup.find_all("a", href=True):
        href = anchor["href"].strip()
        if href.startswith(INTERNAL_LINK_PREFIXES) and not href.startswith("//"):
            count += 1
    return count


def _count_link_domains(hosts: list[str], domains: list[str]) -> dict[str, int]:
    counts: Counter[str] = Counter()
    for host in hosts:
        for domain in domains:
            if _host_matches(host, domain):
                counts[domain] += 1
                break
    return {domain: counts[domain] for domain in domains if counts[domain]}


def extract_credibility(content: str) -> CredibilitySignals:
    """Count trust vocabulary and credibility-bearing links."""
    signals = CredibilitySignals()

    text = visible_text(parse_html(content))
    for indicator in OFFICIAL_INDICATORS:
        count = len(re.findall(indicator, text, re.IGNORECASE))
        if count:
            signals.official_indicators[indicator] = count

    hosts = [_host(href) for href in _outbound_hrefs(content)]
    signals.verified_accounts = _count_link_domains(hosts, SOCIAL_PLATFORMS)
    signals.academic_references = _count_link_domains(hosts, ACADEMIC_DOMAINS)
    signals.github_links = sum(1 for host in hosts if _host_matches(host, "github.com"))

    return signals
