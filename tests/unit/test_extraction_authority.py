"""Tests for authority and credibility extraction."""

from citeready.extraction.authority import (
    count_internal_links,
    extract_credibility,
    find_authority_links,
    get_authority_type,
)

LINKS_HTML = """
<a href="https://en.wikipedia.org/wiki/Search">wiki</a>
<a href="https://www.cs.stanford.edu/paper">stanford</a>
<a href="https://data.cdc.gov/">cdc</a>
<a href="https://github.com/org/repo">repo</a>
<a href="https://www.reuters.com/article">news</a>
<a href="https://example.com/">other</a>
<a href="/about">about</a>
<a href="#top">top</a>
<a href="./pricing">pricing</a>
<a href="//cdn.example.com/x.js">cdn</a>
"""


class TestGetAuthorityType:
    """Tests for authority classification."""

    def test_types(self) -> None:
        assert get_authority_type("mit.edu") == "academic"
        assert get_authority_type("nasa.gov") == "government"
        assert get_authority_type("wikipedia.org") == "encyclopedia"
        assert get_authority_type("github.com") == "code_repository"
        assert get_authority_type("bloomberg.com") == "news"
        assert get_authority_type("ieee.org") == "general_authority"


class TestFindAuthorityLinks:
    """Tests for outbound authority links."""

    def test_known_and_suffix_domains(self) -> None:
        links = find_authority_links(LINKS_HTML)

        assert [(link.domain, link.type) for link in links] == [
            ("wikipedia.org", "encyclopedia"),
            ("stanford.edu", "academic"),
            ("data.cdc.gov", "government"),
            ("github.com", "code_repository"),
            ("reuters.com", "news"),
        ]
        assert links[0].url == "https://en.wikipedia.org/wiki/Search"

    def test_lookalike_domain_not_matched(self) -> None:
        html = '<a href="https://notwikipedia.org.evil.com/">x</a>'
        assert find_authority_links(html) == []

    def test_no_links(self) -> None:
        assert find_authority_links("<p>No links</p>") == []


class TestCountInternalLinks:
    """Tests for internal link counting."""

    def test_relative_and_fragment_links(self) -> None:
        assert count_internal_links(LINKS_HTML) == 3

    def test_protocol_relative_is_external(self) -> None:
        assert count_internal_links('<a href="//example.com/a">x</a>') == 0


class TestExtractCredibility:
    """Tests for credibility signals."""

    def test_indicators_and_links(self) -> None:
        html = """
        <p>Verified partner. Official documentation. Official since 2010.</p>
        <a href="https://twitter.com/acme">t</a>
        <a href="https://www.linkedin.com/company/acme">l</a>
        <a href="https://github.com/acme">g</a>
        <a href="https://arxiv.org/abs/1234">paper</a>
        """
        credibility = extract_credibility(html)

        assert credibility.official_indicators == {"verified": 1, "official": 2}
        assert credibility.verified_accounts == {"twitter.com": 1, "linkedin.com": 1}
        assert credibility.academic_references == {"arxiv.org": 1}
        assert credibility.github_links == 1

    def test_indicators_ignore_markup(self) -> None:
        html = '<div class="official-badge"></div><p>Plain text</p>'
        assert extract_credibility(html).official_indicators == {}

    def test_empty(self) -> None:
        credibility = extract_credibility("")

        assert credibility.official_indicators == {}
        assert credibility.verified_accounts == {}
        assert credibility.github_links == 0
