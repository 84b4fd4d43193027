"""HTML parsing helpers shared by the extractors."""

import re

from bs4 import BeautifulSoup
from bs4.element import PreformattedString

# Elements whose text is never visible page copy
NON_VISIBLE_TAGS = {"script", "style", "noscript", "template", "head"}


def parse_html(content: str) -> BeautifulSoup:
    """Parse markup (or plain pasted text) into a soup."""
    return BeautifulSoup(content or "", "html.parser")


def visible_text(soup: BeautifulSoup, separator: str = " ") -> str:
    """
    Join the visible text nodes of a document.

    Script, style, comment and doctype nodes are skipped without mutating the soup.
    """
    parts = []
    for node in soup.find_all(string=True):
        if isinstance(node, PreformattedString):
            continue
        if node.parent is not None and node.parent.name in NON_VISIBLE_TAGS:
            continue
        text = node.strip()
        if text:
            parts.append(text)
    return separator.join(parts)


def strip_tags(fragment: str) -> str:
    """Remove tags from a small markup fragment and collapse whitespace."""
    return re.sub(r"\s+", " ", re.sub(r"<[^>]*>", "", fragment)).strip()
