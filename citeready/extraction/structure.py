"""Content structure signal extraction.

Detects the extractable formats answer engines lift from a page: FAQs,
tables, how-to steps, comparison language, lists and the heading outline.
Every extractor is a pure function of its input and returns an empty
collection when nothing matches.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag
from bs4.element import PreformattedString

from citeready.extraction.schema import parse_json_ld, schema_types
from citeready.extraction.text import parse_html, strip_tags, visible_text

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")

FAQ_SECTION_PATTERNS = [
    r"\bfaqs?\b",
    r"frequently\s+asked\s+questions?",
]

# Elements that hold a question inside an FAQ section
FAQ_QUESTION_TAGS = ["h3", "h4", "h5", "strong", "b"]

ACCORDION_CLASS_TOKENS = ("accordion", "faq", "question")

MAX_ANSWER_LENGTH = 500
MAX_STEP_LENGTH = 200

HOWTO_HEADING_PATTERN = re.compile(r"how\s+to", re.IGNORECASE)

STEP_PATTERN = re.compile(
    r"\bstep\s+\d+\s*[:.)\-]?\s*(.+?)(?=\bstep\s+\d+|[.!?\n]|$)",
    re.IGNORECASE,
)

# Checked in order; the first match decides the table type
TABLE_TYPE_PATTERNS = [
    ("pricing", re.compile(r"price|pricing|cost|currency|\$|€|£", re.IGNORECASE)),
    ("comparison", re.compile(r"\bvs\b|versus|compar", re.IGNORECASE)),
    ("features", re.compile(r"feature|spec", re.IGNORECASE)),
    ("data", re.compile(r"\bdata\b|statistic", re.IGNORECASE)),
]

COMPARISON_PATTERNS = [
    (
        "direct_comparison",
        re.compile(
            r"vs\.|versus|compared to|in comparison|better than|worse than|alternative to",
            re.IGNORECASE,
        ),
    ),
    ("pros_cons", re.compile(r"pros and cons|advantages and disadvantages", re.IGNORECASE)),
    ("competitive", re.compile(r"competitor|competition", re.IGNORECASE)),
    ("versus_format", re.compile(r"\w+\s+vs\s+\w+", re.IGNORECASE)),
]

# More matches than this makes a comparison signal "high"
HIGH_SIGNAL_THRESHOLD = 3


@dataclass
class FAQEntry:
    """A question (and answer, when one can be found) from an FAQ."""

    question: str
    answer: str
    source: str  # schema, heading, accordion

    def to_dict(self) -> dict:
        return {"question": self.question, "answer": self.answer, "source": self.source}


@dataclass
class TableRecord:
    """A table with its cell text and keyword classification."""

    type: str  # pricing, comparison, features, data, general
    rows: list[list[str]] = field(default_factory=list)
    row_count: int = 0
    column_count: int = 0

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "rows": self.rows,
            "row_count": self.row_count,
            "column_count": self.column_count,
        }


@dataclass
class HowToStep:
    text: str
    source: str  # schema, howto_list, step_pattern

    def to_dict(self) -> dict:
        return {"text": self.text, "source": self.source}


@dataclass
class ComparisonSignal:
    """Occurrences of one family of comparison phrasing."""

    type: str
    count: int
    signal_strength: str  # high, medium
    examples: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "count": self.count,
            "signal_strength": self.signal_strength,
            "examples": self.examples,
        }


@dataclass
class ListRecord:
    type: str  # ordered, unordered
    items: list[str] = field(default_factory=list)
    count: int = 0

    def to_dict(self) -> dict:
        return {"type": self.type, "items": self.items, "count": self.count}


@dataclass
class HeadingProfile:
    """Heading counts per level and whether the outline skips levels."""

    counts_by_level: dict[int, int] = field(default_factory=lambda: dict.fromkeys(range(1, 7), 0))
    headings_by_level: dict[int, list[str]] = field(
        default_factory=lambda: {level: [] for level in range(1, 7)}
    )
    hierarchy_valid: bool = True
    has_h1: bool = False
    h1_count: int = 0
    total_headings: int = 0

    def to_dict(self) -> dict:
        return {
            "counts_by_level": {f"h{level}": n for level, n in self.counts_by_level.items()},
            "headings_by_level": {
                f"h{level}": texts for level, texts in self.headings_by_level.items()
            },
            "hierarchy_valid": self.hierarchy_valid,
            "has_h1": self.has_h1,
            "h1_count": self.h1_count,
            "total_headings": self.total_headings,
        }


def _section_tags(heading: Tag) -> Iterator[Tag]:
    """Yield the tags following a heading up to the next heading of the same or higher rank."""
    level = int(heading.name[1])
    for tag in heading.find_all_next(True):
        if tag.name in HEADING_TAGS and int(tag.name[1]) <= level:
            return
        yield tag


def _answer_after(question: Tag) -> str:
    parts: list[str] = []
    for sibling in question.next_siblings:
        if isinstance(sibling, Tag):
            if sibling.name in HEADING_TAGS or sibling.name in FAQ_QUESTION_TAGS:
                break
            text = sibling.get_text(" ", strip=True)
        elif isinstance(sibling, PreformattedString):
            continue
        else:
            text = sibling.strip()
        if text:
            parts.append(text)
        if sum(len(p) for p in parts) >= MAX_ANSWER_LENGTH:
            break

    # <p><strong>Question?</strong></p><p>Answer</p>
    if not parts and question.parent is not None and question.parent.name == "p":
        following = question.parent.find_next_sibling()
        if following is not None and following.name not in HEADING_TAGS:
            parts.append(following.get_text(" ", strip=True))

    return " ".join(parts)[:MAX_ANSWER_LENGTH]


def _schema_answer(entity: dict) -> str:
    answer = entity.get("text")
    if not answer:
        accepted = entity.get("acceptedAnswer")
        if isinstance(accepted, list):
            accepted = accepted[0] if accepted else None
        if isinstance(accepted, dict):
            answer = accepted.get("text")
    return strip_tags(answer) if isinstance(answer, str) else ""


def _faqs_from_schema(content: str) -> list[FAQEntry]:
    faqs = []
    for item in parse_json_ld(content, warn=False):
        if "FAQPage" not in schema_types(item):
            continue
        entities = item.get("mainEntity") or []
        if isinstance(entities, dict):
            entities = [entities]
        for entity in entities:
            if not isinstance(entity, dict):
                continue
            question = entity.get("name")
            if isinstance(question, str) and question.strip():
                faqs.append(
                    FAQEntry(
                        question=question.strip(),
                        answer=_schema_answer(entity),
                        source="schema",
                    )
                )
    return faqs


def _faqs_from_headings(soup: BeautifulSoup) -> list[FAQEntry]:
    faqs = []
    for heading in soup.find_all(["h2", "h3", "h4"]):
        title = heading.get_text(" ", strip=True)
        if not any(re.search(p, title, re.IGNORECASE) for p in FAQ_SECTION_PATTERNS):
            continue

        for tag in _section_tags(heading):
            if tag.name not in FAQ_QUESTION_TAGS:
                continue
            # A <strong> inside a question heading is the same question
            if tag.find_parent(FAQ_QUESTION_TAGS) is not None:
                continue
            question = tag.get_text(" ", strip=True)
            if "?" not in question:
                continue
            faqs.append(FAQEntry(question=question, answer=_answer_after(tag), source="heading"))
    return faqs


def _has_accordion_class(tag: Tag) -> bool:
    classes = tag.get("class") or []
    joined = " ".join(classes).lower()
    return any(token in joined for token in ACCORDION_CLASS_TOKENS)


def _faqs_from_accordions(soup: BeautifulSoup) -> list[FAQEntry]:
    faqs = []
    for block in soup.find_all(_has_accordion_class):
        # Only the outermost accordion container is read
        if block.find_parent(_has_accordion_class) is not None:
            continue
        strings = list(block.stripped_strings)
        for i, text in enumerate(strings):
            if not text.endswith("?"):
                continue
            answer = ""
            if i + 1 < len(strings) and not strings[i + 1].endswith("?"):
                answer = strings[i + 1][:MAX_ANSWER_LENGTH]
            faqs.append(FAQEntry(question=text, answer=answer, source="accordion"))
    return faqs


def extract_faqs(content: str) -> list[FAQEntry]:
    """
    Extract FAQ entries using three independent strategies.

    Results are the union of FAQPage structured data, question elements
    under FAQ-titled headings, and accordion-styled blocks. The same
    question found by two strategies appears twice.

    Args:
        content: HTML or plain text

    Returns:
        List of FAQEntry in strategy order
    """
    faqs = _faqs_from_schema(content)
    soup = parse_html(content)
    faqs.extend(_faqs_from_headings(soup))
    faqs.extend(_faqs_from_accordions(soup))
    return faqs


def classify_table(text: str) -> str:
    """Classify a table by the keywords in its text."""
    for table_type, pattern in TABLE_TYPE_PATTERNS:
        if pattern.search(text):
            return table_type
    return "general"


def extract_tables(content: str) -> list[TableRecord]:
    """Extract every table with its rows and keyword classification."""
    soup = parse_html(content)
    tables = []

    for table in soup.find_all("table"):
        rows = []
        for tr in table.find_all("tr"):
            row = [cell.get_text(" ", strip=True) for cell in tr.find_all(["td", "th"])]
            if row:
                rows.append(row)

        tables.append(
            TableRecord(
                type=classify_table(table.get_text(" ", strip=True)),
                rows=rows,
                row_count=len(rows),
                column_count=max((len(r) for r in rows), default=0),
            )
        )

    return tables


def _schema_step_texts(steps: object) -> Iterator[str]:
    if isinstance(steps, str):
        if steps.strip():
            yield steps.strip()
    elif isinstance(steps, list):
        for step in steps:
            yield from _schema_step_texts(step)
    elif isinstance(steps, dict):
        if "itemListElement" in steps:
            # HowToSection
            yield from _schema_step_texts(steps["itemListElement"])
            return
        text = steps.get("name") or steps.get("text")
        if isinstance(text, str) and text.strip():
            yield strip_tags(text)


def extract_howto_steps(content: str) -> list[HowToStep]:
    """
    Extract how-to steps using three independent strategies.

    HowTo structured data, ordered-list items under "how to" headings and
    inline "Step N" phrases are unioned without de-duplication.
    """
    steps = []

    for item in parse_json_ld(content, warn=False):
        if "HowTo" in schema_types(item):
            for text in _schema_step_texts(item.get("step")):
                steps.append(HowToStep(text=text[:MAX_STEP_LENGTH], source="schema"))

    soup = parse_html(content)
    for heading in soup.find_all(["h2", "h3", "h4"]):
        if not HOWTO_HEADING_PATTERN.search(heading.get_text(" ", strip=True)):
            continue
        for tag in _section_tags(heading):
            if tag.name == "li" and tag.parent is not None and tag.parent.name == "ol":
                text = tag.get_text(" ", strip=True)
                if text:
                    steps.append(HowToStep(text=text[:MAX_STEP_LENGTH], source="howto_list"))

    for match in STEP_PATTERN.finditer(visible_text(soup)):
        text = match.group(1).strip()
        if text:
            steps.append(HowToStep(text=text[:MAX_STEP_LENGTH], source="step_pattern"))

    return steps


def extract_comparisons(content: str) -> list[ComparisonSignal]:
    """Count comparison phrasing per pattern family in the visible text."""
    text = visible_text(parse_html(content))
    comparisons = []

    for comparison_type, pattern in COMPARISON_PATTERNS:
        matches = [m.group(0) for m in pattern.finditer(text)]
        if not matches:
            continue
        comparisons.append(
            ComparisonSignal(
                type=comparison_type,
                count=len(matches),
                signal_strength="high" if len(matches) > HIGH_SIGNAL_THRESHOLD else "medium",
                examples=matches[:3],
            )
        )

    return comparisons


def extract_lists(content: str) -> list[ListRecord]:
    """Extract ordered and unordered lists with their item text."""
    soup = parse_html(content)
    lists = []

    for list_tag in soup.find_all(["ol", "ul"]):
        items = [
            li.get_text(" ", strip=True) for li in list_tag.find_all("li", recursive=False)
        ]
        lists.append(
            ListRecord(
                type="ordered" if list_tag.name == "ol" else "unordered",
                items=items,
                count=len(items),
            )
        )

    return lists


def analyze_headings(content: str) -> HeadingProfile:
    """
    Profile the heading outline.

    The hierarchy is valid when, walking the levels that are present from
    H1 down, no level is more than one step deeper than the previous
    present level (H1 + H3 without H2 is invalid).
    """
    soup = parse_html(content)
    profile = HeadingProfile()

    for tag in soup.find_all(list(HEADING_TAGS)):
        level = int(tag.name[1])
        profile.counts_by_level[level] += 1
        profile.headings_by_level[level].append(tag.get_text(" ", strip=True))

    profile.h1_count = profile.counts_by_level[1]
    profile.has_h1 = profile.h1_count > 0
    profile.total_headings = sum(profile.counts_by_level.values())

    present = [level for level, count in profile.counts_by_level.items() if count > 0]
    profile.hierarchy_valid = all(
        current <= previous + 1 for previous, current in zip(present, present[1:], strict=False)
    )

    return profile
