"""Tests for citation and freshness extraction."""

from citeready.extraction.references import extract_citations, extract_freshness


class TestExtractCitations:
    """Tests for in-text citation patterns."""

    def test_all_citation_styles(self) -> None:
        content = (
            "Water boils at 100C [1]. (Smith, 2020) "
            "<cite>Nature <b>Journal</b></cite>\n"
            "Source: CDC\n"
            "According to NASA\n"
        )
        citations = extract_citations(content)

        assert [(c.type, c.text) for c in citations] == [
            ("numbered", "1"),
            ("parenthetical", "Smith, 2020"),
            ("cite_tag", "Nature Journal"),
            ("source_ref", "CDC"),
            ("attribution", "NASA"),
        ]
        assert citations[0].position == content.index("[1]")

    def test_grouped_by_pattern(self) -> None:
        citations = extract_citations("First [2], then [1].")

        assert [c.text for c in citations] == ["2", "1"]
        assert all(c.type == "numbered" for c in citations)

    def test_no_citations(self) -> None:
        assert extract_citations("Nothing cited here.") == []


class TestExtractFreshness:
    """Tests for freshness markers."""

    def test_visible_labels(self) -> None:
        content = (
            "<p>Last updated: March 3, 2024</p>"
            '<time datetime="2024-01-15">Jan 15</time>'
        )
        freshness = extract_freshness(content)

        assert freshness.last_modified.found is True
        assert freshness.last_modified.value == "March 3, 2024"
        assert freshness.last_modified.pattern == "last_modified_label"
        assert freshness.publish_date.value == "2024-01-15"
        assert freshness.publish_date.pattern == "time_tag"
        assert freshness.update_indicators == {"updated": 1}
        assert freshness.update_score == 1

    def test_structured_data_dates(self) -> None:
        content = '{"dateModified": "2024-05-01", "datePublished": "2023-01-01"}'
        freshness = extract_freshness(content)

        assert freshness.last_modified.value == "2024-05-01"
        assert freshness.last_modified.pattern == "date_modified"
        assert freshness.publish_date.value == "2023-01-01"
        assert freshness.publish_date.pattern == "date_published"

    def test_label_takes_priority_over_schema(self) -> None:
        content = 'Last modified: yesterday\n{"dateModified": "2024-05-01"}'
        assert extract_freshness(content).last_modified.value == "yesterday"

    def test_updated_label_without_on(self) -> None:
        freshness = extract_freshness("<p>Updated March 5, 2024</p>")

        assert freshness.last_modified.found is True
        assert freshness.last_modified.value == "March 5, 2024"
        assert freshness.last_modified.pattern == "updated_on"

    def test_updated_on_label(self) -> None:
        freshness = extract_freshness("<p>Updated on: June 1, 2024</p>")

        assert freshness.last_modified.value == "June 1, 2024"
        assert freshness.last_modified.pattern == "updated_on"

    def test_update_vocabulary_counts(self) -> None:
        freshness = extract_freshness("The latest version. Revised and updated. Latest!")

        assert freshness.update_indicators["latest"] == 2
        assert freshness.update_indicators["version"] == 1
        assert freshness.update_score == 5

    def test_empty_content(self) -> None:
        freshness = extract_freshness("")

        assert freshness.last_modified.found is False
        assert freshness.publish_date.found is False
        assert freshness.update_score == 0
