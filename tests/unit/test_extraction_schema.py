"""Tests for JSON-LD structured data extraction."""

import json

from citeready.extraction.schema import extract_structured_data, parse_json_ld, schema_types


def _json_ld(data: object) -> str:
    return f'<script type="application/ld+json">{json.dumps(data)}</script>'


class TestSchemaTypes:
    """Tests for @type normalization."""

    def test_string_type(self) -> None:
        assert schema_types({"@type": "Product"}) == ["Product"]

    def test_list_type(self) -> None:
        assert schema_types({"@type": ["Product", "Thing"]}) == ["Product", "Thing"]

    def test_missing_type(self) -> None:
        assert schema_types({"name": "x"}) == []


class TestParseJsonLd:
    """Tests for JSON-LD block parsing."""

    def test_graph_is_flattened(self) -> None:
        html = _json_ld(
            {
                "@context": "https://schema.org",
                "@graph": [
                    {"@type": "Organization", "name": "Acme"},
                    {"@type": "WebPage", "name": "Home"},
                ],
            }
        )
        assert [item["@type"] for item in parse_json_ld(html)] == ["Organization", "WebPage"]

    def test_top_level_array(self) -> None:
        html = _json_ld([{"@type": "Article"}, {"@type": "Person", "name": "Jo"}])
        assert len(parse_json_ld(html)) == 2

    def test_malformed_block_skipped(self) -> None:
        html = (
            '<script type="application/ld+json">{not json</script>'
            + _json_ld({"@type": "Article"})
        )
        items = parse_json_ld(html)

        assert len(items) == 1
        assert items[0]["@type"] == "Article"

    def test_no_json_ld(self) -> None:
        assert parse_json_ld("<p>Hello</p>") == []

    def test_result_can_be_read_twice(self) -> None:
        items = parse_json_ld(_json_ld({"@type": "FAQPage"}))

        assert isinstance(items, list)
        assert [item["@type"] for item in items] == ["FAQPage"]
        assert [item["@type"] for item in items] == ["FAQPage"]


class TestExtractStructuredData:
    """Tests for structured data summaries."""

    def test_product_flags(self) -> None:
        html = _json_ld(
            {
                "@type": "Product",
                "name": "Widget",
                "aggregateRating": {"@type": "AggregateRating", "ratingValue": "4.5"},
                "review": [{"@type": "Review"}],
            }
        )
        records = extract_structured_data(html)

        assert len(records) == 1
        assert records[0].type == "Product"
        assert records[0].has_product is True
        assert records[0].has_rating is True
        assert records[0].has_reviews is True
        assert records[0].has_faq is False

    def test_type_flags(self) -> None:
        html = _json_ld(
            {
                "@graph": [
                    {"@type": "Organization"},
                    {"@type": "BreadcrumbList"},
                    {"@type": "FAQPage"},
                    {"@type": "HowTo"},
                ]
            }
        )
        records = extract_structured_data(html)

        assert [r.type for r in records] == ["Organization", "BreadcrumbList", "FAQPage", "HowTo"]
        assert records[0].has_organization is True
        assert records[1].has_breadcrumb is True
        assert records[2].has_faq is True
        assert records[3].has_howto is True

    def test_multiple_types_joined(self) -> None:
        records = extract_structured_data(_json_ld({"@type": ["Product", "Thing"]}))
        assert records[0].type == "Product, Thing"
