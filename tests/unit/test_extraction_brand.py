"""Tests for brand mention and entity extraction."""

import json

from citeready.extraction.brand import (
    brand_label,
    count_brand_mentions,
    extract_entities,
)


class TestBrandLabel:
    """Tests for brand label derivation."""

    def test_from_url(self) -> None:
        assert brand_label("https://www.acme-tools.co.uk/x") == "acme-tools"

    def test_from_domain(self) -> None:
        assert brand_label("www.Acme.com") == "acme"
        assert brand_label("acme.io") == "acme"

    def test_empty(self) -> None:
        assert brand_label("") == ""


class TestCountBrandMentions:
    """Tests for brand mention counting."""

    def test_whole_word_matches(self) -> None:
        content = (
            "<title>Acme Tools</title><h1>Welcome to Acme</h1>"
            "<p>acme makes acmes. Acme!</p>"
        )
        mentions = count_brand_mentions(content, "acme.com")

        assert mentions.brand == "acme"
        assert mentions.total == 4
        assert mentions.in_title is True
        assert mentions.in_h1 is True
        assert mentions.density == mentions.total / (len(content) / 1000)
        assert len(mentions.locations) == 4

    def test_not_in_title_or_h1(self) -> None:
        mentions = count_brand_mentions("<title>Home</title><p>Acme rocks</p>", "acme.com")

        assert mentions.total == 1
        assert mentions.in_title is False
        assert mentions.in_h1 is False

    def test_regex_characters_matched_literally(self) -> None:
        mentions = count_brand_mentions("I love c++ and c. Also cxx.", "c++.dev")

        assert mentions.brand == "c++"
        assert mentions.total == 1

    def test_no_domain(self) -> None:
        mentions = count_brand_mentions("Acme", "")

        assert mentions.total == 0
        assert mentions.density == 0.0


class TestExtractEntities:
    """Tests for entity extraction."""

    def test_schema_entities_first(self) -> None:
        data = {
            "@type": "Organization",
            "name": "Acme Corp",
            "founder": {"@type": "Person", "name": "Jane Doe"},
        }
        html = (
            f'<script type="application/ld+json">{json.dumps(data)}</script>'
            "<p>New York is big. New York is old. New York is here. Los Angeles is far.</p>"
        )
        signals = extract_entities(html)

        assert [(e.name, e.type, e.confidence) for e in signals.entities] == [
            ("Acme Corp", "organization", 0.9),
            ("Jane Doe", "person", 0.8),
            ("New York", "phrase", 0.5),
        ]
        assert signals.entities[2].count == 3

    def test_phrases_need_more_than_two_occurrences(self) -> None:
        signals = extract_entities("<p>Open Source is nice. Open Source is free.</p>")
        assert signals.entities == []

    def test_brand_density_with_domain(self) -> None:
        signals = extract_entities("<p>Acme builds tools.</p>", domain="acme.com")
        assert signals.brand_density > 0
