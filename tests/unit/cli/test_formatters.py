"""Tests for CLI output formatting."""

import json

import yaml

from gofpatterns.cli.formatters import (
    format_demo_details,
    format_demos_list,
    format_output,
    format_results_text,
)

DEMOS = {
    "demos": [
        {"name": "adapter", "category": "structural", "description": "Plugs", "intent": "Fit"},
        {"name": "strategy", "category": "behavioural", "description": "Sorting", "intent": ""},
    ]
}

RESULTS = {
    "results": [
        {"name": "singleton", "category": "creational", "lines": ["one", "two"]},
        {"name": "strategy", "category": "behavioural", "lines": ["🔌x"]},
    ]
}


class TestFormatOutput:
    """Test cases for format_output dispatch."""

    def test_json_keeps_unicode(self):
        text = format_output(RESULTS, "json")

        assert json.loads(text) == RESULTS
        assert "🔌" in text

    def test_yaml_preserves_key_order(self):
        text = format_output(DEMOS, "yaml")

        assert yaml.safe_load(text) == DEMOS
        assert text.index("name:") < text.index("category:")

    def test_table_contains_rows(self):
        text = format_output(DEMOS, "table")

        assert "adapter" in text
        assert "behavioural" in text
        assert "Name" in text

    def test_results_table(self):
        text = format_output(RESULTS, "table")
        assert "singleton" in text
        assert "two" in text

    def test_unknown_payload_falls_back_to_json(self):
        assert json.loads(format_output({"other": 1}, "text")) == {"other": 1}
        assert json.loads(format_output({"other": 1}, "table")) == {"other": 1}

    def test_empty_collections(self):
        assert format_output({"demos": []}, "text") == "No demos found."
        assert format_output({"demos": []}, "table") == "No demos found."
        assert format_output({"results": []}, "table") == "No demos run."


class TestTextFormatting:
    """Test cases for plain-text rendering."""

    def test_demos_list_aligned(self):
        lines = format_demos_list(DEMOS["demos"]).splitlines()

        assert lines[0].startswith("adapter   structural   Plugs")
        assert lines[1].startswith("strategy  behavioural  Sorting")

    def test_demo_details(self):
        text = format_demo_details(DEMOS["demos"][0])

        assert "Name:        adapter" in text
        assert "Intent:      Fit" in text

    def test_single_result_has_no_header(self):
        assert format_results_text(RESULTS["results"][:1]) == "one\ntwo"

    def test_multiple_results_have_headers(self):
        text = format_results_text(RESULTS["results"])

        assert text == (
            "=== singleton (creational) ===\none\ntwo\n\n"
            "=== strategy (behavioural) ===\n🔌x"
        )
