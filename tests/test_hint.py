"""Tests for the heading hint tree."""

from mdscripts.hint import render_hint
from mdscripts.parser.markdown import parse_document


class TestRenderHint:
    def test_tree(self, sample_markdown):
        hint = render_hint(parse_document(sample_markdown).roots)
        assert hint == (
            "Project       Project tasks.\n"
            "├── Build     Build the project.\n"
            "│   └── Test  Run the tests.\n"
            "└── Notes\n"
            "\n"
            "Other\n"
        )

    def test_skips_headings_without_code(self, sample_markdown):
        hint = render_hint(parse_document(sample_markdown).roots)
        assert "Deploy" not in hint

    def test_all_languages_shows_more(self, sample_markdown):
        hint = render_hint(parse_document(sample_markdown, all_languages=True).roots)
        assert "├── Deploy" in hint

    def test_verbose(self, sample_markdown):
        hint = render_hint(parse_document(sample_markdown).roots, verbose=True)
        lines = hint.splitlines()
        test_index = next(i for i, line in enumerate(lines) if "└── Test" in line)
        assert lines[test_index + 1] == "│             env: A=2 B=3"
        assert lines[test_index + 2] == '│             sh: echo "test A=$A B=$B"'
        assert lines[test_index + 3] == "│             python: import sys ..."
        assert "env: A=1 STAGE=dev" in hint

    def test_empty(self):
        assert render_hint(parse_document("# Nothing\n\nJust text.\n").roots) == ""

    def test_alignment_across_trees(self):
        text = "# A\n\nfirst\n\n```sh\ntrue\n```\n# Longer heading\n\nsecond\n\n```sh\ntrue\n```\n"
        lines = render_hint(parse_document(text).roots).splitlines()
        assert lines[0].index("first") == lines[2].index("second")
