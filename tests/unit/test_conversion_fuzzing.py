#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Property-based fuzzing tests for Markdown to ADF conversion.

This test module uses Hypothesis to generate Markdown inputs and checks the
structural guarantees of the produced documents.

Test Coverage:
- Plain word runs become a single paragraph holding the input verbatim
- Fenced code bodies are carried through unchanged
- Property: Conversion is deterministic
- Property: Output is either a loadable ADF document or an UnsupportedNodeError
- Property: Unmarked text never carries a marks field
"""

import json
import string

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from md2adf import UnsupportedNodeError, from_markdown
from md2adf.adf import json_to_adf

words = st.text(alphabet=string.ascii_letters + string.digits, min_size=1, max_size=12)
plain_paragraphs = st.lists(words, min_size=1, max_size=20).map(" ".join)
code_lines = st.lists(words, min_size=1, max_size=6).map(" = ".join)
code_bodies = st.lists(code_lines, min_size=1, max_size=10).map("\n".join)


def _iter_text_nodes(data: dict):
    for block in data["content"]:
        yield from block["content"]


@pytest.mark.unit
@pytest.mark.fuzzing
class TestConversionFuzzing:
    """Property-based tests for from_markdown using Hypothesis."""

    @given(plain_paragraphs)
    def test_plain_words_become_one_paragraph(self, markdown):
        """Property: Letters, digits and single spaces form one unmarked text node."""
        data = json.loads(from_markdown(markdown))

        assert data["type"] == "doc"
        assert data["version"] == 1
        assert data["content"] == [{"type": "paragraph", "content": [{"type": "text", "text": markdown}]}]

    @given(code_bodies)
    def test_fenced_code_body_preserved(self, body):
        """Property: A fenced body comes back as the code block text."""
        data = json.loads(from_markdown(f"```\n{body}\n```"))

        assert data["content"] == [{"type": "codeBlock", "content": [{"type": "text", "text": body}]}]

    @given(st.text(max_size=200))
    @settings(deadline=None)
    def test_arbitrary_input_converts_or_rejects(self, markdown):
        """Property: Any string yields a valid document or an UnsupportedNodeError."""
        try:
            output = from_markdown(markdown)
        except UnsupportedNodeError as exc:
            assert exc.context in ("document", "paragraph")
            return

        doc = json_to_adf(output)
        assert output == from_markdown(markdown)
        assert len(doc) == len(json.loads(output)["content"])

    @given(st.text(alphabet=string.ascii_letters + " []()<>:/.", max_size=80))
    @settings(deadline=None)
    def test_marks_omitted_or_single_link(self, markdown):
        """Property: Text nodes either omit marks or carry exactly one link mark."""
        try:
            data = json.loads(from_markdown(markdown))
        except UnsupportedNodeError:
            return

        for node in _iter_text_nodes(data):
            assert node["type"] == "text"
            if "marks" in node:
                assert len(node["marks"]) == 1
                assert node["marks"][0]["type"] == "link"
                assert set(node["marks"][0]["attrs"]) == {"href"}
