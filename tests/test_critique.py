"""
Tests for prompt construction and suggestion parsing.
"""

import pytest

from conftest import FakeModel
from repocritic.critique import REVIEW_FOCUS, build_prompt, critique_file, parse_suggestions


class TestBuildPrompt:
    def test_embeds_file_content(self):
        prompt = build_prompt("const x = 1;")
        assert "const x = 1;" in prompt

    def test_lists_review_dimensions(self):
        prompt = build_prompt("")
        for i, item in enumerate(REVIEW_FOCUS, 1):
            assert f"{i}. {item}" in prompt
        assert len(REVIEW_FOCUS) == 5


class TestParseSuggestions:
    def test_one_suggestion_per_line(self):
        assert parse_suggestions("first\nsecond") == ["first", "second"]

    def test_blank_lines_dropped(self):
        assert parse_suggestions("a\n\n   \n\tb\n") == ["a", "\tb"]

    def test_lines_kept_verbatim(self):
        """Numbering and markdown are not stripped."""
        text = "1. **Memoize** the list\n  - use useMemo"
        assert parse_suggestions(text) == ["1. **Memoize** the list", "  - use useMemo"]

    def test_empty_response(self):
        assert parse_suggestions("") == []


class TestCritiqueFile:
    def test_calls_model_once(self):
        model = FakeModel({}, default="Use const\nAvoid any")
        assert critique_file("let a: any = 1", model) == ["Use const", "Avoid any"]
        assert len(model.prompts) == 1
        assert "let a: any = 1" in model.prompts[0]

    def test_model_errors_propagate(self):
        model = FakeModel({"boom": RuntimeError("quota exceeded")})
        with pytest.raises(RuntimeError, match="quota exceeded"):
            critique_file("boom", model)
