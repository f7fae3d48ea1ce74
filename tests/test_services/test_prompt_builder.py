# tests/test_services/test_prompt_builder.py
import re

from tonewise.services.prompt_builder import (
    NO_CONTEXT_PLACEHOLDER,
    build_comparison_prompt,
    build_single_analysis_prompt,
)

SINGLE_SECTIONS = [
    "Overall Tone", "Likely Intent", "Potential Concerns", "Confidence Level",
    "Red Flags", "Positive Indicators", "Bottom Line",
]
COMPARISON_SECTIONS = [
    "Pattern Analysis", "Relationship Dynamic", "Consistency Check",
    "Overall Assessment", "Key Insights", "Bottom Line",
]


def _section_order(prompt):
    return re.findall(r"^\*\*(.+?)\*\*:", prompt, re.MULTILINE)


class TestSingleAnalysisPrompt:

    def test_embeds_message_and_context(self):
        prompt = build_single_analysis_prompt("see you at 8", "first date")

        assert 'Message/Interaction: "see you at 8"' in prompt
        assert "Context: first date" in prompt

    def test_context_placeholder_when_absent(self):
        prompt = build_single_analysis_prompt("see you at 8")

        assert f"Context: {NO_CONTEXT_PLACEHOLDER}" in prompt

    def test_sections_in_order(self):
        assert _section_order(build_single_analysis_prompt("hi")) == SINGLE_SECTIONS

    def test_braces_in_user_text_are_kept_verbatim(self):
        prompt = build_single_analysis_prompt("use {curly} braces", "{context}")

        assert '"use {curly} braces"' in prompt
        assert "Context: {context}" in prompt

    def test_deterministic(self):
        assert build_single_analysis_prompt("a", "b") == build_single_analysis_prompt("a", "b")


class TestComparisonPrompt:

    def test_messages_numbered_in_input_order(self):
        prompt = build_comparison_prompt(["hi", "hi there", "sure, see you then"])

        assert re.findall(r'^Message (\d+): "(.*)"$', prompt, re.MULTILINE) == [
            ("1", "hi"), ("2", "hi there"), ("3", "sure, see you then"),
        ]
        assert 'Message 1: "hi"\n\nMessage 2: "hi there"' in prompt

    def test_context_and_placeholder(self):
        assert "Context: group chat" in build_comparison_prompt(["a", "b"], "group chat")
        assert f"Context: {NO_CONTEXT_PLACEHOLDER}" in build_comparison_prompt(["a", "b"])

    def test_sections_in_order(self):
        prompt = build_comparison_prompt(["a", "b"])

        assert _section_order(prompt) == COMPARISON_SECTIONS
        assert "Confidence Level" not in prompt
