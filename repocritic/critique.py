"""
Per-file critique: prompt construction and response parsing.
"""

from typing import List

from .llm import CompletionModel

REVIEW_FOCUS = [
    "Performance optimizations",
    "Code organization",
    "Best practices",
    "Potential bugs",
    "Security concerns",
]


def build_prompt(file_content: str) -> str:
    """Build the review prompt for one source file."""
    focus = "\n".join(f"  {i}. {item}" for i, item in enumerate(REVIEW_FOCUS, 1))
    return (
        "Analyze this frontend code for performance optimizations and best practices, "
        "provide scenarios where given code might be a problem, and provide its fixes. "
        "Provide specific suggestions for improvement:\n"
        "\n"
        f"  {file_content}\n"
        "\n"
        "  Focus on:\n"
        f"{focus}"
    )


def parse_suggestions(text: str) -> List[str]:
    """Split a model response into one suggestion per non-blank line."""
    return [line for line in text.splitlines() if line.strip()]


def critique_file(file_content: str, model: CompletionModel) -> List[str]:
    """
    Ask the model to review a file and return its suggestions.

    Args:
        file_content: Raw source text
        model: Completion model

    Returns:
        Suggestion lines in the order the model produced them
    """
    response = model.generate(build_prompt(file_content))
    return parse_suggestions(response)
