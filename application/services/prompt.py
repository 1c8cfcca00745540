"""Prompt template used to ask for direct answers over retrieved context."""
from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_TEMPLATE = (
    "Based on the following context, answer the question with a direct and exact answer. "
    "Be concise.\n"
    "\n"
    "Context:\n"
    "{context}\n"
    "\n"
    "Question: {question}\n"
    "\n"
    "Answer (direct answer only):"
)

_QUESTION_PATTERN = re.compile(r"Question: (.+?)\n")
_CONTEXT_PATTERN = re.compile(r"Context:\n(.+?)\n\nQuestion:", re.DOTALL)


@dataclass(frozen=True, slots=True)
class PromptTemplate:
    """Template with literal ``{context}`` and ``{question}`` slots."""

    template: str = DEFAULT_TEMPLATE

    def format(self, context: str, question: str) -> str:
        # Literal first-occurrence substitution; placeholder text inside the
        # context is not escaped and may be picked up by the second replace.
        return self.template.replace("{context}", context, 1).replace("{question}", question, 1)

    @staticmethod
    def parse(prompt_text: str) -> tuple[str, str]:
        """Recover ``(question, context)`` from a formatted prompt.

        A missing marker yields an empty string for that field.
        """

        question_match = _QUESTION_PATTERN.search(prompt_text)
        context_match = _CONTEXT_PATTERN.search(prompt_text)
        question = question_match.group(1) if question_match else ""
        context = context_match.group(1) if context_match else ""
        return question, context


__all__ = ["DEFAULT_TEMPLATE", "PromptTemplate"]
