"""Use case that answers a question over the ingested repository."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from application.services.answer_generator import AnswerGenerator
from application.services.keyword_retriever import KeywordRetriever
from application.services.prompt import PromptTemplate

logger = logging.getLogger(__name__)


def answer_question(
    question: str,
    *,
    retriever: KeywordRetriever,
    generator: AnswerGenerator,
    prompt: PromptTemplate | None = None,
) -> str:
    """Retrieve context, build the prompt and answer it.

    Always returns a string: failures in any stage are reported as
    ``"Error: <message>"``.
    """

    template = prompt or PromptTemplate()
    try:
        context = retriever.invoke(question)
        prompt_text = template.format(context=context, question=question)
        return generator.invoke(prompt_text)
    except Exception as exc:
        logger.exception("Answering %r failed.", question)
        return f"Error: {exc}"


@dataclass(slots=True)
class QAChain:
    """Bundle of the pipeline stages exposing a single ``invoke`` entry point."""

    retriever: KeywordRetriever
    generator: AnswerGenerator
    prompt: PromptTemplate = field(default_factory=PromptTemplate)

    def invoke(self, question: str) -> str:
        return answer_question(question, retriever=self.retriever, generator=self.generator, prompt=self.prompt)


__all__ = ["answer_question", "QAChain"]
