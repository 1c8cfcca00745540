"""Keyword match-count retriever over an in-memory chunk store."""
from __future__ import annotations

import logging

from domain.entities import ChunkStore, ScoredChunk

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 6
_MIN_KEYWORD_LENGTH = 3
_PREVIEW_CHARS = 80


class KeywordRetriever:
    """Rank chunks by how often the question keywords occur in them."""

    def __init__(self, store: ChunkStore, top_k: int = DEFAULT_TOP_K) -> None:
        if top_k < 1:
            raise ValueError(f"top_k must be positive, got {top_k}")
        self._store = store
        self._top_k = top_k

    @property
    def top_k(self) -> int:
        return self._top_k

    @property
    def store(self) -> ChunkStore:
        return self._store

    def invoke(self, question: str) -> str:
        """Return the contents of the top-K chunks joined by blank lines."""

        context = "\n\n".join(scored.chunk.content for scored in self.retrieve(question))
        logger.debug("Retrieved context (%d chars)", len(context))
        return context

    def retrieve(self, question: str) -> list[ScoredChunk]:
        keywords = self.extract_keywords(question)
        logger.debug("Question %r -> keywords %s", question, keywords)

        scored = [ScoredChunk(chunk=chunk, score=self.score(keywords, chunk.content)) for chunk in self._store]
        # sorted() is stable, so ties keep store order.
        ranked = sorted(scored, key=lambda item: item.score, reverse=True)[: self._top_k]
        if logger.isEnabledFor(logging.DEBUG):
            for position, item in enumerate(ranked, start=1):
                preview = item.chunk.content[:_PREVIEW_CHARS].replace("\n", " ")
                logger.debug("%d. score=%d %r", position, item.score, preview)
        return ranked

    @staticmethod
    def extract_keywords(question: str) -> list[str]:
        return [token for token in question.lower().split() if len(token) >= _MIN_KEYWORD_LENGTH]

    @staticmethod
    def score(keywords: list[str], content: str) -> int:
        # Literal, non-overlapping counts; tokens such as "c++" are not patterns.
        content_lower = content.lower()
        return sum(content_lower.count(keyword) for keyword in keywords)


__all__ = ["KeywordRetriever", "DEFAULT_TOP_K"]
