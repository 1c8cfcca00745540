"""Chunk splitter that recursively splits on a list of separators."""
from __future__ import annotations

import logging
from typing import Sequence

from domain.entities import Chunk, Document
from domain.interfaces import TextSplitter

logger = logging.getLogger(__name__)

DEFAULT_SEPARATORS = ("\n\n", "\n", " ", "")

Span = tuple[int, int]


class RecursiveCharacterSplitter(TextSplitter):
    """Split text on paragraphs, then lines, then words, then characters.

    Pieces are merged back together up to ``chunk_size`` characters and
    consecutive chunks share up to ``chunk_overlap`` characters. Separators
    stay attached to the piece that follows them, so every chunk is an exact
    (whitespace-trimmed) slice of the source text.
    """

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        separators: Sequence[str] = DEFAULT_SEPARATORS,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if chunk_overlap < 0 or chunk_overlap >= chunk_size:
            raise ValueError(f"chunk_overlap ({chunk_overlap}) must be smaller than chunk_size ({chunk_size})")
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.separators = tuple(separators)

    def split(self, document: Document) -> list[Chunk]:
        text = document.content
        chunks: list[Chunk] = []
        for start, end in self.split_spans(text):
            first_line = text.count("\n", 0, start) + 1
            metadata = dict(document.metadata)
            metadata["loc"] = {"lines": {"from": first_line, "to": first_line + text.count("\n", start, end)}}
            chunks.append(Chunk(content=text[start:end], metadata=metadata))
        return chunks

    def split_text(self, text: str) -> list[str]:
        return [text[start:end] for start, end in self.split_spans(text)]

    def split_spans(self, text: str) -> list[Span]:
        """Return ``(start, end)`` offsets of each chunk within ``text``."""

        spans: list[Span] = []
        for start, end in self._split(text, 0, len(text), self.separators):
            while start < end and text[start].isspace():
                start += 1
            while end > start and text[end - 1].isspace():
                end -= 1
            if start < end:
                spans.append((start, end))
        return spans

    def _split(self, text: str, start: int, end: int, separators: Sequence[str]) -> list[Span]:
        separator = separators[-1]
        remaining: Sequence[str] = ()
        for index, candidate in enumerate(separators):
            if candidate == "":
                separator = candidate
                break
            if text.find(candidate, start, end) != -1:
                separator = candidate
                remaining = separators[index + 1 :]
                break

        result: list[Span] = []
        pending: list[Span] = []
        for piece in self._pieces(text, start, end, separator):
            if piece[1] - piece[0] < self.chunk_size:
                pending.append(piece)
                continue
            if pending:
                result.extend(self._merge(pending))
                pending = []
            if remaining:
                result.extend(self._split(text, piece[0], piece[1], remaining))
            else:
                result.append(piece)
        if pending:
            result.extend(self._merge(pending))
        return result

    @staticmethod
    def _pieces(text: str, start: int, end: int, separator: str) -> list[Span]:
        if separator == "":
            return [(position, position + 1) for position in range(start, end)]
        # Each separator opens the piece that follows it; pieces are contiguous.
        boundaries = [start]
        position = text.find(separator, start, end)
        while position != -1:
            if position > boundaries[-1]:
                boundaries.append(position)
            position = text.find(separator, position + len(separator), end)
        boundaries.append(end)
        return [(left, right) for left, right in zip(boundaries, boundaries[1:]) if right > left]

    def _merge(self, pieces: list[Span]) -> list[Span]:
        merged: list[Span] = []
        window: list[Span] = []
        total = 0
        for piece in pieces:
            length = piece[1] - piece[0]
            if total + length > self.chunk_size:
                if total > self.chunk_size:
                    logger.warning("Created a chunk of size %d, larger than %d", total, self.chunk_size)
                if window:
                    merged.append((window[0][0], window[-1][1]))
                    # Drop leading pieces until the carried-over tail fits the overlap.
                    while total > self.chunk_overlap or (total + length > self.chunk_size and total > 0):
                        total -= window[0][1] - window[0][0]
                        window = window[1:]
            window.append(piece)
            total += length
        if window:
            merged.append((window[0][0], window[-1][1]))
        return merged


__all__ = ["RecursiveCharacterSplitter", "DEFAULT_SEPARATORS"]
