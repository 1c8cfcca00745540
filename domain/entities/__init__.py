"""Domain entities for the RepoQA system."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Sequence


@dataclass(slots=True)
class Document:
    """A single repository file as returned by a loader."""

    path: str
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Chunk:
    """A bounded fragment of repository text used for retrieval."""

    content: str
    metadata: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ScoredChunk:
    """A chunk paired with its keyword match count for one query."""

    chunk: Chunk
    score: int


class ChunkStore:
    """Ordered, read-only collection of chunks built once per run."""

    __slots__ = ("_chunks",)

    def __init__(self, chunks: Sequence[Chunk] = ()) -> None:
        # Shallow read-only view; nested values such as ``loc`` are shared.
        self._chunks: tuple[Chunk, ...] = tuple(
            Chunk(content=chunk.content, metadata=MappingProxyType(dict(chunk.metadata))) for chunk in chunks
        )

    @property
    def chunks(self) -> tuple[Chunk, ...]:
        return self._chunks

    def __len__(self) -> int:
        return len(self._chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self._chunks)

    def __getitem__(self, index: int) -> Chunk:
        return self._chunks[index]

    def __repr__(self) -> str:
        return f"ChunkStore({len(self._chunks)} chunks)"


__all__ = [
    "Document",
    "Chunk",
    "ScoredChunk",
    "ChunkStore",
]
