"""Use case for ingesting a repository into an in-memory chunk store."""
from __future__ import annotations

import logging

from domain.entities import Chunk, ChunkStore
from domain.interfaces import RepositoryLoader, TextSplitter

logger = logging.getLogger(__name__)


def ingest_repository(
    owner: str,
    repo: str,
    branch: str = "main",
    *,
    loader: RepositoryLoader,
    splitter: TextSplitter,
) -> ChunkStore:
    """Load every file of ``owner/repo`` and split it into chunks.

    Loader errors are not handled here and reach the caller unchanged.
    """

    logger.info("Ingesting %s/%s@%s", owner, repo, branch)
    documents = loader.load(owner, repo, branch)
    logger.info("%d files loaded", len(documents))

    chunks: list[Chunk] = []
    for document in documents:
        chunks.extend(splitter.split(document))
    logger.info("Split into %d chunks", len(chunks))
    return ChunkStore(chunks)


def parse_repository(reference: str) -> tuple[str, str]:
    """Split ``owner/repo`` or a GitHub URL into ``(owner, repo)``."""

    cleaned = reference.strip().rstrip("/")
    for prefix in ("https://github.com/", "http://github.com/", "github.com/"):
        if cleaned.startswith(prefix):
            cleaned = cleaned[len(prefix) :]
            break
    if cleaned.endswith(".git"):
        cleaned = cleaned[: -len(".git")]
    parts = cleaned.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"Expected 'owner/repo', got '{reference}'")
    return parts[0], parts[1]


__all__ = ["ingest_repository", "parse_repository"]
