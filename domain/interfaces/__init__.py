"""Abstract interfaces for the RepoQA system."""
from __future__ import annotations

from abc import ABC, abstractmethod

from domain.entities import Chunk, Document


class RepositoryLoader(ABC):
    """Fetches the files of a source-code repository."""

    @abstractmethod
    def load(self, owner: str, repo: str, branch: str = "main") -> list[Document]:
        """Return the text documents of the repository branch."""


class TextSplitter(ABC):
    """Splits documents into overlapping chunks for retrieval."""

    @abstractmethod
    def split(self, document: Document) -> list[Chunk]:
        """Return chunks for the provided document."""


class TextGenerator(ABC):
    """Calls an external text-generation model."""

    @property
    @abstractmethod
    def model_id(self) -> str:
        """Return the identifier of the model used for generation."""

    @abstractmethod
    def generate(self, prompt: str, *, max_new_tokens: int, temperature: float) -> str:
        """Return generated text for the prompt or raise on failure."""


__all__ = [
    "RepositoryLoader",
    "TextSplitter",
    "TextGenerator",
]
