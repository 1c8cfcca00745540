"""Dependency wiring for the RepoQA application."""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from application.services.answer_extractor import AnswerExtractor, ExtractionRules
from application.services.answer_generator import AnswerGenerator, GenerationParameters
from application.services.keyword_retriever import DEFAULT_TOP_K, KeywordRetriever
from application.services.prompt import PromptTemplate
from application.use_cases.answer_question import QAChain
from domain.entities import ChunkStore
from domain.interfaces import RepositoryLoader, TextGenerator, TextSplitter
from infrastructure.generation.huggingface_generator import HuggingFaceConfig, HuggingFaceTextGenerator
from infrastructure.loading.github_repo_loader import GithubLoaderConfig, GithubRepoLoader
from infrastructure.splitting.recursive_character_splitter import RecursiveCharacterSplitter


@dataclass(slots=True)
class Container:
    """Simple container bundling concrete infrastructure implementations."""

    loader: RepositoryLoader
    splitter: TextSplitter
    text_generator: TextGenerator | None
    extractor: AnswerExtractor
    prompt: PromptTemplate
    generation: GenerationParameters
    top_k: int

    def build_chain(self, store: ChunkStore) -> QAChain:
        """Return a question-answering chain over an ingested chunk store."""

        return QAChain(
            retriever=KeywordRetriever(store, top_k=self.top_k),
            generator=AnswerGenerator(self.text_generator, self.extractor, self.generation),
            prompt=self.prompt,
        )


@dataclass(slots=True)
class ContainerConfig:
    """Configuration for the loader, splitter, generator and retrieval."""

    github_token: str | None = None
    hf_api_key: str | None = None
    hf_model: str = "gpt2"
    top_k: int = DEFAULT_TOP_K
    chunk_size: int = 1000
    chunk_overlap: int = 200
    recursive: bool = True
    unknown: str = "warn"
    ignore_paths: tuple[str, ...] = ()
    max_new_tokens: int = 50
    temperature: float = 0.7
    rules: ExtractionRules = field(default_factory=ExtractionRules)

    @classmethod
    def from_env(cls) -> "ContainerConfig":
        """Read settings from the environment, loading ``.env`` first."""

        load_dotenv()
        ignore = os.getenv("REPOQA_IGNORE_PATHS", "")
        return cls(
            github_token=os.getenv("GITHUB_TOKEN") or None,
            hf_api_key=os.getenv("HF_API_KEY") or None,
            hf_model=os.getenv("HF_MODEL", "gpt2"),
            top_k=_int_env("REPOQA_TOP_K", DEFAULT_TOP_K),
            chunk_size=_int_env("REPOQA_CHUNK_SIZE", 1000),
            chunk_overlap=_int_env("REPOQA_CHUNK_OVERLAP", 200),
            ignore_paths=tuple(pattern.strip() for pattern in ignore.split(",") if pattern.strip()),
        )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from exc


def build_default_container(config: ContainerConfig | None = None) -> Container:
    """Instantiate the default infrastructure stack."""

    cfg = config or ContainerConfig()
    if cfg.top_k < 1:
        raise ValueError(f"top_k must be positive, got {cfg.top_k}")
    loader = GithubRepoLoader(
        GithubLoaderConfig(
            access_token=cfg.github_token,
            recursive=cfg.recursive,
            unknown=cfg.unknown,  # type: ignore[arg-type]
            ignore_paths=cfg.ignore_paths,
        )
    )
    splitter = RecursiveCharacterSplitter(chunk_size=cfg.chunk_size, chunk_overlap=cfg.chunk_overlap)
    text_generator: TextGenerator | None = None
    if cfg.hf_api_key:
        text_generator = HuggingFaceTextGenerator(HuggingFaceConfig(api_key=cfg.hf_api_key, model=cfg.hf_model))

    return Container(
        loader=loader,
        splitter=splitter,
        text_generator=text_generator,
        extractor=AnswerExtractor(cfg.rules),
        prompt=PromptTemplate(),
        generation=GenerationParameters(max_new_tokens=cfg.max_new_tokens, temperature=cfg.temperature),
        top_k=cfg.top_k,
    )


__all__ = ["Container", "ContainerConfig", "build_default_container"]
