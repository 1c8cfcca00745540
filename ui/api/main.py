"""FastAPI layer that exposes ingest/ask/search operations."""
from __future__ import annotations

import logging
from dataclasses import dataclass

import requests
from fastapi import FastAPI, HTTPException, Query as FastAPIQuery
from pydantic import BaseModel

from application.use_cases.answer_question import QAChain
from application.use_cases.ingest_repository import ingest_repository, parse_repository
from infrastructure.config import ContainerConfig, build_default_container
from ui.logging_utils import setup_logging

logger = logging.getLogger(__name__)

setup_logging()
app = FastAPI(title="RepoQA API")
container = build_default_container(ContainerConfig.from_env())


@dataclass(slots=True)
class _Session:
    repository: str | None = None
    chain: QAChain | None = None


session = _Session()


class IngestRequest(BaseModel):
    repository: str
    branch: str = "main"


class IngestResponse(BaseModel):
    repository: str
    branch: str
    chunks: int


class AskRequest(BaseModel):
    question: str


class AskResponse(BaseModel):
    question: str
    answer: str


class SearchResponse(BaseModel):
    query: str
    results: list[dict]


def _require_chain() -> QAChain:
    if session.chain is None:
        raise HTTPException(status_code=409, detail="No repository ingested yet.")
    return session.chain


@app.get("/health")
def health_endpoint() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/ingest", response_model=IngestResponse)
def ingest_endpoint(payload: IngestRequest) -> IngestResponse:
    try:
        owner, repo = parse_repository(payload.repository)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    try:
        store = ingest_repository(owner, repo, payload.branch, loader=container.loader, splitter=container.splitter)
    except (requests.RequestException, ValueError) as exc:
        logger.exception("Ingesting %s/%s failed.", owner, repo)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    session.repository = f"{owner}/{repo}"
    session.chain = container.build_chain(store)
    return IngestResponse(repository=session.repository, branch=payload.branch, chunks=len(store))


@app.post("/ask", response_model=AskResponse)
def ask_endpoint(payload: AskRequest) -> AskResponse:
    chain = _require_chain()
    return AskResponse(question=payload.question, answer=chain.invoke(payload.question))


@app.get("/search", response_model=SearchResponse)
def search_endpoint(q: str = FastAPIQuery(..., description="User question")) -> SearchResponse:
    chain = _require_chain()
    serialized = [
        {
            "source": result.chunk.metadata.get("source"),
            "score": result.score,
            "text": result.chunk.content,
        }
        for result in chain.retriever.retrieve(q)
    ]
    return SearchResponse(query=q, results=serialized)
