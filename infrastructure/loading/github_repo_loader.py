"""Repository loader backed by the GitHub REST API."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from fnmatch import fnmatch
from typing import Literal
from urllib.parse import quote

import requests

from domain.entities import Document
from domain.interfaces import RepositoryLoader

logger = logging.getLogger(__name__)

UnknownPolicy = Literal["ignore", "warn", "error"]
_UNKNOWN_POLICIES = ("ignore", "warn", "error")


@dataclass(slots=True)
class GithubLoaderConfig:
    access_token: str | None = None
    recursive: bool = True
    unknown: UnknownPolicy = "warn"
    ignore_paths: tuple[str, ...] = ()
    api_url: str = "https://api.github.com"
    raw_url: str = "https://raw.githubusercontent.com"
    html_url: str = "https://github.com"
    timeout: float = 60.0
    headers: dict[str, str] = field(default_factory=lambda: {"Accept": "application/vnd.github+json"})


class GithubRepoLoader(RepositoryLoader):
    """Download every text file of a repository branch."""

    def __init__(self, config: GithubLoaderConfig | None = None) -> None:
        self._config = config or GithubLoaderConfig()
        if self._config.unknown not in _UNKNOWN_POLICIES:
            raise ValueError(f"Unknown file policy '{self._config.unknown}'")

    def load(self, owner: str, repo: str, branch: str = "main") -> list[Document]:
        repository_url = f"{self._config.html_url}/{owner}/{repo}"
        documents: list[Document] = []
        for path in self._list_files(owner, repo, branch):
            if self._is_ignored(path):
                logger.debug("Skipping ignored path %s", path)
                continue
            text = self._decode(path, self._fetch_raw(owner, repo, branch, path))
            if text is None:
                continue
            documents.append(
                Document(
                    path=path,
                    content=text,
                    metadata={"source": path, "repository": repository_url, "branch": branch},
                )
            )
        return documents

    def _list_files(self, owner: str, repo: str, branch: str) -> list[str]:
        response = requests.get(
            f"{self._config.api_url}/repos/{owner}/{repo}/git/trees/{quote(branch, safe='')}",
            headers=self._headers(),
            params={"recursive": "1"} if self._config.recursive else None,
            timeout=self._config.timeout,
        )
        response.raise_for_status()
        payload = response.json()
        if payload.get("truncated"):
            logger.warning("Tree listing for %s/%s was truncated by GitHub.", owner, repo)
        return [entry["path"] for entry in payload.get("tree", []) if entry.get("type") == "blob"]

    def _fetch_raw(self, owner: str, repo: str, branch: str, path: str) -> bytes:
        response = requests.get(
            f"{self._config.raw_url}/{owner}/{repo}/{quote(branch)}/{quote(path)}",
            headers=self._headers(),
            timeout=self._config.timeout,
        )
        response.raise_for_status()
        return response.content

    def _headers(self) -> dict[str, str]:
        headers = dict(self._config.headers)
        if self._config.access_token:
            headers["Authorization"] = f"Bearer {self._config.access_token}"
        return headers

    def _is_ignored(self, path: str) -> bool:
        return any(fnmatch(path, pattern) for pattern in self._config.ignore_paths)

    def _decode(self, path: str, raw: bytes) -> str | None:
        if b"\x00" not in raw:
            try:
                return raw.decode("utf-8")
            except UnicodeDecodeError:
                pass
        if self._config.unknown == "error":
            raise ValueError(f"Unknown file type: {path}")
        if self._config.unknown == "warn":
            logger.warning("Unknown file type: %s", path)
        return None


__all__ = ["GithubRepoLoader", "GithubLoaderConfig"]
