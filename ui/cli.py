"""Ingest a GitHub repository and answer questions about it."""
from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, TextIO

from application.use_cases.answer_question import QAChain
from application.use_cases.ingest_repository import ingest_repository, parse_repository
from infrastructure.config import ContainerConfig, build_default_container
from ui.logging_utils import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="repo-qa", description=__doc__)
    parser.add_argument("repository", help="Repository as 'owner/repo' or a github.com URL.")
    parser.add_argument("--branch", default="main", help="Branch to ingest (default: main)")
    parser.add_argument(
        "--question",
        "-q",
        action="append",
        dest="questions",
        help="Question to answer. May be given several times; without it questions are read from stdin.",
    )
    parser.add_argument("--top-k", type=int, default=None, help="Number of chunks used as context.")
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        help="Glob of repository paths to skip. May be given several times.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log retrieval and extraction details.")
    return parser.parse_args(argv)


def read_questions(stream: TextIO, prompt: str = "> ") -> Iterator[str]:
    """Yield questions typed interactively until EOF or an empty line."""
    interactive = stream.isatty()
    while True:
        if interactive:
            print(prompt, end="", flush=True)
        line = stream.readline()
        if not line or not line.strip():
            return
        yield line.strip()


def answer_all(chain: QAChain, questions: Iterable[str], out: TextIO) -> int:
    count = 0
    for question in questions:
        print(chain.invoke(question), file=out)
        count += 1
    return count


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    config = ContainerConfig.from_env()
    if args.top_k is not None:
        config.top_k = args.top_k
    if args.ignore:
        config.ignore_paths = config.ignore_paths + tuple(args.ignore)
    container = build_default_container(config)

    owner, repo = parse_repository(args.repository)
    store = ingest_repository(owner, repo, args.branch, loader=container.loader, splitter=container.splitter)
    chain = container.build_chain(store)

    questions: Iterable[str] = args.questions or read_questions(sys.stdin)
    answer_all(chain, questions, sys.stdout)


if __name__ == "__main__":
    main()
