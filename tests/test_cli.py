import io
import unittest
from contextlib import redirect_stdout
from unittest import mock

from domain.entities import Document
from domain.interfaces import RepositoryLoader
from infrastructure.config import ContainerConfig, build_default_container
from ui import cli


class _StaticLoader(RepositoryLoader):
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str]] = []

    def load(self, owner: str, repo: str, branch: str = "main") -> list[Document]:
        self.calls.append((owner, repo, branch))
        return [Document(path="README.md", content="Navdeep Singh - 4 years of experience with React")]


class TestCli(unittest.TestCase):
    def test_answers_each_question(self) -> None:
        container = build_default_container(ContainerConfig())
        loader = _StaticLoader()
        container.loader = loader
        out = io.StringIO()
        with mock.patch.object(cli, "setup_logging"), mock.patch.object(
            cli.ContainerConfig, "from_env", return_value=ContainerConfig()
        ), mock.patch.object(cli, "build_default_container", return_value=container), redirect_stdout(out):
            cli.main(["https://github.com/owner/portfolio", "--branch", "dev", "-q", "first?", "-q", "second?"])

        self.assertEqual(loader.calls, [("owner", "portfolio", "dev")])
        self.assertEqual(out.getvalue().splitlines(), ["Unable to generate answer - HF_API_KEY not set"] * 2)

    def test_read_questions_stops_at_blank_line(self) -> None:
        stream = io.StringIO("first?\n  second?  \n\nthird?\n")
        self.assertEqual(list(cli.read_questions(stream)), ["first?", "second?"])

    def test_parse_args_defaults(self) -> None:
        args = cli.parse_args(["owner/repo"])
        self.assertEqual(args.branch, "main")
        self.assertIsNone(args.questions)
        self.assertIsNone(args.top_k)


if __name__ == "__main__":
    unittest.main()
