import unittest

from application.services.keyword_retriever import DEFAULT_TOP_K, KeywordRetriever
from domain.entities import Chunk, ChunkStore


def _store(*contents: str) -> ChunkStore:
    return ChunkStore([Chunk(content=text, metadata={"source": f"file-{i}"}) for i, text in enumerate(contents)])


class TestKeywordExtraction(unittest.TestCase):
    def test_drops_short_tokens_and_lowercases(self) -> None:
        keywords = KeywordRetriever.extract_keywords("What IS the Name of an app?")
        self.assertEqual(keywords, ["what", "the", "name", "app?"])

    def test_keeps_duplicates_in_order(self) -> None:
        self.assertEqual(KeywordRetriever.extract_keywords("react  react\tredux"), ["react", "react", "redux"])


class TestScoring(unittest.TestCase):
    def test_zero_when_no_keyword_occurs(self) -> None:
        self.assertEqual(KeywordRetriever.score(["portfolio"], "nothing relevant"), 0)

    def test_counts_every_keyword_occurrence(self) -> None:
        self.assertEqual(KeywordRetriever.score(["react", "react"], "React and react"), 4)

    def test_special_characters_are_literal(self) -> None:
        self.assertEqual(KeywordRetriever.score(["c++", "(node"], "c++ beats c+++ (node"), 3)


class TestKeywordRetriever(unittest.TestCase):
    def test_orders_by_score_descending(self) -> None:
        store = _store("nothing here", "portfolio of navdeep", "portfolio portfolio name")
        results = KeywordRetriever(store).retrieve("name of the portfolio")
        self.assertEqual([r.chunk.content for r in results], [store[2].content, store[1].content, store[0].content])
        self.assertEqual([r.score for r in results], [3, 1, 0])

    def test_returns_at_most_top_k_chunks_from_store(self) -> None:
        store = _store(*[f"chunk {i} react" for i in range(10)])
        results = KeywordRetriever(store).retrieve("react")
        self.assertEqual(len(results), DEFAULT_TOP_K)
        for result in results:
            self.assertIn(result.chunk, store.chunks)

    def test_empty_keywords_keep_store_order(self) -> None:
        store = _store(*[f"chunk {i}" for i in range(8)])
        context = KeywordRetriever(store, top_k=3).invoke("is a")
        self.assertEqual(context, "chunk 0\n\nchunk 1\n\nchunk 2")

    def test_ties_keep_store_order(self) -> None:
        store = _store("react one", "nothing", "react two")
        context = KeywordRetriever(store).invoke("react")
        self.assertEqual(context, "react one\n\nreact two\n\nnothing")

    def test_empty_store_returns_empty_context(self) -> None:
        self.assertEqual(KeywordRetriever(ChunkStore()).invoke("anything at all"), "")

    def test_invoke_is_idempotent(self) -> None:
        store = _store("skills: react", "html5 and css3", "about me")
        retriever = KeywordRetriever(store)
        self.assertEqual(retriever.invoke("what skills"), retriever.invoke("what skills"))

    def test_rejects_non_positive_top_k(self) -> None:
        with self.assertRaises(ValueError):
            KeywordRetriever(ChunkStore(), top_k=0)


if __name__ == "__main__":
    unittest.main()
