import unittest

from domain.entities import Chunk, ChunkStore


class TestChunkStore(unittest.TestCase):
    def test_metadata_is_read_only(self) -> None:
        store = ChunkStore([Chunk(content="alpha", metadata={"source": "a.md"})])
        with self.assertRaises(TypeError):
            store[0].metadata["source"] = "b.md"  # type: ignore[index]
        self.assertEqual(store[0].metadata["source"], "a.md")

    def test_store_is_detached_from_input_metadata(self) -> None:
        metadata = {"source": "a.md"}
        store = ChunkStore([Chunk(content="alpha", metadata=metadata)])
        metadata["source"] = "changed.md"
        self.assertEqual(store[0].metadata["source"], "a.md")

    def test_sequence_behaviour(self) -> None:
        store = ChunkStore([Chunk(content="one"), Chunk(content="two")])
        self.assertEqual(len(store), 2)
        self.assertEqual([chunk.content for chunk in store], ["one", "two"])
        self.assertEqual(store[1], Chunk(content="two"))


if __name__ == "__main__":
    unittest.main()
