from dataclasses import replace

from edital_chunker.chunking.linking import link_parents
from edital_chunker.chunking.models import TitleChunk


def _chunks(*levels: int) -> list[TitleChunk]:
    chunks = []
    position = 0
    for index, level in enumerate(levels):
        content = f"section {index}\n"
        chunks.append(
            TitleChunk(
                id=f"chunk_{index}",
                title=f"Section {index}",
                level=level,
                content=content,
                start_position=position,
                end_position=position + len(content),
            )
        )
        position += len(content)
    return chunks


class TestLinkParents:
    def test_nearest_shallower_chunk_is_parent(self) -> None:
        linked = link_parents(_chunks(1, 2, 3, 2, 1, 3))

        assert [c.parent_id for c in linked] == [
            None,
            "chunk_0",
            "chunk_1",
            "chunk_0",
            None,
            "chunk_4",
        ]

    def test_siblings_share_no_link(self) -> None:
        linked = link_parents(_chunks(2, 2, 2))
        assert [c.parent_id for c in linked] == [None, None, None]

    def test_shallower_chunk_after_deeper_start_is_root(self) -> None:
        linked = link_parents(_chunks(2, 1, 2))
        assert [c.parent_id for c in linked] == [None, None, "chunk_1"]

    def test_existing_links_are_recomputed(self) -> None:
        chunk = _chunks(1)[0]
        stale = replace(chunk, parent_id="chunk_9")

        assert link_parents([stale])[0].parent_id is None

    def test_other_fields_are_untouched(self) -> None:
        chunks = _chunks(1, 3)
        linked = link_parents(chunks)

        assert [(c.id, c.level, c.content) for c in linked] == [
            (c.id, c.level, c.content) for c in chunks
        ]
        assert chunks[1].parent_id is None

    def test_empty_input(self) -> None:
        assert link_parents([]) == []
