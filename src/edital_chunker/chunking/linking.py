# src/edital_chunker/chunking/linking.py

from dataclasses import replace

from .models import TitleChunk


def link_parents(chunks: list[TitleChunk]) -> list[TitleChunk]:
    """Point every chunk at the nearest earlier chunk with a smaller level.

    Only earlier chunks are considered, so the links always form a forest.
    Chunks already at the shallowest level seen so far stay roots.
    """
    linked: list[TitleChunk] = []
    for chunk in chunks:
        parent_id = None
        for candidate in reversed(linked):
            if candidate.level < chunk.level:
                parent_id = candidate.id
                break
        linked.append(replace(chunk, parent_id=parent_id))
    return linked
