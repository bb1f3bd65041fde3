# src/edital_chunker/chunking/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ChunkingConfig:
    """Tunables for the title chunker.

    Immutable. Explicit. No magic defaults from environment.
    """

    # Semantic forced chunking: a break is honored only past min_chunk_size,
    # and forced once a chunk grows past max_chunk_size.
    min_chunk_size: int = 800
    max_chunk_size: int = 3000

    # Fixed-size forced chunking
    target_chunks: int = 4
    size_split_threshold: int = 1000

    # Acceptance thresholds for each tier
    min_title_chunks: int = 2
    min_semantic_chunks: int = 3

    # Fallback title inference looks this far into a section
    title_scan_lines: int = 10

    # Summary rendering
    preview_chars: int = 100

    def __post_init__(self) -> None:
        if self.min_chunk_size <= 0:
            raise ValueError("min_chunk_size must be > 0")
        if self.max_chunk_size <= self.min_chunk_size:
            raise ValueError("max_chunk_size must be > min_chunk_size")
        if self.target_chunks < 2:
            raise ValueError("target_chunks must be >= 2")
        if self.size_split_threshold < 0:
            raise ValueError("size_split_threshold must be >= 0")
        if self.title_scan_lines <= 0:
            raise ValueError("title_scan_lines must be > 0")
        if self.preview_chars <= 3:
            raise ValueError("preview_chars must be > 3")
