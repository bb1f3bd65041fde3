# src/edital_chunker/chunking/chunker.py

import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from time import monotonic

from edital_chunker.observability import names
from edital_chunker.observability.base import MetricsHook, NoOpMetricsHook

from .config import ChunkingConfig
from .linking import link_parents
from .models import ChunkingResult, DocumentSummary, TitleChunk
from .normalize import normalize_line_breaks, split_lines
from .render import render_summary
from .strategies import (
    DEFAULT_STRATEGIES,
    ChunkingStrategy,
    build_title_chunks,
    run_strategies,
)

logger = logging.getLogger(__name__)


class TitleChunker:
    """Splits edital text into hierarchically linked sections.

    Stateless apart from immutable config: one instance can serve any
    number of documents, concurrently if needed.
    """

    def __init__(
        self,
        config: ChunkingConfig = ChunkingConfig(),
        strategies: Sequence[ChunkingStrategy] = DEFAULT_STRATEGIES,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        if not strategies:
            raise ValueError("strategies must not be empty")
        self.config = config
        self.strategies = tuple(strategies)
        self.metrics_hook = metrics_hook

    def chunk_document(self, full_text: str, file_name: str) -> DocumentSummary:
        logger.info(
            "Title chunking %s: %d characters", file_name, len(full_text)
        )
        structure = self.chunk_text(full_text)
        logger.info("Identified %d title-based chunks in %s", len(structure), file_name)

        return DocumentSummary(
            document_name=file_name,
            total_chunks=len(structure),
            structure=structure,
            extracted_at=datetime.now(timezone.utc),
        )

    def process_content(self, text: str) -> ChunkingResult:
        structure = self.chunk_text(text)
        return ChunkingResult(
            title_chunks=[chunk.content for chunk in structure],
            document_structure=structure,
        )

    def chunk_text(self, text: str) -> list[TitleChunk]:
        start = monotonic()

        normalized = normalize_line_breaks(text)
        lines = split_lines(normalized)

        if normalized.strip():
            strategy, chunks = run_strategies(
                lines, self.config, self.strategies, self.metrics_hook
            )
        else:
            # Nothing to detect; keep whatever whitespace there is as one chunk.
            strategy, chunks = "title", build_title_chunks(lines, self.config)

        chunks = link_parents(chunks)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.CHUNKING_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.CHUNKING_CHUNKS_CREATED, len(chunks))
        self.metrics_hook.increment(
            names.CHUNKING_DOCUMENTS_TOTAL, labels={"strategy": strategy}
        )

        logger.info(
            "Chunked %d characters into %d chunks: strategy=%s, latency=%.0fms",
            len(normalized),
            len(chunks),
            strategy,
            elapsed_ms,
        )
        return chunks

    def render_summary(self, summary: DocumentSummary) -> str:
        return render_summary(summary, preview_chars=self.config.preview_chars)


def chunk_document(
    full_text: str,
    file_name: str,
    *,
    config: ChunkingConfig = ChunkingConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> DocumentSummary:
    """Chunk ``full_text`` and wrap the result in a DocumentSummary.

    Args:
        full_text: Plain text already extracted from the document.
        file_name: Label stored verbatim as ``document_name``.
        config: Chunking tunables.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        DocumentSummary with chunks in source order.

    Example:
        >>> summary = chunk_document(text, "edital.pdf")
        >>> [chunk.title for chunk in summary.structure]
    """
    return TitleChunker(config=config, metrics_hook=metrics_hook).chunk_document(
        full_text, file_name
    )


def process_content(
    text: str, *, config: ChunkingConfig = ChunkingConfig()
) -> ChunkingResult:
    """Same algorithm as chunk_document, without the summary wrapper."""
    return TitleChunker(config=config).process_content(text)
