# src/edital_chunker/pipeline.py

import logging
from pathlib import Path

from edital_chunker.chunking import DocumentSummary, TitleChunker
from edital_chunker.observability.base import MetricsHook, NoOpMetricsHook
from edital_chunker.parsers.factory import DEFAULT_MAX_FILE_SIZE_MB, extract_text

logger = logging.getLogger(__name__)


def process_document(
    file_path: str | Path,
    file_name: str,
    *,
    chunker: TitleChunker | None = None,
    max_file_size_mb: float = DEFAULT_MAX_FILE_SIZE_MB,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> DocumentSummary:
    """Extract the text of an uploaded edital and chunk it by titles.

    Extraction errors propagate unchanged; see ``extract_text``.
    """
    logger.info("Starting title-based chunking for %s", file_name)

    extracted = extract_text(
        file_path,
        file_name,
        max_file_size_mb=max_file_size_mb,
        metrics_hook=metrics_hook,
    )

    chunker = chunker or TitleChunker(metrics_hook=metrics_hook)
    return chunker.chunk_document(extracted.text, file_name)
