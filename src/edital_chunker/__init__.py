# Chunking
from .chunking import (
    ChunkingConfig,
    ChunkingResult,
    ChunkingStrategy,
    DocumentSummary,
    TitleChunk,
    TitleChunker,
    chunk_document,
    normalize_line_breaks,
    process_content,
    render_summary,
    summary_to_dict,
    summary_to_json,
)

# Errors
from .errors import (
    EditalChunkerError,
    ExtractionError,
    FileTooLargeError,
    UnsupportedFileTypeError,
)

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    ExtractedText,
    PdfTextExtractor,
    PlainTextExtractor,
    TextExtractor,
    extract_text,
)

# Pipeline
from .pipeline import process_document

__all__ = [
    # Chunking
    "ChunkingConfig",
    "ChunkingResult",
    "ChunkingStrategy",
    "DocumentSummary",
    "TitleChunk",
    "TitleChunker",
    "chunk_document",
    "normalize_line_breaks",
    "process_content",
    "render_summary",
    "summary_to_dict",
    "summary_to_json",
    # Errors
    "EditalChunkerError",
    "ExtractionError",
    "FileTooLargeError",
    "UnsupportedFileTypeError",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "ExtractedText",
    "PdfTextExtractor",
    "PlainTextExtractor",
    "TextExtractor",
    "extract_text",
    # Pipeline
    "process_document",
]
