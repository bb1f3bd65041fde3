from .chunker import TitleChunker, chunk_document, process_content
from .config import ChunkingConfig
from .linking import link_parents
from .models import ChunkingResult, DocumentSummary, TitleChunk
from .normalize import normalize_line_breaks
from .patterns import TitleMatch, TitleRule, match_title
from .render import render_summary
from .serialization import summary_to_dict, summary_to_json
from .strategies import DEFAULT_STRATEGIES, ChunkingStrategy

__all__ = [
    "ChunkingConfig",
    "ChunkingResult",
    "ChunkingStrategy",
    "DEFAULT_STRATEGIES",
    "DocumentSummary",
    "TitleChunk",
    "TitleChunker",
    "TitleMatch",
    "TitleRule",
    "chunk_document",
    "link_parents",
    "match_title",
    "normalize_line_breaks",
    "process_content",
    "render_summary",
    "summary_to_dict",
    "summary_to_json",
]
