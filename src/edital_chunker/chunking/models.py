# src/edital_chunker/chunking/models.py

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TitleChunk:
    """One section of a document.

    Offsets index into the normalized text, so
    ``text[start_position:end_position] == content`` always holds.
    """

    id: str
    title: str
    level: int
    content: str
    start_position: int
    end_position: int
    parent_id: str | None = None


@dataclass(frozen=True)
class DocumentSummary:
    document_name: str
    total_chunks: int
    structure: list[TitleChunk]
    extracted_at: datetime


@dataclass(frozen=True)
class ChunkingResult:
    title_chunks: list[str]
    document_structure: list[TitleChunk]
