# src/edital_chunker/chunking/serialization.py

"""Wire shape of a DocumentSummary, as consumed by the web client.

Keys are camelCase (``startPosition``, ``parentId``, ``extractedAt``) and
``parentId`` is omitted on root chunks.
"""

from dataclasses import asdict
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .models import DocumentSummary, TitleChunk


class TitleChunkPayload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid", frozen=True
    )

    id: str
    title: str
    level: int
    content: str
    start_position: int
    end_position: int
    parent_id: str | None = None

    @classmethod
    def from_chunk(cls, chunk: TitleChunk) -> "TitleChunkPayload":
        return cls(**asdict(chunk))


class DocumentSummaryPayload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid", frozen=True
    )

    document_name: str
    total_chunks: int
    structure: list[TitleChunkPayload]
    extracted_at: datetime

    @classmethod
    def from_summary(cls, summary: DocumentSummary) -> "DocumentSummaryPayload":
        return cls(
            document_name=summary.document_name,
            total_chunks=summary.total_chunks,
            structure=[TitleChunkPayload.from_chunk(c) for c in summary.structure],
            extracted_at=summary.extracted_at,
        )


def summary_to_dict(summary: DocumentSummary) -> dict[str, Any]:
    return DocumentSummaryPayload.from_summary(summary).model_dump(
        mode="json", by_alias=True, exclude_none=True
    )


def summary_to_json(summary: DocumentSummary, *, indent: int | None = None) -> str:
    return DocumentSummaryPayload.from_summary(summary).model_dump_json(
        by_alias=True, exclude_none=True, indent=indent
    )
