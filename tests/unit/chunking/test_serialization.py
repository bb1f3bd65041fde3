import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from edital_chunker.chunking.models import DocumentSummary, TitleChunk
from edital_chunker.chunking.serialization import (
    TitleChunkPayload,
    summary_to_dict,
    summary_to_json,
)


@pytest.fixture
def summary() -> DocumentSummary:
    return DocumentSummary(
        document_name="edital.pdf",
        total_chunks=2,
        structure=[
            TitleChunk(
                id="chunk_0",
                title="Das Disposições Preliminares",
                level=1,
                content="CAPÍTULO I\n",
                start_position=0,
                end_position=11,
            ),
            TitleChunk(
                id="chunk_1",
                title="Das Inscrições",
                level=2,
                content="DAS INSCRIÇÕES\n",
                start_position=11,
                end_position=26,
                parent_id="chunk_0",
            ),
        ],
        extracted_at=datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc),
    )


class TestSummaryToDict:
    def test_uses_camel_case_keys(self, summary: DocumentSummary) -> None:
        payload = summary_to_dict(summary)

        assert set(payload) == {"documentName", "totalChunks", "structure", "extractedAt"}
        assert payload["documentName"] == "edital.pdf"
        assert payload["totalChunks"] == 2

    def test_chunk_fields(self, summary: DocumentSummary) -> None:
        child = summary_to_dict(summary)["structure"][1]

        assert child == {
            "id": "chunk_1",
            "title": "Das Inscrições",
            "level": 2,
            "content": "DAS INSCRIÇÕES\n",
            "startPosition": 11,
            "endPosition": 26,
            "parentId": "chunk_0",
        }

    def test_root_chunk_has_no_parent_key(self, summary: DocumentSummary) -> None:
        root = summary_to_dict(summary)["structure"][0]
        assert "parentId" not in root

    def test_timestamp_is_iso_8601(self, summary: DocumentSummary) -> None:
        extracted_at = summary_to_dict(summary)["extractedAt"]
        parsed = datetime.fromisoformat(extracted_at.replace("Z", "+00:00"))

        assert parsed == summary.extracted_at


class TestSummaryToJson:
    def test_matches_dict_form(self, summary: DocumentSummary) -> None:
        assert json.loads(summary_to_json(summary)) == summary_to_dict(summary)

    def test_indent(self, summary: DocumentSummary) -> None:
        rendered = summary_to_json(summary, indent=2)

        assert rendered.startswith("{\n  ")
        assert json.loads(rendered) == summary_to_dict(summary)

    def test_non_ascii_survives(self, summary: DocumentSummary) -> None:
        assert "Inscrições" in json.loads(summary_to_json(summary))["structure"][1]["title"]


class TestTitleChunkPayload:
    def test_accepts_camel_case_input(self) -> None:
        payload = TitleChunkPayload.model_validate(
            {
                "id": "chunk_0",
                "title": "Preâmbulo",
                "level": 1,
                "content": "texto",
                "startPosition": 0,
                "endPosition": 5,
            }
        )

        assert payload.start_position == 0
        assert payload.parent_id is None

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            TitleChunkPayload.model_validate(
                {
                    "id": "chunk_0",
                    "title": "Preâmbulo",
                    "level": 1,
                    "content": "texto",
                    "start_position": 0,
                    "end_position": 5,
                    "page": 3,
                }
            )
