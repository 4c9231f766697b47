"""Unit tests for citation, record and request models."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from citesearch.errors import InvalidRequestError
from citesearch.models.citation import Citation
from citesearch.models.enums import SourceKind
from citesearch.models.query import RetrievalRequest, RetrievalResponse
from citesearch.models.record import SourceRecord, parse_timestamp
from citesearch.sources.config import KNOWLEDGE_DOCUMENTS, MEETING_NOTES, SOCIAL_POSTS

CREATED = datetime(2025, 1, 10, 9, 0, tzinfo=timezone.utc)


def _citation(**overrides):
    fields = {
        "kind": SourceKind.MEETING_NOTE,
        "id": "note-1",
        "excerpt": "Discussed growth.",
        "created_at": CREATED,
        "relevance_score": 0.6,
    }
    fields.update(overrides)
    return Citation(**fields)


class TestCitation:
    @pytest.mark.parametrize("score", [-0.1, 1.01])
    def test_score_outside_unit_interval_rejected(self, score):
        with pytest.raises(ValueError, match="relevance_score"):
            _citation(relevance_score=score)

    def test_empty_excerpt_rejected(self):
        with pytest.raises(ValueError, match="excerpt"):
            _citation(excerpt="")

    def test_kind_coerced_from_string(self):
        assert _citation(kind="social_post").kind is SourceKind.SOCIAL_POST

    def test_immutable(self):
        citation = _citation()
        with pytest.raises(FrozenInstanceError):
            citation.relevance_score = 0.9

    def test_metadata_is_read_only(self):
        source = {"file_type": "pdf"}
        citation = _citation(metadata=source)
        with pytest.raises(TypeError):
            citation.metadata["file_type"] = "docx"
        source["file_type"] = "docx"
        assert citation.metadata == {"file_type": "pdf"}

    def test_to_dict_omits_absent_optional_fields(self):
        data = _citation().to_dict()
        assert data == {
            "kind": "meeting_note",
            "id": "note-1",
            "excerpt": "Discussed growth.",
            "created_at": "2025-01-10T09:00:00+00:00",
            "relevance_score": 0.6,
        }

    def test_to_dict_includes_optional_fields(self):
        data = _citation(
            kind=SourceKind.KNOWLEDGE_DOCUMENT,
            title="Handbook.pdf",
            source_reference="https://files.example.com/handbook.pdf",
            metadata={"file_type": "pdf"},
        ).to_dict()
        assert data["title"] == "Handbook.pdf"
        assert data["source_reference"] == "https://files.example.com/handbook.pdf"
        assert data["metadata"] == {"file_type": "pdf"}

    def test_response_serializes_citations_in_order(self):
        response = RetrievalResponse(citations=(_citation(id="a"), _citation(id="b")))
        assert [c["id"] for c in response.to_dict()["citations"]] == ["a", "b"]
        assert RetrievalResponse().to_dict() == {"citations": []}


class TestSourceRecord:
    def test_parse_timestamp_accepts_zulu_suffix(self):
        assert parse_timestamp("2025-01-10T09:00:00Z") == CREATED

    def test_parse_timestamp_passes_datetimes_through(self):
        assert parse_timestamp(CREATED) is CREATED

    def test_parse_timestamp_rejects_missing_value(self):
        with pytest.raises(ValueError):
            parse_timestamp(None)

    def test_from_social_post_row(self):
        row = {
            "id": "post-1",
            "content": "Growth!",
            "created_at": "2025-01-10T09:00:00Z",
            "post_url": "https://www.linkedin.com/posts/post-1",
            "engagement_data": {"likes": 3},
        }
        record = SourceRecord.from_row(row, SOCIAL_POSTS)
        assert record.text == "Growth!"
        assert record.title == "LinkedIn Post"
        assert record.reference == "https://www.linkedin.com/posts/post-1"
        assert record.metadata == {"engagement": {"likes": 3}}

    def test_from_meeting_note_row_has_no_title(self):
        row = {"id": 7, "content": "Notes", "created_at": "2025-01-10T09:00:00Z", "source_type": "read_ai"}
        record = SourceRecord.from_row(row, MEETING_NOTES)
        assert record.id == "7"
        assert record.title is None
        assert record.reference == "read_ai"
        assert record.metadata == {"source_type": "read_ai"}

    def test_from_document_row_uses_name_as_title(self):
        row = {
            "id": "file-1",
            "name": "Handbook.pdf",
            "type": "pdf",
            "extracted_content": None,
            "created_at": "2024-12-01T00:00:00Z",
            "url": None,
        }
        record = SourceRecord.from_row(row, KNOWLEDGE_DOCUMENTS)
        assert record.title == "Handbook.pdf"
        assert record.text == ""
        assert record.reference is None


class TestRetrievalRequest:
    def test_defaults(self):
        request = RetrievalRequest(user_id="u1", topic="growth")
        assert request.max_results == 5
        assert request.platform is None

    @pytest.mark.parametrize("payload", [
        {"topic": "growth"},
        {"user_id": "u1"},
        {"user_id": "", "topic": "growth"},
        {"user_id": "u1", "topic": "   "},
    ])
    def test_missing_required_fields_rejected(self, payload):
        with pytest.raises(InvalidRequestError, match="required"):
            RetrievalRequest.from_payload(payload)

    @pytest.mark.parametrize("max_results", [-1, "3", 2.5, True])
    def test_bad_max_results_rejected(self, max_results):
        with pytest.raises(InvalidRequestError, match="max_results"):
            RetrievalRequest.from_payload({"user_id": "u1", "topic": "growth", "max_results": max_results})

    def test_from_payload_applies_default_max_results(self):
        request = RetrievalRequest.from_payload({"user_id": "u1", "topic": "growth"}, default_max_results=8)
        assert request.max_results == 8

    def test_from_payload_keeps_zero_max_results(self):
        request = RetrievalRequest.from_payload({"user_id": "u1", "topic": "growth", "max_results": 0})
        assert request.max_results == 0

    def test_non_object_payload_rejected(self):
        with pytest.raises(InvalidRequestError):
            RetrievalRequest.from_payload(["u1", "growth"])

    @pytest.mark.parametrize("platform", [7, ["linkedin"], {"name": "linkedin"}])
    def test_non_string_platform_rejected(self, platform):
        with pytest.raises(InvalidRequestError, match="platform"):
            RetrievalRequest.from_payload({"user_id": "u1", "topic": "growth", "platform": platform})
