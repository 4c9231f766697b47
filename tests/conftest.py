"""Shared fixtures: a small set of one user's posts, notes and files."""

import pytest

from citesearch.sources.store import InMemoryRecordStore

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


@pytest.fixture
def sample_collections():
    return {
        "linkedin_posts": [
            {
                "id": "post-1",
                "user_id": USER_ID,
                "content": "Our growth plan: growth comes from a clear strategy.",
                "created_at": "2025-01-10T09:00:00Z",
                "post_url": "https://www.linkedin.com/posts/post-1",
                "engagement_data": {"likes": 42, "comments": 7},
            },
            {
                "id": "post-2",
                "user_id": OTHER_USER_ID,
                "content": "Another user's growth strategy for Q1.",
                "created_at": "2025-01-12T09:00:00Z",
                "post_url": "https://www.linkedin.com/posts/post-2",
            },
        ],
        "meeting_notes": [
            {
                "id": "note-1",
                "user_id": USER_ID,
                "content": "Weekly sync. Discussed hiring and the quarterly roadmap.",
                "created_at": "2025-01-08T15:30:00+00:00",
                "source_type": "read_ai",
            },
        ],
        "knowledge_files": [
            {
                "id": "file-1",
                "user_id": USER_ID,
                "name": "Company handbook.pdf",
                "type": "pdf",
                "extracted_content": "Vacation policy and expense reporting guidelines.",
                "created_at": "2024-12-01T00:00:00Z",
                "url": "https://files.example.com/handbook.pdf",
            },
            {
                "id": "file-2",
                "user_id": USER_ID,
                "name": "Unprocessed upload.docx",
                "type": "docx",
                "extracted_content": None,
                "created_at": "2025-01-15T00:00:00Z",
                "url": "https://files.example.com/upload.docx",
            },
        ],
    }


@pytest.fixture
def memory_store(sample_collections):
    return InMemoryRecordStore(sample_collections)
