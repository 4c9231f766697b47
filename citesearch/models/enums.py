"""Enumeration types for citesearch data models."""

from enum import Enum


class SourceKind(str, Enum):
    SOCIAL_POST = "social_post"
    MEETING_NOTE = "meeting_note"
    KNOWLEDGE_DOCUMENT = "knowledge_document"
