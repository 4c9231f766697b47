"""Application configuration management."""

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """citesearch settings loaded from environment variables."""

    # Supabase (production record store)
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Store backend: "supabase" or "memory"
    citesearch_store_backend: str = "supabase"
    citesearch_data_path: str = "./data/records.json"

    # Retrieval
    citesearch_default_max_results: int = 5
    citesearch_dedupe_citations: bool = False

    # Number of leading search terms each source queries
    citesearch_social_post_terms: int = 2
    citesearch_meeting_note_terms: int = 3
    citesearch_document_terms: int = 3

    @property
    def data_path(self) -> Path:
        return Path(self.citesearch_data_path)

    @property
    def term_limits(self) -> dict[str, int]:
        return {
            "social_post": self.citesearch_social_post_terms,
            "meeting_note": self.citesearch_meeting_note_terms,
            "knowledge_document": self.citesearch_document_terms,
        }

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
