"""Record store construction from application settings."""

from config.settings import Settings, get_settings
from citesearch.errors import DataSourceUnavailableError
from citesearch.sources.store import RecordStore


def get_record_store(settings: Settings | None = None) -> RecordStore:
    """Create and return the configured record store.

    Default: Supabase, using the service role key. The "memory" backend
    loads JSON fixture data from `citesearch_data_path`.
    """
    settings = settings or get_settings()
    backend = settings.citesearch_store_backend.lower()

    if backend == "supabase":
        from citesearch.sources.supabase_store import SupabaseRecordStore

        return SupabaseRecordStore.from_credentials(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )
    elif backend == "memory":
        from citesearch.sources.store import InMemoryRecordStore

        if not settings.data_path.exists():
            raise DataSourceUnavailableError(f"Record data file not found: {settings.data_path}")
        return InMemoryRecordStore.from_json(settings.data_path)
    else:
        raise ValueError(
            f"Unsupported store backend: {backend}. "
            "Supported: 'supabase', 'memory'"
        )
