"""
Process-wide Supabase clients.

Every service receives its client through the get_supabase dependency, so
tests swap the whole data layer with app.dependency_overrides.
"""

from supabase import create_client, Client
from eventflow.config import settings
import logging

logger = logging.getLogger(__name__)


def _connect(key: str, key_name: str) -> Client:
    if not settings.supabase_url or not key:
        raise ValueError(f"SUPABASE_URL and {key_name} must be set")
    logger.info(f"Connecting to Supabase at {settings.supabase_url} with {key_name}")
    return create_client(settings.supabase_url, key)


class SupabaseClient:
    _client: Client = None
    _service_client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        """Anon-key client shared by all requests"""
        if cls._client is None:
            cls._client = _connect(settings.supabase_key, "SUPABASE_KEY")
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Service-role client for the seed script; the anon client when no service key is configured"""
        if cls._service_client is None:
            if not settings.supabase_service_role_key:
                return cls.get_client()
            cls._service_client = _connect(settings.supabase_service_role_key, "SUPABASE_SERVICE_ROLE_KEY")
        return cls._service_client

    @classmethod
    def reset_client(cls):
        cls._client = None
        cls._service_client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()
