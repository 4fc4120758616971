from postgrest import SyncPostgrestClient
from supabase import create_client, Client
from gamebuddy.config import settings


class SupabaseClient:
    _client: Client = None
    _service_client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        """Shared anon client. Never signs a player in, so it holds no user session."""
        if cls._client is None:
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Client with service_role key; bypasses RLS. Use in seeding and admin scripts."""
        if cls._service_client is None and settings.supabase_service_role_key:
            cls._service_client = create_client(
                settings.supabase_url, settings.supabase_service_role_key
            )
        return cls._service_client or cls.get_client()

    @classmethod
    def new_client(cls) -> Client:
        """Unshared anon client for sign-in and sign-up, whose session is discarded with it."""
        return create_client(settings.supabase_url, settings.supabase_key)

    @classmethod
    def get_user_client(cls, access_token: str) -> SyncPostgrestClient:
        """
        PostgREST session running as the token's user, so RLS and auth.uid() apply.
        Use as a context manager; leaving it closes the session's connections.
        """
        return SyncPostgrestClient(
            f"{settings.supabase_url.rstrip('/')}/rest/v1",
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
                "apikey": settings.supabase_key,
                "Authorization": f"Bearer {access_token}",
            },
        )

    @classmethod
    def reset_client(cls):
        cls._client = None
        cls._service_client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()
