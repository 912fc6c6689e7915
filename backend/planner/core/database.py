"""
Database connections: Supabase client setup.
"""

from functools import lru_cache
from supabase import create_client, Client

from planner.config import get_settings
from planner.core.exceptions import ConfigurationError


@lru_cache
def get_supabase_client() -> Client:
    """Get the Supabase client (singleton).

    Uses the service_role key: the admin token is the only access control,
    row level security is not relied upon.
    """
    settings = get_settings()
    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_KEY:
        raise ConfigurationError("Missing SUPABASE_URL or SUPABASE_SERVICE_KEY")
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)
