"""
Supabase client factory.

The auth session lives on the client object, so each browser session gets its
own client (see `ui.session.get_client`). Nothing here is cached globally.
"""

from typing import Optional

from supabase import Client, create_client

from config.settings import Settings, get_settings, log_missing_configuration
from core.logging import get_logger

logger = get_logger(__name__)


class SupabaseClientError(Exception):
    """Raised when Supabase client cannot be created."""
    pass


def create_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Create a new Supabase client from settings.

    Raises:
        SupabaseClientError: If the backend is not configured or the client
            cannot be created
    """
    settings = settings or get_settings()
    if log_missing_configuration(settings):
        raise SupabaseClientError("Supabase URL and anonymous key are not configured")
    try:
        client = create_client(settings.supabase_url, settings.supabase_anon_key)
    except Exception as e:
        raise SupabaseClientError(f"Failed to create Supabase client: {e}") from e
    logger.debug("Supabase client created", url=settings.supabase_url)
    return client


def create_supabase_client_optional(settings: Optional[Settings] = None) -> Optional[Client]:
    """
    Create a Supabase client, returning None if it cannot be created.

    The failure is logged; callers render an error banner instead of crashing.
    """
    try:
        return create_supabase_client(settings)
    except SupabaseClientError as e:
        logger.error("Supabase client unavailable", error=str(e))
        return None


# Type alias for cleaner type hints
SupabaseClient = Client
