"""
Database client factory for Supabase.

The backend talks to Supabase with the service role key; there are no
user accounts, so every query is scoped by the debate ID alone.
"""

import logging
from typing import Optional
from urllib.parse import urlparse

from supabase import create_client, Client

from .config import get_settings

logger = logging.getLogger(__name__)

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables, "
                "or STORAGE_BACKEND=memory for a non-durable store."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )
        logger.info(f"Supabase client created for {urlparse(settings.supabase_url).netloc}")

    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
