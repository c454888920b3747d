"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from datetime import datetime, timezone
from typing import TypeVar, Generic

from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - UTC timestamp helper for write paths

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class SupabaseDebateRepository(BaseRepository[DebateRecord]):
            def get_debate(self, debate_id: str) -> Optional[DebateRecord]:
                result = self._db.table("debates").select("*").eq("id", debate_id).execute()
                if not result.data:
                    return None
                return self._map_to_record(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _now() -> str:
        """Current UTC time as an ISO-8601 string for timestamp columns."""
        return datetime.now(timezone.utc).isoformat()
