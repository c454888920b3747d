"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Storage is selected by settings.storage_backend: "supabase" for the
PostgREST-backed repository, "memory" for process-local storage.
"""

import logging
from typing import TYPE_CHECKING

from shared.config import get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.dilemmas.interfaces import ICaseCatalog
    from modules.debates.interfaces import (
        IDebateRepository,
        IDebateService,
        IJudge,
        IOpponentResponder,
    )

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._case_catalog: "ICaseCatalog | None" = None
        self._debate_repository: "IDebateRepository | None" = None
        self._opponent: "IOpponentResponder | None" = None
        self._judge: "IJudge | None" = None
        self._debate_service: "IDebateService | None" = None

    @property
    def case_catalog(self) -> "ICaseCatalog":
        """Get the case catalog instance."""
        if self._case_catalog is None:
            from modules.dilemmas.catalog import get_case_catalog
            self._case_catalog = get_case_catalog()
        return self._case_catalog

    @property
    def debate_repository(self) -> "IDebateRepository":
        """Get the debate repository for the configured storage backend."""
        if self._debate_repository is None:
            settings = get_settings()
            if settings.storage_backend == "memory":
                from modules.debates.repository import InMemoryDebateRepository
                self._debate_repository = InMemoryDebateRepository()
            else:
                from modules.debates.repository import SupabaseDebateRepository
                from shared.database import get_supabase_client
                self._debate_repository = SupabaseDebateRepository(get_supabase_client())
            logger.info(f"Debate storage backend: {settings.storage_backend}")
        return self._debate_repository

    @property
    def opponent(self) -> "IOpponentResponder":
        """Get the AI opponent instance."""
        if self._opponent is None:
            from modules.debates.opponent import LLMOpponentResponder
            self._opponent = LLMOpponentResponder(get_settings())
        return self._opponent

    @property
    def judge(self) -> "IJudge":
        """Get the AI judge instance."""
        if self._judge is None:
            from modules.debates.judge import LLMJudge
            self._judge = LLMJudge(get_settings())
        return self._judge

    @property
    def debates(self) -> "IDebateService":
        """Get the debate service instance."""
        if self._debate_service is None:
            from modules.debates.service import DebateService
            self._debate_service = DebateService(
                repository=self.debate_repository,
                catalog=self.case_catalog,
                opponent=self.opponent,
                judge=self.judge,
                settings=get_settings(),
            )
        return self._debate_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._case_catalog = None
        self._debate_repository = None
        self._opponent = None
        self._judge = None
        self._debate_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_case_catalog() -> "ICaseCatalog":
    """FastAPI dependency for the case catalog."""
    return get_container().case_catalog


def get_debate_service() -> "IDebateService":
    """FastAPI dependency for debate service."""
    return get_container().debates
