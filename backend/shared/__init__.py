"""
Shared infrastructure for Argue backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- models: Base model for camelCase JSON payloads

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    ArgueError,
    NotFoundError,
    ValidationError,
    ConflictError,
    ExternalServiceError,
)
from .models import CamelModel

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "ArgueError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "ExternalServiceError",
    "CamelModel",
]
