"""HTTP middleware for the API."""

from .robots import add_robots_header, ROBOTS_TAG

__all__ = ["add_robots_header", "ROBOTS_TAG"]
