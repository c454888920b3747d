"""
Search-engine exclusion header.

Debate links are only private because their IDs are unguessable, so no
response from the API may be indexed.
"""

from typing import Awaitable, Callable

from fastapi import Request, Response

ROBOTS_TAG = "noindex, nofollow"


async def add_robots_header(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Attach X-Robots-Tag to every response."""
    response = await call_next(request)
    response.headers["X-Robots-Tag"] = ROBOTS_TAG
    return response
