"""
Process-wide HTTP client shared by every upstream call.
"""

from __future__ import annotations

from typing import Optional

import httpx

from shared.logging import get_logger

logger = get_logger("movies.http_client")

_client: Optional[httpx.AsyncClient] = None


def get_shared_client(
    *,
    timeout: float = 100.0,
    max_connections: int = 100,
    max_keepalive_connections: int = 20,
) -> httpx.AsyncClient:
    """Return the shared client, creating it on first use.

    The client pools connections and is safe for concurrent use, so one
    instance serves all in-flight requests. Settings only apply on the call
    that creates it.
    """
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            timeout=timeout,
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max_keepalive_connections,
            ),
            follow_redirects=True,
        )
        logger.info(
            "Shared HTTP client created",
            timeout=timeout,
            max_connections=max_connections,
        )
    return _client


async def close_shared_client() -> None:
    """Close the shared client. Called once at application shutdown."""
    global _client
    if _client is not None:
        await _client.aclose()
        logger.info("Shared HTTP client closed")
    _client = None
