"""
Unit tests for the process-wide HTTP client.
"""

import pytest

from service_movies.app.adapters.http_client import close_shared_client, get_shared_client
from service_movies.app.adapters.movie_service_gateway import MovieServiceGateway


@pytest.mark.asyncio
async def test_client_is_created_once_and_reused():
    try:
        first = get_shared_client()
        second = get_shared_client()

        assert first is second
        assert first.follow_redirects is True
    finally:
        await close_shared_client()


@pytest.mark.asyncio
async def test_close_releases_client():
    first = get_shared_client(timeout=3.0)
    await close_shared_client()

    assert first.is_closed
    second = get_shared_client()
    try:
        assert second is not first
    finally:
        await close_shared_client()


@pytest.mark.asyncio
async def test_creation_settings_apply_to_new_client():
    try:
        client = get_shared_client(timeout=3.0)

        assert client.timeout.read == 3.0
    finally:
        await close_shared_client()


@pytest.mark.asyncio
async def test_gateway_defaults_to_shared_client():
    try:
        gateway = MovieServiceGateway()

        assert gateway.client is get_shared_client()
    finally:
        await close_shared_client()


@pytest.mark.asyncio
async def test_close_without_client_is_noop():
    await close_shared_client()
    await close_shared_client()
