"""
Integration tests for the movie catalog flow: HTTP route -> manager -> gateway -> upstream.
"""

import asyncio
import time

import httpx
import pytest

from service_movies.app.main import create_app
from shared.test_helpers import MockCatalogUpstream, MovieDataFactory, movie_titles


SOURCES = [
    "https://upstream.test/membervideos/action.json",
    "https://upstream.test/membervideos/drama.json",
    "https://upstream.test/membervideos/thriller.json",
    "https://upstream.test/membervideos/scifi.json",
]
ALL_MOVIES_URL = "https://upstream.test/membervideos/AllMovies.json"
GENRES = ["Action", "Drama", "Thriller", "SciFi"]


class TestMovieCatalogFlow:
    """End-to-end flow through the ASGI app with a simulated upstream."""

    @pytest.fixture
    def upstream(self):
        return MockCatalogUpstream()

    @pytest.fixture
    def app(self, upstream):
        return create_app(upstream.client(), genre_source_urls=SOURCES, all_movies_url=ALL_MOVIES_URL)

    async def _get_all(self, app, paths):
        transport = httpx.ASGITransport(app=app)
        async with app.router.lifespan_context(app):
            async with httpx.AsyncClient(transport=transport, base_url="http://movies.test") as client:
                return await asyncio.gather(*(client.get(path) for path in paths))

    @pytest.mark.asyncio
    async def test_genre_fan_out_takes_slowest_not_sum(self, app, upstream):
        delay = 0.3
        upstream.add_catalogs(
            {url: MovieDataFactory.create_genre_catalog(genre) for url, genre in zip(SOURCES, GENRES)},
            delays={url: delay for url in SOURCES},
        )

        started = time.perf_counter()
        (response,) = await self._get_all(app, ["/api/movies/getmoviesbygenreasync"])
        elapsed = time.perf_counter() - started

        assert response.status_code == 200
        assert len(response.json()) == len(SOURCES)
        assert elapsed < delay * 2

    @pytest.mark.asyncio
    async def test_genre_order_survives_reverse_arrival(self, app, upstream):
        catalogs = {url: MovieDataFactory.create_genre_catalog(genre) for url, genre in zip(SOURCES, GENRES)}
        upstream.add_catalogs(
            catalogs,
            delays={url: 0.05 * (len(SOURCES) - index) for index, url in enumerate(SOURCES)},
        )

        (response,) = await self._get_all(app, ["/api/movies/getmoviesbygenreasync"])

        assert upstream.completed == list(reversed(SOURCES))
        assert movie_titles(response.json()) == movie_titles([catalogs[url] for url in SOURCES])

    @pytest.mark.asyncio
    async def test_consolidated_endpoints_agree_under_concurrency(self, app, upstream):
        upstream.add(ALL_MOVIES_URL, MovieDataFactory.create_all_movies_catalog(), delay=0.05)
        paths = [
            "/api/movies/getallmoviesasync",
            "/api/movies/getallmovies",
            "/api/movies/getallmovies2",
        ] * 3

        responses = await self._get_all(app, paths)

        assert {response.status_code for response in responses} == {200}
        assert len({response.content for response in responses}) == 1
        assert len(upstream.requested) == len(paths)

    @pytest.mark.asyncio
    async def test_upstream_outage_fails_every_form(self, app, upstream):
        upstream.add(ALL_MOVIES_URL, error=httpx.ConnectError("connection refused"))

        responses = await self._get_all(app, [
            "/api/movies/getallmoviesasync",
            "/api/movies/getallmovies",
            "/api/movies/getallmovies2",
        ])

        assert [response.status_code for response in responses] == [500, 500, 500]
        assert {response.json()["code"] for response in responses} == {"INTERNAL_ERROR"}
