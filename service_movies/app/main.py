"""
Movies Service for the Movie Catalog Gateway.
"""

import asyncio
import functools
from concurrent.futures import Future
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

from shared.base_service import BaseService
from service_movies.app.adapters.http_client import close_shared_client, get_shared_client
from service_movies.app.adapters.movie_service_gateway import MovieServiceGateway
from service_movies.app.managers.movie_manager import MovieManager
from service_movies.app.models import AggregateResult


def _continue_with(antecedent: Future, continuation: Callable[[Future], Any]) -> Future:
    """Chain ``continuation`` onto ``antecedent`` and return the chained future."""
    chained: Future = Future()

    def _run(completed: Future) -> None:
        try:
            chained.set_result(continuation(completed))
        except BaseException as exc:
            chained.set_exception(exc)

    antecedent.add_done_callback(_run)
    return chained


async def _resolve(pending: Awaitable[AggregateResult]) -> AggregateResult:
    return await pending


class MoviesService(BaseService):
    """Movie catalog gateway service implementation."""

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None, **config_overrides: Any):
        super().__init__("movies", 8000, **config_overrides)
        self.gateway = MovieServiceGateway(
            self.config.genre_source_urls,
            self.config.all_movies_url,
            client=http_client,
            client_factory=functools.partial(
                get_shared_client,
                timeout=self.config.http_timeout_seconds,
                max_connections=self.config.http_max_connections,
                max_keepalive_connections=self.config.http_max_keepalive_connections,
            ),
            metrics=self.metrics,
        )
        self.manager = MovieManager(self.gateway)
        self._http_client_injected = http_client is not None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

        self._setup_movie_routes()

        # Expose service instance via app state for introspection/testing
        self.app.state.movies_service = self

    async def _on_startup(self) -> None:
        self._loop = asyncio.get_running_loop()

    async def _on_shutdown(self) -> None:
        await close_shared_client()
        self._loop = None

    async def _check_dependencies(self) -> Dict[str, Any]:
        return {
            "genre_sources": len(self.gateway.sources),
            "all_movies_source": self.gateway.all_movies_url,
            "http_client": "injected" if self._http_client_injected else "shared",
        }

    def _setup_movie_routes(self):
        """Set up movie catalog routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "movies",
                "message": "Movie Catalog Gateway",
                "endpoints": [
                    "/api/movies/getallmoviesasync",
                    "/api/movies/getallmovies",
                    "/api/movies/getallmovies2",
                    "/api/movies/getmoviesbygenreasync",
                ],
            }

        @self.app.get("/api/movies/getallmoviesasync", response_model=AggregateResult)
        async def get_all_movies_async():
            """Consolidated catalog, awaited directly. The recommended form."""
            return await self.manager.get_all_movies_async()

        @self.app.get("/api/movies/getallmovies", response_model=AggregateResult)
        def get_all_movies():
            """Consolidated catalog through a chained continuation.

            Runs in the worker thread pool and blocks that thread until the
            continuation resolves. Returns the same body as the async form and
            is kept only for comparison; do not copy this pattern.
            """
            if self._loop is None:
                raise RuntimeError("Event loop is not running")

            antecedent = asyncio.run_coroutine_threadsafe(
                _resolve(self.manager.get_all_movies()), self._loop
            )
            return _continue_with(antecedent, lambda movies_task: movies_task.result()).result()

        @self.app.get("/api/movies/getallmovies2", response_model=AggregateResult)
        async def get_all_movies2():
            """Consolidated catalog, awaiting the manager's pending aggregate."""
            return await self.manager.get_all_movies()

        @self.app.get("/api/movies/getmoviesbygenreasync", response_model=AggregateResult)
        async def get_movies_by_genre_async():
            """One catalog per configured genre source, in configuration order."""
            return await self.manager.get_movies_by_genre_async()


def create_app(http_client: Optional[httpx.AsyncClient] = None, **config_overrides: Any):
    """Create FastAPI application."""
    service = MoviesService(http_client, **config_overrides)
    return service.app


if __name__ == "__main__":
    service = MoviesService()
    service.run()
