"""
Movie manager used by the HTTP routes.
"""

from typing import Awaitable, Optional

from service_movies.app.adapters.movie_service_gateway import MovieServiceGateway
from service_movies.app.models import AggregateResult


class MovieManager:
    """Fronts the catalog gateway for the request handlers."""

    def __init__(self, gateway: Optional[MovieServiceGateway] = None):
        self.gateway = gateway if gateway is not None else self._make_movie_service_gateway()

    def get_all_movies(self) -> Awaitable[AggregateResult]:
        return self.gateway.get_all_movies()

    async def get_all_movies_async(self) -> AggregateResult:
        return await self.gateway.get_all_movies_async()

    async def get_movies_by_genre_async(self) -> AggregateResult:
        return await self.gateway.get_all_movies_by_genre_concurrently()

    def _make_movie_service_gateway(self) -> MovieServiceGateway:
        return MovieServiceGateway()
