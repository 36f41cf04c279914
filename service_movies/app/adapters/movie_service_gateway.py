"""
Gateway to the remote movie catalogs.

Fetches JSON catalogs over the shared HTTP client, decodes them while the
body is still streaming in, and fans out over several sources at once.
"""

from __future__ import annotations

import asyncio
import contextlib
import time
from typing import AsyncIterator, Awaitable, Callable, List, Optional, Sequence

import httpx
import ijson
from pydantic import ValidationError

from shared.config import DEFAULT_ALL_MOVIES_URL, DEFAULT_GENRE_SOURCE_URLS
from shared.errors import DecodeError, GatewayException, RemoteFetchError, TransportError
from shared.logging import get_logger
from shared.metrics import MetricsCollector

from service_movies.app.adapters.http_client import get_shared_client
from service_movies.app.models import AggregateResult, Catalog, Movie

_UTF8_BOM = b"\xef\xbb\xbf"


class MovieServiceGateway:
    """Client for the genre catalogs and the consolidated "AllMovies" catalog."""

    def __init__(
        self,
        sources: Optional[Sequence[str]] = None,
        all_movies_url: str = DEFAULT_ALL_MOVIES_URL,
        *,
        client: Optional[httpx.AsyncClient] = None,
        client_factory: Callable[[], httpx.AsyncClient] = get_shared_client,
        metrics: Optional[MetricsCollector] = None,
    ) -> None:
        self.sources: List[str] = list(DEFAULT_GENRE_SOURCE_URLS if sources is None else sources)
        self.all_movies_url = all_movies_url
        self.metrics = metrics
        self.logger = get_logger("movies.gateway")
        self._client = client
        self._client_factory = client_factory

    @property
    def client(self) -> httpx.AsyncClient:
        """HTTP client in use; the process-wide one unless a client was injected."""
        if self._client is not None:
            return self._client
        return self._client_factory()

    def get_all_movies_by_genre_concurrently(self) -> Awaitable[AggregateResult]:
        """Fetch every genre catalog at once, one catalog per genre source."""
        return self.aggregate(self.sources)

    def get_all_movies(self) -> Awaitable[AggregateResult]:
        """Fetch the consolidated catalog, wrapped as a one-element aggregate.

        Deliberately not ``async``: the pending aggregate is handed back as-is
        so the caller decides whether to await it, chain on it or pass it
        further up.
        """
        return self.aggregate([self.all_movies_url])

    async def get_all_movies_async(self) -> AggregateResult:
        """Awaiting counterpart of :meth:`get_all_movies`."""
        return await self.get_all_movies()

    async def aggregate(self, urls: Sequence[str]) -> AggregateResult:
        """Fetch all ``urls`` concurrently and join the results.

        Every fetch is started before any is awaited. The result is aligned
        with ``urls`` whatever order the responses arrive in. The join waits
        for every fetch to settle; if any failed, the first failure in
        ``urls`` order is raised and nothing is returned.
        """
        if not urls:
            return []

        started = time.perf_counter()
        outcomes = await asyncio.gather(
            *(self.download_movies(url) for url in urls),
            return_exceptions=True,
        )
        duration_ms = round((time.perf_counter() - started) * 1000, 2)

        failures = [outcome for outcome in outcomes if isinstance(outcome, BaseException)]
        if failures:
            self.logger.error(
                "Catalog aggregation failed",
                sources=len(urls),
                failed=len(failures),
                duration_ms=duration_ms,
            )
            raise failures[0]

        self.logger.info("Catalogs aggregated", sources=len(urls), duration_ms=duration_ms)
        return list(outcomes)

    async def download_movies(self, url: str) -> Catalog:
        """GET one catalog and decode it from the response stream."""
        started = time.perf_counter()
        outcome = "error"
        try:
            async with self.client.stream("GET", url) as response:
                if not response.is_success:
                    raise RemoteFetchError(url, response.status_code)
                movies = await self._decode_movies(url, response.aiter_bytes())
            outcome = "ok"
        except httpx.RequestError as exc:
            outcome = "transport_error"
            self.logger.error("Catalog fetch failed", url=url, error=str(exc), error_type=type(exc).__name__)
            raise TransportError(url, str(exc) or type(exc).__name__) from exc
        except GatewayException as exc:
            outcome = exc.code.lower()
            self.logger.error("Catalog fetch failed", url=url, code=exc.code, details=exc.details)
            raise
        finally:
            if self.metrics is not None:
                self.metrics.record_upstream_fetch(outcome, time.perf_counter() - started)

        self.logger.debug(
            "Catalog fetched",
            url=url,
            movies=len(movies),
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return movies

    async def _decode_movies(self, url: str, chunks: AsyncIterator[bytes]) -> Catalog:
        """Decode a JSON array of movies chunk by chunk."""
        items = ijson.sendable_list()
        parser = ijson.items_coro(items, "item", use_float=True)
        movies: Catalog = []
        head = b""
        bom_checked = False
        seen_document = False

        try:
            async for chunk in chunks:
                if not seen_document:
                    if not bom_checked:
                        # A BOM may straddle the first few chunks.
                        head += chunk
                        if len(head) < len(_UTF8_BOM) and _UTF8_BOM.startswith(head):
                            continue
                        chunk = head.removeprefix(_UTF8_BOM)
                        bom_checked = True
                    chunk = chunk.lstrip()
                    if not chunk:
                        continue
                    if not chunk.startswith(b"["):
                        raise DecodeError(url, "top-level JSON value is not an array")
                    seen_document = True
                parser.send(chunk)
                self._collect(url, items, movies)

            if not seen_document:
                raise DecodeError(url, "empty document")
            parser.close()
        except ijson.JSONError as exc:
            raise DecodeError(url, f"malformed JSON: {exc}") from exc
        finally:
            # A half-fed parser reports the truncation again when closed.
            with contextlib.suppress(ijson.JSONError):
                parser.close()

        self._collect(url, items, movies)
        return movies

    def _collect(self, url: str, items: List[object], movies: Catalog) -> None:
        for item in items:
            try:
                movies.append(Movie.model_validate(item))
            except ValidationError as exc:
                raise DecodeError(
                    url,
                    "movie failed validation",
                    index=len(movies),
                    details={"errors": exc.errors(include_url=False, include_input=False)},
                ) from exc
        del items[:]
