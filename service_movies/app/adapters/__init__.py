"""
Adapters package for the Movies Service.

Contains the HTTP plumbing for the upstream movie catalogs:

- http_client: the process-wide pooled ``httpx.AsyncClient``
- movie_service_gateway: catalog fetch, streaming decode and fan-out

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .http_client import close_shared_client, get_shared_client
from .movie_service_gateway import MovieServiceGateway

__all__ = [
    "MovieServiceGateway",
    "close_shared_client",
    "get_shared_client",
]
