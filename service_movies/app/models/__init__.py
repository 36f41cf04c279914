"""
Data models for the Movies Service.
"""

from .movie import AggregateResult, Catalog, Movie

__all__ = ["AggregateResult", "Catalog", "Movie"]
