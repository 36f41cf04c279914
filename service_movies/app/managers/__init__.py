"""
Managers sit between the HTTP routes and the adapters.
"""

from .movie_manager import MovieManager

__all__ = ["MovieManager"]
