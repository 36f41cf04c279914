"""
Movies Service for the Movie Catalog Gateway.
"""
