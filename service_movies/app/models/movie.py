"""
Movie record exchanged with upstream catalogs and API callers.
"""

from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


class Movie(BaseModel):
    """One movie as published by an upstream catalog.

    Field names travel as ``Title``, ``Year``, ``Genre`` and ``ImageUrl`` on
    the wire, in both directions.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_pascal,
        populate_by_name=True,
    )

    title: str
    year: int
    genre: str
    image_url: str


# Movies from one source document, in document order.
Catalog = List[Movie]

# One catalog per requested source, in request order.
AggregateResult = List[Catalog]
