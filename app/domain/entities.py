"""
Catalog aggregates used by the service layer.

Actor and Midia are plain dataclasses linked by reference. The repositories
translate them to and from the Beanie documents in ``app.models``.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


class MidiaType(str, Enum):
    MOVIE = "MOVIE"
    SERIES = "SERIES"
    DOCUMENTARY = "DOCUMENTARY"
    ANIMATION = "ANIMATION"
    SHORT = "SHORT"


@dataclass
class Midia:
    """
    A media work in the catalog.

    Attributes:
        id: Store-assigned identifier
        title: Display title
        type: Media category
        release_year: Year of first release
        director: Director name
        synopsis: Plot summary
        genre: Free-text genre
        poster_image_url: URL of the poster image
        actors: Ids of the actors linked to this work (inverse side, read only here)
    """

    id: Optional[str] = None
    title: str = ""
    type: MidiaType = MidiaType.MOVIE
    release_year: Optional[int] = None
    director: Optional[str] = None
    synopsis: Optional[str] = None
    genre: Optional[str] = None
    poster_image_url: Optional[str] = None
    actors: List[str] = field(default_factory=list)


@dataclass
class Actor:
    """
    A person cataloged with name, birth date and linked media.

    ``midias`` keeps insertion order and may hold the same Midia more than
    once. ``None`` means the association was never initialised.
    """

    id: Optional[str] = None
    name: str = ""
    birth_date: Optional[date] = None
    enabled: bool = True
    midias: Optional[List[Midia]] = None
