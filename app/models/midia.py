from beanie import Document, PydanticObjectId
from pydantic import Field
from pymongo import IndexModel
from typing import List, Optional
from datetime import datetime
from app.domain.entities import MidiaType
from app.utils.time import now_utc

class Midia(Document):
    title: str = Field(..., description="Title of the midia")
    type: MidiaType = Field(..., description="Category of the midia")
    release_year: Optional[int] = Field(None, ge=1800, description="Year of release")
    director: Optional[str] = Field(None, description="Director name")
    synopsis: Optional[str] = Field(None, description="Plot summary")
    genre: Optional[str] = Field(None, description="Genre")
    poster_image_url: Optional[str] = Field(None, description="URL to the poster image")
    actor_ids: List[PydanticObjectId] = Field(default_factory=list, description="Actors linked to this midia")
    created_at: datetime = Field(default_factory=now_utc)
    updated_at: datetime = Field(default_factory=now_utc)

    class Settings:
        name = "midias"
        indexes = [
            IndexModel([("title", 1)], name="idx_midias_title"),
            IndexModel([("type", 1), ("release_year", -1)], name="idx_midias_type_release_year"),
        ]
