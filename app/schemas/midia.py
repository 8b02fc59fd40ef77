from typing import Optional
from pydantic import BaseModel, Field
from app.domain.entities import MidiaType

class MidiaResponse(BaseModel):
    id: str
    title: str
    type: MidiaType
    release_year: Optional[int] = None
    director: Optional[str] = None
    synopsis: Optional[str] = None
    genre: Optional[str] = None
    poster_image_url: Optional[str] = None
    actors: list[str] = Field(default_factory=list)
