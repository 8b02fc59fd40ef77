from beanie import Document, PydanticObjectId
from pydantic import Field
from pymongo import IndexModel
from typing import List, Optional
from datetime import datetime
from app.utils.time import now_utc

class Actor(Document):
    name: str = Field(..., description="Actor's full name")
    birth_date: datetime = Field(..., description="Birth date, stored at midnight")
    enabled: bool = Field(default=True, description="Is the actor enabled?")
    midia_ids: Optional[List[PydanticObjectId]] = Field(
        None, description="Ordered references to linked midias, duplicates allowed"
    )
    created_at: datetime = Field(default_factory=now_utc)
    updated_at: datetime = Field(default_factory=now_utc)

    class Settings:
        name = "actors"
        indexes = [
            IndexModel([("name", 1)], name="idx_actors_name"),
            IndexModel([("midia_ids", 1)], name="idx_actors_midia_ids"),
        ]
