from datetime import date
from typing import Optional
from pydantic import BaseModel, Field
from app.schemas.midia import MidiaResponse

class ActorCreate(BaseModel):
    name: Optional[str] = None
    birth_date: Optional[date] = None

class ActorUpdate(BaseModel):
    name: Optional[str] = None
    birth_date: Optional[date] = None

class ActorResponse(BaseModel):
    id: str
    name: str
    birth_date: date

class ActorDetailResponse(ActorResponse):
    midias: list[MidiaResponse] = Field(default_factory=list)

class MessageResponse(BaseModel):
    message: str
